import threading

from notifyhub.task_queue import InMemoryQueue, NotificationTask, QueueFullError


class RecordingLogger:
    def __init__(self):
        self.records = []
        self.processed = threading.Event()

    def info(self, message):
        self.records.append(("info", message))
        if message == "Processing task...":
            self.processed.set()

    def error(self, message):
        self.records.append(("error", message))

    def debug(self, message):
        self.records.append(("debug", message))


def _task(callback=None):
    return NotificationTask("telegram", "main", "10", "hello", callback)


def test_enqueue_logs_success():
    logger = RecordingLogger()
    q = InMemoryQueue(logger, 2)
    q.enqueue(_task())
    assert logger.records == [("info", "Task enqueued successfully")]


def test_full_queue_drops_and_calls_back():
    logger = RecordingLogger()
    q = InMemoryQueue(logger, 1)
    errors = []
    q.enqueue(_task(errors.append))
    q.enqueue(_task(errors.append))
    assert len(errors) == 1
    assert isinstance(errors[0], QueueFullError)
    assert str(errors[0]) == "queue is full"
    assert logger.records[-1] == ("error", "Queue is full, dropping task")


def test_full_queue_without_callback_only_logs():
    logger = RecordingLogger()
    q = InMemoryQueue(logger, 1)
    q.enqueue(_task())
    q.enqueue(_task())
    assert [level for level, _ in logger.records] == ["info", "error"]


def test_worker_processes_and_stops():
    logger = RecordingLogger()
    q = InMemoryQueue(logger, 5)
    q.processing_delay = 0.0
    stop = threading.Event()
    worker = threading.Thread(target=q.start_worker, args=(stop,))
    worker.start()
    q.enqueue(_task())
    assert logger.processed.wait(5)
    stop.set()
    worker.join(5)
    assert not worker.is_alive()
    messages = [message for _, message in logger.records]
    assert messages[0] == "Queue worker started"
    assert messages[-1] == "Queue worker stopped"
    assert "Processing task..." in messages


def test_worker_frees_room_in_queue():
    logger = RecordingLogger()
    q = InMemoryQueue(logger, 1)
    q.processing_delay = 0.0
    stop = threading.Event()
    worker = threading.Thread(target=q.start_worker, args=(stop,))
    worker.start()
    q.enqueue(_task())
    assert logger.processed.wait(5)
    errors = []
    q.enqueue(_task(errors.append))
    stop.set()
    worker.join(5)
    assert errors == []


def test_worker_returns_when_already_stopped():
    logger = RecordingLogger()
    q = InMemoryQueue(logger)
    stop = threading.Event()
    stop.set()
    q.start_worker(stop)
    assert logger.records == [("info", "Queue worker started"), ("info", "Queue worker stopped")]