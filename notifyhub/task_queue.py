"""A bounded in-memory queue of notification tasks with a worker loop."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from .logger import Logger


class QueueFullError(Exception):
    """The queue had no room for another task."""


@dataclass
class NotificationTask:
    """A single message addressed to one receiver on one channel."""

    channel: str
    integration_key: str
    receiver: str
    message: str
    callback: Optional[Callable[[Optional[Exception]], None]] = None


class InMemoryQueue:
    """Holds up to ``maxsize`` tasks; a worker drains them until stopped."""

    processing_delay = 0.1
    _poll_interval = 0.05

    def __init__(self, logger: Logger, maxsize: int = 1000) -> None:
        self._tasks: queue.Queue[NotificationTask] = queue.Queue(maxsize)
        self._logger = logger

    def enqueue(self, task: NotificationTask) -> None:
        """Add ``task``; when full, drop it and report through its callback."""
        try:
            self._tasks.put_nowait(task)
        except queue.Full:
            self._logger.error("Queue is full, dropping task")
            if task.callback is not None:
                task.callback(QueueFullError("queue is full"))
        else:
            self._logger.info("Task enqueued successfully")

    def start_worker(self, stop_event: threading.Event) -> None:
        """Process tasks until ``stop_event`` is set."""
        self._logger.info("Queue worker started")
        while not stop_event.is_set():
            try:
                self._tasks.get(timeout=self._poll_interval)
            except queue.Empty:
                continue
            self._logger.info("Processing task...")
            stop_event.wait(self.processing_delay)
            self._tasks.task_done()
        self._logger.info("Queue worker stopped")