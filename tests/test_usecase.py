from notifyhub.notifier import Notifier, NotifierError
from notifyhub.usecase import ChannelNotification, ChannelResult, NotificationUseCase


class RecordingLogger:
    def __init__(self):
        self.records = []

    def info(self, message):
        self.records.append(("info", message))

    def error(self, message):
        self.records.append(("error", message))

    def debug(self, message):
        self.records.append(("debug", message))


class FakeNotifier(Notifier):
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def send(self, integration_key, to, message):
        self.calls.append((integration_key, list(to), message))
        if self.error is not None:
            raise self.error


def test_successful_send():
    fake = FakeNotifier()
    logger = RecordingLogger()
    uc = NotificationUseCase({"telegram": fake}, None, logger)
    results = uc.send_notification_multi([ChannelNotification("telegram", "main", ["1", "2"])], "hi")
    assert results == [ChannelResult("telegram", True, "")]
    assert fake.calls == [("main", ["1", "2"], "hi")]
    assert ("info", "Notification sent to channel telegram") in logger.records


def test_unsupported_channel():
    logger = RecordingLogger()
    uc = NotificationUseCase({}, None, logger)
    results = uc.send_notification_multi([ChannelNotification("sms", "k", ["1"])], "hi")
    assert results == [ChannelResult("sms", False, "channel sms not supported")]
    assert logger.records == [("error", "channel sms not supported")]


def test_failure_is_reported_not_raised():
    fake = FakeNotifier(NotifierError("nope"))
    logger = RecordingLogger()
    uc = NotificationUseCase({"email": fake}, None, logger)
    results = uc.send_notification_multi([ChannelNotification("email", "box", ["a@example.com"])], "hi")
    assert results == [ChannelResult("email", False, "nope")]
    assert ("error", "Failed to send notification to channel email: nope") in logger.records


def test_results_follow_request_order():
    good, bad = FakeNotifier(), FakeNotifier(NotifierError("down"))
    uc = NotificationUseCase({"telegram": good, "email": bad}, None, RecordingLogger())
    results = uc.send_notification_multi(
        [
            ChannelNotification("email", "box", ["a@example.com"]),
            ChannelNotification("sms", "x", []),
            ChannelNotification("telegram", "main", ["1"]),
        ],
        "hi",
    )
    assert [(r.channel, r.success) for r in results] == [
        ("email", False),
        ("sms", False),
        ("telegram", True),
    ]


def test_no_notifications_gives_no_results():
    uc = NotificationUseCase({"telegram": FakeNotifier()}, None, RecordingLogger())
    assert uc.send_notification_multi([], "hi") == []