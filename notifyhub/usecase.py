"""Fan-out of one message to several notification channels."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .logger import Logger
from .notifier import Notifier
from .task_queue import InMemoryQueue


@dataclass
class ChannelNotification:
    """Where to send: a channel, one of its integrations, and receivers."""

    channel: str
    integration_key: str
    receivers: list[str] = field(default_factory=list)


@dataclass
class ChannelResult:
    """Outcome of sending through one channel."""

    channel: str
    success: bool
    error_message: str = ""


class NotificationUseCase:
    """Sends a message through each requested channel and reports per channel."""

    def __init__(
        self,
        notifiers: Mapping[str, Notifier],
        queue: InMemoryQueue | None,
        logger: Logger,
    ) -> None:
        self._notifiers = notifiers
        self._queue = queue
        self._logger = logger

    def send_notification_multi(
        self, notifications: Iterable[ChannelNotification], message: str
    ) -> list[ChannelResult]:
        """Send ``message`` for each entry; failures are reported, not raised."""
        results = []
        for item in notifications:
            notifier = self._notifiers.get(item.channel)
            if notifier is None:
                error = f"channel {item.channel} not supported"
                self._logger.error(error)
                results.append(ChannelResult(item.channel, False, error))
                continue
            try:
                notifier.send(item.integration_key, item.receivers, message)
            except Exception as exc:
                self._logger.error(
                    f"Failed to send notification to channel {item.channel}: {exc}"
                )
                results.append(ChannelResult(item.channel, False, str(exc)))
                continue
            self._logger.info(f"Notification sent to channel {item.channel}")
            results.append(ChannelResult(item.channel, True, ""))
        return results