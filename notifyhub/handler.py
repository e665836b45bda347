"""Request handler for the multi-channel notification service."""

from __future__ import annotations

from dataclasses import dataclass, field

from .logger import Logger
from .usecase import ChannelNotification, ChannelResult, NotificationUseCase


@dataclass
class NotificationItem:
    """One channel entry of a request."""

    channel: str
    integration_key: str
    receivers: list[str] = field(default_factory=list)


@dataclass
class SendNotificationRequest:
    """A message and the channels it should go out on."""

    notifications: list[NotificationItem] = field(default_factory=list)
    message: str = ""


@dataclass
class SendNotificationResponse:
    """Per-channel outcomes, in request order."""

    results: list[ChannelResult] = field(default_factory=list)


class NotificationHandler:
    """Turns service requests into use-case calls and back."""

    def __init__(self, use_case: NotificationUseCase, logger: Logger) -> None:
        self._use_case = use_case
        self._logger = logger

    def send_notification(self, request: SendNotificationRequest) -> SendNotificationResponse:
        self._logger.info("Received multi-channel notification request")
        notifications = [
            ChannelNotification(item.channel, item.integration_key, list(item.receivers))
            for item in request.notifications
        ]
        results = self._use_case.send_notification_multi(notifications, request.message)
        for result in results:
            success = "true" if result.success else "false"
            self._logger.info(
                f"Channel {result.channel} success: {success}, error: {result.error_message}"
            )
        return SendNotificationResponse(
            results=[ChannelResult(r.channel, r.success, r.error_message) for r in results]
        )