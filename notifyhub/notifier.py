"""Channels that deliver a message to a list of receivers."""

from __future__ import annotations

import json
import smtplib
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from email.message import EmailMessage

import requests

from .config import EmailConfig, TelegramConfig
from .logger import Logger

_TELEGRAM_URL = "https://api.telegram.org/bot{token}/sendMessage"
_SMTP_SSL_PORT = 465
_REQUEST_TIMEOUT = 30


class NotifierError(Exception):
    """A notification could not be delivered."""


class Notifier(ABC):
    """Delivers a message through one channel."""

    @abstractmethod
    def send(self, integration_key: str, to: Sequence[str], message: str) -> None:
        """Send ``message`` to every receiver in ``to``; raise on failure."""


class TelegramNotifier(Notifier):
    """Sends messages through the Telegram Bot API."""

    def __init__(self, configs: Mapping[str, TelegramConfig], logger: Logger) -> None:
        self._configs = configs
        self._logger = logger

    def send(self, integration_key: str, to: Sequence[str], message: str) -> None:
        try:
            cfg = self._configs[integration_key]
        except KeyError:
            raise NotifierError(f"telegram integration key {integration_key} not found") from None

        url = _TELEGRAM_URL.format(token=cfg.token)
        for receiver in to:
            payload = json.dumps({"chat_id": receiver, "text": message})
            try:
                resp = requests.post(
                    url,
                    data=payload.encode("utf-8"),
                    headers={"Content-Type": "application/json"},
                    timeout=_REQUEST_TIMEOUT,
                )
                body = resp.text
            except requests.RequestException as exc:
                raise NotifierError(f"failed to send telegram message: {exc}") from exc

            if resp.status_code != 200:
                raise NotifierError(f"telegram API returned status {resp.status_code}: {body}")

            try:
                reply = json.loads(body)
                if not isinstance(reply, dict):
                    raise ValueError("response is not a JSON object")
            except ValueError as exc:
                raise NotifierError(
                    f"failed to decode telegram response: {exc}. Raw response: {body}"
                ) from exc

            if reply.get("ok") is not True:
                description = reply.get("description", "")
                raise NotifierError(f"telegram API error: {description}. Raw response: {body}")

            self._logger.info(
                f"Telegram message sent successfully to {receiver} via {integration_key}"
            )


class EmailNotifier(Notifier):
    """Sends plain-text mail over SMTP with implicit TLS."""

    def __init__(self, configs: Mapping[str, EmailConfig], logger: Logger) -> None:
        self._configs = configs
        self._logger = logger

    def send(self, integration_key: str, to: Sequence[str], message: str) -> None:
        try:
            cfg = self._configs[integration_key]
        except KeyError:
            raise NotifierError(f"email integration key {integration_key} not found") from None

        mail = EmailMessage()
        mail["From"] = cfg.username
        mail["To"] = ", ".join(to)
        mail["Subject"] = "Notification"
        mail.set_content(message)

        try:
            with smtplib.SMTP_SSL(cfg.host, _SMTP_SSL_PORT) as smtp:
                smtp.login(cfg.username, cfg.password)
                smtp.send_message(mail)
        except (smtplib.SMTPException, OSError, ValueError) as exc:
            raise NotifierError(f"failed to send email: {exc}") from exc

        receivers = "[" + " ".join(to) + "]"
        self._logger.info(f"Email sent successfully to {receivers} via {integration_key}")