"""Integration settings loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

import yaml

_T = TypeVar("_T")


@dataclass
class TelegramConfig:
    """Credentials of one Telegram bot."""

    token: str = ""


@dataclass
class EmailConfig:
    """Connection settings of one SMTP account."""

    host: str = ""
    port: int = 0
    username: str = ""
    password: str = ""


@dataclass
class Config:
    """All integrations, keyed by integration name within each channel."""

    telegram: dict[str, TelegramConfig] = field(default_factory=dict)
    email: dict[str, EmailConfig] = field(default_factory=dict)


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ValueError(f"field {name!r} must be a scalar")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {name!r} must be an integer")
    return value


def _mapping(value: Any, name: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{name!r} must be a mapping")
    return value


def _section(value: Any, name: str, build: Callable[[dict], _T]) -> dict[str, _T]:
    return {
        str(key): build(_mapping(entry, f"{name}.{key}"))
        for key, entry in _mapping(value, name).items()
    }


def _telegram(entry: dict) -> TelegramConfig:
    return TelegramConfig(token=_as_str(entry.get("token"), "token"))


def _email(entry: dict) -> EmailConfig:
    return EmailConfig(
        host=_as_str(entry.get("host"), "host"),
        port=_as_int(entry.get("port"), "port"),
        username=_as_str(entry.get("username"), "username"),
        password=_as_str(entry.get("password"), "password"),
    )


def load(path: str | Path) -> Config:
    """Read the YAML file at ``path`` into a :class:`Config`.

    Raises ``OSError`` if the file cannot be read, ``yaml.YAMLError`` if it is
    not valid YAML and ``ValueError`` if its structure does not fit.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    root = _mapping(data, "config")
    return Config(
        telegram=_section(root.get("telegram"), "telegram", _telegram),
        email=_section(root.get("email"), "email", _email),
    )