"""Multi-channel notification dispatch over Telegram and e-mail, configured from YAML."""

__version__ = "0.1.0"