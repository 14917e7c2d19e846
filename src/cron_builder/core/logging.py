from __future__ import annotations

import logging

from cron_builder.core.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)s {app} [%(name)s] %(message)s"
_handler: logging.Handler | None = None


def setup_logging(level: str = "INFO", app_name: str = "cron-builder") -> None:
    global _handler
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        root.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT.replace("{app}", app_name.replace("%", "%%"))))
    root.setLevel(resolved)


def configure_logging(settings: Settings | None = None) -> None:
    """Apply ``log_level`` and ``app_name`` from settings to the root logger."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, app_name=settings.app_name)
