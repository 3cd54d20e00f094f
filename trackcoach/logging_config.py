"""Logging setup for the API, the scripts and the tests."""
from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path

from pydantic import ValidationError

from trackcoach.config import get_settings

_configured = False

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _default_config(log_dir: Path, level: str, debug: bool = False) -> dict:
    """
    Build the dictConfig payload.

    ``level`` applies to third-party loggers. With ``debug`` on, the
    ``trackcoach`` loggers drop to DEBUG and the plan generator records,
    generated plan text included, are also written to ``plans.log``.
    """

    app_level = "DEBUG" if debug else level
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": app_level,
        },
        "file": {
            "class": "logging.FileHandler",
            "filename": str(log_dir / "app.log"),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": app_level,
        },
    }
    plan_handlers: list[str] = []
    if debug:
        handlers["plans"] = {
            "class": "logging.FileHandler",
            "filename": str(log_dir / "plans.log"),
            "encoding": "utf-8",
            "formatter": "standard",
            "level": "DEBUG",
        }
        plan_handlers.append("plans")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "loggers": {
            "trackcoach": {"level": app_level},
            "trackcoach.services.plan_generator": {"level": app_level, "handlers": plan_handlers},
            # The SDK's transport logs every request line at INFO.
            "httpx": {"level": "WARNING"},
        },
        "root": {
            "level": level,
            "handlers": ["console", "file"],
        },
    }


def configure_logging() -> None:
    """Configure application logging once per process."""

    global _configured
    if _configured:
        return

    try:
        settings = get_settings()
        log_dir, level, debug = settings.log_dir, settings.log_level, settings.debug
    except ValidationError:
        # A bad env value must not stop the app from logging why it failed.
        log_dir, level, debug = Path("logs"), "INFO", False
    log_dir.mkdir(parents=True, exist_ok=True)

    dictConfig(_default_config(log_dir, level, debug=debug))
    _configured = True
