"""Logging for the phonebook service and client.

``configure_logging`` installs the console format once per process and, for
the API, an ``api.log`` file under ``LOG_DIR``. Modules obtain their logger
through ``get_logger(__name__)``; the returned adapter renders store changes
as ``event=<name> key='value' ...`` lines so they can be grepped per contact.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Protocol

from phonebook_core.infra.settings import LOG_LEVEL

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_FILE_NAME = "api.log"

_console_configured = False


class _ContactLike(Protocol):
    id: str
    name: str


def _level() -> int:
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_dir: Optional[Path] = None) -> Optional[Path]:
    """Install phonebook logging; returns the log file path when one is attached.

    Repeated calls are harmless: the console format is applied once and a
    given file is attached to the root logger at most once.
    """
    global _console_configured
    if not _console_configured:
        logging.basicConfig(level=_level(), format=DEFAULT_FORMAT)
        _console_configured = True

    if log_dir is None:
        return None

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logging.getLogger(__name__).warning("Unable to create log directory %s: %s", log_dir, exc)
        return None

    log_path = (log_dir / LOG_FILE_NAME).resolve()
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(log_path):
            return log_path

    file_handler = logging.FileHandler(log_path, mode="w")
    file_handler.setLevel(_level())
    file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root.addHandler(file_handler)
    return log_path


def format_event(event: str, **fields: Any) -> str:
    """``event=contact_added id='...' name='...'`` with fields in sorted order."""
    parts = [f"event={event}"]
    parts.extend(f"{key}={value!r}" for key, value in sorted(fields.items()))
    return " ".join(parts)


class ContactEventLogger(logging.LoggerAdapter):
    """Adapter adding event helpers for contact store changes."""

    def event(self, event: str, **fields: Any) -> None:
        self.info("%s", format_event(event, **fields))

    def contact(self, event: str, contact: _ContactLike) -> None:
        self.event(event, id=contact.id, name=contact.name)


def get_logger(name: str) -> ContactEventLogger:
    configure_logging()
    return ContactEventLogger(logging.getLogger(name), {})


__all__ = [
    "ContactEventLogger",
    "DEFAULT_FORMAT",
    "configure_logging",
    "format_event",
    "get_logger",
]
