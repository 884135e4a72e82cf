from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from phonebook_core.utils.logging import (
    ContactEventLogger,
    configure_logging,
    format_event,
    get_logger,
)


def test_format_event_sorts_fields() -> None:
    assert format_event("contacts_ready", count=3) == "event=contacts_ready count=3"
    assert (
        format_event("contact_added", name="Pekka Mikkola", id="abc")
        == "event=contact_added id='abc' name='Pekka Mikkola'"
    )


def test_contact_event_logs_id_and_name(caplog) -> None:
    logger = get_logger("phonebook.test")
    assert isinstance(logger, ContactEventLogger)
    contact = SimpleNamespace(id="3d594650-3436-11e9-bc57-8b80ba54c431", name="Arto Hellas")

    with caplog.at_level(logging.INFO, logger="phonebook.test"):
        logger.contact("contact_phone_updated", contact)

    assert caplog.records[-1].getMessage() == (
        "event=contact_phone_updated "
        "id='3d594650-3436-11e9-bc57-8b80ba54c431' name='Arto Hellas'"
    )


@pytest.fixture
def root_file_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


def test_configure_logging_attaches_api_log_once(tmp_path, root_file_handlers) -> None:
    first = configure_logging(tmp_path / "logs")
    second = configure_logging(tmp_path / "logs")

    assert first == second == (tmp_path / "logs" / "api.log").resolve()
    attached = [
        h
        for h in root_file_handlers.handlers
        if isinstance(h, logging.FileHandler) and h.baseFilename == str(first)
    ]
    assert len(attached) == 1


def test_configure_logging_without_dir_attaches_no_file(root_file_handlers) -> None:
    before = len(root_file_handlers.handlers)
    assert configure_logging() is None
    assert len(root_file_handlers.handlers) == before


def test_configure_logging_survives_unwritable_dir(tmp_path, root_file_handlers) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    assert configure_logging(blocker / "logs") is None
