"""Tests for structured logging setup."""

import json
import logging

import pytest

from docs_site.logging_config import LOG_FILE_NAME, get_logger, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put back the root handlers replaced by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_json_with_context(tmp_path, restore_root_logger):
    """Context fields end up as keys of the JSON log line."""
    setup_logging("INFO", log_dir=tmp_path)
    logger = get_logger("docs_site.tests")

    log_with_context(
        logger,
        "warning",
        "Shared template not found",
        template="footer.html",
        event_type="template_missing",
    )
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "Shared template not found"
    assert record["levelname"] == "WARNING"
    assert record["template"] == "footer.html"
    assert record["event_type"] == "template_missing"


def test_setup_logging_replaces_handlers(tmp_path, restore_root_logger):
    """Calling setup twice does not stack handlers."""
    setup_logging("DEBUG", log_dir=tmp_path)
    setup_logging("DEBUG", log_dir=tmp_path)

    root = logging.getLogger()
    assert len(root.handlers) == 2
    assert root.level == logging.DEBUG
