"""Tests for logging setup and the per-request logger."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from socialplus.utils.logging import OperationLogger, setup_logging


@pytest.fixture
def root_logger():
    """Give setup_logging() a root logger and put the original back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    transport_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    for name, transport_level in transport_levels.items():
        logging.getLogger(name).setLevel(transport_level)


class TestSetupLogging:
    def test_installs_rich_handler(self, root_logger) -> None:
        root = setup_logging(level="DEBUG")

        assert root is root_logger
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [RichHandler]

    def test_transport_loggers_stay_quiet(self, root_logger) -> None:
        setup_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging(level="ERROR")
        assert logging.getLogger("httpcore").level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self, root_logger) -> None:
        assert setup_logging(level="chatty").level == logging.INFO

    def test_level_is_case_insensitive(self, root_logger) -> None:
        assert setup_logging(level="warning").level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self, root_logger) -> None:
        setup_logging()
        setup_logging()

        assert len(root_logger.handlers) == 1

    def test_log_file(self, root_logger, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "socialplus.log"

        setup_logging(level="INFO", log_file=log_file)
        logging.getLogger("socialplus.client").info("hello file")
        logging.getLogger("socialplus.client").debug("not this")
        for handler in root_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "INFO     socialplus.client: hello file" in text
        assert "not this" not in text


class TestOperationLogger:
    def test_prefixes_context(self, caplog) -> None:
        log = OperationLogger(
            logging.getLogger("socialplus.test"),
            op="Topics.get_topic",
            request="GET /v0.7/topics/t1",
        )

        with caplog.at_level(logging.DEBUG, logger="socialplus.test"):
            log.debug("-> 200 (0.01s)")

        assert caplog.messages == [
            "[op=Topics.get_topic request=GET /v0.7/topics/t1] -> 200 (0.01s)"
        ]

    def test_for_attempt(self, caplog) -> None:
        log = OperationLogger(logging.getLogger("socialplus.test"), op="Blobs.get_blob")

        with caplog.at_level(logging.WARNING, logger="socialplus.test"):
            log.for_attempt(3).warning("retrying")
            log.warning("failed")

        assert caplog.messages == [
            "[op=Blobs.get_blob attempt=3] retrying",
            "[op=Blobs.get_blob] failed",
        ]

    def test_none_context_is_skipped(self, caplog) -> None:
        log = OperationLogger(logging.getLogger("socialplus.test"), op=None)

        with caplog.at_level(logging.ERROR, logger="socialplus.test"):
            log.error("plain")

        assert caplog.messages == ["plain"]
