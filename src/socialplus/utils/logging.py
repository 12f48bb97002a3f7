"""
Logging for socialplus.

setup_logging() is for applications (the CLI calls it with the [logging]
section of socialplus.toml); the library itself only emits records. Records
about a service call go through an OperationLogger so every line names the
operation and request it belongs to:

    [op=Topics.get_topic request=GET /v0.7/topics/t1 attempt=2] retrying
"""

import logging
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Loggers that report every request at INFO and would duplicate ours
TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """
    Route log records to stderr through rich, and optionally to a file.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Also append records to this file (parents are created)

    Returns:
        The configured root logger
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    console.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(console)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(file_handler)

    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return root


class OperationLogger(logging.LoggerAdapter):
    """
    Logger adapter that prefixes messages with the call they belong to.

    Usage:
        log = OperationLogger(logger, op="Topics.get_topic", request="GET /v0.7/topics/t1")
        log.debug("-> 200 (0.12s)")
        log.for_attempt(2).warning("retrying")
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        super().__init__(logger, context)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        context = " ".join(f"{k}={v}" for k, v in self.extra.items() if v is not None)
        return (f"[{context}] {msg}" if context else msg), kwargs

    def for_attempt(self, number: int) -> "OperationLogger":
        """The same context, tagged with a retry attempt number."""
        return OperationLogger(self.logger, **{**self.extra, "attempt": number})
