"""Logging utilities for gfont."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed here so reconfiguration replaces them
_HANDLER_TAG = "_gfont_handler"


@dataclass
class RunStats:
    """Statistics from a toolkit run."""

    documents_read: int = 0
    faces_parsed: int = 0
    faces_written: int = 0
    skipped_properties: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console output goes to stderr so stdout stays free for CSS and JSON.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = _tagged(logging.FileHandler(log_file, encoding="utf-8"))
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = _tagged(logging.StreamHandler(sys.stderr))
    console_handler.setLevel(getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("gfont")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RunLogger:
    """Logger for tracking toolkit steps and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RunStats()

    def log_document_parsed(self, source: str, faces: int, skipped: list[str]) -> None:
        """Log a parsed CSS document."""
        self._logger.info(
            "CSS parsed",
            source=source,
            faces=faces,
            skipped_properties=sorted(set(skipped)),
        )
        self._stats.documents_read += 1
        self._stats.faces_parsed += faces
        self._stats.skipped_properties += len(skipped)

    def log_document_loaded(self, source: str, faces: int) -> None:
        """Log a loaded JSON document."""
        self._logger.info("Font data loaded", source=source, faces=faces)
        self._stats.documents_read += 1

    def log_output(self, kind: str, faces: int, target: str) -> None:
        """Log produced output."""
        self._logger.info("Output written", kind=kind, faces=faces, target=target)
        self._stats.faces_written += faces

    def log_error(self, step: str, error: Exception) -> None:
        """Log a failed step."""
        self._logger.error(
            "Step failed",
            step=step,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((step, str(error)))

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
