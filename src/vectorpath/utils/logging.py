"""Logging utilities for vectorpath.

Two outputs are configured: a file that receives JSON records from
structlog at a verbose level, and an optional console stream. Core
modules log through plain ``logging.getLogger(__name__)`` loggers, which
end up in the same handlers.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog

_FILE_HANDLER_NAME = "vectorpath-file"
_CONSOLE_HANDLER_NAME = "vectorpath-console"


@dataclass
class ParseStats:
    """Counters for one document run.

    ``errors`` holds ``(label, message)`` pairs in the order failures were
    collected, which is completion order rather than document order.
    """

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    primitive_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Wall time between start and end, or 0 if the run has not finished."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        return self.end_time - self.start_time

    @property
    def path_count(self) -> int:
        """Paths seen, whether parsed, skipped or failed."""
        return self.processed_count + self.skipped_count + self.error_count


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return level


def _remove_handlers(root: logging.Logger, name: str) -> None:
    for existing in [h for h in root.handlers if h.get_name() == name]:
        root.removeHandler(existing)
        existing.close()


def _replace_handler(root: logging.Logger, handler: logging.Handler, name: str) -> None:
    # Repeated configuration must not stack handlers
    _remove_handlers(root, name)
    handler.set_name(name)
    root.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Set up file and console logging and return the application logger.

    Args:
        log_file: Destination file; ``vectorpath_<timestamp>.log`` in the
            working directory if None
        console_level: Level name for the console stream
        file_level: Level name for the log file
        quiet: Leave the console stream out entirely

    Returns:
        structlog logger named ``vectorpath``

    Raises:
        ValueError: If a level name is not a logging level
    """
    file_levelno = _level(file_level)
    console_levelno = _level(console_level)

    if log_file is None:
        log_file = Path(f"vectorpath_{datetime.now():%Y%m%d_%H%M%S}.log")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(file_levelno)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )
    _replace_handler(root, file_handler, _FILE_HANDLER_NAME)

    if quiet:
        _remove_handlers(root, _CONSOLE_HANDLER_NAME)
    else:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_levelno)
        console_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        _replace_handler(root, console_handler, _CONSOLE_HANDLER_NAME)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("vectorpath")
    logger.debug("Logging configured", log_file=str(log_file), file_level=file_level)
    return logger


class ParseLogger:
    """Per-path event logging that also keeps the run's ParseStats."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ParseStats()

    def log_path_start(self, path_label: str) -> None:
        self._logger.debug("Path submitted", path=path_label)

    def log_path_complete(
        self,
        path_label: str,
        primitive_count: int,
        duration_ms: float,
    ) -> None:
        """Record a parsed path and its primitive count."""
        self._stats.processed_count += 1
        self._stats.primitive_count += primitive_count
        self._logger.info(
            "Path parsed",
            path=path_label,
            primitives=primitive_count,
            duration_ms=round(duration_ms, 2),
        )

    def log_path_skipped(self, path_label: str, reason: str) -> None:
        """Record a path that was not parsed."""
        self._stats.skipped_count += 1
        self._logger.debug("Path skipped", path=path_label, reason=reason)

    def log_path_error(
        self,
        path_label: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Record a path that failed to parse.

        Args:
            path_label: Element id or positional label of the path
            error: The failure, as rebuilt from the worker result
            traceback: Formatted worker traceback, written to the log only
        """
        self._stats.error_count += 1
        self._stats.errors.append((path_label, str(error)))
        self._logger.error(
            "Path failed",
            path=path_label,
            error=str(error),
            traceback=traceback,
        )

    @property
    def stats(self) -> ParseStats:
        return self._stats
