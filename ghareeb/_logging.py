"""
Structured logging utilities for the ghareeb library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from typing import Optional


# Default format for ghareeb logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "ghareeb") -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "ghareeb")

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the ghareeb library.

    Args:
        level: Logging level (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for ghareeb
    """
    logger = logging.getLogger("ghareeb")
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the ghareeb library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all ghareeb logging."""
    logger = logging.getLogger("ghareeb")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


_logger = get_logger()


def log_alignment_complete(
    line_count: int,
    exact: int,
    loose: int,
    unmatched: int,
) -> None:
    """Log the outcome of one page alignment."""
    _logger.debug(
        f"Alignment complete: {line_count} lines, "
        f"{exact} exact, {loose} loose, {unmatched} unmatched"
    )


def log_empty_normalized(entry_id: str, word_text: str) -> None:
    """Log a lexicon entry excluded because it normalizes to nothing usable."""
    _logger.warning(f"Lexicon entry normalizes to empty: {word_text!r} (entry_id={entry_id})")


def log_speech_match(matched: int, total: int, score: float) -> None:
    """Log the outcome of one transcript match."""
    _logger.debug(f"Speech match: {matched}/{total} words, score={score:.2f}")


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)
