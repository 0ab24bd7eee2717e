"""Utilities for consistent logging across rbparams."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Sequence, Tuple, Union

DEFAULT_FORMAT = "%(asctime)s | %(levelname)8s | %(name)s | %(message)s"


def configure_logging(
    level: Union[str, int] = "INFO",
    *,
    logger_name: Optional[str] = None,
    log_file: Optional[Path] = None,
    force: bool = True,
) -> logging.Logger:
    """Configure root logging once using a consistent format.

    Args:
        level: Logging level name or integer value.
        logger_name: Optional logger name to return after configuration.
        log_file: Optional file to tee logs into in addition to console.
        force: Whether to override existing configuration (defaults to True).

    Returns:
        Configured logger instance (root when logger_name is None).
    """

    log_level = (
        level
        if isinstance(level, int)
        else (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else logging.INFO
        )
    )

    logging.basicConfig(level=log_level, format=DEFAULT_FORMAT, force=force)

    logger = logging.getLogger(logger_name) if logger_name else logging.getLogger()
    logger.setLevel(log_level)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        if not any(
            isinstance(handler, logging.FileHandler)
            and handler.baseFilename == os.path.abspath(log_path)
            for handler in logger.handlers
        ):
            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            logger.addHandler(file_handler)

    return logger


def format_value(value: Any, *, precision: int = 6, max_length: int = 120) -> str:
    """Format a value for log output in a compact representation.

    Floats use scientific notation with ``precision`` decimals, the same
    rendering as parameter dumps.
    """

    if isinstance(value, float):
        text = f"{value:.{precision}e}"
    elif value is None:
        text = "–"
    else:
        text = str(value)

    if len(text) > max_length:
        return text[: max_length - 1] + "…"
    return text


def log_section(
    logger: logging.Logger,
    title: str,
    entries: Sequence[Tuple[str, str, Optional[str]]],
    *,
    level: int = logging.INFO,
    indent: str = "  ",
) -> None:
    """Log a titled section with aligned key-value pairs."""

    if not entries or not logger.isEnabledFor(level):
        return

    logger.log(level, "%s:", title)
    for label, value, marker in entries:
        suffix = f" ({marker})" if marker else ""
        logger.log(level, "%s- %s: %s%s", indent, label, value, suffix)
