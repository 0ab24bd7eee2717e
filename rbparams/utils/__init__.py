"""rbparams Utilities Package

logging_utils: Logging configuration and compact value formatting
"""

from .logging_utils import (
    configure_logging,
    log_section,
    format_value,
)

__all__ = [
    # Logging utilities
    "configure_logging",
    "log_section",
    "format_value",
]
