"""Core module exports."""

from typemeta.core.errors import (
    ConfigError,
    ErrorCode,
    IndexLoadError,
    InternalError,
    TypeMetaError,
    TypeModelError,
    TypeNotFoundError,
)
from typemeta.core.logging import (
    clear_scan_id,
    configure_logging,
    get_logger,
    get_scan_id,
    set_scan_id,
)

__all__ = [
    # Errors
    "TypeMetaError",
    "ErrorCode",
    "ConfigError",
    "TypeModelError",
    "TypeNotFoundError",
    "IndexLoadError",
    "InternalError",
    # Logging
    "clear_scan_id",
    "configure_logging",
    "get_logger",
    "get_scan_id",
    "set_scan_id",
]
