"""Config module exports."""

from typemeta.config.loader import load_config
from typemeta.config.models import (
    FormatOverride,
    FormatsConfig,
    LoggingConfig,
    LogOutputConfig,
    ResolutionConfig,
    TypeMetaConfig,
)

__all__ = [
    "load_config",
    "TypeMetaConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "ResolutionConfig",
    "FormatsConfig",
    "FormatOverride",
]
