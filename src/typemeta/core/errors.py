"""typemeta error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Type model
- 4xxx: Index
- 9xxx: Internal

Unresolvable lookups never surface as errors; they degrade to safe defaults
(OBJECT/NONE classification, ``False`` subtype answers, absent annotations).
Only contract violations of the type model abort an operation.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Type model (3xxx)
    UNKNOWN_PRIMITIVE = 3001
    UNMAPPED_PRIMITIVE = 3002
    INVALID_TYPE_REF = 3003
    TYPE_NOT_FOUND = 3004

    # Index (4xxx)
    INDEX_FILE_NOT_FOUND = 4001
    INDEX_PARSE_ERROR = 4002
    INDEX_INVALID = 4003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TypeMetaError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'UNKNOWN_PRIMITIVE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TypeMetaError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class TypeModelError(TypeMetaError):
    """Violations of the type model contract.

    These indicate an incomplete static table or a malformed reference handed
    in by the caller, so they abort the current operation.
    """

    @classmethod
    def unknown_primitive(cls, name: str) -> "TypeModelError":
        return cls(
            code=ErrorCode.UNKNOWN_PRIMITIVE,
            message=f"Unknown primitive: {name}",
            details={"name": name},
        )

    @classmethod
    def unmapped_primitive(cls, name: str) -> "TypeModelError":
        return cls(
            code=ErrorCode.UNMAPPED_PRIMITIVE,
            message=f"No schema format registered for primitive: {name}",
            details={"name": name},
        )

    @classmethod
    def invalid_type_ref(cls, text: str, reason: str) -> "TypeModelError":
        return cls(
            code=ErrorCode.INVALID_TYPE_REF,
            message=f"Invalid type reference '{text}': {reason}",
            details={"text": text, "reason": reason},
        )


class TypeNotFoundError(TypeMetaError):
    """A type name could not be loaded through the runtime type system."""

    @classmethod
    def not_loadable(cls, name: str, reason: str) -> "TypeNotFoundError":
        return cls(
            code=ErrorCode.TYPE_NOT_FOUND,
            message=f"Cannot load type {name}: {reason}",
            details={"name": name, "reason": reason},
        )


class IndexLoadError(TypeMetaError):
    """Errors reading an index snapshot."""

    @classmethod
    def file_not_found(cls, path: str) -> "IndexLoadError":
        return cls(
            code=ErrorCode.INDEX_FILE_NOT_FOUND,
            message=f"Index snapshot not found: {path}",
            details={"path": path},
        )

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "IndexLoadError":
        return cls(
            code=ErrorCode.INDEX_PARSE_ERROR,
            message=f"Failed to parse index snapshot at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid(cls, path: str, location: str, reason: str) -> "IndexLoadError":
        return cls(
            code=ErrorCode.INDEX_INVALID,
            message=f"Invalid index snapshot entry at {location}: {reason}",
            details={"path": path, "location": location, "reason": reason},
        )


class InternalError(TypeMetaError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
