"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TYPEMETA__SECTION__KEY)
3. Project YAML (./typemeta.yaml, or the path given to load_config())
4. Global YAML (~/.config/typemeta/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TYPEMETA__<SECTION>__<KEY>=<VALUE>

Examples:
    TYPEMETA__LOGGING__LEVEL=DEBUG
    TYPEMETA__RESOLUTION__RUNTIME_FALLBACK=false
    TYPEMETA__RESOLUTION__ALLOWED_MODULE_PREFIXES='["app", "collections"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from typemeta.schema.formats import COMPATIBLE_FORMATS, DataFormat, SchemaType, TypeWithFormat

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TYPEMETA__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every runtime fallback.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ResolutionConfig(BaseModel):
    """Subtype resolution configuration.

    Env vars:
        TYPEMETA__RESOLUTION__RUNTIME_FALLBACK: Consult the runtime when the index can't answer
        TYPEMETA__RESOLUTION__IMPORT_MODULES: Allow importing modules during fallback
        TYPEMETA__RESOLUTION__ALLOWED_MODULE_PREFIXES: Restrict which modules may be imported
        TYPEMETA__RESOLUTION__REFLEXIVE_SUBTYPES: Treat every type as a subtype of itself
    """

    runtime_fallback: bool = Field(
        default=True,
        description="Load types by name and use issubclass when the index has no answer. "
        "When off, anything the index cannot settle is not a subtype.",
    )
    import_modules: bool = Field(
        default=True,
        description="Import modules to load fallback types. "
        "RISK: importing executes module code from the scanned project.",
    )
    allowed_module_prefixes: list[str] = Field(
        default_factory=list,
        description="If set, only modules under these dotted prefixes may be imported.",
    )
    reflexive_subtypes: bool = Field(
        default=False,
        description="Answer 'A is-a A' by name before consulting the index.",
    )

    @field_validator("allowed_module_prefixes")
    @classmethod
    def validate_prefixes(cls, v: list[str]) -> list[str]:
        for prefix in v:
            if not prefix or prefix.startswith(".") or prefix.endswith("."):
                raise ValueError(f"Module prefix must be a dotted name: {prefix!r}")
        return v


class FormatOverride(BaseModel):
    """Schema classification for one type name."""

    type: SchemaType
    format: DataFormat = DataFormat.NONE

    @model_validator(mode="after")
    def validate_compatible(self) -> "FormatOverride":
        if self.format not in COMPATIBLE_FORMATS[self.type]:
            raise ValueError(
                f"Format '{self.format.value}' is not valid for schema type '{self.type.value}'"
            )
        return self

    def to_type_with_format(self) -> TypeWithFormat:
        return TypeWithFormat(self.type, self.format)


class FormatsConfig(BaseModel):
    """Format table extensions.

    Entries are layered over the built-in table once, when the inspector is
    built; the table is not modified afterwards.
    """

    overrides: dict[str, FormatOverride] = Field(
        default_factory=dict,
        description="Canonical type name to schema type/format, e.g. "
        "{'uuid.UUID': {'type': 'string'}}.",
    )


class TypeMetaConfig(BaseModel):
    """Root configuration for typemeta.

    All settings can be configured via:
    1. Environment variables: TYPEMETA__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    formats: FormatsConfig = Field(default_factory=FormatsConfig)
