"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from typemeta.config.models import (
    FormatOverride,
    LoggingConfig,
    LogOutputConfig,
    ResolutionConfig,
    TypeMetaConfig,
)
from typemeta.schema.formats import DataFormat, SchemaType, TypeWithFormat


class TestLogOutputConfig:
    """Output destination validation."""

    @pytest.mark.parametrize("destination", ["stderr", "stdout"])
    def test_stream_destinations(self, destination: str) -> None:
        assert LogOutputConfig(destination=destination).destination == destination

    def test_relative_file_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(destination="logs/typemeta.log")

    def test_absolute_file_accepted(self) -> None:
        assert LogOutputConfig(destination="/var/log/typemeta.log").destination == (
            "/var/log/typemeta.log"
        )


class TestLoggingConfig:
    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert [o.destination for o in config.outputs] == ["stderr"]


class TestResolutionConfig:
    """Subtype resolution settings."""

    def test_defaults(self) -> None:
        config = ResolutionConfig()
        assert config.runtime_fallback is True
        assert config.import_modules is True
        assert config.allowed_module_prefixes == []
        assert config.reflexive_subtypes is False

    @pytest.mark.parametrize("prefix", ["", ".app", "app."])
    def test_malformed_prefix_rejected(self, prefix: str) -> None:
        with pytest.raises(ValidationError):
            ResolutionConfig(allowed_module_prefixes=[prefix])

    def test_dotted_prefix_accepted(self) -> None:
        config = ResolutionConfig(allowed_module_prefixes=["app.models", "collections"])
        assert config.allowed_module_prefixes == ["app.models", "collections"]


class TestFormatOverride:
    """Override entries must pair compatible type and format."""

    def test_compatible(self) -> None:
        override = FormatOverride(type=SchemaType.INTEGER, format=DataFormat.INT64)
        assert override.to_type_with_format() == TypeWithFormat(
            SchemaType.INTEGER, DataFormat.INT64
        )

    def test_format_defaults_to_none(self) -> None:
        assert FormatOverride(type=SchemaType.STRING).format is DataFormat.NONE

    def test_from_strings(self) -> None:
        override = FormatOverride.model_validate({"type": "string", "format": "date-time"})
        assert override.format is DataFormat.DATE_TIME

    @pytest.mark.parametrize(
        ("schema_type", "data_format"),
        [
            (SchemaType.BOOLEAN, DataFormat.INT32),
            (SchemaType.INTEGER, DataFormat.DOUBLE),
            (SchemaType.ARRAY, DataFormat.BYTE),
        ],
    )
    def test_incompatible_rejected(self, schema_type: SchemaType, data_format: DataFormat) -> None:
        with pytest.raises(ValidationError):
            FormatOverride(type=schema_type, format=data_format)


class TestTypeMetaConfig:
    def test_sections(self) -> None:
        config = TypeMetaConfig()
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.resolution, ResolutionConfig)
        assert config.formats.overrides == {}
