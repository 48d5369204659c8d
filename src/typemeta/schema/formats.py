"""Schema type and format classification of well-known types.

The table is a finite allow-list keyed by canonical name. Arrays always
classify as ARRAY (the element is classified separately by the caller) and
anything unlisted falls back to OBJECT; classification never raises.

See https://spec.openapis.org/oas/v3.0.3#data-types for the formats.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from typemeta.core.errors import TypeModelError
from typemeta.model.types import Primitive, TypeKind, TypeRef
from typemeta.schema.resolver import canonical_name


class SchemaType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class DataFormat(str, Enum):
    NONE = "none"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    BYTE = "byte"
    BINARY = "binary"
    DATE = "date"
    DATE_TIME = "date-time"
    PASSWORD = "password"

    @property
    def format(self) -> str | None:
        """OpenAPI ``format`` string, ``None`` when there is none."""
        return None if self is DataFormat.NONE else self.value

    @property
    def has_format(self) -> bool:
        return self is not DataFormat.NONE


COMPATIBLE_FORMATS: Mapping[SchemaType, frozenset[DataFormat]] = MappingProxyType(
    {
        SchemaType.STRING: frozenset(
            {
                DataFormat.NONE,
                DataFormat.BYTE,
                DataFormat.BINARY,
                DataFormat.DATE,
                DataFormat.DATE_TIME,
                DataFormat.PASSWORD,
            }
        ),
        SchemaType.NUMBER: frozenset({DataFormat.NONE, DataFormat.FLOAT, DataFormat.DOUBLE}),
        SchemaType.INTEGER: frozenset({DataFormat.NONE, DataFormat.INT32, DataFormat.INT64}),
        SchemaType.BOOLEAN: frozenset({DataFormat.NONE}),
        SchemaType.ARRAY: frozenset({DataFormat.NONE}),
        SchemaType.OBJECT: frozenset({DataFormat.NONE}),
    }
)
"""Formats that may accompany each schema type."""


@dataclass(frozen=True, slots=True)
class TypeWithFormat:
    schema_type: SchemaType
    format: DataFormat = DataFormat.NONE


STRING_FORMAT = TypeWithFormat(SchemaType.STRING)
BYTE_FORMAT = TypeWithFormat(SchemaType.STRING, DataFormat.BYTE)
BINARY_FORMAT = TypeWithFormat(SchemaType.STRING, DataFormat.BINARY)
PASSWORD_FORMAT = TypeWithFormat(SchemaType.STRING, DataFormat.PASSWORD)
NUMBER_FORMAT = TypeWithFormat(SchemaType.NUMBER)  # int, float or decimal; can't tell which
DECIMAL_FORMAT = TypeWithFormat(SchemaType.NUMBER)
DOUBLE_FORMAT = TypeWithFormat(SchemaType.NUMBER, DataFormat.DOUBLE)
FLOAT_FORMAT = TypeWithFormat(SchemaType.NUMBER, DataFormat.FLOAT)
BIGINT_FORMAT = TypeWithFormat(SchemaType.INTEGER)
INT_FORMAT = TypeWithFormat(SchemaType.INTEGER, DataFormat.INT32)
LONG_FORMAT = TypeWithFormat(SchemaType.INTEGER, DataFormat.INT64)
SHORT_FORMAT = TypeWithFormat(SchemaType.INTEGER)
BOOLEAN_FORMAT = TypeWithFormat(SchemaType.BOOLEAN)
# Special formats
ARRAY_FORMAT = TypeWithFormat(SchemaType.ARRAY)
OBJECT_FORMAT = TypeWithFormat(SchemaType.OBJECT)
DATE_FORMAT = TypeWithFormat(SchemaType.STRING, DataFormat.DATE)
DATE_TIME_FORMAT = TypeWithFormat(SchemaType.STRING, DataFormat.DATE_TIME)


def _default_entries() -> dict[str, TypeWithFormat]:
    entries: dict[str, TypeWithFormat] = {}

    def put(fmt: TypeWithFormat, *names: str) -> None:
        for name in names:
            entries[name] = fmt

    # String
    put(STRING_FORMAT, "builtins.str", "collections.UserString", "io.StringIO", "typing.Text")

    # Base64 string
    put(BYTE_FORMAT, Primitive.BYTE.value, "ctypes.c_byte", "ctypes.c_int8")
    put(BYTE_FORMAT, Primitive.CHAR.value, "ctypes.c_char")
    put(BYTE_FORMAT, "builtins.bytes", "builtins.bytearray")

    # Binary streams and secrets
    put(BINARY_FORMAT, "io.BytesIO", "typing.BinaryIO")
    put(PASSWORD_FORMAT, "pydantic.SecretStr", "pydantic.SecretBytes")

    # Number
    put(NUMBER_FORMAT, "numbers.Number", "numbers.Real")

    # Decimal
    put(DECIMAL_FORMAT, "decimal.Decimal", "fractions.Fraction")
    put(DOUBLE_FORMAT, Primitive.DOUBLE.value, "builtins.float", "ctypes.c_double", "numpy.float64")
    put(FLOAT_FORMAT, Primitive.FLOAT.value, "ctypes.c_float", "numpy.float32")

    # Integer
    put(BIGINT_FORMAT, "builtins.int", "numbers.Integral")
    put(INT_FORMAT, Primitive.INT.value, "ctypes.c_int", "ctypes.c_int32", "numpy.int32")
    put(LONG_FORMAT, Primitive.LONG.value, "ctypes.c_longlong", "ctypes.c_int64", "numpy.int64")
    put(SHORT_FORMAT, Primitive.SHORT.value, "ctypes.c_short", "ctypes.c_int16", "numpy.int16")

    # Boolean
    put(BOOLEAN_FORMAT, Primitive.BOOL.value, "builtins.bool", "ctypes.c_bool", "numpy.bool_")

    # Date
    put(DATE_FORMAT, "datetime.date")

    # Date time
    put(DATE_TIME_FORMAT, "datetime.datetime", "pendulum.DateTime", "arrow.Arrow")

    return entries


class FormatTable:
    """Immutable registry of canonical type name to schema format."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, TypeWithFormat]) -> None:
        self._entries: Mapping[str, TypeWithFormat] = MappingProxyType(dict(entries))

    @classmethod
    def default(cls) -> FormatTable:
        return DEFAULT_FORMAT_TABLE

    def with_overrides(self, overrides: Mapping[str, TypeWithFormat]) -> FormatTable:
        """Return a new table with ``overrides`` layered on top of this one."""
        if not overrides:
            return self
        return FormatTable({**self._entries, **overrides})

    def classify(self, type_ref: TypeRef) -> TypeWithFormat:
        if type_ref.kind is TypeKind.ARRAY:
            return ARRAY_FORMAT
        return self._entries.get(canonical_name(type_ref), OBJECT_FORMAT)

    def get(self, name: str) -> TypeWithFormat | None:
        return self._entries.get(name)

    def primitive_format(self, primitive: Primitive) -> TypeWithFormat:
        """Format of a primitive.

        Raises:
            TypeModelError: If the table has no entry for the primitive.
        """
        fmt = self._entries.get(primitive.value)
        if fmt is None:
            raise TypeModelError.unmapped_primitive(primitive.value)
        return fmt

    @staticmethod
    def array_format() -> TypeWithFormat:
        return ARRAY_FORMAT

    @staticmethod
    def object_format() -> TypeWithFormat:
        return OBJECT_FORMAT

    def items(self) -> Iterator[tuple[str, TypeWithFormat]]:
        return iter(self._entries.items())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


DEFAULT_FORMAT_TABLE = FormatTable(_default_entries())


def classify(type_ref: TypeRef) -> TypeWithFormat:
    """Classify against the default table."""
    return DEFAULT_FORMAT_TABLE.classify(type_ref)
