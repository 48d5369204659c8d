"""Schema classification, subtype tests and annotation lookup.

- ``formats``: type name to OpenAPI schema type/format table
- ``resolver``: canonical names for arrays, type variables and primitives
- ``subtype``: index-first subtype tests with a runtime fallback
- ``annotations``: annotation retrieval across annotatable elements
"""

from typemeta.schema.annotations import (
    SCHEMA_ANNOTATION,
    annotation_value,
    get_annotation,
    get_annotation_value,
    get_annotations,
    get_declaring_class,
    get_schema_annotation,
    has_annotation,
)
from typemeta.schema.formats import (
    ARRAY_FORMAT,
    DEFAULT_FORMAT_TABLE,
    OBJECT_FORMAT,
    DataFormat,
    FormatTable,
    SchemaType,
    TypeWithFormat,
    classify,
)
from typemeta.schema.resolver import (
    canonical_name,
    equal_types,
    equal_wrapped_types,
    get_bound,
    is_primitive_wrapper,
    resolve_wildcard,
)
from typemeta.schema.runtime import RuntimeTypeSystem
from typemeta.schema.subtype import SubtypeTester

__all__ = [
    # Formats
    "ARRAY_FORMAT",
    "DEFAULT_FORMAT_TABLE",
    "OBJECT_FORMAT",
    "DataFormat",
    "FormatTable",
    "SchemaType",
    "TypeWithFormat",
    "classify",
    # Resolver
    "canonical_name",
    "equal_types",
    "equal_wrapped_types",
    "get_bound",
    "is_primitive_wrapper",
    "resolve_wildcard",
    # Subtypes
    "RuntimeTypeSystem",
    "SubtypeTester",
    # Annotations
    "SCHEMA_ANNOTATION",
    "annotation_value",
    "get_annotation",
    "get_annotation_value",
    "get_annotations",
    "get_declaring_class",
    "get_schema_annotation",
    "has_annotation",
]
