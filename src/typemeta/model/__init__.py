"""Static type metadata: type references, annotatable elements, the index.

Produced by an external index builder (or loaded from a YAML snapshot) and
read-only for the lifetime of a scan.
"""

from typemeta.model.annotations import PROP_VALUE, AnnotationInstance, TargetKind
from typemeta.model.index import ClassIndex, IndexView
from typemeta.model.parsing import parse_type_ref
from typemeta.model.snapshot import IndexSnapshot, build_index, load_index
from typemeta.model.targets import (
    AnnotationTarget,
    ClassInfo,
    FieldInfo,
    MethodInfo,
    MethodParameterInfo,
)
from typemeta.model.types import (
    OBJECT_NAME,
    OBJECT_TYPE,
    Primitive,
    TypeKind,
    TypeRef,
    array_of,
    class_type,
    primitive,
    wildcard,
)

__all__ = [
    # Type references
    "OBJECT_NAME",
    "OBJECT_TYPE",
    "Primitive",
    "TypeKind",
    "TypeRef",
    "array_of",
    "class_type",
    "primitive",
    "wildcard",
    "parse_type_ref",
    # Annotations and targets
    "PROP_VALUE",
    "AnnotationInstance",
    "AnnotationTarget",
    "TargetKind",
    "ClassInfo",
    "FieldInfo",
    "MethodInfo",
    "MethodParameterInfo",
    # Index
    "IndexView",
    "ClassIndex",
    "IndexSnapshot",
    "build_index",
    "load_index",
]
