"""Type references as they appear in static metadata.

A ``TypeRef`` names a declared type without loading it. Names are fully
qualified dotted paths (``decimal.Decimal``, ``builtins.str``); primitives are
fixed-width machine scalars named by width (``int32``, ``float64``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from typemeta.core.errors import TypeModelError
from typemeta.model.annotations import AnnotationInstance, TargetKind

OBJECT_NAME = "builtins.object"
"""Canonical name of the universal top type."""


class TypeKind(str, Enum):
    """Shape of a type reference."""

    PRIMITIVE = "primitive"
    CLASS = "class"
    ARRAY = "array"
    WILDCARD = "wildcard"


class Primitive(str, Enum):
    """Fixed-width scalar kinds."""

    BOOL = "bool8"
    BYTE = "int8"
    CHAR = "char"
    SHORT = "int16"
    INT = "int32"
    LONG = "int64"
    FLOAT = "float32"
    DOUBLE = "float64"


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Reference to a declared type.

    ``component`` is set only for ARRAY, ``upper_bound`` only for WILDCARD.
    A wildcard without an upper bound is bounded by ``builtins.object``.
    ``annotations`` holds type-use metadata such as ``Annotated[...]`` extras.
    """

    target_kind: ClassVar[TargetKind] = TargetKind.TYPE

    kind: TypeKind
    name: str
    component: TypeRef | None = None
    upper_bound: TypeRef | None = None
    annotations: tuple[AnnotationInstance, ...] = ()

    def as_primitive(self) -> Primitive:
        """Return the primitive kind of a PRIMITIVE reference."""
        if self.kind is not TypeKind.PRIMITIVE:
            raise TypeModelError.invalid_type_ref(self.name, "not a primitive reference")
        try:
            return Primitive(self.name)
        except ValueError:
            raise TypeModelError.unknown_primitive(self.name) from None

    def __str__(self) -> str:
        if self.kind is TypeKind.ARRAY and self.component is not None:
            container = self.name.removeprefix("builtins.")
            if container == "tuple":
                return f"tuple[{self.component}, ...]"
            return f"{container}[{self.component}]"
        if self.kind is TypeKind.WILDCARD:
            if self.upper_bound is None:
                return f"~{self.name}"
            return f"~{self.name}: {self.upper_bound}"
        return self.name


def class_type(name: str, *annotations: AnnotationInstance) -> TypeRef:
    return TypeRef(TypeKind.CLASS, name, annotations=annotations)


def primitive(kind: Primitive, *annotations: AnnotationInstance) -> TypeRef:
    return TypeRef(TypeKind.PRIMITIVE, kind.value, annotations=annotations)


def array_of(
    component: TypeRef,
    *annotations: AnnotationInstance,
    container: str = "builtins.list",
) -> TypeRef:
    """Homogeneous sequence of ``component``; named after its container."""
    return TypeRef(TypeKind.ARRAY, container, component=component, annotations=annotations)


def wildcard(name: str = "T", upper_bound: TypeRef | None = None) -> TypeRef:
    return TypeRef(TypeKind.WILDCARD, name, upper_bound=upper_bound)


OBJECT_TYPE = class_type(OBJECT_NAME)
