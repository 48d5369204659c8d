"""Annotatable program elements from static metadata.

Classes, fields, methods and method parameters share no base class. Each one
exposes a ``target_kind`` discriminator instead, and ``AnnotationTarget`` is
the closed union of them (plus ``TypeRef`` for type-use annotations).

Fields and methods are bound to their declaring ``ClassInfo`` when the class
is constructed; the back-reference is excluded from equality and repr.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Union

from typemeta.model.annotations import AnnotationInstance, TargetKind
from typemeta.model.types import TypeRef


@dataclass(frozen=True, slots=True)
class FieldInfo:
    """A class attribute with a declared type."""

    target_kind: ClassVar[TargetKind] = TargetKind.FIELD

    name: str
    type: TypeRef
    annotations: tuple[AnnotationInstance, ...] = ()
    declaring_class: ClassInfo | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """A method signature.

    ``annotations`` holds everything recorded against the method: its own
    annotations and those of its parameters, told apart by ``target_kind``
    and ``position``.
    """

    target_kind: ClassVar[TargetKind] = TargetKind.METHOD

    name: str
    parameter_names: tuple[str, ...] = ()
    parameter_types: tuple[TypeRef, ...] = ()
    return_type: TypeRef | None = None
    annotations: tuple[AnnotationInstance, ...] = ()
    declaring_class: ClassInfo | None = field(default=None, compare=False, repr=False)

    @property
    def parameters(self) -> tuple[MethodParameterInfo, ...]:
        return tuple(MethodParameterInfo(self, i) for i in range(len(self.parameter_types)))

    def parameter(self, position: int) -> MethodParameterInfo:
        if not 0 <= position < len(self.parameter_types):
            raise IndexError(f"{self.name} has no parameter at position {position}")
        return MethodParameterInfo(self, position)


@dataclass(frozen=True, slots=True)
class MethodParameterInfo:
    """A parameter, identified by its owning method and ordinal position."""

    target_kind: ClassVar[TargetKind] = TargetKind.METHOD_PARAMETER

    method: MethodInfo
    position: int

    @property
    def name(self) -> str | None:
        names = self.method.parameter_names
        return names[self.position] if self.position < len(names) else None

    @property
    def type(self) -> TypeRef:
        return self.method.parameter_types[self.position]


@dataclass(frozen=True, slots=True)
class ClassInfo:
    """Indexed metadata for one class.

    ``superclass`` is the primary base; ``interface_names`` are the canonical
    names of the remaining declared bases (mixins, ABCs, protocols).
    """

    target_kind: ClassVar[TargetKind] = TargetKind.CLASS

    name: str
    superclass: TypeRef | None = None
    interface_names: tuple[str, ...] = ()
    annotations: tuple[AnnotationInstance, ...] = ()
    fields: tuple[FieldInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "fields", tuple(replace(f, declaring_class=self) for f in self.fields)
        )
        object.__setattr__(
            self, "methods", tuple(replace(m, declaring_class=self) for m in self.methods)
        )

    def get_field(self, name: str) -> FieldInfo | None:
        return next((f for f in self.fields if f.name == name), None)

    def get_method(self, name: str) -> MethodInfo | None:
        return next((m for m in self.methods if m.name == name), None)


AnnotationTarget = Union[ClassInfo, FieldInfo, MethodInfo, MethodParameterInfo, TypeRef]
