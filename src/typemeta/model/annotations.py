"""Annotation instances recorded by the index builder.

An annotation is decorator or ``typing.Annotated`` metadata captured as a name
plus property values. Each instance remembers what it was recorded against:
the target kind and, for method parameters, the ordinal position. Parameter
annotations are stored on the owning method alongside the method's own.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

PROP_VALUE = "value"
"""Primary property slot of an annotation."""


class TargetKind(str, Enum):
    """Kinds of program element that carry annotations."""

    CLASS = "class"
    FIELD = "field"
    METHOD = "method"
    METHOD_PARAMETER = "method_parameter"
    TYPE = "type"


@dataclass(frozen=True, slots=True)
class AnnotationInstance:
    """A recorded annotation.

    Values are scalars, tuples, or nested ``AnnotationInstance`` objects, held
    in a read-only mapping.
    """

    name: str
    values: Mapping[str, Any] = field(default_factory=dict, hash=False)
    target_kind: TargetKind | None = None
    position: int | None = None  # METHOD_PARAMETER only

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def value(self, prop: str = PROP_VALUE, default: Any = None) -> Any:
        return self.values.get(prop, default)

    def has(self, prop: str) -> bool:
        return prop in self.values
