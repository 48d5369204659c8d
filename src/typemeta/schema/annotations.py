"""Uniform annotation lookup over annotatable program elements.

Dispatches on ``target_kind`` across classes, fields, methods, method
parameters and type references. Parameters have no annotation storage of
their own: their annotations are recovered from the owning method's storage
by recorded target kind and position. A ``None`` target has no annotations.
"""

from __future__ import annotations

from typing import Any

from typemeta.model.annotations import PROP_VALUE, AnnotationInstance, TargetKind
from typemeta.model.targets import AnnotationTarget, ClassInfo, MethodParameterInfo

SCHEMA_ANNOTATION = "Schema"


def get_annotations(target: AnnotationTarget | None) -> tuple[AnnotationInstance, ...]:
    """Annotations attached to ``target``.

    Class annotations are the class's own; inherited annotations are found by
    walking the hierarchy with the subtype tester.
    """
    if target is None:
        return ()
    kind = target.target_kind
    if kind is TargetKind.CLASS or kind is TargetKind.FIELD or kind is TargetKind.TYPE:
        return target.annotations
    if kind is TargetKind.METHOD:
        return tuple(
            a for a in target.annotations if a.target_kind is not TargetKind.METHOD_PARAMETER
        )
    if kind is TargetKind.METHOD_PARAMETER:
        return _parameter_annotations(target)
    return ()


def _parameter_annotations(parameter: MethodParameterInfo) -> tuple[AnnotationInstance, ...]:
    return tuple(
        a
        for a in parameter.method.annotations
        if a.target_kind is TargetKind.METHOD_PARAMETER and a.position == parameter.position
    )


def has_annotation(target: AnnotationTarget | None, name: str) -> bool:
    return get_annotation(target, name) is not None


def get_annotation(target: AnnotationTarget | None, name: str) -> AnnotationInstance | None:
    """First annotation on ``target`` called ``name``, or None."""
    return next((a for a in get_annotations(target) if a.name == name), None)


def get_schema_annotation(target: AnnotationTarget | None) -> AnnotationInstance | None:
    return get_annotation(target, SCHEMA_ANNOTATION)


def get_annotation_value(
    target: AnnotationTarget | None,
    name: str,
    prop: str = PROP_VALUE,
    default: Any = None,
) -> Any:
    """Retrieve a property of the annotation ``name`` bound to ``target``.

    Args:
        target: The annotated element; None is treated as unannotated.
        name: Name of the annotation holding the property.
        prop: Property to read, the annotation's primary ``value`` slot by default.
        default: Returned when the annotation or the property is missing.

    Returns:
        The property value as recorded by the index builder.
    """
    annotation = get_annotation(target, name)
    if annotation is None:
        return default
    return annotation_value(annotation, prop, default)


def annotation_value(
    annotation: AnnotationInstance, prop: str = PROP_VALUE, default: Any = None
) -> Any:
    return annotation.value(prop, default)


def get_declaring_class(target: AnnotationTarget | None) -> ClassInfo | None:
    """Class declaring a field, a method, or a parameter's method.

    Classes and type references have no declaring class.
    """
    if target is None:
        return None
    kind = target.target_kind
    if kind is TargetKind.FIELD or kind is TargetKind.METHOD:
        return target.declaring_class
    if kind is TargetKind.METHOD_PARAMETER:
        return target.method.declaring_class
    return None
