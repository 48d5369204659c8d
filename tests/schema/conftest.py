"""Shared fixtures for schema tests."""

from __future__ import annotations

import pytest

from typemeta.model.annotations import AnnotationInstance, TargetKind
from typemeta.model.index import ClassIndex
from typemeta.model.parsing import parse_type_ref
from typemeta.model.targets import ClassInfo, FieldInfo, MethodInfo
from typemeta.model.types import class_type


def _ann(
    name: str, kind: TargetKind, position: int | None = None, /, **values: object
) -> AnnotationInstance:
    return AnnotationInstance(name=name, values=values, target_kind=kind, position=position)


@pytest.fixture
def pet_class() -> ClassInfo:
    """app.models.Pet with annotated fields and a method with annotated parameters."""
    return ClassInfo(
        name="app.models.Pet",
        superclass=class_type("app.models.Animal"),
        interface_names=("collections.abc.Hashable",),
        annotations=(_ann("Schema", TargetKind.CLASS, description="A pet"),),
        fields=(
            FieldInfo(
                name="name",
                type=parse_type_ref("str"),
                annotations=(_ann("Schema", TargetKind.FIELD, required=True),),
            ),
            FieldInfo(name="tags", type=parse_type_ref("list[str]")),
        ),
        methods=(
            MethodInfo(
                name="rename",
                parameter_names=("new_name", "notify"),
                parameter_types=(parse_type_ref("str"), parse_type_ref("bool")),
                return_type=parse_type_ref("None"),
                annotations=(
                    _ann("Deprecated", TargetKind.METHOD),
                    _ann("Parameter", TargetKind.METHOD_PARAMETER, 0, name="new_name"),
                    _ann("Parameter", TargetKind.METHOD_PARAMETER, 1, name="notify"),
                    _ann("Schema", TargetKind.METHOD_PARAMETER, 1, description="Send an email"),
                ),
            ),
        ),
    )


@pytest.fixture
def pet_index(pet_class: ClassInfo) -> ClassIndex:
    """Pet hierarchy plus a stdlib class whose superclass is not indexed.

    app.models.Dog -> app.models.Pet -> app.models.Animal -> builtins.object
    app.models.Registry -> collections.OrderedDict -> builtins.dict (not indexed)
    """
    return ClassIndex(
        [
            ClassInfo(
                name="app.models.Animal",
                superclass=class_type("builtins.object"),
                annotations=(_ann("Schema", TargetKind.CLASS, description="Base animal"),),
            ),
            pet_class,
            ClassInfo(name="app.models.Dog", superclass=class_type("app.models.Pet")),
            ClassInfo(name="app.models.Registry", superclass=class_type("collections.OrderedDict")),
            ClassInfo(name="collections.OrderedDict", superclass=class_type("builtins.dict")),
        ]
    )
