"""YAML index snapshots.

An external index builder can serialize what it learned about a code base to
YAML; ``load_index`` turns such a snapshot into a ``ClassIndex``. Layout::

    classes:
      - name: app.models.Pet
        superclass: app.models.Animal
        interfaces: [collections.abc.Hashable]
        annotations:
          - name: Schema
            values: {description: A pet}
        fields:
          - name: tags
            type: list[str]
            annotations: [{name: Schema, values: {required: true}}]
        methods:
          - name: rename
            return_type: None
            annotations: [{name: Deprecated}]
            parameters:
              - name: new_name
                type: str
                annotations: [{name: Parameter, values: {in: query}}]

Type strings use the syntax of ``typemeta.model.parsing``. Annotation values
that are mappings with a ``name`` and ``values`` key become nested
annotations; lists become tuples.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from typemeta.core.errors import IndexLoadError, TypeModelError
from typemeta.model.annotations import AnnotationInstance, TargetKind
from typemeta.model.index import ClassIndex
from typemeta.model.parsing import parse_type_ref
from typemeta.model.targets import ClassInfo, FieldInfo, MethodInfo
from typemeta.model.types import TypeRef
from typemeta.schema.resolver import canonical_name

log = structlog.get_logger()


class AnnotationEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    values: dict[str, Any] = Field(default_factory=dict)


class FieldEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    annotations: list[AnnotationEntry] = Field(default_factory=list)


class ParameterEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    annotations: list[AnnotationEntry] = Field(default_factory=list)


class MethodEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    return_type: str | None = None
    parameters: list[ParameterEntry] = Field(default_factory=list)
    annotations: list[AnnotationEntry] = Field(default_factory=list)


class ClassEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    superclass: str | None = None
    interfaces: list[str] = Field(default_factory=list)
    annotations: list[AnnotationEntry] = Field(default_factory=list)
    fields: list[FieldEntry] = Field(default_factory=list)
    methods: list[MethodEntry] = Field(default_factory=list)


class IndexSnapshot(BaseModel):
    """Top-level snapshot document."""

    model_config = ConfigDict(extra="forbid")

    classes: list[ClassEntry] = Field(default_factory=list)


def load_index(path: Path) -> ClassIndex:
    """Load a YAML snapshot into an in-memory index.

    Raises:
        IndexLoadError: If the file is missing, is not YAML, or does not
            describe a valid snapshot.
    """
    if not path.exists():
        raise IndexLoadError.file_not_found(str(path))
    try:
        with path.open() as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise IndexLoadError.parse_error(str(path), str(e)) from e

    try:
        snapshot = IndexSnapshot.model_validate(raw)
    except ValidationError as e:
        err = e.errors()[0]
        location = ".".join(str(loc) for loc in err["loc"])
        raise IndexLoadError.invalid(str(path), location, err["msg"]) from e

    index = build_index(snapshot, source=str(path))
    log.info("index.loaded", path=str(path), classes=len(index))
    return index


def build_index(snapshot: IndexSnapshot, *, source: str = "<memory>") -> ClassIndex:
    """Convert validated snapshot entries to ``ClassInfo`` metadata."""
    classes = []
    for i, entry in enumerate(snapshot.classes):
        try:
            classes.append(_class_info(entry))
        except TypeModelError as e:
            raise IndexLoadError.invalid(source, f"classes.{i}", e.message) from e
    return ClassIndex(classes)


def _class_info(entry: ClassEntry) -> ClassInfo:
    return ClassInfo(
        name=entry.name,
        superclass=parse_type_ref(entry.superclass) if entry.superclass else None,
        interface_names=tuple(canonical_name(parse_type_ref(name)) for name in entry.interfaces),
        annotations=_annotations(entry.annotations, TargetKind.CLASS),
        fields=tuple(
            FieldInfo(
                name=f.name,
                type=parse_type_ref(f.type),
                annotations=_annotations(f.annotations, TargetKind.FIELD),
            )
            for f in entry.fields
        ),
        methods=tuple(_method_info(m) for m in entry.methods),
    )


def _method_info(entry: MethodEntry) -> MethodInfo:
    annotations = list(_annotations(entry.annotations, TargetKind.METHOD))
    for position, param in enumerate(entry.parameters):
        annotations.extend(
            _annotations(param.annotations, TargetKind.METHOD_PARAMETER, position=position)
        )
    return_type: TypeRef | None = None
    if entry.return_type is not None:
        return_type = parse_type_ref(entry.return_type)
    return MethodInfo(
        name=entry.name,
        parameter_names=tuple(p.name for p in entry.parameters),
        parameter_types=tuple(parse_type_ref(p.type) for p in entry.parameters),
        return_type=return_type,
        annotations=tuple(annotations),
    )


def _annotations(
    entries: list[AnnotationEntry],
    target_kind: TargetKind,
    *,
    position: int | None = None,
) -> tuple[AnnotationInstance, ...]:
    return tuple(
        AnnotationInstance(
            name=entry.name,
            values={key: _value(v) for key, v in entry.values.items()},
            target_kind=target_kind,
            position=position,
        )
        for entry in entries
    )


def _value(raw: Any) -> Any:
    if isinstance(raw, list):
        return tuple(_value(v) for v in raw)
    if isinstance(raw, dict) and set(raw) == {"name", "values"}:
        nested = AnnotationEntry.model_validate(raw)
        return AnnotationInstance(
            name=nested.name,
            values={key: _value(v) for key, v in nested.values.items()},
        )
    return raw
