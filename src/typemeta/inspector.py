"""Single entry point for a scanning driver.

``TypeInspector`` binds one index to the format table, subtype tester and
annotation accessor configured for a scan. It holds no mutable state, so one
instance may be shared by concurrent callers.
"""

from __future__ import annotations

from typing import Any

import structlog

from typemeta.config.models import TypeMetaConfig
from typemeta.model.annotations import PROP_VALUE, AnnotationInstance
from typemeta.model.index import ClassIndex, IndexView
from typemeta.model.targets import AnnotationTarget, ClassInfo
from typemeta.model.types import TypeRef
from typemeta.schema import annotations
from typemeta.schema.formats import DEFAULT_FORMAT_TABLE, FormatTable, TypeWithFormat
from typemeta.schema.runtime import RuntimeTypeSystem
from typemeta.schema.subtype import SubtypeTester

log = structlog.get_logger()


class TypeInspector:
    """Classification, subtype and annotation queries over one index."""

    __slots__ = ("_index", "_formats", "_subtypes")

    def __init__(
        self,
        index: IndexView | None = None,
        *,
        formats: FormatTable = DEFAULT_FORMAT_TABLE,
        subtypes: SubtypeTester | None = None,
    ) -> None:
        self._index: IndexView = index if index is not None else ClassIndex()
        self._formats = formats
        self._subtypes = subtypes or SubtypeTester()

    @classmethod
    def from_config(cls, config: TypeMetaConfig, index: IndexView | None = None) -> TypeInspector:
        resolution = config.resolution
        runtime = RuntimeTypeSystem(
            import_modules=resolution.import_modules,
            allowed_module_prefixes=resolution.allowed_module_prefixes,
        )
        overrides = {
            name: override.to_type_with_format()
            for name, override in config.formats.overrides.items()
        }
        if overrides:
            log.debug("inspector.format_overrides", count=len(overrides))
        return cls(
            index,
            formats=DEFAULT_FORMAT_TABLE.with_overrides(overrides),
            subtypes=SubtypeTester(
                runtime,
                runtime_fallback=resolution.runtime_fallback,
                reflexive=resolution.reflexive_subtypes,
            ),
        )

    @property
    def index(self) -> IndexView:
        return self._index

    @property
    def formats(self) -> FormatTable:
        return self._formats

    def classify(self, type_ref: TypeRef) -> TypeWithFormat:
        return self._formats.classify(type_ref)

    def is_a(self, subject: TypeRef, target: TypeRef) -> bool:
        return self._subtypes.is_subtype(self._index, subject, target)

    def annotations_of(self, target: AnnotationTarget | None) -> tuple[AnnotationInstance, ...]:
        return annotations.get_annotations(target)

    def find_annotation(
        self, target: AnnotationTarget | None, name: str
    ) -> AnnotationInstance | None:
        return annotations.get_annotation(target, name)

    def annotation_value(
        self,
        target: AnnotationTarget | None,
        name: str,
        prop: str = PROP_VALUE,
        default: Any = None,
    ) -> Any:
        return annotations.get_annotation_value(target, name, prop, default)

    def declaring_class(self, target: AnnotationTarget | None) -> ClassInfo | None:
        return annotations.get_declaring_class(target)
