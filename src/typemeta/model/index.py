"""Read-only view over statically indexed class metadata.

An index is necessarily incomplete: absence of a name means "not indexed",
never "does not exist".
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from typemeta.model.targets import ClassInfo


@runtime_checkable
class IndexView(Protocol):
    """Queryable collection of class metadata keyed by canonical name."""

    def lookup(self, name: str) -> ClassInfo | None: ...


class ClassIndex:
    """In-memory ``IndexView`` built once from class metadata."""

    __slots__ = ("_classes",)

    def __init__(self, classes: Iterable[ClassInfo] = ()) -> None:
        self._classes: dict[str, ClassInfo] = {info.name: info for info in classes}

    def lookup(self, name: str) -> ClassInfo | None:
        return self._classes.get(name)

    def known_classes(self) -> Iterator[ClassInfo]:
        return iter(self._classes.values())

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __repr__(self) -> str:
        return f"ClassIndex({len(self._classes)} classes)"
