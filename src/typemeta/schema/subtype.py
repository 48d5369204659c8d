"""Subtype tests across the static index and the runtime type system.

The index is consulted first because the types under scan may not be
importable by the running process. When the index has nothing for the
subject, or a superclass chain walks out of the index, the remainder of the
test is answered by the runtime type system. Anything neither source can
resolve is not a subtype; no error escapes ``is_subtype``.
"""

from __future__ import annotations

from enum import Enum

import structlog

from typemeta.core.errors import TypeNotFoundError
from typemeta.model.index import IndexView
from typemeta.model.targets import ClassInfo
from typemeta.model.types import TypeRef
from typemeta.schema.resolver import canonical_name
from typemeta.schema.runtime import RuntimeTypeSystem

log = structlog.get_logger()


class _IndexVerdict(Enum):
    MATCH = "match"
    NO_MATCH = "no_match"
    EXHAUSTED = "exhausted"  # chain left the index; runtime must finish the test


class SubtypeTester:
    """Decide whether one type is-a another.

    Args:
        runtime: Runtime type system used as the fallback tier.
        runtime_fallback: When False, questions the index cannot settle are
            answered ``False`` instead of consulting the runtime.
        reflexive: When True, a type is a subtype of itself by name. Off by
            default: without it the answer for ``A is-a A`` comes from the
            index/runtime algorithm like any other pair.
    """

    __slots__ = ("_runtime", "_runtime_fallback", "_reflexive")

    def __init__(
        self,
        runtime: RuntimeTypeSystem | None = None,
        *,
        runtime_fallback: bool = True,
        reflexive: bool = False,
    ) -> None:
        self._runtime = runtime or RuntimeTypeSystem()
        self._runtime_fallback = runtime_fallback
        self._reflexive = reflexive

    def is_subtype(self, index: IndexView, subject: TypeRef, target: TypeRef) -> bool:
        """Test whether ``subject`` is an instance of type ``target``.

        For example, whether ``builtins.list`` is a ``collections.abc.Collection``.
        """
        subject_name = canonical_name(subject)
        target_name = canonical_name(target)

        if self._reflexive and subject_name == target_name:
            return True

        subject_info = index.lookup(subject_name)
        if subject_info is None:
            return self._runtime_check(subject_name, target_name, reason="subject_not_indexed")

        verdict = self._index_check(index, subject_info, target_name)
        if verdict is _IndexVerdict.EXHAUSTED:
            return self._runtime_check(subject_name, target_name, reason="superclass_not_indexed")
        return verdict is _IndexVerdict.MATCH

    def _index_check(self, index: IndexView, subject: ClassInfo, target_name: str) -> _IndexVerdict:
        if target_name in subject.interface_names:
            return _IndexVerdict.MATCH

        seen = {subject.name}
        super_type = subject.superclass
        while super_type is not None:
            super_name = canonical_name(super_type)
            if super_name == target_name:
                return _IndexVerdict.MATCH
            if super_name in seen:
                log.warning("subtype.cyclic_hierarchy", subject=subject.name, at=super_name)
                return _IndexVerdict.NO_MATCH
            seen.add(super_name)
            super_info = index.lookup(super_name)
            if super_info is None:
                return _IndexVerdict.EXHAUSTED
            super_type = super_info.superclass
        return _IndexVerdict.NO_MATCH

    def _runtime_check(self, subject_name: str, target_name: str, *, reason: str) -> bool:
        if not self._runtime_fallback:
            return False
        log.debug(
            "subtype.runtime_fallback",
            subject=subject_name,
            target=target_name,
            reason=reason,
        )
        try:
            subject_cls = self._runtime.load_by_name(subject_name)
            target_cls = self._runtime.load_by_name(target_name)
        except TypeNotFoundError as e:
            log.debug(
                "subtype.unresolvable", subject=subject_name, target=target_name, error=e.message
            )
            return False
        return self._runtime.is_assignable_from(target_cls, subject_cls)
