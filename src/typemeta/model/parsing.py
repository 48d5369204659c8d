"""Textual type references.

Syntax accepted by ``parse_type_ref``:

- ``decimal.Decimal``: a class, by dotted path; bare builtin names such as
  ``str`` are qualified to ``builtins.str``
- ``int32``, ``float64``: primitives (see ``Primitive``)
- ``list[X]``, ``set[X]``, ``frozenset[X]``, ``tuple[X, ...]`` and their
  ``typing``/``collections.abc`` spellings: arrays of ``X``
- ``~T`` and ``~T: pkg.Bound``: type variables, unbounded or bounded
- ``typing.Optional[X]`` and ``X | None``: ``X``

Any other subscripted name is a class; its arguments are dropped.
"""

from __future__ import annotations

import builtins
import re

from typemeta.core.errors import TypeModelError
from typemeta.model.types import Primitive, TypeRef, array_of, class_type, primitive, wildcard

_NAME_RE = re.compile(r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")

_PRIMITIVES = {p.value: p for p in Primitive}

_ARRAY_CONTAINERS: dict[str, str] = {
    "builtins.list": "builtins.list",
    "typing.List": "builtins.list",
    "builtins.set": "builtins.set",
    "typing.Set": "builtins.set",
    "builtins.frozenset": "builtins.frozenset",
    "typing.FrozenSet": "builtins.frozenset",
    "collections.abc.Sequence": "collections.abc.Sequence",
    "typing.Sequence": "collections.abc.Sequence",
}

_TUPLES = frozenset({"builtins.tuple", "typing.Tuple"})
_OPTIONALS = frozenset({"typing.Optional", "Optional"})


def qualify(name: str) -> str:
    """Qualify a bare builtin type name; other names are returned as is."""
    if "." not in name and isinstance(getattr(builtins, name, None), type):
        return f"builtins.{name}"
    return name


def parse_type_ref(text: str) -> TypeRef:
    """Parse a textual type reference.

    Raises:
        TypeModelError: If the text is not a well-formed reference.
    """
    source = text.strip()
    if not source:
        raise TypeModelError.invalid_type_ref(text, "empty reference")

    if source.startswith("~"):
        return _parse_wildcard(text, source[1:])

    union = _split_top_level(source, "|")
    if len(union) > 1:
        members = [m for m in union if m != "None"]
        if len(members) != 1:
            raise TypeModelError.invalid_type_ref(text, "only 'X | None' unions are supported")
        return parse_type_ref(members[0])

    if source.endswith("]"):
        return _parse_subscript(text, source)

    if source in _PRIMITIVES:
        return primitive(_PRIMITIVES[source])
    return class_type(_checked_name(text, source))


def _parse_wildcard(text: str, body: str) -> TypeRef:
    name, sep, bound = body.partition(":")
    name = name.strip()
    if not name.isidentifier():
        raise TypeModelError.invalid_type_ref(text, "type variable needs a name")
    if not sep:
        return wildcard(name)
    if not bound.strip():
        raise TypeModelError.invalid_type_ref(text, "missing upper bound after ':'")
    return wildcard(name, parse_type_ref(bound))


def _parse_subscript(text: str, source: str) -> TypeRef:
    open_at = source.find("[")
    if open_at <= 0:
        raise TypeModelError.invalid_type_ref(text, "unbalanced brackets")
    base = qualify(_checked_name(text, source[:open_at].strip()))
    args = _split_top_level(source[open_at + 1 : -1], ",")
    if not args or any(not a for a in args):
        raise TypeModelError.invalid_type_ref(text, "empty type argument")

    if base in _OPTIONALS:
        if len(args) != 1:
            raise TypeModelError.invalid_type_ref(text, "Optional takes one argument")
        return parse_type_ref(args[0])

    if base in _ARRAY_CONTAINERS:
        if len(args) != 1:
            raise TypeModelError.invalid_type_ref(text, f"{base} takes one argument")
        return array_of(parse_type_ref(args[0]), container=_ARRAY_CONTAINERS[base])

    if base in _TUPLES and len(args) == 2 and args[1] == "...":
        return array_of(parse_type_ref(args[0]), container="builtins.tuple")

    return class_type(base)


def _checked_name(text: str, name: str) -> str:
    if not _NAME_RE.match(name):
        raise TypeModelError.invalid_type_ref(text, f"'{name}' is not a dotted name")
    return qualify(name)


def _split_top_level(source: str, separator: str) -> list[str]:
    """Split on ``separator`` outside of brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in source:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth < 0:
                break
        if ch == separator and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    if depth != 0:
        raise TypeModelError.invalid_type_ref(source, "unbalanced brackets")
    parts.append("".join(current).strip())
    return parts
