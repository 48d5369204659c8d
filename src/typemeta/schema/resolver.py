"""Canonical names for type references.

Arrays are keyed by their element type and type variables by their upper
bound, so every reference reduces to a single dotted name usable as an index
or format-table key.
"""

from __future__ import annotations

from typemeta.core.errors import TypeModelError
from typemeta.model.types import OBJECT_TYPE, Primitive, TypeKind, TypeRef

# ctypes spellings that box each primitive; aliases such as c_int32 included.
_PRIMITIVE_WRAPPERS: dict[Primitive, frozenset[str]] = {
    Primitive.BOOL: frozenset({"ctypes.c_bool"}),
    Primitive.BYTE: frozenset({"ctypes.c_byte", "ctypes.c_int8"}),
    Primitive.CHAR: frozenset({"ctypes.c_char"}),
    Primitive.SHORT: frozenset({"ctypes.c_short", "ctypes.c_int16"}),
    Primitive.INT: frozenset({"ctypes.c_int", "ctypes.c_int32"}),
    Primitive.LONG: frozenset({"ctypes.c_longlong", "ctypes.c_int64"}),
    Primitive.FLOAT: frozenset({"ctypes.c_float"}),
    Primitive.DOUBLE: frozenset({"ctypes.c_double"}),
}


def canonical_name(type_ref: TypeRef) -> str:
    if type_ref.kind is TypeKind.ARRAY:
        if type_ref.component is None:
            raise TypeModelError.invalid_type_ref(type_ref.name, "array without a component type")
        return canonical_name(type_ref.component)
    if type_ref.kind is TypeKind.WILDCARD:
        return canonical_name(get_bound(type_ref))
    return type_ref.name


def get_bound(type_ref: TypeRef) -> TypeRef:
    """Upper bound of a type variable, ``builtins.object`` when unbounded."""
    return type_ref.upper_bound if type_ref.upper_bound is not None else OBJECT_TYPE


def resolve_wildcard(type_ref: TypeRef) -> TypeRef:
    if type_ref.kind is not TypeKind.WILDCARD:
        return type_ref
    return get_bound(type_ref)


def equal_types(a: TypeRef, b: TypeRef) -> bool:
    """Same name, or a primitive and its wrapper in either order."""
    if a.name == b.name:
        return True
    return equal_wrapped_types(a, b) or equal_wrapped_types(b, a)


def equal_wrapped_types(primitive_candidate: TypeRef, wrapped_candidate: TypeRef) -> bool:
    return (
        primitive_candidate.kind is TypeKind.PRIMITIVE
        and wrapped_candidate.kind is TypeKind.CLASS
        and is_primitive_wrapper(primitive_candidate.as_primitive(), wrapped_candidate)
    )


def is_primitive_wrapper(primitive: Primitive, wrapped: TypeRef) -> bool:
    """Whether ``wrapped`` names the ctypes class boxing ``primitive``.

    Raises:
        TypeModelError: If ``primitive`` has no wrapper entry.
    """
    wrappers = _PRIMITIVE_WRAPPERS.get(primitive)
    if wrappers is None:
        raise TypeModelError.unknown_primitive(str(getattr(primitive, "value", primitive)))
    return wrapped.name in wrappers
