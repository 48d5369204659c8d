"""Runtime type system adapter.

Loads classes by dotted name through ``importlib`` and answers assignability
with ``issubclass``. Used only as a fallback when the static index cannot
answer; loading may import modules, which is a one-time cost owned by the
interpreter's module cache.
"""

from __future__ import annotations

import builtins
import importlib
import sys
from collections.abc import Sequence

import structlog

from typemeta.core.errors import TypeNotFoundError

log = structlog.get_logger()


class RuntimeTypeSystem:
    """Resolve canonical names to live classes.

    Args:
        import_modules: When False, only modules already in ``sys.modules``
            are consulted and nothing new is imported.
        allowed_module_prefixes: When non-empty, only modules whose dotted
            name starts with one of these prefixes may be imported.
    """

    __slots__ = ("_import_modules", "_allowed_prefixes")

    def __init__(
        self,
        *,
        import_modules: bool = True,
        allowed_module_prefixes: Sequence[str] = (),
    ) -> None:
        self._import_modules = import_modules
        self._allowed_prefixes = tuple(allowed_module_prefixes)

    def load_by_name(self, name: str) -> type:
        """Load the class named ``name``.

        Nested classes (``pkg.mod.Outer.Inner``) are resolved by importing the
        longest importable module prefix and walking attributes from there.

        Raises:
            TypeNotFoundError: If no class can be loaded under that name.
        """
        parts = name.split(".")
        if not all(parts):
            raise TypeNotFoundError.not_loadable(name, "malformed name")

        if len(parts) == 1:
            return self._expect_class(name, getattr(builtins, name, None))

        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            module = self._import(module_name)
            if module is None:
                continue
            obj: object = module
            for attr in parts[split:]:
                obj = getattr(obj, attr, None)
                if obj is None:
                    break
            return self._expect_class(name, obj)

        raise TypeNotFoundError.not_loadable(name, "no importable module")

    def is_assignable_from(self, base: type, candidate: type) -> bool:
        """Whether ``candidate`` is ``base`` or a subclass of it."""
        try:
            return issubclass(candidate, base)
        except TypeError:
            # Non-runtime-checkable protocols and generic aliases refuse issubclass
            log.debug(
                "runtime.issubclass_refused",
                base=base.__qualname__,
                candidate=candidate.__qualname__,
            )
            return False
        except Exception:
            # Metaclass __subclasscheck__ and ABC __subclasshook__ run arbitrary code
            log.warning(
                "runtime.issubclass_failed",
                base=base.__qualname__,
                candidate=candidate.__qualname__,
                exc_info=True,
            )
            return False

    def _import(self, module_name: str) -> object | None:
        module = sys.modules.get(module_name)
        if module is not None:
            return module
        if not self._import_modules or not self._may_import(module_name):
            return None
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError:
            return None
        except Exception:
            # Importing runs arbitrary module code; a broken module is just unloadable
            log.warning("runtime.import_failed", module=module_name, exc_info=True)
            return None

    def _may_import(self, module_name: str) -> bool:
        if not self._allowed_prefixes:
            return True
        return any(
            module_name == prefix or module_name.startswith(f"{prefix}.")
            for prefix in self._allowed_prefixes
        )

    @staticmethod
    def _expect_class(name: str, obj: object) -> type:
        if obj is None:
            raise TypeNotFoundError.not_loadable(name, "no such attribute")
        if not isinstance(obj, type):
            raise TypeNotFoundError.not_loadable(name, f"not a class ({type(obj).__name__})")
        return obj
