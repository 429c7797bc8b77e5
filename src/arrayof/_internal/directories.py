from __future__ import annotations

import builtins
import importlib
import sys
from collections.abc import Callable, Iterator
from typing import Any, Protocol, TypeVar, overload, runtime_checkable

from arrayof._internal.type_checks import is_element_type

C = TypeVar("C", bound=type[Any])


@runtime_checkable
class TypeDirectory(Protocol):
    """Answer which type a name denotes.

    Kind resolution never queries the interpreter directly; it asks the
    directory bound to the kind. Any object with a compatible ``lookup`` can
    be passed as ``directory=`` when declaring a kind.
    """

    def lookup(self, name: str) -> type[Any] | None:
        """Return the type denoted by ``name`` or ``None`` when there is none."""


class TypeRegistry:
    """Explicit name-to-type directory.

    Types are registered by name, either directly or with the
    ``register`` decorator:

        registry = TypeRegistry()

        @registry.register
        class Widget: ...

        class ArrayOfWidget(ArrayOf, directory=registry): ...

    Lookups of dotted names fall back to their final segment, so a kind's
    qualified candidate ``"app.models.Widget"`` finds a type registered as
    ``"Widget"``.
    """

    def __init__(self, types: dict[str, type[Any]] | None = None) -> None:
        self._types: dict[str, type[Any]] = {}
        for name, registered in (types or {}).items():
            self.add(registered, name=name)

    def add(self, registered: type[Any], *, name: str | None = None) -> None:
        """Register ``registered`` under ``name`` (defaults to its ``__name__``).

        Args:
            registered: Type to register. Must be usable with ``isinstance``.
            name: Registration name.

        Raises:
            TypeError: If ``registered`` is not a usable target type.

        """
        if not is_element_type(registered):
            msg = f"Only runtime-checkable classes can be registered, got {registered!r}."
            raise TypeError(msg)
        self._types[name or registered.__name__] = registered

    @overload
    def register(self, registered: C, *, name: str | None = None) -> C: ...

    @overload
    def register(self, registered: None = None, *, name: str | None = None) -> Callable[[C], C]: ...

    def register(
        self,
        registered: C | None = None,
        *,
        name: str | None = None,
    ) -> C | Callable[[C], C]:
        """Register a type, usable bare (``@registry.register``) or with arguments.

        Args:
            registered: Type to register when used without parentheses.
            name: Registration name, defaults to the type's ``__name__``.

        """

        def decorator(target: C) -> C:
            self.add(target, name=name)
            return target

        if registered is None:
            return decorator
        return decorator(registered)

    def lookup(self, name: str) -> type[Any] | None:
        found = self._types.get(name)
        if found is None and "." in name:
            found = self._types.get(name.rsplit(".", 1)[-1])
        return found

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeRegistry({sorted(self._types)!r})"


class NamespaceTypeDirectory:
    """Resolve names the way Python code in a given module would see them.

    Simple names are looked up in the module's globals and then in
    ``builtins``. Dotted names are treated as import paths: the longest
    importable module prefix is imported and the rest is followed as
    attributes.
    """

    def __init__(self, module_name: str | None = None) -> None:
        self.module_name = module_name

    def lookup(self, name: str) -> type[Any] | None:
        if not name:
            return None
        if "." in name:
            found = _import_dotted(name)
        else:
            found = self._namespace().get(name, getattr(builtins, name, None))
        return found if is_element_type(found) else None

    def _namespace(self) -> dict[str, Any]:
        if self.module_name is None:
            return {}
        module = sys.modules.get(self.module_name)
        if module is None:
            return {}
        return vars(module)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamespaceTypeDirectory):
            return NotImplemented
        return self.module_name == other.module_name

    def __hash__(self) -> int:
        return hash((NamespaceTypeDirectory, self.module_name))

    def __repr__(self) -> str:
        return f"NamespaceTypeDirectory({self.module_name!r})"


def _import_dotted(path: str) -> object | None:
    parts = path.split(".")
    if not all(parts):
        return None
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            found: object = importlib.import_module(module_name)
        except ImportError:
            continue
        for attribute in parts[split:]:
            found = getattr(found, attribute, None)
            if found is None:
                return None
        return found
    return None


__all__ = ["NamespaceTypeDirectory", "TypeDirectory", "TypeRegistry"]
