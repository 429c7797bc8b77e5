from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from arrayof._internal.directories import TypeDirectory
from arrayof._internal.type_checks import is_element_type
from arrayof.exceptions import (
    ArrayOfInvalidDeclarationError,
    ArrayOfInvalidKindNameError,
    ArrayOfUnresolvableTargetTypeError,
)
from arrayof.marker_strip import MarkerStrip

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "ArrayOf"

ResolutionStrategy = Literal["element_type", "name", "override"]
OverrideAccessor = Callable[[], str | None]


@dataclass(frozen=True, slots=True)
class KindDeclaration:
    """Everything resolution needs to know about one container kind.

    Attributes:
        kind_name: Fully qualified kind identity, used for the name-derived
            strategy and in error messages.
        directory: Directory that answers which type a name denotes.
        element_type: Explicitly bound target type. When set, names are
            never consulted.
        override: Accessor returning an explicit target type name, or
            ``None`` for no override.
        marker: Naming-convention marker.
        marker_strip: How the marker is removed from the simple name.

    """

    kind_name: str
    directory: TypeDirectory
    element_type: type[Any] | None = None
    override: OverrideAccessor | None = None
    marker: str = DEFAULT_MARKER
    marker_strip: MarkerStrip = MarkerStrip.PREFIX

    def __post_init__(self) -> None:
        if not self.marker:
            msg = f"{self.kind_name} declares an empty marker."
            raise ArrayOfInvalidDeclarationError(msg)
        if not isinstance(self.marker_strip, MarkerStrip):
            msg = f"{self.kind_name} declares an invalid marker_strip {self.marker_strip!r}."
            raise ArrayOfInvalidDeclarationError(msg)
        if not isinstance(self.directory, TypeDirectory):
            msg = f"{self.kind_name} declares a directory without lookup(): {self.directory!r}."
            raise ArrayOfInvalidDeclarationError(msg)
        if self.element_type is not None and not is_element_type(self.element_type):
            msg = (
                f"{self.kind_name} declares element_type={self.element_type!r}, "
                "expected a class or a runtime_checkable protocol."
            )
            raise ArrayOfInvalidDeclarationError(msg)

    @property
    def simple_name(self) -> str:
        return self.kind_name.rsplit(".", 1)[-1]


@dataclass(frozen=True, slots=True)
class ResolvedKind:
    """Outcome of a successful resolution."""

    kind_name: str
    element_type: type[Any]
    strategy: ResolutionStrategy


def resolve_target_type(declaration: KindDeclaration) -> ResolvedKind:
    """Resolve the target type of a kind without caching.

    Strategies are tried in order: the explicitly bound ``element_type``, the
    type named by the kind's simple name with the marker removed, then the
    name returned by the override accessor. A kind whose simple name does not
    begin with the marker may still resolve through its override.

    Args:
        declaration: Kind to resolve.

    Returns:
        The resolved kind.

    Raises:
        ArrayOfInvalidKindNameError: If the name lacks the marker and the
            override does not resolve.
        ArrayOfUnresolvableTargetTypeError: If the name has the marker but
            neither the derived name nor the override resolves.

    """
    if declaration.element_type is not None:
        return ResolvedKind(declaration.kind_name, declaration.element_type, "element_type")

    simple_name = declaration.simple_name
    has_marker = simple_name.startswith(declaration.marker)
    candidates: list[str] = []

    if has_marker:
        derived = declaration.marker_strip.strip(simple_name, declaration.marker)
        if derived:
            candidates.append(derived)
            found = _lookup(declaration.directory, derived)
            if found is not None:
                return ResolvedKind(declaration.kind_name, found, "name")

    override_name = declaration.override() if declaration.override is not None else None
    if override_name:
        candidates.append(override_name)
        found = _lookup(declaration.directory, override_name)
        if found is not None:
            return ResolvedKind(declaration.kind_name, found, "override")

    if not has_marker:
        raise ArrayOfInvalidKindNameError(declaration.kind_name, declaration.marker)
    raise ArrayOfUnresolvableTargetTypeError(declaration.kind_name, candidates)


def _lookup(directory: TypeDirectory, name: str) -> type[Any] | None:
    found = directory.lookup(name)
    return found if is_element_type(found) else None


class KindResolver:
    """Resolve container kinds and memoize the result per kind class.

    The cache is insert-once and keyed weakly by the kind class, so kinds
    created and dropped at runtime (for example inside tests) do not leak.
    Failures are never cached; a misconfigured kind fails the same way on
    every attempt.
    """

    def __init__(self) -> None:
        self._cache: weakref.WeakKeyDictionary[type[Any], ResolvedKind] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = threading.Lock()

    def resolve(self, kind: type[Any], declaration: KindDeclaration) -> ResolvedKind:
        """Return the cached resolution of ``kind``, resolving it on first use.

        Args:
            kind: Kind class used as the cache key.
            declaration: Declaration of ``kind``, consulted only on a cache miss.

        """
        cached = self._cache.get(kind)
        if cached is not None:
            return cached

        resolved = resolve_target_type(declaration)
        with self._lock:
            cached = self._cache.setdefault(kind, resolved)
        if cached is resolved:
            logger.debug(
                "Resolved element type of %s to %s via %s",
                resolved.kind_name,
                resolved.element_type.__qualname__,
                resolved.strategy,
            )
        return cached

    def is_resolved(self, kind: type[Any]) -> bool:
        return kind in self._cache

    def forget(self, kind: type[Any]) -> None:
        with self._lock:
            self._cache.pop(kind, None)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


DEFAULT_RESOLVER = KindResolver()


__all__ = [
    "DEFAULT_MARKER",
    "DEFAULT_RESOLVER",
    "KindDeclaration",
    "KindResolver",
    "ResolutionStrategy",
    "ResolvedKind",
    "resolve_target_type",
]
