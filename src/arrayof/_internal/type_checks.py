from __future__ import annotations

import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_element_type(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate can serve as a container's target type.

    Protocols qualify only when decorated with ``runtime_checkable``; plain
    protocols reject ``isinstance`` checks at runtime.

    Args:
        candidate: Object a type name resolved to.

    """
    if not is_runtime_class(candidate):
        return False
    if getattr(candidate, "_is_protocol", False):
        return bool(getattr(candidate, "_is_runtime_protocol", False))
    return True


__all__ = ["is_element_type", "is_runtime_class"]
