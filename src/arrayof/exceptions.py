from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _type_label(value: object) -> str:
    qualname = getattr(value, "__qualname__", None)
    if isinstance(qualname, str):
        return qualname
    return repr(value)


class ArrayOfError(Exception):
    """Represent a base class for all arrayof-specific failures.

    Catch this type when you want to handle any arrayof error path without
    matching each concrete exception class individually.
    """


class ArrayOfConfigurationError(ArrayOfError):
    """Signal a container kind whose target type cannot be determined.

    These errors describe the kind declaration, not the data passed to it, so
    they are permanent: every construction attempt of the same kind fails the
    same way until the declaration is fixed.
    """


class ArrayOfInvalidKindNameError(ArrayOfConfigurationError):
    """Signal a kind name that lacks the naming-convention marker.

    Raised on construction when the kind's simple name does not begin with the
    marker (``"ArrayOf"`` by default) and ``element_type_name()`` does not name
    a resolvable type either.

    Typical fixes include renaming the kind (for example ``ArrayOfWidget``),
    overriding ``element_type_name()``, or binding the type explicitly with
    ``class Widgets(ArrayOf[Widget])``.
    """

    def __init__(self, kind_name: str, marker: str) -> None:
        self.kind_name = kind_name
        self.marker = marker
        super().__init__(f'Kind name of {kind_name} must begin with "{marker}"')


class ArrayOfUnresolvableTargetTypeError(ArrayOfConfigurationError):
    """Signal that no resolution strategy produced a usable target type.

    Raised when the name derived from the kind does not denote a type in the
    kind's type directory and the ``element_type_name()`` override is missing
    or names nothing resolvable. Names that resolve to objects unusable with
    ``isinstance`` (for example protocols without ``runtime_checkable``) are
    treated as unresolvable.

    Typical fixes include defining or importing the target type in the kind's
    module, registering it in the ``TypeRegistry`` passed as ``directory=``,
    or returning a valid name from ``element_type_name()``.
    """

    def __init__(self, kind_name: str, candidates: Sequence[str]) -> None:
        self.kind_name = kind_name
        self.candidates = tuple(candidates)
        tried = ", ".join(repr(candidate) for candidate in self.candidates) or "none"
        super().__init__(
            f"{kind_name} must mention a valid type in its name or element_type_name() "
            f"must return a valid type name (tried: {tried})",
        )


class ArrayOfInvalidArgumentError(ArrayOfError, TypeError):
    """Signal input that is not an ordered collection.

    Raised by construction, ``replace_all``, ``extend`` and slice assignment
    when the input is a scalar, a string, a mapping or an unordered set.
    """

    def __init__(self, kind_name: str, element_type: type[Any], value: object) -> None:
        self.kind_name = kind_name
        self.element_type = element_type
        self.value = value
        super().__init__(
            f"{kind_name} accepts only ordered collections of instances of "
            f"{_type_label(element_type)}, got {_type_label(type(value))}",
        )


class ArrayOfTypeMismatchError(ArrayOfError, TypeError):
    """Signal an element that is not an instance of the kind's target type.

    ``index`` is the position of the offending value inside the input
    collection when a whole collection was being validated, otherwise ``None``.
    """

    def __init__(
        self,
        kind_name: str,
        element_type: type[Any],
        value: object,
        index: int | None = None,
    ) -> None:
        self.kind_name = kind_name
        self.element_type = element_type
        self.value = value
        self.index = index
        position = "" if index is None else f" at index {index}"
        super().__init__(
            f"{kind_name} accepts only instances of {_type_label(element_type)}, "
            f"got {_type_label(type(value))}{position}",
        )


class ArrayOfInvalidDeclarationError(ArrayOfConfigurationError):
    """Signal invalid class keywords on a kind declaration.

    Raised while the ``ArrayOf`` subclass statement executes, for example when
    ``marker`` is empty, ``element_type`` is not a runtime-checkable class, or
    ``directory`` has no ``lookup`` method.
    """
