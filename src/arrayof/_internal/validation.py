from __future__ import annotations

from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from arrayof.exceptions import ArrayOfInvalidArgumentError, ArrayOfTypeMismatchError

T = TypeVar("T")

_UNORDERED_OR_SCALAR_ITERABLES: tuple[type[Any], ...] = (str, bytes, bytearray, Mapping, Set)


def is_ordered_collection(candidate: object) -> bool:
    """Return whether ``candidate`` can be consumed as an ordered collection of values.

    Strings and byte strings are iterable but scalar from the caller's point
    of view; mappings and sets are rejected because they carry no meaningful
    element order.

    Args:
        candidate: Value passed where a collection is expected.

    """
    if isinstance(candidate, _UNORDERED_OR_SCALAR_ITERABLES):
        return False
    return isinstance(candidate, Iterable)


@dataclass(frozen=True, slots=True)
class ElementValidator(Generic[T]):
    """Check candidate values against one target type on behalf of one kind."""

    element_type: type[T]
    kind_name: str

    def validate(self, value: object, *, index: int | None = None) -> T:
        """Return ``value`` unchanged if it conforms, otherwise raise.

        Args:
            value: Candidate element.
            index: Position reported in the error, if any.

        Raises:
            ArrayOfTypeMismatchError: If ``value`` is not an instance of the
                target type.

        """
        if not isinstance(value, self.element_type):
            raise ArrayOfTypeMismatchError(self.kind_name, self.element_type, value, index)
        return value

    def validate_collection(self, values: object) -> list[T]:
        """Validate a whole collection and return its elements as a new list.

        Nothing is returned until every element has passed, so callers can
        swap the result in without ever exposing a partially valid state.

        Args:
            values: Candidate collection.

        Raises:
            ArrayOfInvalidArgumentError: If ``values`` is not an ordered collection.
            ArrayOfTypeMismatchError: On the first non-conforming element.

        """
        if not is_ordered_collection(values):
            raise ArrayOfInvalidArgumentError(self.kind_name, self.element_type, values)
        candidates = cast("Iterable[object]", values)
        return [self.validate(value, index=index) for index, value in enumerate(candidates)]


__all__ = ["ElementValidator", "is_ordered_collection"]
