from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator, MutableSequence
from typing import Any, Generic, SupportsIndex, TypeVar, overload

from typing_extensions import Self

from arrayof._internal.type_checks import is_element_type
from arrayof._internal.validation import ElementValidator
from arrayof.exceptions import ArrayOfInvalidDeclarationError

T = TypeVar("T")


class TypedArray(MutableSequence[T], Generic[T]):
    """Ordered collection that only ever holds instances of one type.

    The target type is passed explicitly:

        widgets = TypedArray(Widget, [Widget(), Widget()])
        widgets.append(Widget())
        widgets.append("not a widget")  # raises ArrayOfTypeMismatchError

    Every entry point that can introduce a value validates it before storage
    is touched. Entry points taking a whole collection (construction,
    ``replace_all``, ``extend``, ``+=``, slice assignment) validate every
    element first and then commit in one step, so a failing call leaves the
    container exactly as it was.

    Removal and reordering (``del``, ``pop``, ``remove``, ``clear``, ``sort``,
    ``reverse``) cannot break the invariant and are not checked.
    """

    _validator: ElementValidator[T]
    _items: list[T]

    def __init__(
        self,
        element_type: type[T],
        items: Iterable[T] = (),
        *,
        kind_name: str | None = None,
    ) -> None:
        """Create a container bound to ``element_type``.

        Args:
            element_type: Class (or ``runtime_checkable`` protocol) every
                element must be an instance of.
            items: Initial elements, in order.
            kind_name: Identity shown in error messages. Defaults to
                ``TypedArray[<type>]``.

        Raises:
            ArrayOfInvalidDeclarationError: If ``element_type`` cannot be used
                with ``isinstance``.
            ArrayOfInvalidArgumentError: If ``items`` is not an ordered collection.
            ArrayOfTypeMismatchError: If any initial element does not conform.

        """
        if not is_element_type(element_type):
            msg = (
                f"TypedArray element_type must be a class or a runtime_checkable "
                f"protocol, got {element_type!r}."
            )
            raise ArrayOfInvalidDeclarationError(msg)
        validator = ElementValidator(
            element_type,
            kind_name or f"TypedArray[{element_type.__qualname__}]",
        )
        self._bind(validator, validator.validate_collection(items))

    def _bind(self, validator: ElementValidator[T], items: list[T]) -> None:
        self._validator = validator
        self._items = items

    def _spawn(self, items: list[T]) -> Self:
        clone = object.__new__(type(self))
        clone._bind(self._validator, items)
        return clone

    @property
    def element_type(self) -> type[T]:
        """Target type enforced on every element."""
        return self._validator.element_type

    @property
    def kind_name(self) -> str:
        """Identity used in error messages."""
        return self._validator.kind_name

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    @overload
    def __getitem__(self, index: SupportsIndex) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Self: ...

    def __getitem__(self, index: SupportsIndex | slice) -> T | Self:
        if isinstance(index, slice):
            return self._spawn(self._items[index])
        return self._items[index]

    @overload
    def __setitem__(self, index: SupportsIndex, value: T) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, index: SupportsIndex | slice, value: Any) -> None:
        """Set one element, or a slice of elements.

        ``index == len(self)`` addresses the next new position and appends.
        Slice assignment validates every new value before replacing anything.
        """
        if isinstance(index, slice):
            self._items[index] = self._validator.validate_collection(value)
            return

        validated = self._validator.validate(value)
        position = operator.index(index)
        if position == len(self._items):
            self._items.append(validated)
        else:
            self._items[position] = validated

    def __delitem__(self, index: SupportsIndex | slice) -> None:
        del self._items[index]

    def insert(self, index: SupportsIndex, value: T) -> None:
        self._items.insert(index, self._validator.validate(value))

    def append(self, value: T) -> None:
        self._items.append(self._validator.validate(value))

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(self._validator.validate_collection(values))

    def __iadd__(self, values: Iterable[T]) -> Self:  # type: ignore[override]
        self.extend(values)
        return self

    def replace_all(self, values: Iterable[T]) -> list[T]:
        """Replace the whole contents and return the previous ones.

        Args:
            values: New elements, in order.

        Returns:
            The elements held before the call, as a list.

        Raises:
            ArrayOfInvalidArgumentError: If ``values`` is not an ordered collection.
            ArrayOfTypeMismatchError: If any new element does not conform. The
                current contents are kept.

        """
        validated = self._validator.validate_collection(values)
        previous, self._items = self._items, validated
        return previous

    def clear(self) -> None:
        self._items.clear()

    def reverse(self) -> None:
        self._items.reverse()

    def sort(self, *, key: Callable[[T], Any] | None = None, reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)  # type: ignore[arg-type]

    def copy(self) -> Self:
        return self._spawn(list(self._items))

    __copy__ = copy

    def to_list(self) -> list[T]:
        return list(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypedArray):
            return self.element_type is other.element_type and self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TypedArray({self.element_type.__qualname__}, {self._items!r})"


__all__ = ["TypedArray"]
