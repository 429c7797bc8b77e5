"""Tests for TypedArray mutation and read surfaces."""

from __future__ import annotations

import copy
from typing import Any, cast

import pytest

from arrayof import (
    ArrayOfInvalidArgumentError,
    ArrayOfInvalidDeclarationError,
    ArrayOfTypeMismatchError,
    TypedArray,
)


class Point:
    def __init__(self, x: int) -> None:
        self.x = x

    def __repr__(self) -> str:
        return f"Point({self.x})"


class Label:
    pass


@pytest.fixture()
def points() -> list[Point]:
    return [Point(0), Point(1), Point(2)]


@pytest.fixture()
def array(points: list[Point]) -> TypedArray[Point]:
    return TypedArray(Point, points)


class TestConstruction:
    def test_binds_explicit_element_type(self, array: TypedArray[Point]) -> None:
        assert array.element_type is Point
        assert array.kind_name == "TypedArray[Point]"

    def test_custom_kind_name_appears_in_errors(self) -> None:
        with pytest.raises(ArrayOfTypeMismatchError, match="^Path accepts only instances of Point"):
            TypedArray(Point, [cast("Any", Label())], kind_name="Path")

    def test_builtin_element_type(self) -> None:
        numbers = TypedArray(int, [1, 2, 3])

        assert numbers == [1, 2, 3]
        with pytest.raises(ArrayOfTypeMismatchError):
            numbers.append(cast("Any", "4"))

    def test_rejects_unusable_element_type(self) -> None:
        with pytest.raises(ArrayOfInvalidDeclarationError):
            TypedArray(cast("Any", list[int]))

    def test_rejects_non_collection_input(self) -> None:
        with pytest.raises(ArrayOfInvalidArgumentError):
            TypedArray(Point, cast("Any", Point(0)))


class TestSetItem:
    def test_overwrites_existing_index(self, array: TypedArray[Point]) -> None:
        replacement = Point(9)

        array[1] = replacement

        assert array[1] is replacement
        assert len(array) == 3

    def test_next_new_index_appends(self, array: TypedArray[Point], points: list[Point]) -> None:
        added = Point(3)

        array[3] = added

        assert array == [*points, added]

    def test_negative_index(self, array: TypedArray[Point]) -> None:
        replacement = Point(9)

        array[-1] = replacement

        assert array[2] is replacement

    def test_index_past_end_raises_index_error(
        self,
        array: TypedArray[Point],
        points: list[Point],
    ) -> None:
        with pytest.raises(IndexError):
            array[10] = Point(10)

        assert array == points

    def test_mismatch_leaves_contents(self, array: TypedArray[Point], points: list[Point]) -> None:
        with pytest.raises(ArrayOfTypeMismatchError) as exc_info:
            array[0] = cast("Any", Label())

        assert exc_info.value.index is None
        assert array == points

    def test_slice_assignment_validates_every_value_first(
        self,
        array: TypedArray[Point],
        points: list[Point],
    ) -> None:
        with pytest.raises(ArrayOfTypeMismatchError):
            array[0:2] = [Point(7), cast("Any", Label())]

        assert array == points

    def test_slice_assignment(self, array: TypedArray[Point], points: list[Point]) -> None:
        new = [Point(7), Point(8), Point(9)]

        array[1:2] = new

        assert array == [points[0], *new, points[2]]


class TestAppendInsertExtend:
    def test_append(self, array: TypedArray[Point], points: list[Point]) -> None:
        added = Point(3)

        array.append(added)

        assert array == [*points, added]

    def test_insert(self, array: TypedArray[Point], points: list[Point]) -> None:
        added = Point(-1)

        array.insert(0, added)

        assert array == [added, *points]

    def test_insert_mismatch_leaves_contents(
        self,
        array: TypedArray[Point],
        points: list[Point],
    ) -> None:
        with pytest.raises(ArrayOfTypeMismatchError):
            array.insert(0, cast("Any", Label()))

        assert array == points

    def test_extend_is_all_or_nothing(self, array: TypedArray[Point], points: list[Point]) -> None:
        with pytest.raises(ArrayOfTypeMismatchError) as exc_info:
            array.extend([Point(3), Point(4), cast("Any", Label())])

        assert exc_info.value.index == 2
        assert array == points

    def test_extend_with_itself(self, array: TypedArray[Point], points: list[Point]) -> None:
        array.extend(array)

        assert array == points + points

    def test_inplace_add(self, array: TypedArray[Point], points: list[Point]) -> None:
        added = Point(3)
        original = array

        array += [added]

        assert array is original
        assert array == [*points, added]

    def test_inplace_add_rejects_scalar(self, array: TypedArray[Point], points: list[Point]) -> None:
        with pytest.raises(ArrayOfInvalidArgumentError):
            array += cast("Any", Point(3))

        assert array == points


class TestReplaceAll:
    def test_swaps_contents_and_returns_previous(
        self,
        array: TypedArray[Point],
        points: list[Point],
    ) -> None:
        new = [Point(5)]

        previous = array.replace_all(new)

        assert previous == points
        assert array == new

    def test_result_does_not_alias_input(self, array: TypedArray[Point]) -> None:
        new = [Point(5)]

        array.replace_all(new)
        new.append(cast("Any", Label()))

        assert len(array) == 1

    def test_mismatch_keeps_contents(self, array: TypedArray[Point], points: list[Point]) -> None:
        with pytest.raises(ArrayOfTypeMismatchError):
            array.replace_all([Point(5), cast("Any", Label())])

        assert array == points


class TestReadSurface:
    def test_iteration_and_membership(self, array: TypedArray[Point], points: list[Point]) -> None:
        assert list(array) == points
        assert list(reversed(array)) == points[::-1]
        assert points[1] in array
        assert Point(1) not in array
        assert array.index(points[2]) == 2
        assert array.count(points[0]) == 1

    def test_slice_returns_typed_copy(self, array: TypedArray[Point], points: list[Point]) -> None:
        tail = array[1:]

        assert isinstance(tail, TypedArray)
        assert tail.element_type is Point
        assert tail == points[1:]
        with pytest.raises(ArrayOfTypeMismatchError):
            tail.append(cast("Any", Label()))

    def test_copy_is_independent(self, array: TypedArray[Point], points: list[Point]) -> None:
        duplicate = array.copy()
        shallow = copy.copy(array)

        duplicate.append(Point(3))
        shallow.clear()

        assert array == points
        assert len(duplicate) == 4

    def test_to_list_is_a_detached_list(self, array: TypedArray[Point]) -> None:
        exported = array.to_list()
        exported.clear()

        assert len(array) == 3

    def test_equality(self, points: list[Point]) -> None:
        assert TypedArray(Point, points) == TypedArray(Point, points)
        assert TypedArray(Point, []) != TypedArray(Label, [])
        assert TypedArray(Point, points) != tuple(points)

    def test_is_unhashable(self, array: TypedArray[Point]) -> None:
        with pytest.raises(TypeError):
            hash(array)

    def test_repr(self) -> None:
        assert repr(TypedArray(Point, [Point(1)])) == "TypedArray(Point, [Point(1)])"


class TestRemovalAndOrdering:
    def test_removals(self, array: TypedArray[Point], points: list[Point]) -> None:
        assert array.pop() is points[2]
        array.remove(points[0])
        del array[0]

        assert array == []

    def test_sort_and_reverse(self, points: list[Point]) -> None:
        array = TypedArray(Point, [points[2], points[0], points[1]])

        array.sort(key=lambda point: point.x)
        assert array == points

        array.reverse()
        assert array == points[::-1]
