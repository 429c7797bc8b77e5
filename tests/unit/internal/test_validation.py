from __future__ import annotations

import array
from collections import OrderedDict, deque
from typing import Any

import pytest

from arrayof._internal.validation import ElementValidator, is_ordered_collection
from arrayof.exceptions import ArrayOfInvalidArgumentError, ArrayOfTypeMismatchError


class Token:
    pass


@pytest.fixture()
def validator() -> ElementValidator[Token]:
    return ElementValidator(Token, "tests.ArrayOfToken")


@pytest.mark.parametrize(
    "candidate",
    [
        [],
        (),
        deque(),
        range(3),
        array.array("i"),
        iter([]),
        (value for value in ()),
    ],
)
def test_ordered_collections_are_accepted(candidate: object) -> None:
    assert is_ordered_collection(candidate)


@pytest.mark.parametrize(
    "candidate",
    [
        "abc",
        b"abc",
        bytearray(b"abc"),
        {},
        OrderedDict(),
        set(),
        frozenset(),
        None,
        1,
        Token(),
    ],
)
def test_scalars_mappings_and_sets_are_rejected(candidate: object) -> None:
    assert not is_ordered_collection(candidate)


def test_validate_returns_conforming_value(validator: ElementValidator[Token]) -> None:
    token = Token()

    assert validator.validate(token) is token


def test_validate_raises_with_context(validator: ElementValidator[Token]) -> None:
    with pytest.raises(ArrayOfTypeMismatchError) as exc_info:
        validator.validate("token", index=4)

    error = exc_info.value
    assert error.kind_name == "tests.ArrayOfToken"
    assert error.element_type is Token
    assert error.value == "token"
    assert error.index == 4
    assert str(error) == "tests.ArrayOfToken accepts only instances of Token, got str at index 4"


def test_validate_collection_returns_new_list(validator: ElementValidator[Token]) -> None:
    tokens = [Token(), Token()]

    validated = validator.validate_collection(tokens)

    assert validated == tokens
    assert validated is not tokens


def test_validate_collection_consumes_iterators_once(validator: ElementValidator[Token]) -> None:
    tokens = [Token(), Token()]
    consumed: list[Token] = []

    def produce() -> Any:
        for token in tokens:
            consumed.append(token)
            yield token

    assert validator.validate_collection(produce()) == tokens
    assert consumed == tokens


def test_validate_collection_reports_first_mismatch(validator: ElementValidator[Token]) -> None:
    with pytest.raises(ArrayOfTypeMismatchError) as exc_info:
        validator.validate_collection([Token(), 1, "two"])

    assert exc_info.value.index == 1
    assert exc_info.value.value == 1


def test_validate_collection_rejects_non_collections(validator: ElementValidator[Token]) -> None:
    with pytest.raises(ArrayOfInvalidArgumentError) as exc_info:
        validator.validate_collection({"a": Token()})

    assert exc_info.value.kind_name == "tests.ArrayOfToken"
    assert str(exc_info.value) == (
        "tests.ArrayOfToken accepts only ordered collections of instances of Token, got dict"
    )
