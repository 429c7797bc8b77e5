"""Errors: what fails, and what state is left behind.

Data errors (``ArrayOfTypeMismatchError``, ``ArrayOfInvalidArgumentError``)
never change the container. Configuration errors describe the kind itself and
fail every construction until the declaration is fixed.
"""

from __future__ import annotations

from typing import Any, cast

from arrayof import (
    ArrayOf,
    ArrayOfConfigurationError,
    ArrayOfInvalidArgumentError,
    ArrayOfInvalidKindNameError,
    ArrayOfTypeMismatchError,
    ArrayOfUnresolvableTargetTypeError,
)


class Widget:
    pass


class ArrayOfWidget(ArrayOf):
    pass


class ArrayOfGadget(ArrayOf):
    pass


class Widgets(ArrayOf):
    pass


def main() -> None:
    widgets = ArrayOfWidget([Widget(), Widget()])

    try:
        widgets.replace_all([Widget(), cast("Any", 42), Widget()])
    except ArrayOfTypeMismatchError as error:
        print(f"mismatch_index={error.index}")  # => mismatch_index=1

    print(f"unchanged_len={len(widgets)}")  # => unchanged_len=2

    try:
        ArrayOfWidget(cast("Any", Widget()))
    except ArrayOfInvalidArgumentError as error:
        print(error)  # => __main__.ArrayOfWidget accepts only ordered collections of instances of Widget, got Widget

    try:
        ArrayOfGadget()
    except ArrayOfUnresolvableTargetTypeError as error:
        print(f"candidates={error.candidates}")  # => candidates=('Gadget',)
        print(f"configuration_error={isinstance(error, ArrayOfConfigurationError)}")  # => configuration_error=True

    try:
        Widgets()
    except ArrayOfInvalidKindNameError as error:
        print(error)  # => Kind name of __main__.Widgets must begin with "ArrayOf"


if __name__ == "__main__":
    main()
