"""Quickstart: a list that only accepts one type.

Name a subclass of ``ArrayOf`` after its element type and every way of
putting values into it is checked against that type.
"""

from __future__ import annotations

from arrayof import ArrayOf, ArrayOfTypeMismatchError


class Widget:
    def __init__(self, name: str) -> None:
        self.name = name


class ArrayOfWidget(ArrayOf):
    pass


def main() -> None:
    widgets = ArrayOfWidget([Widget("knob"), Widget("dial")])

    print(f"element_type={widgets.element_type.__name__}")  # => element_type=Widget
    print(f"names={[widget.name for widget in widgets]}")  # => names=['knob', 'dial']

    widgets.append(Widget("lever"))
    widgets[0] = Widget("slider")
    print(f"names={[widget.name for widget in widgets]}")  # => names=['slider', 'dial', 'lever']

    try:
        widgets.append("switch")  # type: ignore[arg-type]
    except ArrayOfTypeMismatchError as error:
        print(f"rejected={type(error.value).__name__}")  # => rejected=str

    print(f"len_after_rejection={len(widgets)}")  # => len_after_rejection=3


if __name__ == "__main__":
    main()
