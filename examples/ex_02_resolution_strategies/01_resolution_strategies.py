"""Resolution strategies: how a kind finds its element type.

A kind can bind its type with a type parameter, derive it from its own name,
or name it through ``element_type_name()``. Names are looked up in the module
defining the kind unless a ``TypeRegistry`` is passed as ``directory``.
"""

from __future__ import annotations

from typing import Any

from arrayof import ArrayOf, MarkerStrip, TypeRegistry


class Widget:
    pass


class Gear:
    pass


registry = TypeRegistry()


@registry.register(name="Cog")
class Sprocket:
    pass


class ArrayOfWidget(ArrayOf):
    pass


class Gears(ArrayOf[Gear]):
    pass


class Inventory(ArrayOf):
    @classmethod
    def element_type_name(cls) -> str | None:
        return "Widget"


class ArrayOfCog(ArrayOf, directory=registry):
    pass


class ListOfGear(ArrayOf, marker="ListOf"):
    pass


class ArrayOfGearArrayOf(ArrayOf, marker_strip=MarkerStrip.ALL):
    pass


def describe(kind: type[ArrayOf[Any]]) -> str:
    resolved = kind.resolve_kind()
    return f"{kind.__name__} -> {resolved.element_type.__name__} via {resolved.strategy}"


def main() -> None:
    print(describe(ArrayOfWidget))  # => ArrayOfWidget -> Widget via name
    print(describe(Gears))  # => Gears -> Gear via element_type
    print(describe(Inventory))  # => Inventory -> Widget via override
    print(describe(ArrayOfCog))  # => ArrayOfCog -> Sprocket via name
    print(describe(ListOfGear))  # => ListOfGear -> Gear via name
    print(describe(ArrayOfGearArrayOf))  # => ArrayOfGearArrayOf -> Gear via name


if __name__ == "__main__":
    main()
