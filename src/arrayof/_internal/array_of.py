from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, TypeVar, get_args, get_origin

from arrayof._internal.directories import NamespaceTypeDirectory, TypeDirectory
from arrayof._internal.integrations.pydantic import build_kind_core_schema
from arrayof._internal.resolution import (
    DEFAULT_MARKER,
    DEFAULT_RESOLVER,
    KindDeclaration,
    KindResolver,
    ResolvedKind,
)
from arrayof._internal.typed_array import TypedArray
from arrayof._internal.validation import ElementValidator
from arrayof.marker_strip import MarkerStrip

T = TypeVar("T")


class ArrayOf(TypedArray[T]):
    """Declare a container kind whose target type comes from the kind itself.

    Subclass once per element type. The target type is resolved on the
    first construction of the kind and reused afterwards:

        class Widget: ...

        class Widgets(ArrayOf[Widget]): ...  # explicit type parameter

        class ArrayOfWidget(ArrayOf): ...  # "ArrayOf" + "Widget" naming convention

        class Inventory(ArrayOf):  # override accessor
            @classmethod
            def element_type_name(cls) -> str | None:
                return "Widget"

    The naming convention looks the stripped name up in the kind's type
    directory, by default the namespace of the module defining the kind. The
    override is only consulted when the name does not resolve.

    Class keywords configure a kind and are inherited by its subclasses:

    - ``element_type``: bind the target type explicitly.
    - ``directory``: a ``TypeDirectory`` (for example a ``TypeRegistry``)
      used instead of the module namespace.
    - ``marker``: naming-convention marker, ``"ArrayOf"`` by default.
    - ``marker_strip``: ``MarkerStrip`` mode for removing the marker.
    - ``resolver``: ``KindResolver`` whose cache holds the resolution.
    """

    _arrayof_element_type: ClassVar[type[Any] | None] = None
    _arrayof_directory: ClassVar[TypeDirectory | None] = None
    _arrayof_marker: ClassVar[str] = DEFAULT_MARKER
    _arrayof_marker_strip: ClassVar[MarkerStrip] = MarkerStrip.PREFIX
    _arrayof_resolver: ClassVar[KindResolver] = DEFAULT_RESOLVER
    __arrayof_declaration__: ClassVar[KindDeclaration]

    def __init_subclass__(
        cls,
        *,
        element_type: type[Any] | None = None,
        directory: TypeDirectory | None = None,
        marker: str | None = None,
        marker_strip: MarkerStrip | None = None,
        resolver: KindResolver | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if element_type is None:
            element_type = _type_argument(cls)
        if element_type is not None:
            cls._arrayof_element_type = element_type
        if directory is not None:
            cls._arrayof_directory = directory
        if marker is not None:
            cls._arrayof_marker = marker
        if marker_strip is not None:
            cls._arrayof_marker_strip = marker_strip
        if resolver is not None:
            cls._arrayof_resolver = resolver
        cls.__arrayof_declaration__ = cls._declare()

    @classmethod
    def _declare(cls) -> KindDeclaration:
        directory = cls._arrayof_directory
        if directory is None:
            directory = NamespaceTypeDirectory(cls.__module__)
        return KindDeclaration(
            kind_name=f"{cls.__module__}.{cls.__qualname__}",
            directory=directory,
            element_type=cls._arrayof_element_type,
            override=cls.element_type_name,
            marker=cls._arrayof_marker,
            marker_strip=cls._arrayof_marker_strip,
        )

    @classmethod
    def element_type_name(cls) -> str | None:
        """Return an explicit target type name, or ``None`` for no override.

        Override this when the kind's name does not follow the naming
        convention. Dotted names are imported; simple names are looked up in
        the kind's type directory.
        """
        return None

    @classmethod
    def resolve_kind(cls) -> ResolvedKind:
        """Resolve this kind through its resolver, using the cached result if any.

        Raises:
            ArrayOfInvalidKindNameError: If the kind name lacks the marker and
                no override resolves.
            ArrayOfUnresolvableTargetTypeError: If no strategy resolves.

        """
        return cls._arrayof_resolver.resolve(cls, cls.__arrayof_declaration__)

    @classmethod
    def resolve_element_type(cls) -> type[T]:
        return cls.resolve_kind().element_type

    def __init__(self, items: Iterable[T] = ()) -> None:  # noqa: D107
        resolved = self.resolve_kind()
        validator: ElementValidator[T] = ElementValidator(resolved.element_type, resolved.kind_name)
        self._bind(validator, validator.validate_collection(items))

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}({self._items!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return build_kind_core_schema(cls)


ArrayOf.__arrayof_declaration__ = ArrayOf._declare()


def _type_argument(cls: type[Any]) -> type[Any] | None:
    for base in cls.__dict__.get("__orig_bases__", ()):
        origin = get_origin(base)
        if not (isinstance(origin, type) and issubclass(origin, ArrayOf)):
            continue
        args = get_args(base)
        if args and args[0] is not Any and not isinstance(args[0], TypeVar):
            return args[0]
    return None


__all__ = ["ArrayOf"]
