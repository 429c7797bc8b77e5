from arrayof._internal.array_of import ArrayOf
from arrayof._internal.directories import NamespaceTypeDirectory, TypeDirectory, TypeRegistry
from arrayof._internal.resolution import (
    DEFAULT_MARKER,
    KindDeclaration,
    KindResolver,
    ResolvedKind,
    resolve_target_type,
)
from arrayof._internal.typed_array import TypedArray
from arrayof.exceptions import (
    ArrayOfConfigurationError,
    ArrayOfError,
    ArrayOfInvalidArgumentError,
    ArrayOfInvalidDeclarationError,
    ArrayOfInvalidKindNameError,
    ArrayOfTypeMismatchError,
    ArrayOfUnresolvableTargetTypeError,
)
from arrayof.marker_strip import MarkerStrip

__all__ = [
    "DEFAULT_MARKER",
    "ArrayOf",
    "ArrayOfConfigurationError",
    "ArrayOfError",
    "ArrayOfInvalidArgumentError",
    "ArrayOfInvalidDeclarationError",
    "ArrayOfInvalidKindNameError",
    "ArrayOfTypeMismatchError",
    "ArrayOfUnresolvableTargetTypeError",
    "KindDeclaration",
    "KindResolver",
    "MarkerStrip",
    "NamespaceTypeDirectory",
    "ResolvedKind",
    "TypeDirectory",
    "TypeRegistry",
    "TypedArray",
    "resolve_target_type",
]
