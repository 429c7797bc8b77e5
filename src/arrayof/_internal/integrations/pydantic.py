from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

from arrayof.exceptions import ArrayOfInvalidArgumentError, ArrayOfTypeMismatchError

if TYPE_CHECKING:
    from arrayof._internal.array_of import ArrayOf


def build_kind_core_schema(kind: type[ArrayOf[Any]]) -> Any:
    """Return a pydantic-core schema that validates input into ``kind``.

    Pydantic calls this through ``ArrayOf.__get_pydantic_core_schema__`` when
    a kind is used as a model field annotation. Instances of ``kind`` pass
    through unchanged; any other input is handed to the kind's constructor so
    untyped payloads are checked at the deserialization boundary. Data errors
    surface as pydantic ``ValidationError``; kind configuration errors are
    raised as-is. Serialization emits a plain list.

    Args:
        kind: Container kind used as the field type.

    """
    core_schema = importlib.import_module("pydantic_core.core_schema")

    def validate(value: Any) -> ArrayOf[Any]:
        if isinstance(value, kind):
            return value
        try:
            return kind(value)
        except (ArrayOfInvalidArgumentError, ArrayOfTypeMismatchError) as exc:
            raise ValueError(str(exc)) from exc

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(
            lambda value: value.to_list(),
        ),
    )


__all__ = ["build_kind_core_schema"]
