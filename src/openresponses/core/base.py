"""Base model and union helpers shared by every protocol type."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
)

# custom pydantic error type -> union name, filled by the helpers below
TAGGED_UNION_ERRORS: dict[str, str] = {}
SHAPE_UNION_ERRORS: dict[str, str] = {}
# Tag values, which pydantic inserts into error locations
TYPE_TAGS: set[str] = set()
SHAPE_TAGS: set[str] = set()


class ProtocolModel(BaseModel):
    """Immutable protocol value that omits absent fields when serialized."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        return {key: value for key, value in payload.items() if value is not None}


def type_tag(value: Any) -> str | None:
    """Read the ``type`` discriminant from a raw mapping or a model instance."""
    if isinstance(value, Mapping):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    return tag if isinstance(tag, str) else None


def tagged_union(name: str, *members: type[ProtocolModel]) -> Any:
    """Build a ``type``-tagged union whose unknown tags raise a named error."""
    error_type = f"unknown_{_snake_case(name)}_type"
    TAGGED_UNION_ERRORS[error_type] = name
    TYPE_TAGS.update(member.model_fields["type"].default for member in members)
    variants = tuple(
        Annotated[member, Tag(member.model_fields["type"].default)] for member in members
    )
    return Annotated[
        Union[variants],  # noqa: UP007
        Discriminator(
            type_tag,
            custom_error_type=error_type,
            custom_error_message=f"missing or unrecognized {name} discriminant",
        ),
    ]


def shape_union(name: str, sniff: Callable[[Any], str | None], variants: dict[str, Any]) -> Any:
    """Build an untagged union dispatched by ``sniff`` over the raw value's shape."""
    error_type = f"unmatched_{_snake_case(name)}_shape"
    SHAPE_UNION_ERRORS[error_type] = name
    SHAPE_TAGS.update(variants)
    members = tuple(Annotated[variant, Tag(tag)] for tag, variant in variants.items())
    return Annotated[
        Union[members],  # noqa: UP007
        Discriminator(
            sniff,
            custom_error_type=error_type,
            custom_error_message=f"value does not match any {name} shape",
        ),
    ]


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()
