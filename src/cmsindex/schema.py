"""Field definitions that make up a collection's content schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from .consts import DEFAULT_TYPE_KEY, MEDIA_WIDGETS


@dataclass(frozen=True)
class LeafShape:
    """A field without nested structure."""


@dataclass(frozen=True)
class ListShape:
    """A homogeneous list: every item has the shape of ``field``."""

    field: FieldDefinition


@dataclass(frozen=True)
class ObjectShape:
    """An object (or list of objects) with a fixed set of named ``fields``."""

    fields: list[FieldDefinition]


@dataclass(frozen=True)
class VariantShape:
    """A list whose items pick one of ``types`` by the value at ``type_key``."""

    types: list[FieldDefinition]
    type_key: str


FieldShape = Union[LeafShape, ListShape, ObjectShape, VariantShape]

_LEAF = LeafShape()


class FieldDefinition(BaseModel):
    """One node of a collection schema.

    Widget specific options (label, hint, media_folder, ...) are kept as
    extra attributes so they survive a round trip through the model.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    widget: str = "string"
    field: Optional[FieldDefinition] = None
    fields: Optional[list[FieldDefinition]] = None
    types: Optional[list[FieldDefinition]] = None
    type_key: str = Field(
        default=DEFAULT_TYPE_KEY,
        validation_alias=AliasChoices("typeKey", "type_key"),
    )

    @model_validator(mode="after")
    def validate_single_shape(self) -> "FieldDefinition":
        declared = [
            key for key in ("field", "fields", "types") if getattr(self, key) is not None
        ]
        if len(declared) > 1:
            raise ValueError(
                f"Field '{self.name}' declares {', '.join(declared)}; "
                "only one of field, fields or types is allowed"
            )
        return self

    @property
    def shape(self) -> FieldShape:
        if self.field is not None:
            return ListShape(self.field)
        if self.fields is not None:
            return ObjectShape(self.fields)
        if self.types is not None:
            return VariantShape(self.types, self.type_key)
        return _LEAF

    @property
    def is_media(self) -> bool:
        return self.widget in MEDIA_WIDGETS


def find_field(
    fields: Iterable[FieldDefinition], name: str | None
) -> FieldDefinition | None:
    """Return the first field called ``name``, or None."""
    return next((f for f in fields if f.name == name), None)
