# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema node representation consumed by the resolution engine."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class TypeTag(BaseModel):
    """One entry of a schema node's ``type`` list.

    A tag is either a primitive name (``boolean``, ``integer``, ``number``,
    ``string``, ``object``, ``any``, ``array``) or a reference marker.
    """

    name: str
    is_reference: bool = False


class SchemaNode(BaseModel):
    """A JSON-Schema-like node describing a single value.

    A default is considered present when it is not ``None``; an absent
    default and an explicit JSON ``null`` are equivalent.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: list[TypeTag] | None = None
    enum: list[Any] | None = None
    default: Any = None
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: bool = _Field(default=False, alias="exclusiveMinimum")
    exclusive_maximum: bool = _Field(default=False, alias="exclusiveMaximum")
    min_items: int | None = _Field(default=None, alias="minItems")
    max_items: int | None = _Field(default=None, alias="maxItems")
    min_length: int = _Field(default=0, alias="minLength")
    max_length: int = _Field(default=0, alias="maxLength")
    items: SchemaNode | None = None
    dictionary_value_type: SchemaNode | None = _Field(
        default=None,
        validation_alias=AliasChoices("dictionaryValueType", "additionalProperties", "dictionary_value_type"),
    )
    title: str | None = None
    reference: str | None = _Field(default=None, alias="$ref")

    @property
    def has_default(self) -> bool:
        """Return True if the node declares a non-null default value."""
        return self.default is not None

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type_tags(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, (str, dict, TypeTag)):
            value = [value]
        if not isinstance(value, list):
            return value
        return [_coerce_type_tag(entry) for entry in value]

    @field_validator("dictionary_value_type", mode="before")
    @classmethod
    def _drop_boolean_value_schema(cls, value: Any) -> Any:
        # additionalProperties: true/false carries no value schema.
        if isinstance(value, bool):
            return None
        return value


# ################
# Implementation
# ################


def _coerce_type_tag(entry: Any) -> Any:
    """Normalize a raw type entry into TypeTag input."""
    if isinstance(entry, str):
        return {"name": entry}
    if isinstance(entry, dict) and "$ref" in entry:
        return {"name": entry["$ref"], "is_reference": True}
    return entry


SchemaNode.model_rebuild()
