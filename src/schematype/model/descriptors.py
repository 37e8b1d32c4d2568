# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors produced by the resolution engine.

A descriptor is a plain tree of values: the resolved type identity, an
optional default-value expression, an optional auxiliary declaration owned by
the descriptor and an optional block of validator constraints.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ScalarKind(Enum):
    """Scalar kinds a schema node can resolve to."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    OPAQUE = "opaque"


class PrimitiveTypeRef(BaseModel):
    """Reference to a scalar kind."""

    kind: Literal["primitive"] = "primitive"
    primitive: ScalarKind


class EnumTypeRef(BaseModel):
    """Reference to a synthesized enumeration by name."""

    kind: Literal["enum"] = "enum"
    name: str


class ObjectTypeRef(BaseModel):
    """Reference to a named object type derived from a schema title."""

    kind: Literal["object"] = "object"
    name: str


class ArrayTypeRef(BaseModel):
    """Reference to an array of elements."""

    kind: Literal["array"] = "array"
    element_type: TypeRef


class MapTypeRef(BaseModel):
    """Reference to a string-keyed map."""

    kind: Literal["map"] = "map"
    value_type: TypeRef


# A resolved type identity. The `kind` discriminator keeps nested element and
# value types unambiguous when a descriptor is deserialized.
TypeRef = Annotated[
    PrimitiveTypeRef | EnumTypeRef | ObjectTypeRef | ArrayTypeRef | MapTypeRef,
    _Field(discriminator="kind"),
]

LiteralValue = bool | int | float | str


class LiteralDefault(BaseModel):
    """A literal default value, already coerced to the resolved kind."""

    kind: Literal["literal"] = "literal"
    value: LiteralValue


class EnumMemberDefault(BaseModel):
    """A default value that refers to a member of a synthesized enumeration."""

    kind: Literal["enum_member"] = "enum_member"
    enum_name: str
    member: str

    @property
    def qualified_name(self) -> str:
        return f"{self.enum_name}.{self.member}"


class ArrayDefault(BaseModel):
    """An ordered literal array default."""

    kind: Literal["array"] = "array"
    element_kind: ScalarKind
    values: list[LiteralValue] = _Field(default_factory=list)


DefaultValue = Annotated[
    LiteralDefault | EnumMemberDefault | ArrayDefault,
    _Field(discriminator="kind"),
]


class EnumMember(BaseModel):
    """A member of a synthesized enumeration.

    Integer enumerations carry an explicit underlying ``value``; string
    enumerations are identified by name only.
    """

    name: str
    value: int | None = None


class EnumDeclaration(BaseModel):
    """An enumeration type a descriptor depends on and owns."""

    name: str
    members: list[EnumMember] = _Field(default_factory=list)

    def member(self, name: str) -> EnumMember | None:
        """Return the member called *name*, or None if there is none."""
        for member in self.members:
            if member.name == name:
                return member
        return None


class NumberConstraints(BaseModel):
    """Numeric range constraints for a scalar value."""

    kind: Literal["number"] = "number"
    minimum: float = 0
    maximum: float = 0
    has_minimum: bool = False
    has_maximum: bool = False
    exclusive_minimum: bool = False
    exclusive_maximum: bool = False


class ArrayConstraints(BaseModel):
    """Length constraints for an array and its string items.

    A negative item count means the bound is absent.
    """

    kind: Literal["array"] = "array"
    min_items: int = -1
    max_items: int = -1
    item_min_length: int = 0
    item_max_length: int = 0


Constraints = Annotated[
    NumberConstraints | ArrayConstraints,
    _Field(discriminator="kind"),
]


class TypeDescriptor(BaseModel):
    """The resolved type of a schema node.

    Attributes:
        type: The resolved type identity.
        default: Default-value expression consistent with ``type``.
        dependent_type: Auxiliary declaration introduced by this descriptor.
            Only the descriptor that introduces it is responsible for emitting it.
        constraints: Validator metadata to carry alongside the type.
    """

    type: TypeRef
    default: DefaultValue | None = None
    dependent_type: EnumDeclaration | None = None
    constraints: Constraints | None = None


def primitive(kind: ScalarKind) -> PrimitiveTypeRef:
    """Shorthand for a PrimitiveTypeRef of *kind*."""
    return PrimitiveTypeRef(primitive=kind)


# Resolve forward references for models that use TypeRef.
ArrayTypeRef.model_rebuild()
MapTypeRef.model_rebuild()
TypeDescriptor.model_rebuild()
