"""Node definitions for parsed documents."""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class Key(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str

    def __str__(self) -> str:
        return self.text


class StringValue(BaseModel):
    """Raw characters between the quotes; backslashes are kept as written."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    text: str


class NumberValue(BaseModel):
    """Literal text matched by the number rule, never converted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    text: str


class Pair(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Key
    value: "Value"


class ObjectValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    pairs: tuple[Pair, ...] = Field(default_factory=tuple)


class ArrayValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    values: tuple["Value", ...] = Field(default_factory=tuple)


Value = Annotated[
    Union[StringValue, NumberValue, ObjectValue, ArrayValue],
    Field(discriminator="kind"),
]

Pair.model_rebuild()
ObjectValue.model_rebuild()
ArrayValue.model_rebuild()


__all__ = ["Key", "StringValue", "NumberValue", "Pair", "ObjectValue", "ArrayValue", "Value"]
