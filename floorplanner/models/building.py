"""Building element models: walls and the doors/windows hosted on them."""

from __future__ import annotations
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .geometry import Point2D


OpeningKind = Literal["door", "window"]


class _ElementBase(BaseModel):
    # camelCase on the wire, snake_case in Python; both accepted on input
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )

    id: str = Field(min_length=1)


class WallElement(_ElementBase):
    """A wall segment defined by two sketch-plane endpoints."""
    type: Literal["wall"] = "wall"
    start: Point2D
    end: Point2D
    thickness: float = Field(gt=0)
    height: float = Field(gt=0)


class OpeningElement(_ElementBase):
    """A door or window positioned parametrically along its parent wall.

    `position_on_wall` is kept as given; consumers clamp it to [0, 1].
    """
    type: OpeningKind
    parent_wall_id: str
    position_on_wall: float
    width: float = Field(gt=0)
    height: float = Field(gt=0)


Element = Annotated[
    Union[WallElement, OpeningElement],
    Field(discriminator="type"),
]


def walls_of(elements) -> list[WallElement]:
    """Return the walls of an element collection, in order."""
    return [el for el in elements if isinstance(el, WallElement)]


def openings_of(elements) -> list[OpeningElement]:
    """Return the doors and windows of an element collection, in order."""
    return [el for el in elements if isinstance(el, OpeningElement)]
