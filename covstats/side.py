"""Sides of a grid cell."""

from enum import Enum


class Side(Enum):
    """A side of a rectangular cell, or none."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value