"""Cell, orientation and direction types for the Rush Hour board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Orientation(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def flipped(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def axis(self) -> Orientation:
        """The orientation a vehicle must have to move this way."""
        if self in (Direction.LEFT, Direction.RIGHT):
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def transposed(self) -> Direction:
        """The same move seen on the transposed grid (UP <-> LEFT, DOWN <-> RIGHT)."""
        return _TRANSPOSED[self]


_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_TRANSPOSED = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.UP,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
}


@dataclass(frozen=True)
class Cell:
    """One board entry.

    ``vehicle`` is ``None`` for an empty cell.  Orientation and length
    belong to the vehicle, so every cell of a vehicle carries the same
    values; on empty cells they are placeholders.
    """

    vehicle: str | None
    orientation: Orientation = Orientation.HORIZONTAL
    length: int = 1

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"Cell length must be at least 1, got {self.length}.")

    @property
    def is_empty(self) -> bool:
        return self.vehicle is None

    def transposed(self) -> Cell:
        if self.is_empty:
            return self
        return Cell(self.vehicle, self.orientation.flipped(), self.length)


EMPTY = Cell(None)
