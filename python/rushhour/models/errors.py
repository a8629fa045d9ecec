"""Exceptions raised by the Rush Hour engine."""

from __future__ import annotations


class RushHourError(Exception):
    """Base class for every Rush Hour error."""


class MoveError(RushHourError):
    """A move was rejected.  The caller's board is left unchanged."""


class OutOfBounds(MoveError):
    """A row or column lies outside the board."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {height}x{width} board."
        )
        self.row = row
        self.col = col
        self.height = height
        self.width = width


class VehicleNotFound(MoveError):
    """No cell on the board carries the requested vehicle id."""

    def __init__(self, vehicle: str) -> None:
        super().__init__(f"Vehicle {vehicle!r} is not on the board.")
        self.vehicle = vehicle


class EmptyCellMove(MoveError):
    """The addressed cell holds no vehicle."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is empty; nothing to move.")
        self.row = row
        self.col = col


class OrientationMismatch(MoveError):
    """The direction does not run along the vehicle's axis."""

    def __init__(self, vehicle: str, orientation: str, direction: str) -> None:
        super().__init__(
            f"Vehicle {vehicle!r} is {orientation} and cannot move {direction}."
        )
        self.vehicle = vehicle


class Collision(MoveError):
    """A cell the vehicle would enter is already occupied."""

    def __init__(self, vehicle: str, row: int, col: int, blocker: str) -> None:
        super().__init__(
            f"Vehicle {vehicle!r} is blocked by {blocker!r} at ({row}, {col})."
        )
        self.vehicle = vehicle
        self.blocker = blocker
        self.row = row
        self.col = col


class InvalidAmount(MoveError):
    """The step count is negative."""

    def __init__(self, amount: int) -> None:
        super().__init__(f"Move amount must be non-negative, got {amount}.")
        self.amount = amount


class InvalidBoard(RushHourError, ValueError):
    """A board declaration breaks the grid or vehicle invariants."""
