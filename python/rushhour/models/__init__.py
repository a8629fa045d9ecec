from rushhour.models.board import EMPTY_TOKEN, Board, Vehicle
from rushhour.models.cell import EMPTY, Cell, Direction, Orientation
from rushhour.models.errors import (
    Collision,
    EmptyCellMove,
    InvalidAmount,
    InvalidBoard,
    MoveError,
    OrientationMismatch,
    OutOfBounds,
    RushHourError,
    VehicleNotFound,
)
from rushhour.models.move import Move

__all__ = [
    "Board",
    "Cell",
    "Collision",
    "Direction",
    "EMPTY",
    "EMPTY_TOKEN",
    "EmptyCellMove",
    "InvalidAmount",
    "InvalidBoard",
    "Move",
    "MoveError",
    "Orientation",
    "OrientationMismatch",
    "OutOfBounds",
    "RushHourError",
    "Vehicle",
    "VehicleNotFound",
]
