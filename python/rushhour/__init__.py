"""Rush Hour sliding-block puzzle engine."""

from rushhour.engine.gameplay import (
    GamePlay,
    apply_move,
    apply_moves,
    move_vehicle,
)
from rushhour.models import Board, Cell, Direction, Move, MoveError, Orientation

__all__ = [
    "Board",
    "Cell",
    "Direction",
    "GamePlay",
    "Move",
    "MoveError",
    "Orientation",
    "apply_move",
    "apply_moves",
    "move_vehicle",
]
