from rushhour.engine.gameplay.game import (
    DEFAULT_TARGET,
    GamePlay,
    MoveApplied,
    MoveEvent,
    MoveRejected,
    MoveUndone,
)
from rushhour.engine.gameplay.move import apply_move, apply_moves, move_vehicle

__all__ = [
    "DEFAULT_TARGET",
    "GamePlay",
    "MoveApplied",
    "MoveEvent",
    "MoveRejected",
    "MoveUndone",
    "apply_move",
    "apply_moves",
    "move_vehicle",
]
