"""Game session — applies moves, keeps history, and reports outcomes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rushhour.engine.gameplay.move import move_vehicle
from rushhour.engine.gamestate import GameState
from rushhour.events import Subject
from rushhour.models.board import Board
from rushhour.models.cell import Direction, Orientation
from rushhour.models.errors import MoveError
from rushhour.models.move import Move

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "X"


@dataclass(frozen=True)
class MoveApplied:
    move: Move
    board: Board


@dataclass(frozen=True)
class MoveRejected:
    move: Move
    error: MoveError


@dataclass(frozen=True)
class MoveUndone:
    board: Board


MoveEvent = MoveApplied | MoveRejected | MoveUndone


class GamePlay(Subject[MoveEvent]):
    """Orchestrates a single game session.

    The target vehicle escapes when its far end reaches the right edge
    (horizontal target) or the bottom edge (vertical target).
    """

    def __init__(self, board: Board, target: str = DEFAULT_TARGET) -> None:
        super().__init__()
        self.state = GameState(board)
        self.target = target

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement -------------------------------------------------------------

    def move(self, vehicle: str, direction: Direction, amount: int = 1) -> bool:
        """Slide *vehicle* and return True if the move was legal.

        A rejected move leaves the session untouched; observers are told
        either way.
        """
        move = Move(vehicle, direction, amount)
        try:
            board = move_vehicle(self.state.board, vehicle, direction, amount)
        except MoveError as exc:
            logger.info("rejected %s: %s", move, exc)
            self.notify(MoveRejected(move, exc))
            return False

        self.state.push(board)
        logger.info("applied %s (move %d)", move, self.state.moves)
        self.notify(MoveApplied(move, board))
        return True

    def play(self, move: Move) -> bool:
        return self.move(move.vehicle, move.direction, move.amount)

    def undo(self) -> bool:
        """Step back one move.  Returns False when there is nothing to undo."""
        if self.state.pop() is None:
            return False
        self.notify(MoveUndone(self.state.board))
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        target = self.board.vehicles().get(self.target)
        if target is None:
            return False
        far_row, far_col = target.far_end
        if target.orientation is Orientation.HORIZONTAL:
            return far_col == self.board.width - 1
        return far_row == self.board.height - 1
