"""Tracks the board history of a game in progress."""

from __future__ import annotations

from rushhour.models.board import Board


class GameState:
    """Holds the current board, the boards before it, and the move counter."""

    def __init__(self, board: Board) -> None:
        self._history: list[Board] = [board]

    @property
    def board(self) -> Board:
        return self._history[-1]

    @property
    def moves(self) -> int:
        return len(self._history) - 1

    @property
    def history(self) -> tuple[Board, ...]:
        return tuple(self._history)

    # -- moves ----------------------------------------------------------------

    def push(self, board: Board) -> None:
        self._history.append(board)

    def pop(self) -> Board | None:
        """Drop the current board and return it, or ``None`` at the start."""
        if len(self._history) == 1:
            return None
        return self._history.pop()
