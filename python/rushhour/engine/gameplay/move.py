"""Move validation and application — the public entry points of the engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rushhour.engine.locator import far_end, find_vehicle
from rushhour.engine.mover import slide, slide_vertical
from rushhour.models.board import Board
from rushhour.models.cell import Direction
from rushhour.models.errors import (
    EmptyCellMove,
    InvalidAmount,
    OrientationMismatch,
    OutOfBounds,
)
from rushhour.models.move import Move

logger = logging.getLogger(__name__)


def apply_move(
    board: Board, row: int, col: int, direction: Direction, amount: int
) -> Board:
    """Move the vehicle covering (*row*, *col*) by *amount* cells.

    Any cell of the vehicle may be given.  Returns a new board; *board*
    itself is never modified, so on error the caller still holds the
    position it started from.

    Raises:
        InvalidAmount: *amount* is negative.
        OutOfBounds: (*row*, *col*) is off the board, or the vehicle would
            leave it.
        EmptyCellMove: (*row*, *col*) holds no vehicle.
        OrientationMismatch: *direction* is not along the vehicle's axis.
        Collision: a cell on the path is occupied.
    """
    if amount < 0:
        raise InvalidAmount(amount)
    if not board.in_bounds(row, col):
        raise OutOfBounds(row, col, board.height, board.width)

    cell = board.get(row, col)
    if cell.is_empty:
        raise EmptyCellMove(row, col)
    if direction.axis is not cell.orientation:
        raise OrientationMismatch(cell.vehicle, cell.orientation, direction)

    anchor_row, anchor_col = find_vehicle(board, cell.vehicle)
    far_row, far_col = far_end(direction, anchor_row, anchor_col, cell.length)
    logger.debug(
        "moving %r %s %d from (%d, %d)-(%d, %d)",
        cell.vehicle, direction, amount, anchor_row, anchor_col, far_row, far_col,
    )

    if direction in (Direction.LEFT, Direction.RIGHT):
        moved = slide(
            direction, amount, board, cell, anchor_col, anchor_row, far_col, far_row
        )
    else:
        moved = slide_vertical(
            direction, amount, board, cell, anchor_col, anchor_row, far_col, far_row
        )
    return moved


def move_vehicle(
    board: Board, vehicle: str, direction: Direction, amount: int
) -> Board:
    """Like :func:`apply_move`, addressing the vehicle by id."""
    row, col = find_vehicle(board, vehicle)
    return apply_move(board, row, col, direction, amount)


def apply_moves(board: Board, moves: Iterable[Move]) -> Board:
    """Apply *moves* in order.  The first rejected move propagates."""
    for move in moves:
        board = move_vehicle(board, move.vehicle, move.direction, move.amount)
    return board
