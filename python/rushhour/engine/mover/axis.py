"""Vertical moves, reduced to horizontal ones on the transposed board."""

from __future__ import annotations

from rushhour.engine.mover.slide import slide
from rushhour.models.board import Board
from rushhour.models.cell import Cell, Direction
from rushhour.models.errors import Collision, OutOfBounds


def slide_vertical(
    direction: Direction,
    amount: int,
    board: Board,
    cell: Cell,
    anchor_col: int,
    anchor_row: int,
    far_col: int,
    far_row: int,
) -> Board:
    """Slide a vehicle along its column.

    UP becomes LEFT and DOWN becomes RIGHT on the transposed board, with
    row and column swapped in every coordinate.  Errors are reported in
    the coordinates of the board that was passed in.
    """
    if direction not in (Direction.UP, Direction.DOWN):
        raise ValueError(f"slide_vertical() only moves along a column, got {direction}.")

    try:
        moved = slide(
            direction.transposed,
            amount,
            board.transpose(),
            cell.transposed(),
            anchor_row,
            anchor_col,
            far_row,
            far_col,
        )
    except Collision as exc:
        raise Collision(exc.vehicle, exc.col, exc.row, exc.blocker) from None
    except OutOfBounds as exc:
        raise OutOfBounds(exc.col, exc.row, exc.width, exc.height) from None
    return moved.transpose()
