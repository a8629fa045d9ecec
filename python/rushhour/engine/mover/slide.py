"""The one-dimensional sliding algorithm.

A slide of ``amount`` cells is applied one unit step at a time.  At step
``k`` the vehicle enters one cell past its leading edge and vacates one
cell at its trailing edge; only the entered cell is checked, so a vehicle
never collides with itself.
"""

from __future__ import annotations

import logging

from rushhour.models.board import Board
from rushhour.models.cell import EMPTY, Cell, Direction
from rushhour.models.errors import Collision

logger = logging.getLogger(__name__)


def slide(
    direction: Direction,
    amount: int,
    board: Board,
    cell: Cell,
    anchor_col: int,
    anchor_row: int,
    far_col: int,
    far_row: int,
) -> Board:
    """Slide the vehicle spanning anchor..far end along its row.

    Only ``LEFT`` and ``RIGHT`` are handled here; vertical moves go through
    :func:`rushhour.engine.mover.axis.slide_vertical`.  Raises
    :class:`OutOfBounds` if the vehicle would leave the board and
    :class:`Collision` if an entered cell is occupied.
    """
    if direction not in (Direction.LEFT, Direction.RIGHT):
        raise ValueError(f"slide() only moves along a row, got {direction}.")

    for k in range(1, amount + 1):
        if direction is Direction.RIGHT:
            entered = (anchor_row, far_col + k)
            vacated = (anchor_row, anchor_col + k - 1)
        else:
            entered = (anchor_row, anchor_col - k)
            vacated = (anchor_row, far_col - k + 1)

        occupant = board.get(*entered)
        if not occupant.is_empty:
            logger.debug(
                "step %d/%d of %r %s blocked by %r at %s",
                k, amount, cell.vehicle, direction, occupant.vehicle, entered,
            )
            raise Collision(cell.vehicle, entered[0], entered[1], occupant.vehicle)

        board = board.with_cells_replaced({entered: cell, vacated: EMPTY})

    return board
