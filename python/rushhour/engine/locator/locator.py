"""Locates vehicles on a board and computes the far end of their span."""

from __future__ import annotations

import logging

from rushhour.models.board import Board
from rushhour.models.cell import Direction
from rushhour.models.errors import VehicleNotFound

logger = logging.getLogger(__name__)


def find_vehicle(board: Board, vehicle: str) -> tuple[int, int]:
    """Return the first cell of *vehicle* in row-major order.

    Because a vehicle is one contiguous run, this is always the top-left
    end of its span.
    """
    for r, row in enumerate(board.cells):
        for c, cell in enumerate(row):
            if cell.vehicle == vehicle:
                logger.debug("found vehicle %r at (%d, %d)", vehicle, r, c)
                return r, c
    raise VehicleNotFound(vehicle)


def far_end(direction: Direction, row: int, col: int, length: int) -> tuple[int, int]:
    """Return the other end of a span anchored at (*row*, *col*).

    The offset runs along the move's axis and does not depend on which
    way along that axis the move goes.
    """
    if direction in (Direction.LEFT, Direction.RIGHT):
        return row, col + length - 1
    return row + length - 1, col
