"""Move engine tests — locating, sliding, and validating moves.

Fixed scenarios cover every error kind; the seeded random boards at the
bottom check the unit-step slide against a whole-path check and the
vertical/horizontal transpose symmetry.
"""

from __future__ import annotations

import random

import pytest

from rushhour.engine.gameplay import apply_move, apply_moves, move_vehicle
from rushhour.engine.locator import far_end, find_vehicle
from rushhour.engine.mover import slide, slide_vertical
from rushhour.models import (
    EMPTY,
    Board,
    Cell,
    Collision,
    Direction,
    EmptyCellMove,
    InvalidAmount,
    Move,
    MoveError,
    Orientation,
    OrientationMismatch,
    OutOfBounds,
    VehicleNotFound,
)

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL

BLOCKED = """
    . . . . . .
    . . . . . .
    X X Y . . .
    . . . . . .
    . . . . . .
    . . . . . .
"""

TOWER = """
    . . . Z . .
    . . . Z . .
    . . . Z . .
    . . . . . .
    . . . . . .
    . . . . . .
"""

TOWER_DOWN_2 = """
    . . . . . .
    . . . . . .
    . . . Z . .
    . . . Z . .
    . . . Z . .
    . . . . . .
"""

PARKING_LOT = """
    A A . . . O
    P . . . . O
    P X X Q . O
    P . . Q . .
    B . . . C C
    B . R R R .
"""

_STEP = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


# -- helpers ------------------------------------------------------------------


def _legal_directions(orientation: Orientation) -> list[Direction]:
    return [d for d in Direction if d.axis is orientation]


def _random_board(rng: random.Random, width: int = 6, height: int = 6) -> Board:
    """Drop up to a dozen random vehicles wherever they fit."""
    grid: list[list[Cell]] = [[EMPTY] * width for _ in range(height)]
    for i in range(12):
        orientation = rng.choice(list(Orientation))
        length = rng.randint(1, 3)
        if orientation is H:
            r, c = rng.randrange(height), rng.randrange(width - length + 1)
            span = [(r, c + j) for j in range(length)]
        else:
            r, c = rng.randrange(height - length + 1), rng.randrange(width)
            span = [(r + j, c) for j in range(length)]
        if all(grid[r][c].is_empty for r, c in span):
            for r, c in span:
                grid[r][c] = Cell(chr(ord("A") + i), orientation, length)
    return Board.from_rows(grid)


def _bulk_move(board: Board, vehicle: str, direction: Direction, amount: int) -> Board | None:
    """Check the whole swept path up front; ``None`` if the move is illegal."""
    v = board.vehicles()[vehicle]
    dr, dc = _STEP[direction]
    lead_r, lead_c = (v.row, v.col) if direction in (Direction.UP, Direction.LEFT) else v.far_end
    path = [(lead_r + dr * s, lead_c + dc * s) for s in range(1, amount + 1)]
    if not all(board.in_bounds(r, c) and board.get(r, c).is_empty for r, c in path):
        return None
    cell = board.get(v.row, v.col)
    updates = {p: EMPTY for p in v.span}
    updates.update({(r + dr * amount, c + dc * amount): cell for r, c in v.span})
    return board.with_cells_replaced(updates)


# -- locator ------------------------------------------------------------------


def test_find_vehicle_returns_first_cell_in_row_major_order() -> None:
    board = Board.from_text(PARKING_LOT)
    assert find_vehicle(board, "O") == (0, 5)
    assert find_vehicle(board, "P") == (1, 0)
    assert find_vehicle(board, "R") == (5, 2)


def test_find_vehicle_missing() -> None:
    with pytest.raises(VehicleNotFound):
        find_vehicle(Board.from_text(PARKING_LOT), "W")


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.RIGHT, (2, 4)),
        (Direction.LEFT, (2, 4)),
        (Direction.UP, (4, 2)),
        (Direction.DOWN, (4, 2)),
    ],
)
def test_far_end_adds_length_along_move_axis(direction: Direction, expected: tuple[int, int]) -> None:
    assert far_end(direction, 2, 2, 3) == expected


# -- mover --------------------------------------------------------------------


def test_slide_right_enters_and_vacates_one_cell_per_step() -> None:
    board = Board.from_text(". P P . .")
    cell = board.get(0, 1)
    moved = slide(Direction.RIGHT, 2, board, cell, 1, 0, 2, 0)
    assert moved == Board.from_text(". . . P P")


def test_slide_left_single_cell_vehicle() -> None:
    board = Board.from_text(". . . Q .")
    moved = slide(Direction.LEFT, 3, board, board.get(0, 3), 3, 0, 3, 0)
    assert moved == Board.from_text("Q . . . .")


def test_slide_rejects_vertical_directions() -> None:
    board = Board.from_text("P .")
    with pytest.raises(ValueError):
        slide(Direction.UP, 1, board, board.get(0, 0), 0, 0, 0, 0)


def test_slide_vertical_rejects_horizontal_directions() -> None:
    board = Board.from_text("P .")
    with pytest.raises(ValueError):
        slide_vertical(Direction.RIGHT, 1, board, board.get(0, 0), 0, 0, 0, 0)


def test_slide_vertical_reports_untransposed_coordinates() -> None:
    board = Board.from_text(TOWER).with_cells_replaced({(4, 3): Cell("W")})
    with pytest.raises(Collision) as info:
        move_vehicle(board, "Z", Direction.DOWN, 2)
    assert (info.value.row, info.value.col, info.value.blocker) == (4, 3, "W")

    with pytest.raises(OutOfBounds) as info:
        move_vehicle(Board.from_text(TOWER), "Z", Direction.DOWN, 4)
    assert (info.value.row, info.value.col) == (6, 3)


# -- orchestrator -------------------------------------------------------------


def test_collision_rejects_move_and_leaves_board_unchanged() -> None:
    board = Board.from_text(BLOCKED)
    with pytest.raises(Collision) as info:
        move_vehicle(board, "X", Direction.RIGHT, 1)
    assert info.value.blocker == "Y"
    assert board == Board.from_text(BLOCKED)


def test_slide_down_updates_exactly_the_expected_cells() -> None:
    board = Board.from_text(TOWER)
    moved = move_vehicle(board, "Z", Direction.DOWN, 2)

    assert moved == Board.from_text(TOWER_DOWN_2)
    assert moved.get(0, 3) is EMPTY and moved.get(1, 3) is EMPTY
    assert all(moved.get(r, 3) == Cell("Z", V, 3) for r in (2, 3, 4))
    assert board == Board.from_text(TOWER)


def test_any_cell_of_the_vehicle_can_address_it() -> None:
    board = Board.from_text(TOWER)
    expected = Board.from_text(TOWER_DOWN_2)
    for row in range(3):
        assert apply_move(board, row, 3, Direction.DOWN, 2) == expected


def test_out_of_bounds_anchor_rejected() -> None:
    board = Board.from_text(BLOCKED)
    with pytest.raises(OutOfBounds):
        apply_move(board, 6, 0, Direction.RIGHT, 1)
    with pytest.raises(OutOfBounds):
        apply_move(board, 0, 6, Direction.RIGHT, 1)


def test_moving_off_the_board_is_out_of_bounds() -> None:
    board = Board.from_text(BLOCKED)
    with pytest.raises(OutOfBounds):
        move_vehicle(board, "X", Direction.LEFT, 1)


def test_empty_cell_cannot_move() -> None:
    with pytest.raises(EmptyCellMove):
        apply_move(Board.from_text(BLOCKED), 0, 0, Direction.RIGHT, 1)


def test_negative_amount_rejected() -> None:
    with pytest.raises(InvalidAmount):
        move_vehicle(Board.from_text(BLOCKED), "X", Direction.RIGHT, -1)


@pytest.mark.parametrize("direction", [Direction.UP, Direction.DOWN])
@pytest.mark.parametrize("amount", [0, 1, 9])
def test_horizontal_vehicle_cannot_move_vertically(direction: Direction, amount: int) -> None:
    # X sits against the top edge with R below it: bounds and collisions
    # would both fail, but the orientation check comes first.
    board = Board.from_text("X X\nR R")
    with pytest.raises(OrientationMismatch):
        move_vehicle(board, "X", direction, amount)


@pytest.mark.parametrize("direction", [Direction.LEFT, Direction.RIGHT])
def test_vertical_vehicle_cannot_move_horizontally(direction: Direction) -> None:
    with pytest.raises(OrientationMismatch):
        move_vehicle(Board.from_text(TOWER), "Z", direction, 1)


def test_vehicle_slides_past_its_own_cells() -> None:
    board = Board.from_text("R R R . . .")
    assert move_vehicle(board, "R", Direction.RIGHT, 3) == Board.from_text(". . . R R R")


def test_intermediate_obstruction_blocks_the_whole_move() -> None:
    board = Board.from_text("P . W . .")
    with pytest.raises(Collision):
        move_vehicle(board, "P", Direction.RIGHT, 4)


def test_apply_moves_folds_a_sequence() -> None:
    board = Board.from_text(PARKING_LOT)
    moves = Move.parse_sequence("Qv2, X>1, Q^2")
    with pytest.raises(Collision):
        apply_moves(board, moves)

    moves = Move.parse_sequence("Q^2,X>2")
    result = apply_moves(board, moves)
    assert result.vehicles()["X"].col == 3
    assert result.vehicles()["Q"].row == 0


# -- properties over every vehicle --------------------------------------------


def test_zero_move_is_identity_for_every_vehicle() -> None:
    board = Board.from_text(PARKING_LOT)
    for vehicle in board.vehicles().values():
        for direction in _legal_directions(vehicle.orientation):
            assert move_vehicle(board, vehicle.id, direction, 0) == board


def test_inverse_moves_cancel() -> None:
    board = Board.from_text(PARKING_LOT)
    checked = 0
    for vehicle in board.vehicles().values():
        for direction in _legal_directions(vehicle.orientation):
            for amount in range(1, 6):
                try:
                    moved = move_vehicle(board, vehicle.id, direction, amount)
                except MoveError:
                    continue
                back = move_vehicle(moved, vehicle.id, direction.opposite, amount)
                assert back == board
                checked += 1
    assert checked > 0


@pytest.mark.parametrize("seed", range(20))
def test_unit_steps_agree_with_whole_path_check(seed: int) -> None:
    rng = random.Random(seed)
    board = _random_board(rng)
    for vehicle in board.vehicles().values():
        for direction in _legal_directions(vehicle.orientation):
            for amount in range(6):
                expected = _bulk_move(board, vehicle.id, direction, amount)
                try:
                    moved = move_vehicle(board, vehicle.id, direction, amount)
                except (Collision, OutOfBounds):
                    assert expected is None
                else:
                    assert moved == expected
                    moved.validate()


@pytest.mark.parametrize("seed", range(20))
def test_down_equals_right_on_transposed_board(seed: int) -> None:
    rng = random.Random(seed)
    board = _random_board(rng)
    for vehicle in board.vehicles().values():
        if vehicle.orientation is not V:
            continue
        for amount in range(6):
            for vertical, horizontal in (
                (Direction.DOWN, Direction.RIGHT),
                (Direction.UP, Direction.LEFT),
            ):
                try:
                    direct = move_vehicle(board, vehicle.id, vertical, amount)
                except MoveError as exc:
                    with pytest.raises(type(exc)):
                        move_vehicle(board.transpose(), vehicle.id, horizontal, amount)
                    continue
                reduced = move_vehicle(board.transpose(), vehicle.id, horizontal, amount)
                assert reduced.transpose() == direct
