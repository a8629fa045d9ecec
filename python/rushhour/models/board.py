"""Board model for the Rush Hour puzzle."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from rushhour.models.cell import EMPTY, Cell, Orientation
from rushhour.models.errors import InvalidBoard, OutOfBounds

EMPTY_TOKEN = "."

_TOKEN_RE = re.compile(r"^([A-Za-z0-9]+)(?::([hHvV]))?$")


@dataclass(frozen=True)
class Vehicle:
    """A vehicle as read off a board.  Never stored, always derived."""

    id: str
    orientation: Orientation
    length: int
    row: int
    col: int

    @property
    def far_end(self) -> tuple[int, int]:
        if self.orientation is Orientation.HORIZONTAL:
            return self.row, self.col + self.length - 1
        return self.row + self.length - 1, self.col

    @property
    def span(self) -> list[tuple[int, int]]:
        if self.orientation is Orientation.HORIZONTAL:
            return [(self.row, self.col + i) for i in range(self.length)]
        return [(self.row + i, self.col) for i in range(self.length)]


def _normalise(cell: Cell) -> Cell:
    return EMPTY if cell.is_empty else cell


def _token(cell: Cell) -> str:
    if cell.is_empty:
        return EMPTY_TOKEN
    if cell.length == 1 and cell.orientation is Orientation.VERTICAL:
        return f"{cell.vehicle}:v"
    return cell.vehicle


@dataclass(frozen=True)
class Board:
    """An immutable ``height`` x ``width`` grid of cells.

    Boards are never changed in place: every update returns a new board
    that shares the untouched rows with the old one.
    """

    cells: tuple[tuple[Cell, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Cell]]) -> Board:
        """Create a validated board from literal rows of cells."""
        board = cls(tuple(tuple(_normalise(c) for c in row) for row in rows))
        board.validate()
        return board

    @classmethod
    def empty(cls, width: int, height: int) -> Board:
        if width < 1 or height < 1:
            raise InvalidBoard(f"Board must be at least 1x1, got {height}x{width}.")
        return cls(tuple((EMPTY,) * width for _ in range(height)))

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse a board declaration.

        One row per line, cells separated by whitespace.  ``.`` is an empty
        cell, anything else is a vehicle id.  Orientation and length come
        from the run of matching ids; a single-cell vehicle is horizontal
        unless one of its tokens is suffixed with ``:v``.

        Example::

            Board.from_text('''
                A A . . . Z
                . . . . . Z
                X X . . . Z
            ''')
        """
        grid: list[list[str | None]] = []
        hints: dict[str, Orientation] = {}
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            row: list[str | None] = []
            for token in line.split():
                if token == EMPTY_TOKEN:
                    row.append(None)
                    continue
                match = _TOKEN_RE.match(token)
                if match is None:
                    raise InvalidBoard(f"Bad cell token {token!r}.")
                vehicle, hint = match.groups()
                if hint:
                    orientation = (
                        Orientation.VERTICAL if hint.lower() == "v"
                        else Orientation.HORIZONTAL
                    )
                    if hints.setdefault(vehicle, orientation) is not orientation:
                        raise InvalidBoard(
                            f"Vehicle {vehicle!r} has conflicting orientation hints."
                        )
                row.append(vehicle)
            grid.append(row)

        if not grid:
            raise InvalidBoard("Board declaration has no rows.")

        positions: dict[str, list[tuple[int, int]]] = {}
        for r, row in enumerate(grid):
            for c, vehicle in enumerate(row):
                if vehicle is not None:
                    positions.setdefault(vehicle, []).append((r, c))

        vehicles: dict[str, Cell] = {}
        for vehicle, cells in positions.items():
            if len(cells) == 1:
                orientation = hints.get(vehicle, Orientation.HORIZONTAL)
            elif len({r for r, _ in cells}) == 1:
                orientation = Orientation.HORIZONTAL
            elif len({c for _, c in cells}) == 1:
                orientation = Orientation.VERTICAL
            else:
                raise InvalidBoard(
                    f"Vehicle {vehicle!r} does not lie along a single row or column."
                )
            if vehicle in hints and hints[vehicle] is not orientation:
                raise InvalidBoard(
                    f"Vehicle {vehicle!r} is declared {hints[vehicle]} "
                    f"but laid out {orientation}."
                )
            vehicles[vehicle] = Cell(vehicle, orientation, len(cells))

        return cls.from_rows(
            [EMPTY if v is None else vehicles[v] for v in row] for row in grid
        )

    # -- queries --------------------------------------------------------------

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.height, self.width)
        return self.cells[row][col]

    def vehicles(self) -> dict[str, Vehicle]:
        """Map every vehicle id to its derived :class:`Vehicle` view.

        The anchor of each vehicle is its first cell in row-major order.
        """
        found: dict[str, Vehicle] = {}
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell.is_empty or cell.vehicle in found:
                    continue
                found[cell.vehicle] = Vehicle(
                    cell.vehicle, cell.orientation, cell.length, r, c
                )
        return found

    def validate(self) -> None:
        """Raise :class:`InvalidBoard` unless every vehicle is one straight run."""
        if not self.cells or not self.cells[0]:
            raise InvalidBoard("Board must have at least one row and one column.")
        if any(len(row) != self.width for row in self.cells):
            raise InvalidBoard("Board rows have different lengths.")

        occupied: dict[str, set[tuple[int, int]]] = {}
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if not cell.is_empty:
                    occupied.setdefault(cell.vehicle, set()).add((r, c))

        for vehicle in self.vehicles().values():
            for r, c in occupied[vehicle.id]:
                cell = self.cells[r][c]
                if (cell.orientation, cell.length) != (vehicle.orientation, vehicle.length):
                    raise InvalidBoard(
                        f"Vehicle {vehicle.id!r} cells disagree on orientation or length."
                    )
            if occupied[vehicle.id] != set(vehicle.span):
                raise InvalidBoard(
                    f"Vehicle {vehicle.id!r} is not a single run of "
                    f"{vehicle.length} {vehicle.orientation} cells."
                )

    # -- updates --------------------------------------------------------------

    def with_cells_replaced(self, updates: Mapping[tuple[int, int], Cell]) -> Board:
        """Return a new board with the given positions replaced.

        Positions must be in bounds; rows without updates are shared.
        """
        by_row: dict[int, dict[int, Cell]] = {}
        for (r, c), cell in updates.items():
            by_row.setdefault(r, {})[c] = _normalise(cell)
        return Board(
            tuple(
                row if r not in by_row
                else tuple(by_row[r].get(c, old) for c, old in enumerate(row))
                for r, row in enumerate(self.cells)
            )
        )

    def transpose(self) -> Board:
        """Swap rows and columns, flipping every vehicle's orientation."""
        return Board(
            tuple(
                tuple(self.cells[r][c].transposed() for r in range(self.height))
                for c in range(self.width)
            )
        )

    # -- printing -------------------------------------------------------------

    def to_text(self) -> str:
        """Render the board in the declaration syntax read by :meth:`from_text`."""
        tokens = [[_token(cell) for cell in row] for row in self.cells]
        pad = max(len(t) for row in tokens for t in row)
        return "\n".join(
            " ".join(t.ljust(pad) for t in row).rstrip() for row in tokens
        )

    def __str__(self) -> str:
        return self.to_text()
