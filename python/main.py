#!/usr/bin/env python3
"""Rush Hour puzzle engine.

Usage::

    python main.py show board.txt               # render a board
    python main.py move board.txt "X>2,Zv1"     # apply moves and render
    python main.py --log-level DEBUG move ...   # trace every slide
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rushhour.engine.gameplay import DEFAULT_TARGET, apply_moves  # noqa: E402
from rushhour.models import Board, InvalidBoard, Move, MoveError  # noqa: E402


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# -- helpers ------------------------------------------------------------------


def _load_board(path: Path) -> Board:
    try:
        return Board.from_text(path.read_text())
    except InvalidBoard as exc:
        _fail(f"{path}: {exc}")


def _fail(message: str) -> NoReturn:
    from frontend.cli.rich.app import show_error

    show_error(message)
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        help="Logging threshold for engine messages.",
    ),
) -> None:
    """Rush Hour puzzle engine."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def show(
    board_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    target: str = typer.Option(DEFAULT_TARGET, "-t", "--target", help="Vehicle to highlight."),
    plain: bool = typer.Option(False, "--plain", help="Print the text declaration."),
) -> None:
    """Render a board declaration."""
    board = _load_board(board_file)
    if plain:
        typer.echo(board.to_text())
        return

    from frontend.cli.rich.app import show_board

    show_board(board, title=board_file.name, target=target)


@app.command()
def move(
    board_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    moves: str = typer.Argument(..., help='Comma-separated moves, e.g. "X>2,Zv1".'),
    target: str = typer.Option(DEFAULT_TARGET, "-t", "--target", help="Vehicle to highlight."),
    plain: bool = typer.Option(False, "--plain", help="Print the text declaration."),
) -> None:
    """Apply a sequence of moves to a board and render the result."""
    board = _load_board(board_file)
    try:
        sequence = Move.parse_sequence(moves)
    except ValueError as exc:
        _fail(str(exc))

    try:
        board = apply_moves(board, sequence)
    except MoveError as exc:
        _fail(f"Move rejected: {exc}")

    if plain:
        typer.echo(board.to_text())
        return

    from frontend.cli.rich.app import show_moves

    show_moves(board, sequence, target=target)


if __name__ == "__main__":
    app()
