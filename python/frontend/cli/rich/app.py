"""Rich terminal frontend — renders boards as coloured tables.

Shared by the ``show`` and ``move`` commands in ``main.py``.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rushhour.engine.gameplay import DEFAULT_TARGET
from rushhour.models.board import Board
from rushhour.models.move import Move

console = Console()

_PALETTE = (
    "cyan", "green", "yellow", "magenta", "blue",
    "bright_cyan", "bright_green", "bright_yellow", "bright_magenta", "bright_blue",
)


# -- board rendering ----------------------------------------------------------


def _styles(board: Board, target: str) -> dict[str, str]:
    styles: dict[str, str] = {}
    for i, vehicle in enumerate(sorted(board.vehicles())):
        styles[vehicle] = _PALETTE[i % len(_PALETTE)]
    if target in styles:
        styles[target] = "bold red"
    return styles


def render_board(board: Board, target: str = DEFAULT_TARGET) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max(
        (len(v) for v in board.vehicles()),
        default=1,
    )
    styles = _styles(board, target)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width, justify="center")

    for row in board.cells:
        cells: list[str] = []
        for cell in row:
            if cell.is_empty:
                cells.append("[dim]·[/dim]")
            else:
                style = styles[cell.vehicle]
                cells.append(f"[{style}]{cell.vehicle}[/{style}]")
        table.add_row(*cells)

    return table


# -- public entry points ------------------------------------------------------


def show_board(
    board: Board, title: str = "Rush Hour", target: str = DEFAULT_TARGET
) -> None:
    panel = Panel(
        Align.center(render_board(board, target)),
        title=f"[bold cyan]{title}  {board.height}×{board.width}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(panel)


def show_moves(board: Board, moves: list[Move], target: str = DEFAULT_TARGET) -> None:
    """Show the board reached after *moves*, with the move list underneath."""
    summary = Text()
    summary.append("  Moves: ", style="dim")
    summary.append(",".join(str(m) for m in moves) or "-", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(board, target)), Align.center(summary)),
        title=f"[bold green]After {len(moves)} move(s)[/bold green]",
        border_style="green",
        padding=(1, 2),
    )
    console.print(panel)


def show_error(message: str) -> None:
    console.print(Text(f"  {message}", style="bold red"))
