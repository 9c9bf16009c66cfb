#!/usr/bin/env python3
"""2048 tilt replay.

Loads a board from a JSON file (a list of rows, top row first, ``0`` for
an empty cell), tilts it toward each given side in turn and prints the
result.

Usage::

    python main.py board.json east              # one tilt
    python main.py board.json north west south  # a sequence of tilts
    python main.py board.json -m 64 east        # win at 64 instead of 2048
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

import rich.box
import typer
from rich.console import Console
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from game2048 import MAX_PIECE, GamePlay, Side  # noqa: E402

console = Console()


# -- helpers ------------------------------------------------------------------


def _load_rows(path: Path) -> list[list[int]]:
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read board file {path}: {exc}") from exc

    if not isinstance(data, list) or not all(
        isinstance(row, list) and all(isinstance(v, int) for v in row)
        for row in data
    ):
        raise typer.BadParameter(
            f"{path} must hold a list of rows of integers, top row first."
        )
    return data


def _render_board(game: GamePlay) -> Table:
    """Return a Rich Table of the grid, top row first."""
    width = max(len(str(v)) for row in game.values() for v in row)
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(game.size):
        table.add_column(width=width, justify="right")

    for row in game.values():
        table.add_row(
            *(
                "[dim]·[/dim]" if v == 0 else f"[bold white]{v}[/bold white]"
                for v in row
            )
        )
    return table


def _status_line(game: GamePlay) -> str:
    over = "[bold red]over[/bold red]" if game.game_over else "[green]in progress[/green]"
    return (
        f"Score: [yellow]{game.score}[/yellow]  |  "
        f"Max score: [yellow]{game.max_score}[/yellow]  |  Game {over}"
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="JSON file with the starting board.",
    ),
    sides: Optional[List[Side]] = typer.Argument(
        None, case_sensitive=False,
        help="Sides to tilt toward, applied in order.",
    ),
    max_piece: int = typer.Option(
        MAX_PIECE, "-m", "--max-piece",
        min=2,
        help="Tile value that ends the game.",
    ),
) -> None:
    """Replay a sequence of tilts on a 2048 board."""
    try:
        game = GamePlay.from_rows(_load_rows(board), max_piece=max_piece)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="BOARD") from exc

    console.print(_render_board(game))
    console.print(_status_line(game))

    for side in sides or []:
        game.tilt(side)
        console.print()
        console.print(f"[bold cyan]Tilt {side.value}[/bold cyan]")
        console.print(_render_board(game))
        console.print(_status_line(game))


if __name__ == "__main__":
    app()
