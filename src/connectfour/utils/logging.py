"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Any

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TimeElapsedColumn,
    MofNCompleteColumn,
)
from rich.panel import Panel


console = Console()


def setup_logging(level: str = "WARNING") -> None:
    """Route the engine's stdlib log records through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@dataclass
class GameRecord:
    """Summary of one finished game."""

    game: int
    outcome: str  # "won" or "tied"
    winner: Optional[str]
    moves: int
    width: int
    height: int
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()


class Logger:
    """
    Game logger with rich output and JSON logging.

    Args:
        log_dir: Directory for log files (no file is written if None)
        verbose: Whether to print to console
    """

    def __init__(self, log_dir: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.log_file: Optional[Path] = None

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = log_path / f"games_{timestamp}.jsonl"

        self.history: list[GameRecord] = []

    def log_game(self, record: GameRecord) -> None:
        """Log one finished game."""
        self.history.append(record)

        if self.log_file is not None:
            with open(self.log_file, "a") as f:
                f.write(json.dumps(asdict(record)) + "\n")

        if self.verbose:
            self._print_game(record)

    def _print_game(self, r: GameRecord) -> None:
        table = Table(title=f"Game {r.game}", show_header=False, box=None)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Board", f"{r.height}x{r.width}")
        table.add_row("Moves", str(r.moves))
        if r.outcome == "won":
            table.add_row("Result", f"[green]{r.winner} won[/]")
        else:
            table.add_row("Result", "[yellow]Tie[/]")

        console.print(table)
        console.print()

    STYLES = {
        "info": "cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "red",
    }

    def log_message(self, message: str, level: str = "info") -> None:
        """Print a message styled for its level, unless the logger is quiet."""
        if self.verbose:
            console.print(message, style=self.STYLES.get(level, "white"))

    def log_info(self, message: str) -> None:
        self.log_message(message, "info")

    def log_success(self, message: str) -> None:
        """A game was won."""
        self.log_message(message, "success")

    def log_warning(self, message: str) -> None:
        """A game was tied."""
        self.log_message(message, "warning")

    def log_error(self, message: str) -> None:
        """Input the game could not use."""
        self.log_message(message, "error")


def create_progress() -> Progress:
    """Create a rich progress bar with elapsed time."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    def add_dict(d: dict, prefix: str = "") -> None:
        for k, v in d.items():
            key = f"{prefix}{k}" if prefix else k
            if isinstance(v, dict):
                add_dict(v, f"{key}.")
            else:
                table.add_row(key, str(v))

    add_dict(asdict(config))
    console.print(table)


def print_board(board: Any, title: str = "Board") -> None:
    """Print a game board (string or rich renderable) in a panel."""
    console.print(Panel(board, title=title, border_style="blue", expand=False))
