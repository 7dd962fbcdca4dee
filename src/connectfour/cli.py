"""
Command-line interface for Connect 4.

Commands:
- play: Two players take turns at one terminal
- simulate: Play random games through the engine
- show-config: Print the effective configuration
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional
import typer
from rich.table import Table
from rich.text import Text

from .game import (
    EMPTY,
    Event,
    GameSession,
    GameState,
    Status,
    Won,
    Tied,
    drop_piece,
    legal_columns,
    start_game,
    winning_line,
)
from .utils import (
    BoardConfig,
    Config,
    GameRecord,
    Logger,
    console,
    create_progress,
    print_board,
    print_config,
    set_seed,
    setup_logging,
)

app = typer.Typer(
    name="connect4",
    help="Connect Four - drop pieces, get four in a row",
    no_args_is_help=True,
)

PIECE = "●"


def _load_config(
    config_path: Optional[Path],
    width: Optional[int] = None,
    height: Optional[int] = None,
    color1: Optional[str] = None,
    color2: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> Config:
    """Load config from YAML (if given) and apply command-line overrides."""
    if config_path and config_path.exists():
        config = Config.load(str(config_path))
    else:
        config = Config()

    if width is not None or height is not None:
        config.board = BoardConfig(
            width=width if width is not None else config.board.width,
            height=height if height is not None else config.board.height,
        )
    if color1 is not None:
        config.players.color1 = color1
    if color2 is not None:
        config.players.color2 = color2
    if log_dir is not None:
        config.log_dir = str(log_dir)

    return config


def board_text(state: GameState) -> Text:
    """Draw the board with each piece in its owner's color."""
    colors = {p.id: p.color for p in state.players}
    highlight = set(winning_line(state) or []) if state.status is Status.WON else set()

    text = Text()
    text.append(" ".join(str(c % 10) for c in range(state.width)) + "\n", style="dim")
    for r in range(state.height):
        for c in range(state.width):
            owner = int(state.board[r, c])
            if owner == EMPTY:
                text.append(".", style="dim")
            else:
                style = colors[owner]
                if (r, c) in highlight:
                    style += " bold reverse"
                text.append(PIECE, style=style)
            if c < state.width - 1:
                text.append(" ")
        if r < state.height - 1:
            text.append("\n")
    return text


def outcome_message(state: GameState) -> str:
    if state.status is Status.WON and state.winner is not None:
        return f"{state.winner.name} won!"
    return "Tie!"


def _record(game_no: int, state: GameState) -> GameRecord:
    return GameRecord(
        game=game_no,
        outcome=state.status.value,
        winner=state.winner.name if state.winner else None,
        moves=state.move_count,
        width=state.width,
        height=state.height,
    )


@app.command()
def play(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    width: Optional[int] = typer.Option(None, "--width", help="Board width"),
    height: Optional[int] = typer.Option(None, "--height", help="Board height"),
    color1: Optional[str] = typer.Option(None, "--color1", help="Player 1 color"),
    color2: Optional[str] = typer.Option(None, "--color2", help="Player 2 color"),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Append finished games to a JSONL log here"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Engine log level"),
) -> None:
    """Play a game of Connect 4 with two people at one terminal."""
    config = _load_config(config_path, width, height, color1, color2, log_dir)
    setup_logging(log_level)
    config.ensure_dirs()

    logger = Logger(log_dir=config.log_dir)
    session = GameSession(config)

    def announce(event: Event) -> None:
        state = session.state
        if isinstance(event, (Won, Tied)) and state is not None:
            print_board(board_text(state), title="Game over")
            if isinstance(event, Won):
                logger.log_success(outcome_message(state))
            else:
                logger.log_warning(outcome_message(state))

    session.subscribe(announce)

    console.print("\n[bold]Connect 4[/]")
    console.print("Enter a column number to drop a piece, 'r' to restart, 'q' to quit\n")

    game_no = 0
    while True:
        state = session.start_game()
        restart = False

        while not state.game_is_over:
            player = state.current
            print_board(board_text(state), title=f"[{player.color}]{player.name}[/]")
            choice = typer.prompt(f"{player.name} (0-{state.width - 1})").strip().lower()

            if choice == "q":
                return
            if choice == "r":
                logger.log_info("Restarting...")
                restart = True
                break

            try:
                col = int(choice)
            except ValueError:
                logger.log_error(f"Enter a column number 0-{state.width - 1}")
                continue

            result = session.drop_piece(col)
            if not result.accepted:
                logger.log_error(f"Column {col} is full or off the board, try again")

        if restart:
            continue

        game_no += 1
        logger.log_game(_record(game_no, state))
        if not typer.confirm("Play again?", default=True):
            return


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-n", help="Number of games to play"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    width: Optional[int] = typer.Option(None, "--width", help="Board width"),
    height: Optional[int] = typer.Option(None, "--height", help="Board height"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Append finished games to a JSONL log here"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Engine log level"),
) -> None:
    """Play random legal moves through the engine and tally the outcomes."""
    config = _load_config(config_path, width, height, log_dir=log_dir)
    if seed is not None:
        config.seed = seed
    setup_logging(log_level)
    config.ensure_dirs()

    rng = set_seed(config.seed)
    logger = Logger(log_dir=config.log_dir, verbose=False)

    tally = {"Player1": 0, "Player2": 0, "Tie": 0}
    total_moves = 0

    console.print(
        f"[cyan]Playing {games} random games on a "
        f"{config.board.height}x{config.board.width} board...[/]"
    )
    start = time.time()
    with create_progress() as progress:
        task = progress.add_task("Games", total=games)
        for i in range(games):
            state = start_game(
                config.players.color1,
                config.players.color2,
                width=config.board.width,
                height=config.board.height,
            )
            while not state.game_is_over:
                col = int(rng.choice(legal_columns(state)))
                drop_piece(state, col)

            tally[state.winner.name if state.winner else "Tie"] += 1
            total_moves += state.move_count
            logger.log_game(_record(i + 1, state))
            progress.update(task, advance=1)
    elapsed = time.time() - start

    table = Table(title="Results")
    table.add_column("Outcome", style="cyan")
    table.add_column("Games", style="white", justify="right")
    table.add_column("Share", style="white", justify="right")
    for name, count in tally.items():
        label = "Tie" if name == "Tie" else f"{name} wins"
        share = count / games * 100 if games else 0.0
        table.add_row(label, str(count), f"{share:.1f}%")
    console.print(table)

    if games:
        console.print(f"[green]Average game length: {total_moves / games:.1f} moves[/]")
    if elapsed > 0:
        console.print(f"[green]Moves/sec: {total_moves / elapsed:.0f}[/]")


@app.command("show-config")
def show_config(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
) -> None:
    """Print the effective configuration."""
    print_config(_load_config(config_path))


if __name__ == "__main__":
    app()
