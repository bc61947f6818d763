# Don't complain about setting env var in the middle of imports.
# ruff: noqa: E402

import os
import typer
from typing import Annotated, Optional

# Disable pygame start-up text.
# This needs to be before first pygame import.
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from shiro.arguments import Arguments
from shiro.mode.versus import VersusComputerMode
from shiro.othello.board import InvalidBoardSize, validate_board_size
from shiro.window import Window

app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def main(
    board_size: Annotated[Optional[int], typer.Option("--size", "-n")] = None,
    seed: Annotated[Optional[int], typer.Option("--seed", "-s")] = None,
    computer_delay_ms: Annotated[Optional[int], typer.Option("--delay", "-d")] = None,
    hints: Annotated[bool, typer.Option("--hints")] = False,
) -> None:
    # Options that are not passed fall back to SHIRO_* environment values.
    try:
        args = Arguments.from_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        exit(1)

    if board_size is not None:
        args.board_size = board_size
    if seed is not None:
        args.seed = seed
    if computer_delay_ms is not None:
        args.computer_delay_ms = computer_delay_ms
    args.hints = hints

    try:
        validate_board_size(args.board_size)
    except InvalidBoardSize as e:
        print(e)
        exit(1)

    Window(VersusComputerMode, args).run()


if __name__ == "__main__":
    app()
