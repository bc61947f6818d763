import typer
from typing import Annotated, Optional

from shiro import config
from shiro.othello.board import (
    DARK,
    LIGHT,
    OthelloError,
    Position,
    field_to_position,
    is_game_end,
)
from shiro.othello.game import Game
from shiro.othello.player import RandomPlayer

app = typer.Typer(pretty_exceptions_enable=False)


class Simulation:
    def __init__(
        self,
        games: int,
        board_size: int,
        seed: Optional[int],
        opening: Optional[list[Position]] = None,
        show: bool = False,
    ) -> None:
        self.games = games
        self.board_size = board_size
        self.player = RandomPlayer(seed)
        self.opening = opening or []
        self.show = show

        self.wins: dict[Optional[int], int] = {DARK: 0, LIGHT: 0, None: 0}
        self.dark_discs_total = 0
        self.discs_total = 0
        self.passes_total = 0

    def play_game(self) -> Game:
        game = Game.from_moves(self.opening, self.board_size)

        while not is_game_end(game.board):
            self.player.play(game)

        return game

    def __call__(self) -> None:
        last_game: Optional[Game] = None

        for _ in range(self.games):
            game = self.play_game()
            final = game.score()

            self.wins[game.winner()] += 1
            self.dark_discs_total += final.get(DARK)
            self.discs_total += final.total()
            self.passes_total += len(game.passes)
            last_game = game

        print(f"Games: {self.games} on {self.board_size}x{self.board_size}")
        print(f"Dark wins: {self.wins[DARK]}")
        print(f"Light wins: {self.wins[LIGHT]}")
        print(f"Draws: {self.wins[None]}")

        if self.games:
            print(f"Average dark discs: {self.dark_discs_total / self.games:.2f}")
            print(f"Average discs: {self.discs_total / self.games:.2f}")
            print(f"Average passes: {self.passes_total / self.games:.2f}")

        if self.show and last_game is not None:
            last_game.board.show()


@app.command()
def main(
    games: Annotated[int, typer.Option("--games", "-g")] = 100,
    board_size: Annotated[Optional[int], typer.Option("--size", "-n")] = None,
    seed: Annotated[Optional[int], typer.Option("--seed", "-s")] = None,
    opening: Annotated[str, typer.Option("--opening", "-o")] = "",
    show: Annotated[bool, typer.Option("--show")] = False,
) -> None:
    # Options that are not passed fall back to SHIRO_* environment values.
    try:
        if board_size is None:
            board_size = config.get_board_size()
        if seed is None:
            seed = config.get_seed()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        exit(1)

    try:
        moves = [field_to_position(field, board_size) for field in opening.split()]

        # Replay once so a bad size or opening is reported before simulating.
        Game.from_moves(moves, board_size)
    except (ValueError, OthelloError) as e:
        print(e)
        exit(1)

    Simulation(games, board_size, seed, moves, show)()


if __name__ == "__main__":
    app()
