import pygame
from pygame.event import Event
from typing import Any, Callable, Optional

from shiro import config
from shiro.arguments import Arguments
from shiro.mode.base import BaseMode
from shiro.othello.board import (
    DARK,
    LIGHT,
    Board,
    IllegalMove,
    Position,
    color_name,
    position_to_field,
    positions_to_fields,
)
from shiro.othello.game import Game
from shiro.othello.player import RandomPlayer

HUMAN = DARK
COMPUTER = LIGHT


class VersusComputerMode(BaseMode):
    def __init__(
        self,
        args: Arguments,
        get_ticks: Callable[[], int] = pygame.time.get_ticks,
    ) -> None:
        self.game = Game(size=args.board_size)
        self.computer = RandomPlayer(args.seed)
        self.computer_delay_ms = args.computer_delay_ms
        self.show_hints = args.hints
        self.get_ticks = get_ticks
        self.prize_url = config.get_prize_url()
        self.verbose = config.get_verbose()

        # Time in ticks at which the pending computer move is played.
        self.computer_move_due: Optional[int] = None

        self.schedule_computer_move()

    def on_event(self, event: Event) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_h:
                self.show_hints = not self.show_hints
            elif event.key == pygame.K_r:
                self.restart()

    def on_move(self, move: Position) -> None:
        if self.game.is_game_over():
            self.restart()
            return

        if self.computer_move_due is not None or self.game.turn != HUMAN:
            return

        try:
            self.game.play(move)
        except IllegalMove:
            return

        self.on_game_change()

    def on_frame(self) -> None:
        if self.computer_move_due is None:
            return

        if self.get_ticks() < self.computer_move_due:
            return

        self.computer_move_due = None
        move = self.computer.play(self.game)

        if self.verbose:
            print(f"Computer plays {position_to_field(move, self.game.board.size)}")

        self.on_game_change()

    def on_game_change(self) -> None:
        if self.verbose and self.game.consecutive_passes() == 1:
            side, _ = self.game.passes[-1]
            print(f"{color_name(side).capitalize()} has no moves and passes")

        if self.game.is_game_over():
            if self.verbose:
                score = self.game.score()
                print(f"Game over: {self.get_winner_label()} ({score.dark}-{score.light})")
                print(f"Moves: {positions_to_fields(self.game.moves, self.game.board.size)}")
            return

        self.schedule_computer_move()

    def schedule_computer_move(self) -> None:
        if self.game.turn == COMPUTER:
            self.computer_move_due = self.get_ticks() + self.computer_delay_ms

    def restart(self) -> None:
        self.game.restart()
        self.computer_move_due = None
        self.schedule_computer_move()

    def get_winner_label(self) -> str:
        winner = self.game.winner()

        if winner == HUMAN:
            return "player"
        if winner == COMPUTER:
            return "computer"
        return "draw"

    def get_board(self) -> Board:
        return self.game.board

    def get_ui_details(self) -> dict[str, Any]:
        details: dict[str, Any] = {
            "hidden_colors": not self.show_hints,
            "played_move": self.game.last_move(),
            "score": self.game.score(),
            "turn": self.game.turn,
        }

        if self.game.turn == HUMAN and self.computer_move_due is None:
            details["legal_moves"] = set(self.game.legal_moves())

        if self.game.is_game_over():
            winner_label = self.get_winner_label()
            details["game_over"] = {
                "winner": winner_label,
                "prize_url": self.prize_url if winner_label == "player" else None,
            }

        return details
