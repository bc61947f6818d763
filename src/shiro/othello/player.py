from __future__ import annotations

import random
from typing import Optional, Sequence

from shiro.othello.board import Position
from shiro.othello.game import Game


class RandomPlayer:
    """Computer opponent which picks uniformly among the legal moves."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.random = random.Random(seed)

    def choose_move(self, moves: Sequence[Position]) -> Position:
        if not moves:
            raise ValueError("Cannot choose from an empty list of moves")

        return self.random.choice(moves)

    def play(self, game: Game) -> Position:
        move = self.choose_move(game.legal_moves())
        game.play(move)
        return move
