from __future__ import annotations

from typing import Optional

from shiro.othello.board import (
    DARK,
    Board,
    IllegalMove,
    Position,
    Score,
    apply_move,
    create_initial_board,
    has_moves,
    is_legal_move,
    legal_moves,
    opponent,
    score,
    winner,
)

DEFAULT_BOARD_SIZE = 6


class Game:
    """
    Game keeps track of the side to move and decides on passes and the end of the game.

    The side to move is stored in `turn`, which becomes `None` once neither side can move.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        turn: int = DARK,
        size: int = DEFAULT_BOARD_SIZE,
    ) -> None:
        if board is None:
            board = create_initial_board(size)

        self.board = board
        self.turn: Optional[int] = None
        self.boards: list[Board] = [board]
        self.moves: list[Position] = []

        # Side that was forced to pass, with the number of moves played at that time.
        self.passes: list[tuple[int, int]] = []

        self.__resolve_turn(turn)

    @classmethod
    def from_moves(cls, moves: list[Position], size: int = DEFAULT_BOARD_SIZE) -> Game:
        game = Game(size=size)
        for move in moves:
            game.play(move)
        return game

    def __repr__(self) -> str:
        return f"Game({self.board}, {self.turn})"

    def __resolve_turn(self, preferred: int) -> None:
        if has_moves(self.board, preferred):
            self.turn = preferred
            return

        other = opponent(preferred)

        if has_moves(self.board, other):
            self.passes.append((preferred, len(self.moves)))
            self.turn = other
            return

        self.turn = None

    def play(self, pos: Position) -> None:
        if self.turn is None:
            raise IllegalMove("Game is over")

        if not is_legal_move(self.board, pos, self.turn):
            raise IllegalMove(f"Invalid move {pos}")

        mover = self.turn
        self.board = apply_move(self.board, pos, mover)
        self.boards.append(self.board)
        self.moves.append(pos)

        self.__resolve_turn(opponent(mover))

    def legal_moves(self) -> list[Position]:
        if self.turn is None:
            return []
        return legal_moves(self.board, self.turn)

    def is_game_over(self) -> bool:
        return self.turn is None

    def consecutive_passes(self) -> int:
        if self.turn is None:
            return 2

        if self.passes and self.passes[-1][1] == len(self.moves):
            return 1
        return 0

    def last_move(self) -> Optional[Position]:
        if not self.moves:
            return None
        return self.moves[-1]

    def score(self) -> Score:
        return score(self.board)

    def winner(self) -> Optional[int]:
        if self.turn is not None:
            raise ValueError("Game is not over yet")
        return winner(self.board)

    def restart(self) -> None:
        self.board = create_initial_board(self.board.size)
        self.boards = [self.board]
        self.moves = []
        self.passes = []
        self.__resolve_turn(DARK)
