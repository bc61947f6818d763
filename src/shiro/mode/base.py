from pygame.event import Event
from typing import Any

from shiro.arguments import Arguments
from shiro.othello.board import Board, Position


class BaseMode:
    def __init__(self, args: Arguments):
        pass

    def on_event(self, event: Event) -> None:
        pass

    def on_frame(self) -> None:
        """Called once per frame, after all pending events were handled."""

    def on_move(self, move: Position) -> None:
        pass

    def get_board(self) -> Board:
        raise NotImplementedError

    def get_ui_details(self) -> dict[str, Any]:
        return {}
