from __future__ import annotations

from typing import Optional

from shiro import config


class Arguments:
    def __init__(
        self,
        board_size: int,
        seed: Optional[int],
        computer_delay_ms: int,
        hints: bool,
    ) -> None:
        self.board_size = board_size
        self.seed = seed
        self.computer_delay_ms = computer_delay_ms
        self.hints = hints

    @classmethod
    def from_config(cls) -> Arguments:
        return Arguments(
            config.get_board_size(),
            config.get_seed(),
            config.get_computer_delay_ms(),
            False,
        )
