import os
from dotenv import load_dotenv
from typing import Optional

from shiro.othello.game import DEFAULT_BOARD_SIZE

load_dotenv()

DEFAULT_COMPUTER_DELAY_MS = 500


def get_board_size() -> int:
    return int(os.getenv("SHIRO_BOARD_SIZE", str(DEFAULT_BOARD_SIZE)))


def get_computer_delay_ms() -> int:
    return int(os.getenv("SHIRO_COMPUTER_DELAY_MS", str(DEFAULT_COMPUTER_DELAY_MS)))


def get_seed() -> Optional[int]:
    seed = os.getenv("SHIRO_SEED")
    if not seed:
        return None
    return int(seed)


def get_prize_url() -> Optional[str]:
    return os.getenv("SHIRO_PRIZE_URL") or None


def get_verbose() -> bool:
    return os.getenv("SHIRO_VERBOSE", "0") != "0"
