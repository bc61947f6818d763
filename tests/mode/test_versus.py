import pygame
import pytest
from typing import Optional

from shiro.arguments import Arguments
from shiro.mode.versus import COMPUTER, HUMAN, VersusComputerMode
from shiro.othello.board import DARK, EMPTY, LIGHT, Board, create_initial_board
from shiro.othello.game import Game

E = EMPTY
L = LIGHT
D = DARK

# After the human plays a1, the computer has no moves but the human still has a3.
BOARD_COMPUTER_MUST_PASS = Board.from_squares(
    [
        [E, L, D, E, E, E],
        [E, E, E, E, E, E],
        [E, L, D, D, D, D],
        [E, E, E, E, E, E],
        [E, E, E, E, E, E],
        [E, E, E, E, E, E],
    ]
)

# The computer's only move is a1, after which the human must pass and the
# computer can play a3.
BOARD_HUMAN_MUST_PASS = Board.from_squares(
    [
        [E, D, L, E, E, E],
        [D, E, E, E, E, E],
        [E, E, E, E, E, E],
        [E, E, E, E, E, E],
        [E, E, E, E, E, E],
        [E, E, E, E, E, E],
    ]
)


class FakeClock:
    def __init__(self) -> None:
        self.ticks = 1000

    def __call__(self) -> int:
        return self.ticks


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mode(clock: FakeClock, monkeypatch: pytest.MonkeyPatch) -> VersusComputerMode:
    monkeypatch.delenv("SHIRO_PRIZE_URL", raising=False)
    monkeypatch.delenv("SHIRO_VERBOSE", raising=False)
    args = Arguments(6, 0, 500, False)
    return VersusComputerMode(args, get_ticks=clock)


def test_start(mode: VersusComputerMode) -> None:
    assert mode.get_board() == create_initial_board(6)
    assert mode.game.turn == HUMAN
    assert mode.computer_move_due is None


def test_human_move_schedules_computer(
    mode: VersusComputerMode, clock: FakeClock
) -> None:
    mode.on_move((1, 2))

    assert mode.game.moves == [(1, 2)]
    assert mode.game.turn == COMPUTER
    assert mode.computer_move_due == 1500


def test_computer_moves_after_delay(mode: VersusComputerMode, clock: FakeClock) -> None:
    mode.on_move((1, 2))

    clock.ticks = 1499
    mode.on_frame()
    assert len(mode.game.moves) == 1

    clock.ticks = 1500
    mode.on_frame()
    assert len(mode.game.moves) == 2
    assert mode.computer_move_due is None
    assert mode.game.turn == HUMAN


def test_human_input_ignored_while_computer_pending(mode: VersusComputerMode) -> None:
    mode.on_move((1, 2))
    board = mode.get_board()

    for move in mode.game.legal_moves():
        mode.on_move(move)

    assert mode.get_board() == board
    assert mode.game.moves == [(1, 2)]


def test_illegal_click_is_ignored(mode: VersusComputerMode) -> None:
    mode.on_move((0, 0))
    mode.on_move((2, 2))

    assert mode.game.moves == []
    assert mode.computer_move_due is None
    assert mode.game.turn == HUMAN


def test_on_frame_without_pending_move(mode: VersusComputerMode) -> None:
    mode.on_frame()
    assert mode.game.moves == []


def test_full_game_against_computer(mode: VersusComputerMode, clock: FakeClock) -> None:
    while not mode.game.is_game_over():
        if mode.game.turn == HUMAN:
            assert mode.computer_move_due is None
            mode.on_move(mode.game.legal_moves()[0])
        else:
            clock.ticks += 500
            mode.on_frame()

    assert mode.computer_move_due is None
    assert "game_over" in mode.get_ui_details()


def test_click_after_game_over_restarts(mode: VersusComputerMode) -> None:
    mode.game = Game(Board.empty(6))
    assert mode.game.is_game_over()

    mode.on_move((0, 0))

    assert mode.get_board() == create_initial_board(6)
    assert mode.game.turn == HUMAN


def test_restart_key(mode: VersusComputerMode) -> None:
    mode.on_move((1, 2))
    mode.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))

    assert mode.get_board() == create_initial_board(6)
    assert mode.computer_move_due is None


def test_hint_key(mode: VersusComputerMode) -> None:
    assert mode.get_ui_details()["hidden_colors"]

    mode.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h))
    assert not mode.get_ui_details()["hidden_colors"]

    mode.on_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_h))
    assert mode.get_ui_details()["hidden_colors"]


def test_ui_details_start(mode: VersusComputerMode) -> None:
    details = mode.get_ui_details()

    assert details["legal_moves"] == {(1, 2), (2, 1), (3, 4), (4, 3)}
    assert details["played_move"] is None
    assert details["turn"] == HUMAN
    assert details["score"].dark == 2
    assert "game_over" not in details


def test_ui_details_computer_turn(mode: VersusComputerMode) -> None:
    mode.on_move((1, 2))
    details = mode.get_ui_details()

    assert "legal_moves" not in details
    assert details["played_move"] == (1, 2)


@pytest.mark.parametrize(
    ["fill", "expected_winner", "expected_prize_url"],
    [
        pytest.param(DARK, "player", "https://example.com/prize", id="player-wins"),
        pytest.param(LIGHT, "computer", None, id="computer-wins"),
    ],
)
def test_ui_details_game_over(
    clock: FakeClock,
    monkeypatch: pytest.MonkeyPatch,
    fill: int,
    expected_winner: str,
    expected_prize_url: Optional[str],
) -> None:
    monkeypatch.setenv("SHIRO_PRIZE_URL", "https://example.com/prize")
    mode = VersusComputerMode(Arguments(6, 0, 500, True), get_ticks=clock)
    mode.game = Game(Board.from_squares([[fill] * 6 for _ in range(6)]))

    details = mode.get_ui_details()

    assert not details["hidden_colors"]
    assert details["game_over"] == {
        "winner": expected_winner,
        "prize_url": expected_prize_url,
    }


def test_ui_details_draw(mode: VersusComputerMode) -> None:
    mode.game = Game(Board.empty(6))
    assert mode.get_ui_details()["game_over"]["winner"] == "draw"


def test_verbose_output(
    clock: FakeClock,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("SHIRO_VERBOSE", "1")
    mode = VersusComputerMode(Arguments(6, 0, 500, False), get_ticks=clock)

    mode.on_move((1, 2))
    clock.ticks += 500
    mode.on_frame()

    assert "Computer plays" in capsys.readouterr().out


def test_verbose_game_over(
    clock: FakeClock,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("SHIRO_VERBOSE", "1")
    mode = VersusComputerMode(Arguments(6, 0, 500, False), get_ticks=clock)
    mode.game = Game(BOARD_COMPUTER_MUST_PASS)

    mode.on_move((0, 0))
    mode.on_move((2, 0))

    output = capsys.readouterr().out
    assert "Light has no moves and passes" in output
    assert "Game over: player (9-0)" in output
    assert "Moves: a1 a3" in output


def test_computer_must_pass(mode: VersusComputerMode) -> None:
    mode.game = Game(BOARD_COMPUTER_MUST_PASS)

    mode.on_move((0, 0))

    assert mode.computer_move_due is None
    assert mode.game.turn == HUMAN
    assert mode.game.passes == [(COMPUTER, 1)]

    details = mode.get_ui_details()
    assert details["legal_moves"] == {(2, 0)}
    assert details["played_move"] == (0, 0)


def test_human_must_pass(mode: VersusComputerMode, clock: FakeClock) -> None:
    mode.game = Game(BOARD_HUMAN_MUST_PASS, COMPUTER)
    mode.schedule_computer_move()
    assert mode.computer_move_due == 1500

    clock.ticks = 1500
    mode.on_frame()

    assert mode.game.moves == [(0, 0)]
    assert mode.game.passes == [(HUMAN, 1)]
    assert mode.game.turn == COMPUTER
    assert mode.computer_move_due == 2000
    assert "legal_moves" not in mode.get_ui_details()

    # Human input stays ignored while the computer moves again.
    mode.on_move((2, 0))
    assert mode.game.moves == [(0, 0)]

    clock.ticks = 2000
    mode.on_frame()

    assert mode.game.moves == [(0, 0), (2, 0)]
    assert mode.game.is_game_over()
    assert mode.computer_move_due is None
    assert mode.get_ui_details()["game_over"]["winner"] == "computer"
