import pygame
from pygame.event import Event
from typing import Any, Optional, Type

from shiro.arguments import Arguments
from shiro.mode.base import BaseMode
from shiro.othello.board import DARK, LIGHT, Position, Score

BOARD_WIDTH_PX = 600
BOARD_HEIGHT_PX = 600
STATUS_HEIGHT_PX = 60

FONT_SIZE = 40

COLOR_LIGHT_DISC = (255, 255, 255)
COLOR_DARK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID = (0, 80, 0)
COLOR_MOVE_INDICATOR = (250, 204, 21)
COLOR_PLAYED_MOVE = (220, 38, 38)
COLOR_STATUS_BACKGROUND = (30, 41, 59)
COLOR_OVERLAY = (0, 0, 0, 200)
COLOR_TEXT = (255, 255, 255)

FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, mode_type: Type[BaseMode], args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = mode_type(args)

        self.board_size = self.mode.get_board().size
        self.square_size = BOARD_WIDTH_PX // self.board_size
        self.disc_radius = self.square_size // 2 - 5
        self.move_indicator_radius = self.square_size // 8

        self.screen = pygame.display.set_mode(
            (BOARD_WIDTH_PX, BOARD_HEIGHT_PX + STATUS_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()

        pygame.display.set_caption("Shiro")
        self.font = pygame.font.Font(None, FONT_SIZE)

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    move = self.get_move_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)
                else:
                    self.mode.on_move(move)

            self.mode.on_frame()
            self.draw()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_board_square_center(self, pos: Position) -> tuple[int, int]:
        row, col = pos

        x = col * self.square_size + self.square_size // 2
        y = row * self.square_size + self.square_size // 2

        return (x, y)

    def draw_disc(self, pos: Position, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(pos)
        pygame.draw.circle(self.screen, color, center, self.disc_radius)

    def draw_move_indicator(self, pos: Position) -> None:
        center = self.get_board_square_center(pos)
        pygame.draw.circle(
            self.screen, COLOR_MOVE_INDICATOR, center, self.move_indicator_radius
        )

    def draw_square(self, pos: Position, color: tuple[int, int, int]) -> None:
        row, col = pos
        rect = (
            col * self.square_size,
            row * self.square_size,
            self.square_size,
            self.square_size,
        )
        pygame.draw.rect(self.screen, color, rect)
        pygame.draw.rect(self.screen, COLOR_GRID, rect, 1)

    def draw_text(self, text: str, center: tuple[int, int]) -> None:
        text_surface = self.font.render(text, True, COLOR_TEXT)
        text_rect = text_surface.get_rect()
        text_rect.center = center
        self.screen.blit(text_surface, text_rect.topleft)

    def draw(self) -> None:
        board = self.mode.get_board()

        ui_details = self.mode.get_ui_details()
        hidden_colors: bool = ui_details.pop("hidden_colors", False)
        legal_moves: set[Position] = ui_details.pop("legal_moves", set())
        played_move: Optional[Position] = ui_details.pop("played_move", None)
        score: Optional[Score] = ui_details.pop("score", None)
        turn: Optional[int] = ui_details.pop("turn", None)
        game_over: Optional[dict[str, Any]] = ui_details.pop("game_over", None)

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        self.screen.fill(COLOR_BACKGROUND)

        for pos in board.positions():
            if pos == played_move:
                self.draw_square(pos, COLOR_PLAYED_MOVE)
            else:
                self.draw_square(pos, COLOR_BACKGROUND)

            square = board.get_square(pos)

            if square == LIGHT or (square == DARK and hidden_colors):
                self.draw_disc(pos, COLOR_LIGHT_DISC)
            elif square == DARK:
                self.draw_disc(pos, COLOR_DARK_DISC)
            elif pos in legal_moves:
                self.draw_move_indicator(pos)

        self.draw_status(score, turn)

        if game_over is not None:
            self.draw_game_over(game_over, score)

        pygame.display.flip()

    def draw_status(self, score: Optional[Score], turn: Optional[int]) -> None:
        rect = (0, BOARD_HEIGHT_PX, BOARD_WIDTH_PX, STATUS_HEIGHT_PX)
        pygame.draw.rect(self.screen, COLOR_STATUS_BACKGROUND, rect)

        if score is None:
            return

        if turn == DARK:
            turn_text = "your move"
        elif turn == LIGHT:
            turn_text = "computer"
        else:
            turn_text = "game over"

        text = f"player {score.dark} | computer {score.light} | {turn_text}"
        center = (BOARD_WIDTH_PX // 2, BOARD_HEIGHT_PX + STATUS_HEIGHT_PX // 2)
        self.draw_text(text, center)

    def draw_game_over(self, game_over: dict[str, Any], score: Optional[Score]) -> None:
        overlay = pygame.Surface((BOARD_WIDTH_PX, BOARD_HEIGHT_PX), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

        lines = [f"Winner: {game_over['winner']}"]

        if score is not None:
            lines.append(f"Final score: {score.dark} - {score.light}")

        prize_url: Optional[str] = game_over.get("prize_url")
        if prize_url:
            lines.append("Congratulations! Claim your prize:")
            lines.append(prize_url)

        lines.append("Click to restart")

        line_height = FONT_SIZE + 10
        top = BOARD_HEIGHT_PX // 2 - (len(lines) * line_height) // 2

        for offset, line in enumerate(lines):
            center = (BOARD_WIDTH_PX // 2, top + offset * line_height)
            self.draw_text(line, center)

    def get_move_from_event(self, event: Event) -> Position:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // self.square_size
        row: int = y // self.square_size

        if not (row in range(self.board_size) and col in range(self.board_size)):
            raise NonMoveEvent

        return row, col
