from __future__ import annotations

from typing import Iterable, Optional

LIGHT = 1
DARK = -1
EMPTY = 0

MIN_BOARD_SIZE = 4

# Column letters limit field notation.
MAX_BOARD_SIZE = 26

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

Position = tuple[int, int]


class OthelloError(Exception):
    pass


class InvalidBoardSize(OthelloError):
    pass


class OutOfBounds(OthelloError):
    pass


class IllegalMove(OthelloError):
    pass


def opponent(color: int) -> int:
    assert color in [LIGHT, DARK]
    return -color


def color_name(color: int) -> str:
    return {LIGHT: "light", DARK: "dark", EMPTY: "empty"}[color]


def validate_board_size(size: int) -> None:
    if size % 2 != 0 or not (MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE):
        raise InvalidBoardSize(
            f"Board size must be even and between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}"
        )


class Score:
    def __init__(self, light: int, dark: int) -> None:
        self.light = light
        self.dark = dark

    def __repr__(self) -> str:
        return f"Score(light={self.light}, dark={self.dark})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Score):
            raise TypeError(f"Cannot compare Score with {type(other)}")

        return (self.light, self.dark) == (other.light, other.dark)

    def __hash__(self) -> int:  # pragma: nocover
        return hash((self.light, self.dark))

    def get(self, color: int) -> int:
        assert color in [LIGHT, DARK]

        if color == LIGHT:
            return self.light
        return self.dark

    def total(self) -> int:
        return self.light + self.dark


class Board:
    """
    Board is an immutable snapshot of an othello board of any supported size.
    Rules live in module level functions which take a Board and return a new one.
    """

    def __init__(self, squares: tuple[tuple[int, ...], ...]) -> None:
        self.size = len(squares)
        self.squares = squares

    @classmethod
    def from_squares(cls, rows: Iterable[Iterable[int]]) -> Board:
        squares = tuple(tuple(row) for row in rows)
        validate_board_size(len(squares))

        for row in squares:
            if len(row) != len(squares):
                raise ValueError("Board must be square")

            for square in row:
                if square not in [LIGHT, DARK, EMPTY]:
                    raise ValueError(f'Unknown square value "{square}"')

        return Board(squares)

    @classmethod
    def empty(cls, size: int) -> Board:
        validate_board_size(size)
        return Board(tuple((EMPTY,) * size for _ in range(size)))

    def __repr__(self) -> str:
        return f"Board({self.squares})"

    def as_tuple(self) -> tuple[tuple[int, ...], ...]:
        return self.squares

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def is_on_board(self, pos: Position) -> bool:
        row, col = pos
        return row in range(self.size) and col in range(self.size)

    def get_square(self, pos: Position) -> int:
        if not self.is_on_board(pos):
            raise OutOfBounds(f"{pos} is not on a {self.size}x{self.size} board")

        row, col = pos
        return self.squares[row][col]

    def positions(self) -> list[Position]:
        return [(row, col) for row in range(self.size) for col in range(self.size)]

    def count(self, color: int) -> int:
        return sum(row.count(color) for row in self.squares)

    def count_discs(self) -> int:
        return self.size * self.size - self.count_empties()

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def with_squares(self, changes: dict[Position, int]) -> Board:
        rows = [list(row) for row in self.squares]
        for (row, col), color in changes.items():
            rows[row][col] = color
        return Board(tuple(tuple(row) for row in rows))

    def show(self, turn: Optional[int] = None) -> None:
        moves = set(legal_moves(self, turn)) if turn is not None else set()
        columns = "abcdefghijklmnopqrstuvwxyz"[: self.size]

        print("+-" + "-".join(columns) + "-+")
        for row in range(self.size):
            print("{:<2}".format(row + 1), end="")

            for col in range(self.size):
                square = self.squares[row][col]

                if square == DARK:
                    print("○ ", end="")
                elif square == LIGHT:
                    print("● ", end="")
                elif (row, col) in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-" + "--" * self.size + "+")


def position_to_field(pos: Position, size: int) -> str:
    row, col = pos
    if row not in range(size) or col not in range(size):
        raise ValueError(f"{pos} is not on a {size}x{size} board")
    return "abcdefghijklmnopqrstuvwxyz"[col] + str(row + 1)


def positions_to_fields(positions: Iterable[Position], size: int) -> str:
    return " ".join(position_to_field(pos, size) for pos in positions)


def field_to_position(field: str, size: int) -> Position:
    if len(field) not in [2, 3]:
        raise ValueError(f'Invalid move length "{len(field)}"')

    field = field.lower()

    if not ("a" <= field[0] <= "z" and field[1:].isdigit()):
        raise ValueError(f'Invalid field "{field}"')

    col = ord(field[0]) - ord("a")
    row = int(field[1:]) - 1

    if row not in range(size) or col not in range(size):
        raise ValueError(f'Invalid field "{field}"')

    return row, col


def create_initial_board(size: int) -> Board:
    validate_board_size(size)

    mid = size // 2
    return Board.empty(size).with_squares(
        {
            (mid - 1, mid - 1): LIGHT,
            (mid - 1, mid): DARK,
            (mid, mid - 1): DARK,
            (mid, mid): LIGHT,
        }
    )


def get_flips(board: Board, pos: Position, side: int) -> list[Position]:
    assert side in [LIGHT, DARK]

    if board.get_square(pos) != EMPTY:
        return []

    row, col = pos
    flipped: list[Position] = []

    for dy, dx in DIRECTIONS:
        flipped_line: list[Position] = []
        y, x = row + dy, col + dx

        while board.is_on_board((y, x)) and board.squares[y][x] == opponent(side):
            flipped_line.append((y, x))
            y, x = y + dy, x + dx

        # Line must end on one of our own discs, otherwise nothing is captured.
        if flipped_line and board.is_on_board((y, x)) and board.squares[y][x] == side:
            flipped += flipped_line

    return flipped


def is_legal_move(board: Board, pos: Position, side: int) -> bool:
    if not board.is_on_board(pos):
        return False

    return len(get_flips(board, pos, side)) > 0


def legal_moves(board: Board, side: int) -> list[Position]:
    return [pos for pos in board.positions() if is_legal_move(board, pos, side)]


def has_moves(board: Board, side: int) -> bool:
    return any(is_legal_move(board, pos, side) for pos in board.positions())


def apply_move(board: Board, pos: Position, side: int) -> Board:
    flipped = get_flips(board, pos, side)

    if not flipped:
        raise IllegalMove(f"{color_name(side)} cannot play at {pos}")

    changes = {square: side for square in flipped}
    changes[pos] = side
    return board.with_squares(changes)


def score(board: Board) -> Score:
    light = 0
    dark = 0
    for row in board.squares:
        for square in row:
            if square == LIGHT:
                light += 1
            elif square == DARK:
                dark += 1
    return Score(light, dark)


def is_game_end(board: Board) -> bool:
    return not (has_moves(board, DARK) or has_moves(board, LIGHT))


def winner(board: Board) -> Optional[int]:
    final = score(board)

    if final.light > final.dark:
        return LIGHT
    if final.dark > final.light:
        return DARK
    return None
