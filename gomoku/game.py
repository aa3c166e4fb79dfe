"""Game logic: board state, move validation, and win detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from gomoku.config import BOARD_SIZE

logger = logging.getLogger(__name__)

WIN_LENGTH = 5

# Four axes: vertical, horizontal, diagonal ↘, diagonal ↙
DIRECTIONS = [
    (1, 0),
    (0, 1),
    (1, 1),
    (1, -1),
]


class Player(str, Enum):
    BLACK = "black"
    WHITE = "white"

    def opposite(self) -> Player:
        return Player.WHITE if self is Player.BLACK else Player.BLACK


# A cell is either empty (None) or holds a player's stone.
CellValue = Player | None


class Board:
    """Fixed-size square grid of stones. Indexing outside the grid raises IndexError."""

    def __init__(self, size: int = BOARD_SIZE):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self._cells: list[list[CellValue]] = [[None] * size for _ in range(size)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> CellValue:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        return self._cells[row][col]

    def set(self, row: int, col: int, value: CellValue) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        self._cells[row][col] = value

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    def empty_cells(self) -> Iterator[tuple[int, int]]:
        """Yield every empty cell in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                if self._cells[row][col] is None:
                    yield row, col

    def is_full(self) -> bool:
        return all(cell is not None for line in self._cells for cell in line)

    def clear(self) -> None:
        for line in self._cells:
            for col in range(self.size):
                line[col] = None

    def rows(self) -> list[list[CellValue]]:
        return [list(line) for line in self._cells]


def check_win(board: Board, row: int, col: int, player: Player) -> bool:
    """Check if a stone of `player` at (row, col) completes five-in-a-row."""
    for dr, dc in DIRECTIONS:
        count = 1

        # Extend in positive direction
        for i in range(1, WIN_LENGTH):
            r, c = row + dr * i, col + dc * i
            if not board.in_bounds(r, c):
                break
            if board.get(r, c) != player:
                break
            count += 1

        # Extend in negative direction
        for i in range(1, WIN_LENGTH):
            r, c = row - dr * i, col - dc * i
            if not board.in_bounds(r, c):
                break
            if board.get(r, c) != player:
                break
            count += 1

        if count >= WIN_LENGTH:
            return True

    return False


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game handed to the renderer."""

    board: tuple[tuple[CellValue, ...], ...]
    current_player: Player
    is_game_over: bool
    winner: Player | None
    move_count: int
    last_move: tuple[int, int] | None


class GameState:
    def __init__(self, size: int = BOARD_SIZE):
        self.board = Board(size)
        self.current_player: Player = Player.BLACK
        self.move_count: int = 0
        self.is_game_over: bool = False
        self.winner: Player | None = None
        self.last_move: tuple[int, int] | None = None

    @property
    def size(self) -> int:
        return self.board.size

    def validate_move(self, row: int, col: int, player: Player | None = None) -> str | None:
        """Return the reason a move is illegal, or None if it may be played."""
        if self.is_game_over:
            return "Game is already over"
        if player is not None and player != self.current_player:
            return "Not your turn"
        if not self.board.in_bounds(row, col):
            return "Coordinates out of bounds"
        if not self.board.is_empty(row, col):
            return "Cell is already occupied"
        return None

    def place(self, row: int, col: int, player: Player | None = None) -> bool:
        """Place the current player's stone. Returns False, changing nothing, if illegal.

        A winning stone ends the game with that player as winner. A stone that
        fills the board without winning ends it as a draw (no winner). In both
        cases the turn does not pass; otherwise it goes to the other player.
        """
        reason = self.validate_move(row, col, player)
        if reason:
            logger.debug("Ignored move (%d, %d): %s", row, col, reason)
            return False

        mover = self.current_player
        self.board.set(row, col, mover)
        self.move_count += 1
        self.last_move = (row, col)

        if check_win(self.board, row, col, mover):
            self.is_game_over = True
            self.winner = mover
            logger.info("%s wins with (%d, %d) after %d moves", mover.value, row, col, self.move_count)
            return True

        if self.board.is_full():
            self.is_game_over = True
            self.winner = None
            logger.info("Board full after %d moves, game drawn", self.move_count)
            return True

        self.current_player = mover.opposite()
        return True

    def is_draw(self) -> bool:
        return self.is_game_over and self.winner is None

    def reset(self) -> None:
        self.board.clear()
        self.current_player = Player.BLACK
        self.move_count = 0
        self.is_game_over = False
        self.winner = None
        self.last_move = None

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=tuple(tuple(line) for line in self.board.rows()),
            current_player=self.current_player,
            is_game_over=self.is_game_over,
            winner=self.winner,
            move_count=self.move_count,
            last_move=self.last_move,
        )
