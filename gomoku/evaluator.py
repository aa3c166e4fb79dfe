"""Heuristic move selection for the scripted opponent.

Each empty cell is scored by looking at its immediate neighbourhood along the
four axes, once for the opponent's own stones (offense) and once for the
human's stones (defense). The probe stops at the first empty or blocking cell,
so it rewards short open runs touching the cell rather than counting full
lines the way `check_win` does.
"""

from __future__ import annotations

import logging

from gomoku.game import DIRECTIONS, Board, Player

logger = logging.getLogger(__name__)

# Returned by best_move when the board has no empty cell.
NO_MOVE = None

MAX_PROBE = 4
DEFENSE_WEIGHT = 1.1

FOUR_SCORE = 10000
OPEN_RUN_SCORES = {
    3: 1000,
    2: 100,
    1: 10,
}


def _probe(board: Board, row: int, col: int, dr: int, dc: int, color: Player) -> tuple[int, int, int]:
    """Walk away from (row, col) one way. Returns (consecutive, blocked, space)."""
    consecutive = blocked = space = 0
    for i in range(1, MAX_PROBE + 1):
        r, c = row + dr * i, col + dc * i
        if not board.in_bounds(r, c):
            blocked += 1
            break
        cell = board.get(r, c)
        if cell == color:
            consecutive += 1
        elif cell is None:
            space += 1
            break
        else:
            blocked += 1
            break
    return consecutive, blocked, space


def evaluate_direction(board: Board, row: int, col: int, dr: int, dc: int, color: Player) -> int:
    """Score the stones of `color` adjacent to (row, col) along one axis."""
    fwd_consecutive, fwd_blocked, _ = _probe(board, row, col, dr, dc, color)
    back_consecutive, back_blocked, _ = _probe(board, row, col, -dr, -dc, color)

    consecutive = fwd_consecutive + back_consecutive
    blocked = fwd_blocked + back_blocked

    if consecutive >= 4:
        return FOUR_SCORE
    if blocked:
        return 0
    return OPEN_RUN_SCORES.get(consecutive, 0)


def evaluate_position(board: Board, row: int, col: int, me: Player = Player.WHITE) -> float:
    score = 0.0
    for dr, dc in DIRECTIONS:
        score += evaluate_direction(board, row, col, dr, dc, me)
        score += evaluate_direction(board, row, col, dr, dc, me.opposite()) * DEFENSE_WEIGHT
    return score


def best_move(board: Board, me: Player = Player.WHITE) -> tuple[int, int] | None:
    """Pick the highest-scoring empty cell for `me`.

    Ties go to the first cell in row-major order. Returns NO_MOVE if the
    board is full.
    """
    best_score = float("-inf")
    best = NO_MOVE

    for row, col in board.empty_cells():
        score = evaluate_position(board, row, col, me)
        if score > best_score:
            best_score = score
            best = (row, col)

    if best is NO_MOVE:
        logger.debug("No empty cell left for %s", me.value)
    else:
        logger.debug("%s picks %s (score %.1f)", me.value, best, best_score)
    return best
