"""Unit tests for the scripted opponent's heuristic."""

import pytest

from gomoku.evaluator import (
    FOUR_SCORE,
    NO_MOVE,
    best_move,
    evaluate_direction,
    evaluate_position,
)
from gomoku.game import Board, Player


def stones(board, color, cells):
    for row, col in cells:
        board.set(row, col, color)


class TestEvaluateDirection:
    def test_no_neighbours_scores_zero(self):
        board = Board(15)
        assert evaluate_direction(board, 7, 7, 0, 1, Player.BLACK) == 0

    def test_single_open_neighbour(self):
        board = Board(15)
        board.set(7, 8, Player.BLACK)
        assert evaluate_direction(board, 7, 7, 0, 1, Player.BLACK) == 10

    def test_neighbours_on_both_sides_add_up(self):
        board = Board(15)
        stones(board, Player.BLACK, [(7, 5), (7, 7)])
        assert evaluate_direction(board, 7, 6, 0, 1, Player.BLACK) == 100

    def test_open_three(self):
        board = Board(15)
        stones(board, Player.BLACK, [(7, 5), (7, 6), (7, 7)])
        assert evaluate_direction(board, 7, 8, 0, 1, Player.BLACK) == 1000
        assert evaluate_direction(board, 7, 4, 0, 1, Player.BLACK) == 1000

    def test_blocked_by_opponent_scores_zero(self):
        board = Board(15)
        stones(board, Player.BLACK, [(7, 5), (7, 6)])
        board.set(7, 4, Player.WHITE)
        assert evaluate_direction(board, 7, 7, 0, 1, Player.BLACK) == 0

    def test_blocked_by_edge_scores_zero(self):
        board = Board(15)
        board.set(0, 0, Player.BLACK)
        assert evaluate_direction(board, 0, 1, 0, 1, Player.BLACK) == 0

    def test_edge_cell_with_no_run_scores_zero(self):
        board = Board(15)
        assert evaluate_direction(board, 0, 0, 1, 1, Player.BLACK) == 0

    def test_four_scores_even_when_blocked(self):
        board = Board(15)
        board.set(7, 2, Player.WHITE)
        stones(board, Player.BLACK, [(7, 3), (7, 4), (7, 5), (7, 6)])
        assert evaluate_direction(board, 7, 7, 0, 1, Player.BLACK) == FOUR_SCORE

    def test_split_four_scores_as_four(self):
        board = Board(15)
        stones(board, Player.BLACK, [(7, 4), (7, 5), (7, 7), (7, 8)])
        assert evaluate_direction(board, 7, 6, 0, 1, Player.BLACK) == FOUR_SCORE

    def test_probe_stops_at_first_gap(self):
        board = Board(15)
        # (7, 9) sits beyond an empty cell and is not counted.
        stones(board, Player.BLACK, [(7, 6), (7, 9)])
        assert evaluate_direction(board, 7, 7, 0, 1, Player.BLACK) == 10

    def test_other_colour_is_ignored(self):
        board = Board(15)
        board.set(7, 8, Player.WHITE)
        assert evaluate_direction(board, 7, 7, 0, 1, Player.BLACK) == 0

    def test_diagonal(self):
        board = Board(15)
        stones(board, Player.WHITE, [(6, 8), (5, 9)])
        assert evaluate_direction(board, 7, 7, 1, -1, Player.WHITE) == 100


class TestEvaluatePosition:
    def test_empty_board_scores_zero_everywhere(self):
        board = Board(15)
        for row, col in board.empty_cells():
            assert evaluate_position(board, row, col) == 0

    def test_defense_is_weighted(self):
        board = Board(15)
        board.set(7, 7, Player.BLACK)
        assert evaluate_position(board, 6, 6) == pytest.approx(11.0)

        board = Board(15)
        board.set(7, 7, Player.WHITE)
        assert evaluate_position(board, 6, 6) == pytest.approx(10.0)

    def test_sums_over_axes(self):
        board = Board(15)
        stones(board, Player.BLACK, [(7, 5), (7, 6), (7, 7)])
        # Vertical, and both diagonals each touch one black stone.
        assert evaluate_position(board, 6, 6) == pytest.approx(33.0)


class TestBestMove:
    def test_empty_board_picks_first_cell(self):
        board = Board(15)
        assert best_move(board) == (0, 0)

    def test_full_board_returns_no_move(self):
        board = Board(5)
        for row in range(5):
            for col in range(5):
                board.set(row, col, Player.BLACK if (row + col) % 2 else Player.WHITE)
        assert best_move(board) is NO_MOVE

    def test_single_empty_cell_is_chosen(self):
        board = Board(5)
        for row in range(5):
            for col in range(5):
                board.set(row, col, Player.BLACK if (row + col) % 2 else Player.WHITE)
        board.set(3, 1, None)
        assert best_move(board) == (3, 1)

    def test_answers_first_stone_next_to_it(self):
        board = Board(15)
        board.set(7, 7, Player.BLACK)
        # (6, 6), (6, 7) and (6, 8) tie; row-major order keeps (6, 6).
        assert best_move(board) == (6, 6)

    def test_blocks_open_three(self):
        board = Board(15)
        stones(board, Player.BLACK, [(7, 5), (7, 6), (7, 7)])
        assert best_move(board) == (7, 4)

    def test_blocks_four(self):
        board = Board(15)
        board.set(7, 2, Player.WHITE)
        stones(board, Player.BLACK, [(7, 3), (7, 4), (7, 5), (7, 6)])
        assert best_move(board) == (7, 7)

    def test_completes_own_four(self):
        board = Board(15)
        stones(board, Player.WHITE, [(3, 3), (4, 4), (5, 5), (6, 6)])
        board.set(2, 2, Player.BLACK)
        assert best_move(board) == (7, 7)

    def test_plays_for_black_when_asked(self):
        board = Board(15)
        stones(board, Player.BLACK, [(0, 10), (0, 11), (0, 12), (0, 13)])
        assert best_move(board, Player.BLACK) == (0, 9)
