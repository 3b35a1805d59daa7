"""Exhaustive minimax over the remaining 3x3 game tree.

The computer plays O and maximizes; X minimizes. Scores are +1 (O wins), -1 (X wins) and 0 (draw),
with no depth weighting, so equally scored moves are told apart only by cell index.
"""

import logging
from typing import Final

from py_tic_tac_toe_cpu.board import Board
from py_tic_tac_toe_cpu.evaluator import COMPUTER, HUMAN, PlayerSymbol, get_winner, is_draw

logger = logging.getLogger(__name__)

MAXIMIZER: Final[PlayerSymbol] = COMPUTER
MINIMIZER: Final[PlayerSymbol] = HUMAN

WIN_SCORE: Final = 1
LOSS_SCORE: Final = -1
DRAW_SCORE: Final = 0


def minimax(board: Board, *, maximizing: bool, depth: int = 0) -> int:
    """Score the position with the given side to move, assuming optimal play from both sides.

    Every hypothetical mark is cleared again before returning, so the board is left untouched.
    ``depth`` is only informational.
    """
    cells = board.cells
    winner = get_winner(cells)
    if winner == MAXIMIZER:
        return WIN_SCORE
    if winner == MINIMIZER:
        return LOSS_SCORE
    if is_draw(cells):
        return DRAW_SCORE

    player = MAXIMIZER if maximizing else MINIMIZER
    best_score = LOSS_SCORE - 1 if maximizing else WIN_SCORE + 1

    for index in board.get_available_positions():
        cells[index] = player
        score = minimax(board, maximizing=not maximizing, depth=depth + 1)
        cells[index] = None

        best_score = max(best_score, score) if maximizing else min(best_score, score)

    return best_score


def score_moves(board: Board) -> list[tuple[int, int]]:
    """Return ``(index, score)`` for every empty cell, in ascending index order.

    Each score is the value of the computer placing its mark at ``index`` with X to reply.
    """
    scratch = board.clone()
    scores: list[tuple[int, int]] = []
    for index in scratch.get_available_positions():
        scratch.cells[index] = MAXIMIZER
        scores.append((index, minimax(scratch, maximizing=False, depth=1)))
        scratch.cells[index] = None
    logger.debug("Move scores: %s", scores)
    return scores


def best_move(board: Board) -> int | None:
    best_score = LOSS_SCORE - 1
    best_index: int | None = None
    for index, score in score_moves(board):
        if score > best_score:
            best_score = score
            best_index = index
    return best_index
