import logging
import random
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Final

from py_tic_tac_toe_cpu.board import Board
from py_tic_tac_toe_cpu.evaluator import COMPUTER, PlayerSymbol
from py_tic_tac_toe_cpu.exception import LogicError
from py_tic_tac_toe_cpu.player import Player
from py_tic_tac_toe_cpu.search import best_move

logger = logging.getLogger(__name__)

MEDIUM_RANDOM_MOVE_CHANCE: Final = 0.3


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


DEFAULT_DIFFICULTY: Final = Difficulty.MEDIUM


def random_move(board: Board, rng: random.Random) -> int | None:
    available_positions = board.get_available_positions()
    if not available_positions:
        return None
    return rng.choice(available_positions)


def medium_move(board: Board, rng: random.Random) -> int | None:
    """Play the best move, except on a 30% coin flip per turn where any empty cell is picked."""
    move = best_move(board)
    if rng.random() < MEDIUM_RANDOM_MOVE_CHANCE:
        move = random_move(board, rng)
        logger.debug("Medium difficulty plays a random move: %s", move)
    return move


def select_move(board: Board, difficulty: Difficulty, rng: random.Random | None = None) -> int | None:
    """Pick the computer's next cell for the given difficulty.

    Returns None only if the board has no empty cell.
    """
    if rng is None:
        rng = random.Random()

    match difficulty:
        case Difficulty.EASY:
            return random_move(board, rng)
        case Difficulty.MEDIUM:
            return medium_move(board, rng)
        case Difficulty.HARD:
            return best_move(board)
        case _:
            msg = f"Unknown difficulty: {difficulty}."
            raise ValueError(msg)


class AiPlayer(Player, ABC):
    difficulty: Difficulty

    def __init__(self, symbol: PlayerSymbol, board: Board, rng: random.Random | None = None) -> None:
        super().__init__(symbol)
        self._board = board
        self._rng = rng if rng is not None else random.Random()

    def start_turn(self) -> None:
        move = self._find_move()
        if move is None:
            msg = f"No moves available for player {self._symbol}, but game not over."
            raise LogicError(msg)
        self.queue_move(move)

    @abstractmethod
    def _find_move(self) -> int | None:
        pass


class RandomAiPlayer(AiPlayer):
    difficulty = Difficulty.EASY

    def _find_move(self) -> int | None:
        return random_move(self._board, self._rng)


class MediumAiPlayer(AiPlayer):
    difficulty = Difficulty.MEDIUM

    def _find_move(self) -> int | None:
        return medium_move(self._board, self._rng)


class HardAiPlayer(AiPlayer):
    difficulty = Difficulty.HARD

    def _find_move(self) -> int | None:
        return best_move(self._board)


def create_computer_player(
    difficulty: Difficulty,
    board: Board,
    rng: random.Random | None = None,
) -> AiPlayer:
    match difficulty:
        case Difficulty.EASY:
            return RandomAiPlayer(COMPUTER, board, rng)
        case Difficulty.MEDIUM:
            return MediumAiPlayer(COMPUTER, board, rng)
        case Difficulty.HARD:
            return HardAiPlayer(COMPUTER, board, rng)
        case _:
            msg = f"Unknown difficulty: {difficulty}. Choose from 'easy', 'medium', 'hard'."
            raise ValueError(msg)
