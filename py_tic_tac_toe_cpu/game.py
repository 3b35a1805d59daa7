import logging
import random
from dataclasses import dataclass
from typing import Final, TypeAlias

from py_tic_tac_toe_cpu.board import Board, Move, MoveOrigin
from py_tic_tac_toe_cpu.evaluator import COMPUTER, HUMAN, Cell, PlayerSymbol, opponent
from py_tic_tac_toe_cpu.exception import InvalidMoveError, LogicError
from py_tic_tac_toe_cpu.player_ai import Difficulty, select_move

logger = logging.getLogger(__name__)

FIRST_PLAYER: Final[PlayerSymbol] = HUMAN


@dataclass(frozen=True, slots=True)
class InProgress:
    player: PlayerSymbol


@dataclass(frozen=True, slots=True)
class Won:
    player: PlayerSymbol


@dataclass(frozen=True, slots=True)
class Draw:
    pass


GameStatus: TypeAlias = InProgress | Won | Draw


class Game:
    def __init__(self) -> None:
        self._board = Board()
        self._status: GameStatus = InProgress(FIRST_PLAYER)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def current_player_symbol(self) -> PlayerSymbol | None:
        """Symbol of the player to move, or None once the game is over."""
        match self._status:
            case InProgress(player):
                return player
            case _:
                return None

    def is_over(self) -> bool:
        return not isinstance(self._status, InProgress)

    def apply_move(self, index: int, origin: MoveOrigin = MoveOrigin.HUMAN) -> bool:
        """Place the current player's mark at ``index``.

        Illegal moves (game over, occupied cell) leave the game untouched and return False.
        """
        player = self.current_player_symbol
        if player is None:
            logger.debug("Move at %d rejected: game over.", index)
            return False

        try:
            self._board.apply_move(Move(player, index, origin))
        except InvalidMoveError as e:
            logger.debug("Move at %d rejected: %s", index, e)
            return False

        winner = self._board.get_winner()
        if winner is not None:
            self._status = Won(winner)
            logger.info("Player %s wins.", winner)
        elif self._board.is_draw():
            self._status = Draw()
            logger.info("Game ended in a draw.")
        else:
            self._status = InProgress(opponent(player))
        return True

    def reset(self) -> None:
        self._board.reset()
        self._status = InProgress(FIRST_PLAYER)


# Functional interface used by front ends that hold the game state themselves.


def new_game() -> Game:
    return Game()


def apply_human_move(state: Game, index: int) -> Game:
    if state.current_player_symbol == HUMAN:
        state.apply_move(index, MoveOrigin.HUMAN)
    return state


def computer_turn(state: Game, difficulty: Difficulty, rng: random.Random | None = None) -> Game:
    if state.current_player_symbol != COMPUTER:
        msg = f"Computer turn requested while game status is {state.status}."
        raise LogicError(msg)

    move = select_move(state.board, difficulty, rng)
    if move is None:
        raise LogicError("No moves available for the computer, but game not over.")
    state.apply_move(move, MoveOrigin.COMPUTER)
    return state


def status(state: Game) -> GameStatus:
    return state.status


def board(state: Game) -> tuple[Cell, ...]:
    return tuple(state.board.cells)
