from dataclasses import dataclass
from enum import StrEnum

from py_tic_tac_toe_cpu import evaluator
from py_tic_tac_toe_cpu.evaluator import CELL_COUNT, Cell, PlayerSymbol
from py_tic_tac_toe_cpu.exception import InvalidMoveError


class MoveOrigin(StrEnum):
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(frozen=True, slots=True)
class Move:
    player: PlayerSymbol
    index: int
    origin: MoveOrigin = MoveOrigin.HUMAN


class Board:
    def __init__(self) -> None:
        self._cells: list[Cell] = [None] * CELL_COUNT
        self._origins: list[MoveOrigin | None] = [None] * CELL_COUNT

    @property
    def cells(self) -> list[Cell]:
        return self._cells

    def origin(self, index: int) -> MoveOrigin | None:
        return self._origins[index]

    def clone(self) -> "Board":
        copied = Board()
        copied._cells = self._cells[:]
        copied._origins = self._origins[:]
        return copied

    def reset(self) -> None:
        self._cells[:] = [None] * CELL_COUNT
        self._origins[:] = [None] * CELL_COUNT

    def apply_move(self, move: Move) -> None:
        if not (0 <= move.index < CELL_COUNT):
            raise IndexError("Move out of bounds.")

        if self._cells[move.index] is not None:
            raise InvalidMoveError("Cell occupied.")

        self._cells[move.index] = move.player
        self._origins[move.index] = move.origin

    def get_available_positions(self) -> list[int]:
        return [index for index, cell in enumerate(self._cells) if cell is None]

    def is_full(self) -> bool:
        return evaluator.is_full(self._cells)

    def get_winner(self) -> PlayerSymbol | None:
        return evaluator.get_winner(self._cells)

    def is_draw(self) -> bool:
        return evaluator.is_draw(self._cells)

    def is_game_over(self) -> bool:
        return evaluator.is_terminal(self._cells)
