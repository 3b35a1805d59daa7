from collections.abc import Sequence
from typing import Final, Literal, TypeAlias

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE

PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None

HUMAN: Final[PlayerSymbol] = "X"
COMPUTER: Final[PlayerSymbol] = "O"

WINNING_LINES: Final[tuple[tuple[int, int, int], ...]] = (
    (0, 1, 2),  # Rows
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),  # Columns
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),  # Diagonals
    (2, 4, 6),
)


def get_winner(cells: Sequence[Cell]) -> PlayerSymbol | None:
    """Return the player holding the first complete line, in ``WINNING_LINES`` order."""
    for a, b, c in WINNING_LINES:
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a]
    return None


def is_full(cells: Sequence[Cell]) -> bool:  # noqa: D103
    return all(cell is not None for cell in cells)


def is_draw(cells: Sequence[Cell]) -> bool:  # noqa: D103
    return is_full(cells) and get_winner(cells) is None


def is_terminal(cells: Sequence[Cell]) -> bool:  # noqa: D103
    return get_winner(cells) is not None or is_draw(cells)


def opponent(player: PlayerSymbol) -> PlayerSymbol:  # noqa: D103
    return "O" if player == "X" else "X"
