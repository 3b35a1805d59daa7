# ruff: noqa: T201

from typing import Final

from py_tic_tac_toe_cpu.evaluator import BOARD_SIZE, CELL_COUNT, PlayerSymbol
from py_tic_tac_toe_cpu.game_engine import GameEngine
from py_tic_tac_toe_cpu.player_ai import Difficulty
from py_tic_tac_toe_cpu.ui import Ui


class TerminalUi(Ui):
    EXIT_COMMAND: Final = "exit"
    RESTART_COMMAND: Final = "restart"

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)

    def run(self) -> None:
        super().run()
        print(f"Difficulty: {self._game_engine.difficulty}", flush=True)
        self._game_engine.start_game_loop()
        try:
            while self._running:
                self._get_input()
        finally:
            self._game_engine.stop_game_loop()
        print("Terminal UI stopped", flush=True)

    def enable_input(self) -> None:
        super().enable_input()
        if not self._running:
            return
        self._ask_for_move()

    def _ask_for_move(self) -> None:
        print(f"{self.status_message()}, your move (1-{CELL_COUNT}): ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input().strip().lower()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        if input_str == self.EXIT_COMMAND:
            self._stop()
            return

        if input_str == self.RESTART_COMMAND:
            self._restart()
            return

        if input_str in tuple(Difficulty):
            self._set_difficulty(Difficulty(input_str))
            print(f"Difficulty: {self._game_engine.difficulty}", flush=True)
            if self._input_enabled:
                self._ask_for_move()
            return

        if not self._input_enabled or not self._running:
            return

        try:
            board_position = int(input_str)
        except ValueError:
            self._on_input_error(ValueError("Not an integer"))
            self._ask_for_move()
            return

        if not (1 <= board_position <= CELL_COUNT):
            self._on_input_error(ValueError(f"Not between 1 and {CELL_COUNT}"))
            self._ask_for_move()
            return

        index = board_position - 1
        if self._game_engine.game.board.cells[index] is not None:
            self._on_input_error(ValueError("Cell occupied"))
            self._ask_for_move()
            return

        self._queue_move(index)

    def _render_board(self) -> None:
        cells = self._game_engine.game.board.cells

        def _cell_value(index: int) -> str:
            value = cells[index]
            return value if value is not None else str(index + 1)

        rows = []
        for r in range(BOARD_SIZE):
            start = r * BOARD_SIZE
            row = " | ".join(_cell_value(start + i) for i in range(BOARD_SIZE))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)

    def _show_end_message(self, message: str, *, winner: PlayerSymbol | None) -> None:  # noqa: ARG002
        print(message, flush=True)
        print(f"Type '{self.RESTART_COMMAND}' to play again or '{self.EXIT_COMMAND}' to quit.", flush=True)

    def _on_input_error(self, exception: Exception) -> None:
        if not self._running:
            return
        print(str(exception), flush=True)
