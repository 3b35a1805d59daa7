from abc import ABC, abstractmethod

from py_tic_tac_toe_cpu.evaluator import PlayerSymbol
from py_tic_tac_toe_cpu.game import Draw, InProgress, Won
from py_tic_tac_toe_cpu.game_engine import GameEngine
from py_tic_tac_toe_cpu.player_ai import Difficulty


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._input_enabled = False
        self._game_engine.human.add_enable_input_cb(self.enable_input)
        self._game_engine.add_board_updated_cb(self.on_board_updated)

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _queue_move(self, index: int) -> None:
        # Disable own input immediately.
        # Prevents sending multiple moves before the engine picks this one up.
        self._disable_input()
        self._game_engine.queue_move(index)

    def _restart(self) -> None:
        self._disable_input()
        self._game_engine.restart()

    def _set_difficulty(self, difficulty: Difficulty) -> None:
        self._game_engine.set_difficulty(difficulty)

    def enable_input(self) -> None:
        if not self._running:
            return
        self._input_enabled = True

    def _disable_input(self) -> None:
        self._input_enabled = False

    def status_message(self) -> str:
        match self._game_engine.game.status:
            case InProgress(player):
                return f"Player {player}'s turn"
            case Won(player):
                return f"Player {player} wins!"
            case Draw():
                return "It's a draw!"

    def on_board_updated(self) -> None:
        if not self._running:
            return
        # The engine calls this after every applied move, including the computer's.
        # Input is re-enabled by the human player's next turn.
        self._disable_input()
        self._render_board()
        match self._game_engine.game.status:
            case Won(player):
                self._show_end_message(self.status_message(), winner=player)
            case Draw():
                self._show_end_message(self.status_message(), winner=None)

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str, *, winner: PlayerSymbol | None) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
