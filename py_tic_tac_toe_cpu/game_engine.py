import logging
import random
import threading
import time
from collections.abc import Callable
from typing import Final

from py_tic_tac_toe_cpu.board import MoveOrigin
from py_tic_tac_toe_cpu.evaluator import HUMAN
from py_tic_tac_toe_cpu.game import Game
from py_tic_tac_toe_cpu.player import Player
from py_tic_tac_toe_cpu.player_ai import DEFAULT_DIFFICULTY, AiPlayer, Difficulty, create_computer_player
from py_tic_tac_toe_cpu.player_local import LocalPlayer

logger = logging.getLogger(__name__)

DEFAULT_COMPUTER_DELAY: Final = 0.5
LOOP_IDLE_SLEEP: Final = 0.01
LOOP_TICK_TIMEOUT: Final = 0.05


class GameEngine:
    def __init__(
        self,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        *,
        computer_delay: float = DEFAULT_COMPUTER_DELAY,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if computer_delay < 0:
            msg = f"Computer delay must be >= 0, got {computer_delay}."
            raise ValueError(msg)
        self._game = Game()
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self._computer_delay = computer_delay
        self._computer_due_at = 0.0
        self._generation = 0
        self._human = LocalPlayer(HUMAN)
        self._computer = create_computer_player(difficulty, self._game.board, self._rng)
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._lock = threading.RLock()
        self._running = False
        self._game_thread: threading.Thread | None = None

    @property
    def game(self) -> Game:
        return self._game

    @property
    def human(self) -> LocalPlayer:
        return self._human

    @property
    def computer(self) -> AiPlayer:
        return self._computer

    @property
    def difficulty(self) -> Difficulty:
        return self._computer.difficulty

    @property
    def current_player(self) -> Player | None:
        """The player to move, or None once the game is over."""
        symbol = self._game.current_player_symbol
        if symbol is None:
            return None
        return self._human if symbol == self._human.symbol else self._computer

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        with self._lock:
            if difficulty == self.difficulty:
                return
            pending_turn = self.current_player is self._computer
            self._computer.clear_pending_move()
            self._computer = create_computer_player(difficulty, self._game.board, self._rng)
            logger.info("Difficulty set to %s.", difficulty)
            if pending_turn:
                self._start_turn()

    def start(self) -> None:
        """Start the game in manual mode. The caller must call tick() to advance the game."""
        logger.info("New game against %s computer.", self.difficulty)
        self._notify_board_updated()
        self._start_turn()

    def start_game_loop(self) -> None:
        """Start the game with an automatic game loop running in a background thread."""
        self._running = True
        self.start()
        self._game_thread = threading.Thread(target=self._game_loop, daemon=True)
        self._game_thread.start()

    def stop_game_loop(self) -> None:
        """Stop the automatic game loop."""
        self._running = False
        if self._game_thread:
            self._game_thread.join(timeout=1.0)
            self._game_thread = None

    def restart(self) -> None:
        with self._lock:
            self._human.clear_pending_move()
            self._generation += 1
            self._computer.clear_pending_move()
            self._game.reset()
            self.start()

    def tick(self, *, block: bool = False, timeout: float | None = None) -> bool:
        """Process one iteration of the game logic.

        Applies the current player's pending move if available and starts the next turn.
        The computer's move is held back until the configured delay has passed.
        Returns True if a move was applied.
        """
        with self._lock:
            player = self.current_player
            if player is None:
                return False
            generation = self._generation
            if player is self._computer and self._clock() < self._computer_due_at:
                return False

        move = player.get_pending_move(block=block, timeout=timeout)
        if move is None:
            return False

        with self._lock:
            if generation != self._generation or player is not self.current_player:
                # Restarted or difficulty changed while waiting.
                return False
            origin = MoveOrigin.COMPUTER if player is self._computer else MoveOrigin.HUMAN
            if not self._game.apply_move(move, origin):
                player.start_turn()
                return False
            self._notify_board_updated()
            self._start_turn()
        return True

    def queue_move(self, index: int) -> None:
        """Submit a move from the UI.

        This queues the move for the human player to be processed by the next tick().
        Moves submitted while it is not the human's turn are dropped.
        """
        if self.current_player is not self._human:
            logger.debug("Move at %d ignored: not the human's turn.", index)
            return
        self._human.queue_move(index)

    def _start_turn(self) -> None:
        player = self.current_player
        if player is None:
            return
        if player is self._computer:
            self._computer_due_at = self._clock() + self._computer_delay
        player.start_turn()

    def _game_loop(self) -> None:
        """Background thread that continuously calls tick() to drive the game forward."""
        while self._running:
            if not self.tick(block=True, timeout=LOOP_TICK_TIMEOUT):
                time.sleep(LOOP_IDLE_SLEEP)

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()
