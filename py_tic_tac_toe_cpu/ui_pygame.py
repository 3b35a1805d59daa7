import random
from dataclasses import dataclass
from typing import Final

import pygame

from py_tic_tac_toe_cpu.board import MoveOrigin
from py_tic_tac_toe_cpu.evaluator import BOARD_SIZE, COMPUTER, PlayerSymbol
from py_tic_tac_toe_cpu.game_engine import GameEngine
from py_tic_tac_toe_cpu.player_ai import Difficulty
from py_tic_tac_toe_cpu.ui import Ui

CONFETTI_COLORS: Final = (
    (244, 67, 54),
    (33, 150, 243),
    (76, 175, 80),
    (255, 235, 59),
    (255, 152, 0),
    (156, 39, 176),
)


@dataclass
class ConfettiPiece:
    x: float
    y: float
    vx: float
    vy: float
    size: int
    color: tuple[int, int, int]


class Confetti:
    """One-shot burst of falling pieces; pieces that leave the window are not recycled."""

    GRAVITY: Final = 0.15

    def __init__(self, number_of_pieces: int, width: int, height: int, rng: random.Random) -> None:
        self._width = width
        self._height = height
        self._pieces = [
            ConfettiPiece(
                x=rng.uniform(0, width),
                y=rng.uniform(-height / 2, 0),
                vx=rng.uniform(-2, 2),
                vy=rng.uniform(0, 3),
                size=rng.randint(4, 9),
                color=rng.choice(CONFETTI_COLORS),
            )
            for _ in range(number_of_pieces)
        ]

    @property
    def piece_count(self) -> int:
        return len(self._pieces)

    @property
    def done(self) -> bool:
        return not self._pieces

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    def update(self) -> None:
        for piece in self._pieces:
            piece.vy += self.GRAVITY
            piece.x += piece.vx
            piece.y += piece.vy
        self._pieces = [p for p in self._pieces if p.y < self._height and -p.size < p.x < self._width + p.size]

    def draw(self, surface: pygame.Surface) -> None:
        for piece in self._pieces:
            pygame.draw.rect(surface, piece.color, (int(piece.x), int(piece.y), piece.size, piece.size))


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    MIN_WINDOW_SIZE: Final = 240
    LINE_WIDTH: Final = 4
    FPS: Final = 30

    COMPUTER_WIN_CONFETTI: Final = 400
    HUMAN_WIN_CONFETTI: Final = 200

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    HUMAN_COLOR: Final = (191, 63, 63)
    COMPUTER_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    DIFFICULTY_KEYS: Final = {
        pygame.K_1: Difficulty.EASY,
        pygame.K_2: Difficulty.MEDIUM,
        pygame.K_3: Difficulty.HARD,
    }

    def __init__(self, game_engine: GameEngine, rng: random.Random | None = None) -> None:
        super().__init__(game_engine)
        self._rng = rng if rng is not None else random.Random()
        self._end_message = ""
        self._confetti: Confetti | None = None
        self._size = (self.WINDOW_SIZE, self.WINDOW_SIZE)

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(self._size, pygame.RESIZABLE)
        pygame.display.set_caption(self.TITLE)

        self._small_font = pygame.font.SysFont(None, 48)
        self._click_font = pygame.font.SysFont(None, 24)
        self._resize_fonts()

        super().run()
        self._game_engine.start()
        self._main_loop()

    @property
    def _cell_size(self) -> int:
        return min(self._size) // BOARD_SIZE

    def _resize_fonts(self) -> None:
        self._font = pygame.font.SysFont(None, self._cell_size * 3 // 5)

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(self.FPS)
            self._handle_events()
            self._game_engine.tick()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.VIDEORESIZE:
                    self._on_resize(event.w, event.h)
                case pygame.KEYDOWN:
                    self._on_key(event.key)
                case pygame.MOUSEBUTTONDOWN:
                    self._on_mouse_down(event.pos)

    def _on_resize(self, width: int, height: int) -> None:
        self._size = (max(width, self.MIN_WINDOW_SIZE), max(height, self.MIN_WINDOW_SIZE))
        self._screen = pygame.display.set_mode(self._size, pygame.RESIZABLE)
        self._resize_fonts()
        if self._confetti is not None:
            self._confetti.resize(*self._size)

    def _on_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self._stop()
        elif key == pygame.K_r:
            self._restart()
        elif key in self.DIFFICULTY_KEYS:
            self._set_difficulty(self.DIFFICULTY_KEYS[key])

    def _restart(self) -> None:
        self._end_message = ""
        self._confetti = None
        super()._restart()

    def _on_mouse_down(self, pos: tuple[int, int]) -> None:
        if self._end_message:
            self._restart()
        elif self._input_enabled:
            self._on_click(pos)

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        col = x // self._cell_size
        row = y // self._cell_size
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            return
        index = row * BOARD_SIZE + col
        if self._game_engine.game.board.cells[index] is not None:
            return
        self._queue_move(index)

    def _render(self) -> None:
        difficulty = self._game_engine.difficulty.capitalize()
        pygame.display.set_caption(f"{self.TITLE} - {difficulty} - {self.status_message()}")
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_end_message()
        if self._confetti is not None:
            self._confetti.update()
            self._confetti.draw(self._screen)
            if self._confetti.done:
                self._confetti = None
        pygame.display.flip()

    def _render_board(self) -> None:
        # Marks are drawn straight from the game board on every frame.
        pass

    def _show_end_message(self, message: str, *, winner: PlayerSymbol | None) -> None:
        self._end_message = message
        if winner is not None:
            pieces = self.COMPUTER_WIN_CONFETTI if winner == COMPUTER else self.HUMAN_WIN_CONFETTI
            self._confetti = Confetti(pieces, *self._size, self._rng)

    def _on_input_error(self, _exception: Exception) -> None:
        pass

    def _draw_grid(self) -> None:
        board_size = self._cell_size * BOARD_SIZE
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self._cell_size),
                (board_size, i * self._cell_size),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self._cell_size, 0),
                (i * self._cell_size, board_size),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        board = self._game_engine.game.board
        for index, value in enumerate(board.cells):
            if value is None:
                continue
            color = self.COMPUTER_COLOR if board.origin(index) == MoveOrigin.COMPUTER else self.HUMAN_COLOR
            text = self._font.render(value, True, color)  # noqa: FBT003
            row, col = divmod(index, BOARD_SIZE)
            rect = text.get_rect(
                center=(col * self._cell_size + self._cell_size // 2, row * self._cell_size + self._cell_size // 2),
            )
            self._screen.blit(text, rect)

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return
        center_x = self._cell_size * BOARD_SIZE // 2
        center_y = self._cell_size * BOARD_SIZE // 2
        main_text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        click_text = self._click_font.render("Click or press R to play again", True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(center_x, center_y - 20))
        click_rect = click_text.get_rect(center=(center_x, center_y + 20))
        self._screen.blit(main_text, main_rect)
        self._screen.blit(click_text, click_rect)
