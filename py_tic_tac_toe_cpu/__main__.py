import argparse
import logging
import random

from py_tic_tac_toe_cpu.game_engine import DEFAULT_COMPUTER_DELAY, GameEngine
from py_tic_tac_toe_cpu.player_ai import DEFAULT_DIFFICULTY, Difficulty
from py_tic_tac_toe_cpu.ui import Ui
from py_tic_tac_toe_cpu.ui_terminal import TerminalUi


def main() -> None:
    args = _parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    game_engine = _create_game_engine(args)

    ui: Ui
    match args.ui:
        case "pygame":
            # Imported lazily so the terminal UI works without a display.
            from py_tic_tac_toe_cpu.ui_pygame import PygameUi  # noqa: PLC0415

            ui = PygameUi(game_engine, random.Random(args.seed))
        case _:
            ui = TerminalUi(game_engine)

    ui.run()


def _create_game_engine(args: argparse.Namespace) -> GameEngine:
    return GameEngine(Difficulty(args.difficulty), computer_delay=args.delay, rng=random.Random(args.seed))


def _non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        msg = f"must be >= 0, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="py-tic-tac-toe-cpu", description="Play Tic-Tac-Toe against the computer.")

    parser.add_argument("--ui", choices=("terminal", "pygame"), default="terminal")
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.value for difficulty in Difficulty],
        default=DEFAULT_DIFFICULTY.value,
    )
    parser.add_argument(
        "--delay",
        type=_non_negative_float,
        default=DEFAULT_COMPUTER_DELAY,
        help="Seconds the computer waits before moving",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser.parse_args()


if __name__ == "__main__":
    main()
