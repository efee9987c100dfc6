"""
Console front end for TicTacToe.

Play against the computer (default) or against a friend on the same
terminal. Cells are numbered:

     1 | 2 | 3
    ---+---+---
     4 | 5 | 6
    ---+---+---
     7 | 8 | 9

Commands at the prompt: 1-9 to play, r to restart, m to switch mode, q to quit.
"""

import argparse
import sys
import time
from typing import Callable, Optional

from pydantic import ValidationError

from .board import format_board
from .config import TicTacToeConfig, get_config, load_config_from_file, setup_logging
from .game import COMPUTER_MARK, TicTacToeGame
from .game_state import GameMode


class ConsoleGame:
    """
    Runs TicTacToe rounds in the terminal.

    Time spent at the prompt counts against the turn countdown. If the
    turn ran out while the player was typing, the input is thrown away
    and the other player moves.
    """

    def __init__(
        self,
        game: TicTacToeGame,
        delay: float,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Args:
            game: The game controller.
            delay: Seconds the computer "thinks" before moving.
            clock: Seconds counter used to time the prompt.
        """
        self.game = game
        self.delay = delay
        self.clock = clock

    def run(self):
        """Play rounds until the user quits."""
        self._print_banner()

        while True:
            if not self._play_round():
                break
            self._show_game_result()

            answer = input("\nPlay again? [Y/n] ").strip().lower()
            if answer.startswith("n"):
                break
            self.game.restart()

        print("Goodbye!")

    def _play_round(self) -> bool:
        """Play until the game ends. Returns False if the user quit."""
        while not self.game.game_state.is_game_over:
            state = self.game.game_state
            print("\n" + format_board(state.board))

            if self.game.needs_computer_move:
                print("\nComputer is thinking...")
                time.sleep(self.delay)
                index = self.game.play_computer()
                if index is not None:
                    print(f"Computer plays {index + 1}")
                continue

            started = self.clock()
            raw = input(f"\n{state.current_player.value} to move ({state.time_left}s left) > ")
            elapsed = int(self.clock() - started)
            command = raw.strip().lower()

            if command == "q":
                return False
            if command == "r":
                self.game.restart()
                continue
            if command == "m":
                self._toggle_mode()
                continue

            if self.game.tick(elapsed):
                print(f"Time's up! {self.game.game_state.current_player.value} moves instead.")
                continue

            if not command.isdigit():
                print("Enter a cell number 1-9, or r / m / q.")
                continue

            result = self.game.play(int(command) - 1)
            if not result.is_valid:
                print(result.error_message)

        return True

    def _toggle_mode(self):
        if self.game.mode == GameMode.SINGLE_PLAYER:
            self.game.set_mode(GameMode.TWO_PLAYER)
            print("Two player mode. New game!")
        else:
            self.game.set_mode(GameMode.SINGLE_PLAYER)
            print("Playing against the computer. New game!")

    def _print_banner(self):
        print("\n" + "=" * 40)
        print("   TicTacToe")
        if self.game.mode == GameMode.SINGLE_PLAYER:
            print("   You: X    Computer: O")
        else:
            print("   Two players: X then O")
        print("=" * 40)

    def _show_game_result(self):
        """Show the final game result."""
        state = self.game.game_state

        print("\n" + format_board(state.board, show_numbers=False))
        print("\n" + "=" * 40)

        if state.winner is not None:
            cells = ", ".join(str(index + 1) for index in state.winning_line)
            if state.mode == GameMode.SINGLE_PLAYER:
                who = "Computer" if state.winner == COMPUTER_MARK else "You"
                print(f"   {who} ({state.winner.value}) won on cells {cells}!")
            else:
                print(f"   Winner: {state.winner.value} (cells {cells})")
        else:
            print("   It's a draw!")

        print("=" * 40)


def build_config(args: argparse.Namespace) -> TicTacToeConfig:
    """
    Load the configuration and apply command line overrides.

    Overrides go on a copy, so the global configuration is left as loaded.

    Raises:
        ValidationError: an override is out of range.
    """
    if args.config:
        config = load_config_from_file(args.config)
    else:
        config = get_config()
    config = config.model_copy(deep=True)

    if args.two_player:
        config.game.single_player = False
    if args.turn_seconds is not None:
        config.game.turn_seconds = args.turn_seconds
    if args.delay is not None:
        config.game.computer_delay = args.delay
    if args.pruning:
        config.engine.use_pruning = True

    return config


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe in the terminal")
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Two humans on one terminal instead of playing the computer"
    )
    parser.add_argument(
        "--turn-seconds",
        type=int,
        help="Seconds per turn before it passes to the other player"
    )
    parser.add_argument(
        "--delay",
        type=float,
        help="Computer thinking delay in seconds"
    )
    parser.add_argument(
        "--pruning",
        action="store_true",
        help="Use alpha-beta pruning in the computer's search"
    )
    parser.add_argument(
        "--config",
        help="JSON configuration file"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from config)"
    )

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValidationError as e:
        parser.error(f"invalid option: {e.errors()[0]['msg']}")

    setup_logging(args.log_level or config.logging.log_level)

    console = ConsoleGame(TicTacToeGame(config), delay=config.game.computer_delay)
    try:
        console.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
