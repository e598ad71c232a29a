import argparse
import sys

from display import TerminalDisplay
from game_loop import GAME_OVER_DELAY, TICK_INTERVAL, GameLoop
from keyboard_input import start_input
from matrix_utils import print_game_matrix
from snake_game import GameState

# Board size
HEIGHT, WIDTH = 10, 20


def play(height=HEIGHT, width=WIDTH, tick_interval=TICK_INTERVAL):
    display = TerminalDisplay(width, height)
    loop = GameLoop(
        height, width, display, tick_interval=tick_interval, game_over_delay=GAME_OVER_DELAY
    )
    print("Steer with WASD or the arrow keys. Press Q or ESC to quit.")
    with display.session():
        source = start_input(loop, display.term)
        try:
            quit_requested = loop.run()
        except KeyboardInterrupt:
            # Ctrl+C in the terminal quits like Q does
            loop.quit()
            quit_requested = True
        finally:
            source.stop()
    print("Bye." if quit_requested else "Game over!")
    return 0


def smoke_test():
    game = GameState(10, 10)
    print_game_matrix(game.grid())
    print()
    game.step()
    print_game_matrix(game.grid())
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake in the terminal.")
    parser.add_argument(
        "command",
        nargs="?",
        default="play",
        choices=["play", "test"],
        help="play a session (default) or print one step of a 10x10 board",
    )
    parser.add_argument("--height", type=int, default=HEIGHT, help="board rows")
    parser.add_argument("--width", type=int, default=WIDTH, help="board columns")
    parser.add_argument(
        "--tick", type=float, default=TICK_INTERVAL, help="seconds between moves"
    )
    args = parser.parse_args(argv)
    if args.tick <= 0:
        parser.error("--tick must be positive")
    try:
        GameState(args.height, args.width)
    except ValueError as e:
        parser.error(str(e))
    return args


def main(argv=None):
    args = parse_args(argv)
    if args.command == "test":
        return smoke_test()
    return play(args.height, args.width, args.tick)


if __name__ == "__main__":
    sys.exit(main())
