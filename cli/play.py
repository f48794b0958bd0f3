#!/usr/bin/env python3
"""Interactive 2048 game - play in the terminal with arrows or w/a/s/d."""
import argparse
import curses
import logging
import time

from gazool.config import ANIM_SLOW_DOWN, TICK_SECONDS
from gazool.console import Console
from gazool.console.curses_view import CursesView
from gazool.machine import GameMachine, GameSession


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Gazool 2048 in the terminal")
    parser.add_argument(
        "--tick-ms",
        type=float,
        default=TICK_SECONDS * 1000,
        help=f"Milliseconds between game steps (default: {TICK_SECONDS * 1000:g})",
    )
    parser.add_argument(
        "--slow-down",
        type=int,
        default=ANIM_SLOW_DOWN,
        help=f"Draw an animation frame every N steps (default: {ANIM_SLOW_DOWN})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible tile placement",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write a debug log here (nothing is logged otherwise)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level for --log-file (default: INFO)",
    )
    return parser.parse_args(argv)


def run(stdscr, args: argparse.Namespace) -> None:
    """Tick the game machine at a fixed rate until the player quits."""
    view = CursesView(stdscr)
    session = GameSession.seeded(args.seed)
    machine = GameMachine(session, Console(), view, slow_down=args.slow_down)

    tick = max(0.0, args.tick_ms / 1000.0)
    while machine.running:
        machine.step()
        time.sleep(tick)


def main(argv: list[str] | None = None):
    """Run interactive 2048 game."""
    args = parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        curses.wrapper(run, args)
    except KeyboardInterrupt:
        print("\nQuit.")


if __name__ == "__main__":
    main()
