#!/usr/bin/env python3
"""Automatic 2048 play with random policy, through the full game state machine."""
import argparse
import random
import time

from gazool.config import DIFFICULTY_LEVELS
from gazool.console import Console, ScriptedView
from gazool.fields import Action, shift_board
from gazool.fields.board import get_max_tile, is_game_won
from gazool.machine import GameMachine, GameSession, GameState

ACTION_KEYS = {
    Action.UP: "w",
    Action.DOWN: "s",
    Action.LEFT: "a",
    Action.RIGHT: "d",
}


def clear_screen():
    """Clear terminal screen."""
    print("\033[2J\033[H", end="")


def legal_actions(board) -> list[Action]:
    """Directions that would move at least one tile."""
    return [a for a in Action if shift_board(board, a).moved]


def random_policy(actions: list[Action], rng: random.Random) -> Action:
    """Select random action from legal actions."""
    return rng.choice(actions)


def play_game(
    machine: GameMachine,
    view: ScriptedView,
    level: str,
    rng: random.Random,
    max_moves: int,
    quiet: bool = True,
    delay_sec: float = 0.0,
) -> dict:
    """
    Play one round from the title screen and return to it.

    Returns:
        dict with score, max_tile, moves and outcome ("won", "lost" or
        "stopped" when max_moves ran out)
    """
    session = machine.session
    view.push("n", level)
    moves = 0
    outcome = None
    last_action = None

    while outcome is None:
        state = session.state
        if state is GameState.ROUND_INPUT:
            if not quiet and last_action is not None:
                clear_screen()
                print(f"Step: {moves}, Action: {last_action.name}")
                print(machine.console.to_text())
                time.sleep(delay_sec)

            actions = legal_actions(session.board)
            if not actions or moves >= max_moves:
                outcome = "stopped"
                view.push("q")
            else:
                last_action = random_policy(actions, rng)
                view.push(ACTION_KEYS[last_action])
                moves += 1
        elif state is GameState.GAME_OVER_INPUT:
            outcome = "won" if is_game_won(session.board, session.winning_tile) else "lost"
            if not quiet:
                clear_screen()
                print(machine.console.to_text())
            view.push("q")
        machine.step()

    return {
        "score": session.score.current,
        "max_tile": get_max_tile(session.board),
        "moves": moves,
        "outcome": outcome,
    }


def main(argv: list[str] | None = None):
    """Run automatic 2048 games."""
    parser = argparse.ArgumentParser(description="Auto-play 2048 with random policy")
    parser.add_argument(
        "--level",
        type=str,
        choices=sorted(DIFFICULTY_LEVELS),
        default="9",
        help="Difficulty key, 1 (8) to 9 (2048) or 0 (4096) (default: 9)",
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=100,
        help="Delay between moves in milliseconds (default: 100)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress step-by-step output",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=1,
        help="Number of games to play (default: 1)",
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=10000,
        help="Give up a game after this many moves (default: 10000)",
    )
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    session = GameSession.seeded(args.seed)
    view = ScriptedView(keep_frames=False)
    machine = GameMachine(session, Console(), view)

    results = []
    for game_num in range(args.games):
        if not args.quiet and args.games > 1:
            print(f"\n=== Game {game_num + 1}/{args.games} ===")

        result = play_game(
            machine,
            view,
            args.level,
            rng,
            args.max_moves,
            quiet=args.quiet,
            delay_sec=args.delay / 1000.0,
        )
        results.append(result)

        if not args.quiet:
            print(f"Result: {result['outcome']}")
            print(f"Final Score: {result['score']}")
            print(f"Max Tile: {result['max_tile']}")
            print(f"Total Moves: {result['moves']}")

    view.push("q")
    machine.run(max_ticks=10)

    # Print summary for multiple games
    if args.games > 1:
        print("\n=== Summary ===")
        scores = [r["score"] for r in results]
        max_tiles = [r["max_tile"] for r in results]
        moves_list = [r["moves"] for r in results]
        wins = sum(1 for r in results if r["outcome"] == "won")

        print(f"Games: {args.games}")
        print(f"Wins: {wins}")
        print(f"Avg Score: {sum(scores) / len(scores):.1f}")
        print(f"Max Score: {max(scores)}")
        print(f"High Score: {session.score.high}")
        print(f"Avg Max Tile: {sum(max_tiles) / len(max_tiles):.1f}")
        print(f"Best Max Tile: {max(max_tiles)}")
        print(f"Avg Moves: {sum(moves_list) / len(moves_list):.1f}")


if __name__ == "__main__":
    main()
