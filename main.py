#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}]
    python main.py evaluate [--difficulty NAME] [--games N]
    python main.py presets

Runs from a source checkout; an installed package works the same way.
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from sweeper_engine import PRESETS, EngineError, GameOutcome
from sweeper_engine.render import format_clock, format_mines_counter, render_board
from sweeper_agents import Evaluator, RandomAgent
from sweeper_session import GameController, SessionConfig

HELP = """Commands:
  r ROW COL   reveal a cell
  f ROW COL   flag or unflag a cell
  n           new game
  d NAME      new game on another difficulty
  q           quit"""


def show(controller: GameController) -> None:
    """Print the board with its counters."""
    state = controller.state
    print()
    print(
        f"{state.difficulty.label}  "
        f"Mines: {format_mines_counter(state.remaining_mines, state.board.mine_count)}  "
        f"Flags: {state.flagged_count}  "
        f"Time: {format_clock(controller.elapsed_seconds())}"
    )
    print(render_board(state.board, coordinates=True))


def announce(outcome: GameOutcome) -> None:
    print(f"\n{outcome.message}")


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    controller = GameController(
        SessionConfig(difficulty=args.difficulty), on_complete=announce
    )
    print(HELP)

    try:
        while True:
            show(controller)
            try:
                line = input("> ").strip().split()
            except EOFError:
                break
            if not line:
                continue

            command, params = line[0].lower(), line[1:]
            try:
                if command == "q":
                    break
                elif command == "n":
                    controller.new_game()
                elif command == "d" and len(params) == 1:
                    controller.new_game(params[0])
                elif command in ("r", "f") and len(params) == 2:
                    row, col = int(params[0]), int(params[1])
                    if command == "r":
                        controller.reveal(row, col)
                    else:
                        controller.toggle_flag(row, col)
                else:
                    print(HELP)
            except (EngineError, ValueError) as error:
                print(f"Error: {error}")
    finally:
        controller.close()


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random baseline agent."""
    evaluator = Evaluator(args.difficulty, num_episodes=args.games)
    difficulty = evaluator.env.difficulty
    agent = RandomAgent(difficulty.rows, difficulty.cols)

    print(f"\nEvaluating Random over {args.games} {difficulty.label} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def presets(args: argparse.Namespace) -> None:
    """List the difficulty presets."""
    print(f"{'Name':<10} {'Label':<10} {'Size':<8} {'Mines':<6}")
    print("-" * 36)
    for name, difficulty in PRESETS.items():
        print(
            f"{name:<10} {difficulty.label:<10} "
            f"{difficulty.size:<8} {difficulty.mines:<6}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper board engine")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty", choices=sorted(PRESETS), default="easy",
        help="Difficulty preset",
    )

    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate the random agent"
    )
    eval_parser.add_argument(
        "--difficulty", choices=sorted(PRESETS), default="easy",
        help="Difficulty preset",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    subparsers.add_parser("presets", help="List difficulty presets")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "presets":
        presets(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
