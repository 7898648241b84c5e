#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--mines N] [--seed S]
    python main.py evaluate [--games N] [--mines N] [--flag-probability P]
    python main.py compare [--games N] [--mines N]
"""
import argparse
import sys

from minefield import BoardConfig, GameState, MinefieldError
from minefield.console import run
from agents import RandomAgent
from evaluation import Evaluator


def play(args: argparse.Namespace) -> int:
    """Play one game in the terminal."""
    try:
        state = run(num_mines=args.mines, seed=args.seed)
    except EOFError:
        print("\nInput closed, game abandoned.")
        return 1
    return 0 if state == GameState.WON else 1


def evaluate(args: argparse.Namespace) -> int:
    """Evaluate the random agent."""
    config = BoardConfig(num_mines=args.mines)
    agent = RandomAgent(flag_probability=args.flag_probability, seed=args.seed)
    evaluate_agent(agent, "Random", config, args.games, args.seed)
    return 0


def evaluate_agent(
    agent,
    name: str,
    config: BoardConfig = None,
    num_episodes: int = 100,
    seed: int = None,
) -> None:
    """Evaluate a single agent and print results."""
    config = config or BoardConfig()
    evaluator = Evaluator(config, num_episodes=num_episodes, seed=seed)

    print(f"\nEvaluating {name} over {num_episodes} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {name}:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def compare(args: argparse.Namespace) -> int:
    """Compare agent variants."""
    config = BoardConfig(num_mines=args.mines)

    agents = {
        "Random": RandomAgent(seed=args.seed),
        "Random (flags)": RandomAgent(flag_probability=0.2, seed=args.seed),
    }

    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Win Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['win_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Minefield - 9x9 mine-sweeping puzzle"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (prompted for when omitted)",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    eval_parser.add_argument(
        "--flag-probability", type=float, default=0.0,
        help="Chance the agent toggles a flag instead of revealing",
    )
    eval_parser.add_argument("--seed", type=int, default=None)

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare agents")
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )
    compare_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    compare_parser.add_argument("--seed", type=int, default=None)

    return parser


def main(argv=None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {"play": play, "evaluate": evaluate, "compare": compare}
    if args.command is None:
        parser.print_help()
        return 2

    try:
        return commands[args.command](args)
    except MinefieldError as exc:
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
