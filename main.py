#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines M] [--seed S]
    python main.py demo [--games N] [--delay SECONDS]
"""
import argparse
import sys
import time
from typing import Optional, Tuple

import numpy as np

from minesweeper import (
    BoardConfig,
    BoardError,
    GameSession,
    GameStatus,
    MinesweeperEnv,
    render_ansi,
)


def parse_click(line: str) -> Optional[Tuple[int, int]]:
    """Parse an 'x y' line into a coordinate, or None if malformed."""
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def announce(session: GameSession, status: GameStatus) -> None:
    """Print the end-of-game message."""
    print(render_ansi(session.board))
    if status == GameStatus.WON:
        print("\nCongratulations, You Won!")
    else:
        print("\nGame Over!")


def play(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play one interactive game on the terminal."""
    session = GameSession(config, seed=args.seed)
    session.add_listener(announce)
    board = session.start()

    print(f"Board: {config.width}x{config.height} with {config.num_mines} mines")
    print("Enter 'x y' to reveal a tile, 'q' to quit.\n")

    while session.is_playing:
        print(render_ansi(board))
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line.lower() in ("q", "quit", "exit"):
            break

        position = parse_click(line)
        if position is None:
            print("Expected two integers: x y")
            continue
        try:
            session.click(*position)
        except BoardError as exc:
            print(exc)


def demo(args: argparse.Namespace, config: BoardConfig) -> None:
    """Watch a random clicker play."""
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)
    wins = 0

    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        done = False
        step = 0
        info = {}

        while not done:
            valid_indices = np.where(env.get_action_mask())[0]
            action = int(rng.choice(valid_indices))
            x, y = env.action_to_position(action)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Last move: ({x}, {y})\n")
            print(env.render())
            time.sleep(args.delay)

        if info.get("game_state") == GameStatus.WON.name:
            wins += 1
            print("\n*** WIN! ***\n")
        else:
            print("\n*** LOST (hit mine) ***\n")

    print(f"=== Final: {wins}/{args.games} wins ===")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=9, help="Board width")
    parser.add_argument("--height", type=int, default=9, help="Board height")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random clicks")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=3, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return

    try:
        config = BoardConfig(args.width, args.height, args.mines)
    except BoardError as exc:
        print(f"Invalid board: {exc}")
        sys.exit(2)

    if args.command == "play":
        play(args, config)
    elif args.command == "demo":
        demo(args, config)


if __name__ == "__main__":
    main()
