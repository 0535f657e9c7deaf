"""
tictactoe CLI - Command-line interface for the engine.

Usage:
    tictactoe play [--difficulty D] [--seed N]        Play against the AI
    tictactoe selfplay [--difficulty D] [--games N]   Optimal user vs the AI
    tictactoe validate <state_file>                   Validate a stored game
    tictactoe stats <state_file>                      Summarize a stored game
"""

import argparse
import json
import logging
import random
import sys
from collections import Counter

from . import config
from .bots.search import best_move
from .engine_core.errors import GameEngineError
from .engine_core.state import Difficulty, Player, create_initial_game_state
from .engine_core.summary import get_board_display, get_game_stats
from .session.orchestrator import process_ai_move, process_user_move
from .state_schema import GameStateValidationError, check_invariants, state_from_dict

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else config.TICTACTOE_LOG_LEVEL

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    root.addHandler(handler)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="tictactoe - play against a minimax AI",
        prog="tictactoe",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    difficulties = [d.value for d in Difficulty]

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game on the terminal")
    play_parser.add_argument("--difficulty", "-d", choices=difficulties,
                             default=config.TICTACTOE_DEFAULT_DIFFICULTY)
    play_parser.add_argument("--seed", type=int, default=config.TICTACTOE_SEED,
                             help="Seed for the AI's random source")

    # Self-play command
    selfplay_parser = subparsers.add_parser("selfplay", help="Optimal user against the AI")
    selfplay_parser.add_argument("--difficulty", "-d", choices=difficulties,
                                 default=config.TICTACTOE_DEFAULT_DIFFICULTY)
    selfplay_parser.add_argument("--games", "-n", type=int, default=10)
    selfplay_parser.add_argument("--seed", type=int, default=config.TICTACTOE_SEED)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a stored game state")
    validate_parser.add_argument("state_file", help="Path to a game state JSON file")

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Print stats for a stored game state")
    stats_parser.add_argument("state_file", help="Path to a game state JSON file")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "selfplay":
        cmd_selfplay(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "stats":
        cmd_stats(args)
    else:
        parser.print_help()
        sys.exit(1)


def _read_state_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        print(f"Error: File not found: {path}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {path}: {e}")
        sys.exit(1)


def _print_result(state) -> None:
    print(get_board_display(state.board))
    if state.winner:
        print(f"Result: {state.winner.value} wins (line {list(state.winning_line)})")
    else:
        print("Result: draw")


def cmd_play(args):
    """Interactive game: the user is X and moves first."""
    rng = random.Random(args.seed)
    state = create_initial_game_state(args.difficulty)
    print(f"You are X. Difficulty: {state.difficulty.value}. Enter positions 0-8.")

    while not state.is_over:
        print(get_board_display(state.board))
        try:
            raw = input("Your move: ").strip()
        except EOFError:
            print("\nExiting.")
            return
        try:
            state = process_user_move(state, int(raw))
        except ValueError as e:
            # InvalidMoveError is a ValueError too
            print(e if isinstance(e, GameEngineError) else f"Not a number: {raw!r}")
            continue

        if not state.is_over:
            state = process_ai_move(state, rng)
            logger.debug("AI played %s", state.last_ai_move)
            print(f"AI plays {state.last_ai_move}")

    _print_result(state)


def cmd_selfplay(args):
    """Play games where the user side searches fully after a random opening."""
    rng = random.Random(args.seed)
    tally = Counter()

    for game in range(args.games):
        state = create_initial_game_state(args.difficulty)
        state = process_user_move(state, rng.choice(state.board.available_moves()))
        while not state.is_over:
            if state.current_player is Player.AI:
                state = process_ai_move(state, rng)
            else:
                state = process_user_move(state, best_move(state.board, player=Player.USER).position)
        tally[state.result.value] += 1
        logger.info("Game %d finished: %s after %d moves", game + 1, state.result.value, state.moves)

    print(f"Difficulty: {args.difficulty}, games: {args.games}")
    for result in ("user_win", "ai_win", "draw"):
        print(f"  {result}: {tally[result]}")


def cmd_validate(args):
    """Validate a stored game state."""
    text = _read_state_text(args.state_file)
    try:
        state = state_from_dict(text)
    except GameStateValidationError as e:
        print(f"Invalid: {e}")
        for error in e.errors:
            print(f"  - {error}")
        sys.exit(1)

    print("Valid")
    for warning in check_invariants(state).warnings:
        print(f"  warning: {warning}")


def cmd_stats(args):
    """Print stats for a stored game state."""
    text = _read_state_text(args.state_file)
    try:
        state = state_from_dict(text)
    except GameStateValidationError as e:
        print(f"Invalid: {e}")
        sys.exit(1)

    print(json.dumps(get_game_stats(state).to_dict(), indent=2))


if __name__ == "__main__":
    main()
