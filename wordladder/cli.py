"""
Console front end.

    python -m wordladder play [--random] [--no-path] [--no-errors]
    python -m wordladder solve star moon
    python -m wordladder benchmark --pairs 500 --seed 42

Settings come from the YAML file given with --config (or WORDLADDER_CONFIG);
command line flags override it.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

import numpy as np

from .config import GameConfig, load_config
from .dictionary import Dictionary
from .errors import WordLadderError
from .feedback import CharacterStatus
from .game import AttemptResult, GameSession
from .solver import LadderSolver, benchmark, print_results


logger = logging.getLogger(__name__)

COLORS = {
    CharacterStatus.CORRECT_POSITION: "\033[32m",
    CharacterStatus.PRESENT_IN_WORD: "\033[33m",
    CharacterStatus.NOT_PRESENT: "\033[37m",
}
RESET_COLOR = "\033[0m"

HELP = "Commands: :hint, :solution, :reset, :quit"


def format_feedback(word: str, statuses: List[CharacterStatus]) -> str:
    cells = [f"{COLORS[s]}{c.upper()}" for c, s in zip(word, statuses)]
    return " ".join(cells) + RESET_COLOR


def print_state(session: GameSession):
    print(f"\n[Current word] {session.current_word.upper()}")
    path = session.path()
    if path is not None:
        print("Current path: " + " -> ".join(path))


def run_game_loop(session: GameSession, input_fn: Callable[[str], str] = input) -> int:
    """
    Play until the target is reached or the player quits.

    Returns:
        Number of attempts when won, -1 when the player quit
    """
    length = session.dictionary.word_length
    print("\nWelcome to Word Ladder!")
    print(f"Turn '{session.start_word.upper()}' into '{session.target_word.upper()}'")
    print(HELP)

    while not session.is_won:
        print_state(session)
        try:
            line = input_fn(f"Enter the next word ({length} letters): ")
        except EOFError:
            return -1
        line = line.strip().lower()

        if line == ":quit":
            return -1
        if line == ":reset":
            session.reset()
            continue
        if line == ":hint":
            hint = session.next_hint()
            print(f"Try: {hint.upper()}" if hint else "No ladder from here")
            continue
        if line == ":solution":
            ladder = session.solution_path()
            print(" -> ".join(ladder) if ladder else "No ladder exists")
            continue

        result = session.submit_attempt(line)
        if result is AttemptResult.REJECTED:
            if session.show_errors:
                print(f" Invalid word! Reason: {session.last_error}")
            else:
                print(" Invalid input, please try again")
            continue
        print(format_feedback(line, session.feedback(line)))

    print(f"\nCongratulations! You reached the target in {session.attempt_count} steps!")
    path = session.path()
    if path is not None:
        print("Complete path: " + " -> ".join(path))
    return session.attempt_count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordladder",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Word ladder puzzle: change one letter at a time to reach the target word.")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--dictionary", help="word list, one word per line")
    parser.add_argument("--length", type=int, help="word length")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="more logging (repeat for debug)")

    commands = parser.add_subparsers(dest="command", required=True)

    play = commands.add_parser("play", help="play a game in the terminal")
    play.add_argument("--random", action="store_true", help="random start and target words")
    play.add_argument("--no-path", action="store_true", help="hide the transformation path")
    play.add_argument("--no-errors", action="store_true", help="hide rejection reasons")
    play.add_argument("--start", help="start word")
    play.add_argument("--target", help="target word")
    play.add_argument("--seed", type=int, help="random seed")

    solve = commands.add_parser("solve", help="print the shortest ladder")
    solve.add_argument("start")
    solve.add_argument("target")
    solve.add_argument("--max-expansions", type=int, help="give up after this many expanded words")

    bench = commands.add_parser("benchmark", help="solve random pairs and report ladder lengths")
    bench.add_argument("--pairs", type=int, default=500, help="number of random pairs")
    bench.add_argument("--seed", type=int, default=42, help="random seed")

    return parser


def apply_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    if args.dictionary:
        config.dictionary = args.dictionary
    if args.length:
        config.word_length = args.length
    if args.command == "play":
        if args.random:
            config.use_random_words = True
        if args.no_path:
            config.show_path = False
        if args.no_errors:
            config.show_errors = False
        if args.start:
            config.default_start = args.start
        if args.target:
            config.default_target = args.target
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level,
                        format='[%(asctime)s] %(name)s %(levelname)s - %(message)s',
                        datefmt='%H:%M:%S',
                        stream=sys.stderr)

    try:
        config = apply_overrides(load_config(args.config), args)
        dictionary = Dictionary.load(config.dictionary, config.word_length)
    except WordLadderError as e:
        sys.stderr.write(f"{e.kind} error: {e.message}\n")
        return 1

    if args.command == "solve":
        solver = LadderSolver(dictionary, args.max_expansions)
        ladder = solver.solve(args.start, args.target)
        if ladder:
            print(" -> ".join(ladder))
        else:
            print(f"No ladder from {args.start.lower()} to {args.target.lower()}")
        return 0

    if args.command == "benchmark":
        solver = LadderSolver(dictionary)
        results = benchmark(solver, args.pairs, np.random.default_rng(args.seed))
        print_results(results)
        return 0

    session = GameSession(dictionary, config)
    try:
        session.new_game(np.random.default_rng(args.seed))
    except WordLadderError as e:
        sys.stderr.write(f"{e.kind} error: {e.message}\n")
        return 1
    run_game_loop(session)
    return 0
