"""Untangle command-line interface."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG
from .errors import UntangleError
from .io import PuzzleRecord, load_json, save_json

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Untangle puzzle generator and checker")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate a new puzzle")
    generate.add_argument("--points", type=int, default=DEFAULT_CONFIG.default_points)
    generate.add_argument("--seed", type=int)
    generate.add_argument("--out", dest="output_path")

    validate = sub.add_parser("validate", help="Validate a saved puzzle")
    validate.add_argument("--in", dest="input_path", required=True)

    solve = sub.add_parser("solve", help="Replay the recorded solution of a puzzle")
    solve.add_argument("--in", dest="input_path", required=True)

    check = sub.add_parser("check", help="Apply moves to a puzzle and report crossings")
    check.add_argument("--in", dest="input_path", required=True)
    check.add_argument(
        "--move",
        dest="moves",
        action="append",
        default=[],
        help="Move string such as 'P0:3,5/2;P1:1,1/1' (repeatable)",
    )

    sub.add_parser("presets", help="List the preset puzzle sizes")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        if args.command == "generate":
            _cmd_generate(args)
        elif args.command == "validate":
            load_json(args.input_path)
            print("OK")
        elif args.command == "solve":
            _cmd_solve(args)
        elif args.command == "check":
            _cmd_check(args)
        elif args.command == "presets":
            _cmd_presets()
    except UntangleError as exc:
        print(exc)
        raise SystemExit(1)


def _cmd_generate(args) -> None:
    from .generator import generate_puzzle
    from .models import PuzzleParams

    params = PuzzleParams(args.points)
    puzzle = generate_puzzle(params, seed=args.seed)
    if args.output_path:
        save_json(PuzzleRecord(params, puzzle.desc, puzzle.aux, args.seed), args.output_path)
        print(f"Saved {args.output_path}")
    else:
        print(puzzle.desc)
        print(puzzle.aux)


def _cmd_solve(args) -> None:
    from .state import execute_move, new_game, solve_game

    record = load_json(args.input_path)
    state = new_game(record.params, record.desc)
    try:
        solved = execute_move(state, solve_game(state, record.aux))
    finally:
        state.release()
    print(f"completed: {solved.completed}")
    solved.release()
    if not solved.completed:
        raise SystemExit(1)


def _cmd_check(args) -> None:
    from .state import execute_move, new_game

    record = load_json(args.input_path)
    state = new_game(record.params, record.desc)
    try:
        for move in args.moves or [""]:
            logger.info("Applying move %r", move)
            nxt = execute_move(state, move)
            state.release()
            state = nxt

        pairs = state.crossing_pairs()
        print(f"completed: {state.completed}")
        for edge_a, edge_b in pairs:
            print(f"  {edge_a} crosses {edge_b}")
    finally:
        state.release()


def _cmd_presets() -> None:
    from .models import fetch_preset

    for i in range(len(DEFAULT_CONFIG.presets)):
        name, params = fetch_preset(i)
        print(f"{i}: {name} ({params.encode()})")


if __name__ == "__main__":
    main()
