import argparse
import asyncio
import json
import logging
import random
import sys
from typing import List, Optional

from .constants import MAX_CARD, MIN_CARD, NUM_COUNT, TARGET
from .methods.dedup import solve
from .methods.search import search
from .normalizer import ParseError, TokenizeError, normalize
from .run import CONCURRENCY, run_async, summarize
from .tasks.difficulty import analyse_task
from .tasks.game24 import Game24Task, build_bank
from .tasks.generator import generate


def _card(value: str) -> int:
    n = int(value)
    if not MIN_CARD <= n <= MAX_CARD:
        raise argparse.ArgumentTypeError(f"card must be in {MIN_CARD}..{MAX_CARD}, got {n}")
    return n


def cmd_solve(args) -> int:
    sols = search(args.numbers, args.target) if args.raw else solve(args.numbers, args.target)
    if not sols:
        print("No solution")
        return 1
    if args.shuffle:
        sols = random.sample(sols, len(sols))
    print(f"Found {len(sols)} solution(s):")
    for s in sols:
        print("  ", s)
    if args.difficulty:
        difficulty = analyse_task(args.numbers)
        print(f"Difficulty level: {difficulty} (1=very easy, 5=very hard)")
    return 0


def cmd_normalize(args) -> int:
    status = 0
    for expr in args.expressions:
        try:
            print(f"{expr}  ->  {normalize(expr)}")
        except (TokenizeError, ParseError) as e:
            print(f"{expr}  ->  error: {e}", file=sys.stderr)
            status = 1
    return status


def cmd_generate(args) -> int:
    puzzle = generate(random.Random(args.seed))
    print("Input:", *puzzle.numbers)
    print(f"Found {len(puzzle.solutions)} solution(s):")
    for s in puzzle.solutions:
        print("  ", s)
    return 0


def cmd_bank(args) -> int:
    df = build_bank(args.size, seed=args.seed)
    if args.output:
        df.to_csv(args.output, index=False)
        print(f"wrote {len(df)} puzzle(s) to {args.output}")
    else:
        print(df.to_csv(index=False), end='')
    return 0


def cmd_run(args) -> int:
    task = Game24Task(args.bank)
    results = asyncio.run(run_async(task, concurrency=args.concurrency))
    if args.output:
        with open(args.output, 'w') as f:
            json.dump(results, f, indent=4)
    stats = summarize(results)
    print(f"Total tasks: {stats['total']}")
    print(f"Any-shot accuracy: {stats['acc_any']:.2%}")
    print(f"Average accuracy: {stats['acc_avg']:.2%}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calc24", description="Four-number 24-game solver.")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("solve", help="list the distinct solutions of a hand")
    p.add_argument("numbers", type=_card, nargs=NUM_COUNT,
                   help=f"the {NUM_COUNT} cards ({MIN_CARD}-{MAX_CARD})")
    p.add_argument("-t", "--target", type=int, default=TARGET,
                   help=f"target value to reach (default {TARGET})")
    p.add_argument("--raw", action="store_true", help="skip deduplication")
    p.add_argument("--shuffle", action="store_true", help="print solutions in random order")
    p.add_argument("-d", "--difficulty", action="store_true", help="also rate the hand")
    p.set_defaults(func=cmd_solve)

    p = sub.add_parser("normalize", help="print canonical signatures")
    p.add_argument("expressions", nargs="+")
    p.set_defaults(func=cmd_normalize)

    p = sub.add_parser("generate", help="deal a random solvable hand")
    p.add_argument("--seed", type=int, default=None)
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("bank", help="build a CSV bank of solvable hands")
    p.add_argument("--size", type=int, default=100)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("-o", "--output", default=None, help="CSV path (default stdout)")
    p.set_defaults(func=cmd_bank)

    p = sub.add_parser("run", help="solve every hand of a bank")
    p.add_argument("bank", help="CSV file with a Puzzles column")
    p.add_argument("--concurrency", type=int, default=CONCURRENCY,
                   help="how many hands to solve simultaneously")
    p.add_argument("-o", "--output", default=None, help="JSON log path")
    p.set_defaults(func=cmd_run)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s  %(message)s")
    return args.func(args)
