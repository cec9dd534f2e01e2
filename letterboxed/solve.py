#!/usr/bin/env python
"""Solve a Letter Boxed puzzle and print the best solution.

$ poetry run python -m letterboxed.solve 'tjo feb cuy hil'
"""

import argparse
import sys
import time

from letterboxed.args import (
    add_standard_args,
    get_solver_from_args,
    get_trie_from_args,
)
from letterboxed.board import Board
from letterboxed.errors import InvalidArgument, NoSolutionFound


def format_solution(chain: list[str]) -> str:
    return "-".join(word.upper() for word in chain)


def main():
    parser = argparse.ArgumentParser(
        description="Find word chains that use every letter on a Letter Boxed board.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "board",
        type=str,
        help="The four sides of the board, top, right, bottom, left, e.g. 'tjo feb cuy hil'.",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every solution, best first.",
    )
    parser.add_argument(
        "--num_threads",
        type=int,
        default=1,
        help="Number of processes to split the search across.",
    )
    args = parser.parse_args()

    try:
        board = Board.from_string(args.board)
    except InvalidArgument as e:
        parser.error(str(e))

    trie = get_trie_from_args(args)
    try:
        solver = get_solver_from_args(args, trie, board, num_workers=args.num_threads)
    except InvalidArgument as e:
        parser.error(str(e))

    start_s = time.time()
    solutions = solver.find_all_solutions()
    elapsed_s = time.time() - start_s
    print(f"{len(solutions)} solutions with <= {args.max_words} words.")
    if args.all:
        print("\n".join(format_solution(chain) for chain in solver.sorted_solutions()))

    try:
        best = solver.find_best_solution()
    except NoSolutionFound as e:
        print(e)
        sys.exit(1)
    print(f"Best solution: {format_solution(best)}")
    sys.stderr.write(f"Solved {board} in {elapsed_s:.2f}s\n")


if __name__ == "__main__":
    main()
