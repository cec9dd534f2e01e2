#!/usr/bin/env python
"""I/O-free performance test.

Solves a batch of random 4x3 boards and reports the pace:

$ poetry run python -m letterboxed.perf 20 --random_seed 808813
"""

import argparse
import random
import time

from tqdm import tqdm

from letterboxed.args import (
    add_standard_args,
    get_solver_from_args,
    get_trie_from_args,
)
from letterboxed.board import Board
from letterboxed.trie import LETTER_A

A_TO_Z = [chr(LETTER_A + i) for i in range(26)]


def random_board(letters_per_side: int = 3) -> Board:
    letters = random.sample(A_TO_Z, 4 * letters_per_side)
    n = letters_per_side
    return Board(*(letters[i * n : (i + 1) * n] for i in range(4)))


def main():
    parser = argparse.ArgumentParser(
        prog="Letter Boxed perf test",
        description="Measure the speed of the solver on random boards.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "--input_file",
        type=str,
        help="Use boards from this file (one per line) instead of random ones.",
    )
    parser.add_argument(
        "num_boards",
        type=int,
        help="Number of boards to solve",
        default=20,
        nargs="?",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    t = get_trie_from_args(args)

    if args.input_file:
        with open(args.input_file) as f:
            boards = [Board.from_string(line) for line in f if line.strip()]
        print(f"Read {len(boards)} boards from {args.input_file}")
    else:
        print(f"Generating {args.num_boards} boards...")
        boards = [random_board() for _ in range(args.num_boards)]

    total_solutions = 0
    num_solved = 0
    print("Solving boards...")
    start_s = time.time()
    for board in tqdm(boards, smoothing=0):
        solutions = get_solver_from_args(args, t, board).find_all_solutions()
        total_solutions += len(solutions)
        num_solved += 1 if solutions else 0
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(boards) / elapsed_s

    print(f"{total_solutions=} {num_solved=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} bds/sec")


if __name__ == "__main__":
    main()
