"""Standard command-line arguments shared across the tools."""

import argparse

from letterboxed.board import Board
from letterboxed.solver import DEFAULT_MAX_WORDS, Solver
from letterboxed.trie import Trie, make_py_trie


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable2k.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--max_words",
        type=int,
        default=DEFAULT_MAX_WORDS,
        help="Longest chain of words to consider. Higher values are much slower.",
    )
    parser.add_argument(
        "--log_progress",
        action="store_true",
        help="Log progress and timing while solving.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    t = make_py_trie(args.dictionary)
    assert t.size()
    if args.log_progress:
        print(f"Loaded {t.size()} words from {args.dictionary}")
    return t


def get_solver_from_args(
    args: argparse.Namespace, trie: Trie, board: Board, num_workers=1
) -> Solver:
    return Solver(
        trie,
        board,
        args.max_words,
        num_workers=num_workers,
        log_progress=args.log_progress,
    )
