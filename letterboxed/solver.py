"""Find Letter Boxed solutions via prefix-pruned backtracking.

The search builds words one letter at a time, walking the Trie alongside the
partial word so that any continuation which can't lead to a dictionary word is
dropped immediately. When the partial word is itself a word, the search both
commits to it (marks its letters used and starts the next word from its last
letter) and keeps extending it, since "art" and "arts" may both matter.

A single Board is shared by the whole search. Every mutation is made through a
context manager so that it's undone on every way out of a branch.
"""

import multiprocessing
import sys
import time
from contextlib import contextmanager

from tqdm import tqdm

from letterboxed.board import Board
from letterboxed.errors import InvalidArgument, NoSolutionFound
from letterboxed.trie import Trie, TrieNode

DEFAULT_MAX_WORDS = 5

# Stack frames to leave free for the caller, pytest, etc.
RECURSION_HEADROOM = 100

Solution = list[str]


def solution_key(chain: Solution):
    """Fewer words, then fewer letters, then alphabetical."""
    return (len(chain), sum(len(word) for word in chain), chain)


class Solver:
    def __init__(
        self,
        trie: Trie,
        board: Board,
        max_words: int = DEFAULT_MAX_WORDS,
        *,
        num_workers: int = 1,
        log_progress: bool = False,
    ):
        if not isinstance(max_words, int) or max_words < 1:
            raise InvalidArgument(f"max_words must be a positive integer: {max_words}")
        # Each letter of each word is one level of recursion.
        max_depth = (max_words + 1) * (trie.max_word_length() + 1)
        if max_depth + RECURSION_HEADROOM > sys.getrecursionlimit():
            raise InvalidArgument(
                f"max_words={max_words} could recurse {max_depth} levels deep, "
                f"which exceeds the recursion limit ({sys.getrecursionlimit()})"
            )
        self.trie = trie
        self.board = board
        self.max_words = max_words
        self.num_workers = num_workers
        self.log_progress = log_progress
        self.solutions: list[Solution] | None = None
        self.best_solution: Solution | None = None

    def find_all_solutions(self) -> list[Solution]:
        """Find every chain of <= max_words words which uses all the letters.

        This is only done once; later calls return the same list.
        """
        if self.solutions is not None:
            return self.solutions

        start_s = time.time()
        board = self.board
        saved = board.snapshot()
        board.reset()
        try:
            if self.num_workers > 1:
                solutions = self._find_parallel()
            else:
                solutions = []
                for letter in tqdm(
                    board.letters, smoothing=0, disable=not self.log_progress
                ):
                    solutions.extend(self.solutions_from(letter))
        finally:
            board.restore(saved)
        self.solutions = solutions

        if self.log_progress:
            elapsed_s = time.time() - start_s
            print(f"Found {len(solutions)} solutions for {board} in {elapsed_s:.02f}s")
        return solutions

    def find_best_solution(self) -> Solution:
        if self.best_solution is None:
            solutions = self.find_all_solutions()
            if not solutions:
                raise NoSolutionFound(
                    f"No solution for {self.board} with <= {self.max_words} words"
                )
            self.best_solution = min(solutions, key=solution_key)
        return self.best_solution

    def sorted_solutions(self) -> list[Solution]:
        return sorted(self.find_all_solutions(), key=solution_key)

    def solutions_from(self, letter: str) -> list[Solution]:
        """Find solutions whose first word starts with letter.

        This assumes that nothing on the board is in use yet.
        """
        out = []
        with self.board.using(letter):
            self._extend([], letter, self.trie.root.descend(letter), out)
        return out

    @contextmanager
    def _push_word(self, chain: list[str], word: str):
        with self.board.using(word):
            chain.append(word)
            try:
                yield
            finally:
                chain.pop()

    def _extend(
        self, chain: list[str], word: str, node: TrieNode | None, out: list[Solution]
    ):
        board = self.board
        if board.is_complete():
            out.append([*chain])
            return
        if len(chain) >= self.max_words:
            return
        if node is None:
            return

        for letter in board.choices_after(word[-1]):
            child = node.descend(letter)
            if child is None:
                continue
            extended = word + letter
            if child.is_word():
                with self._push_word(chain, extended):
                    self._extend(chain, letter, self.trie.root.descend(letter), out)
            self._extend(chain, extended, child, out)

    def _find_parallel(self) -> list[Solution]:
        letters = self.board.letters
        solutions = []
        with multiprocessing.Pool(
            self.num_workers,
            solve_init,
            (self.trie, self.board, self.max_words),
        ) as pool:
            it = pool.imap_unordered(solve_worker, letters)
            for found in tqdm(
                it, smoothing=0, total=len(letters), disable=not self.log_progress
            ):
                solutions.extend(found)
        return solutions


def solve_init(trie: Trie, board: Board, max_words: int):
    # Each worker gets its own unpickled copy of the board, so nothing is shared.
    solve_worker.solver = Solver(trie, board.copy(), max_words)


def solve_worker(letter: str) -> list[Solution]:
    solver: Solver = solve_worker.solver
    solver.board.reset()
    return solver.solutions_from(letter)
