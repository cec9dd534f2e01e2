from letterboxed.board import Board
from letterboxed.trie import MIN_WORD_LENGTH, Trie


class Game:
    """Tracks a player's moves on a board and checks that each one is legal.

    A move is legal if it's a dictionary word, can be spelled on the board and
    starts with the last letter of the previous word. The game is won once
    every letter on the board has been used.
    """

    def __init__(self, trie: Trie, board: Board):
        self.trie = trie
        self.board = board
        self.words_used: list[str] = []
        self.reset()

    def reset(self):
        self.words_used = []
        self.board.reset()

    @property
    def next_letter(self) -> str | None:
        """The letter the next word must start with, if any."""
        if not self.words_used:
            return None
        return self.words_used[-1][-1]

    @property
    def is_won(self) -> bool:
        return self.board.is_complete()

    def is_legal_word(self, word: str) -> bool:
        if len(word) < MIN_WORD_LENGTH:
            return False
        start = self.next_letter
        if start is not None and word[0] != start:
            return False
        return self.board.is_legal_sequence(word) and self.trie.is_word(word)

    def try_word(self, word: str) -> bool:
        """Play word if it's legal. Returns whether it was played."""
        if not self.is_legal_word(word):
            return False
        self.words_used.append(word)
        self.board.mark_used(word)
        return True

    def undo(self) -> str:
        """Take back the last word played."""
        if not self.words_used:
            raise IndexError("No words to undo")
        word = self.words_used.pop()
        self.board.mark_unused(word)
        return word
