from typing import Iterable, Iterator, Self

from letterboxed.errors import InvalidArgument

LETTER_A = ord("a")
MIN_WORD_LENGTH = 3


def to_idx(letter: str) -> int:
    """Alphabet position of a letter, or -1 if it's not in a-z."""
    if "a" <= letter <= "z":
        return ord(letter) - LETTER_A
    return -1


def check_str(s) -> str:
    if not isinstance(s, str):
        raise InvalidArgument(f"Expected a string, got {type(s).__name__}: {s!r}")
    return s


class TrieNode:
    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * 26

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, letter: str) -> Self | None:
        i = to_idx(letter)
        if i < 0:
            return None
        return self._children[i]

    def is_word(self):
        return self._is_word

    def set_is_word(self):
        self._is_word = True

    def children(self) -> Iterator[tuple[str, Self]]:
        for i, child in enumerate(self._children):
            if child:
                yield chr(i + LETTER_A), child

    def num_nodes(self) -> int:
        return 1 + sum(c.num_nodes() for _, c in self.children())


class Trie:
    """A prefix tree over lowercase a-z words.

    Children are kept in a 26-slot array, so descending one letter is O(1)
    and every lookup is O(len(s)).
    """

    root: TrieNode
    _size: int
    _max_length: int

    def __init__(self):
        self.root = TrieNode()
        self._size = 0
        self._max_length = 0

    def add_word(self, word: str) -> TrieNode:
        """Add word to the trie. Adding a word twice is a no-op."""
        check_str(word)
        if word == "":
            raise InvalidArgument("Can't add the empty string to a Trie")
        idxs = [to_idx(letter) for letter in word]
        if min(idxs) < 0:
            raise InvalidArgument(f"Words must be lowercase a-z: {word!r}")
        node = self.root
        for i in idxs:
            if not node.starts_word(i):
                node._children[i] = TrieNode()
            node = node._children[i]
        if not node.is_word():
            node.set_is_word()
            self._size += 1
            self._max_length = max(self._max_length, len(word))
        return node

    def find_node(self, s: str) -> TrieNode | None:
        check_str(s)
        node = self.root
        for letter in s:
            node = node.descend(letter)
            if node is None:
                return None
        return node

    def contains_prefix(self, s: str) -> bool:
        """Does any word in the trie start with s?"""
        return self.find_node(s) is not None

    def is_word(self, s: str) -> bool:
        node = self.find_node(s)
        return node is not None and node.is_word()

    def child_prefixes(self, s: str) -> set[str]:
        """All one-letter extensions of s that are prefixes in the trie."""
        node = self.find_node(s)
        if node is None:
            return set()
        return {s + letter for letter, _ in node.children()}

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size

    def num_nodes(self) -> int:
        return self.root.num_nodes()

    def max_word_length(self) -> int:
        return self._max_length

    def words(self) -> Iterator[str]:
        """Pre-order traversal, which yields the words alphabetically."""

        def walk(node: TrieNode, prefix: str):
            if node.is_word():
                yield prefix
            for letter, child in node.children():
                yield from walk(child, prefix + letter)

        return walk(self.root, "")

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Trie":
        trie = Trie()
        for word in words:
            trie.add_word(word)
        return trie


def normalize_word(word: str) -> str:
    return word.strip().lower()


def is_letterboxed_word(word: str):
    """Could this word ever be played? Doubled letters always share a side."""
    if len(word) < MIN_WORD_LENGTH:
        return False
    prev = None
    for let in word:
        if let < "a" or let > "z":
            return False
        if let == prev:
            return False
        prev = let
    return True


def make_py_trie(dict_input: str) -> Trie:
    t = Trie()
    with open(dict_input) as f:
        for line in f:
            word = normalize_word(line)
            if is_letterboxed_word(word):
                t.add_word(word)
    return t
