class InvalidArgument(ValueError):
    """Bad input to a trie, board or solver: wrong type, malformed board, etc."""


class NoSolutionFound(Exception):
    """The board can't be covered with this dictionary and word limit."""
