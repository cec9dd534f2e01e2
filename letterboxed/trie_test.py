import pytest
from inline_snapshot import snapshot

from letterboxed.errors import InvalidArgument
from letterboxed.test_utils import FIXTURE_WORDS, get_trie
from letterboxed.trie import Trie, is_letterboxed_word, normalize_word


def test_trie():
    t = Trie.create_from_wordlist(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert not t.root.is_word()

    assert t.size() == 6
    assert len(t) == 6
    assert t.is_word("agriculture")
    assert t.is_word("culture")
    assert t.is_word("boggle")
    assert t.is_word("tea")
    assert t.is_word("sea")
    assert t.is_word("teapot")

    assert not t.is_word("teap")
    assert not t.is_word("random")
    assert not t.is_word("cultur")
    assert not t.is_word("")

    assert t.contains_prefix("teap")
    assert t.contains_prefix("cultur")
    assert t.contains_prefix("")
    assert not t.contains_prefix("random")
    assert not t.contains_prefix("teapots")

    wd = t.root.descend("t")
    assert wd is not None
    wd = wd.descend("e")
    assert wd is not None
    wd = wd.descend("a")
    assert wd is not None
    assert wd.is_word()
    assert wd.descend("x") is None
    assert wd.descend("!") is None

    assert t.max_word_length() == 11


def test_add_word_idempotent():
    t = Trie()
    t.add_word("art")
    num_nodes = t.num_nodes()
    assert t.is_word("art")
    assert t.size() == 1

    t.add_word("art")
    assert t.is_word("art")
    assert t.size() == 1
    assert t.num_nodes() == num_nodes == 4

    t.add_word("arts")
    assert t.is_word("art")
    assert t.is_word("arts")
    assert t.size() == 2
    assert t.num_nodes() == 5

    # A word can be added after a longer word passing through it.
    t.add_word("ar")
    assert t.size() == 3
    assert t.num_nodes() == 5


def test_child_prefixes():
    t = Trie.create_from_wordlist(["tea", "ten", "toe", "sea"])
    assert t.child_prefixes("") == {"t", "s"}
    assert t.child_prefixes("t") == {"te", "to"}
    assert t.child_prefixes("te") == {"tea", "ten"}
    assert t.child_prefixes("tea") == set()
    assert t.child_prefixes("xyz") == set()


def test_words():
    t = Trie.create_from_wordlist(["toe", "tea", "sea", "ten", "tea"])
    assert [*t.words()] == ["sea", "tea", "ten", "toe"]


def test_invalid_arguments():
    t = Trie.create_from_wordlist(["tea"])
    with pytest.raises(InvalidArgument):
        t.add_word(None)
    with pytest.raises(InvalidArgument):
        t.add_word(["t", "e", "a"])
    with pytest.raises(InvalidArgument):
        t.is_word(123)
    with pytest.raises(InvalidArgument):
        t.contains_prefix(b"te")
    with pytest.raises(InvalidArgument):
        t.child_prefixes(None)
    with pytest.raises(InvalidArgument):
        t.add_word("")
    with pytest.raises(InvalidArgument):
        t.add_word("Tea")
    # InvalidArgument is a ValueError
    with pytest.raises(ValueError):
        t.add_word("don't")
    assert t.size() == 1
    assert not t.contains_prefix("don")

    # Queries with unusual characters are just misses.
    assert not t.is_word("TEA")
    assert not t.contains_prefix("t!")


def test_is_letterboxed_word():
    assert is_letterboxed_word("jutify")
    assert is_letterboxed_word("tithe")
    assert not is_letterboxed_word("ab")
    assert not is_letterboxed_word("hoof")
    assert not is_letterboxed_word("don't")
    assert not is_letterboxed_word("Blech")
    assert normalize_word("  Blech\n") == "blech"


def test_load_file():
    t = get_trie()
    assert not t.root.is_word()
    assert t.size() == len(FIXTURE_WORDS)
    assert sorted(t.words()) == sorted(FIXTURE_WORDS)

    assert t.is_word("blech")
    assert t.is_word("yhul")
    assert not t.is_word("hoof")
    assert not t.is_word("ab")
    assert t.child_prefixes("y") == snapshot({"yo", "ye", "yh"})
