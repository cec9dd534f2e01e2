#!/usr/bin/env python
"""Filter a word list to just playable Letter Boxed words.

Words are lowercased; anything shorter than three letters, containing a
non a-z character or a doubled letter is dropped.
"""

import fileinput

from letterboxed.trie import is_letterboxed_word, normalize_word


def main():
    for line in fileinput.input():
        word = normalize_word(line)
        if is_letterboxed_word(word):
            print(word)


if __name__ == "__main__":
    main()
