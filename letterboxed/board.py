"""The Letter Boxed frame: four sides of distinct letters, plus "used" state.

The used state is scratch space for the solver. Rather than copying the board
on every recursive call, the solver marks a word's letters as used when it
commits to the word and unmarks them when it backtracks. Each slot keeps a
use count rather than a flag so that mark_used and mark_unused are exact
inverses even when several words in a chain share a letter.
"""

import re
from contextlib import contextmanager
from typing import Iterable

from letterboxed.errors import InvalidArgument

SIDE_NAMES = ("top", "right", "bottom", "left")


class LetterSlot:
    """A single letter on the board."""

    def __init__(self, letter: str, side: int):
        self.letter = letter
        self.side = side
        self.uses = 0

    @property
    def used(self):
        return self.uses > 0

    def __repr__(self):
        return f"LetterSlot({self.letter!r}, side={self.side}, uses={self.uses})"


def normalize_letter(char, side: int) -> str:
    if not isinstance(char, str) or len(char) != 1 or not char.isalpha():
        raise InvalidArgument(
            f"Expected a single letter on the {SIDE_NAMES[side]} side, got {char!r}"
        )
    letter = char.lower()
    if not "a" <= letter <= "z":
        raise InvalidArgument(f"Letter {char!r} is not in a-z")
    return letter


class Board:
    _sides: list[list[LetterSlot]]
    _slots: dict[str, LetterSlot]

    def __init__(
        self,
        top: Iterable[str],
        right: Iterable[str],
        bottom: Iterable[str],
        left: Iterable[str],
    ):
        self._sides = []
        self._slots = {}
        for side, chars in enumerate((top, right, bottom, left)):
            if not isinstance(chars, Iterable):
                raise InvalidArgument(f"{SIDE_NAMES[side]} side is not iterable")
            slots = []
            for char in chars:
                letter = normalize_letter(char, side)
                if letter in self._slots:
                    raise InvalidArgument(f"Letter {letter!r} appears twice on board")
                slot = LetterSlot(letter, side)
                self._slots[letter] = slot
                slots.append(slot)
            if not slots:
                raise InvalidArgument(f"{SIDE_NAMES[side]} side is empty")
            self._sides.append(slots)

    @staticmethod
    def from_string(text: str) -> "Board":
        """Parse a board like "tjo feb cuy hil" (top, right, bottom, left)."""
        if not isinstance(text, str):
            raise InvalidArgument(f"Expected a string, got {text!r}")
        sides = [s for s in re.split(r"[\s,]+", text.strip()) if s]
        if len(sides) != 4:
            raise InvalidArgument(f"Expected four sides, got {len(sides)}: {text!r}")
        return Board(*sides)

    def __str__(self):
        return " ".join(self.sides)

    def __repr__(self):
        return f"Board.from_string({str(self)!r})"

    @property
    def sides(self) -> list[str]:
        return ["".join(slot.letter for slot in side) for side in self._sides]

    @property
    def letters(self) -> list[str]:
        return [slot.letter for side in self._sides for slot in side]

    def side_of(self, letter: str) -> int | None:
        slot = self._slots.get(letter)
        return slot.side if slot else None

    def is_used(self, letter: str) -> bool:
        return self._slots[letter].used

    def used_letters(self) -> set[str]:
        return {letter for letter, slot in self._slots.items() if slot.used}

    def reset(self):
        for slot in self._slots.values():
            slot.uses = 0

    def snapshot(self) -> tuple[int, ...]:
        return tuple(slot.uses for slot in self._slots.values())

    def restore(self, state: tuple[int, ...]):
        assert len(state) == len(self._slots)
        for slot, uses in zip(self._slots.values(), state):
            slot.uses = uses

    def copy(self) -> "Board":
        """An independent board with the same letters and used state."""
        out = Board(*self.sides)
        out.restore(self.snapshot())
        return out

    def is_legal_sequence(self, s: str) -> bool:
        """Are all letters on the board, with no two neighbors on the same side?"""
        if not s:
            return False
        prev_side = None
        for letter in s:
            slot = self._slots.get(letter)
            if slot is None or slot.side == prev_side:
                return False
            prev_side = slot.side
        return True

    def mark_used(self, word: str):
        for letter in set(word):
            slot = self._slots.get(letter)
            if slot:
                slot.uses += 1

    def mark_unused(self, word: str):
        for letter in set(word):
            slot = self._slots.get(letter)
            if slot:
                assert slot.uses > 0, f"{letter} was not marked as used"
                slot.uses -= 1

    @contextmanager
    def using(self, word: str):
        """Mark word's letters as used for the duration of a with block."""
        self.mark_used(word)
        try:
            yield self
        finally:
            self.mark_unused(word)

    def choices_after(self, letter: str) -> list[str]:
        """Unused letters that may legally follow this one in a word."""
        slot = self._slots.get(letter)
        if slot is None:
            raise InvalidArgument(f"{letter!r} is not on the board")
        side = slot.side
        return [
            s.letter
            for i, slots in enumerate(self._sides)
            if i != side
            for s in slots
            if not s.used
        ]

    def is_complete(self) -> bool:
        return all(slot.used for slot in self._slots.values())
