"""
Letter bags for word matching.

TERMINOLOGY:
- Bag / LetterMultiset: counted letters, order irrelevant, multiplicity matters
  - Stored as a 26-slot count signature ('a' at index 0)
  - A zero count means the letter is absent
  - Immutable: subtract() returns a new bag

- Formable: a word (or bag) whose every letter count fits inside another bag
"""
from dataclasses import dataclass
import string

from core.errors import PreconditionViolated

ALPHABET = string.ascii_lowercase
_ORD_A = ord('a')


def _compute_signature(letters_iter) -> tuple[int, ...]:
    """
    Compute frequency signature from an iterable of characters.
    Characters outside a-z are ignored.
    """
    freq = [0] * 26
    for c in letters_iter:
        idx = ord(c) - _ORD_A
        if 0 <= idx < 26:
            freq[idx] += 1
    return tuple(freq)


@dataclass(frozen=True)
class LetterMultiset:
    """Immutable bag of letters, compared and hashed by content."""
    counts: tuple[int, ...] = (0,) * 26

    def __post_init__(self) -> None:
        counts = self.counts
        if (not isinstance(counts, tuple) or len(counts) != 26
                or any(not isinstance(n, int) or n < 0 for n in counts)):
            raise ValueError(f"counts must be a tuple of 26 non-negative ints, got {counts!r}")

    @classmethod
    def from_string(cls, letters: str) -> 'LetterMultiset':
        return cls(_compute_signature(letters.lower()))

    def count(self, letter: str) -> int:
        if len(letter) != 1:
            raise ValueError(f"expected a single letter, got {letter!r}")
        idx = ord(letter.lower()) - _ORD_A
        if 0 <= idx < 26:
            return self.counts[idx]
        return 0

    def letters(self) -> frozenset[str]:
        """Letters present at least once."""
        return frozenset(ALPHABET[i] for i, n in enumerate(self.counts) if n > 0)

    def can_form(self, other: 'LetterMultiset') -> bool:
        """True if every letter count in other fits inside this bag."""
        return all(need <= have for need, have in zip(other.counts, self.counts))

    def can_spell(self, word: str) -> bool:
        """Same as can_form(LetterMultiset.from_string(word)), without building the bag."""
        word = word.lower()
        counts = self.counts
        for letter in set(word):
            idx = ord(letter) - _ORD_A
            if 0 <= idx < 26 and word.count(letter) > counts[idx]:
                return False
        return True

    def subtract(self, other: 'LetterMultiset') -> 'LetterMultiset':
        if not self.can_form(other):
            raise PreconditionViolated(f"cannot remove '{other}' from '{self}'")
        return LetterMultiset(tuple(have - need for have, need in zip(self.counts, other.counts)))

    def __len__(self) -> int:
        return sum(self.counts)

    def __str__(self) -> str:
        return "".join(letter * n for letter, n in zip(ALPHABET, self.counts))
