import logging
from typing import Union

from config import engine_config
from core.dictionary import DictionaryIndex
from core.letters import LetterMultiset

logger = logging.getLogger(__name__)


def normalize_letters(letters: str) -> str:
    """Lowercased letters, or "" if the input has anything besides a-z."""
    letters = letters.strip().lower()
    if not (letters.isascii() and letters.isalpha()):
        return ""
    return letters


def rank_key(word: str) -> tuple[int, str]:
    """Sort key for match results: longest first, then alphabetical."""
    return (-len(word), word)


class SubsetMatcher:
    """Finds every dictionary word that can be built from a bag of letters."""

    def __init__(self, index: DictionaryIndex) -> None:
        self._index = index

    def match(
        self,
        query: Union[str, LetterMultiset],
        max_candidates: int = engine_config.DEFAULT_MAX_WORDS
    ) -> list[str]:
        """
        Return formable words, longest first then alphabetical.

        Every word is checked against the whole query bag on its own; results
        don't share letters with each other. Scanning stops once
        max_candidates words have been accepted.
        """
        if isinstance(query, str):
            query = LetterMultiset.from_string(normalize_letters(query))
        if not query or max_candidates <= 0:
            return []

        available = query.letters()
        bag_size = len(query)
        candidates: list[str] = []
        for length, words in self._index.words_by_length():
            if length > bag_size:
                continue
            for word in words:
                if available.isdisjoint(word):
                    continue
                if query.can_spell(word):
                    candidates.append(word)
                    if len(candidates) >= max_candidates:
                        break
            if len(candidates) >= max_candidates:
                break

        candidates.sort(key=rank_key)
        logger.debug(f"match({query}): {len(candidates)} candidates")
        return candidates
