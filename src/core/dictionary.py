import logging
import time
from typing import Callable, Iterable, Optional

from config import engine_config
from core.errors import DataUnavailable

logger = logging.getLogger(__name__)


def normalize_word(raw: str) -> Optional[str]:
    """Trim and lowercase a raw entry. Returns None if it isn't a usable word."""
    word = raw.strip().lower()
    if not word or not (word.isascii() and word.isalpha()):
        return None
    if not engine_config.MIN_WORD_LENGTH <= len(word) <= engine_config.MAX_WORD_LENGTH:
        return None
    return word


class DictionaryIndex:
    """
    Validated dictionary words partitioned by length, longest first.

    Each length bucket is sorted alphabetically, so scanning the buckets in
    order visits words in match-result order. Instances are fully built before
    they are returned and never change afterwards.
    """

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'DictionaryIndex':
        """Create an index from a word list without file I/O."""
        all_words: set[str] = set()
        for raw in words:
            word = normalize_word(raw)
            if word:
                all_words.add(word)

        by_length: dict[int, list[str]] = {}
        for word in all_words:
            by_length.setdefault(len(word), []).append(word)

        buckets = tuple(
            (length, tuple(sorted(by_length[length])))
            for length in sorted(by_length, reverse=True))
        return cls(buckets, frozenset(all_words))

    @classmethod
    def load(cls, source: str, open: Callable = open) -> 'DictionaryIndex':
        """Read a newline-delimited word list. Malformed lines are dropped."""
        start = time.monotonic()
        try:
            with open(source, "r", encoding="utf-8", errors="replace") as f:
                index = cls.from_words(f)
        except OSError as e:
            logger.error(f"Dictionary not readable at {source}: {e}")
            raise DataUnavailable(f"Dictionary not found at {source}") from e

        logger.info(f"Built dictionary index with {index.word_count()} words in "
                    f"{len(index._buckets)} length buckets from {source} "
                    f"({time.monotonic() - start:.2f}s)")
        return index

    def __init__(self, buckets: tuple[tuple[int, tuple[str, ...]], ...], all_words: frozenset[str]) -> None:
        self._buckets = buckets
        self._all_words = all_words

    def words_by_length(self) -> tuple[tuple[int, tuple[str, ...]], ...]:
        return self._buckets

    def max_length(self) -> int:
        return self._buckets[0][0] if self._buckets else 0

    def is_word(self, word: str) -> bool:
        normalized = normalize_word(word)
        return normalized is not None and normalized in self._all_words

    def word_count(self) -> int:
        return len(self._all_words)

    def sample_words(self, count: int = engine_config.DEFAULT_SAMPLE_SIZE) -> list[str]:
        """First `count` words in index order (longest first)."""
        sample: list[str] = []
        for _, words in self._buckets:
            if len(sample) >= count:
                break
            sample.extend(words[:count - len(sample)])
        return sample

    def __len__(self) -> int:
        return len(self._all_words)

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)
