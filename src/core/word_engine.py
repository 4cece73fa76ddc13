"""
Entry points used by the game session to query the dictionary.

All letter and word arguments are raw strings: mixed case is fine, and
anything that isn't plain letters gives an empty (or False) answer instead of
an error. The only exception that escapes is DataUnavailable, when the
dictionary file can't be read.
"""
import logging
import threading
from typing import Optional

from config import engine_config
from core import dictionary_cache
from core.combination_generator import CombinationGenerator
from core.dictionary import DictionaryIndex, normalize_word
from core.dictionary_cache import DictionaryCache
from core.letters import LetterMultiset
from core.matcher import SubsetMatcher, normalize_letters
from core.stats import MatchStats, calculate_stats

logger = logging.getLogger(__name__)


class WordEngine:
    _instance = None
    _instance_lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> 'WordEngine':
        """Shared engine bound to the configured dictionary."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = WordEngine()
        return cls._instance

    def __init__(self, dictionary_path: Optional[str] = None, cache: Optional[DictionaryCache] = None) -> None:
        self._dictionary_path = dictionary_path or engine_config.DICTIONARY_PATH
        self._cache = cache or dictionary_cache.default_cache

    def _index(self) -> DictionaryIndex:
        return self._cache.get(self._dictionary_path)

    def find_formable_words(
        self,
        remaining_letters: str,
        max_words: int = engine_config.DEFAULT_MAX_WORDS
    ) -> list[str]:
        """
        Every dictionary word that can be built from remaining_letters.

        Each word is tested against all of the letters on its own. Results are
        ordered longest first, then alphabetically, and cut to max_words.
        """
        letters = normalize_letters(remaining_letters)
        if not letters or max_words <= 0:
            return []

        matcher = SubsetMatcher(self._index())
        words = matcher.match(letters, max_words * engine_config.CANDIDATE_OVERSCAN)
        return words[:max_words]

    def find_combinations(
        self,
        remaining_letters: str,
        max_combinations: int = engine_config.DEFAULT_MAX_COMBINATIONS
    ) -> list[list[str]]:
        """
        Sequences of words that can be played one after another from remaining_letters.

        Ranked by total letters used. At most max_combinations are returned.
        """
        letters = normalize_letters(remaining_letters)
        if not letters or max_combinations <= 0:
            return []

        bag = LetterMultiset.from_string(letters)
        pool = SubsetMatcher(self._index()).match(bag, engine_config.COMBINATION_POOL_SIZE)
        generator = CombinationGenerator(max_combinations, engine_config.COMBINATION_POOL_SIZE)
        combinations = generator.generate(pool, bag)
        logger.info(f"find_combinations({letters}): {len(combinations)} combinations from {len(pool)} words")
        return [list(combo) for combo in combinations]

    def is_known_word(self, word: str) -> bool:
        """True if word is in the dictionary, ignoring case and surrounding whitespace."""
        if normalize_word(word) is None:
            return False
        return self._index().is_word(word)

    def is_formable(self, word: str, remaining_letters: Optional[str] = None) -> bool:
        """
        True if word is a dictionary word and, when remaining_letters is given,
        can be built from those letters.
        """
        if not self.is_known_word(word):
            return False
        if remaining_letters is None:
            return True
        letters = normalize_letters(remaining_letters)
        return bool(letters) and LetterMultiset.from_string(letters).can_spell(normalize_word(word))

    def word_stats(self, remaining_letters: str) -> MatchStats:
        return calculate_stats(self.find_formable_words(remaining_letters))

    def sample_words(self, count: int = engine_config.DEFAULT_SAMPLE_SIZE) -> list[str]:
        return self._index().sample_words(count)

    def word_count(self) -> int:
        return self._index().word_count()

    def invalidate(self) -> None:
        """Force the next query to reload the dictionary."""
        self._cache.invalidate(self._dictionary_path)
