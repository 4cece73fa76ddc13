import logging
from typing import Sequence

from config import engine_config
from core.letters import LetterMultiset

logger = logging.getLogger(__name__)

Combination = tuple[str, ...]


class CombinationGenerator:
    """
    Depth-first search for sequences of words that can all be taken from one bag.

    Each step picks a later word from the pool that still fits in the remaining
    letters, records the sequence so far, then continues with those letters
    removed. Both short and extended sequences are kept. The search is
    exponential, so it stops hard at max_combinations and only looks at the
    first pool_size words of the pool.
    """

    def __init__(
        self,
        max_combinations: int = engine_config.DEFAULT_MAX_COMBINATIONS,
        pool_size: int = engine_config.COMBINATION_POOL_SIZE
    ) -> None:
        self._max_combinations = max_combinations
        self._pool_size = pool_size

    def generate(self, pool: Sequence[str], bag: LetterMultiset) -> list[Combination]:
        """Return combinations ranked by total letters used, ties in discovery order."""
        if self._max_combinations <= 0:
            return []

        candidates = [w for w in pool[:self._pool_size] if bag.can_spell(w)]
        found: list[Combination] = []
        self._search(candidates, 0, bag, (), found)

        # sort() is stable, so equal totals keep discovery order
        found.sort(key=lambda combo: -sum(len(w) for w in combo))
        logger.debug(f"generate({bag}): {len(found)} combinations from {len(candidates)} candidates")
        return found

    def _search(
        self,
        candidates: list[str],
        start: int,
        remaining: LetterMultiset,
        sequence: Combination,
        found: list[Combination]
    ) -> bool:
        """Returns False once the cap is reached so every caller unwinds."""
        for i in range(start, len(candidates)):
            word = candidates[i]
            if not remaining.can_spell(word):
                continue
            extended = sequence + (word,)
            found.append(extended)
            if len(found) >= self._max_combinations:
                return False
            rest = remaining.subtract(LetterMultiset.from_string(word))
            if rest and not self._search(candidates, i + 1, rest, extended, found):
                return False
        return True
