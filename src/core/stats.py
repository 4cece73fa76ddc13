from dataclasses import asdict, dataclass, field
from typing import Optional, Sequence


@dataclass
class MatchStats:
    """Summary of a match result."""
    total_words: int = 0
    longest_word: Optional[str] = None
    shortest_word: Optional[str] = None
    average_length: float = 0.0
    length_histogram: dict[int, int] = field(default_factory=dict)  # length -> count, ascending

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_stats(result: Sequence[str]) -> MatchStats:
    """
    Derive statistics from a ranked match result.

    Assumes match-result order, so result[0] is the longest word. The shortest
    word is the alphabetically first one among the shortest.
    """
    if not result:
        return MatchStats()

    histogram: dict[int, int] = {}
    for word in result:
        histogram[len(word)] = histogram.get(len(word), 0) + 1

    total_letters = sum(length * count for length, count in histogram.items())
    return MatchStats(
        total_words=len(result),
        longest_word=result[0],
        shortest_word=min(result, key=lambda w: (len(w), w)),
        average_length=round(total_letters / len(result), 2),
        length_histogram=dict(sorted(histogram.items())),
    )
