from __future__ import annotations
import sys
from typing import Callable, Dict, List

from .models import DistanceMode

# returned by short_distance() for words of different lengths;
# larger than any threshold, so such pairs are dropped without a special case
NOT_COMPARABLE = sys.maxsize

Scorer = Callable[[str, str], int]


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance: unit-cost insertions, deletions and substitutions.
    Keeps two rows of the DP table, sized by the shorter word.
    """
    if len(a) < len(b):
        a, b = b, a
    # b is the shorter word
    prev: List[int] = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        cur = [i] + [0] * len(b)
        ca = a[i - 1]
        for j in range(1, len(b) + 1):
            if ca == b[j - 1]:
                cur[j] = prev[j - 1]
            else:
                cur[j] = 1 + min(prev[j],        # delete
                                 cur[j - 1],     # insert
                                 prev[j - 1])    # substitute
        prev = cur
    return prev[len(b)]


def short_distance(a: str, b: str) -> int:
    """Hamming distance for equal-length words, NOT_COMPARABLE otherwise."""
    if len(a) != len(b):
        return NOT_COMPARABLE
    return sum(1 for x, y in zip(a, b) if x != y)


_SCORERS: Dict[DistanceMode, Scorer] = {
    DistanceMode.FULL: edit_distance,
    DistanceMode.SHORT: short_distance,
}


def scorer_for(mode: DistanceMode) -> Scorer:
    return _SCORERS[mode]
