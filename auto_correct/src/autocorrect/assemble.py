from __future__ import annotations
from typing import Iterable, List

from .distance import Scorer
from .models import ExactMatch, Suggestions, SuggestionResult


def assemble(query: str, candidates: Iterable[str], *, threshold: int,
             scorer: Scorer, sort_groups: bool = False) -> SuggestionResult:
    """
    Score deduplicated candidates and order the survivors by distance.

    Words farther than `threshold` are dropped. Within a distance group the
    arrival order is kept unless `sort_groups` asks for alphabetical order.
    A candidate at distance 0 means the query is a dictionary word: the
    remaining candidates are not scored and ExactMatch is returned.
    """
    groups: List[List[str]] = [[] for _ in range(threshold + 1)]
    for word in candidates:
        d = scorer(word, query)
        if d == 0:
            return ExactMatch(word)
        if d > threshold:
            continue
        groups[d].append(word)

    out: List[str] = []
    for group in groups[1:]:
        out.extend(sorted(group) if sort_groups else group)
    return Suggestions(tuple(out))
