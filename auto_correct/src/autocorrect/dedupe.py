from __future__ import annotations
from typing import Iterable, List, Set


def dedupe(words: Iterable[str]) -> List[str]:
    """Drop repeated words, keeping the first occurrence of each in place."""
    seen: Set[str] = set()
    out: List[str] = []
    for w in words:
        if w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out
