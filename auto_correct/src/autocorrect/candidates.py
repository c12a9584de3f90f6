from __future__ import annotations
from typing import List

from .index import DictionaryIndex
from .models import CandidatePool, DistanceMode


def generate(query: str, index: DictionaryIndex) -> CandidatePool:
    """
    Pick the dictionary words worth scoring against `query`.

    * len(query) <= short_len -> every short word, Hamming mode, fixed threshold
    * otherwise               -> contents of each bucket the query's windows hit,
                                 full edit distance, threshold by query length

    A query longer than short_len but shorter than n has no windows and gets
    an empty pool. The pool keeps duplicates; dedupe() removes them.

    Raises:
        InvalidCharacter: if the query holds a symbol outside the alphabet.
    """
    cfg = index.config
    index.codec.validate(query)

    if len(query) <= cfg.short_len:
        return CandidatePool(words=index.short_words,
                             threshold=cfg.short_threshold,
                             mode=DistanceMode.SHORT)

    words: List[str] = []
    for h in index.hashes(query):
        words.extend(index.bucket(h))
    return CandidatePool(words=tuple(words),
                         threshold=cfg.thresholds.for_length(len(query)),
                         mode=DistanceMode.FULL)
