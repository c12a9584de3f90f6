"""
Index module for autocorrect functionality.

This module builds the n-gram hash index used to narrow the search for
suggestions. Every window of n symbols in a dictionary word is read as a
base-R number; the index maps each such number to the words that contain
that window. Words up to the configured short length are also kept in a
flat list, since they are matched without the index.
"""

from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List, Tuple

from . import config as CFG
from .codec import AlphabetCodec
from .errors import ConfigurationError, InvalidCharacter
from .models import EngineConfig

log = logging.getLogger(__name__)


def window_hashes(word: str, codec: AlphabetCodec, gram: int) -> List[int]:
    """
    Rolling hashes of every n-symbol window of `word`, left to right.

    The first n-1 codes seed the hash; each following symbol shifts it one
    base-R digit and drops the oldest digit via the modulus R**n. A word of
    length L yields max(0, L-n+1) hashes.

    Raises:
        InvalidCharacter: if `word` holds a symbol outside the codec's alphabet.

    Examples:
        >>> codec = AlphabetCodec("abc")
        >>> window_hashes("abca", codec, 2)
        [1, 5, 6]
        >>> window_hashes("a", codec, 2)
        []
    """
    if gram <= 0:
        raise ConfigurationError(f"n-gram length must be > 0, got {gram}")
    if len(word) < gram:
        return []
    radix = codec.radix
    modulus = radix ** gram
    h = 0
    for ch in word[:gram - 1]:
        h = h * radix + codec.encode(ch, word)
    out: List[int] = []
    for ch in word[gram - 1:]:
        h = (h * radix + codec.encode(ch, word)) % modulus
        out.append(h)
    return out


class DictionaryIndex:
    """
    N-gram hash buckets plus the short-word list, built once per dictionary.

    The buckets form a sparse mapping: only hash values some word produced
    are present, and `bucket(h)` returns an empty tuple for the rest. After
    build() the index is never mutated, so one instance can serve any number
    of queries.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self.codec = AlphabetCodec(self.config.alphabet)
        self._buckets: Dict[int, Tuple[str, ...]] = {}
        self._short_words: Tuple[str, ...] = ()
        self._vocabulary: FrozenSet[str] = frozenset()

    # ---- Build (once) ----
    @classmethod
    def build(cls, words: Iterable[str], config: EngineConfig | None = None,
              *, on_invalid: str = CFG.ON_INVALID) -> "DictionaryIndex":
        """
        Index `words` in order.

        Args:
            words: dictionary words, already normalized.
            config: engine parameters; defaults to EngineConfig().
            on_invalid: "skip" drops (and logs) words the codec rejects,
                "raise" propagates InvalidCharacter.

        Returns:
            DictionaryIndex: the populated, read-only index.

        Note:
            - A word is appended to a bucket once per window, so a repeated
              window means a repeated entry in that bucket.
            - Words shorter than n land in no bucket.
        """
        if on_invalid not in ("skip", "raise"):
            raise ConfigurationError(f"on_invalid must be 'skip' or 'raise', got {on_invalid!r}")
        idx = cls(config)
        gram, short_len = idx.config.gram, idx.config.short_len

        buckets: Dict[int, List[str]] = defaultdict(list)
        short_words: List[str] = []
        vocabulary = set()
        skipped = 0
        for word in words:
            try:
                idx.codec.validate(word)
            except InvalidCharacter:
                if on_invalid == "raise":
                    raise
                log.warning("Skipping dictionary word %r: outside alphabet", word)
                skipped += 1
                continue
            for h in window_hashes(word, idx.codec, gram):
                buckets[h].append(word)
            if len(word) <= short_len:
                short_words.append(word)
            vocabulary.add(word)

        idx._buckets = {h: tuple(ws) for h, ws in buckets.items()}
        idx._short_words = tuple(short_words)
        idx._vocabulary = frozenset(vocabulary)
        log.info("Built n-gram index: words=%d buckets=%d short=%d skipped=%d",
                 len(vocabulary), len(idx._buckets), len(short_words), skipped)
        return idx

    # ---- Query ----
    def hashes(self, word: str) -> List[int]:
        return window_hashes(word, self.codec, self.config.gram)

    def bucket(self, h: int) -> Tuple[str, ...]:
        return self._buckets.get(h, ())

    @property
    def short_words(self) -> Tuple[str, ...]:
        return self._short_words

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def __contains__(self, word: object) -> bool:
        return word in self._vocabulary

    def __len__(self) -> int:
        return len(self._vocabulary)
