# src/autocorrect/models.py
"""
Data models for the autocorrect engine.

This module defines the small, focused containers passed between the stages
of a query:

- ThresholdPolicy: maps a query length to the largest admissible edit distance.
- EngineConfig: the immutable knobs of one engine (alphabet, n-gram size, ...).
- DistanceMode: which scorer a candidate pool must be measured with.
- CandidatePool: the words worth scoring for one query, plus how to score them.
- ExactMatch / Suggestions: the two shapes of a query result.

Apart from validation these classes carry no business logic; building,
scoring and assembling live in their own modules.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from . import config as CFG
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ThresholdPolicy:
    """
    Length-adaptive edit-distance tolerance.

    Attributes
    ----------
    bands : Tuple[Tuple[int, int], ...]
        Pairs of (exclusive upper query length, threshold), ascending by length.
        The first band whose bound exceeds the query length wins.
    default : int
        Threshold for queries at least as long as the last band's bound.
    """
    bands: Tuple[Tuple[int, int], ...] = CFG.THRESHOLD_BANDS
    default: int = CFG.MAX_THRESHOLD

    def __post_init__(self) -> None:
        last = None
        for upper, threshold in self.bands:
            if threshold < 0:
                raise ConfigurationError(f"threshold must be >= 0, got {threshold}")
            if last is not None and upper <= last:
                raise ConfigurationError("threshold bands must be strictly ascending")
            last = upper
        if self.default < 0:
            raise ConfigurationError(f"threshold must be >= 0, got {self.default}")

    def for_length(self, length: int) -> int:
        for upper, threshold in self.bands:
            if length < upper:
                return threshold
        return self.default


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """
    Everything an engine needs to know before it sees a dictionary.

    Attributes
    ----------
    alphabet : str
        Accepted symbols; the radix R is its length.
    gram : int
        n-gram window length used by the rolling hash.
    short_len : int
        Queries (and dictionary words) up to this length use the short path.
    short_threshold : int
        Fixed Hamming tolerance on the short path.
    thresholds : ThresholdPolicy
        Edit-distance tolerance on the n-gram path.
    sort_groups : bool
        Alphabetize words within each distance group.
    """
    alphabet: str = CFG.ALPHABET
    gram: int = CFG.GRAM
    short_len: int = CFG.SHORT_LEN
    short_threshold: int = CFG.SHORT_THRESHOLD
    thresholds: ThresholdPolicy = ThresholdPolicy()
    sort_groups: bool = CFG.SORT_GROUPS

    def __post_init__(self) -> None:
        if self.gram <= 0:
            raise ConfigurationError(f"n-gram length must be > 0, got {self.gram}")
        if not self.alphabet:
            raise ConfigurationError("alphabet must not be empty")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ConfigurationError(f"alphabet has repeated symbols: {self.alphabet!r}")
        if self.short_len < 0:
            raise ConfigurationError(f"short length must be >= 0, got {self.short_len}")
        if self.short_threshold < 0:
            raise ConfigurationError(f"short threshold must be >= 0, got {self.short_threshold}")

    @property
    def radix(self) -> int:
        return len(self.alphabet)


class DistanceMode(Enum):
    FULL = "full"      # Levenshtein over the whole words
    SHORT = "short"    # Hamming, equal lengths only


@dataclass(frozen=True, slots=True)
class CandidatePool:
    """
    Output of candidate generation.

    `words` is unordered in the sense that matters for scoring and may
    repeat a word once per shared n-gram; deduplication happens downstream.
    """
    words: Tuple[str, ...]
    threshold: int
    mode: DistanceMode


@dataclass(frozen=True, slots=True)
class ExactMatch:
    """The query is itself a dictionary word; no suggestions are needed."""
    word: str

    @property
    def is_exact_match(self) -> bool:
        return True

    @property
    def suggestions(self) -> Tuple[str, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Suggestions:
    """
    Dictionary words within the resolved threshold of the query, grouped by
    ascending distance. Empty when nothing qualified or the query was invalid.
    """
    words: Tuple[str, ...] = ()

    @property
    def is_exact_match(self) -> bool:
        return False

    @property
    def suggestions(self) -> Tuple[str, ...]:
        return self.words


SuggestionResult = Union[ExactMatch, Suggestions]
