"""
Autocorrect Engine Module

This module suggests dictionary words similar to a possibly-misspelled token.
A dictionary is indexed once by the rolling hashes of its n-grams; each query
then collects the words sharing an n-gram with it, removes duplicates, scores
them by edit distance and returns the survivors grouped by distance.

The module is designed with a clean separation of concerns:
- Alphabet encoding and n-gram hashing
- Candidate generation and deduplication
- Distance scoring and result assembly
- Dictionary loading and configuration

Example Usage:
    from autocorrect import Engine

    eng = Engine()
    eng.build(["cat", "cats", "cot", "dog"])
    result = eng.suggest("coat")
    if not result.is_exact_match:
        print(result.suggestions)

Author: Google Team 4
Version: 1.0.0
"""

# src/autocorrect/__init__.py
from .engine import Engine  # re-export
from .errors import AutocorrectError, ConfigurationError, DictionaryFormatError, InvalidCharacter
from .models import EngineConfig, ExactMatch, Suggestions, SuggestionResult, ThresholdPolicy

__version__ = "1.0.0"
__author__ = "Google Team 4"
__all__ = [
    "Engine",
    "EngineConfig",
    "ThresholdPolicy",
    "ExactMatch",
    "Suggestions",
    "SuggestionResult",
    "AutocorrectError",
    "ConfigurationError",
    "DictionaryFormatError",
    "InvalidCharacter",
]
