from __future__ import annotations
import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_token(text: str) -> str:
    """
    Normalize one dictionary entry or query for matching.
    Rules:
      * surrounding whitespace is dropped
      * case-insensitive for ASCII letters only (A-Z -> a-z)
    Anything else (accents, 'ß', punctuation) is left as-is for the codec to reject.
    """
    return text.strip().translate(_ASCII_LOWER)
