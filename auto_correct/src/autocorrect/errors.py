# src/autocorrect/errors.py
"""Exception types raised by the autocorrect engine."""
from __future__ import annotations
from typing import Optional


class AutocorrectError(Exception):
    """Base class for every error the engine raises on purpose."""


class InvalidCharacter(AutocorrectError, ValueError):
    """A character outside the configured alphabet reached the hashing layer."""

    def __init__(self, char: str, word: Optional[str] = None) -> None:
        self.char = char
        self.word = word
        where = f" in {word!r}" if word is not None else ""
        super().__init__(f"invalid character {char!r}{where}")


class ConfigurationError(AutocorrectError, ValueError):
    """Engine parameters that can never produce a usable index."""


class DictionaryFormatError(AutocorrectError, ValueError):
    """A dictionary file whose header cannot be parsed."""

    def __init__(self, message: str, *, path: str, line_no: int) -> None:
        self.path = path
        self.line_no = line_no
        super().__init__(f"{path}:{line_no}: {message}")
