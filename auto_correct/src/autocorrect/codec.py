from __future__ import annotations
from typing import Dict, List

from . import config as CFG
from .errors import ConfigurationError, InvalidCharacter


class AlphabetCodec:
    """
    Maps each accepted symbol to an integer in [0, R).

    Codes follow the symbol's position in the alphabet string, so the default
    alphabet gives a-z -> 0..25 and the apostrophe -> 26. The extended
    alphabet puts the hyphen at 26 and the apostrophe at 27.
    """

    def __init__(self, alphabet: str = CFG.ALPHABET) -> None:
        if not alphabet:
            raise ConfigurationError("alphabet must not be empty")
        codes: Dict[str, int] = {ch: i for i, ch in enumerate(alphabet)}
        if len(codes) != len(alphabet):
            raise ConfigurationError(f"alphabet has repeated symbols: {alphabet!r}")
        self.alphabet = alphabet
        self._codes = codes

    @property
    def radix(self) -> int:
        return len(self.alphabet)

    def encode(self, ch: str, word: str | None = None) -> int:
        try:
            return self._codes[ch]
        except KeyError:
            raise InvalidCharacter(ch, word) from None

    def encode_word(self, word: str) -> List[int]:
        return [self.encode(ch, word) for ch in word]

    def validate(self, word: str) -> None:
        """Raise InvalidCharacter for the first symbol outside the alphabet."""
        for ch in word:
            if ch not in self._codes:
                raise InvalidCharacter(ch, word)

    def is_valid(self, word: str) -> bool:
        return all(ch in self._codes for ch in word)
