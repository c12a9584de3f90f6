# autocorrect/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, Optional, Tuple

from . import config as CFG
from .assemble import assemble
from .candidates import generate
from .dedupe import dedupe
from .distance import scorer_for
from .errors import InvalidCharacter
from .index import DictionaryIndex
from .loader import load_dictionary, resolve_dictionary
from .models import EngineConfig, ExactMatch, Suggestions, SuggestionResult
from .normalize import normalize_token

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the n-gram hash index (DictionaryIndex),
      - candidate generation (candidates.generate),
      - deduplication, scoring and result assembly.

    Public API (used by CLI/Flask):
      * build(words):           index an in-memory word list
      * build_from_file(path):  load a dictionary file, then build()
      * suggest(query):         ExactMatch or ordered Suggestions
      * suggest_pair(query):    (is_exact_match, suggestions)
      * shutdown():             drop the index

    Each suggest() call allocates its own scratch lists; the index is read-only
    after build(), so one engine may be queried from several threads.
    """

    # ------------- lifecycle -------------

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.index: Optional[DictionaryIndex] = None

    # /* ~~~ Build the index from a word list ~~~ */
    def build(self, words: Iterable[str], *, on_invalid: str = CFG.ON_INVALID,
              verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

        log.info("Building dictionary index (n=%d, R=%d, short_len=%d)",
                 self.config.gram, self.config.radix, self.config.short_len)
        words = (normalize_token(w) for w in words)
        self.index = DictionaryIndex.build(words, self.config, on_invalid=on_invalid)
        log.info("Engine build() complete: words=%d", len(self.index))

    # /* ~~~ Load a dictionary file (path or bare name) and build ~~~ */
    def build_from_file(self, dictionary: str | os.PathLike, *, root: Optional[str] = None,
                        verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
        path = resolve_dictionary(os.fspath(dictionary), root=root)
        log.info("Loading dictionary from %s", path)
        words = load_dictionary(path, alphabet=self.config.alphabet)
        self.build(words, verbose=verbose)

    # ------------- query -------------

    # /* ~~~ Suggest dictionary words close to a (possibly misspelled) token ~~~ */
    def suggest(self, query: str) -> SuggestionResult:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        q = normalize_token(query)
        if q in self.index:
            return ExactMatch(q)
        try:
            pool = generate(q, self.index)
        except InvalidCharacter as e:
            log.debug("Rejecting query %r: %s", query, e)
            return Suggestions()
        return assemble(q, dedupe(pool.words),
                        threshold=pool.threshold,
                        scorer=scorer_for(pool.mode),
                        sort_groups=self.config.sort_groups)

    def suggest_pair(self, query: str) -> Tuple[bool, Tuple[str, ...]]:
        result = self.suggest(query)
        return result.is_exact_match, result.suggestions

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        log.info("Engine shutdown complete")
