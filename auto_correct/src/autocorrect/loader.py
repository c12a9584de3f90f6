from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List

from . import config as CFG
from .codec import AlphabetCodec
from .errors import DictionaryFormatError
from .normalize import normalize_token

log = logging.getLogger(__name__)


def resolve_dictionary(name_or_path: str, root: str | os.PathLike | None = None) -> Path:
    """
    Return the file for `name_or_path`.
    An existing path wins; otherwise a bare name maps to <root>/<name>.txt.
    """
    p = Path(name_or_path)
    if p.is_file():
        return p
    base = Path(root) if root is not None else CFG.DICTIONARY_ROOT
    candidate = base / f"{name_or_path}{CFG.DICTIONARY_EXT}"
    if candidate.is_file():
        return candidate
    raise FileNotFoundError(name_or_path)


def load_dictionary(path: str | os.PathLike, alphabet: str = CFG.ALPHABET) -> List[str]:
    """
    Read a dictionary file: a word count on the first non-blank line,
    then one word per line.

    Entries are normalized; blank lines are ignored and entries with symbols
    outside `alphabet` are dropped with a warning. Reading stops once the
    declared count of entries has been seen.

    Raises:
        DictionaryFormatError: if the count header is missing or not an integer.
    """
    codec = AlphabetCodec(alphabet)
    path_s = str(path)
    words: List[str] = []
    declared: int | None = None
    seen = 0
    rejected = 0

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line_no, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                continue
            if declared is None:
                try:
                    declared = int(line)
                except ValueError:
                    raise DictionaryFormatError(f"expected word count, got {line!r}",
                                                path=path_s, line_no=line_no) from None
                if declared < 0:
                    raise DictionaryFormatError(f"negative word count {declared}",
                                                path=path_s, line_no=line_no)
                continue
            if seen >= declared:
                log.warning("%s: more entries than the declared %d; ignoring the rest",
                            path_s, declared)
                break
            seen += 1
            word = normalize_token(line)
            if not codec.is_valid(word):
                log.warning("%s:%d: rejecting %r (outside alphabet)", path_s, line_no, line)
                rejected += 1
                continue
            words.append(word)

    if declared is None:
        raise DictionaryFormatError("empty dictionary file", path=path_s, line_no=0)
    if seen < declared:
        log.warning("%s: declared %d entries, found %d", path_s, declared, seen)
    log.info("Loaded dictionary %s: words=%d rejected=%d", path_s, len(words), rejected)
    return words
