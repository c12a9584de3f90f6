from __future__ import annotations
import os
from pathlib import Path

# project root: auto_correct/
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# where dictionary files live ("<name>.txt", first line = word count)
DICTIONARY_ROOT = PROJECT_ROOT / "dictionaries"
DICTIONARY_EXT = ".txt"

# accepted symbols; a symbol's code is its position in the string
ALPHABET = "abcdefghijklmnopqrstuvwxyz'"
# older dictionaries also carry hyphenated words
EXTENDED_ALPHABET = "abcdefghijklmnopqrstuvwxyz-'"

# n-gram size for the rolling-hash index
GRAM = 3

# queries up to this length are compared against the short-word list
SHORT_LEN = 3
SHORT_THRESHOLD = 1

# (exclusive upper query length, max edit distance); longer queries get MAX_THRESHOLD
THRESHOLD_BANDS = ((9, 2), (13, 3))
MAX_THRESHOLD = 4

# alphabetize words that share the same distance
SORT_GROUPS = False

# what build() does with a word it cannot encode: "skip" or "raise"
ON_INVALID = "skip"

# Progress logging (set AUTOCORRECT_VERBOSE=1 to enable)
VERBOSE = os.environ.get("AUTOCORRECT_VERBOSE") == "1"
