"""Text helpers for name input."""

import re
from typing import List

from ..constants import MIN_AUTHOR_NAME_LENGTH

_NON_ASCII = re.compile(r"[^\x00-\x7F]")
_AUTHOR_DELIMITERS = re.compile(r"[,;\n]+")


def is_likely_hanzi(name: str) -> bool:
    """Guess whether ``name`` is written in Hanzi.

    Any character outside the 7-bit ASCII range counts. This is a rough
    heuristic: accented Latin text is also treated as Hanzi.
    """
    return bool(_NON_ASCII.search(name))


def split_syllables(pinyin: str) -> List[str]:
    """Split a space-separated Pinyin string into syllables."""
    return pinyin.split()


def split_author_list(raw_text: str, min_length: int = MIN_AUTHOR_NAME_LENGTH) -> List[str]:
    """Split a pasted author list on commas, semicolons and newlines.

    Pieces are trimmed and those shorter than ``min_length`` are dropped.
    Input order is preserved.
    """
    names = (piece.strip() for piece in _AUTHOR_DELIMITERS.split(raw_text))
    return [name for name in names if len(name) >= min_length]
