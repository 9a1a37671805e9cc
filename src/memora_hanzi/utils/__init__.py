"""Utility functions for the memora-hanzi package."""

from .json_parser import parse_json_response, strip_code_fence
from .text_utils import is_likely_hanzi, split_author_list, split_syllables

__all__ = [
    "parse_json_response",
    "strip_code_fence",
    "is_likely_hanzi",
    "split_author_list",
    "split_syllables",
]
