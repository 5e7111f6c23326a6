"""Parsing of raw answer text typed by the player.

Only plain whole numbers are accepted: an optional sign followed by ASCII
digits, with surrounding whitespace ignored. ``int()`` alone would also
accept forms such as ``"1_0"`` or non-ASCII digits, which are not something
a player types into a number field.
"""

from __future__ import annotations

import re

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidAnswerError(ValueError):
    """Raised when answer text cannot be read as a whole number."""


def parse_answer(raw_text: str) -> int:
    text = raw_text.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidAnswerError(f"Answer {raw_text!r} is not a whole number.")
    return int(text)
