# worksheet/strings.py
from __future__ import annotations

from typing import List

from .errors import WorksheetError

GREETING = "hello "


def char_at(s: str, i: int) -> str:
    if not 0 <= i < len(s):
        raise WorksheetError(f"index {i} out of range for string of length {len(s)}")
    return s[i]


def concat(s: str, other: str) -> str:
    return s + other


def to_chars(s: str) -> List[str]:
    return list(s)


def index_of(s: str, sub: str) -> int:
    return s.find(sub)
