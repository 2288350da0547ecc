# worksheet/comprehensions.py
# for blocks: generator, filter, variable binding, yield.
from __future__ import annotations

from typing import Callable, Iterable, List

WORDS = ("aaaa", "b", "c")
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

Emit = Callable[[object], None]


def for_each(items: Iterable[str], emit: Emit) -> None:
    for i in items:
        emit(i)


def for_filter(items: Iterable[str], emit: Emit, min_len: int = 3) -> None:
    for i in items:
        if len(i) > min_len:
            emit(i)


def for_yield(items: Iterable[str]) -> List[str]:
    # i1 = i.upper() is the binding; the guard drops empty results.
    return [i1 for i1 in (i.upper() for i in items) if i1 != ""]


def long_upper(items: Iterable[str], min_len: int = 3) -> List[str]:
    return [i.upper() for i in items if len(i) > min_len]


def letters_by_index(text: str, emit: Emit) -> None:
    for i in range(0, len(text)):
        emit(text[i])
