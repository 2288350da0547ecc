# worksheet/matching.py
# match on an integer code, and a closed set of shape cases.
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Union

from .errors import WorksheetError

CODE_NAMES: Dict[int, str] = {1: "one", 2: "two"}


def describe_code(code: int) -> str:
    return CODE_NAMES.get(code, "others")


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float


@dataclass(frozen=True)
class Square:
    side: float


Shape = Union[Circle, Rectangle, Square]

# Every Shape case; `area` handles exactly these.
SHAPE_CASES = (Circle, Rectangle, Square)


def area(shape: Shape) -> float:
    if isinstance(shape, Circle):
        return math.pi * shape.radius ** 2
    if isinstance(shape, Rectangle):
        return shape.width * shape.height
    if isinstance(shape, Square):
        return shape.side ** 2
    raise WorksheetError(f"Not a shape case: {type(shape).__name__}")


def shape_name(shape: Shape) -> str:
    if not isinstance(shape, SHAPE_CASES):
        raise WorksheetError(f"Not a shape case: {type(shape).__name__}")
    return type(shape).__name__.lower()
