# worksheet/recursion.py
# Factorial with an accumulator, in recursive and loop form.
from __future__ import annotations

from .errors import WorksheetError


def _check(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise WorksheetError(f"factorial requires an integer, got {type(n).__name__}")
    if n < 0:
        raise WorksheetError(f"factorial is undefined for negative input: {n}")
    return n


def fact(n: int, acc: int = 1) -> int:
    # Tail call: the recursive call is the whole return value.
    if n <= 1:
        return acc
    return fact(n - 1, acc * n)


def fact_loop(n: int, acc: int = 1) -> int:
    """Same as `fact`, with the tail call replaced by rebinding + continue."""
    while True:
        if n <= 1:
            return acc
        n, acc = (n - 1, acc * n)
        continue


def factorial(n: int) -> int:
    """Return n! through the accumulator helper.

    Python ints are unbounded, so there is no overflow; negative or
    non-integer input raises WorksheetError. Recursion depth grows with n,
    use `factorial_loop` for large inputs.
    """
    return fact(_check(n))


def factorial_loop(n: int) -> int:
    return fact_loop(_check(n))


def factorial_line(n: int) -> str:
    return f"Factorial of {n}: {factorial(n)}"
