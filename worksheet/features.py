"""Notes on language features, written out explicitly.

- Person: immutable record with field-wise equality and read-only accessors.
- Person.of / Person.adult: factories living on the type (companion role).
- Greeter: a trait; concrete classes supply `name`, greet() comes for free.
- Combiner: the combine/identity pair a caller passes in explicitly.
- apply_twice, compose, pipeline: functions taking and returning functions.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, fields, replace
from functools import reduce
from typing import Any, Callable, ClassVar, Generic, Iterable, List, TypeVar

from .errors import WorksheetError

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Person:
    name: str
    age: int

    ADULT_AGE: ClassVar[int] = 18

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return (self.name, self.age) == (other.name, other.age)

    def __hash__(self) -> int:
        return hash((Person, self.name, self.age))

    def copy(self, **changes: Any) -> "Person":
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise WorksheetError(f"Person has no field(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    # ---- factories (companion)
    @classmethod
    def of(cls, text: str) -> "Person":
        """Build from "name:age"."""
        name, sep, age = (text or "").partition(":")
        if not sep or not name.strip():
            raise WorksheetError(f"expected 'name:age', got {text!r}")
        try:
            return cls(name.strip(), int(age))
        except ValueError as e:
            raise WorksheetError(f"age must be an integer in {text!r}") from e

    @classmethod
    def adult(cls, name: str) -> "Person":
        return cls(name, cls.ADULT_AGE)


class Greeter(abc.ABC):
    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    def greet(self) -> str:
        return f"Hello, {self.name}"


class PersonGreeter(Greeter):
    def __init__(self, person: Person):
        self.person = person

    @property
    def name(self) -> str:
        return self.person.name


@dataclass(frozen=True)
class Combiner(Generic[T]):
    combine: Callable[[T, T], T]
    identity: T


INT_SUM: Combiner[int] = Combiner(lambda a, b: a + b, 0)
INT_PRODUCT: Combiner[int] = Combiner(lambda a, b: a * b, 1)
STR_CONCAT: Combiner[str] = Combiner(lambda a, b: a + b, "")


def combine_all(items: Iterable[T], combiner: Combiner[T]) -> T:
    return reduce(combiner.combine, items, combiner.identity)


def apply_twice(fn: Callable[[T], T], x: T) -> T:
    return fn(fn(x))


def compose(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose(f, g)(x) == f(g(x))"""
    return lambda x: f(g(x))


def pipeline(items: Iterable[Any], *stages: Callable[[List[Any]], Iterable[Any]]) -> List[Any]:
    out = list(items)
    for stage in stages:
        out = list(stage(out))
    return out
