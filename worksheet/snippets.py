# worksheet/snippets.py
# The worksheet itself: one function per snippet, registered in order.
from __future__ import annotations

from typing import Any, Callable, Dict, List

from .comprehensions import WORDS, LETTERS, for_each, for_filter, for_yield, long_upper, letters_by_index
from .console import Console
from .fallback import parse_int_or_default
from .features import (
    INT_SUM, STR_CONCAT, Person, PersonGreeter,
    apply_twice, combine_all, compose, pipeline,
)
from .matching import Circle, Rectangle, Square, area, describe_code, shape_name
from .recursion import factorial_line, factorial
from .scan import print_primes
from .strings import GREETING, char_at, concat, index_of, to_chars

Snippet = Callable[[Console], Any]

SNIPPETS: Dict[str, Snippet] = {}


def snippet(name: str) -> Callable[[Snippet], Snippet]:
    def register(fn: Snippet) -> Snippet:
        if name in SNIPPETS:
            raise ValueError(f"duplicate snippet: {name}")
        fn.snippet_name = name  # type: ignore[attr-defined]
        SNIPPETS[name] = fn
        return fn
    return register


@snippet("for block")
def _for_block(out: Console) -> List[str]:
    l = out.bind("l", list(WORDS))
    for_each(l, out)
    for_filter(l, out)
    result_for = out.bind("result_for", for_yield(l))
    return result_for


@snippet("until")
def _until(out: Console) -> int:
    rand_letters = out.bind("randLetters", LETTERS)
    letters_by_index(rand_letters, out)
    return len(rand_letters)


@snippet("print primes")
def _print_primes(out: Console) -> List[int]:
    res = print_primes(emit=out)
    out.step({"event": "scan", **res.to_receipt()})
    return res.emitted


@snippet("try catch finally")
def _try_catch_finally(out: Console) -> int:
    attempt = parse_int_or_default("Dog", cleanup=lambda: out("This is finally."))
    out.step({"event": "parse", **attempt.to_receipt()})
    return out.bind("result_try", attempt.value)


@snippet("match")
def _match(out: Console) -> str:
    code = out.bind("code", 1)
    return out.bind("result_match", describe_code(code))


@snippet("string")
def _string(out: Console) -> Dict[str, Any]:
    s = out.bind("s", GREETING)
    res = {
        "charAt": out.bind("res1", char_at(s, 1)),
        "concat": out.bind("res2", concat(s, "world")),
        "toArray": out.bind("res3", to_chars(s)),
        "indexOf": out.bind("res4", index_of(s, "o")),
    }
    return res


@snippet("factorial")
def _factorial(out: Console) -> List[int]:
    values = []
    for n in (2, 3):
        out(factorial_line(n))
        values.append(factorial(n))
    return values


@snippet("filter map")
def _filter_map(out: Console) -> List[str]:
    return out.bind("result", long_upper(WORDS))


@snippet("case class")
def _case_class(out: Console) -> bool:
    a = Person("Ada", 36)
    b = Person.of("Ada:36")
    out.bind("a", a)
    out.bind("b", b)
    out.bind("older", a.copy(age=37))
    return out.bind("a == b", a == b)


@snippet("trait")
def _trait(out: Console) -> str:
    greeting = PersonGreeter(Person.adult("Grace")).greet()
    out(greeting)
    return greeting


@snippet("explicit combiner")
def _explicit_combiner(out: Console) -> Dict[str, Any]:
    total = out.bind("sum", combine_all([1, 2, 3, 4], INT_SUM))
    joined = out.bind("concat", combine_all(["a", "b", "c"], STR_CONCAT))
    return {"sum": total, "concat": joined}


@snippet("higher order")
def _higher_order(out: Console) -> Dict[str, Any]:
    twice = out.bind("applyTwice", apply_twice(lambda x: x * 2, 3))
    inc_then_double = compose(lambda x: x * 2, lambda x: x + 1)
    composed = out.bind("compose", inc_then_double(4))
    piped = out.bind("pipeline", pipeline(
        WORDS,
        lambda xs: [x for x in xs if len(x) == 1],
        lambda xs: [x.upper() for x in xs],
    ))
    return {"applyTwice": twice, "compose": composed, "pipeline": piped}


@snippet("sealed shapes")
def _sealed_shapes(out: Console) -> Dict[str, float]:
    areas = {}
    for shape in (Circle(1.0), Rectangle(2.0, 3.0), Square(2.0)):
        areas[shape_name(shape)] = round(area(shape), 4)
        out(f"{shape_name(shape)}: {areas[shape_name(shape)]}")
    return areas
