# numfunc/higher.py
"""
Higher-order helpers over integer sequences.

    apply(seq, f)             -> [f(x) for x in seq]
    filter(seq, predicate)    -> [x for x in seq if predicate(x)]
    reduce(seq, initial, f)   -> left fold starting at initial
    compose(f, g)             -> x -> f(g(x))

Every helper builds a new list; the input is only iterated, never mutated.
`filter` and `reduce` shadow the builtins inside this module on purpose, so
nothing here uses the builtin versions.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


def apply(seq: Iterable[T], f: Callable[[T], U]) -> List[U]:
    """Map f over seq, preserving order and length."""
    out: List[U] = []
    for x in seq:
        out.append(f(x))
    return out


def filter(seq: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:  # noqa: A001
    """Keep the elements of seq for which predicate(x) is truthy."""
    out: List[T] = []
    for x in seq:
        if predicate(x):
            out.append(x)
    return out


def reduce(seq: Iterable[T], initial: A, f: Callable[[A, T], A]) -> A:  # noqa: A001
    """
    Left fold.

    Equivalent to:
        acc = initial
        for x in seq: acc = f(acc, x)

    Empty seq returns initial unchanged.
    """
    acc = initial
    for x in seq:
        acc = f(acc, x)
    return acc


def compose(f: Callable[[U], A], g: Callable[[T], U]) -> Callable[[T], A]:
    """Return h with h(x) == f(g(x)). g runs first."""

    def composed(x: T) -> A:
        return f(g(x))

    composed.__name__ = f"{getattr(f, '__name__', 'f')}_after_{getattr(g, '__name__', 'g')}"
    return composed
