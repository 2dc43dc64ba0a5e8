# numfunc/closures.py
"""
Closure-style factories backed by small stateful objects.

Design:
-------
* Counter      : zero-arg callable, bumps a private count and returns it.
* Multiplier   : one-arg pure callable, x -> x * factor.
* Accumulator  : one private total shared by add / subtract / get.

The factories make_counter / make_multiplier / make_accumulator keep the
"function returns functions" call shape, while the state lives in an explicit
private attribute instead of a captured local.

None of these objects lock. Concurrent callers must serialize access.
"""

from __future__ import annotations

from typing import Callable, Tuple


class Counter:
    """Callable counter. First call after Counter(s) returns s + 1."""

    __slots__ = ("_count",)

    def __init__(self, start: int = 0) -> None:
        self._count = start

    def __call__(self) -> int:
        self._count += 1
        return self._count

    @property
    def value(self) -> int:
        """Current count, without incrementing."""
        return self._count

    def __repr__(self) -> str:
        return f"Counter(value={self._count})"


class Multiplier:
    """Pure callable x -> x * factor."""

    __slots__ = ("_factor",)

    def __init__(self, factor: int) -> None:
        self._factor = factor

    @property
    def factor(self) -> int:
        return self._factor

    def __call__(self, x: int) -> int:
        return x * self._factor

    def __repr__(self) -> str:
        return f"Multiplier(factor={self._factor})"


class Accumulator:
    """Running total with add / subtract / get."""

    __slots__ = ("_total",)

    def __init__(self, initial: int = 0) -> None:
        self._total = initial

    def add(self, x: int) -> None:
        self._total += x

    def subtract(self, x: int) -> None:
        self._total -= x

    def get(self) -> int:
        return self._total

    def __repr__(self) -> str:
        return f"Accumulator(total={self._total})"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def make_counter(start: int) -> Counter:
    """Return a fresh counter starting at `start`."""
    return Counter(start)


def make_multiplier(factor: int) -> Multiplier:
    """Return a pure multiply-by-`factor` function."""
    return Multiplier(factor)


def make_accumulator(
    initial: int,
) -> Tuple[Callable[[int], None], Callable[[int], None], Callable[[], int]]:
    """
    Return (add, subtract, get) sharing one hidden total.

    Example:
        add, sub, get = make_accumulator(100)
        add(50); add(25); sub(30)
        get()  # 145
    """
    acc = Accumulator(initial)
    return acc.add, acc.subtract, acc.get
