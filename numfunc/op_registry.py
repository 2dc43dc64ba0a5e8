# numfunc/op_registry.py
"""
Simple in-memory registry of named integer functions.

This lets the JSON runner talk in terms of names like "square" or "is-even"
instead of passing callables around.

Design:

- Three dicts, one per shape:
    * unary ops    : name -> (int) -> int         (used by apply)
    * predicates   : name -> (int) -> bool        (used by filter)
    * folds        : name -> (acc, int) -> int    (used by reduce)
- Basic CRUD-ish helpers per shape, plus clear_registry().
- Defaults are seeded lazily on first lookup so that clear_registry()
  followed by a lookup gives back the built-ins.
"""

from __future__ import annotations

from typing import Callable, Dict

from .closures import make_multiplier
from .core.arith import is_prime

UnaryOp = Callable[[int], int]
Predicate = Callable[[int], bool]
Fold = Callable[[int, int], int]

_UNARY: Dict[str, UnaryOp] = {}
_PREDICATES: Dict[str, Predicate] = {}
_FOLDS: Dict[str, Fold] = {}


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def register_unary(name: str, fn: UnaryOp) -> None:
    """Register (or overwrite) a named unary op."""
    _UNARY[name] = fn


def register_predicate(name: str, fn: Predicate) -> None:
    """Register (or overwrite) a named predicate."""
    _PREDICATES[name] = fn


def register_fold(name: str, fn: Fold) -> None:
    """Register (or overwrite) a named fold step."""
    _FOLDS[name] = fn


def clear_registry() -> None:
    """
    Remove all registered functions.

    Used by tests and callers that want a clean slate.
    """
    _UNARY.clear()
    _PREDICATES.clear()
    _FOLDS.clear()


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def get_unary(name: str) -> UnaryOp | None:
    _ensure_defaults()
    return _UNARY.get(name)


def get_predicate(name: str) -> Predicate | None:
    _ensure_defaults()
    return _PREDICATES.get(name)


def get_fold(name: str) -> Fold | None:
    _ensure_defaults()
    return _FOLDS.get(name)


def list_unary_names() -> list[str]:
    _ensure_defaults()
    return sorted(_UNARY.keys())


def list_predicate_names() -> list[str]:
    _ensure_defaults()
    return sorted(_PREDICATES.keys())


def list_fold_names() -> list[str]:
    _ensure_defaults()
    return sorted(_FOLDS.keys())


# ---------------------------------------------------------------------------
# Default / built-in functions
# ---------------------------------------------------------------------------

def _is_prime_total(n: int) -> bool:
    # the registry form answers False below 2 instead of raising
    return n >= 2 and is_prime(n)


def _ensure_defaults() -> None:
    """Lazily seed the built-ins for any shape that is empty."""
    if not _UNARY:
        _UNARY.update({
            "square": lambda x: x * x,
            "double": make_multiplier(2),
            "triple": make_multiplier(3),
            "negate": make_multiplier(-1),
            "add-ten": lambda x: x + 10,
            "succ": lambda x: x + 1,
        })
    if not _PREDICATES:
        _PREDICATES.update({
            "is-even": lambda x: x % 2 == 0,
            "is-odd": lambda x: x % 2 != 0,
            "is-positive": lambda x: x > 0,
            "is-prime": _is_prime_total,
        })
    if not _FOLDS:
        _FOLDS.update({
            "sum": lambda acc, x: acc + x,
            "product": lambda acc, x: acc * x,
            "max": max,
            "min": min,
        })
