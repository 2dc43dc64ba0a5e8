# numfunc/__init__.py
"""
numfunc public API surface.

This module exposes a small, flat toolkit:

    - Errors: InvalidArgument
    - Arithmetic: factorial, is_prime, power, wrap_native
    - Closures: Counter, Multiplier, Accumulator,
                make_counter, make_multiplier, make_accumulator
    - Higher-order: apply, filter, reduce, compose

The process explorer (numfunc.platform_info) and the value/reference
playground (numfunc.pointers) are demo modules and are not re-exported here.

Note that ``from numfunc import *`` brings in ``filter`` and ``reduce``,
which shadow the builtin ``filter`` and ``functools.reduce``.
"""

from __future__ import annotations

from .errors import InvalidArgument

# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

from .core.arith import factorial, is_prime, power, wrap_native

# ---------------------------------------------------------------------------
# Closure factories
# ---------------------------------------------------------------------------

from .closures import (
    Counter,
    Multiplier,
    Accumulator,
    make_counter,
    make_multiplier,
    make_accumulator,
)

# ---------------------------------------------------------------------------
# Higher-order sequence helpers
# ---------------------------------------------------------------------------

from .higher import apply, filter, reduce, compose


__all__ = [
    # errors
    "InvalidArgument",

    # arithmetic
    "factorial",
    "is_prime",
    "power",
    "wrap_native",

    # closures
    "Counter",
    "Multiplier",
    "Accumulator",
    "make_counter",
    "make_multiplier",
    "make_accumulator",

    # higher-order
    "apply",
    "filter",
    "reduce",
    "compose",
]
