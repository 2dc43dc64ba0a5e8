# numfunc/core/arith.py
"""
Integer arithmetic helpers: factorial, primality, power.

These are plain loops over Python ints. Python ints never overflow, so unlike
a fixed-width build the results here are always exact. Use wrap_native()
to see what a 64-bit signed build would have produced.
"""

from __future__ import annotations

import os

from ..errors import InvalidArgument


def _native_bits_from_env(default: int = 64) -> int:
    # malformed or non-positive values fall back to the default
    raw = os.environ.get("NUMFUNC_NATIVE_BITS", "")
    try:
        bits = int(raw)
    except ValueError:
        return default
    return bits if bits > 0 else default


NUMFUNC_NATIVE_BITS = _native_bits_from_env()


def factorial(n: int) -> int:
    """Return n! for n >= 0."""
    if n < 0:
        raise InvalidArgument("factorial is not defined for negative numbers")

    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def is_prime(n: int) -> bool:
    """
    Trial-division primality test.

    Raises InvalidArgument for n < 2 rather than answering False, so that
    0, 1 and negatives are flagged as caller errors.
    """
    if n < 2:
        raise InvalidArgument("prime check requires number >= 2")

    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def power(base: int, exponent: int) -> int:
    """Return base**exponent by repeated multiplication. 0**0 == 1."""
    if exponent < 0:
        raise InvalidArgument("negative exponents not supported")

    result = 1
    for _ in range(exponent):
        result *= base
    return result


def wrap_native(value: int, bits: int | None = None) -> int:
    """
    Reinterpret an unbounded int as a two's complement signed int of `bits` width.

    Example:
        wrap_native(factorial(21)) == -4249290049419214848
    """
    if bits is None:
        bits = NUMFUNC_NATIVE_BITS
    if bits <= 0:
        raise ValueError("bits must be > 0")

    mask = (1 << bits) - 1
    v = value & mask
    if v >= 1 << (bits - 1):
        v -= 1 << bits
    return v
