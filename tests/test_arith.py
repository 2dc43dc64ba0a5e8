"""
Table-driven tests for factorial / is_prime / power, plus wrap_native.
"""

import pytest

from numfunc import InvalidArgument, factorial, is_prime, power, wrap_native


# ---------------------------------------------------------------------------
# factorial
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "n, want",
    [
        pytest.param(0, 1, id="zero"),
        pytest.param(1, 1, id="one"),
        pytest.param(3, 6, id="three"),
        pytest.param(5, 120, id="five"),
        pytest.param(7, 5040, id="seven"),
    ],
)
def test_factorial(n: int, want: int) -> None:
    assert factorial(n) == want


def test_factorial_negative_raises() -> None:
    with pytest.raises(InvalidArgument, match="negative"):
        factorial(-1)


def test_factorial_is_exact_past_native_range() -> None:
    # 21! no longer fits in a signed 64-bit int
    assert factorial(21) == 51090942171709440000


# ---------------------------------------------------------------------------
# is_prime
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "n, want",
    [
        pytest.param(2, True, id="two is prime"),
        pytest.param(3, True, id="three is prime"),
        pytest.param(4, False, id="four is not prime"),
        pytest.param(17, True, id="seventeen is prime"),
        pytest.param(20, False, id="twenty is not prime"),
        pytest.param(25, False, id="square of a prime"),
        pytest.param(97, True, id="ninety-seven is prime"),
    ],
)
def test_is_prime(n: int, want: bool) -> None:
    assert is_prime(n) is want


@pytest.mark.parametrize("n", [1, 0, -5])
def test_is_prime_below_two_raises(n: int) -> None:
    with pytest.raises(InvalidArgument, match=">= 2"):
        is_prime(n)


# ---------------------------------------------------------------------------
# power
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "base, exponent, want",
    [
        pytest.param(2, 3, 8, id="two cubed"),
        pytest.param(5, 0, 1, id="zero exponent"),
        pytest.param(0, 5, 0, id="zero base"),
        pytest.param(1, 10, 1, id="one to any power"),
        pytest.param(0, 0, 1, id="zero to the zero"),
        pytest.param(-2, 3, -8, id="negative base"),
    ],
)
def test_power(base: int, exponent: int, want: int) -> None:
    assert power(base, exponent) == want


def test_power_negative_exponent_raises() -> None:
    with pytest.raises(InvalidArgument, match="negative exponents"):
        power(2, -1)


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        power(2, -1)


# ---------------------------------------------------------------------------
# wrap_native
# ---------------------------------------------------------------------------

def test_wrap_native_matches_64_bit_overflow() -> None:
    assert wrap_native(factorial(21), bits=64) == -4249290049419214848
    assert wrap_native(power(2, 63), bits=64) == -(2 ** 63)
    assert wrap_native(power(2, 64), bits=64) == 0


@pytest.mark.parametrize("value", [0, 1, -1, 2 ** 31 - 1, -(2 ** 31)])
def test_wrap_native_leaves_in_range_values_alone(value: int) -> None:
    assert wrap_native(value, bits=32) == value


def test_wrap_native_rejects_non_positive_width() -> None:
    with pytest.raises(ValueError):
        wrap_native(5, bits=0)


# ---------------------------------------------------------------------------
# NUMFUNC_NATIVE_BITS
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "raw, want",
    [("32", 32), ("abc", 64), ("", 64), ("0", 64), ("-8", 64), ("1.5", 64)],
)
def test_native_bits_env_parsing(monkeypatch, raw: str, want: int) -> None:
    from numfunc.core.arith import _native_bits_from_env

    monkeypatch.setenv("NUMFUNC_NATIVE_BITS", raw)
    assert _native_bits_from_env() == want


def test_malformed_native_bits_env_does_not_break_import() -> None:
    import os
    import subprocess
    import sys
    from pathlib import Path

    repo_root = Path(__file__).resolve().parents[1]
    env = dict(os.environ, NUMFUNC_NATIVE_BITS="abc")
    r = subprocess.run(
        [sys.executable, "-c", "import numfunc; print(numfunc.factorial(5), numfunc.wrap_native(2 ** 64))"],
        cwd=str(repo_root),
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    assert r.returncode == 0, f"stderr:\n{r.stderr}"
    assert r.stdout.split() == ["120", "0"]
