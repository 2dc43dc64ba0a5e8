"""
apply / filter / reduce / compose on small fixed inputs.
"""

import pytest

from numfunc import apply, compose, filter, reduce


def square(x: int) -> int:
    return x * x


def is_even(x: int) -> bool:
    return x % 2 == 0


def add_ten(x: int) -> int:
    return x + 10


def double(x: int) -> int:
    return x * 2


def test_apply_square() -> None:
    assert apply([1, 2, 3, 4], square) == [1, 4, 9, 16]


def test_apply_empty() -> None:
    assert apply([], square) == []


def test_apply_does_not_mutate_input() -> None:
    xs = [1, 2, 3]
    out = apply(xs, double)
    assert xs == [1, 2, 3]
    assert out is not xs


def test_filter_even() -> None:
    assert filter([1, 2, 3, 4, 5], is_even) == [2, 4]


@pytest.mark.parametrize("xs", [[], [1, 3, 5]])
def test_filter_can_return_empty(xs) -> None:
    assert filter(xs, is_even) == []


def test_filter_returns_new_list_even_when_everything_matches() -> None:
    xs = [2, 4]
    out = filter(xs, is_even)
    assert out == xs
    assert out is not xs


def test_reduce_sum() -> None:
    assert reduce([1, 2, 3, 4], 0, lambda acc, x: acc + x) == 10


def test_reduce_empty_returns_initial() -> None:
    assert reduce([], 42, lambda acc, x: acc * x) == 42


def test_reduce_is_a_left_fold() -> None:
    # ((((0 - 1) - 2) - 3) = -6, a right fold would give 2
    assert reduce([1, 2, 3], 0, lambda acc, x: acc - x) == -6


def test_reduce_visits_in_order() -> None:
    seen = []

    def step(acc, x):
        seen.append(x)
        return acc

    reduce([3, 1, 2], 0, step)
    assert seen == [3, 1, 2]


def test_compose_applies_second_argument_first() -> None:
    assert compose(add_ten, double)(5) == 20
    assert compose(double, add_ten)(5) == 30


def test_compose_name_mentions_both_functions() -> None:
    h = compose(add_ten, double)
    assert h.__name__ == "add_ten_after_double"


def test_compose_propagates_exceptions() -> None:
    def boom(_x):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        compose(add_ten, boom)(1)
