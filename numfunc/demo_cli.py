from __future__ import annotations

"""
numfunc demo CLI

Walks through every part of the toolkit and prints what it does:

    pointers   value vs reference (double / swap)
    escape     plain value vs shared box
    process    process ids and object identities
    math       factorial / is_prime / power, errors included
    closures   counters and multipliers
    higher     apply / filter / reduce / compose

    python3 -m numfunc.demo_cli
    python3 -m numfunc.demo_cli --section math --section closures --wrap-native
"""

import argparse
import os
import sys
from typing import Callable, Dict, List, Optional, TextIO

from numfunc.closures import make_counter, make_multiplier
from numfunc.core.arith import factorial, is_prime, power, wrap_native
from numfunc.errors import InvalidArgument
from numfunc.higher import apply, compose, filter, reduce
from numfunc.platform_info import explore_process
from numfunc.pointers import Box, analyze_escape, double_box, double_value, swap_boxes, swap_values


NUMFUNC_WRAP_NATIVE = os.environ.get("NUMFUNC_WRAP_NATIVE", "0") == "1"


def _section_pointers(out: TextIO, wrap: bool) -> None:
    num1 = 10
    box = Box(10)

    print("Before double_value:", num1, file=out)
    double_value(num1)
    print("After double_value:", num1, file=out)

    print("Before double_box:", box.value, file=out)
    double_box(box)
    print("After double_box:", box.value, file=out)

    a, b = 5, 10
    print("\nBefore swap_values:", a, b, file=out)
    a, b = swap_values(a, b)
    print("After swap_values:", a, b, file=out)

    c, d = Box(5), Box(10)
    print("\nBefore swap_boxes:", c.value, d.value, file=out)
    swap_boxes(c, d)
    print("After swap_boxes:", c.value, d.value, file=out)
    print(file=out)


def _section_escape(out: TextIO, wrap: bool) -> None:
    analyze_escape(out=out)


def _section_process(out: TextIO, wrap: bool) -> None:
    print("========== Process Information ==========", file=out)
    explore_process(out=out)


def _section_math(out: TextIO, wrap: bool) -> None:
    print("========== Math Operations ==========", file=out)
    show = wrap_native if wrap else (lambda v: v)

    for n in (0, 5, 10, 21):
        try:
            print(f"{n}! = {show(factorial(n))}", file=out)
        except InvalidArgument as e:
            print("Factorial error:", e, file=out)

    for n in (17, 20, 25, 1):
        try:
            print(f"{n} is prime? {is_prime(n)}", file=out)
        except InvalidArgument as e:
            print("Prime error:", e, file=out)

    for base, exponent in ((2, 8), (5, 3), (2, 64), (2, -1)):
        try:
            print(f"{base}^{exponent} = {show(power(base, exponent))}", file=out)
        except InvalidArgument as e:
            print("Power error:", e, file=out)
    print(file=out)


def _section_closures(out: TextIO, wrap: bool) -> None:
    print("========== Closures ==========", file=out)

    counter_a = make_counter(0)
    counter_b = make_counter(100)
    print("Counter A calls:", counter_a(), counter_a(), counter_a(), file=out)
    print("Counter B calls:", counter_b(), counter_b(), file=out)

    doubler = make_multiplier(2)
    tripler = make_multiplier(3)
    number = 5
    print(f"Original: {number}", file=out)
    print(f"Double: {doubler(number)}", file=out)
    print(f"Triple: {tripler(number)}", file=out)
    print(file=out)


def _section_higher(out: TextIO, wrap: bool) -> None:
    print("========== Higher-Order Functions ==========", file=out)

    nums = list(range(1, 11))
    print("Squared:", apply(nums, lambda x: x * x), file=out)
    print("Even numbers:", filter(nums, lambda x: x % 2 == 0), file=out)
    print("Sum:", reduce(nums, 0, lambda acc, x: acc + x), file=out)

    double_then_add_ten = compose(lambda x: x + 10, lambda x: x * 2)
    print("Double then add 10 (5):", double_then_add_ten(5), file=out)
    print(file=out)


SECTIONS: Dict[str, Callable[[TextIO, bool], None]] = {
    "pointers": _section_pointers,
    "escape": _section_escape,
    "process": _section_process,
    "math": _section_math,
    "closures": _section_closures,
    "higher": _section_higher,
}


def run_demo(
    sections: Optional[List[str]] = None,
    wrap: Optional[bool] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Print the named sections in order (all of them by default)."""
    if out is None:
        out = sys.stdout
    if wrap is None:
        wrap = NUMFUNC_WRAP_NATIVE
    for name in list(SECTIONS) if sections is None else sections:
        SECTIONS[name](out, wrap)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Print the numfunc toolkit demo.")
    ap.add_argument(
        "--section",
        action="append",
        choices=list(SECTIONS),
        default=None,
        help="Section to print; repeatable. Default: all, in order.",
    )
    ap.add_argument(
        "--wrap-native",
        action="store_true",
        default=None,
        help="Show math results wrapped to a native signed int (env NUMFUNC_WRAP_NATIVE=1).",
    )
    args = ap.parse_args(argv)

    run_demo(args.section, wrap=args.wrap_native)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
