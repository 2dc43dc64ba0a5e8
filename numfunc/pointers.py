# numfunc/pointers.py
"""
Value vs reference playground.

Python passes object references by value. Rebinding a parameter never
touches the caller's name, and ints are immutable, so "modify my caller's
int" needs a mutable cell. Box is that cell.

    double_value(x)   -> rebinds a local; caller sees no change
    double_box(b)     -> mutates b.value; caller sees the change
    swap_values(a, b) -> returns (b, a); caller must rebind
    swap_boxes(a, b)  -> exchanges contents in place

create_on_stack / create_on_heap mirror the stack-vs-escape demo: the first
hands back a plain value, the second a Box that outlives the call.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple


@dataclass(slots=True)
class Box:
    """One-slot mutable cell."""
    value: int


def double_value(x: int) -> None:
    x *= 2  # local rebinding only


def double_box(box: Box) -> None:
    box.value *= 2


def create_on_stack() -> int:
    value = 42
    return value


def create_on_heap() -> Box:
    return Box(100)


def swap_values(a: int, b: int) -> Tuple[int, int]:
    return b, a


def swap_boxes(a: Box, b: Box) -> None:
    a.value, b.value = b.value, a.value


def analyze_escape(out: Optional[TextIO] = None) -> Tuple[int, Box]:
    """Print the stack/heap demo and return (stack_value, heap_box)."""
    if out is None:
        out = sys.stdout

    stack_var = create_on_stack()
    heap_var = create_on_heap()

    print("Escape Analysis Demo:", file=out)
    print(f"Value from create_on_stack (plain value): {stack_var}", file=out)
    print(f"Value from create_on_heap (boxed): {heap_var.value}", file=out)
    print("Note: the plain value is copied out, the box is shared with the caller", file=out)
    print(file=out)
    return stack_var, heap_var
