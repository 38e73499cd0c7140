"""Small exercises: sorting, templates, inline functions and casts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order, sorted by repeated swapping."""
    items = list(values)
    for _ in range(len(items) - 1):
        for index in range(len(items) - 1):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
    return items


def maximum(first: T, second: T) -> T:
    """The larger value; the second one when they are equal."""
    return first if first > second else second


def cube(side: float) -> float:
    return side * side * side


def times_table_line(n: int, factor: int) -> str:
    """One line of a times table, such as ``4 X 2 = 8``."""
    return f"{n} X {factor} = {n * factor}"


def truncate(value: float) -> int:
    """Drop the fractional part, rounding toward zero."""
    return int(value)