"""Mean, median, minimum and maximum of a list of numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|\s*[+-]?(?:inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _require(numbers: Sequence[float], what: str) -> None:
    if not numbers:
        raise ValueError(f"cannot calculate {what} of empty list of numbers")


def mean(numbers: Sequence[float]) -> float:
    _require(numbers, "mean")
    return sum(numbers) / len(numbers)


def median(numbers: Sequence[float]) -> float:
    """Median of numbers that are already sorted."""
    _require(numbers, "median")
    middle = len(numbers) // 2
    if len(numbers) % 2 == 0:
        return (numbers[middle - 1] + numbers[middle]) / 2
    return numbers[middle]


def minimum(numbers: Sequence[float]) -> float:
    """Smallest of numbers that are already sorted."""
    _require(numbers, "minimum")
    return numbers[0]


def maximum(numbers: Sequence[float]) -> float:
    """Largest of numbers that are already sorted."""
    _require(numbers, "maximum")
    return numbers[-1]


def insert_into_sorted(value: float, numbers: Sequence[float]) -> list[float]:
    """Return a new sorted list with ``value`` placed before the first larger number."""
    for index, number in enumerate(numbers):
        if value < number:
            return [*numbers[:index], value, *numbers[index:]]
    return [*numbers, value]


def sort_numbers(numbers: Iterable[float]) -> list[float]:
    """Sort by inserting each number into a growing sorted list."""
    result: list[float] = []
    for number in numbers:
        result = insert_into_sorted(number, result)
    return result


def parse_numbers(lines: Iterable[str]) -> tuple[list[float], list[str]]:
    """Read numbers up to the first empty line.

    Return the numbers read and the lines that did not start with one.
    """
    numbers: list[float] = []
    rejected: list[str] = []
    for line in lines:
        line = line.rstrip("\n")
        if not line:
            break
        match = _FLOAT_PREFIX.match(line)
        if match is None:
            rejected.append(line)
        else:
            numbers.append(float(match.group().strip()))
    return numbers, rejected


def _input_lines():
    while True:
        try:
            yield input()
        except EOFError:
            return


def _report_invalid(lines: Iterable[str]):
    for line in lines:
        numbers, rejected = parse_numbers([line])
        if rejected:
            print("Invalid number entered, will not be included in statistics.")
        yield line


def main(argv=None) -> int:
    """Read numbers one per line and print their statistics."""
    print(
        "Enter numbers to perform statistics on one at a time.  "
        "Enter when done entering numbers. "
    )
    numbers, _ = parse_numbers(_report_invalid(_input_lines()))
    print("Numbers: " + "".join(f"{n:g} " for n in numbers))
    ordered = sort_numbers(numbers)
    try:
        print(f"Mean: {mean(numbers):.2f}")
        print(f"Median: {median(ordered):.2f}")
        print(f"Minimum: {minimum(ordered):.2f}")
        print(f"Maximum: {maximum(ordered):.2f}")
    except ValueError as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())