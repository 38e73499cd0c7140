"""A set of integers in the range 0 to 100."""

from __future__ import annotations

from collections.abc import Iterable

LOWEST = 0
HIGHEST = 100


class IntegerSet:
    """Holds integers from 0 to 100 inclusive."""

    __hash__ = None  # mutable, compared by contents

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._members: set[int] = set()
        for value in values:
            self.add(value)

    def add(self, n: int) -> None:
        """Add ``n`` to the set; it must lie between 0 and 100."""
        if n < LOWEST or n > HIGHEST:
            raise ValueError("number must be between 0 and 100 inclusive")
        self._members.add(n)

    def __contains__(self, n: object) -> bool:
        return n in self._members

    def __iter__(self):
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def common(self, other: IntegerSet) -> IntegerSet:
        """Return a new set of the numbers found in both sets."""
        return IntegerSet(n for n in self if n in other)

    def contains_set(self, other: IntegerSet) -> bool:
        """Whether every number of ``other`` is also in this set."""
        return all(n in self for n in other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegerSet):
            return NotImplemented
        return self.contains_set(other) and other.contains_set(self)

    def __repr__(self) -> str:
        return f"IntegerSet({list(self)!r})"

    def __str__(self) -> str:
        return "Elements in Set: " + "".join(f"{n} " for n in self)