"""A fixed-size two-dimensional array and a simple named entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class Grid:
    """A rows-by-columns table indexed as ``grid[row, col]``."""

    def __init__(self, rows: int, cols: int, fill: Any = None) -> None:
        self.rows = rows
        self.cols = cols
        self._cells = [[fill] * cols for _ in range(rows)]

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if row < 0 or row > self.rows - 1 or col < 0 or col > self.cols - 1:
            raise ValueError("Invalid row and/or column.")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = self._check(key)
        return self._cells[row][col]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = self._check(key)
        self._cells[row][col] = value

    def __str__(self) -> str:
        return "".join("".join(f"{cell} " for cell in row) + "\n" for row in self._cells)


@dataclass
class Entity:
    """A name and an age; -1 means the age is unknown."""

    name: str = ""
    age: int = -1

    def __str__(self) -> str:
        return f"Name: {self.name} Age: {self.age}"