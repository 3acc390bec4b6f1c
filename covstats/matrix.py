"""A dense, row-major two-dimensional matrix."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


class Matrix:
    """A fixed-size matrix stored in row-major order."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, fill: Any = 0.0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must be non-negative.")
        self._rows = rows
        self._cols = cols
        self._data: list[Any] = [fill] * (rows * cols)

    @classmethod
    def from_rows(cls, data: Iterable[Sequence[Any]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        rows = [list(r) for r in data]
        if not rows:
            raise ValueError("Cannot build a matrix from no rows.")
        ncols = len(rows[0])
        if any(len(r) != ncols for r in rows):
            raise ValueError("All rows must have the same length.")
        matrix = cls(len(rows), ncols)
        matrix._data = [v for r in rows for v in r]
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _offset(self, row: int, col: int) -> int:
        if not 0 <= row < self._rows:
            raise IndexError(f"Row {row} is out of range.")
        if not 0 <= col < self._cols:
            raise IndexError(f"Col {col} is out of range.")
        return row * self._cols + col

    def __getitem__(self, index: tuple[int, int]) -> Any:
        row, col = index
        return self._data[self._offset(row, col)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        row, col = index
        self._data[self._offset(row, col)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._rows != other._rows or self._cols != other._cols:
            return False
        # Values are compared by content, so NaN matches NaN.
        return all(
            a == b or (a != a and b != b) for a, b in zip(self._data, other._data)
        )

    def increment(self, row: int, col: int, value: Any) -> None:
        """Add ``value`` to the element at ``(row, col)``."""
        self._data[self._offset(row, col)] += value

    def row(self, index: int) -> list[Any]:
        """Return a copy of one row."""
        if not 0 <= index < self._rows:
            raise IndexError(f"Row {index} is out of range.")
        start = index * self._cols
        return self._data[start:start + self._cols]

    def __iter__(self):
        return (self.row(i) for i in range(self._rows))

    def __repr__(self) -> str:
        return f"Matrix.from_rows({list(self)!r})" if self._rows else "Matrix(0, 0)"

    def __str__(self) -> str:
        lines = []
        for r in self:
            cells = [f"{v:>10.6f} " if v != 0 else " " * 11 for v in r]
            lines.append("".join(cells) + "\n")
        return "".join(lines)