"""Coverage-weighted statistics of raster values."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from covstats.variance import WestVariance
from covstats.weighted_quantiles import WeightedQuantiles


def _div(a: float, b: float) -> float:
    """Divide with floating-point semantics instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_defined(value: Any) -> bool:
    """A cell value is undefined when it is ``None`` or NaN."""
    if value is None:
        return False
    try:
        return not math.isnan(value)
    except TypeError:
        return True


def _as_grid(data: Iterable[Sequence[Any]]) -> list[list[Any]]:
    return [list(row) for row in data]


def _shape(grid: list[list[Any]]) -> tuple[int, int]:
    cols = len(grid[0]) if grid else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("All rows must have the same length.")
    return len(grid), cols


def _fmt(value: Any) -> str:
    return "null" if value is None else f"{value:g}"


@dataclass
class _FreqEntry:
    sum_ci: float = 0.0
    sum_ciwi: float = 0.0


class RasterStats:
    """Statistics of raster values, weighted by the fraction of each cell covered.

    Coverage, value and weight grids passed to :meth:`process` are aligned
    two-dimensional sequences (lists of rows or :class:`~covstats.matrix.Matrix`
    objects). Values of ``None`` or NaN are treated as undefined.
    """

    def __init__(self, store_values: bool = False) -> None:
        self._min = math.inf
        self._max = -math.inf
        self._sum_ciwi = 0.0
        self._sum_ci = 0.0
        self._sum_xici = 0.0
        self._sum_xiciwi = 0.0
        self._variance = WestVariance()
        self._weighted_variance = WestVariance()
        self._quantiles: WeightedQuantiles | None = None
        self._freq: dict[Any, _FreqEntry] = {}
        self._store_values = store_values

    def process(
        self,
        coverage: Iterable[Sequence[float]],
        values: Iterable[Sequence[Any]],
        weights: Iterable[Sequence[Any]] | None = None,
    ) -> None:
        """Accumulate every covered cell with a defined value.

        Where a weight is undefined, the cell's weight is taken as NaN.
        """
        cov_grid = _as_grid(coverage)
        val_grid = _as_grid(values)
        shape = _shape(cov_grid)
        if _shape(val_grid) != shape:
            raise ValueError("Coverage and value grids must have the same shape.")

        if weights is None:
            for cov_row, val_row in zip(cov_grid, val_grid):
                for cov, val in zip(cov_row, val_row):
                    if cov > 0 and _is_defined(val):
                        self.process_value(val, cov, 1.0)
            return

        wt_grid = _as_grid(weights)
        if _shape(wt_grid) != shape:
            raise ValueError("Coverage and weight grids must have the same shape.")

        for cov_row, val_row, wt_row in zip(cov_grid, val_grid, wt_grid):
            for cov, val, wt in zip(cov_row, val_row, wt_row):
                if cov > 0 and _is_defined(val):
                    self.process_value(val, cov, wt if _is_defined(wt) else math.nan)

    def process_value(self, value: Any, coverage: float, weight: float) -> None:
        """Accumulate a single value with its coverage fraction and weight."""
        coverage = float(coverage)
        self._sum_ci += coverage
        self._sum_xici += value * coverage

        self._variance.process(value, coverage)

        ciwi = coverage * weight
        self._sum_ciwi += ciwi
        self._sum_xiciwi += value * ciwi

        self._weighted_variance.process(value, ciwi)

        if value < self._min:
            self._min = value
        if value > self._max:
            self._max = value

        if self._store_values:
            entry = self._freq.setdefault(value, _FreqEntry())
            entry.sum_ci += coverage
            entry.sum_ciwi += ciwi
            self._quantiles = None

    def mean(self) -> float:
        """Mean of covered values, weighted by coverage fraction."""
        return _div(self.sum(), self.count())

    def weighted_mean(self) -> float:
        """Mean weighted by coverage fraction and the weighting raster."""
        return _div(self.weighted_sum(), self.weighted_count())

    def weighted_fraction(self) -> float:
        """Ratio of the weighted sum to the unweighted sum."""
        return _div(self.weighted_sum(), self.sum())

    def mode(self) -> Any | None:
        """Value covering the most cells; ties go to the greatest value."""
        if not self._freq:
            return None
        return max(self._freq.items(), key=lambda kv: (kv[1].sum_ci, kv[0]))[0]

    def minority(self) -> Any | None:
        """Value covering the fewest cells; ties go to the lowest value."""
        if not self._freq:
            return None
        return min(self._freq.items(), key=lambda kv: (kv[1].sum_ci, kv[0]))[0]

    def min(self) -> Any | None:
        """Smallest covered value, or ``None`` if nothing was covered."""
        if self._sum_ci == 0:
            return None
        return self._min

    def max(self) -> Any | None:
        """Greatest covered value, or ``None`` if nothing was covered."""
        if self._sum_ci == 0:
            return None
        return self._max

    def quantile(self, q: float) -> float | None:
        """The ``q`` quantile (0-1) of covered values, weighted by coverage."""
        if self._sum_ci == 0:
            return None
        if self._quantiles is None:
            quantiles = WeightedQuantiles()
            for value, entry in self._freq.items():
                quantiles.process(value, entry.sum_ci)
            self._quantiles = quantiles
        return self._quantiles.quantile(q)

    def sum(self) -> float:
        """Sum of covered values, each multiplied by its coverage fraction."""
        return self._sum_xici

    def weighted_sum(self) -> float:
        """Sum of values multiplied by coverage fraction and weight."""
        return self._sum_xiciwi

    def count(self, value: Any = None) -> float | None:
        """Covered cell count, in total or for one value (``None`` if absent)."""
        if value is None:
            return self._sum_ci
        entry = self._freq.get(value)
        return None if entry is None else entry.sum_ci

    def weighted_count(self, value: Any = None) -> float | None:
        """Sum of coverage times weight, in total or for one value."""
        if value is None:
            return self._sum_ciwi
        entry = self._freq.get(value)
        return None if entry is None else entry.sum_ciwi

    def frac(self, value: Any) -> float | None:
        """Fraction of the covered count that holds ``value``."""
        count = self.count(value)
        if count is None:
            return None
        return _div(count, self.count())

    def weighted_frac(self, value: Any) -> float | None:
        """Fraction of the weighted count that holds ``value``."""
        count = self.weighted_count(value)
        if count is None:
            return None
        return _div(count, self.weighted_count())

    def variance(self) -> float:
        """Population variance, weighted by coverage fraction."""
        return self._variance.variance()

    def weighted_variance(self) -> float:
        """Population variance, weighted by coverage fraction and weight."""
        return self._weighted_variance.variance()

    def stdev(self) -> float:
        """Population standard deviation, weighted by coverage fraction."""
        return self._variance.stdev()

    def weighted_stdev(self) -> float:
        """Population standard deviation, weighted by coverage and weight."""
        return self._weighted_variance.stdev()

    def coefficient_of_variation(self) -> float:
        """Population coefficient of variation, weighted by coverage."""
        return self._variance.coefficient_of_variation()

    def variety(self) -> int:
        """Number of distinct defined values seen."""
        return len(self._freq)

    def stores_values(self) -> bool:
        return self._store_values

    def __iter__(self) -> Iterator[Any]:
        return iter(self._freq)

    def __str__(self) -> str:
        lines = [
            "{",
            f'  "count" : {_fmt(self.count())},',
            f'  "min" : {_fmt(self.min())},',
            f'  "max" : {_fmt(self.max())},',
            f'  "mean" : {_fmt(self.mean())},',
            f'  "sum" : {_fmt(self.sum())},',
            f'  "weighted_mean" : {_fmt(self.weighted_mean())},',
        ]
        if self._store_values:
            lines.extend([
                f'  "weighted_sum" : {_fmt(self.weighted_sum())},',
                f'  "mode" : {_fmt(self.mode())},',
                f'  "minority" : {_fmt(self.minority())},',
                f'  "variety" : {self.variety()}',
            ])
        else:
            lines.append(f'  "weighted_sum" : {_fmt(self.weighted_sum())}')
        lines.append("}")
        return "\n".join(lines) + "\n"