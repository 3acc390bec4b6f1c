"""Quantiles of a weighted sample."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass


@dataclass
class _Element:
    x: float
    w: float
    cumsum: float = 0.0
    s: float = 0.0


class WeightedQuantiles:
    """Collects weighted values and reports interpolated quantiles.

    With equal weights the result agrees with the usual linear
    interpolation between order statistics.
    """

    def __init__(self) -> None:
        self._elems: list[_Element] = []
        self._sum_w = 0.0
        self._ready = False

    def process(self, x: float, w: float) -> None:
        """Add value ``x`` with non-negative, finite weight ``w``."""
        if w < 0:
            raise ValueError(
                "Weighted quantile calculation does not support negative weights."
            )
        if not math.isfinite(w):
            raise ValueError("Weighted quantile does not support non-finite weights.")
        self._ready = False
        self._elems.append(_Element(x, w))

    def _prepare(self) -> None:
        self._elems.sort(key=lambda e: e.x)
        n = len(self._elems)
        self._sum_w = 0.0
        previous: _Element | None = None
        for i, elem in enumerate(self._elems):
            self._sum_w += elem.w
            if previous is None:
                elem.s = 0.0
                elem.cumsum = elem.w
            else:
                elem.cumsum = previous.cumsum + elem.w
                elem.s = i * elem.w + (n - 1) * previous.cumsum
            previous = elem
        self._ready = True

    def quantile(self, q: float) -> float:
        """Return the ``q`` quantile, where ``0 <= q <= 1``."""
        if not math.isfinite(q) or q < 0 or q > 1:
            raise ValueError("Quantile must be between 0 and 1.")
        if not self._elems:
            raise ValueError("Cannot compute a quantile of no values.")
        if not self._ready:
            self._prepare()

        sn = self._sum_w * (len(self._elems) - 1)
        target = q * sn

        # First element whose s exceeds the target; the first s is zero and the
        # target is non-negative, so there is always an element to its left.
        right = bisect.bisect_right([e.s for e in self._elems], target)
        left = self._elems[right - 1]

        if right == len(self._elems):
            return left.x

        upper = self._elems[right]
        return left.x + (target - left.s) * (upper.x - left.x) / (upper.s - left.s)