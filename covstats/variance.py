"""Incremental weighted variance (West's WV2 algorithm)."""

from __future__ import annotations

import math


def _div(a: float, b: float) -> float:
    """Divide with floating-point semantics instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class WestVariance:
    """Running weighted mean, variance, deviation and coefficient of variation."""

    def __init__(self) -> None:
        self._sum_w = 0.0
        self._mean = 0.0
        self._t = 0.0

    def process(self, x: float, w: float) -> None:
        """Add value ``x`` with weight ``w``; zero weights are ignored."""
        if w == 0:
            return
        mean_old = self._mean
        self._sum_w += w
        self._mean += _div(w, self._sum_w) * (x - mean_old)
        self._t += w * (x - mean_old) * (x - self._mean)

    def variance(self) -> float:
        """Population variance."""
        return _div(self._t, self._sum_w)

    def stdev(self) -> float:
        """Population standard deviation."""
        var = self.variance()
        if math.isnan(var) or var < 0:
            return math.nan
        return math.sqrt(var)

    def coefficient_of_variation(self) -> float:
        """Population coefficient of variation."""
        return _div(self.stdev(), self._mean)