"""Raster sources and the statistics requested of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from covstats.raster_stats import RasterStats


class RasterSource(ABC):
    """A named source of raster values that can be read box by box."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @property
    @abstractmethod
    def grid(self) -> Any:
        """The grid on which the source's values are defined."""

    @abstractmethod
    def read_box(self, box: Any) -> Any:
        """Read the values that fall within ``box``."""


_FETCHERS: dict[str, Callable[[RasterStats], Any]] = {
    "mean": lambda s: s.mean(),
    "sum": lambda s: s.sum(),
    "count": lambda s: s.count(),
    "weighted_mean": lambda s: s.weighted_mean(),
    "weighted_sum": lambda s: s.weighted_sum(),
    "min": lambda s: s.min(),
    "max": lambda s: s.max(),
    "majority": lambda s: s.mode(),
    "mode": lambda s: s.mode(),
    "minority": lambda s: s.minority(),
    "variety": lambda s: s.variety(),
    "stdev": lambda s: s.stdev(),
    "variance": lambda s: s.variance(),
    "coefficient_of_variation": lambda s: s.coefficient_of_variation(),
}


@dataclass
class Operation:
    """A statistic to compute over a value source, optionally weighted."""

    stat: str
    name: str
    values: RasterSource
    weights: RasterSource | None = None

    def weighted(self) -> bool:
        return self.weights is not None

    def result_fetcher(self) -> Callable[[RasterStats], Any]:
        """Return a function that reads this operation's result from stats."""
        try:
            return _FETCHERS[self.stat]
        except KeyError:
            raise ValueError(f"Unknown stat: '{self.stat}'") from None