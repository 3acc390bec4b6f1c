"""Per-feature storage of accumulated statistics."""

from __future__ import annotations

from covstats.operation import Operation
from covstats.raster_stats import RasterStats

_STORED_VALUE_STATS = frozenset({"mode", "minority", "majority", "variety"})


class StatsRegistry:
    """Holds one :class:`RasterStats` per feature and value/weight pair."""

    def __init__(self) -> None:
        self._feature_stats: dict[str, dict[str, RasterStats]] = {}

    def stats(self, feature: str, op: Operation) -> RasterStats:
        """Return the stats for ``feature`` and ``op``, creating them if needed."""
        per_feature = self._feature_stats.setdefault(feature, {})
        key = self.op_key(op)
        if key not in per_feature:
            per_feature[key] = RasterStats(self.requires_stored_values(op.stat))
        return per_feature[key]

    def get(self, feature: str, op: Operation) -> RasterStats:
        """Return existing stats; raise ``KeyError`` if there are none."""
        return self._feature_stats[feature][self.op_key(op)]

    def contains(self, feature: str, op: Operation) -> bool:
        per_feature = self._feature_stats.get(feature)
        return per_feature is not None and self.op_key(op) in per_feature

    def flush_feature(self, fid: str) -> None:
        """Discard all stats held for feature ``fid``."""
        self._feature_stats.pop(fid, None)

    def op_key(self, op: Operation) -> str:
        if op.weights is not None:
            return f"{op.values.name}|{op.weights.name}"
        return op.values.name

    @staticmethod
    def requires_stored_values(stat: str) -> bool:
        return stat in _STORED_VALUE_STATS