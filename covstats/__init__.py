"""Coverage-weighted raster statistics: accumulators, variance, quantiles, descriptor parsing and per-feature registries."""

__version__ = "0.1.0"

__all__ = [
    "descriptors",
    "matrix",
    "operation",
    "raster_stats",
    "side",
    "stats_registry",
    "traversal",
    "variance",
    "weighted_quantiles",
]