# covstats

Building blocks for computing statistics of raster values within a polygon.
Each raster cell counts toward the result in proportion to the fraction of
the cell that the polygon covers. A second weighting raster may also be
applied. The package is pure Python and has no dependencies outside the
standard library.

## Installation

```
pip install .
```

## Modules

- `covstats.raster_stats.RasterStats` accumulates statistics from coverage
  fractions, values and optional weights. Use `process(coverage, values,
  weights=None)` for aligned two-dimensional grids, given as lists of rows or
  `Matrix` objects, or `process_value(value, coverage, weight)` for single
  cells. Cells with zero coverage are skipped, and so are values that are
  `None` or NaN. An undefined weight is counted as NaN. The results are:
  `count`, `sum`, `mean`, `min`, `max`, `variance`, `stdev`,
  `coefficient_of_variation`, `weighted_count`, `weighted_sum`,
  `weighted_mean`, `weighted_fraction`, `weighted_variance` and
  `weighted_stdev`.
  When it is created with `store_values=True`, it also records the value
  frequencies used by `mode`, `minority`, `variety`, `quantile`,
  `count(value)`, `weighted_count(value)`, `frac` and `weighted_frac`.
  Iterating over it gives the distinct values it has seen. `str()` renders a
  JSON-like summary.
- `covstats.variance.WestVariance` is an incremental weighted estimator of the
  population variance, the standard deviation and the coefficient of
  variation. Values with zero weight are ignored.
- `covstats.weighted_quantiles.WeightedQuantiles` gives weighted quantiles
  with linear interpolation. It raises `ValueError` for negative or
  non-finite weights, for `q` outside 0 to 1, and when it holds no values.
- `covstats.descriptors` parses descriptors:
  - `parse_dataset_descriptor("file[layer]")` returns `(file, layer)`. The
    layer defaults to `"0"`.
  - `parse_raster_descriptor("name:file[band]")` returns
    `(name, file, band)`. The name defaults to the file name and the band
    to 1.
  - `parse_stat_descriptor("[name=]stat(values[,weights])")` returns a
    `StatDescriptor`. When no name is given, it is built as
    `values_stat[_weights]`.

  Malformed input raises `ValueError`.
- `covstats.operation` provides:
  - `RasterSource`, an abstract named source with a `grid` property and
    `read_box(box)`.
  - `Operation`, which pairs a stat name with a value source and an optional
    weight source. `Operation.result_fetcher()` returns a function that reads
    the stat from a `RasterStats`. It raises `ValueError` for an unknown
    stat.
- `covstats.stats_registry.StatsRegistry` keeps one `RasterStats` for each
  feature and each value/weight source pair. It has these methods:
  - `stats` creates an entry on first use.
  - `get` returns an existing entry and raises `KeyError` if there is none.
  - `contains` reports whether an entry exists.
  - `flush_feature` discards every entry for a feature.
- `covstats.matrix.Matrix` is a dense row-major grid. It supports
  `m[row, col]` indexing with `IndexError` on out-of-range access,
  `from_rows`, `increment`, `row` and iteration over rows. `str()` gives a
  fixed-width text rendering.
- `covstats.side.Side` and `covstats.traversal` (`Crossing`, `Traversal`)
  record how a line enters and leaves a single cell.

## Example

```python
from covstats.raster_stats import RasterStats

stats = RasterStats(store_values=True)
stats.process_value(1.0, 0.5, 1.0)
stats.process_value(3.0, 1.0, 2.0)

stats.count()          # 1.5
stats.sum()            # 3.5
stats.mean()           # about 2.333
stats.mode()           # 3.0
stats.quantile(0.5)    # the coverage-weighted median
```

Processing aligned grids:

```python
stats = RasterStats()
stats.process(
    coverage=[[1.0, 0.5], [0.0, 0.25]],
    values=[[10, 20], [30, None]],
)
stats.count()   # 1.5
stats.sum()     # 20.0
```

Parsing a statistic descriptor:

```python
from covstats.descriptors import parse_stat_descriptor

d = parse_stat_descriptor("mean(pop,area)")
d.name, d.stat, d.values, d.weights   # ("pop_mean_area", "mean", "pop", "area")
```

## What the package does not do

- It does not work out coverage fractions. You must supply them, for example
  by computing how much of each cell a polygon covers with your own geometry
  code.
- It does not read raster files. `RasterSource` is only an abstract base, and
  you subclass it to supply values.
- It has no command-line interface and does not write output files.

## Running the tests

```
pip install .[test]
pytest
```