import math
import statistics

import pytest

from covstats.matrix import Matrix
from covstats.raster_stats import RasterStats


FULL = [[1.0, 1.0], [1.0, 1.0]]
VALUES = [[1.0, 2.0], [3.0, 4.0]]


def test_empty_stats_have_no_results():
    stats = RasterStats(store_values=True)
    assert stats.min() is None
    assert stats.max() is None
    assert stats.mode() is None
    assert stats.minority() is None
    assert stats.quantile(0.5) is None
    assert math.isnan(stats.mean())
    assert stats.variety() == 0


def test_full_coverage_basic_stats():
    stats = RasterStats()
    stats.process(FULL, VALUES)
    assert stats.min() == 1.0
    assert stats.max() == 4.0
    assert stats.count() == pytest.approx(len(VALUES) * len(VALUES[0]))
    assert stats.mean() == pytest.approx(stats.sum() / stats.count())
    assert stats.sum() == pytest.approx(sum(sum(r) for r in VALUES))


def test_accepts_matrix_inputs():
    stats = RasterStats()
    stats.process(Matrix.from_rows(FULL), Matrix.from_rows(VALUES))
    other = RasterStats()
    other.process(FULL, VALUES)
    assert stats.sum() == other.sum()
    assert stats.count() == other.count()


def test_undefined_and_uncovered_cells_are_skipped():
    stats = RasterStats(store_values=True)
    stats.process([[1.0, 1.0, 0.0], [1.0, 1.0, 1.0]],
                  [[7.0, math.nan, 100.0], [None, 5.0, 9.0]])
    assert stats.min() == 5.0
    assert stats.max() == 9.0
    assert set(stats) == {5.0, 7.0, 9.0}
    assert stats.variety() == 3


def test_mode_and_minority_follow_coverage():
    stats = RasterStats(store_values=True)
    stats.process([[0.9, 0.2, 0.2]], [[5.0, 7.0, 7.0]])
    assert stats.mode() == 5.0
    assert stats.minority() == 7.0


def test_ties_break_toward_greatest_and_lowest():
    stats = RasterStats(store_values=True)
    stats.process(FULL, VALUES)
    assert stats.mode() == 4.0
    assert stats.minority() == 1.0


def test_without_stored_values():
    stats = RasterStats()
    stats.process(FULL, VALUES)
    assert not stats.stores_values()
    assert stats.mode() is None
    assert stats.variety() == 0
    assert stats.count(1.0) is None


def test_unit_weights_match_unweighted():
    stats = RasterStats()
    stats.process(FULL, VALUES, FULL)
    assert stats.weighted_mean() == pytest.approx(stats.mean())
    assert stats.weighted_sum() == pytest.approx(stats.sum())
    assert stats.weighted_variance() == pytest.approx(stats.variance())
    assert stats.weighted_fraction() == pytest.approx(
        stats.weighted_sum() / stats.sum())


def test_undefined_weight_gives_nan():
    stats = RasterStats()
    stats.process(FULL, VALUES, [[1.0, None], [1.0, 1.0]])
    assert math.isnan(stats.weighted_sum())
    assert math.isnan(stats.weighted_mean())
    assert stats.sum() == pytest.approx(sum(sum(r) for r in VALUES))


def test_fracs_sum_to_one():
    stats = RasterStats(store_values=True)
    stats.process([[0.5, 1.0, 0.25]], [[3.0, 3.0, 8.0]], [[2.0, 1.0, 4.0]])
    assert sum(stats.frac(v) for v in stats) == pytest.approx(1.0)
    assert sum(stats.weighted_frac(v) for v in stats) == pytest.approx(1.0)
    assert stats.frac(42.0) is None
    assert stats.weighted_frac(42.0) is None


def test_quantiles_span_min_and_max():
    stats = RasterStats(store_values=True)
    stats.process([[1.0, 1.0, 1.0]], [[3.0, 1.0, 2.0]])
    assert stats.quantile(0) == stats.min()
    assert stats.quantile(1) == stats.max()
    assert stats.quantile(0.5) == pytest.approx(2.0)


def test_invalid_quantile_raises():
    stats = RasterStats(store_values=True)
    stats.process(FULL, VALUES)
    with pytest.raises(ValueError):
        stats.quantile(1.5)


def test_variance_matches_population_variance():
    stats = RasterStats()
    stats.process(FULL, VALUES)
    flat = [v for r in VALUES for v in r]
    assert stats.variance() == pytest.approx(statistics.pvariance(flat))
    assert stats.stdev() == pytest.approx(statistics.pstdev(flat))
    assert stats.coefficient_of_variation() == pytest.approx(
        statistics.pstdev(flat) / statistics.mean(flat))


def test_shape_mismatch_raises():
    stats = RasterStats()
    with pytest.raises(ValueError):
        stats.process(FULL, [[1.0, 2.0, 3.0]])
    with pytest.raises(ValueError):
        stats.process(FULL, VALUES, [[1.0]])


def test_str_of_empty_stats():
    text = str(RasterStats())
    assert '"count" : 0,' in text
    assert '"min" : null,' in text
    assert '"mode"' not in text


def test_str_with_stored_values():
    stats = RasterStats(store_values=True)
    stats.process(FULL, VALUES)
    text = str(stats)
    assert '"mode" : 4,' in text
    assert '"variety" : 4' in text
    assert text.startswith("{\n") and text.endswith("}\n")