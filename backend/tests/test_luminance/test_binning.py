"""Tests for luminance binning."""

import warnings

import numpy as np
import pytest

from luminance.binning import bin_counts, bin_indices, merge_histograms
from luminance.minmax import LuminanceRange, reduce_range

pytestmark = pytest.mark.smoke


def test_two_bins_split_at_midpoint():
    values = np.array([1.0, 2.0, 3.0, 4.0], dtype=np.float32)
    idx = bin_indices(values, LuminanceRange(1.0, 4.0), 2)
    assert idx.tolist() == [0, 0, 1, 1]


def test_max_is_clamped_into_last_bin():
    values = np.array([0.0, 10.0], dtype=np.float32)
    idx = bin_indices(values, LuminanceRange(0.0, 10.0), 5)
    assert idx.tolist() == [0, 4]


def test_negative_range():
    values = np.array([-2.0, -1.0, 0.0, 1.0, 2.0], dtype=np.float32)
    counts = bin_counts(values, reduce_range(values), 4)
    assert counts.tolist() == [1, 1, 1, 2]


def test_degenerate_range_all_bin_zero():
    values = np.full((8, 8), 7.0, dtype=np.float32)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        idx = bin_indices(values, LuminanceRange(7.0, 7.0), 16)
    assert idx.shape == (64,)
    assert not idx.any()


def test_wide_span_stays_finite():
    values = np.array([-3e38, 0.0, 3e38], dtype=np.float32)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        counts = bin_counts(values, reduce_range(values), 4)
    assert counts.sum() == 3
    assert counts[0] == 1
    assert counts[-1] == 1


def test_float64_extremes_stay_finite():
    values = np.array([-1e308, 0.0, 1e308])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        idx = bin_indices(values, reduce_range(values), 4)
    assert idx.tolist() == [0, 2, 3]


def test_full_float64_axis():
    top = np.finfo(np.float64).max
    values = np.array([-top, -top / 2, 0.0, top])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        counts = bin_counts(values, reduce_range(values), 4)
    assert counts.tolist() == [1, 1, 1, 1]


def test_counts_sum_to_pixel_count(log_luminance):
    counts = bin_counts(log_luminance, reduce_range(log_luminance), 64)
    assert counts.dtype == np.uint32
    assert len(counts) == 64
    assert int(counts.sum()) == log_luminance.size


def test_indices_match_reference_formula(rng):
    values = rng.uniform(-5.0, 5.0, 500).astype(np.float32)
    r = reduce_range(values)
    num_bins = 37
    expected = []
    for x in values.tolist():
        b = int(np.floor((x - r.lum_min) / (r.lum_max - r.lum_min) * num_bins))
        expected.append(min(max(b, 0), num_bins - 1))
    assert bin_indices(values, r, num_bins).tolist() == expected


def test_more_bins_than_values():
    values = np.array([0.0, 1.0], dtype=np.float32)
    counts = bin_counts(values, reduce_range(values), 256)
    assert counts[0] == 1
    assert counts[255] == 1
    assert counts.sum() == 2


def test_merge_histograms_of_tiles(log_luminance):
    r = reduce_range(log_luminance)
    tiles = np.array_split(log_luminance.ravel(), 5)
    merged = merge_histograms(*(bin_counts(t, r, 32) for t in tiles))
    assert merged.dtype == np.uint32
    np.testing.assert_array_equal(merged, bin_counts(log_luminance, r, 32))


def test_merge_histograms_length_mismatch():
    with pytest.raises(ValueError, match="lengths differ"):
        merge_histograms(np.zeros(4, np.uint32), np.zeros(5, np.uint32))


def test_merge_histograms_requires_input():
    with pytest.raises(ValueError):
        merge_histograms()
