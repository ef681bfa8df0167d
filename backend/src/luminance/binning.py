"""Binning — scatter each luminance value into one of num_bins buckets."""

import logging

import numpy as np

from luminance.minmax import LuminanceRange

logger = logging.getLogger(__name__)

HISTOGRAM_DTYPE = np.uint32


def bin_indices(
    values: np.ndarray, value_range: LuminanceRange, num_bins: int
) -> np.ndarray:
    """
    Map every value to its bin index.

    index = clamp(floor((x - min) / range * num_bins), 0, num_bins - 1)

    Arithmetic runs in float64 on halved operands, so x - min and max - min
    stay finite even for a range spanning the whole float64 axis. Halving is
    exact, so the ratio matches the unhalved formula.
    x == max lands on num_bins exactly and is clamped into the last bin.
    A zero range sends everything to bin 0.

    Args:
        values: float buffer, any shape
        value_range: (min, max) covering every value
        num_bins: positive bin count

    Returns:
        1-D int64 array of bin indices, one per element
    """
    flat = np.asarray(values).ravel()
    value_range = LuminanceRange(float(value_range.lum_min), float(value_range.lum_max))
    half_span = value_range.half_span

    if half_span == 0:
        logger.debug(
            "Degenerate range at %r, all values in bin 0", value_range.lum_min
        )
        return np.zeros(flat.size, dtype=np.int64)

    half_min = value_range.lum_min / 2
    scaled = (flat.astype(np.float64) / 2 - half_min) / half_span * num_bins
    indices = np.floor(scaled).astype(np.int64)
    return np.clip(indices, 0, num_bins - 1)


def bin_counts(
    values: np.ndarray, value_range: LuminanceRange, num_bins: int
) -> np.ndarray:
    """Histogram of values over value_range, as a uint32 array of num_bins."""
    indices = bin_indices(values, value_range, num_bins)
    counts = np.bincount(indices, minlength=num_bins)[:num_bins]
    return counts.astype(HISTOGRAM_DTYPE)


def merge_histograms(*histograms: np.ndarray) -> np.ndarray:
    """Sum partial histograms binned against the same range."""
    if not histograms:
        raise ValueError("merge_histograms() needs at least one histogram")
    lengths = {len(h) for h in histograms}
    if len(lengths) != 1:
        raise ValueError(f"Histogram lengths differ: {sorted(lengths)}")
    total = np.zeros(lengths.pop(), dtype=np.uint64)
    for h in histograms:
        total += np.asarray(h, dtype=np.uint64)
    return total.astype(HISTOGRAM_DTYPE)
