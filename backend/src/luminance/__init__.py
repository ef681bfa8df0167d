"""Luminance histogram and CDF for HDR tone-mapping normalization."""

from luminance.binning import bin_counts, bin_indices, merge_histograms
from luminance.cdf import LuminanceCDF, compute_cdf
from luminance.minmax import LuminanceRange, merge_ranges, reduce_range
from luminance.scan import exclusive_scan
from luminance.validation import DEFAULT_NUM_BINS, CDFInputError

__all__ = [
    "DEFAULT_NUM_BINS",
    "CDFInputError",
    "LuminanceCDF",
    "LuminanceRange",
    "bin_counts",
    "bin_indices",
    "compute_cdf",
    "exclusive_scan",
    "merge_histograms",
    "merge_ranges",
    "reduce_range",
]
