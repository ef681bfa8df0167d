"""Luminance histogram/CDF builder — reduce, bin, scan."""

import logging
from typing import NamedTuple

import numpy as np

from luminance.binning import bin_counts
from luminance.diagnostics import build_record, rejection_record
from luminance.minmax import reduce_range
from luminance.scan import exclusive_scan
from luminance.validation import (
    DEFAULT_NUM_BINS,
    CDFInputError,
    validate_buffer,
    validate_dimensions,
    validate_num_bins,
    validate_output,
)

logger = logging.getLogger(__name__)


class LuminanceCDF(NamedTuple):
    log_lum_min: float
    log_lum_max: float
    cdf: np.ndarray


def compute_cdf(
    log_luminance,
    num_bins: int = DEFAULT_NUM_BINS,
    *,
    num_rows: int | None = None,
    num_cols: int | None = None,
    out: np.ndarray | None = None,
) -> LuminanceCDF:
    """
    Compute the luminance range and the exclusive-scan CDF of its histogram.

    Args:
        log_luminance: row-major float buffer, flat or (rows, cols)
        num_bins: number of histogram bins
        num_rows, num_cols: optional dimensions of a flat buffer
        out: optional caller-allocated uint32 array, len >= num_bins;
            only out[:num_bins] is written

    Returns:
        LuminanceCDF(log_lum_min, log_lum_max, cdf)

    Raises:
        CDFInputError: inputs rejected, nothing computed
    """
    values = np.asarray(log_luminance)

    errors = validate_buffer(values)
    errors += validate_num_bins(num_bins)
    if not errors:
        errors += validate_dimensions(values.size, num_rows, num_cols)
        if out is not None:
            errors += validate_output(out, num_bins)
    if errors:
        logger.debug(
            "CDF input rejected: %d error(s)", len(errors), extra=rejection_record(errors)
        )
        raise CDFInputError(errors)

    shape = values.shape
    if values.dtype.kind != "f":
        values = values.astype(np.float64)
    values = values.ravel()
    num_bins = int(num_bins)

    lum_range = reduce_range(values)
    histogram = bin_counts(values, lum_range, num_bins)
    cdf = exclusive_scan(histogram, None if out is None else out[:num_bins])

    logger.debug(
        "CDF built: %d values, %d bins, range [%r, %r]",
        values.size,
        num_bins,
        lum_range.lum_min,
        lum_range.lum_max,
        extra=build_record(shape, num_bins, lum_range),
    )
    return LuminanceCDF(lum_range.lum_min, lum_range.lum_max, cdf)
