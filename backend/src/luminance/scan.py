"""Exclusive prefix sum over histogram counts."""

import numpy as np

from luminance.binning import HISTOGRAM_DTYPE


def exclusive_scan(histogram: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    """
    out[0] = 0, out[i] = out[i-1] + histogram[i-1].

    Args:
        histogram: 1-D count array
        out: optional destination, same length as histogram

    Returns:
        The CDF (out itself when given)
    """
    counts = np.asarray(histogram)
    if out is None:
        out = np.empty(counts.size, dtype=HISTOGRAM_DTYPE)
    elif out.shape != counts.shape:
        raise ValueError(f"Output shape {out.shape} does not match {counts.shape}")

    if counts.size == 0:
        return out

    out[0] = 0
    out[1:] = np.cumsum(counts[:-1].astype(np.uint64))
    return out
