"""Range reduction — global min/max of a luminance buffer."""

from typing import NamedTuple

import numpy as np


class LuminanceRange(NamedTuple):
    lum_min: float
    lum_max: float

    @property
    def half_span(self) -> float:
        """(max - min) / 2, finite for any pair of finite floats."""
        return self.lum_max / 2 - self.lum_min / 2


def reduce_range(values: np.ndarray) -> LuminanceRange:
    """Return the (min, max) pair of a non-empty buffer.

    Order of traversal does not matter, so partial ranges from tiles can be
    combined with merge_ranges().
    """
    flat = np.asarray(values).ravel()
    if flat.size == 0:
        raise ValueError("Cannot reduce the range of an empty buffer")
    return LuminanceRange(float(flat.min()), float(flat.max()))


def merge_ranges(*ranges: LuminanceRange) -> LuminanceRange:
    """Combine partial ranges with elementwise min/max."""
    if not ranges:
        raise ValueError("merge_ranges() needs at least one range")
    return LuminanceRange(
        min(r.lum_min for r in ranges),
        max(r.lum_max for r in ranges),
    )
