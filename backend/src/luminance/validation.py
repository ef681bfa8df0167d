"""Input validation gates for the luminance CDF builder."""

import numpy as np

# Default bin count for HDR log-luminance histograms
DEFAULT_NUM_BINS = 1024

# Bin cap (keeps the scratch histogram small)
MAX_NUM_BINS = 65_536

# Counts are uint32, so the total mass must fit
MAX_PIXEL_COUNT = 2**32 - 1


class CDFInputError(ValueError):
    """Raised before any computation when inputs fail validation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def validate_buffer(values: np.ndarray) -> list[str]:
    """Validate a luminance buffer. Returns list of errors (empty = valid).

    Checks:
    - Real numeric dtype
    - At least one element
    - At most MAX_PIXEL_COUNT elements
    - No NaN or infinity
    """
    errors: list[str] = []

    if values.dtype.kind not in "fiu":
        errors.append(f"Luminance dtype {values.dtype} is not a real number type")
        return errors

    if values.size == 0:
        errors.append("Luminance buffer is empty")
        return errors

    if values.size > MAX_PIXEL_COUNT:
        errors.append(
            f"Pixel count {values.size} exceeds maximum {MAX_PIXEL_COUNT}"
        )
        return errors

    if values.dtype.kind == "f" and not np.isfinite(values).all():
        errors.append("Luminance buffer contains NaN or infinite values")

    return errors


def validate_dimensions(
    size: int, num_rows: int | None, num_cols: int | None
) -> list[str]:
    """Validate optional row/column counts against the buffer length."""
    errors: list[str] = []
    if num_rows is None and num_cols is None:
        return errors
    if num_rows is None or num_cols is None:
        errors.append("num_rows and num_cols must be given together")
        return errors

    for name, dim in (("num_rows", num_rows), ("num_cols", num_cols)):
        if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)):
            errors.append(f"{name} must be an integer, got {type(dim).__name__}")
        elif dim <= 0:
            errors.append(f"{name} must be positive, got {dim}")
    if errors:
        return errors

    if num_rows * num_cols != size:
        errors.append(
            f"Dimensions {num_rows}x{num_cols} do not match buffer length {size}"
        )
    return errors


def validate_num_bins(num_bins: int) -> list[str]:
    """Validate the bin count. Returns list of errors."""
    errors: list[str] = []
    if isinstance(num_bins, bool) or not isinstance(num_bins, (int, np.integer)):
        errors.append(f"num_bins must be an integer, got {type(num_bins).__name__}")
    elif num_bins <= 0:
        errors.append(f"num_bins must be positive, got {num_bins}")
    elif num_bins > MAX_NUM_BINS:
        errors.append(f"num_bins {num_bins} exceeds maximum {MAX_NUM_BINS}")
    return errors


def validate_output(out: np.ndarray, num_bins: int) -> list[str]:
    """Validate a caller-supplied CDF buffer. Returns list of errors.

    Checks:
    - numpy array, 1-D, writeable
    - Unsigned integer dtype of at least 32 bits
    - Capacity >= num_bins
    """
    errors: list[str] = []

    if not isinstance(out, np.ndarray):
        errors.append(f"Output must be a numpy array, got {type(out).__name__}")
        return errors

    if out.ndim != 1:
        errors.append(f"Output must be 1-D, got {out.ndim} dimensions")
    if out.dtype.kind != "u" or out.dtype.itemsize < 4:
        errors.append(f"Output dtype {out.dtype} cannot hold uint32 counts")
    if not out.flags.writeable:
        errors.append("Output buffer is read-only")
    if out.ndim == 1 and out.shape[0] < num_bins:
        errors.append(
            f"Output capacity {out.shape[0]} is smaller than num_bins {num_bins}"
        )
    return errors
