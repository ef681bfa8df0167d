"""Diagnostics — structured JSON logs of CDF builds.

compute_cdf() attaches a summary of every build (``cdf_build``) and of every
rejected call (``cdf_errors``) to its log records via ``extra=``.
JSONFormatter lifts those attributes into top-level JSON fields, so a log
file holds one queryable object per build.

Configured from the environment:
- LUMCDF_LOG_DIR: log directory, must resolve under ~/.lumcdf
- LUMCDF_LOG_LEVEL: root log level name (default INFO)
"""

import datetime
import json
import logging
import logging.handlers
import os
from pathlib import Path

from luminance.minmax import LuminanceRange

logger = logging.getLogger(__name__)

LOG_FILENAME = "lumcdf.log"

# Rotation: 10MB max, 7 backups
MAX_LOG_BYTES = 10_000_000
LOG_BACKUP_COUNT = 7

# Record attributes copied verbatim into the JSON entry
STRUCTURED_FIELDS = ("cdf_build", "cdf_errors")


def build_record(
    shape: tuple[int, ...], num_bins: int, lum_range: LuminanceRange
) -> dict:
    """``extra=`` payload describing one successful build."""
    return {
        "cdf_build": {
            "shape": list(shape),
            "num_bins": num_bins,
            "lum_min": lum_range.lum_min,
            "lum_max": lum_range.lum_max,
            "degenerate": lum_range.half_span == 0,
        }
    }


def rejection_record(errors: list[str]) -> dict:
    """``extra=`` payload for a call refused by validation."""
    return {"cdf_errors": list(errors)}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with CDF build fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.datetime.fromtimestamp(
                record.created, tz=datetime.timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in STRUCTURED_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            entry["error"] = {
                "type": type(exc).__name__,
                "message": str(exc),
                "traceback": self.formatException(record.exc_info),
            }
        return json.dumps(entry)


def resolve_log_dir(requested: str | None = None) -> Path:
    """Pick the log directory; anything outside ~/.lumcdf falls back to the default."""
    base = Path.home() / ".lumcdf"
    default = base / "logs"
    raw = requested or os.environ.get("LUMCDF_LOG_DIR", "")
    if not raw:
        return default

    candidate = Path(raw).expanduser().resolve()
    if not candidate.is_relative_to(base.resolve()):
        logger.warning("Log directory %s is outside %s, using default", candidate, base)
        return default
    return candidate


def setup_structured_logging(
    log_dir: str | None = None, level: str | None = None
) -> Path:
    """Send root logging to a rotating JSON log file.

    A second call swaps out the handler installed by the first.

    Args:
        log_dir: Override LUMCDF_LOG_DIR (still confined to ~/.lumcdf).
        level: Override LUMCDF_LOG_LEVEL.

    Returns:
        Path of the log file.
    """
    directory = resolve_log_dir(log_dir)
    directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    log_path = directory / LOG_FILENAME

    level_name = (level or os.environ.get("LUMCDF_LOG_LEVEL", "INFO")).upper()

    handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
    )
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing.formatter, JSONFormatter):
            root.removeHandler(existing)
            existing.close()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.addHandler(handler)

    logger.info("JSON logging to %s at %s", log_path, logging.getLevelName(root.level))
    return log_path
