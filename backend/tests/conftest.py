import logging

import numpy as np
import pytest

from luminance.diagnostics import JSONFormatter


@pytest.fixture
def rng():
    """Seeded generator so buffers are identical across runs."""
    return np.random.default_rng(42)


@pytest.fixture
def log_luminance(rng):
    """Synthetic 120x160 float32 log-luminance frame (HDR-like spread)."""
    return rng.normal(0.0, 2.5, (120, 160)).astype(np.float32)


@pytest.fixture
def clean_root_logger():
    """Remove JSON handlers and restore root level after logging tests."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JSONFormatter):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
