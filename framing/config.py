"""Environment-driven defaults for export sizing.

``FRAMING_MAX_DIMENSION`` and ``FRAMING_MAX_PIXELS`` override the export
budget; anything unset or malformed keeps the built-in limits.
"""

from __future__ import annotations

import logging
import math
import os
from typing import Optional

from framing.models import DEFAULT_MAX_DIMENSION, DEFAULT_MAX_PIXEL_AREA, SizeBudget


logger = logging.getLogger(__name__)

MAX_DIMENSION_ENV = "FRAMING_MAX_DIMENSION"
MAX_PIXELS_ENV = "FRAMING_MAX_PIXELS"

# Longest side used by the retry plan when a render at the primary budget fails.
RETRY_MAX_DIMENSION = 4096.0


def _read_positive_float(name: str, default: float) -> float:
    raw: Optional[str] = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    if math.isnan(value) or value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


def default_size_budget() -> SizeBudget:
    """Export budget from the environment, or 8192 px / 50 MP."""
    return SizeBudget(
        max_dimension=_read_positive_float(MAX_DIMENSION_ENV, DEFAULT_MAX_DIMENSION),
        max_pixel_area=_read_positive_float(MAX_PIXELS_ENV, DEFAULT_MAX_PIXEL_AREA),
    )
