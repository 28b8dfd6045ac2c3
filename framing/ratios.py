"""Aspect-ratio strings (``"W:H"``) used by the frame picker."""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple


logger = logging.getLogger(__name__)

DEFAULT_RATIO = "1:1"

# Presets offered by the frame picker, in display order.
FRAME_RATIOS: Tuple[str, ...] = ("1:1", "3:4", "4:3", "2:3", "3:2", "9:16", "16:9")


def split_ratio(ratio: str) -> Optional[Tuple[float, float]]:
    """Return ``(w, h)`` for a well-formed ratio, ``None`` otherwise.

    Well-formed means exactly two numeric components, both finite and positive.
    """
    parts = (ratio or "").split(":")
    if len(parts) != 2:
        return None
    try:
        w = float(parts[0])
        h = float(parts[1])
    except ValueError:
        return None
    if not (math.isfinite(w) and math.isfinite(h)):
        return None
    if w <= 0 or h <= 0:
        return None
    return w, h


def parse_ratio(ratio: str) -> float:
    """Parse ``"W:H"`` into ``W / H``, falling back to 1:1.

    Example:
        >>> parse_ratio("3:4")
        0.75
        >>> parse_ratio("2:0")
        1.0
    """
    parts = split_ratio(ratio)
    if parts is None:
        logger.warning("Could not parse aspect ratio %r, using %s", ratio, DEFAULT_RATIO)
        return 1.0
    w, h = parts
    return w / h


def _format_component(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def reverse_ratio(ratio: str) -> str:
    """Swap width and height (``"3:4"`` -> ``"4:3"``); unparsable input gives ``"1:1"``."""
    parts = split_ratio(ratio)
    if parts is None:
        logger.warning("Could not reverse aspect ratio %r, using %s", ratio, DEFAULT_RATIO)
        return DEFAULT_RATIO
    w, h = parts
    return f"{_format_component(h)}:{_format_component(w)}"


def normalize_ratio(ratio: Optional[str]) -> str:
    """Empty or missing ratio strings become the default ``"1:1"``."""
    if not ratio or not ratio.strip():
        return DEFAULT_RATIO
    return ratio.strip()
