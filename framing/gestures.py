"""Input shaping for pinch/rotate gestures.

Only the image itself is zoomed and rotated; none of this feeds the layout
engine's matte or frame geometry.
"""

from __future__ import annotations

import math
from typing import Tuple


MIN_SCALE = 0.2
MAX_SCALE = 5.0

SNAP_TOLERANCE_DEGREES = 7.5
SNAP_ANGLES: Tuple[float, ...] = (0.0, 90.0, 180.0, 270.0, 360.0, -90.0, -180.0, -270.0)


def clamp_scale(value: float) -> float:
    return max(MIN_SCALE, min(value, MAX_SCALE))


def normalize_rotation(degrees: float) -> float:
    """Fold an angle into [-180, 180] (IEEE remainder by 360)."""
    return math.remainder(degrees, 360.0)


def snap_rotation(degrees: float, tolerance: float = SNAP_TOLERANCE_DEGREES) -> float:
    """Snap to a right angle when the gesture ends close to one.

    Angles are compared modulo 360 and the first match in ``SNAP_ANGLES``
    wins, so 358 snaps to 0, -95 to 270 and 725 to 0. Returns ``degrees``
    untouched when nothing is within ``tolerance``.
    """
    for angle in SNAP_ANGLES:
        if abs(normalize_rotation(degrees - angle)) < tolerance:
            return angle
    return degrees
