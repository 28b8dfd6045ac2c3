"""Validation boundary between editor controls and the layout engine.

The engine assumes non-negative thickness values; this module owns the
slider ranges and the minimum frame width rule so values are clamped before
they ever reach ``framing.geometry``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from framing.gestures import clamp_scale, normalize_rotation
from framing.models import CompositionParams
from framing.ratios import DEFAULT_RATIO, normalize_ratio, parse_ratio, reverse_ratio


logger = logging.getLogger(__name__)

MAX_MATTE_WIDTH = 30.0
MAX_FRAME_WIDTH = 150.0
MATTE_STEP = 0.5
FRAME_STEP = 1.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def min_frame_width(matte_width: float, frame_enabled: bool) -> float:
    """Smallest frame width allowed for the current matte.

    0 when the frame is off or there is no matte; otherwise a non-zero matte
    forces a frame of at least ``max(0.5, matte * 0.3)``.
    """
    if not frame_enabled:
        return 0.0
    if matte_width <= 0:
        return 0.0
    return max(0.5, matte_width * 0.3)


def clamp_matte(matte_width: float) -> float:
    return _clamp(matte_width, 0.0, MAX_MATTE_WIDTH)


def clamp_frame(frame_width: float, matte_width: float, frame_enabled: bool) -> float:
    return _clamp(frame_width, min_frame_width(matte_width, frame_enabled), MAX_FRAME_WIDTH)


@dataclass(frozen=True)
class EditSettings:
    """Editor state for one image, as saved alongside the source bytes.

    Attributes:
        matte_width: Matte thickness in reference units
        frame_width: Frame thickness in reference units
        frame_ratio: Frame aspect ratio string, e.g. ``"3:4"``
        frame_enabled: Whether the frame is drawn
        scale: User zoom applied to the image only
        rotation_degrees: User rotation applied to the image only
    """

    matte_width: float = 0.0
    frame_width: float = 0.0
    frame_ratio: str = DEFAULT_RATIO
    frame_enabled: bool = True
    scale: float = 1.0
    rotation_degrees: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "frame_ratio", normalize_ratio(self.frame_ratio))

    @property
    def min_frame_width(self) -> float:
        return min_frame_width(self.matte_width, self.frame_enabled)

    def _raise_frame_to_minimum(self) -> "EditSettings":
        minimum = self.min_frame_width
        if self.frame_enabled and self.frame_width < minimum:
            logger.debug("Raising frame width %s to minimum %s", self.frame_width, minimum)
            return replace(self, frame_width=minimum)
        return self

    def with_matte(self, matte_width: float) -> "EditSettings":
        return replace(self, matte_width=clamp_matte(matte_width))._raise_frame_to_minimum()

    def with_frame(self, frame_width: float) -> "EditSettings":
        clamped = clamp_frame(frame_width, self.matte_width, self.frame_enabled)
        return replace(self, frame_width=clamped)

    def with_ratio(self, frame_ratio: str) -> "EditSettings":
        return replace(self, frame_ratio=frame_ratio)

    def flip_ratio(self) -> "EditSettings":
        return replace(self, frame_ratio=reverse_ratio(self.frame_ratio))

    def toggle_frame(self) -> "EditSettings":
        return replace(self, frame_enabled=not self.frame_enabled)._raise_frame_to_minimum()

    def with_transform(self, scale: float, rotation_degrees: float) -> "EditSettings":
        return replace(
            self,
            scale=clamp_scale(scale),
            rotation_degrees=normalize_rotation(rotation_degrees),
        )

    def to_params(self) -> CompositionParams:
        """Clamp into the slider ranges and build engine input."""
        matte = clamp_matte(self.matte_width)
        return CompositionParams(
            matte_thickness=matte,
            frame_thickness=clamp_frame(self.frame_width, matte, self.frame_enabled),
            frame_enabled=self.frame_enabled,
            frame_aspect_ratio=parse_ratio(self.frame_ratio),
        )
