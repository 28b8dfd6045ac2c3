"""Value types shared by the framing layout engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from framing.ratios import parse_ratio


Box = Tuple[float, float, float, float]  # x1, y1, x2, y2

DEFAULT_MAX_DIMENSION = 8192.0
DEFAULT_MAX_PIXEL_AREA = 50_000_000.0


def _require_positive(value: float, label: str) -> float:
    if math.isnan(value) or value <= 0:
        raise ValueError(f"{label} must be positive, got {value!r}")
    return value


def _require_finite_positive(value: float, label: str) -> float:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{label} must be a finite positive number, got {value!r}")
    return value


def _require_non_negative(value: float, label: str) -> float:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{label} cannot be negative, got {value!r}")
    return value


@dataclass(frozen=True)
class Size:
    """Width/height pair in whatever unit the caller is working in."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def longest_side(self) -> float:
        return max(self.width, self.height)

    def scaled(self, factor: float) -> "Size":
        return Size(self.width * factor, self.height * factor)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class ImageExtent:
    """Intrinsic pixel dimensions of the source image.

    Zero-area or non-finite extents are rejected here; callers that cannot
    read the real size should substitute ``framing.extent.FALLBACK_EXTENT``.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        _require_finite_positive(self.width, "width")
        _require_finite_positive(self.height, "height")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def longest_side(self) -> float:
        return max(self.width, self.height)

    def as_size(self) -> Size:
        return Size(self.width, self.height)


@dataclass(frozen=True)
class CompositionParams:
    """Matte/frame settings in device-independent units (800-unit reference).

    ``frame_thickness`` only counts when ``frame_enabled`` is set; the matte
    is independent of the frame flag.
    """

    matte_thickness: float = 0.0
    frame_thickness: float = 0.0
    frame_enabled: bool = True
    frame_aspect_ratio: float = 1.0

    def __post_init__(self) -> None:
        _require_non_negative(self.matte_thickness, "matte_thickness")
        _require_non_negative(self.frame_thickness, "frame_thickness")
        _require_finite_positive(self.frame_aspect_ratio, "frame_aspect_ratio")

    @property
    def effective_frame_thickness(self) -> float:
        return self.frame_thickness if self.frame_enabled else 0.0

    @classmethod
    def from_ratio_string(
        cls,
        ratio: str,
        *,
        matte_thickness: float = 0.0,
        frame_thickness: float = 0.0,
        frame_enabled: bool = True,
    ) -> "CompositionParams":
        """Build params from a ``"w:h"`` ratio string (1:1 when unparsable)."""
        return cls(
            matte_thickness=matte_thickness,
            frame_thickness=frame_thickness,
            frame_enabled=frame_enabled,
            frame_aspect_ratio=parse_ratio(ratio),
        )


@dataclass(frozen=True)
class ViewportBudget:
    """Space the interactive preview may occupy."""

    available_width: float
    available_height: float

    def __post_init__(self) -> None:
        _require_finite_positive(self.available_width, "available_width")
        _require_finite_positive(self.available_height, "available_height")


@dataclass(frozen=True)
class SizeBudget:
    """Hard limits for the exported composite. Infinity means no limit."""

    max_dimension: float = DEFAULT_MAX_DIMENSION
    max_pixel_area: float = DEFAULT_MAX_PIXEL_AREA

    def __post_init__(self) -> None:
        _require_positive(self.max_dimension, "max_dimension")
        _require_positive(self.max_pixel_area, "max_pixel_area")

    @classmethod
    def unlimited(cls) -> "SizeBudget":
        return cls(max_dimension=math.inf, max_pixel_area=math.inf)


def _centered_box(outer: Size, inner: Size) -> Box:
    x1 = (outer.width - inner.width) / 2
    y1 = (outer.height - inner.height) / 2
    return (x1, y1, x1 + inner.width, y1 + inner.height)


@dataclass(frozen=True)
class LayoutResult:
    """Geometry for one rendering of the composition.

    All sizes are in output units: screen points for a preview, pixels for an
    export. ``scale_factor_applied`` is the factor every unscaled size was
    multiplied by; ``reference_scale`` is not affected by it.

    Example:
        >>> result.total_rect
        Size(width=860.0, height=860.0)
        >>> result.image_box
        (30.0, 230.0, 830.0, 630.0)
    """

    image_rect: Size
    matte_outer_rect: Size
    content_rect: Size  # inside the frame border; has the frame aspect ratio
    total_rect: Size
    matte_thickness: float
    frame_thickness: float
    reference_scale: float
    scale_factor_applied: float

    @property
    def image_box(self) -> Box:
        """Image placement inside ``total_rect``, centred."""
        return _centered_box(self.total_rect, self.image_rect)

    @property
    def matte_box(self) -> Box:
        """Matte placement inside ``total_rect``, centred."""
        return _centered_box(self.total_rect, self.matte_outer_rect)

    @property
    def unscaled_total(self) -> Size:
        return self.total_rect.scaled(1.0 / self.scale_factor_applied)

    @property
    def is_degraded(self) -> bool:
        return self.scale_factor_applied < 1.0
