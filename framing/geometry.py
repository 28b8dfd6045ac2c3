"""Layout engine for framed/matted image compositions.

The composition (image + matte + frame) is sized once in unscaled output
pixels, then shrunk uniformly by a fit strategy that depends on where it is
going:

- ``ViewportBudget``: interactive preview, fitted into 85% of the viewport.
- ``SizeBudget``: final export, capped by longest side and pixel count.

Both paths share ``reference_scale`` so matte and frame stay proportionally
identical between preview and export.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type, Union

from framing.config import RETRY_MAX_DIMENSION, default_size_budget
from framing.models import (
    CompositionParams,
    ImageExtent,
    LayoutResult,
    Size,
    SizeBudget,
    ViewportBudget,
)


logger = logging.getLogger(__name__)

# Matte/frame thickness sliders are authored against an image of this longest side.
REFERENCE_DIMENSION = 800.0

# Share of the viewport the preview may use on each axis.
VIEWPORT_MARGIN = 0.85

TargetSpace = Union[ViewportBudget, SizeBudget]


@dataclass(frozen=True)
class ContentGeometry:
    """Unscaled composition sizes in output pixels."""

    image: Size
    image_with_matte: Size
    content: Size
    matte_thickness: float
    frame_thickness: float
    reference_scale: float

    @property
    def total(self) -> Size:
        return Size(
            self.content.width + 2 * self.frame_thickness,
            self.content.height + 2 * self.frame_thickness,
        )


def reference_scale(extent: ImageExtent) -> float:
    """Pixels per thickness unit for this image (longest side / 800)."""
    return extent.longest_side / REFERENCE_DIMENSION


def _grow_to_ratio(size: Size, target_ratio: float) -> Size:
    # Only ever grows one side, so the matted image is never cropped.
    current_ratio = size.width / size.height
    if target_ratio > current_ratio:
        return Size(size.height * target_ratio, size.height)
    return Size(size.width, size.width / target_ratio)


def content_size(extent: ImageExtent, params: CompositionParams) -> ContentGeometry:
    """Size the composition at native resolution.

    The image keeps its intrinsic size, the matte wraps it, and when the frame
    is enabled the matted image is padded out to ``frame_aspect_ratio`` before
    the frame border is added on every side.
    """
    scale = reference_scale(extent)
    matte_px = params.matte_thickness * scale
    frame_px = params.effective_frame_thickness * scale

    image = extent.as_size()
    image_with_matte = Size(image.width + 2 * matte_px, image.height + 2 * matte_px)

    if params.frame_enabled:
        content = _grow_to_ratio(image_with_matte, params.frame_aspect_ratio)
    else:
        content = image_with_matte

    return ContentGeometry(
        image=image,
        image_with_matte=image_with_matte,
        content=content,
        matte_thickness=matte_px,
        frame_thickness=frame_px,
        reference_scale=scale,
    )


def fit_to_viewport(total: Size, budget: ViewportBudget) -> float:
    """Scale factor (never above 1) fitting ``total`` into 85% of the viewport."""
    max_w = budget.available_width * VIEWPORT_MARGIN
    max_h = budget.available_height * VIEWPORT_MARGIN
    return min(1.0, min(max_w / total.width, max_h / total.height))


def fit_to_size_budget(total: Size, budget: SizeBudget) -> float:
    """Scale factor (never above 1) keeping an export inside ``budget``.

    The longest side is capped first; if the pixel count is still too large the
    factor shrinks further so the area fits. Oversized compositions are never
    an error, they are downsampled uniformly.
    """
    factor = min(1.0, budget.max_dimension / total.longest_side)
    area = total.area
    if area * factor * factor > budget.max_pixel_area:
        factor = min(factor, math.sqrt(budget.max_pixel_area / area))
    return factor


FIT_STRATEGIES: Dict[Type, Callable[[Size, TargetSpace], float]] = {
    ViewportBudget: fit_to_viewport,
    SizeBudget: fit_to_size_budget,
}


def _fit_strategy(target: TargetSpace) -> Callable[[Size, TargetSpace], float]:
    try:
        return FIT_STRATEGIES[type(target)]
    except KeyError:
        raise TypeError(
            f"Unsupported target space {type(target).__name__}; "
            "expected ViewportBudget or SizeBudget"
        ) from None


def layout(
    extent: ImageExtent,
    params: CompositionParams,
    target: TargetSpace,
) -> LayoutResult:
    """Compute the composition geometry for a preview or an export target."""
    fit = _fit_strategy(target)
    geometry = content_size(extent, params)
    total = geometry.total
    factor = fit(total, target)

    logger.debug(
        "layout %sx%s -> total %.2fx%.2f (ref scale %.4f, matte %.2fpx, frame %.2fpx), "
        "%s factor %.4f",
        extent.width,
        extent.height,
        total.width,
        total.height,
        geometry.reference_scale,
        geometry.matte_thickness,
        geometry.frame_thickness,
        type(target).__name__,
        factor,
    )

    return LayoutResult(
        image_rect=geometry.image.scaled(factor),
        matte_outer_rect=geometry.image_with_matte.scaled(factor),
        content_rect=geometry.content.scaled(factor),
        total_rect=total.scaled(factor),
        matte_thickness=geometry.matte_thickness * factor,
        frame_thickness=geometry.frame_thickness * factor,
        reference_scale=geometry.reference_scale,
        scale_factor_applied=factor,
    )


def preview_layout(
    extent: ImageExtent,
    params: CompositionParams,
    available_width: float,
    available_height: float,
) -> LayoutResult:
    return layout(extent, params, ViewportBudget(available_width, available_height))


def export_layout(
    extent: ImageExtent,
    params: CompositionParams,
    budget: Optional[SizeBudget] = None,
) -> LayoutResult:
    """Full-resolution layout, downsampled only when ``budget`` requires it."""
    if budget is None:
        budget = default_size_budget()
    result = layout(extent, params, budget)
    if result.is_degraded:
        unscaled = result.unscaled_total
        logger.info(
            "Export %.0fx%.0f exceeds budget (max side %s, max pixels %s); scaling by %.4f",
            unscaled.width,
            unscaled.height,
            budget.max_dimension,
            budget.max_pixel_area,
            result.scale_factor_applied,
        )
    return result


def fallback_export_layout(
    extent: ImageExtent,
    params: CompositionParams,
    budget: Optional[SizeBudget] = None,
    retry_max_dimension: float = RETRY_MAX_DIMENSION,
) -> LayoutResult:
    """Smaller export plan for retrying after a render at ``budget`` failed."""
    if budget is None:
        budget = default_size_budget()
    retry_budget = SizeBudget(
        max_dimension=min(budget.max_dimension, retry_max_dimension),
        max_pixel_area=budget.max_pixel_area,
    )
    logger.warning(
        "Retrying export with longest side capped at %s", retry_budget.max_dimension
    )
    return layout(extent, params, retry_budget)
