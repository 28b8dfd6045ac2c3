"""JSON-ready views of layouts and saved editor settings."""

from __future__ import annotations

import math
from typing import Any, Dict

from framing.models import Box, LayoutResult, Size
from framing.params import EditSettings
from framing.ratios import normalize_ratio


def _size(size: Size) -> Dict[str, float]:
    return {"width": float(size.width), "height": float(size.height)}


def _box(box: Box) -> list:
    return [float(v) for v in box]


def layout_to_dict(result: LayoutResult) -> Dict[str, Any]:
    return {
        "canvas": _size(result.total_rect),
        "content": _size(result.content_rect),
        "matte": {
            **_size(result.matte_outer_rect),
            "thickness": float(result.matte_thickness),
            "box": _box(result.matte_box),
        },
        "image": {
            **_size(result.image_rect),
            "box": _box(result.image_box),
        },
        "frame_thickness": float(result.frame_thickness),
        "reference_scale": float(result.reference_scale),
        "scale": float(result.scale_factor_applied),
    }


def settings_to_dict(settings: EditSettings) -> Dict[str, Any]:
    return {
        "matte_width": settings.matte_width,
        "frame_width": settings.frame_width,
        "frame_ratio": settings.frame_ratio,
        "frame_enabled": settings.frame_enabled,
        "scale": settings.scale,
        "rotation_degrees": settings.rotation_degrees,
    }


def _number_or_default(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key)
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def settings_from_dict(data: Dict[str, Any]) -> EditSettings:
    """Restore saved settings; missing, null or malformed keys take editor defaults."""
    defaults = EditSettings()
    ratio = data.get("frame_ratio")
    enabled = data.get("frame_enabled")
    return EditSettings(
        matte_width=_number_or_default(data, "matte_width", defaults.matte_width),
        frame_width=_number_or_default(data, "frame_width", defaults.frame_width),
        frame_ratio=normalize_ratio(ratio if isinstance(ratio, str) else None),
        frame_enabled=enabled if isinstance(enabled, bool) else defaults.frame_enabled,
        scale=_number_or_default(data, "scale", defaults.scale),
        rotation_degrees=_number_or_default(data, "rotation_degrees", defaults.rotation_degrees),
    )


def edit_comment(settings: EditSettings) -> str:
    """Metadata comment embedded in exported images."""
    return (
        f"Edited with Framing - Matte:{settings.matte_width:g}px "
        f"Frame:{settings.frame_width:g}px Ratio:{settings.frame_ratio}"
    )
