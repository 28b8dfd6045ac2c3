"""Layout engine for matted and framed image compositions.

The package is organized around:

- value types (`models.py`)
- the layout engine with its preview/export fit strategies (`geometry.py`)
- aspect-ratio strings (`ratios.py`)
- the editor-facing validation boundary (`params.py`, `gestures.py`)
- decoder and serialization boundaries (`extent.py`, `serialization.py`)
"""

from framing.geometry import (
    content_size,
    export_layout,
    fallback_export_layout,
    fit_to_size_budget,
    fit_to_viewport,
    layout,
    preview_layout,
    reference_scale,
)
from framing.models import (
    CompositionParams,
    ImageExtent,
    LayoutResult,
    Size,
    SizeBudget,
    ViewportBudget,
)
from framing.ratios import parse_ratio, reverse_ratio

__all__ = [
    "CompositionParams",
    "ImageExtent",
    "LayoutResult",
    "Size",
    "SizeBudget",
    "ViewportBudget",
    "content_size",
    "export_layout",
    "fallback_export_layout",
    "fit_to_size_budget",
    "fit_to_viewport",
    "layout",
    "parse_ratio",
    "preview_layout",
    "reference_scale",
    "reverse_ratio",
]
