"""Image-decoder boundary: intrinsic size of encoded image bytes.

The layout engine never sees a decode failure; unreadable data is replaced by
``FALLBACK_EXTENT`` so the editor always has something to lay out.
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from framing.models import ImageExtent


logger = logging.getLogger(__name__)

FALLBACK_EXTENT = ImageExtent(800.0, 800.0)


def safe_extent(width: Optional[float], height: Optional[float]) -> ImageExtent:
    """``ImageExtent(width, height)``, or the fallback when either side is unusable."""
    if width is None or height is None:
        return FALLBACK_EXTENT
    try:
        return ImageExtent(float(width), float(height))
    except (TypeError, ValueError) as exc:
        logger.warning("Invalid image size %sx%s (%s), using fallback", width, height, exc)
        return FALLBACK_EXTENT


def extent_from_bytes(data: bytes) -> ImageExtent:
    """Read the pixel size from the image header without decoding pixels."""
    if not data:
        logger.warning("Empty image data, using %sx%s fallback", FALLBACK_EXTENT.width, FALLBACK_EXTENT.height)
        return FALLBACK_EXTENT
    try:
        with Image.open(io.BytesIO(data)) as im:
            width, height = im.size
    except UnidentifiedImageError:
        logger.warning("Unrecognised image data (%d bytes), using fallback size", len(data))
        return FALLBACK_EXTENT
    except (OSError, Image.DecompressionBombError) as exc:
        logger.warning("Could not read image size: %s; using fallback size", exc)
        return FALLBACK_EXTENT
    return safe_extent(width, height)
