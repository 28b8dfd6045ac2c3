import argparse
import json
import logging
import math
from typing import Optional, Sequence, Tuple

from framing.config import RETRY_MAX_DIMENSION, default_size_budget
from framing.geometry import export_layout, fallback_export_layout, layout
from framing.models import ImageExtent, SizeBudget, ViewportBudget
from framing.params import EditSettings
from framing.serialization import layout_to_dict


def _viewport(value: str) -> Tuple[float, float]:
    parts = value.lower().split("x")
    try:
        width, height = (float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid viewport '{value}', expected WxH") from None
    if not all(math.isfinite(side) and side > 0 for side in (width, height)):
        raise argparse.ArgumentTypeError("Viewport sides must be finite positive numbers")
    return width, height


def _number(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number") from None
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"'{value}' must be finite")
    return number


def _positive(value: str) -> float:
    number = _number(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' must be positive")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute matte/frame layout rectangles for an image and print them as JSON.")
    parser.add_argument("--width", type=_positive, required=True, help="Intrinsic image width in pixels")
    parser.add_argument("--height", type=_positive, required=True, help="Intrinsic image height in pixels")
    parser.add_argument("--matte", type=_number, default=0.0, help="Matte width in reference units (0-30)")
    parser.add_argument("--frame", type=_number, default=0.0, help="Frame width in reference units (up to 150)")
    parser.add_argument("--ratio", default="1:1", help="Frame aspect ratio W:H (default: 1:1)")
    parser.add_argument("--no-frame", action="store_true", help="Disable the frame (matte only)")
    parser.add_argument("--viewport", type=_viewport, help="Preview mode: fit into a WxH viewport")
    parser.add_argument("--max-dimension", type=_positive, help="Export mode: longest side limit (default: 8192 or FRAMING_MAX_DIMENSION)")
    parser.add_argument("--max-pixels", type=_positive, help="Export mode: pixel count limit (default: 50000000 or FRAMING_MAX_PIXELS)")
    parser.add_argument("--fallback", action="store_true", help=f"Export mode: use the retry plan capped at {RETRY_MAX_DIMENSION:g}px")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log geometry details")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.viewport and (args.max_dimension or args.max_pixels or args.fallback):
        parser.error("--viewport cannot be combined with export options")

    settings = EditSettings(frame_ratio=args.ratio, frame_enabled=not args.no_frame)
    settings = settings.with_matte(args.matte).with_frame(args.frame)
    params = settings.to_params()
    extent = ImageExtent(args.width, args.height)

    if args.viewport:
        result = layout(extent, params, ViewportBudget(*args.viewport))
    else:
        defaults = default_size_budget()
        budget = SizeBudget(
            max_dimension=args.max_dimension or defaults.max_dimension,
            max_pixel_area=args.max_pixels or defaults.max_pixel_area,
        )
        if args.fallback:
            result = fallback_export_layout(extent, params, budget)
        else:
            result = export_layout(extent, params, budget)

    print(json.dumps(layout_to_dict(result), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
