from __future__ import annotations

import argparse
import logging
import sys

from resizer.geometry import plan_dimensions
from resizer.io_utils import read_image, save_image
from resizer.options import Algorithm, Fit, ResizeOptions, parse_resize_options, validate_options
from resizer.resize import resize


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Resize an image to a target size.")
    ap.add_argument("input", help="Path to input image")
    ap.add_argument("output", help="Path to output image (.png, .jpg, ...)")
    ap.add_argument("--width", help="Target width in pixels")
    ap.add_argument("--height", help="Target height in pixels")
    ap.add_argument("--scale", help="Scale factor, overrides width/height")
    ap.add_argument("--aspect-ratio", dest="aspect_ratio", help="Width/height ratio, e.g. 1.5, 16/9 or 16:9")
    ap.add_argument("--fit", choices=[f.value for f in Fit], default=None, help="Default: cover")
    ap.add_argument("--algorithm", choices=[a.value for a in Algorithm], default=None, help="Default: lanczos")
    ap.add_argument("--quality", help="Encoder quality 0..1 (JPEG only). Default: 0.85")
    ap.add_argument("--max-pixels", type=int, default=50_000_000, help="Refuse plans larger than this")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    raw = parse_resize_options(
        {name: getattr(args, name) for name in ("width", "height", "scale", "aspect_ratio", "fit", "algorithm", "quality")}
    )

    errors = validate_options(raw)
    if errors:
        for msg in errors:
            print(f"[ERR] {msg}", file=sys.stderr)
        return 2

    src = read_image(args.input)
    opts = ResizeOptions.from_mapping(raw)

    target = plan_dimensions(src.width, src.height, opts)
    if target.width * target.height > args.max_pixels:
        print(
            f"[ERR] planned size {target.width}x{target.height} exceeds --max-pixels {args.max_pixels}",
            file=sys.stderr,
        )
        return 2

    result = resize(src, opts)

    out_path = save_image(args.output, result.buffer, quality=opts.quality)

    print(f"[OK] {src.width}x{src.height} -> {result.width}x{result.height} ({opts.algorithm.value})")
    print(f"[OK] Saved to: {out_path.resolve()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
