from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

import matplotlib.pyplot as plt

from resizer.buffer import PixelBuffer
from resizer.interpolation import resample
from resizer.io_utils import read_image, save_image
from resizer.metrics import mse, psnr
from resizer.geometry import plan_dimensions
from resizer.options import Algorithm, ResizeOptions


def make_grid(original: PixelBuffer, variants: list[tuple[str, PixelBuffer]], out_path: Path) -> None:
    panels = [(f"original {original.width}x{original.height}", original)] + [
        (f"{name} {buf.width}x{buf.height}", buf) for name, buf in variants
    ]
    fig, axes = plt.subplots(1, len(panels), figsize=(3.6 * len(panels), 3.6), squeeze=False)
    for ax, (title, buf) in zip(axes[0], panels):
        ax.set_title(title)
        # show pixels as-is, no display smoothing on top of the resampler
        ax.imshow(buf.pixels, interpolation="nearest")
        ax.axis("off")

    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=180)
    plt.close(fig)


def round_trip(src: PixelBuffer, scale: float, algorithm: Algorithm) -> tuple[PixelBuffer, PixelBuffer, float]:
    """Resample to ``scale`` and back. Returns (scaled, restored, seconds spent scaling)."""
    tw, th = plan_dimensions(src.width, src.height, ResizeOptions(scale=scale))

    t0 = time.perf_counter()
    scaled = resample(src, tw, th, algorithm)
    elapsed = time.perf_counter() - t0

    back = resample(scaled, src.width, src.height, algorithm)
    return scaled, back, elapsed


def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--image", required=True)
    ap.add_argument("--scales", nargs="+", type=float, default=[0.3, 2.3])
    ap.add_argument("--algorithms", nargs="+", choices=[a.value for a in Algorithm], default=[a.value for a in Algorithm])
    ap.add_argument("--outdir", default="results")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    img = read_image(args.image)
    outdir = Path(args.outdir)
    figdir = outdir / "figures"
    tbldir = outdir / "tables"
    figdir.mkdir(parents=True, exist_ok=True)
    tbldir.mkdir(parents=True, exist_ok=True)

    rows = []
    for s in args.scales:
        variants = []
        for name in args.algorithms:
            algorithm = Algorithm(name)
            scaled, back, elapsed = round_trip(img, s, algorithm)

            variants.append((f"{name} {s}x", scaled))
            save_image(outdir / f"resize_{name}_{s}x.png", scaled)
            rows.append((name, s, scaled.width, scaled.height, elapsed, mse(img, back), psnr(img, back)))

        make_grid(img, variants, figdir / f"grid_resize_{s}x.png")

    csv_path = tbldir / "resize_benchmark.csv"
    with open(csv_path, "w", encoding="utf-8") as f:
        f.write("algorithm,scale,width,height,seconds,mse_round_trip,psnr_round_trip\n")
        for name, s, w, h, sec, m, p in rows:
            f.write(f"{name},{s},{w},{h},{sec:.4f},{m:.6f},{p:.4f}\n")

    print(f"[OK] CSV:  {csv_path.resolve()}")
    print(f"[OK] Saved to: {outdir.resolve()}")


if __name__ == "__main__":
    main()
