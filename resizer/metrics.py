from __future__ import annotations

import math

import numpy as np

from .buffer import PixelBuffer


def _as_float(buf: PixelBuffer) -> np.ndarray:
    return buf.pixels.astype(np.float64)


def mse(a: PixelBuffer, b: PixelBuffer) -> float:
    if (a.width, a.height) != (b.width, b.height):
        raise ValueError(f"Size mismatch: {a.width}x{a.height} vs {b.width}x{b.height}")
    return float(np.mean((_as_float(a) - _as_float(b)) ** 2))


def psnr(a: PixelBuffer, b: PixelBuffer, max_value: float = 255.0) -> float:
    m = mse(a, b)
    if m == 0:
        return float("inf")
    return float(10.0 * math.log10((max_value ** 2) / m))
