from __future__ import annotations

from typing import Callable, Tuple

import numpy as np

from .buffer import CHANNELS, PixelBuffer
from .errors import UnsupportedAlgorithm
from .kernels import LANCZOS_LOBES, cubic_weight, lanczos_weight
from .options import Algorithm

Array = np.ndarray
Kernel = Callable[[Array], Array]

CUBIC_OFFSETS = np.arange(-1, 3)
LANCZOS_OFFSETS = np.arange(-(LANCZOS_LOBES - 1), LANCZOS_LOBES + 1)


def _clip_uint8(x: Array) -> Array:
    # round half away from zero; negatives clip to 0 either way
    return np.clip(np.floor(x + 0.5), 0, 255).astype(np.uint8)


def _check_target(target_w: int, target_h: int) -> None:
    if target_w < 1 or target_h < 1:
        raise ValueError(f"target dimensions must be >= 1, got {target_w}x{target_h}")


def _map_coords(out_len: int, src_len: int) -> Array:
    # edge-anchored: first and last output samples land on first and last source pixels
    out = np.arange(out_len, dtype=np.float64)
    return out * (src_len - 1) / max(out_len - 1, 1)


def resample_nearest(src: PixelBuffer, target_w: int, target_h: int) -> PixelBuffer:
    _check_target(target_w, target_h)
    # not edge-anchored on purpose: floor(x * src / target)
    xi = (np.arange(target_w) * src.width) // target_w
    yi = (np.arange(target_h) * src.height) // target_h
    out = src.pixels[yi[:, None], xi[None, :]]
    return PixelBuffer(target_w, target_h, out)


def resample_bilinear(src: PixelBuffer, target_w: int, target_h: int) -> PixelBuffer:
    _check_target(target_w, target_h)
    pix = src.pixels

    x = _map_coords(target_w, src.width)
    y = _map_coords(target_h, src.height)
    x0 = np.floor(x).astype(np.intp)
    y0 = np.floor(y).astype(np.intp)
    x1 = np.minimum(x0 + 1, src.width - 1)
    y1 = np.minimum(y0 + 1, src.height - 1)
    wx = (x - x0)[:, None]

    out = np.empty((target_h, target_w, CHANNELS), dtype=np.uint8)
    for row in range(target_h):
        top = pix[y0[row]].astype(np.float64)
        bottom = pix[y1[row]].astype(np.float64)
        wy = y[row] - y0[row]

        val = (
            top[x0] * (1 - wx) * (1 - wy)
            + top[x1] * wx * (1 - wy)
            + bottom[x0] * (1 - wx) * wy
            + bottom[x1] * wx * wy
        )
        out[row] = _clip_uint8(val)

    return PixelBuffer(target_w, target_h, out)


def _taps(out_len: int, src_len: int, offsets: Array, kernel: Kernel) -> Tuple[Array, Array]:
    """Clamped neighbour indices and their weights, both shaped (len(offsets), out_len)."""
    coords = _map_coords(out_len, src_len)
    base = np.floor(coords).astype(np.intp)
    idx = np.clip(base[None, :] + offsets[:, None], 0, src_len - 1)
    # weight is taken at the clamped position, so edge taps repeat
    weights = kernel(coords[None, :] - idx)
    return idx, weights


def _convolve(
    src: PixelBuffer, target_w: int, target_h: int, kernel: Kernel, offsets: Array
) -> PixelBuffer:
    _check_target(target_w, target_h)
    pix = src.pixels

    xi, xw = _taps(target_w, src.width, offsets, kernel)
    yi, yw = _taps(target_h, src.height, offsets, kernel)

    out = np.empty((target_h, target_w, CHANNELS), dtype=np.uint8)
    for row in range(target_h):
        acc = np.zeros((target_w, CHANNELS), dtype=np.float64)
        wsum = np.zeros(target_w, dtype=np.float64)

        for m in range(len(offsets)):
            line = pix[yi[m, row]].astype(np.float64)
            wy = yw[m, row]
            for n in range(len(offsets)):
                w = wy * xw[n]
                acc += line[xi[n]] * w[:, None]
                wsum += w

        val = np.zeros_like(acc)
        np.divide(acc, wsum[:, None], out=val, where=wsum[:, None] != 0)
        out[row] = _clip_uint8(val)

    return PixelBuffer(target_w, target_h, out)


def resample_bicubic(src: PixelBuffer, target_w: int, target_h: int) -> PixelBuffer:
    """Cubic convolution over a 4x4 neighbourhood, normalised by the weight sum."""
    return _convolve(src, target_w, target_h, cubic_weight, CUBIC_OFFSETS)


def resample_lanczos(src: PixelBuffer, target_w: int, target_h: int) -> PixelBuffer:
    """3-lobe windowed sinc over a 6x6 neighbourhood.

    Same family as Lanczos-3 but not bit-identical to any library's version.
    """
    return _convolve(src, target_w, target_h, lanczos_weight, LANCZOS_OFFSETS)


def resample(
    src: PixelBuffer, target_w: int, target_h: int, algorithm: Algorithm = Algorithm.LANCZOS
) -> PixelBuffer:
    if algorithm == Algorithm.NEAREST:
        return resample_nearest(src, target_w, target_h)
    if algorithm == Algorithm.BILINEAR:
        return resample_bilinear(src, target_w, target_h)
    if algorithm == Algorithm.BICUBIC:
        return resample_bicubic(src, target_w, target_h)
    if algorithm == Algorithm.LANCZOS:
        return resample_lanczos(src, target_w, target_h)

    raise UnsupportedAlgorithm(algorithm)
