from __future__ import annotations

from typing import Union

import numpy as np

Array = np.ndarray
Offset = Union[float, Array]

LANCZOS_LOBES = 3


def cubic_weight(t: Offset) -> Array:
    """Cubic convolution weight (a = -1 family), support (-2, 2)."""
    at = np.abs(np.asarray(t, dtype=np.float64))
    at2 = at * at
    at3 = at2 * at
    inner = 1 - 2 * at2 + at3
    outer = -4 + 8 * at - 5 * at2 + at3
    return np.where(at <= 1, inner, np.where(at < 2, outer, 0.0))


def sinc(t: Offset) -> Array:
    """Normalised sinc, sin(pi t) / (pi t) with sinc(0) = 1."""
    t = np.asarray(t, dtype=np.float64)
    # np.sinc is already the normalised variant
    return np.sinc(t)


def lanczos_weight(t: Offset, lobes: int = LANCZOS_LOBES) -> Array:
    """Windowed sinc weight: sinc(t) * sinc(t / L) for |t| < L, 0 outside the window."""
    t = np.asarray(t, dtype=np.float64)
    k = np.where(np.abs(t) < lobes, sinc(t) * sinc(t / lobes), 0.0)
    return np.where(t == 0, 1.0, k)
