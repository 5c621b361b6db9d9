"""Shared fixtures: small synthetic RGBA images.

Patterns mirror what a resize service gets fed in practice: flat fills,
hard vertical edges, smooth gradients and worst-case checkerboards.
"""

import numpy as np
import pytest

from resizer.buffer import PixelBuffer

SOLID_COLOR = (255, 87, 51, 255)


def make_image(width: int, height: int, kind: str = "solid") -> PixelBuffer:
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[..., 3] = 255

    if kind == "solid":
        img[...] = SOLID_COLOR
    elif kind == "rgb":
        third = max(1, width // 3)
        img[:, :third, 0] = 255
        img[:, third : 2 * third, 1] = 255
        img[:, 2 * third :, 2] = 255
    elif kind == "gradient":
        ratio = np.arange(height, dtype=np.float64) / height
        img[..., 0] = np.round(255 * (1 - ratio))[:, None]
        img[..., 1] = np.round(255 * ratio)[:, None]
        img[..., 2] = np.round(255 * ratio)[:, None]
    elif kind == "checkerboard":
        square = max(1, width // 8)
        yy, xx = np.mgrid[0:height, 0:width]
        white = ((xx // square + yy // square) % 2) == 0
        img[white, :3] = 255
    else:
        raise ValueError(f"unknown test image kind: {kind}")

    return PixelBuffer.from_array(img)


@pytest.fixture
def solid_image() -> PixelBuffer:
    return make_image(16, 12, "solid")


@pytest.fixture
def gradient_image() -> PixelBuffer:
    return make_image(20, 20, "gradient")


@pytest.fixture
def checkerboard_2x2() -> PixelBuffer:
    """Black/white 2x2 with fully opaque alpha."""
    img = np.array(
        [
            [[0, 0, 0, 255], [255, 255, 255, 255]],
            [[255, 255, 255, 255], [0, 0, 0, 255]],
        ],
        dtype=np.uint8,
    )
    return PixelBuffer.from_array(img)


@pytest.fixture
def pixel_checkerboard() -> PixelBuffer:
    """Alternating 0/255 on every channel, including alpha, one pixel per square."""
    yy, xx = np.mgrid[0:9, 0:9]
    on = ((xx + yy) % 2 == 0).astype(np.uint8) * 255
    return PixelBuffer.from_array(np.repeat(on[..., None], 4, axis=2))
