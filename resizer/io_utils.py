from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
import imageio.v2 as imageio

from .buffer import PixelBuffer
from .options import DEFAULT_QUALITY

Array = np.ndarray
PathLike = Union[str, Path]

LOSSY_SUFFIXES = (".jpg", ".jpeg")


def to_rgba(img: Array) -> PixelBuffer:
    # animated inputs: keep the first frame
    if img.ndim == 4:
        img = img[0]
    return PixelBuffer.from_array(img)


def read_image(path: PathLike) -> PixelBuffer:
    return to_rgba(imageio.imread(path))


def decode_image(data: bytes) -> PixelBuffer:
    return to_rgba(imageio.imread(io.BytesIO(data)))


def jpeg_quality(quality: float) -> int:
    """Map the 0..1 quality option onto the encoder's 0..100 scale."""
    return int(np.clip(np.floor(quality * 100 + 0.5), 0, 100))


def save_image(path: PathLike, buf: PixelBuffer, quality: float = DEFAULT_QUALITY) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() in LOSSY_SUFFIXES:
        # JPEG has no alpha channel
        imageio.imwrite(path, buf.pixels[..., :3], quality=jpeg_quality(quality))
    else:
        imageio.imwrite(path, buf.pixels)
    return path


def encode_png(buf: PixelBuffer) -> bytes:
    return imageio.imwrite("<bytes>", buf.pixels, format="png")
