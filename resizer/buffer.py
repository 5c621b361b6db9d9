from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

Array = np.ndarray
RGBA = Tuple[int, int, int, int]

CHANNELS = 4


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """RGBA8 pixel grid, row-major, no padding between rows.

    ``data`` is a flat read-only uint8 array of ``width * height * 4`` bytes.
    The constructor copies whatever it is given, so a buffer never shares
    memory with the caller and can not be changed after it is built.
    """

    width: int
    height: int
    data: Array

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"buffer dimensions must be >= 1, got {self.width}x{self.height}")

        flat = np.array(self.data, dtype=np.uint8).ravel()
        expected = self.width * self.height * CHANNELS
        if flat.size != expected:
            raise ValueError(
                f"buffer holds {flat.size} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )
        flat.flags.writeable = False
        object.__setattr__(self, "data", flat)

    @classmethod
    def from_array(cls, img: Array) -> "PixelBuffer":
        """Build a buffer from an (H,W), (H,W,2), (H,W,3) or (H,W,4) array.

        Gray and RGB inputs are promoted to RGBA with an opaque alpha channel.
        """
        img = np.asarray(img)
        if img.dtype != np.uint8:
            img = np.clip(np.round(img), 0, 255).astype(np.uint8)

        if img.ndim == 2:
            img = img[..., None]
        if img.ndim != 3:
            raise ValueError(f"Unsupported image shape: {img.shape}")

        h, w, c = img.shape
        if c == 4:
            rgba = img
        elif c == 3:
            rgba = np.concatenate([img, np.full((h, w, 1), 255, np.uint8)], axis=2)
        elif c == 2:
            rgba = np.concatenate([np.repeat(img[..., :1], 3, axis=2), img[..., 1:]], axis=2)
        elif c == 1:
            rgba = np.concatenate([np.repeat(img, 3, axis=2), np.full((h, w, 1), 255, np.uint8)], axis=2)
        else:
            raise ValueError(f"Unsupported channel count: {c}")

        return cls(width=w, height=h, data=rgba)

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes) -> "PixelBuffer":
        return cls(width=width, height=height, data=np.frombuffer(data, dtype=np.uint8))

    @classmethod
    def solid(cls, width: int, height: int, rgba: Sequence[int]) -> "PixelBuffer":
        color = np.asarray(rgba, dtype=np.uint8)
        return cls(width=width, height=height, data=np.tile(color, width * height))

    @property
    def pixels(self) -> Array:
        """(H, W, 4) read-only view over ``data``."""
        return self.data.reshape(self.height, self.width, CHANNELS)

    def pixel(self, x: int, y: int) -> RGBA:
        r, g, b, a = self.pixels[y, x]
        return int(r), int(g), int(b), int(a)

    def to_bytes(self) -> bytes:
        return self.data.tobytes()
