from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class Fit(str, Enum):
    COVER = "cover"
    CONTAIN = "contain"
    FILL = "fill"


class Algorithm(str, Enum):
    NEAREST = "nearest"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"


DEFAULT_FIT = Fit.COVER
DEFAULT_ALGORITHM = Algorithm.LANCZOS
DEFAULT_QUALITY = 0.85

FIELDS = ("width", "height", "scale", "aspect_ratio", "fit", "algorithm", "quality")
_ALIASES = {"aspectRatio": "aspect_ratio"}

_INT_FIELDS = ("width", "height")
_FLOAT_FIELDS = ("scale", "aspect_ratio", "quality")


@dataclass(frozen=True)
class ResizeOptions:
    """Sizing and algorithm choices for one resize call.

    ``width``, ``height``, ``scale`` and ``aspect_ratio`` are independently
    optional. ``quality`` is carried for encoders only and never changes the
    resampled pixels.
    """

    width: Optional[int] = None
    height: Optional[int] = None
    scale: Optional[float] = None
    aspect_ratio: Optional[float] = None
    fit: Fit = DEFAULT_FIT
    algorithm: Algorithm = DEFAULT_ALGORITHM
    quality: float = DEFAULT_QUALITY

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ResizeOptions":
        """Build options from an already validated raw mapping."""
        opts = normalize_keys(raw)
        return cls(
            width=None if opts.get("width") is None else int(opts["width"]),
            height=None if opts.get("height") is None else int(opts["height"]),
            scale=None if opts.get("scale") is None else float(opts["scale"]),
            aspect_ratio=None if opts.get("aspect_ratio") is None else float(opts["aspect_ratio"]),
            fit=Fit(opts["fit"]) if opts.get("fit") is not None else DEFAULT_FIT,
            algorithm=Algorithm(opts["algorithm"]) if opts.get("algorithm") is not None else DEFAULT_ALGORITHM,
            quality=float(opts["quality"]) if opts.get("quality") is not None else DEFAULT_QUALITY,
        )

    def to_mapping(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "scale": self.scale,
            "aspect_ratio": self.aspect_ratio,
            "fit": getattr(self.fit, "value", self.fit),
            "algorithm": getattr(self.algorithm, "value", self.algorithm),
            "quality": self.quality,
        }


def normalize_keys(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Resolve key aliases and drop keys whose value is None."""
    out: Dict[str, Any] = {}
    for key, value in raw.items():
        key = _ALIASES.get(key, key)
        if value is not None:
            out[key] = value
    return out


def _is_number(v: Any) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v)


def _is_positive(v: Any) -> bool:
    return _is_number(v) and v > 0


def validate_options(raw: Mapping[str, Any]) -> List[str]:
    """Return every problem with ``raw`` as a human readable message.

    An empty list means the options are valid. Each rule runs on its own so
    the caller sees all problems at once.
    """
    opts = normalize_keys(raw)
    errors: List[str] = []

    for name in _INT_FIELDS:
        if name not in opts:
            continue
        v = opts[name]
        if not _is_positive(v):
            errors.append(f"{name} must be a positive number")
        elif v != int(v):
            errors.append(f"{name} must be a whole number of pixels")

    for name in ("scale", "aspect_ratio"):
        if name in opts and not _is_positive(opts[name]):
            errors.append(f"{name} must be a positive number")

    if "fit" in opts and opts["fit"] not in [f.value for f in Fit]:
        errors.append("fit must be one of: " + ", ".join(f.value for f in Fit))

    if "algorithm" in opts and opts["algorithm"] not in [a.value for a in Algorithm]:
        errors.append("algorithm must be one of: " + ", ".join(a.value for a in Algorithm))

    if "quality" in opts:
        q = opts["quality"]
        if not _is_number(q) or q < 0 or q > 1:
            errors.append("quality must be a number between 0 and 1")

    return errors


def _parse_ratio(text: str) -> float:
    for sep in ("/", ":"):
        if sep in text:
            num, den = text.split(sep, 1)
            return float(num) / float(den)
    return float(text)


def parse_resize_options(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Map string parameters (query string, form fields, CLI) onto raw options.

    Empty values are skipped. A value that does not parse is passed through
    unchanged so that ``validate_options`` reports it.
    """
    out: Dict[str, Any] = {}
    for key, value in normalize_keys(params).items():
        if key not in FIELDS:
            continue
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                continue
            try:
                if key in _INT_FIELDS:
                    value = int(value)
                elif key == "aspect_ratio":
                    value = _parse_ratio(value)
                elif key in _FLOAT_FIELDS:
                    value = float(value)
            except (ValueError, ZeroDivisionError):
                pass
        out[key] = value
    return out
