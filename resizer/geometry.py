"""Target size planning.

Reconciles explicit width/height, uniform scale, aspect ratio and the fit
policy into one concrete output size. Order matters:

1. seed from the requested width/height
2. ``scale`` overrides both
3. ``aspect_ratio`` fills in the one missing axis, if exactly one is set
4. anything still unset keeps the source size
5. the fit policy applies only when width AND height were both requested

``cover`` returns a size that would cover the requested box if it were
center-cropped. No crop is performed, so one axis can exceed the box.
"""
from __future__ import annotations

import logging
import math
from typing import NamedTuple, Optional

from .options import Fit, ResizeOptions

logger = logging.getLogger(__name__)


class TargetDimensions(NamedTuple):
    width: int
    height: int


def _round(x: float) -> int:
    # half away from zero; every value here is positive
    return max(1, int(math.floor(x + 0.5)))


def fit_cover(src_w: int, src_h: int, box_w: int, box_h: int) -> TargetDimensions:
    src_aspect = src_w / src_h
    box_aspect = box_w / box_h
    if src_aspect > box_aspect:
        return TargetDimensions(_round(box_h * src_aspect), box_h)
    return TargetDimensions(box_w, _round(box_w / src_aspect))


def fit_contain(src_w: int, src_h: int, box_w: int, box_h: int) -> TargetDimensions:
    src_aspect = src_w / src_h
    box_aspect = box_w / box_h
    if src_aspect > box_aspect:
        return TargetDimensions(box_w, _round(box_w / src_aspect))
    return TargetDimensions(_round(box_h * src_aspect), box_h)


def plan_dimensions(src_w: int, src_h: int, options: ResizeOptions) -> TargetDimensions:
    if src_w < 1 or src_h < 1:
        raise ValueError(f"source dimensions must be >= 1, got {src_w}x{src_h}")

    target_w: Optional[int] = None if options.width is None else int(options.width)
    target_h: Optional[int] = None if options.height is None else int(options.height)

    if options.scale is not None:
        target_w = _round(src_w * options.scale)
        target_h = _round(src_h * options.scale)

    if options.aspect_ratio is not None:
        if target_w is not None and target_h is None:
            target_h = _round(target_w / options.aspect_ratio)
        elif target_h is not None and target_w is None:
            target_w = _round(target_h * options.aspect_ratio)

    if target_w is None:
        target_w = src_w
    if target_h is None:
        target_h = src_h

    has_both = options.width is not None and options.height is not None
    if not has_both or options.fit == Fit.FILL:
        planned = TargetDimensions(target_w, target_h)
    elif options.fit == Fit.COVER:
        planned = fit_cover(src_w, src_h, target_w, target_h)
    else:
        planned = fit_contain(src_w, src_h, target_w, target_h)

    logger.debug(
        "planned %dx%d -> %dx%d (fit=%s, applied=%s)",
        src_w, src_h, planned.width, planned.height, options.fit, has_both,
    )
    return planned
