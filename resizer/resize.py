from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple, Union

from .buffer import PixelBuffer
from .errors import UnsupportedAlgorithm, ValidationError
from .geometry import plan_dimensions
from .interpolation import resample
from .options import Algorithm, ResizeOptions, validate_options

logger = logging.getLogger(__name__)

OptionsLike = Union[ResizeOptions, Mapping[str, Any]]


class ResizeResult(NamedTuple):
    buffer: PixelBuffer
    width: int
    height: int


def resize(src: PixelBuffer, options: OptionsLike) -> ResizeResult:
    """Validate options, plan the output size and resample ``src``.

    ``options`` is either a raw mapping (validated here, raising
    ``ValidationError`` with every message) or a ready ``ResizeOptions``.
    The returned width/height are the planned size, which under ``cover``
    or ``contain`` can differ from the requested width/height.
    """
    if isinstance(options, ResizeOptions):
        opts = options
        raw = opts.to_mapping()
        # algorithm is a contract check below, not a validation message
        raw.pop("algorithm")
        errors = validate_options(raw)
    else:
        errors = validate_options(options)
        opts = ResizeOptions.from_mapping(options) if not errors else None

    if errors:
        raise ValidationError(errors)

    if opts.algorithm not in [a.value for a in Algorithm]:
        raise UnsupportedAlgorithm(opts.algorithm)
    # records may carry plain strings or whole-number floats
    opts = ResizeOptions.from_mapping(opts.to_mapping())

    target = plan_dimensions(src.width, src.height, opts)
    logger.debug(
        "resizing %dx%d -> %dx%d with %s",
        src.width, src.height, target.width, target.height, opts.algorithm,
    )

    out = resample(src, target.width, target.height, opts.algorithm)
    return ResizeResult(buffer=out, width=out.width, height=out.height)
