from __future__ import annotations

from typing import Iterable, List


class ResizeError(Exception):
    """Base class for errors raised by the resize core."""


class ValidationError(ResizeError, ValueError):
    """Resize options were rejected. Carries every message, not just the first."""

    def __init__(self, messages: Iterable[str]):
        self.messages: List[str] = list(messages)
        super().__init__("; ".join(self.messages))


class UnsupportedAlgorithm(ResizeError, ValueError):
    def __init__(self, algorithm: object):
        self.algorithm = algorithm
        super().__init__(f"Unknown algorithm: {algorithm!r}")
