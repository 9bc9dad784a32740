"""Error taxonomy shared by the projection engine and the API layer."""

from __future__ import annotations

from typing import List


class ProjectionError(ValueError):
    """Base class for every failure a projection request can end in."""


class InvalidInput(ProjectionError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class InvalidRate(ProjectionError):
    def __init__(self, rate: float, reason: str = "(1 + rate) must be positive"):
        super().__init__(f"rate {rate!r} is invalid: {reason}")
        self.rate = rate
