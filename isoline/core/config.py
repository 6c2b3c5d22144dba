"""Configuration objects for triangulation and contour extraction."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import SUPER_TRIANGLE_MARGIN


@dataclass
class TriangulationConfig:
    """Parameters for :meth:`Triangulation.build`.

    Attributes
    ----------
    super_margin : float
        Positive margin added to the radius of the circle enclosing the
        sample bounds before the super-triangle is circumscribed around it.
    validate : bool
        Run the empty-circumcircle check after building and log any violation.
    """
    super_margin: float = SUPER_TRIANGLE_MARGIN
    validate: bool = False

    def __post_init__(self):
        if not self.super_margin > 0.0:
            raise ValueError(f"super_margin must be positive, got {self.super_margin}")


@dataclass
class ContourConfig:
    bands: int = 10

    def __post_init__(self):
        if self.bands < 1:
            raise ValueError(f"bands must be >= 1, got {self.bands}")


__all__ = ['TriangulationConfig', 'ContourConfig']
