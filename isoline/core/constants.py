"""Central numerical tolerances and small geometry constants.

This module centralizes the few numeric thresholds used across the codebase so
they can be tuned consistently and referenced without scattering literals.
Predicates on the triangulation itself (containment, circumcircle tests) are
exact float comparisons and do not use these tolerances.
"""
from __future__ import annotations

# Geometry tolerances
EPS_AREA: float = 1e-12           # minimum positive (absolute) triangle area
EPS_DELAUNAY: float = 1e-9        # relative slack used by post-build Delaunay validation

# Bootstrapping
SUPER_TRIANGLE_MARGIN: float = 1.0  # added to the bounding-circle radius of the samples

__all__ = [
    'EPS_AREA',
    'EPS_DELAUNAY',
    'SUPER_TRIANGLE_MARGIN',
]
