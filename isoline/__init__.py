"""Public package API for the isoline toolkit.

Delaunay triangulation of scattered elevation samples and iso-elevation
contour crossings over the resulting mesh. This facade provides a flat import
surface over the internal ``isoline.core`` package; the plotting module is
loaded lazily so ``import isoline`` does not pull in matplotlib.

Example
-------
    from isoline import HeightMap, Triangulation, ContourExtractor

    heights = HeightMap.from_samples([(0, 0, 0), (10, 0, 0), (10, 10, 10), (0, 10, 10)])
    tri = Triangulation(heights)
    tri.build()
    contours = ContourExtractor(tri)
    contours.extract(4)
"""
from importlib import import_module as _imp
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound

try:
    __version__ = _pkg_version("isoline-mesh")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.geometry import Point, Edge, Circle
from .core.triangle import Triangle
from .core.heightmap import HeightMap
from .core.triangulation import Triangulation, TriangulationError
from .core.contour import ContourExtractor, contour_levels
from .core.config import TriangulationConfig, ContourConfig
from .core.stats import BuildStats, format_stats_table
from .core.io import read_samples, write_samples, write_vtk
from .core.logging_utils import configure_logging, get_logger
from .core import constants, diagnostics


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return object.__getattribute__(self, '_m')
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


visualization = _lazy_module('isoline.core.visualization')

__all__ = [
    '__version__',
    # primitives
    'Point', 'Edge', 'Circle', 'Triangle',
    # core
    'HeightMap', 'Triangulation', 'TriangulationError', 'ContourExtractor', 'contour_levels',
    # configuration / stats
    'TriangulationConfig', 'ContourConfig', 'BuildStats', 'format_stats_table',
    # I/O
    'read_samples', 'write_samples', 'write_vtk',
    # logging
    'configure_logging', 'get_logger',
    # namespaces
    'constants', 'diagnostics', 'visualization',
]
