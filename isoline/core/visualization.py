"""Rendering helpers for triangulations and contour segments.

Pure consumers of the read-only views; nothing here feeds back into the core.
"""
from __future__ import annotations

import os as _os

import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection

from .logging_utils import get_logger

logger = get_logger('isoline.viz')


def _draw_mesh(ax, triangulation, lw=0.6, color=None, alpha=1.0):
    pts, tris, _ = triangulation.to_arrays()
    if tris.size:
        ax.triplot(pts[:, 0], pts[:, 1], tris, lw=lw, color=color, alpha=alpha)
    # scale markers by vertex count
    npts = max(1, pts.shape[0])
    s = max(0.6, min(8.0, 200.0 / float(npts)))
    if pts.size:
        ax.scatter(pts[:, 0], pts[:, 1], s=s, color=color, alpha=alpha)


def plot_triangulation(triangulation, outname="mesh.png", color_by_height: bool = False):
    """Plot the triangle mesh, optionally shading faces by interpolated elevation."""
    pts, tris, z = triangulation.to_arrays()
    fig, ax = plt.subplots(figsize=(6, 6))
    if tris.size == 0:
        logger.warning('plotting empty triangulation to %s', outname)
        ax.set_title('empty mesh')
        if pts.size:
            ax.scatter(pts[:, 0], pts[:, 1], s=4, color='black')
    else:
        if color_by_height:
            tpc = ax.tripcolor(pts[:, 0], pts[:, 1], tris, z, shading='gouraud', cmap='terrain')
            fig.colorbar(tpc, ax=ax, label='elevation')
        _draw_mesh(ax, triangulation, color='k' if color_by_height else None)
        ax.set_title(outname)
    ax.set_aspect('equal')
    fig.savefig(outname, dpi=150)
    plt.close(fig)


def plot_contours(extractor, outname="contours.png", levels=None, cmap='viridis'):
    """Plot the mesh faintly and each level's contour segments in its own colour."""
    segments = extractor.segments(levels)
    fig, ax = plt.subplots(figsize=(6, 6))
    _draw_mesh(ax, extractor.triangulation, lw=0.3, color='0.7', alpha=0.8)
    if segments:
        lv = sorted(segments)
        lo, hi = lv[0], lv[-1]
        norm = _mpl.colors.Normalize(vmin=lo, vmax=hi if hi > lo else lo + 1.0)
        colormap = _mpl.colormaps[cmap]
        for level in lv:
            segs = [np.array([p.as_tuple(), q.as_tuple()]) for p, q in segments[level]]
            if not segs:
                continue
            ax.add_collection(LineCollection(segs, colors=[colormap(norm(level))], linewidths=1.2))
        fig.colorbar(_mpl.cm.ScalarMappable(norm=norm, cmap=colormap), ax=ax, label='level')
    ax.set_aspect('equal')
    ax.autoscale_view()
    ax.set_title(outname)
    fig.savefig(outname, dpi=150)
    plt.close(fig)


__all__ = ['plot_triangulation', 'plot_contours']
