"""Plotting helpers for decompositions."""
from __future__ import annotations

import os as _os
from typing import Optional, Sequence

import matplotlib as _mpl
# Non-interactive backend in headless environments, before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as _PolygonPatch

from .geometry import Point
from .logging_utils import get_logger

logger = get_logger('navdecomp.viz')

__all__ = ['plot_decomposition']


def plot_decomposition(bounding_box: Sequence[Point], obstacles: Sequence[Sequence[Point]],
                       polygons: Sequence[Sequence[Point]], outname: str = "decomposition.png",
                       triangles: Optional[Sequence[Sequence[Point]]] = None,
                       label_cells: bool = True, title: Optional[str] = None) -> str:
    """Draw the walkable frame, the obstacles and the convex cells.

    Args:
        bounding_box: outer rectangle
        obstacles: hole polygons, drawn hatched in grey
        polygons: convex cells, each filled with its own color
        outname: output image path
        triangles: optional raw triangulation drawn as thin dashed lines
        label_cells: if True, write the cell index at each cell's vertex mean
        title: figure title (defaults to a cell count)

    Returns the path written.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    cmap = plt.get_cmap('tab20')
    for k, poly in enumerate(polygons):
        ax.add_patch(_PolygonPatch(poly, closed=True, facecolor=cmap(k % 20), edgecolor='black',
                                   linewidth=1.0, alpha=0.6))
        if label_cells:
            cx = sum(p[0] for p in poly) / len(poly)
            cy = sum(p[1] for p in poly) / len(poly)
            ax.text(cx, cy, str(k), ha='center', va='center', fontsize=8)
    if triangles:
        for tri in triangles:
            xs = [p[0] for p in tri] + [tri[0][0]]
            ys = [p[1] for p in tri] + [tri[0][1]]
            ax.plot(xs, ys, color='0.4', linewidth=0.5, linestyle='--')
    for obstacle in obstacles:
        ax.add_patch(_PolygonPatch(obstacle, closed=True, facecolor='0.7', edgecolor='0.2',
                                   hatch='//', linewidth=1.2))
    xs = [p[0] for p in bounding_box] + [bounding_box[0][0]]
    ys = [p[1] for p in bounding_box] + [bounding_box[0][1]]
    ax.plot(xs, ys, color=(0.85, 0.2, 0.2), linewidth=1.8)

    ax.set_title(title or f"{len(polygons)} convex cells")
    ax.set_aspect('equal')
    ax.autoscale_view()
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug("wrote %s", outname)
    return outname
