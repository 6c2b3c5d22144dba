"""Lightweight sample and mesh file I/O.

- read_samples / write_samples: delimited "x,y,z" rows, no header, no quoting
- write_vtk: export a built triangulation in legacy VTK format for ParaView/VisIt
"""
from __future__ import annotations

import warnings
from typing import Dict, Optional

import numpy as np

from .heightmap import HeightMap


def read_samples(filepath: str, delimiter: str = ',') -> HeightMap:
    """Read elevation samples from a delimited text file.

    Parameters
    ----------
    filepath : str
        Path to a file with one ``x,y,z`` row per sample.
    delimiter : str, default=','
        Field separator.

    Returns
    -------
    HeightMap
        Samples in file order.

    Raises
    ------
    ValueError
        If a row does not hold exactly three numeric fields.
    FileNotFoundError
        If the file doesn't exist.
    """
    samples = []
    with open(filepath, 'r') as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            parts = line.split(delimiter)
            if len(parts) != 3:
                raise ValueError(f"{filepath}:{lineno}: expected 3 fields, got {len(parts)}")
            try:
                x, y, z = (float(v) for v in parts)
            except ValueError as e:
                raise ValueError(f"{filepath}:{lineno}: {e}") from e
            samples.append((x, y, z))
    return HeightMap.from_samples(samples)


def write_samples(filepath: str, heights: HeightMap, delimiter: str = ',') -> None:
    """Write samples as ``x,y,z`` rows (round-trip exact via ``repr``)."""
    with open(filepath, 'w') as f:
        for p, h in heights.items():
            f.write(delimiter.join((repr(p.x), repr(p.y), repr(float(h)))) + "\n")


def write_vtk(filepath: str,
              triangulation,
              lift: bool = False,
              point_data: Optional[Dict[str, np.ndarray]] = None,
              title: str = "isoline mesh") -> None:
    """Write a built triangulation as a legacy ASCII VTK unstructured grid.

    Every sample becomes a VTK point (unused samples included, so point ids
    match ``triangulation.to_arrays()``) and every triangle a VTK_TRIANGLE
    cell. The elevations are always written as the ``elevation`` point scalar.

    Parameters
    ----------
    filepath : str
        Output .vtk path.
    triangulation : Triangulation
        Source mesh; an unbuilt one writes points only.
    lift : bool, default=False
        Use the elevation as the z coordinate instead of 0, for a 3D terrain view.
    point_data : dict, optional
        Extra per-sample scalar fields, in HeightMap order. Fields whose shape
        is not ``(n_samples,)`` are skipped with a warning.
    title : str
        Dataset title line.

    Examples
    --------
    >>> write_vtk('terrain.vtk', triangulation, lift=True)
    """
    pts, tris, z = triangulation.to_arrays()
    coords = np.column_stack([pts, z if lift else np.zeros(len(pts))])
    fields = {'elevation': z}
    for name, data in (point_data or {}).items():
        data = np.asarray(data, dtype=np.float64)
        if name in fields or data.shape != z.shape:
            warnings.warn(f"Skipping point_data['{name}'] with shape {data.shape}")
            continue
        fields[name] = data

    with open(filepath, 'w') as f:
        f.write("# vtk DataFile Version 2.0\n")
        f.write(f"{title}\n")
        f.write("ASCII\n")
        f.write("DATASET UNSTRUCTURED_GRID\n")

        f.write(f"POINTS {len(coords)} double\n")
        for x, y, h in coords:
            f.write(f"{x:.16e} {y:.16e} {h:.16e}\n")

        # each cell row: vertex count then the three point ids
        f.write(f"\nCELLS {len(tris)} {4 * len(tris)}\n")
        for a, b, c in tris:
            f.write(f"3 {a} {b} {c}\n")

        # 5 = VTK_TRIANGLE
        f.write(f"\nCELL_TYPES {len(tris)}\n")
        f.write("5\n" * len(tris))

        f.write(f"\nPOINT_DATA {len(coords)}\n")
        for name, data in fields.items():
            f.write(f"SCALARS {name} double 1\n")
            f.write("LOOKUP_TABLE default\n")
            for val in data:
                f.write(f"{val:.16e}\n")


__all__ = ['read_samples', 'write_samples', 'write_vtk']
