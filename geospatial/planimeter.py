"""
Batch Perimeter and Area for Complete Vertex Sequences.

Convenience wrappers for callers that already hold the full boundary
(e.g. a ring read from a file) rather than building it interactively.
They feed the vertices through a fresh `PolygonArea`, so batch and
interactive results agree to the last bit.
"""

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from common.types import PolygonResult
from geospatial.geodesic_engine import GeodesicEngine
from geospatial.polygon_area import PolygonArea


def _as_vertex_arrays(lats: ArrayLike, lons: ArrayLike):
    lats = np.asarray(lats, dtype=np.float64)
    lons = np.asarray(lons, dtype=np.float64)
    if lats.ndim != 1 or lons.ndim != 1:
        raise ValueError(
            f"Coordinates must be one-dimensional, got shapes "
            f"{lats.shape} and {lons.shape}"
        )
    if lats.shape != lons.shape:
        raise ValueError(
            f"Latitude and longitude arrays differ in length: "
            f"{len(lats)} vs {len(lons)}"
        )
    return lats, lons


def polygon_area_perimeter(
    lats: ArrayLike,
    lons: ArrayLike,
    polyline: bool = False,
    reverse: bool = False,
    sign: bool = True,
    engine: Optional[GeodesicEngine] = None
) -> PolygonResult:
    """Compute the perimeter and area of a vertex sequence.

    Parameters
    ----------
    lats, lons : array_like
        Vertex latitudes and longitudes in degrees. The ring is closed
        implicitly; do not repeat the first vertex.
    polyline : bool
        Treat the vertices as an open polyline.
    reverse, sign : bool
        As for `PolygonArea.compute`.
    engine : GeodesicEngine, optional
        Geodesic solver (default: WGS84 via geographiclib).

    Returns
    -------
    PolygonResult
        Vertex count, perimeter in meters and area in square meters.

    Raises
    ------
    ValueError
        If the coordinate arrays are not one-dimensional or differ in
        length.

    Examples
    --------
    >>> result = polygon_area_perimeter([89, 89, 89, 89], [0, 90, 180, 270])
    >>> print(f"{result.area:.0f}")
    24952305678
    """
    lats, lons = _as_vertex_arrays(lats, lons)
    poly = PolygonArea(engine, polyline=polyline)
    for lat, lon in zip(lats.tolist(), lons.tolist()):
        poly.add_point(lat, lon)
    return poly.compute(reverse, sign)


def polyline_length(
    lats: ArrayLike,
    lons: ArrayLike,
    engine: Optional[GeodesicEngine] = None
) -> float:
    """Length in meters of the open polyline through the vertices."""
    return polygon_area_perimeter(lats, lons, polyline=True, engine=engine).perimeter
