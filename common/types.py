"""
Shared Types for Geodesic Polygon Measurement.

Vertices are carried in DEGREES (unlike radians-based geodetic code)
because the geodesic engine and every caller of the polygon accumulator
work in degrees. Lengths are in METERS and areas in SQUARE METERS.
"""

from typing import NamedTuple, Optional


class Vertex(NamedTuple):
    """A polygon or polyline vertex.
    
    Attributes
    ----------
    lat : float
        Latitude in degrees. Range: [-90, 90].
    lon : float
        Longitude in degrees. Stored in [-180, 180) once it has passed
        through the accumulator.
        
    Notes
    -----
    An empty accumulator reports its vertex as ``Vertex(nan, nan)``.
    """
    lat: float
    lon: float


class PolygonResult(NamedTuple):
    """Perimeter and area of a polygon (or length of a polyline).
    
    Attributes
    ----------
    num : int
        Number of vertices, including a tentative test vertex.
    perimeter : float
        Perimeter of the polygon or length of the polyline in meters.
    area : float or None
        Enclosed area in square meters; ``None`` in polyline mode.
    """
    num: int
    perimeter: float
    area: Optional[float]
