"""
Geospatial Module for Geodesic Polygon Measurement.

All Earth-surface calculations originate from this module.

This module provides:
- Reference ellipsoid models
- Compensated summation
- Longitude arithmetic and antimeridian transit detection
- The geodesic engine contract and its geographiclib implementation
- Incremental polygon perimeter/area accumulation
- Batch helpers for complete vertex sequences
"""

from geospatial.coordinate_models import (
    EllipsoidParameters,
    WGS84Ellipsoid,
    GRS80Ellipsoid,
)

from geospatial.accumulator import Accumulator

from geospatial.angles import (
    ang_normalize,
    ang_diff,
    transit,
    transit_direct,
)

from geospatial.geodesic_engine import (
    Capability,
    InverseResult,
    DirectResult,
    GeodesicEngine,
    GeographicLibEngine,
)

from geospatial.polygon_area import (
    PolygonArea,
    PolygonAreaConfig,
)

from geospatial.planimeter import (
    polygon_area_perimeter,
    polyline_length,
)

__all__ = [
    # Ellipsoids
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    "GRS80Ellipsoid",
    # Summation and angles
    "Accumulator",
    "ang_normalize",
    "ang_diff",
    "transit",
    "transit_direct",
    # Engine
    "Capability",
    "InverseResult",
    "DirectResult",
    "GeodesicEngine",
    "GeographicLibEngine",
    # Polygon area
    "PolygonArea",
    "PolygonAreaConfig",
    "polygon_area_perimeter",
    "polyline_length",
]
