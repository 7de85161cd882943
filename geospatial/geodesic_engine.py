"""
Geodesic Engine Interface and GeographicLib Implementation.

The polygon accumulator never solves geodesic problems itself. It talks
to an engine through the narrow contract defined here:

- the total ellipsoid area (read once, to resolve which side of a
  closed boundary is enclosed),
- the ellipsoid radius and flattening (reported back to callers),
- the inverse problem (distance and area differential between points),
- the direct problem (destination and area differential from a start
  point, azimuth and distance).

Engine calls take a `Capability` mask naming the outputs the caller
needs. It is an optimization hint only: an engine that always computes
everything is correct, and outputs that were not requested come back as
NaN.

Implementation
--------------
`GeographicLibEngine` wraps the `geographiclib` package, Karney's
reference implementation. pyproj wraps the same algorithms (through
PROJ) but does not expose the per-edge area differential S12 that
polygon accumulation needs.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy,
  87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntFlag

from geographiclib.geodesic import Geodesic

from geospatial.coordinate_models import EllipsoidParameters, WGS84Ellipsoid


class Capability(IntFlag):
    """Outputs a caller requests from an engine call."""
    NONE = 0
    LATITUDE = 1
    LONGITUDE = 2
    AZIMUTH = 4
    DISTANCE = 8
    AREA = 16


@dataclass
class InverseResult:
    """Result of an inverse geodesic calculation.

    Attributes
    ----------
    distance : float
        Geodesic (shortest path) distance in meters.
    area : float
        Area differential S12 in square meters: the signed area between
        the geodesic and the equator. NaN unless AREA was requested.
    azimuth1 : float
        Forward azimuth at the first point in degrees. NaN unless
        AZIMUTH was requested.
    azimuth2 : float
        Forward azimuth at the second point in degrees. NaN unless
        AZIMUTH was requested.
    """
    distance: float
    area: float = math.nan
    azimuth1: float = math.nan
    azimuth2: float = math.nan


@dataclass
class DirectResult:
    """Result of a direct geodesic calculation.

    Attributes
    ----------
    lat2 : float
        Latitude of the destination in degrees.
    lon2 : float
        Longitude of the destination in degrees, unrolled: the start
        longitude plus the longitude actually traversed, so an edge that
        wraps round the ellipsoid ends outside [-180, 180).
    area : float
        Area differential S12 in square meters. NaN unless AREA was
        requested.
    azimuth2 : float
        Forward azimuth at the destination in degrees. NaN unless
        AZIMUTH was requested.
    """
    lat2: float
    lon2: float
    area: float = math.nan
    azimuth2: float = math.nan


class GeodesicEngine(ABC):
    """Contract between the polygon accumulator and a geodesic solver.

    Engines must be logically read-only after construction so that one
    engine can serve many accumulators.
    """

    @abstractmethod
    def ellipsoid_area(self) -> float:
        """Total surface area of the ellipsoid in square meters."""

    @abstractmethod
    def major_radius(self) -> float:
        """Equatorial radius of the ellipsoid in meters."""

    @abstractmethod
    def flattening(self) -> float:
        """Flattening of the ellipsoid."""

    @abstractmethod
    def inverse(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        capabilities: Capability
    ) -> InverseResult:
        """Solve the inverse problem between two points (degrees)."""

    @abstractmethod
    def direct(
        self,
        lat1: float,
        lon1: float,
        azimuth: float,
        distance: float,
        capabilities: Capability
    ) -> DirectResult:
        """Solve the direct problem from a point, azimuth and distance."""


_GEOGRAPHICLIB_MASKS = {
    Capability.LATITUDE: Geodesic.LATITUDE,
    Capability.LONGITUDE: Geodesic.LONGITUDE,
    Capability.AZIMUTH: Geodesic.AZIMUTH,
    Capability.DISTANCE: Geodesic.DISTANCE,
    Capability.AREA: Geodesic.AREA,
}


def to_geographiclib_mask(capabilities: Capability) -> int:
    """Translate a `Capability` mask into a geographiclib output mask."""
    mask = Geodesic.EMPTY
    for flag, geographiclib_mask in _GEOGRAPHICLIB_MASKS.items():
        if capabilities & flag:
            mask |= geographiclib_mask
    return mask


class GeographicLibEngine(GeodesicEngine):
    """Geodesic engine backed by `geographiclib.geodesic.Geodesic`.

    Parameters
    ----------
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Examples
    --------
    >>> engine = GeographicLibEngine()
    >>> result = engine.inverse(0, 0, 0, 1, Capability.DISTANCE)
    >>> print(f"{result.distance:.3f} m")
    111319.491 m
    """

    def __init__(self, ellipsoid: EllipsoidParameters = WGS84Ellipsoid):
        self.ellipsoid = ellipsoid
        self._geodesic = Geodesic(ellipsoid.a, ellipsoid.f)
        self._area = ellipsoid.surface_area

    @classmethod
    def from_name(cls, name: str) -> 'GeographicLibEngine':
        """Build an engine for a PROJ ellipsoid name such as ``"GRS80"``."""
        return cls(EllipsoidParameters.from_name(name))

    def ellipsoid_area(self) -> float:
        return self._area

    def major_radius(self) -> float:
        return self.ellipsoid.a

    def flattening(self) -> float:
        return self.ellipsoid.f

    def inverse(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        capabilities: Capability
    ) -> InverseResult:
        solution = self._geodesic.Inverse(
            lat1, lon1, lat2, lon2, to_geographiclib_mask(capabilities)
        )
        return InverseResult(
            distance=solution.get('s12', math.nan),
            area=solution.get('S12', math.nan),
            azimuth1=solution.get('azi1', math.nan),
            azimuth2=solution.get('azi2', math.nan),
        )

    def direct(
        self,
        lat1: float,
        lon1: float,
        azimuth: float,
        distance: float,
        capabilities: Capability
    ) -> DirectResult:
        # Destination coordinates are always needed to advance a vertex
        mask = to_geographiclib_mask(
            capabilities | Capability.LATITUDE | Capability.LONGITUDE
        ) | Geodesic.LONG_UNROLL
        solution = self._geodesic.Direct(lat1, lon1, azimuth, distance, mask)
        return DirectResult(
            lat2=solution['lat2'],
            lon2=solution['lon2'],
            area=solution.get('S12', math.nan),
            azimuth2=solution.get('azi2', math.nan),
        )

    def __repr__(self) -> str:
        return f"GeographicLibEngine(ellipsoid={self.ellipsoid.name!r})"
