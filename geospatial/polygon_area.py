"""
Incremental Perimeter and Area of Geodesic Polygons.

This module accumulates the perimeter and enclosed area of a polygon
whose edges are geodesics on an ellipsoid, or the length of an open
polyline. Vertices and edges are added one at a time, and the result so
far can be read at any point without closing the shape.

Scientific Context
------------------
Domain: Geodesy, surveying, interactive GIS measurement
Model: Polygon area as a sum of geodesic-to-equator trapezoids (S12)

Each edge contributes an area differential S12, the signed area between
the edge and the equator. Summed around a closed loop these give the
enclosed area up to a multiple of the ellipsoid area. Two facts resolve
the multiple:

1. Counting how often the boundary crosses the antimeridian gives the
   parity of its winding around the poles. An odd count means the raw
   sum is off by half the ellipsoid area.
2. Every closed loop encloses two regions, whose areas add up to the
   ellipsoid area. ``sign=True`` picks the region on the left of the
   traversal (a negative area for clockwise loops); ``sign=False``
   always reports a non-negative area, taking the complement when the
   traversal is clockwise.

If consecutive vertices are (nearly) antipodal, the shortest geodesic
between them is not unique and the area is not well defined. Callers
must insert an intermediate vertex or add the edge with `add_edge`.

Implementation
--------------
Perimeter and area are summed with `Accumulator` (compensated
summation). `test_point` and `test_edge` fold a tentative vertex into
plain-float copies of the totals, which is cheaper and a little less
accurate; they never modify the instance.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy,
  87(1), 43-55. Section 6.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from common.logging_config import get_logger
from common.types import PolygonResult, Vertex
from geospatial.accumulator import Accumulator
from geospatial.angles import ang_normalize, transit, transit_direct
from geospatial.geodesic_engine import (
    Capability,
    GeodesicEngine,
    GeographicLibEngine,
)

logger = get_logger(__name__, level=logging.WARNING)


@dataclass
class PolygonAreaConfig:
    """Configuration for a `PolygonArea` built with `from_config`.

    Attributes
    ----------
    ellipsoid : str
        PROJ ellipsoid name for the geodesic engine.
    polyline : bool
        Treat the vertices as an open polyline (no area, no closing edge).
    reverse : bool
        Default for `compute`/`test_*`: count clockwise traversal as
        positive.
    sign : bool
        Default for `compute`/`test_*`: report signed areas instead of
        the area of the rest of the ellipsoid.
    """
    ellipsoid: str = "WGS84"
    polyline: bool = False
    reverse: bool = False
    sign: bool = True


def reduce_area(
    area: Union[Accumulator, float],
    area0: float,
    crossings: int,
    reverse: bool,
    sign: bool
) -> float:
    """Reduce a closed area-differential sum to the enclosed area.

    Parameters
    ----------
    area : Accumulator or float
        Sum of S12 over every edge including the closing one. An
        accumulator is modified in place.
    area0 : float
        Total ellipsoid area.
    crossings : int
        Net antimeridian transits around the closed loop.
    reverse : bool
        Count clockwise traversal as positive.
    sign : bool
        Return a result in (-area0/2, area0/2] instead of [0, area0).

    Returns
    -------
    float
        The enclosed area in square meters.
    """
    if not isinstance(area, Accumulator):
        area = Accumulator(area)
    area.remainder(area0)
    if crossings & 1:
        area.add((1 if area.value() < 0 else -1) * area0 / 2)
    # The S12 sum carries the clockwise sense
    if not reverse:
        area.negate()
    if sign:
        if area.value() > area0 / 2:
            area.add(-area0)
        elif area.value() <= -area0 / 2:
            area.add(area0)
    else:
        if area.value() >= area0:
            area.add(-area0)
        elif area.value() < 0:
            area.add(area0)
    return 0.0 + area.value()


class PolygonArea:
    """Incremental accumulator for geodesic polygons and polylines.

    The sequence must start with a vertex (`add_point`); after that,
    vertices and edges may be added in any order. Any vertex after the
    first creates an edge along the shortest geodesic from the previous
    vertex.

    Parameters
    ----------
    engine : GeodesicEngine, optional
        Geodesic solver to use (default: WGS84 via geographiclib).
    polyline : bool
        If True, treat the vertices as an open polyline: only its length
        is computed and there is no closing edge.
    reverse, sign : bool
        Defaults for the `reverse` and `sign` arguments of `compute`,
        `test_point` and `test_edge`.

    Thread Safety
    -------------
    `compute`, `test_point`, `test_edge` and the inspectors do not
    modify the instance. `add_point`, `add_edge` and `clear` do, and must
    not run concurrently with any other call on the same instance.

    Examples
    --------
    >>> poly = PolygonArea()
    >>> for lat, lon in [(0, 0), (0, 1), (1, 1), (1, 0)]:
    ...     poly.add_point(lat, lon)
    >>> num, perimeter, area = poly.compute()
    >>> print(num, round(area / 1e6, -2))
    4 12300.0
    """

    def __init__(
        self,
        engine: Optional[GeodesicEngine] = None,
        polyline: bool = False,
        reverse: bool = False,
        sign: bool = True
    ):
        self._engine = engine if engine is not None else GeographicLibEngine()
        self._area0 = self._engine.ellipsoid_area()
        self._polyline = polyline
        self._mask = (
            Capability.LATITUDE | Capability.LONGITUDE | Capability.DISTANCE
            | (Capability.NONE if polyline else Capability.AREA)
        )
        self._perimetersum = Accumulator()
        self._areasum = Accumulator()
        self._default_reverse = reverse
        self._default_sign = sign
        self.clear()
        logger.debug(
            f"Created {'polyline' if polyline else 'polygon'} accumulator "
            f"on {self._engine!r} (ellipsoid area {self._area0:.6e} m^2)"
        )

    @classmethod
    def from_config(cls, config: PolygonAreaConfig) -> 'PolygonArea':
        """Build an accumulator from a `PolygonAreaConfig`.

        Raises
        ------
        ValueError
            If the configured ellipsoid is unknown.
        """
        engine = GeographicLibEngine.from_name(config.ellipsoid)
        return cls(
            engine,
            polyline=config.polyline,
            reverse=config.reverse,
            sign=config.sign,
        )

    # =========================================================================
    # Mutators
    # =========================================================================

    def clear(self) -> None:
        """Reset to the empty state so a new polygon can be started."""
        self._num = 0
        self._crossings = 0
        self._areasum.set(0.0)
        self._perimetersum.set(0.0)
        self._lat0 = self._lon0 = self._lat1 = self._lon1 = math.nan
        logger.debug("Cleared polygon accumulator")

    def add_point(self, lat: float, lon: float) -> None:
        """Add a vertex.

        Parameters
        ----------
        lat : float
            Latitude in degrees, in [-90, 90].
        lon : float
            Longitude in degrees, in [-540, 540).
        """
        lon = ang_normalize(lon)
        if self._num == 0:
            self._lat0 = self._lat1 = lat
            self._lon0 = self._lon1 = lon
        else:
            step = self._engine.inverse(
                self._lat1, self._lon1, lat, lon, self._mask
            )
            self._perimetersum.add(step.distance)
            if not self._polyline:
                self._areasum.add(step.area)
            self._crossings += transit(self._lon1, lon)
            self._lat1, self._lon1 = lat, lon
        self._num += 1

    def add_edge(self, azi: float, s: float) -> None:
        """Add an edge given by its azimuth and length.

        Does nothing if no vertex has been added yet. Use
        `current_point` to find the new vertex.

        Parameters
        ----------
        azi : float
            Azimuth at the current vertex in degrees, in [-540, 540).
        s : float
            Length of the edge in meters. The edge may wind more than half
            way round the ellipsoid, which is how to enter an edge between
            nearly antipodal vertices.
        """
        if self._num == 0:
            return
        step = self._engine.direct(self._lat1, self._lon1, azi, s, self._mask)
        self._perimetersum.add(s)
        if not self._polyline:
            self._areasum.add(step.area)
        self._crossings += transit_direct(self._lon1, step.lon2)
        self._lat1, self._lon1 = step.lat2, ang_normalize(step.lon2)
        self._num += 1

    # =========================================================================
    # Results
    # =========================================================================

    def compute(
        self,
        reverse: Optional[bool] = None,
        sign: Optional[bool] = None
    ) -> PolygonResult:
        """Return the perimeter and area of the shape so far.

        Parameters
        ----------
        reverse : bool, optional
            If True, clockwise (instead of counter-clockwise) traversal
            counts as positive area.
        sign : bool, optional
            If True, return a signed area for a polygon traversed in the
            "wrong" direction instead of the area of the rest of the
            ellipsoid.

        Returns
        -------
        PolygonResult
            Vertex count, perimeter (polyline length) in meters and area
            in square meters (``None`` for a polyline).
        """
        reverse, sign = self._resolve(reverse, sign)
        if self._num < 2:
            return PolygonResult(self._num, 0.0, None if self._polyline else 0.0)
        if self._polyline:
            return PolygonResult(self._num, self._perimetersum.value(), None)

        closing = self._engine.inverse(
            self._lat1, self._lon1, self._lat0, self._lon0, self._mask
        )
        perimeter = self._perimetersum.value(closing.distance)
        tempsum = self._areasum.copy()
        tempsum.add(closing.area)
        crossings = self._crossings + transit(self._lon1, self._lon0)
        area = reduce_area(tempsum, self._area0, crossings, reverse, sign)
        return PolygonResult(self._num, perimeter, area)

    def test_point(
        self,
        lat: float,
        lon: float,
        reverse: Optional[bool] = None,
        sign: Optional[bool] = None
    ) -> PolygonResult:
        """Return the results as if a tentative vertex were added.

        The tentative vertex is not stored, so this can track a moving
        pointer. Its contribution is summed in ordinary floating point,
        so the result is slightly less accurate than `add_point` followed
        by `compute`.

        Parameters
        ----------
        lat, lon : float
            Tentative vertex in degrees.
        reverse, sign : bool, optional
            As for `compute`.

        Returns
        -------
        PolygonResult
            Results including the tentative vertex.
        """
        reverse, sign = self._resolve(reverse, sign)
        if self._num == 0:
            return PolygonResult(1, 0.0, None if self._polyline else 0.0)

        lon = ang_normalize(lon)
        perimeter = self._perimetersum.value()
        tempsum = 0.0 if self._polyline else self._areasum.value()
        crossings = self._crossings
        legs = [(self._lat1, self._lon1, lat, lon)]
        if not self._polyline:
            legs.append((lat, lon, self._lat0, self._lon0))
        for lat_a, lon_a, lat_b, lon_b in legs:
            step = self._engine.inverse(lat_a, lon_a, lat_b, lon_b, self._mask)
            perimeter += step.distance
            if not self._polyline:
                tempsum += step.area
                crossings += transit(lon_a, lon_b)

        if self._polyline:
            return PolygonResult(self._num + 1, perimeter, None)
        area = reduce_area(tempsum, self._area0, crossings, reverse, sign)
        return PolygonResult(self._num + 1, perimeter, area)

    def test_edge(
        self,
        azi: float,
        s: float,
        reverse: Optional[bool] = None,
        sign: Optional[bool] = None
    ) -> PolygonResult:
        """Return the results as if a tentative edge were added.

        Like `test_point`, but the tentative vertex is reached from the
        current vertex along azimuth `azi` for distance `s`. With no
        starting vertex the result is ``(0, nan, nan)``.
        """
        reverse, sign = self._resolve(reverse, sign)
        if self._num == 0:
            return PolygonResult(0, math.nan, None if self._polyline else math.nan)

        perimeter = self._perimetersum.value() + s
        if self._polyline:
            return PolygonResult(self._num + 1, perimeter, None)

        tempsum = self._areasum.value()
        crossings = self._crossings
        step = self._engine.direct(self._lat1, self._lon1, azi, s, self._mask)
        tempsum += step.area
        crossings += transit_direct(self._lon1, step.lon2)
        lon2 = ang_normalize(step.lon2)
        closing = self._engine.inverse(
            step.lat2, lon2, self._lat0, self._lon0, self._mask
        )
        perimeter += closing.distance
        tempsum += closing.area
        crossings += transit(lon2, self._lon0)
        area = reduce_area(tempsum, self._area0, crossings, reverse, sign)
        return PolygonResult(self._num + 1, perimeter, area)

    # =========================================================================
    # Inspectors
    # =========================================================================

    def current_point(self) -> Vertex:
        """The most recent vertex, or ``Vertex(nan, nan)`` when empty."""
        return Vertex(self._lat1, self._lon1)

    def major_radius(self) -> float:
        """Equatorial radius of the engine's ellipsoid in meters."""
        return self._engine.major_radius()

    def flattening(self) -> float:
        """Flattening of the engine's ellipsoid."""
        return self._engine.flattening()

    @property
    def num(self) -> int:
        """Number of vertices added so far."""
        return self._num

    @property
    def polyline(self) -> bool:
        return self._polyline

    @property
    def crossings(self) -> int:
        """Net antimeridian transits of the edges added so far."""
        return self._crossings

    @property
    def ellipsoid_area(self) -> float:
        return self._area0

    @property
    def engine(self) -> GeodesicEngine:
        return self._engine

    def _resolve(
        self,
        reverse: Optional[bool],
        sign: Optional[bool]
    ) -> Tuple[bool, bool]:
        return (
            self._default_reverse if reverse is None else reverse,
            self._default_sign if sign is None else sign,
        )

    def __repr__(self) -> str:
        kind = "polyline" if self._polyline else "polygon"
        return f"PolygonArea({kind}, num={self._num}, engine={self._engine!r})"
