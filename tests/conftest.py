"""Shared fixtures for the polygon measurement tests."""

import math
from typing import List, Tuple

import pytest

from geospatial.geodesic_engine import (
    Capability,
    DirectResult,
    GeodesicEngine,
    GeographicLibEngine,
    InverseResult,
)
from geospatial.polygon_area import PolygonArea


class PlanarEngine(GeodesicEngine):
    """Flat-plane stand-in for a geodesic engine.

    Latitude and longitude are treated as y and x in meters, and the area
    differential is the trapezoid between the edge and the x axis, which
    sums to the clockwise-positive area of a closed loop. Every call is
    recorded so tests can inspect the requested capabilities.
    """

    def __init__(self, area0: float = 1e12, a: float = 1000.0, f: float = 0.0):
        self._area0 = area0
        self._a = a
        self._f = f
        self.calls: List[Tuple[str, Capability]] = []

    def ellipsoid_area(self) -> float:
        return self._area0

    def major_radius(self) -> float:
        return self._a

    def flattening(self) -> float:
        return self._f

    def inverse(self, lat1, lon1, lat2, lon2, capabilities):
        self.calls.append(("inverse", capabilities))
        area = (lon2 - lon1) * (lat1 + lat2) / 2
        return InverseResult(
            distance=math.hypot(lat2 - lat1, lon2 - lon1),
            area=area if capabilities & Capability.AREA else math.nan,
        )

    def direct(self, lat1, lon1, azimuth, distance, capabilities):
        self.calls.append(("direct", capabilities))
        lat2 = lat1 + distance * math.cos(math.radians(azimuth))
        lon2 = lon1 + distance * math.sin(math.radians(azimuth))
        area = (lon2 - lon1) * (lat1 + lat2) / 2
        return DirectResult(
            lat2=lat2,
            lon2=lon2,
            area=area if capabilities & Capability.AREA else math.nan,
        )


@pytest.fixture
def planar_engine() -> PlanarEngine:
    return PlanarEngine()


@pytest.fixture(scope="session")
def wgs84_engine() -> GeographicLibEngine:
    return GeographicLibEngine()


@pytest.fixture
def polygon(wgs84_engine) -> PolygonArea:
    return PolygonArea(wgs84_engine)


@pytest.fixture
def polyline(wgs84_engine) -> PolygonArea:
    return PolygonArea(wgs84_engine, polyline=True)


def add_points(poly: PolygonArea, points) -> PolygonArea:
    for lat, lon in points:
        poly.add_point(lat, lon)
    return poly
