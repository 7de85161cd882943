"""
Reference Ellipsoid Models for Geodesic Polygon Measurement.

This module defines the ellipsoid on which polygon edges are geodesics.
The geodesic engine takes its shape from here, and the polygon
accumulator takes the total surface area from here to decide which side
of a closed boundary is enclosed.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Ellipsoid of revolution (oblate, prolate or spherical)

The total area of an ellipsoid of revolution is 4*pi*c^2, where c is the
authalic radius:

    c^2 = (a^2 + b^2 * atanh(e) / e) / 2        (oblate, e^2 > 0)
    c^2 = (a^2 + b^2 * atan(e') / e') / 2       (prolate, e'^2 = -e^2)
    c^2 = a^2                                   (sphere)

References
----------
- NIMA TR8350.2: WGS84 parameters
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy,
  87(1), 43-55. Section 6.
"""

import math
from dataclasses import dataclass

from pyproj import Geod, get_ellps_map

from common.constants import EllipsoidConstants


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a. Negative for a prolate ellipsoid.
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    ep2 : float
        Second eccentricity squared: e'² = (a² - b²) / b²
    surface_area : float
        Total surface area in square meters.
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1 - self.f) ** 2

    @property
    def authalic_radius_squared(self) -> float:
        """Square of the radius of the sphere with the same area."""
        e2 = self.e2
        if e2 == 0:
            ratio = 1.0
        elif e2 > 0:
            ratio = math.atanh(math.sqrt(e2)) / math.sqrt(e2)
        else:
            ratio = math.atan(math.sqrt(-e2)) / math.sqrt(-e2)
        return (self.a ** 2 + self.b ** 2 * ratio) / 2

    @property
    def surface_area(self) -> float:
        """Total surface area of the ellipsoid in square meters."""
        return 4 * math.pi * self.authalic_radius_squared

    @classmethod
    def from_name(cls, name: str) -> 'EllipsoidParameters':
        """Look up a named ellipsoid in the PROJ ellipsoid table.

        Parameters
        ----------
        name : str
            PROJ ellipsoid identifier, e.g. ``"WGS84"``, ``"GRS80"``,
            ``"clrk66"``.

        Returns
        -------
        EllipsoidParameters
            The ellipsoid's radius and flattening.

        Raises
        ------
        ValueError
            If PROJ does not know the ellipsoid.
        """
        if name not in get_ellps_map():
            raise ValueError(
                f"Unknown ellipsoid {name!r}. "
                f"Expected one of the PROJ ellipsoids, e.g. 'WGS84' or 'GRS80'."
            )
        geod = Geod(ellps=name)
        return cls(a=float(geod.a), f=float(geod.f), name=name)


# WGS84 ellipsoid - the default reference for polygon measurement
WGS84Ellipsoid = EllipsoidParameters(
    a=EllipsoidConstants.WGS84_SEMI_MAJOR_AXIS.value,
    f=EllipsoidConstants.WGS84_FLATTENING.value,
    name="WGS84"
)

GRS80Ellipsoid = EllipsoidParameters(
    a=EllipsoidConstants.GRS80_SEMI_MAJOR_AXIS.value,
    f=EllipsoidConstants.GRS80_FLATTENING.value,
    name="GRS80"
)
