"""
Reference Ellipsoid Constants for Geodesic Polygon Measurement.

This module provides the defining parameters of the reference ellipsoids
used for geodesic perimeter and area calculations. Each constant carries
its uncertainty and source so results can be traced back to a datum.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- GRS80 parameters: Moritz, H. (2000). Geodetic Reference System 1980.
  Journal of Geodesy, 74(1), 128-133.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A defining constant with uncertainty and provenance.
    
    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class EllipsoidConstants:
    """Registry of reference ellipsoid constants.
    
    Only the two defining parameters (equatorial radius and flattening)
    are stored; every other quantity is derived in
    `geospatial.coordinate_models.EllipsoidParameters`.
    """
    
    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================
    
    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )
    
    WGS84_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )
    
    # =========================================================================
    # GRS80 Ellipsoid Parameters
    # =========================================================================
    
    GRS80_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="Moritz (2000)",
        description="Semi-major axis (equatorial radius) of GRS80 ellipsoid"
    )
    
    GRS80_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257222100882711,
        uncertainty=0.0,  # Derived from J2
        unit="dimensionless",
        source="Moritz (2000)",
        description="Flattening of GRS80 ellipsoid: f = (a - b) / a"
    )
