"""
Consistency Checks for Geodesic Polygon Results.

This module provides checks that a perimeter/area result is plausible
and agrees with an independent implementation.

Check Categories
----------------
1. Reference agreement (pyproj / PROJ's geodesic polygon area)
2. Physical bounds (finite non-negative perimeter, area within the
   ellipsoid area)
"""

from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np
from numpy.typing import ArrayLike
from pyproj import Geod

from common.logging_config import get_logger
from common.types import PolygonResult
from geospatial.coordinate_models import EllipsoidParameters

logger = get_logger(__name__)


class ConsistencyError(ValueError):
    """Raised by a strict-mode checker when a check fails."""


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the check.
    passed : bool
        Whether the check passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class AreaConsistencyChecker:
    """Checker for geodesic polygon results.

    Compares results against PROJ's polygon area implementation and
    against the bounds every closed geodesic polygon must satisfy.
    Results being checked are expected in the default convention:
    signed, counter-clockwise positive.
    """

    def __init__(
        self,
        ellipsoid: str = "WGS84",
        rtol: float = 1e-9,
        atol: float = 1e-3,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Initialize consistency checker.

        Parameters
        ----------
        ellipsoid : str
            PROJ ellipsoid name the results were computed on.
        rtol, atol : float
            Relative and absolute tolerances for reference agreement.
        strict_mode : bool
            If True, raise ConsistencyError on failed checks.
        log_violations : bool
            Whether to log failed checks.
        """
        self.ellipsoid = EllipsoidParameters.from_name(ellipsoid)
        self.rtol = rtol
        self.atol = atol
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._geod = Geod(ellps=ellipsoid)

    def check_all(
        self,
        lats: ArrayLike,
        lons: ArrayLike,
        result: PolygonResult
    ) -> List[ValidationResult]:
        """Run all checks on a polygon result.

        Parameters
        ----------
        lats, lons : array_like
            The polygon's vertices in degrees.
        result : PolygonResult
            Signed, counter-clockwise-positive result for those vertices.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        return [
            self.check_reference(lats, lons, result),
            self.check_bounds(result),
        ]

    def check_reference(
        self,
        lats: ArrayLike,
        lons: ArrayLike,
        result: PolygonResult
    ) -> ValidationResult:
        """Check agreement with pyproj's geodesic polygon area."""
        lats = np.asarray(lats, dtype=np.float64)
        lons = np.asarray(lons, dtype=np.float64)
        ref_area, ref_perimeter = self._geod.polygon_area_perimeter(lons, lats)

        perimeter_ok = bool(np.isclose(
            result.perimeter, ref_perimeter, rtol=self.rtol, atol=self.atol
        ))
        area_ok = bool(np.isclose(
            result.area, ref_area, rtol=self.rtol, atol=self.atol
        ))

        return self._report(ValidationResult(
            test_name="reference_agreement",
            passed=perimeter_ok and area_ok,
            message=(
                f"Reference agreement: perimeter diff "
                f"{result.perimeter - ref_perimeter:.3e} m, area diff "
                f"{result.area - ref_area:.3e} m^2"
            ),
            details={
                'perimeter': float(result.perimeter),
                'reference_perimeter': float(ref_perimeter),
                'area': float(result.area),
                'reference_area': float(ref_area),
            }
        ))

    def check_bounds(self, result: PolygonResult) -> ValidationResult:
        """Check that perimeter and area are physically possible."""
        area0 = self.ellipsoid.surface_area
        perimeter_ok = bool(np.isfinite(result.perimeter) and result.perimeter >= 0)
        area_ok = result.area is None or bool(
            np.isfinite(result.area) and abs(result.area) <= area0
        )

        return self._report(ValidationResult(
            test_name="physical_bounds",
            passed=perimeter_ok and area_ok,
            message=f"Physical bounds check: perimeter={result.perimeter:.3f} m",
            details={
                'perimeter_ok': perimeter_ok,
                'area_ok': area_ok,
                'ellipsoid_area': area0,
            }
        ))

    def _report(self, outcome: ValidationResult) -> ValidationResult:
        if outcome.passed:
            logger.debug(f"CHECK | {outcome.test_name} | PASS | {outcome.message}")
            return outcome
        if self.log_violations:
            logger.warning(f"CHECK | {outcome.test_name} | FAIL | {outcome.message}")
        if self.strict_mode:
            raise ConsistencyError(outcome.message)
        return outcome
