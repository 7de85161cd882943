"""
Longitude Arithmetic and Antimeridian Transit Detection.

All angles here are in DEGREES. Longitudes are normalized to the
half-open range [-180, 180), so a vertex on the antimeridian is always
reported as -180 and sits on the western side of it.

Longitude differences are taken with geographiclib's `Math.AngDiff`, the
same difference the geodesic solver uses to orient an edge. For an edge
spanning exactly 180 degrees of longitude (a meridian over a pole) its
sign decides which way round the edge runs, and the transit count must
agree with the solver's area differential on that.
"""

import math

from geographiclib.geomath import Math


def ang_normalize(x: float) -> float:
    """Reduce an angle to [-180, 180).

    Parameters
    ----------
    x : float
        Angle in degrees. Exact for inputs in [-540, 540).

    Returns
    -------
    float
        Equivalent angle in [-180, 180).
    """
    if math.isinf(x):
        return math.nan
    y = math.remainder(x, 360.0)
    return -180.0 if y == 180.0 else y


def ang_diff(x: float, y: float) -> float:
    """Signed angular difference y - x, in [-180, 180].

    A difference of exactly 180 degrees keeps the sign of ``y - x``, as
    in the geodesic solver.
    """
    return Math.AngDiff(x, y)[0]


def transit(lon1: float, lon2: float) -> int:
    """Detect whether the edge from `lon1` to `lon2` crosses ±180°.

    Parameters
    ----------
    lon1, lon2 : float
        Longitudes of the start and end of an edge, in degrees, exactly
        as passed to the geodesic solver.

    Returns
    -------
    int
        +1 for an eastward crossing of the antimeridian, -1 for a
        westward crossing, 0 otherwise.

    Notes
    -----
    The parity of the summed transits around a closed loop equals the
    parity of the number of times the loop winds around the poles, which
    is what selects the area branch in `PolygonArea`.

    Examples
    --------
    >>> transit(179, -179), transit(-179, 179), transit(-10, 10)
    (1, -1, 0)
    >>> transit(0, 180), transit(0, -180)
    (1, 0)
    """
    lon12 = ang_diff(lon1, lon2)
    lon1 = ang_normalize(lon1)
    lon2 = ang_normalize(lon2)
    # Moving east yet ending further west means the edge wrapped round.
    if lon12 > 0 and lon2 < lon1:
        return 1
    if lon12 < 0 and lon2 > lon1:
        return -1
    return 0


def transit_direct(lon1: float, lon2: float) -> int:
    """Count antimeridian crossings of an edge given unrolled longitudes.

    Parameters
    ----------
    lon1 : float
        Longitude of the start of the edge in degrees.
    lon2 : float
        Longitude of the end of the edge, unrolled: `lon1` plus the
        longitude actually traversed, which may exceed 180 degrees.

    Returns
    -------
    int
        Net number of eastward crossings (negative for westward).

    Examples
    --------
    >>> transit_direct(0, 200), transit_direct(0, 560), transit_direct(-170, -190)
    (1, 2, -1)
    """
    return _turns(lon2) - _turns(lon1)


def _turns(lon: float) -> int:
    # Whole turns that ang_normalize strips, so normalization and
    # counting agree on a vertex at exactly 180.
    turns = (lon - ang_normalize(lon)) / 360.0
    return round(turns) if math.isfinite(turns) else 0
