import math

import pytest

from common.types import PolygonResult
from geospatial.planimeter import polygon_area_perimeter
from validation.consistency import AreaConsistencyChecker, ConsistencyError

LATS = [10.0, 12.0, 18.0, 21.0, 16.0]
LONS = [20.0, 28.0, 29.0, 23.0, 18.0]


@pytest.fixture(scope="module")
def pentagon_result():
    return polygon_area_perimeter(LATS, LONS)


def test_all_checks_pass_for_computed_result(pentagon_result):
    checker = AreaConsistencyChecker()
    results = checker.check_all(LATS, LONS, pentagon_result)
    assert [r.test_name for r in results] == ["reference_agreement", "physical_bounds"]
    assert all(r.passed for r in results)


def test_pole_encircling_agrees_with_reference():
    lats, lons = [89, 89, 89, 89], [0, 90, 180, 270]
    result = polygon_area_perimeter(lats, lons)
    assert AreaConsistencyChecker().check_reference(lats, lons, result).passed


def test_detects_wrong_area(pentagon_result):
    tampered = pentagon_result._replace(area=pentagon_result.area * 1.01)
    outcome = AreaConsistencyChecker(log_violations=False).check_reference(LATS, LONS, tampered)
    assert not outcome.passed
    assert outcome.details['reference_area'] == pytest.approx(pentagon_result.area, rel=1e-9)


def test_strict_mode_raises(pentagon_result):
    tampered = pentagon_result._replace(perimeter=pentagon_result.perimeter + 10.0)
    checker = AreaConsistencyChecker(strict_mode=True, log_violations=False)
    with pytest.raises(ConsistencyError):
        checker.check_reference(LATS, LONS, tampered)


def test_bounds_reject_non_finite_perimeter():
    checker = AreaConsistencyChecker(log_violations=False)
    outcome = checker.check_bounds(PolygonResult(3, math.nan, 1.0))
    assert not outcome.passed
    assert not outcome.details['perimeter_ok']


def test_bounds_reject_area_beyond_ellipsoid():
    checker = AreaConsistencyChecker(log_violations=False)
    too_big = checker.ellipsoid.surface_area * 1.5
    assert not checker.check_bounds(PolygonResult(3, 10.0, too_big)).passed


def test_bounds_accept_polyline():
    checker = AreaConsistencyChecker()
    assert checker.check_bounds(PolygonResult(3, 10.0, None)).passed


def test_unknown_ellipsoid():
    with pytest.raises(ValueError):
        AreaConsistencyChecker(ellipsoid="bogus")
