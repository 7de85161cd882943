"""
Validation Framework for Geodesic Polygon Measurement.

This module provides consistency checks for perimeter/area results.
"""

from validation.consistency import (
    AreaConsistencyChecker,
    ConsistencyError,
    ValidationResult,
)

__all__ = [
    "AreaConsistencyChecker",
    "ConsistencyError",
    "ValidationResult",
]
