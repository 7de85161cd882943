"""
Common utilities and infrastructure for geodesic polygon measurement.

This package provides foundational components used across all modules:
- Reference ellipsoid constants with provenance
- Vertex and result types
- Logging infrastructure
"""

from common.constants import Constant, EllipsoidConstants
from common.types import Vertex, PolygonResult
from common.logging_config import get_logger, configure_logging

__all__ = [
    "Constant",
    "EllipsoidConstants",
    "Vertex",
    "PolygonResult",
    "get_logger",
    "configure_logging",
]
