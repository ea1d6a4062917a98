"""Core functionality for cityroads."""

from cityroads.core.exceptions import CityRoadsError, ConfigurationError, GeometryError
from cityroads.core.geometry import (
    Intersection,
    classify_intersection,
    distance_and_projection,
    minimum_angle_difference,
)

__all__ = [
    "Intersection",
    "classify_intersection",
    "distance_and_projection",
    "minimum_angle_difference",
    "CityRoadsError",
    "ConfigurationError",
    "GeometryError",
]
