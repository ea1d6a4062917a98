"""Road network growth driven by population density."""

from .config import CityConfig
from .density import (
    ConstantDensityField,
    DensityField,
    FunctionDensityField,
    GridDensityField,
    RadialDensityField,
)
from .model import CityModel
from .runner import RoadGrowth, generate_city

__all__ = [
    "CityConfig",
    "CityModel",
    "ConstantDensityField",
    "DensityField",
    "FunctionDensityField",
    "GridDensityField",
    "RadialDensityField",
    "RoadGrowth",
    "generate_city",
]
