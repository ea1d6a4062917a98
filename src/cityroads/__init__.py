"""cityroads: procedural road networks for synthetic cities."""

__version__ = "0.1.0"

from .growth import CityConfig, CityModel, RoadGrowth, generate_city

__all__ = ["__version__", "CityConfig", "CityModel", "RoadGrowth", "generate_city"]
