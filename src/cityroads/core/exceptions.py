"""Custom exceptions for cityroads."""


class CityRoadsError(Exception):
    """Base exception for cityroads."""

    pass


class ConfigurationError(CityRoadsError):
    """Raised when a city configuration is invalid."""

    pass


class GeometryError(CityRoadsError):
    """Raised when geometry operations fail."""

    pass
