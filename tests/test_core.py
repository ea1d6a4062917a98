"""Tests for core functionality."""

import pytest

import cityroads
from cityroads.core import CityRoadsError, ConfigurationError, GeometryError
from cityroads.growth.config import CityConfig


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_errors_share_base(self):
        """Test library errors can be caught through the base class."""
        assert issubclass(ConfigurationError, CityRoadsError)
        assert issubclass(GeometryError, CityRoadsError)
        assert not issubclass(GeometryError, ConfigurationError)

    def test_configuration_error_caught_as_base(self):
        """Test a bad configuration surfaces as a library error."""
        with pytest.raises(CityRoadsError):
            CityConfig(max_road_segments=-1)


class TestPackage:
    """Tests for the package entry points."""

    def test_version(self):
        """Test the package exposes its version."""
        assert cityroads.__version__ == "0.1.0"

    def test_public_api(self):
        """Test the main entry points are importable from the package."""
        for name in ("CityConfig", "CityModel", "RoadGrowth", "generate_city"):
            assert hasattr(cityroads, name)
