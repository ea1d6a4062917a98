"""Tests for density fields."""

import numpy as np
import pytest

from cityroads.core.exceptions import ConfigurationError
from cityroads.growth.density import (
    ConstantDensityField,
    FunctionDensityField,
    GridDensityField,
    RadialDensityField,
)


class TestConstantDensityField:
    """Test ConstantDensityField."""

    def test_same_value_everywhere(self):
        """Test samples and road populations are the constant."""
        field = ConstantDensityField(0.5)

        assert field.sample(0, 0) == 0.5
        assert field.sample(1e6, -1e6) == 0.5
        assert field.population_for_road((0, 0), (100, 0)) == pytest.approx(0.5)

    def test_negative_value_raises(self):
        """Test a negative density is rejected."""
        with pytest.raises(ConfigurationError):
            ConstantDensityField(-1.0)


class TestFunctionDensityField:
    """Test FunctionDensityField."""

    def test_population_is_mean_along_road(self):
        """Test evenly spaced samples including the endpoints are averaged."""
        field = FunctionDensityField(lambda x, y: x)

        assert field.population_for_road((0, 0), (10, 0), samples=3) == pytest.approx(5.0)
        assert field.population_for_road((0, 0), (10, 0), samples=1) == pytest.approx(5.0)

    def test_negative_values_are_clipped(self):
        """Test the field never reports negative density."""
        field = FunctionDensityField(lambda x, y: x)

        assert field.sample(-3, 0) == 0.0
        assert field.population_for_road((-10, 0), (-5, 0)) == 0.0


class TestRadialDensityField:
    """Test RadialDensityField."""

    def test_peak_at_center_and_falloff(self):
        """Test density peaks at the centre and decreases outward."""
        field = RadialDensityField(center=(100, 100), radius=50, peak=2.0)

        assert field.sample(100, 100) == pytest.approx(2.0)
        assert field.sample(150, 100) < field.sample(120, 100) < 2.0
        assert field.sample(150, 100) == pytest.approx(field.sample(100, 50))

    def test_invalid_radius_raises(self):
        """Test a non-positive radius is rejected."""
        with pytest.raises(ConfigurationError):
            RadialDensityField(radius=0)


class TestGridDensityField:
    """Test GridDensityField."""

    @pytest.fixture
    def field(self):
        return GridDensityField(np.array([[0.0, 1.0], [2.0, 3.0]]), (0, 0, 2, 2))

    def test_cell_centers(self, field):
        """Test sampling at cell centres returns the cell value."""
        assert field.sample(0.5, 0.5) == pytest.approx(0.0)
        assert field.sample(1.5, 0.5) == pytest.approx(1.0)
        assert field.sample(0.5, 1.5) == pytest.approx(2.0)
        assert field.sample(1.5, 1.5) == pytest.approx(3.0)

    def test_bilinear_interpolation(self, field):
        """Test sampling between cell centres interpolates."""
        assert field.sample(1.0, 1.0) == pytest.approx(1.5)
        assert field.sample(1.0, 0.5) == pytest.approx(0.5)

    def test_outside_bounds_clamps_to_edge(self, field):
        """Test positions outside the grid take the nearest edge value."""
        assert field.sample(-10, -10) == pytest.approx(0.0)
        assert field.sample(10, 10) == pytest.approx(3.0)

    def test_vectorised_sampling(self, field):
        """Test sampling many positions at once."""
        values = field.sample_many(np.array([0.5, 1.5]), np.array([0.5, 1.5]))

        assert values.tolist() == pytest.approx([0.0, 3.0])

    def test_invalid_grids_raise(self):
        """Test malformed grids are rejected."""
        with pytest.raises(ConfigurationError):
            GridDensityField(np.array([1.0, 2.0]), (0, 0, 1, 1))
        with pytest.raises(ConfigurationError):
            GridDensityField(np.array([[-1.0]]), (0, 0, 1, 1))
        with pytest.raises(ConfigurationError):
            GridDensityField(np.array([[1.0]]), (0, 0, 0, 1))
