"""Tests for city config module."""

import dataclasses

import pytest

from cityroads.core.definitions import CenterShapes, RoadTypes
from cityroads.core.exceptions import ConfigurationError
from cityroads.growth.config import CityConfig


class TestCityConfig:
    """Test CityConfig dataclass."""

    def test_default_values(self):
        """Test CityConfig default values."""
        config = CityConfig()

        assert config.city_bounds == (-2000.0, -2000.0, 2000.0, 2000.0)
        assert config.center_position == (0.0, 0.0)
        assert config.center_shape == CenterShapes.O
        assert config.max_road_segments == 2000
        assert config.minimum_intersection_angle_difference == 30.0
        assert config.road_snap_distance == 50.0
        assert config.highway_branch_priority == 5
        assert config.quadtree_max_objects_per_node == 10
        assert config.quadtree_max_depth == 10
        assert config.seed is None
        assert config.verbose is False

    def test_normal_threshold_below_highway_threshold(self):
        """Test normal roads branch at lower population than highways by default."""
        config = CityConfig()

        assert config.normal_branch_population_threshold < config.highway_branch_population_threshold

    def test_config_is_immutable(self):
        """Test the rules cannot change once created."""
        config = CityConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_road_segments = 10

    def test_per_type_templates(self):
        """Test road type lookups."""
        config = CityConfig(road_highway_length_m=500.0, road_normal_width_m=4.0)

        assert config.length_for(RoadTypes.Highway) == 500.0
        assert config.length_for(RoadTypes.Normal) == 300.0
        assert config.width_for(RoadTypes.Highway) == 16.0
        assert config.width_for(RoadTypes.Normal) == 4.0
        assert config.vertical_offset_for(RoadTypes.Highway) == 0.02
        assert config.vertical_offset_for(RoadTypes.Normal) == 0.01

    def test_unknown_road_type_raises(self):
        """Test looking up an unknown road type."""
        with pytest.raises(ConfigurationError):
            CityConfig().length_for("road_dirt")

    def test_iteration_limit(self):
        """Test the iteration cap defaults to a multiple of the segment budget."""
        assert CityConfig(max_road_segments=10).iteration_limit == 1000
        assert CityConfig(max_iterations=7).iteration_limit == 7

    @pytest.mark.parametrize(
        "overrides",
        [
            {"city_bounds": (0.0, 0.0, 0.0, 10.0)},
            {"city_bounds": (10.0, 0.0, 0.0, 10.0)},
            {"center_position": (5000.0, 0.0)},
            {"center_shape": "Z"},
            {"road_highway_length_m": 0.0},
            {"road_normal_length_m": -5.0},
            {"road_snap_distance": -1.0},
            {"max_road_segments": 0},
            {"minimum_intersection_angle_difference": 120.0},
            {"highway_branch_probability": 1.5},
            {"normal_branch_probability": -0.1},
            {"straight_road_max_deviation_angle": -1.0},
            {"population_samples_per_road": 0},
            {"quadtree_max_objects_per_node": 0},
            {"quadtree_max_depth": -1},
            {"max_iterations": 0},
        ],
    )
    def test_invalid_configuration_raises(self, overrides):
        """Test invalid rules fail on creation."""
        with pytest.raises(ConfigurationError):
            CityConfig(**overrides)
