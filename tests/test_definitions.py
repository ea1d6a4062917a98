"""Tests for core definitions module."""

from cityroads.core.definitions import (
    CENTER_SHAPE_HEADINGS,
    CenterShapes,
    GrowthStates,
    IntersectionTypes,
    PropertyKeys,
    RoadTypes,
)


class TestPropertyKeys:
    """Test PropertyKeys enumeration."""

    def test_property_keys_values(self):
        """Test PropertyKeys have expected values."""
        assert PropertyKeys.SegmentId == "id"
        assert PropertyKeys.RoadType == "type"
        assert PropertyKeys.Width == "width"
        assert PropertyKeys.HasBeenSplit == "has_been_split"


class TestRoadTypes:
    """Test RoadTypes enumeration."""

    def test_road_types_values(self):
        """Test RoadTypes have expected values."""
        assert RoadTypes.Highway == "road_highway"
        assert RoadTypes.Normal == "road_normal"

    def test_road_types_exist(self):
        """Test all road types are accessible."""
        assert hasattr(RoadTypes, "Highway")
        assert hasattr(RoadTypes, "Normal")


class TestIntersectionTypes:
    """Test IntersectionTypes enumeration."""

    def test_intersection_types_are_distinct(self):
        """Test intersection kinds can be told apart."""
        kinds = {IntersectionTypes.NONE, IntersectionTypes.POINT, IntersectionTypes.OVERLAP}
        assert len(kinds) == 3


class TestCenterShapes:
    """Test CenterShapes enumeration."""

    def test_headings_per_shape(self):
        """Test every shape has evenly spread root headings."""
        assert CENTER_SHAPE_HEADINGS[CenterShapes.O] == (0.0, 180.0)
        assert CENTER_SHAPE_HEADINGS[CenterShapes.X] == (0.0, 90.0, 180.0, 270.0)
        assert CENTER_SHAPE_HEADINGS[CenterShapes.Y] == (0.0, 120.0, 240.0)


class TestGrowthStates:
    """Test GrowthStates enumeration."""

    def test_growth_states_values(self):
        """Test GrowthStates have expected values."""
        assert GrowthStates.Idle == "idle"
        assert GrowthStates.Running == "running"
        assert GrowthStates.Done == "done"
