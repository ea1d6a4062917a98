# src/cityroads/growth/config.py
from dataclasses import dataclass
from typing import Optional

from cityroads.core.definitions import CENTER_SHAPE_HEADINGS, CenterShapes, RoadTypes
from cityroads.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class CityConfig:
    """
    Rules for growing the road network of a city.

    The configuration is read-only for the whole run and is validated on creation,
    so an invalid rule set fails before any segment is generated.

    Attributes:
        city_name: Display name of the city
        city_bounds: City extent (minx, miny, maxx, maxy); no road may leave it
        center_position: Where the root highways start
        center_shape: Root layout, one of CenterShapes (O, X, Y)
        center_angle: Rotation of the root layout in degrees
        road_highway_length_m: Default length of highway segments
        road_normal_length_m: Default length of normal road segments
        max_road_segments: Accepted segment budget for a run. The step that reaches it
            still accepts the pieces of roads it split, so a run can end slightly above it
        minimum_intersection_angle_difference: Crossings at a shallower angle are rejected (degrees)
        road_snap_distance: Radius under which endpoints snap onto existing roads
        highway_branch_priority: Base priority of branches spawned from highways
        population_samples_per_road: Density samples taken along a candidate road
        max_iterations: Loop iteration cap, None derives it from max_road_segments
        seed: Seed for the random source, None for a non-reproducible run
        verbose: Log every rejected candidate to the console

    Notes:
        - Distances are in the same units as the density field bounds
        - Population thresholds compare against the mean density sampled along a road
    """

    city_name: str = "New City"
    city_bounds: tuple[float, float, float, float] = (-2000.0, -2000.0, 2000.0, 2000.0)

    # Root highways
    center_position: tuple[float, float] = (0.0, 0.0)
    center_shape: str = CenterShapes.O
    center_angle: float = 0.0

    # Road templates
    road_highway_length_m: float = 400.0
    road_normal_length_m: float = 300.0
    road_highway_width_m: float = 16.0
    road_normal_width_m: float = 6.0
    road_highway_vertical_offset_m: float = 0.02
    road_normal_vertical_offset_m: float = 0.01

    # Local constraints
    max_road_segments: int = 2000
    minimum_intersection_angle_difference: float = 30.0
    road_snap_distance: float = 50.0

    # Global goals
    highway_branch_population_threshold: float = 0.1
    normal_branch_population_threshold: float = 0.05
    highway_branch_probability: float = 0.05
    normal_branch_probability: float = 0.4
    highway_branch_priority: int = 5
    straight_road_max_deviation_angle: float = 15.0
    branch_road_max_deviation_angle: float = 3.0
    population_samples_per_road: int = 3

    # Spatial index
    quadtree_max_objects_per_node: int = 10
    quadtree_max_depth: int = 10

    # Run control
    max_iterations: Optional[int] = None
    seed: Optional[int] = None
    verbose: bool = False

    def __post_init__(self):
        minx, miny, maxx, maxy = self.city_bounds
        if not (minx < maxx and miny < maxy):
            raise ConfigurationError(f"City bounds are degenerate: {self.city_bounds}")

        cx, cy = self.center_position
        if not (minx <= cx <= maxx and miny <= cy <= maxy):
            raise ConfigurationError(
                f"Center position {self.center_position} lies outside the city bounds"
            )

        if self.center_shape not in CENTER_SHAPE_HEADINGS:
            raise ConfigurationError(f"Unknown center shape: {self.center_shape!r}")

        for name in ("road_highway_length_m", "road_normal_length_m"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive")

        for name in (
            "road_highway_width_m",
            "road_normal_width_m",
            "road_snap_distance",
            "highway_branch_population_threshold",
            "normal_branch_population_threshold",
            "straight_road_max_deviation_angle",
            "branch_road_max_deviation_angle",
        ):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative")

        if self.max_road_segments <= 0:
            raise ConfigurationError("max_road_segments must be positive")

        if not 0.0 <= self.minimum_intersection_angle_difference <= 90.0:
            raise ConfigurationError("minimum_intersection_angle_difference must be within 0-90")

        for name in ("highway_branch_probability", "normal_branch_probability"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ConfigurationError(f"{name} must be within 0-1")

        if self.population_samples_per_road < 1:
            raise ConfigurationError("population_samples_per_road must be at least 1")

        if self.quadtree_max_objects_per_node <= 0:
            raise ConfigurationError("quadtree_max_objects_per_node must be positive")
        if self.quadtree_max_depth < 0:
            raise ConfigurationError("quadtree_max_depth must not be negative")

        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ConfigurationError("max_iterations must be positive")

    @property
    def iteration_limit(self) -> int:
        if self.max_iterations is not None:
            return self.max_iterations
        return self.max_road_segments * 100

    def length_for(self, road_type: str) -> float:
        return self._by_type(road_type, self.road_highway_length_m, self.road_normal_length_m)

    def width_for(self, road_type: str) -> float:
        return self._by_type(road_type, self.road_highway_width_m, self.road_normal_width_m)

    def vertical_offset_for(self, road_type: str) -> float:
        return self._by_type(
            road_type, self.road_highway_vertical_offset_m, self.road_normal_vertical_offset_m
        )

    @staticmethod
    def _by_type(road_type, highway_value, normal_value):
        if road_type == RoadTypes.Highway:
            return highway_value
        if road_type == RoadTypes.Normal:
            return normal_value
        raise ConfigurationError(f"Unknown road type: {road_type!r}")
