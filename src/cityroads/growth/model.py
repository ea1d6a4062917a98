"""City model produced by a growth run."""

from __future__ import annotations

from cityroads.core.geometry import Rect
from cityroads.growth.density import DensityField
from cityroads.growth.network import RoadNetwork
from cityroads.growth.quadtree import QuadTree
from cityroads.growth.segments import RoadSegment


class CityModel:
    """
    Everything a view builder needs from a generated city.

    Attributes:
        city_name: Display name
        city_bounds: City extent (minx, miny, maxx, maxy)
        road_segments: Accepted segments in acceptance order
        quadtree: Spatial index over the accepted segments (by id)
        network: Arena with every segment created during the run
        population_field: Density field the roads were grown over
        population_samples: Samples taken along a road when measuring its population
    """

    def __init__(
        self,
        city_name: str,
        city_bounds: Rect,
        quadtree: QuadTree,
        population_field: DensityField,
        network: RoadNetwork | None = None,
        population_samples: int = 3,
    ):
        self.city_name = city_name
        self.city_bounds = city_bounds
        self.quadtree = quadtree
        self.population_field = population_field
        self.network = network if network is not None else RoadNetwork()
        self.population_samples = population_samples
        self.road_segments: list[RoadSegment] = []
        self._accepted_ids: set[int] = set()

    def accept(self, segment: RoadSegment) -> None:
        """Add a segment to the accepted list and the spatial index."""
        if segment.id < 0:
            self.network.add(segment)
        if segment.id in self._accepted_ids:
            return
        self._accepted_ids.add(segment.id)
        self.road_segments.append(segment)
        self.quadtree.insert(segment.id, segment.bounds)

    def is_accepted(self, segment_id: int) -> bool:
        return segment_id in self._accepted_ids

    def calculate_population_for_road(self, segment: RoadSegment) -> float:
        return self.population_field.population_for_road(
            segment.point_a, segment.point_b, self.population_samples
        )

    def __len__(self) -> int:
        return len(self.road_segments)
