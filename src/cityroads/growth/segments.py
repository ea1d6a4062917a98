"""Road segment entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from shapely.geometry import LineString

from cityroads.core.geometry import (
    Point,
    Rect,
    direction_degrees,
    point_from_direction,
    segment_bounds,
    segment_length,
)


@dataclass(eq=False)
class RoadSegment:
    """
    One edge of the road graph.

    Adjacency is kept per endpoint: ``links_backward`` holds the ids of segments
    meeting this one at ``point_a``, ``links_forward`` those meeting it at
    ``point_b``. Ids refer to entries of the owning RoadNetwork.
    """

    point_a: Point
    point_b: Point
    road_type: str
    width: float
    vertical_offset: float
    priority: int = 0
    has_been_split: bool = False
    links_forward: set[int] = field(default_factory=set)
    links_backward: set[int] = field(default_factory=set)
    id: int = -1

    @classmethod
    def from_direction(
        cls,
        start: Point,
        angle: float,
        length: float,
        width: float,
        vertical_offset: float,
        road_type: str,
        priority: int,
    ) -> RoadSegment:
        """Create a segment starting at ``start`` heading ``angle`` degrees."""
        return cls(
            point_a=start,
            point_b=point_from_direction(start, angle, length),
            road_type=road_type,
            width=width,
            vertical_offset=vertical_offset,
            priority=priority,
        )

    @property
    def endpoints(self) -> tuple[Point, Point]:
        return self.point_a, self.point_b

    @property
    def length(self) -> float:
        return segment_length(self.endpoints)

    @property
    def direction(self) -> float:
        return direction_degrees(self.endpoints)

    @property
    def bounds(self) -> Rect:
        return segment_bounds(self.endpoints)

    @property
    def line(self) -> LineString:
        return LineString([self.point_a, self.point_b])

    @property
    def links(self) -> set[int]:
        """Ids linked at either end."""
        return self.links_forward | self.links_backward

    def __repr__(self) -> str:
        return (
            f"RoadSegment(id={self.id}, {self.road_type}, "
            f"{self.point_a} -> {self.point_b}, priority={self.priority})"
        )
