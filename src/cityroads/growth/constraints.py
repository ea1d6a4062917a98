# src/cityroads/growth/constraints.py
"""Local constraints: fit a candidate road into the existing network."""

from __future__ import annotations

from collections import Counter
from typing import Optional

from cityroads.core.definitions import IntersectionTypes
from cityroads.core.exceptions import GeometryError
from cityroads.core.geometry import (
    EPSILON,
    classify_intersection,
    distance,
    distance_and_projection,
    distance_along_to,
    expand_rect,
    minimum_angle_difference,
    points_equal,
    rect_contains,
)
from cityroads.growth.config import CityConfig
from cityroads.growth.network import RoadNetwork
from cityroads.growth.quadtree import QuadTree
from cityroads.growth.report import console
from cityroads.growth.segments import RoadSegment

REJECT_ZERO_LENGTH = "zero length"
REJECT_OUT_OF_BOUNDS = "out of bounds"
REJECT_OVERLAP = "overlaps existing road"
REJECT_SHALLOW_CROSSING = "crossing angle too shallow"
REJECT_DUPLICATE = "duplicate junction link"
REJECT_SHALLOW_NEAR_MISS = "near miss angle too shallow"
REJECT_DEGENERATE = "degenerate geometry"
REJECT_UNRESOLVED_CROSSING = "crosses road without junction"


class LocalConstraints:
    """
    Validate candidate segments against the accepted network.

    ``check`` may shorten or redirect the candidate and split accepted segments it
    meets. Segments created by splitting are already part of the network graph;
    the caller collects them with ``pop_split_segments`` and accepts them whether
    or not the candidate itself survived.

    Attributes:
        rejections: Count of rejected candidates per reason
    """

    def __init__(self, config: CityConfig, network: RoadNetwork, quadtree: QuadTree):
        self.config = config
        self.network = network
        self.quadtree = quadtree
        self.rejections: Counter = Counter()
        self._splits: list[int] = []

    def pop_split_segments(self) -> list[RoadSegment]:
        splits = [self.network[i] for i in self._splits]
        self._splits = []
        return splits

    def check(self, candidate: RoadSegment) -> bool:
        """
        Run the local constraints on a candidate.

        Args:
            candidate: Pending segment registered in the network

        Returns:
            True if the candidate (possibly modified) can be accepted
        """
        try:
            reason = self._check(candidate)
        except GeometryError as e:
            reason = REJECT_DEGENERATE
            if self.config.verbose:
                console.log(f"[yellow]{candidate!r}: {e}[/yellow]")

        if reason is None:
            return True

        self.rejections[reason] += 1
        if self.config.verbose:
            console.log(f"Rejected {candidate!r}: {reason}")
        return False

    def _check(self, candidate: RoadSegment) -> Optional[str]:
        if candidate.length <= EPSILON:
            return REJECT_ZERO_LENGTH

        # don't allow segments to escape city bounds
        if not rect_contains(self.config.city_bounds, candidate.bounds):
            return REJECT_OUT_OF_BOUNDS

        query = expand_rect(candidate.bounds, self.config.road_snap_distance)
        neighbors = [
            self.network[i]
            for i in self.quadtree.retrieve(query)
            if i != candidate.id and self.network[i].length > EPSILON
        ]
        # nearest along the candidate first, so a crossing cuts it short before farther roads
        neighbors.sort(key=lambda n: (distance_along_to(candidate, n), n.id))

        for neighbor in neighbors:
            reason = self._check_neighbor(candidate, neighbor)
            if reason is not None:
                return reason

        if candidate.length <= EPSILON:
            return REJECT_ZERO_LENGTH

        # snapping may have swung the candidate onto a road it was clear of before
        for other in neighbors + [self.network[i] for i in self._splits]:
            if other.id == candidate.id:
                continue
            intersection = classify_intersection(candidate, other)
            if intersection.kind == IntersectionTypes.OVERLAP:
                return REJECT_OVERLAP
            if intersection.kind == IntersectionTypes.POINT and not all(
                _is_shared_end(point, candidate, other) for point in intersection.points
            ):
                return REJECT_UNRESOLVED_CROSSING

        return None

    def _check_neighbor(self, candidate: RoadSegment, neighbor: RoadSegment) -> Optional[str]:
        intersection = classify_intersection(candidate, neighbor)
        angle = minimum_angle_difference(candidate, neighbor)

        if intersection.kind == IntersectionTypes.OVERLAP:
            return REJECT_OVERLAP

        if intersection.kind == IntersectionTypes.POINT:
            point = intersection.points[0]
            if not (
                points_equal(point, candidate.point_a) or points_equal(point, candidate.point_b)
            ):
                if angle < self.config.minimum_intersection_angle_difference:
                    return REJECT_SHALLOW_CROSSING
                if not self._attach(candidate, "b", neighbor, point):
                    return REJECT_DUPLICATE
                return None

        snapped = self._snap_to_end(candidate, neighbor)
        if snapped is not None:
            return None if snapped else REJECT_DUPLICATE

        return self._near_miss(candidate, neighbor, angle)

    def _snap_to_end(self, candidate: RoadSegment, neighbor: RoadSegment) -> Optional[bool]:
        """Snap the candidate end onto the neighbor end; None when out of reach."""
        if candidate.links_forward:
            return None
        if distance(candidate.point_b, neighbor.point_b) > self.config.road_snap_distance:
            return None

        candidate.has_been_split = True
        return self.network.join(candidate.id, "b", neighbor.id, "b")

    def _near_miss(
        self, candidate: RoadSegment, neighbor: RoadSegment, angle: float
    ) -> Optional[str]:
        best = None
        for end, point, links in (
            ("a", candidate.point_a, candidate.links_backward),
            ("b", candidate.point_b, candidate.links_forward),
        ):
            if links:
                continue
            dist, projected, along = distance_and_projection(neighbor, point)
            if best is None or dist < best[0]:
                best = (dist, projected, along, end)

        if best is None:
            return None

        dist, projected, along, end = best
        if dist >= self.config.road_snap_distance or not 0.0 <= along <= neighbor.length:
            return None

        if angle < self.config.minimum_intersection_angle_difference:
            return REJECT_SHALLOW_NEAR_MISS

        if not self._attach(candidate, end, neighbor, projected):
            return REJECT_DUPLICATE
        return None

    def _attach(
        self, candidate: RoadSegment, end: str, neighbor: RoadSegment, point
    ) -> bool:
        """Bring a candidate endpoint to ``point`` on the neighbor and link them there."""
        candidate.has_been_split = True

        for neighbor_end, neighbor_point in (("a", neighbor.point_a), ("b", neighbor.point_b)):
            if points_equal(point, neighbor_point):
                return self.network.join(candidate.id, end, neighbor.id, neighbor_end)

        self.network.move_endpoint(candidate.id, end, point)
        self._splits.append(self.network.split(neighbor.id, point, candidate.id))
        return True


def _is_shared_end(point, first: RoadSegment, second: RoadSegment) -> bool:
    """Check that ``point`` is an endpoint of both segments."""
    return any(points_equal(point, p) for p in first.endpoints) and any(
        points_equal(point, p) for p in second.endpoints
    )
