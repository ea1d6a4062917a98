"""Arena holding every road segment of a growth run and their adjacency."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from cityroads.core.exceptions import GeometryError
from cityroads.core.geometry import Point
from cityroads.growth.segments import RoadSegment


class RoadNetwork:
    """
    Id-indexed store of road segments.

    Segments are never removed, so an id stays valid for the whole run. Links are
    stored as id sets on each segment and every mutation here keeps them
    symmetric: if one segment lists another at a shared point, the other lists
    it back at the same point.
    """

    def __init__(self):
        self._segments: list[RoadSegment] = []

    def add(self, segment: RoadSegment) -> int:
        segment.id = len(self._segments)
        self._segments.append(segment)
        return segment.id

    def __getitem__(self, segment_id: int) -> RoadSegment:
        return self._segments[segment_id]

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[RoadSegment]:
        return iter(self._segments)

    def end_at(self, segment_id: int, point: Point) -> Optional[str]:
        """Return "a" or "b" for the endpoint of the segment located at ``point``."""
        segment = self[segment_id]
        if segment.point_a == point:
            return "a"
        if segment.point_b == point:
            return "b"
        return None

    def links_at(self, segment_id: int, point: Point) -> set[int]:
        end = self.end_at(segment_id, point)
        if end is None:
            raise GeometryError(f"{point} is not an endpoint of segment {segment_id}")
        return self._links(segment_id, end)

    def _links(self, segment_id: int, end: str) -> set[int]:
        segment = self[segment_id]
        return segment.links_backward if end == "a" else segment.links_forward

    def connect(self, first_id: int, second_id: int, point: Point) -> None:
        """Link two segments symmetrically at a point both of them end on."""
        if first_id == second_id:
            return
        first_links = self.links_at(first_id, point)
        second_links = self.links_at(second_id, point)
        first_links.add(second_id)
        second_links.add(first_id)

    def detach(self, segment_id: int) -> None:
        """Remove every link to and from a segment."""
        segment = self[segment_id]
        for other_id in segment.links:
            other = self[other_id]
            other.links_forward.discard(segment_id)
            other.links_backward.discard(segment_id)
        segment.links_forward.clear()
        segment.links_backward.clear()

    def _detach_end(self, segment_id: int, end: str) -> None:
        links = self._links(segment_id, end)
        point = self[segment_id].point_a if end == "a" else self[segment_id].point_b
        for other_id in links:
            other_end = self.end_at(other_id, point)
            if other_end is not None:
                self._links(other_id, other_end).discard(segment_id)
        links.clear()

    def move_endpoint(self, segment_id: int, end: str, point: Point) -> None:
        """
        Relocate one endpoint of a segment.

        Links held at the old location no longer describe a shared point, so they
        are dropped on both sides before the endpoint moves.
        """
        segment = self[segment_id]
        current = segment.point_a if end == "a" else segment.point_b
        if current == point:
            return
        self._detach_end(segment_id, end)
        if end == "a":
            segment.point_a = point
        else:
            segment.point_b = point

    def split(self, segment_id: int, point: Point, candidate_id: int) -> int:
        """
        Split a segment at ``point`` where a candidate meets it.

        The segment keeps its start and now ends at ``point``; a new segment covers
        the remainder and inherits the forward links. The candidate must already
        have an endpoint at ``point``.

        Args:
            segment_id: Segment to split
            point: Split location, strictly inside the segment
            candidate_id: Segment that caused the split

        Returns:
            Id of the new segment covering ``point`` to the old end

        Raises:
            GeometryError: If ``point`` coincides with an endpoint of the segment
        """
        segment = self[segment_id]
        if point == segment.point_a or point == segment.point_b:
            raise GeometryError(f"Cannot split segment {segment_id} at its endpoint {point}")

        remainder = RoadSegment(
            point_a=point,
            point_b=segment.point_b,
            road_type=segment.road_type,
            width=segment.width,
            vertical_offset=segment.vertical_offset,
            priority=segment.priority,
            has_been_split=True,
        )
        remainder_id = self.add(remainder)

        # forward links now belong to the far piece
        remainder.links_forward = set(segment.links_forward)
        for other_id in remainder.links_forward:
            other = self[other_id]
            for links in (other.links_forward, other.links_backward):
                if segment_id in links:
                    links.discard(segment_id)
                    links.add(remainder_id)

        segment.point_b = point
        segment.has_been_split = True
        segment.links_forward = set()

        self.connect(segment_id, remainder_id, point)
        self.connect(segment_id, candidate_id, point)
        self.connect(remainder_id, candidate_id, point)

        return remainder_id

    def join(self, candidate_id: int, end: str, segment_id: int, segment_end: str) -> bool:
        """
        Snap a candidate endpoint onto an endpoint of an existing segment.

        Returns:
            False if the junction already holds a segment spanning the same two
            points as the snapped candidate, True once the candidate is linked to
            every segment at the junction
        """
        segment = self[segment_id]
        point = segment.point_a if segment_end == "a" else segment.point_b
        junction = self._links(segment_id, segment_end)

        self.move_endpoint(candidate_id, end, point)
        candidate = self[candidate_id]
        pair = {candidate.point_a, candidate.point_b}

        for other_id in junction | {segment_id}:
            if other_id == candidate_id:
                continue
            other = self[other_id]
            if {other.point_a, other.point_b} == pair:
                return False

        for other_id in list(junction):
            self.connect(candidate_id, other_id, point)
        self.connect(candidate_id, segment_id, point)
        return True
