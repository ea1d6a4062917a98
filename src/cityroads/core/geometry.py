"""Basic 2D line segment geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from shapely.errors import GEOSException
from shapely.geometry import LineString
from shapely.ops import nearest_points

from cityroads.core.definitions import IntersectionTypes
from cityroads.core.exceptions import GeometryError

Point = tuple[float, float]
Rect = tuple[float, float, float, float]

# Distances below this are treated as coincident
EPSILON = 1e-9


@dataclass
class Intersection:
    """Result of classifying how two segments meet."""

    kind: str
    points: list[Point] = field(default_factory=list)


def _endpoints(seg) -> tuple[Point, Point]:
    """Accept a ``(a, b)`` pair or any object with ``point_a``/``point_b``."""
    if hasattr(seg, "point_a"):
        return seg.point_a, seg.point_b
    a, b = seg
    return (float(a[0]), float(a[1])), (float(b[0]), float(b[1]))


def distance(p: Point, q: Point) -> float:
    return math.hypot(q[0] - p[0], q[1] - p[1])


def points_equal(p: Point, q: Point, tol: float = EPSILON) -> bool:
    """Check whether two points coincide within ``tol``."""
    return abs(p[0] - q[0]) <= tol and abs(p[1] - q[1]) <= tol


def segment_length(seg) -> float:
    a, b = _endpoints(seg)
    return distance(a, b)


def direction_degrees(seg) -> float:
    """Heading of the segment from its start to its end, in degrees."""
    a, b = _endpoints(seg)
    return math.degrees(math.atan2(b[1] - a[1], b[0] - a[0]))


def point_from_direction(start: Point, angle: float, length: float) -> Point:
    """Point reached by travelling ``length`` from ``start`` along heading ``angle`` (degrees)."""
    rad = math.radians(angle)
    return (start[0] + length * math.cos(rad), start[1] + length * math.sin(rad))


def segment_bounds(seg) -> Rect:
    """Axis-aligned bounds ``(minx, miny, maxx, maxy)`` of a segment."""
    a, b = _endpoints(seg)
    return (min(a[0], b[0]), min(a[1], b[1]), max(a[0], b[0]), max(a[1], b[1]))


def rects_overlap(r1: Rect, r2: Rect) -> bool:
    """Inclusive overlap test, touching rectangles count as overlapping."""
    return not (r1[2] < r2[0] or r2[2] < r1[0] or r1[3] < r2[1] or r2[3] < r1[1])


def rect_contains(outer: Rect, inner: Rect) -> bool:
    return (
        inner[0] >= outer[0]
        and inner[1] >= outer[1]
        and inner[2] <= outer[2]
        and inner[3] <= outer[3]
    )


def expand_rect(rect: Rect, pad: float) -> Rect:
    return (rect[0] - pad, rect[1] - pad, rect[2] + pad, rect[3] + pad)


def classify_intersection(seg_a, seg_b) -> Intersection:
    """
    Classify how two segments meet.

    Args:
        seg_a: First segment
        seg_b: Second segment

    Returns:
        Intersection with kind NONE, POINT (with the crossing points) or OVERLAP

    Raises:
        GeometryError: If GEOS cannot compute the intersection
    """
    a1, a2 = _endpoints(seg_a)
    b1, b2 = _endpoints(seg_b)

    # Shared vertices are reported exactly rather than through GEOS
    shared = [p for p in (a1, a2) if p == b1 or p == b2]

    try:
        result = LineString([a1, a2]).intersection(LineString([b1, b2]))
    except GEOSException as e:
        raise GeometryError(f"Failed to intersect segments: {e}") from e

    if result.is_empty:
        return Intersection(IntersectionTypes.NONE)

    if result.length > EPSILON:
        return Intersection(IntersectionTypes.OVERLAP)

    if shared:
        return Intersection(IntersectionTypes.POINT, shared)

    if result.geom_type == "Point":
        points = [(result.x, result.y)]
    elif hasattr(result, "geoms"):
        points = [(g.coords[0][0], g.coords[0][1]) for g in result.geoms if not g.is_empty]
    else:
        points = [tuple(result.coords[0])]

    return Intersection(IntersectionTypes.POINT, points)


def minimum_angle_difference(seg_a, seg_b) -> float:
    """
    Smallest angle between the directions of two segments.

    Returns:
        Angle in degrees (0-90), symmetric in its arguments
    """
    diff = abs(direction_degrees(seg_a) - direction_degrees(seg_b)) % 180.0
    return min(diff, 180.0 - diff)


def distance_and_projection(seg, point: Point) -> tuple[float, Point, float]:
    """
    Project a point onto the infinite line through a segment.

    Args:
        seg: Segment defining the line
        point: Point to project

    Returns:
        Tuple of (perpendicular distance, projected point, signed distance of the
        projected point along the segment from its start)

    Raises:
        GeometryError: If the segment has zero length
    """
    a, b = _endpoints(seg)
    length = distance(a, b)
    if length <= EPSILON:
        raise GeometryError("Cannot project onto a zero-length segment")

    ux = (b[0] - a[0]) / length
    uy = (b[1] - a[1]) / length

    projected_length = (point[0] - a[0]) * ux + (point[1] - a[1]) * uy
    projected = (a[0] + ux * projected_length, a[1] + uy * projected_length)

    return distance(point, projected), projected, projected_length


def distance_along_to(seg, other) -> float:
    """
    Distance from the start of ``seg`` to the point of ``seg`` closest to ``other``.

    For crossing segments this is how far along ``seg`` the crossing lies.

    Raises:
        GeometryError: If GEOS cannot compute the nearest points
    """
    a1, a2 = _endpoints(seg)
    b1, b2 = _endpoints(other)
    line = LineString([a1, a2])

    try:
        nearest, _ = nearest_points(line, LineString([b1, b2]))
        return float(line.project(nearest))
    except GEOSException as e:
        raise GeometryError(f"Failed to measure distance along segment: {e}") from e
