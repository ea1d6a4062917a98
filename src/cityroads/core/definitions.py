"""Core definitions for cityroads.

This module contains enumeration types and constants used throughout the cityroads
library for describing roads, intersections and the state of a growth run.

Classes:
    PropertyKeys: Field names used when road segments are exported.
    RoadTypes: Road type classifications.
    IntersectionTypes: Classification of how two line segments meet.
    CenterShapes: Layout of the root highways at the city centre.
    GrowthStates: Lifecycle states of a growth run.
"""

from enum import EnumType


class PropertyKeys(EnumType):
    """Property field names used in exported road layers.

    Attributes:
        RoadType: Field name for road type classification.
        Width: Field name for the road width.
        VerticalOffset: Field name for the road vertical offset.
        Priority: Field name for the worklist priority the segment was accepted with.
        HasBeenSplit: Field name for the split flag.
    """

    SegmentId = "id"
    RoadType = "type"
    Width = "width"
    VerticalOffset = "vertical_offset"
    Priority = "priority"
    HasBeenSplit = "has_been_split"
    LinksForward = "links_forward"
    LinksBackward = "links_backward"


class RoadTypes(EnumType):
    """Road type classifications used in the road network.

    Attributes:
        Highway: Highway road type identifier.
        Normal: Normal (street) road type identifier.
    """

    Highway = "road_highway"
    Normal = "road_normal"


class IntersectionTypes(EnumType):
    """Ways in which two line segments can meet.

    Attributes:
        NONE: The segments do not touch.
        POINT: The segments cross or touch at a single point.
        OVERLAP: The segments are collinear and share more than one point.
    """

    NONE = "none"
    POINT = "point"
    OVERLAP = "overlap"


class CenterShapes(EnumType):
    """Root highway layouts at the city centre.

    Attributes:
        O: Two highways leaving the centre in opposite directions.
        X: Four highways at right angles.
        Y: Three highways at 120 degrees.
    """

    O = "O"  # noqa: E741
    X = "X"
    Y = "Y"


class GrowthStates(EnumType):
    """Lifecycle of a road growth run."""

    Idle = "idle"
    Running = "running"
    Done = "done"


# Headings (degrees, relative to the centre angle) of the root highways per shape
CENTER_SHAPE_HEADINGS = {
    CenterShapes.O: (0.0, 180.0),
    CenterShapes.X: (0.0, 90.0, 180.0, 270.0),
    CenterShapes.Y: (0.0, 120.0, 240.0),
}
