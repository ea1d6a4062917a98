"""Hand generated roads to view builders."""

from __future__ import annotations

from typing import Any

import geopandas as gpd
from shapely.geometry import LineString, mapping

from cityroads.core.definitions import PropertyKeys
from cityroads.growth.model import CityModel
from cityroads.growth.segments import RoadSegment


def segment_properties(segment: RoadSegment) -> dict[str, Any]:
    return {
        PropertyKeys.SegmentId: segment.id,
        PropertyKeys.RoadType: segment.road_type,
        PropertyKeys.Width: segment.width,
        PropertyKeys.VerticalOffset: segment.vertical_offset,
        PropertyKeys.Priority: segment.priority,
        PropertyKeys.HasBeenSplit: segment.has_been_split,
        PropertyKeys.LinksForward: sorted(segment.links_forward),
        PropertyKeys.LinksBackward: sorted(segment.links_backward),
    }


def segments_to_geodataframe(model: CityModel, crs=None) -> gpd.GeoDataFrame:
    """
    Build a GeoDataFrame of the accepted road segments.

    Args:
        model: Generated city
        crs: Optional coordinate reference system for the frame

    Returns:
        GeoDataFrame with one LineString row per segment, in acceptance order
    """
    rows = [segment_properties(s) for s in model.road_segments]
    geometries = [s.line for s in model.road_segments]
    if not rows:
        return gpd.GeoDataFrame(
            {key: [] for key in _property_columns()}, geometry=[], crs=crs
        )
    return gpd.GeoDataFrame(rows, geometry=geometries, crs=crs)


def _property_columns() -> list[str]:
    return [
        PropertyKeys.SegmentId,
        PropertyKeys.RoadType,
        PropertyKeys.Width,
        PropertyKeys.VerticalOffset,
        PropertyKeys.Priority,
        PropertyKeys.HasBeenSplit,
        PropertyKeys.LinksForward,
        PropertyKeys.LinksBackward,
    ]


def to_feature(geom: LineString, props: dict[str, Any] | None = None) -> dict:
    """Convert a road line to a GeoJSON feature."""
    geometry = mapping(geom)
    # coordinates as lists, not tuples
    coordinates = geometry.get("coordinates")
    if coordinates is not None:
        geometry["coordinates"] = [list(c) for c in coordinates]
    return {"type": "Feature", "geometry": geometry, "properties": props or {}}


def segments_to_features(model: CityModel) -> list[dict]:
    """GeoJSON-like features for the accepted road segments."""
    return [to_feature(s.line, segment_properties(s)) for s in model.road_segments]
