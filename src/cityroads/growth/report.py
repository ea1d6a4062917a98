"""Console reporting for road growth runs."""

from __future__ import annotations

from collections import Counter

from rich.console import Console
from rich.table import Table

from cityroads.core.definitions import RoadTypes

console = Console()


def display_summary(model, rejections: Counter | None = None, iterations: int | None = None) -> None:
    """Display a summary of a generated city using rich formatting."""
    table = Table(title=f"{model.city_name} road network")

    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    segments = model.road_segments
    highways = sum(1 for s in segments if s.road_type == RoadTypes.Highway)

    table.add_row("Segments", str(len(segments)))
    table.add_row("Highway segments", str(highways))
    table.add_row("Normal segments", str(len(segments) - highways))
    table.add_row("Split segments", str(sum(1 for s in segments if s.has_been_split)))
    table.add_row("Total length", f"{sum(s.length for s in segments):.1f}")
    table.add_row("Quadtree depth", str(model.quadtree.max_depth_reached()))
    if iterations is not None:
        table.add_row("Iterations", str(iterations))

    for reason, count in sorted((rejections or {}).items()):
        table.add_row(f"Rejected: {reason}", str(count))

    console.print(table)
