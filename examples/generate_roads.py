# examples/generate_roads.py

import os
import sys

# Ensure we use the local cityroads instead of any installed version
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import argparse

from cityroads.core.definitions import CenterShapes
from cityroads.growth.config import CityConfig
from cityroads.growth.density import RadialDensityField
from cityroads.growth.io import segments_to_geodataframe
from cityroads.growth.report import display_summary
from cityroads.growth.runner import RoadGrowth


def main():
    """
    Grow a road network over a radial population field and summarise it.
    """
    parser = argparse.ArgumentParser(description="Grow a city road network")
    parser.add_argument("--name", default="New City", help="City name")
    parser.add_argument("--max-segments", type=int, default=500, help="Segment budget")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--shape",
        default=CenterShapes.X,
        choices=[CenterShapes.O, CenterShapes.X, CenterShapes.Y],
        help="Root highway layout at the centre",
    )
    parser.add_argument(
        "--radius", type=float, default=1200.0, help="Falloff radius of the population field"
    )
    parser.add_argument("--verbose", action="store_true", help="Log every rejected candidate")
    args = parser.parse_args()

    config = CityConfig(
        city_name=args.name,
        center_shape=args.shape,
        max_road_segments=args.max_segments,
        seed=args.seed,
        verbose=args.verbose,
    )

    print("=" * 60)
    print(f"Growing {config.city_name}")
    print("=" * 60)

    growth = RoadGrowth(config, RadialDensityField(radius=args.radius))
    model = growth.run()

    display_summary(model, growth.rejections, growth.iterations)

    gdf = segments_to_geodataframe(model)
    print(gdf.head())


if __name__ == "__main__":
    main()
