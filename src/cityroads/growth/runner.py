# src/cityroads/growth/runner.py
"""Priority-driven road growth."""

from __future__ import annotations

import heapq
import random
from typing import Optional

from cityroads.core.definitions import CENTER_SHAPE_HEADINGS, GrowthStates, RoadTypes
from cityroads.growth.config import CityConfig
from cityroads.growth.constraints import LocalConstraints
from cityroads.growth.density import ConstantDensityField, DensityField
from cityroads.growth.goals import GlobalGoals
from cityroads.growth.model import CityModel
from cityroads.growth.network import RoadNetwork
from cityroads.growth.quadtree import QuadTree
from cityroads.growth.report import console
from cityroads.growth.segments import RoadSegment


class RoadGrowth:
    """
    Grow a road network from the city centre.

    The run moves from ``GrowthStates.Idle`` to ``Running`` on ``start`` and to
    ``Done`` once the worklist is empty, the segment budget is spent or the
    iteration cap is hit. ``step`` runs one loop iteration so a host can stop
    between steps; ``iterations`` counts the steps taken.

    Args:
        config: City rules
        density_field: Population field guiding the growth
        rng: Random source, seeded from ``config.seed`` when omitted
    """

    def __init__(
        self,
        config: CityConfig,
        density_field: DensityField,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.density_field = density_field
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.state = GrowthStates.Idle
        self.iterations = 0

        self.network = RoadNetwork()
        self.quadtree = QuadTree(
            config.city_bounds,
            config.quadtree_max_objects_per_node,
            config.quadtree_max_depth,
        )
        self.model = CityModel(
            config.city_name,
            config.city_bounds,
            self.quadtree,
            density_field,
            network=self.network,
            population_samples=config.population_samples_per_road,
        )
        self.constraints = LocalConstraints(config, self.network, self.quadtree)
        self.goals = GlobalGoals(
            config, self.network, self.model.calculate_population_for_road, self.rng
        )

        self._queue: list[tuple[int, int, int]] = []
        self._counter = 0

    @property
    def rejections(self):
        return self.constraints.rejections

    @property
    def pending(self) -> int:
        return len(self._queue)

    def _push(self, segment: RoadSegment) -> None:
        # sequence number breaks priority ties in insertion order
        heapq.heappush(self._queue, (segment.priority, self._counter, segment.id))
        self._counter += 1

    def root_segments(self) -> list[RoadSegment]:
        """Create the mutually linked root highways for the configured centre shape."""
        cfg = self.config
        center = (float(cfg.center_position[0]), float(cfg.center_position[1]))
        roots = []
        for heading in CENTER_SHAPE_HEADINGS[cfg.center_shape]:
            root = RoadSegment.from_direction(
                center,
                cfg.center_angle + heading,
                cfg.length_for(RoadTypes.Highway),
                cfg.width_for(RoadTypes.Highway),
                cfg.vertical_offset_for(RoadTypes.Highway),
                RoadTypes.Highway,
                0,
            )
            self.network.add(root)
            roots.append(root)

        for i, root in enumerate(roots):
            for other in roots[i + 1 :]:
                self.network.connect(root.id, other.id, center)
        return roots

    def start(self) -> None:
        if self.state != GrowthStates.Idle:
            return
        roots = self.root_segments()
        console.print(
            f"Growing roads for {self.config.city_name} from {len(roots)} root segments..."
        )
        for root in roots:
            self._push(root)
        self.state = GrowthStates.Running

    def step(self) -> bool:
        """
        Evaluate the next candidate.

        Returns:
            False once the run is done
        """
        if self.state == GrowthStates.Idle:
            self.start()
        if self.state == GrowthStates.Done:
            return False

        if (
            not self._queue
            or len(self.model) >= self.config.max_road_segments
            or self.iterations >= self.config.iteration_limit
        ):
            self._finish()
            return False

        self.iterations += 1
        _priority, _order, segment_id = heapq.heappop(self._queue)
        segment = self.network[segment_id]

        accepted = self.constraints.check(segment)

        # split pieces replace part of an accepted road, they are kept even past the budget
        for split in self.constraints.pop_split_segments():
            self.model.accept(split)

        if accepted:
            self.model.accept(segment)
            for new_segment in self.goals.propose(segment):
                self._push(new_segment)
        else:
            self.network.detach(segment.id)

        return True

    def _finish(self) -> None:
        # candidates left in the queue never join the network
        for _priority, _order, segment_id in self._queue:
            self.network.detach(segment_id)
        self._queue = []
        self.state = GrowthStates.Done
        console.print(f"{len(self.model)} segments generated.")

    def run(self) -> CityModel:
        self.start()
        while self.step():
            pass
        return self.model


def generate_city(
    config: CityConfig,
    density_field: Optional[DensityField] = None,
    seed: Optional[int] = None,
) -> CityModel:
    """
    Generate the road network of a city.

    Args:
        config: City rules
        density_field: Population field, a flat zero field when omitted
        seed: Random seed, overrides ``config.seed``

    Returns:
        CityModel with the accepted road segments and their spatial index
    """
    if density_field is None:
        density_field = ConstantDensityField(0.0)

    rng = random.Random(seed if seed is not None else config.seed)
    return RoadGrowth(config, density_field, rng=rng).run()
