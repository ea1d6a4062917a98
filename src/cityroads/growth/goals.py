"""Global goals: propose where the network grows next."""

from __future__ import annotations

import random
from collections.abc import Callable

from cityroads.core.definitions import RoadTypes
from cityroads.growth.config import CityConfig
from cityroads.growth.network import RoadNetwork
from cityroads.growth.segments import RoadSegment


class GlobalGoals:
    """
    Propose successor segments for an accepted segment.

    Highways always continue, choosing between straight ahead and a random
    deviation by whichever reaches more population, and may spawn a side road in
    dense areas. Normal roads only continue or branch where the population
    passes the normal threshold.

    Args:
        config: City rules
        network: Arena the proposals are registered in
        population: Callable returning the population reached by a segment
        rng: Random source shared by the whole run
    """

    def __init__(
        self,
        config: CityConfig,
        network: RoadNetwork,
        population: Callable[[RoadSegment], float],
        rng: random.Random,
    ):
        self.config = config
        self.network = network
        self.population = population
        self.rng = rng

    def propose(self, previous: RoadSegment) -> list[RoadSegment]:
        """
        Propose and tentatively link successors of ``previous``.

        Returns:
            New pending segments, already registered in the network, with their
            priority offset by the priority of ``previous``
        """
        if previous.has_been_split:
            return []

        cfg = self.config
        direction = previous.direction
        new_segments: list[RoadSegment] = []

        continue_straight = self._continue(previous, direction)
        straight_population = self.population(continue_straight)

        if previous.road_type == RoadTypes.Highway:
            random_straight = self._continue(previous, direction + self._straight_deviation())
            random_population = self.population(random_straight)

            if random_population >= straight_population:
                new_segments.append(random_straight)
                road_population = random_population
            else:
                new_segments.append(continue_straight)
                road_population = straight_population

            if (
                road_population > cfg.highway_branch_population_threshold
                and self.rng.random() < cfg.highway_branch_probability
            ):
                new_segments.append(self._branch(previous, direction, cfg.highway_branch_priority))

        elif straight_population > cfg.normal_branch_population_threshold:
            new_segments.append(continue_straight)

        if (
            previous.road_type == RoadTypes.Normal
            and straight_population > cfg.normal_branch_population_threshold
            and self.rng.random() < cfg.normal_branch_probability
        ):
            new_segments.append(self._branch(previous, direction, 0))

        for segment in new_segments:
            segment.priority += previous.priority + 1
            self.network.add(segment)
            self._link_to_junction(previous, segment)

        return new_segments

    def _link_to_junction(self, previous: RoadSegment, segment: RoadSegment) -> None:
        # NOTE: tentative links, the runner detaches them if the segment is rejected
        point = previous.point_b
        for link_id in list(previous.links_forward):
            self.network.connect(segment.id, link_id, point)
        self.network.connect(segment.id, previous.id, point)

    def _straight_deviation(self) -> float:
        limit = self.config.straight_road_max_deviation_angle
        return self.rng.uniform(-limit, limit)

    def _branch_deviation(self) -> float:
        limit = self.config.branch_road_max_deviation_angle
        return self.rng.uniform(-limit, limit)

    def _continue(self, previous: RoadSegment, angle: float) -> RoadSegment:
        return RoadSegment.from_direction(
            previous.point_b,
            angle,
            previous.length,
            previous.width,
            previous.vertical_offset,
            previous.road_type,
            0,
        )

    def _branch(self, previous: RoadSegment, direction: float, priority: int) -> RoadSegment:
        deviation = self._branch_deviation()
        side = -90.0 if self.rng.random() < 0.5 else 90.0
        return RoadSegment.from_direction(
            previous.point_b,
            direction + side + deviation,
            self.config.length_for(RoadTypes.Normal),
            self.config.width_for(RoadTypes.Normal),
            self.config.vertical_offset_for(RoadTypes.Normal),
            RoadTypes.Normal,
            priority,
        )
