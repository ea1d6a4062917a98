"""Region quadtree over axis-aligned bounds."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Optional

from cityroads.core.geometry import Rect, rects_overlap


class QuadTree:
    """
    Quadtree storing items by their bounding rectangle.

    A node keeps items directly until it holds more than ``max_objects`` and is
    shallower than ``max_depth``; it then splits into four quadrants and pushes
    its items down. An item straddling quadrant borders is stored in every
    quadrant it overlaps, and an item overlapping no quadrant stays on the node.

    Items must be hashable; ``retrieve`` uses them to drop duplicates.
    """

    def __init__(self, bounds: Rect, max_objects: int = 10, max_depth: int = 10, depth: int = 0):
        self.bounds = bounds
        self.max_objects = max_objects
        self.max_depth = max_depth
        self.depth = depth
        self.objects: list[tuple[Rect, Hashable]] = []
        self.nodes: Optional[tuple[QuadTree, QuadTree, QuadTree, QuadTree]] = None

    def _subdivide(self):
        minx, miny, maxx, maxy = self.bounds
        midx = (minx + maxx) / 2
        midy = (miny + maxy) / 2
        d = self.depth + 1
        self.nodes = (
            QuadTree((minx, midy, midx, maxy), self.max_objects, self.max_depth, d),  # NW
            QuadTree((midx, midy, maxx, maxy), self.max_objects, self.max_depth, d),  # NE
            QuadTree((minx, miny, midx, midy), self.max_objects, self.max_depth, d),  # SW
            QuadTree((midx, miny, maxx, midy), self.max_objects, self.max_depth, d),  # SE
        )

        kept = []
        for rect, item in self.objects:
            if not self._push_down(rect, item):
                kept.append((rect, item))
        self.objects = kept

    def _push_down(self, rect: Rect, item: Hashable) -> bool:
        placed = False
        for node in self.nodes:
            if rects_overlap(node.bounds, rect):
                node.insert(item, rect)
                placed = True
        return placed

    def insert(self, item: Hashable, bounds: Rect) -> None:
        """Store ``item`` in every leaf its bounds overlap."""
        if self.nodes is not None and self._push_down(bounds, item):
            return

        self.objects.append((bounds, item))

        if (
            self.nodes is None
            and len(self.objects) > self.max_objects
            and self.depth < self.max_depth
        ):
            self._subdivide()

    def retrieve(self, bounds: Rect) -> list:
        """Return every item whose stored bounds overlap ``bounds``, each once."""
        out: list = []
        seen: set = set()
        self._collect(bounds, out, seen)
        return out

    def _collect(self, bounds: Rect, out: list, seen: set) -> None:
        for rect, item in self.objects:
            if item not in seen and rects_overlap(rect, bounds):
                seen.add(item)
                out.append(item)
        if self.nodes is not None:
            for node in self.nodes:
                if rects_overlap(node.bounds, bounds):
                    node._collect(bounds, out, seen)

    def items(self) -> list:
        """Every stored item, each once."""
        out: list = []
        seen: set = set()
        for node in self.iter_nodes():
            for _rect, item in node.objects:
                if item not in seen:
                    seen.add(item)
                    out.append(item)
        return out

    def __len__(self) -> int:
        return len(self.items())

    def iter_nodes(self) -> Iterator[QuadTree]:
        yield self
        if self.nodes is not None:
            for node in self.nodes:
                yield from node.iter_nodes()

    def max_depth_reached(self) -> int:
        return max(node.depth for node in self.iter_nodes())
