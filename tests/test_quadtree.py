"""Tests for the quadtree spatial index."""

from cityroads.growth.quadtree import QuadTree


class TestQuadTree:
    """Test QuadTree insert and retrieve."""

    def test_retrieve_overlapping_items(self):
        """Test only items overlapping the query are returned."""
        tree = QuadTree((0, 0, 100, 100))
        tree.insert("a", (10, 10, 20, 20))
        tree.insert("b", (70, 70, 80, 80))

        assert tree.retrieve((0, 0, 30, 30)) == ["a"]
        assert tree.retrieve((15, 15, 75, 75)) == ["a", "b"]
        assert tree.retrieve((40, 40, 50, 50)) == []

    def test_subdivides_over_capacity(self):
        """Test a node splits once it holds more than max_objects."""
        tree = QuadTree((0, 0, 100, 100), max_objects=2, max_depth=4)
        tree.insert("sw", (10, 10, 20, 20))
        tree.insert("se", (60, 10, 70, 20))
        assert tree.nodes is None

        tree.insert("ne", (60, 60, 70, 70))

        assert tree.nodes is not None
        assert tree.objects == []
        assert sorted(tree.retrieve((0, 0, 100, 100))) == ["ne", "se", "sw"]

    def test_straddling_item_stored_in_every_quadrant_but_returned_once(self):
        """Test items crossing quadrant borders are duplicated but deduplicated on query."""
        tree = QuadTree((0, 0, 100, 100), max_objects=1, max_depth=3)
        tree.insert("a", (10, 10, 20, 20))
        tree.insert("b", (40, 40, 60, 60))

        holders = [n for n in tree.iter_nodes() if any(item == "b" for _r, item in n.objects)]

        assert len(holders) > 1
        assert sorted(tree.retrieve((0, 0, 100, 100))) == ["a", "b"]
        assert len(tree) == 2

    def test_depth_is_bounded(self):
        """Test clustered items stop subdividing at max_depth."""
        tree = QuadTree((0, 0, 100, 100), max_objects=1, max_depth=3)
        for i in range(50):
            tree.insert(i, (1, 1, 2, 2))

        assert tree.max_depth_reached() <= 3
        assert sorted(tree.retrieve((0, 0, 5, 5))) == list(range(50))

    def test_item_outside_bounds_is_kept(self):
        """Test items outside the root bounds remain retrievable after a split."""
        tree = QuadTree((0, 0, 100, 100), max_objects=1, max_depth=3)
        tree.insert("outside", (500, 500, 510, 510))
        tree.insert("a", (10, 10, 20, 20))
        tree.insert("b", (60, 60, 70, 70))

        assert tree.nodes is not None
        assert tree.retrieve((495, 495, 520, 520)) == ["outside"]
        assert sorted(tree.items()) == ["a", "b", "outside"]

    def test_insert_after_query(self):
        """Test the tree stays queryable while inserts and queries alternate."""
        tree = QuadTree((0, 0, 100, 100), max_objects=2, max_depth=5)
        for i in range(10):
            tree.insert(i, (i * 10, i * 10, i * 10 + 5, i * 10 + 5))
            assert tree.retrieve((i * 10, i * 10, i * 10 + 1, i * 10 + 1)) == [i]

        assert len(tree) == 10
