"""Unit tests for point cloud generation."""

import pytest

from gabriel_paths.core.environment import PointCloud


class TestGenerate:
    """Test random point placement."""

    def test_ids_follow_draw_order(self, cloud):
        assert [node.id for node in cloud.nodes] == list(range(40))

    def test_points_are_distinct(self, cloud):
        positions = {tuple(node.position) for node in cloud.nodes}
        assert len(positions) == len(cloud.nodes)

    def test_points_respect_margins(self, cloud):
        for node in cloud.nodes:
            assert 10 <= node.x < 180
            assert 10 <= node.y < 130
            assert cloud.is_point_in_bounds(node.position)

    def test_integer_coordinates(self, cloud):
        assert all(isinstance(node.x, int) and isinstance(node.y, int) for node in cloud.nodes)

    def test_new_nodes_have_no_neighbors(self, cloud):
        assert all(node.neighbors == [] for node in cloud.nodes)

    def test_same_seed_same_cloud(self):
        first = PointCloud((300, 300)).generate(25, seed=42)
        second = PointCloud((300, 300)).generate(25, seed=42)
        assert [n.position for n in first] == [n.position for n in second]

    def test_different_seed_different_cloud(self):
        first = PointCloud((300, 300)).generate(25, seed=1)
        second = PointCloud((300, 300)).generate(25, seed=2)
        assert [n.position for n in first] != [n.position for n in second]

    def test_fill_to_capacity(self):
        cloud = PointCloud((33, 33), min_margin=10, max_margin=20)
        nodes = cloud.generate(cloud.capacity, seed=0)
        assert len({tuple(n.position) for n in nodes}) == 9

    def test_zero_points(self):
        assert PointCloud((100, 100)).generate(0) == []


class TestValidation:
    """Test rejected parameters."""

    def test_margins_leave_no_room(self):
        with pytest.raises(ValueError, match="no room"):
            PointCloud((25, 25), min_margin=10, max_margin=20)

    def test_too_many_points(self):
        cloud = PointCloud((33, 33))
        with pytest.raises(ValueError, match="distinct points"):
            cloud.generate(10)

    def test_negative_count(self):
        with pytest.raises(ValueError):
            PointCloud((100, 100)).generate(-1)

    def test_random_pair_before_generate(self):
        with pytest.raises(ValueError, match="generate"):
            PointCloud((100, 100)).random_pair()


class TestRandomPair:
    """Test start/goal selection."""

    def test_pair_ids_exist(self, cloud):
        start_id, goal_id = cloud.random_pair(seed=9)
        ids = {node.id for node in cloud.nodes}
        assert start_id in ids and goal_id in ids

    def test_pair_is_reproducible(self, cloud):
        assert cloud.random_pair(seed=9) == cloud.random_pair(seed=9)
