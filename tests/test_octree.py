import pytest

from voxelkit.octree import Octree, int_pow9


def test_int_pow9_base_and_growth():
    assert int_pow9(0) == 1
    for n in range(19):
        assert int_pow9(n + 1) == 9 * int_pow9(n)


def test_int_pow9_rejects_too_large_power():
    with pytest.raises(ValueError):
        int_pow9(20)


def test_depth_limit():
    with pytest.raises(ValueError):
        Octree((0, 0, 0), 20, 1)


def test_size_of_leaf_chunk_and_doubling():
    assert Octree((0, 0, 0), 0, 1).size() == 16
    for depth in range(10):
        assert Octree((0, 0, 0), depth + 1, 1).size() == 2 * Octree((0, 0, 0), depth, 1).size()


def test_corners_are_centred_on_position():
    node = Octree((5, -3, 7), 2, 1)
    low, high = node.bounds()
    assert low == node.minimal_corner()
    assert high == node.maximal_corner()
    for lo, hi, p in zip(low, high, node.position):
        assert hi - lo == node.size()
        assert lo + hi == 2 * p


def test_contains_is_half_open():
    node = Octree((0, 0, 0), 1, 1)
    assert node.contains(*node.minimal_corner())
    assert not node.contains(*node.maximal_corner())
    mx, my, mz = node.maximal_corner()
    assert node.contains(mx - 1, my - 1, mz - 1)


def test_local_global_round_trip():
    node = Octree((32, -16, 0), 1, 1)
    assert node.local_to_global(0, 0, 0) == node.minimal_corner()
    for point in [(0, 0, 0), (3, 17, 31), (-4, 9, 2)]:
        assert node.global_to_local(*node.local_to_global(*point)) == point


def test_equality_and_ordering_by_id():
    a = Octree((0, 0, 0), 1, 9)
    b = Octree((0, 0, 0), 1, 9)
    c = Octree((8, 8, 8), 0, 17)
    assert a == b
    assert a != c
    assert a < c
    assert c > a
    assert sorted([c, a]) == [a, c]
    assert len({a, b, c}) == 2


def test_top_id_matches_power_of_nine():
    for depth in range(5):
        assert Octree.top_id_from_depth(depth) == int_pow9(depth)


def test_new_node_is_leaf():
    assert Octree((0, 0, 0), 3, 1).is_leaf() is True