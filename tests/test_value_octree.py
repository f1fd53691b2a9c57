from collections import deque

import pytest

from voxelkit.octree import Octree
from voxelkit.value_octree import ChunkSave, ValueOctree


class Generator:
    def get_value(self, x, y, z):
        return float(x + 3 * y - 2 * z)

    def get_material(self, x, y, z):
        return ("stone", x, y, z)


GEN = Generator()


def make_tree(depth=1):
    return ValueOctree(GEN, (0, 0, 0), depth, Octree.top_id_from_depth(depth))


def read_point(tree, x, y, z):
    values, materials = tree.read_region((x, y, z), 1, (1, 1, 1))
    return values[0], materials[0]


def test_clean_tree_reads_generator():
    tree = make_tree()
    values, materials = tree.read_region((-4, 2, 5), 1, (2, 3, 4))
    for k in range(4):
        for j in range(3):
            for i in range(2):
                index = i + 2 * j + 6 * k
                point = (-4 + i, 2 + j, 5 + k)
                assert values[index] == GEN.get_value(*point)
                assert materials[index] == GEN.get_material(*point)
    assert tree.is_dirty() is False


def test_set_value_only_changes_that_voxel():
    tree = make_tree()
    tree.get_leaf(1, 1, 1).set_value_and_material(1, 1, 1, 42.5, "ignored", True, False)
    assert read_point(tree, 1, 1, 1) == (42.5, GEN.get_material(1, 1, 1))
    assert read_point(tree, 2, 1, 1) == (GEN.get_value(2, 1, 1), GEN.get_material(2, 1, 1))
    assert tree.is_dirty()
    assert not tree.is_leaf()


def test_set_material_only_keeps_generator_value():
    tree = make_tree()
    tree.get_leaf(-3, 4, -5).set_value_and_material(-3, 4, -5, 99.0, "gold", False, True)
    assert read_point(tree, -3, 4, -5) == (GEN.get_value(-3, 4, -5), "gold")


def test_get_leaf_descends_to_chunk():
    tree = make_tree(2)
    tree.get_leaf(5, -7, 9).set_value_and_material(5, -7, 9, 1.0, "x", True, True)
    leaf = tree.get_leaf(5, -7, 9)
    assert leaf.depth == 0
    assert leaf.size() == 16
    assert leaf.contains(5, -7, 9)
    assert leaf.is_dirty()


def test_get_child_on_leaf_raises():
    with pytest.raises(RuntimeError):
        make_tree().get_child(0, 0, 0)


def test_set_on_inner_node_raises():
    tree = make_tree()
    tree.get_leaf(0, 0, 0).set_value_and_material(0, 0, 0, 1.0, None, True, False)
    with pytest.raises(RuntimeError):
        tree.set_value_and_material(0, 0, 0, 1.0, None, True, False)


def test_set_outside_raises():
    with pytest.raises(ValueError):
        make_tree().set_value_and_material(16, 0, 0, 1.0, None, True, False)


def test_get_leaf_outside_raises():
    with pytest.raises(ValueError):
        make_tree().get_leaf(0, -17, 0)


def test_read_region_outside_raises():
    with pytest.raises(ValueError):
        make_tree().read_region((10, 0, 0), 1, (8, 1, 1))


def test_read_region_rejects_bad_arguments():
    tree = make_tree()
    with pytest.raises(ValueError):
        tree.read_region((0, 0, 0), 0, (1, 1, 1))
    with pytest.raises(ValueError):
        tree.read_region((0, 0, 0), 1, (-1, 1, 1))


def test_strided_reads_agree_with_point_reads():
    tree = make_tree()
    for point in [(1, 1, 1), (-15, -14, -13), (0, -1, 2), (-3, 9, -9)]:
        tree.get_leaf(*point).set_value_and_material(*point, 7.0, "edited", True, True)
    for start, step, size in [((-16, -16, -16), 2, (16, 16, 16)), ((-15, -14, -13), 3, (10, 10, 10))]:
        values, materials = tree.read_region(start, step, size)
        sx, sy, _ = size
        for k in range(size[2]):
            for j in range(size[1]):
                for i in range(size[0]):
                    point = (start[0] + i * step, start[1] + j * step, start[2] + k * step)
                    index = i + sx * j + sx * sy * k
                    assert (values[index], materials[index]) == read_point(tree, *point)


def test_dirty_chunks_describe_edited_leaves():
    tree = make_tree()
    assert list(tree.dirty_chunks()) == []
    tree.get_leaf(1, 1, 1).set_value_and_material(1, 1, 1, 3.0, "m", True, True)
    chunks = list(tree.dirty_chunks())
    leaf = tree.get_leaf(1, 1, 1)
    assert len(chunks) == 1
    assert chunks[0].id == leaf.id
    assert chunks[0].position == leaf.position
    assert len(chunks[0].values) == 16 * 16 * 16
    assert 3.0 in chunks[0].values


def test_chunk_save_requires_full_chunk():
    with pytest.raises(ValueError):
        ChunkSave(1, (0, 0, 0), (0.0,), (None,))


def test_save_and_load_round_trip():
    source = make_tree()
    for point, value in [((1, 1, 1), 5.0), ((-10, 3, 7), -2.0), ((12, -12, -1), 9.5)]:
        source.get_leaf(*point).set_value_and_material(*point, value, "edited", True, True)
    saves = deque(source.dirty_chunks())
    count = len(saves)

    target = make_tree()
    positions = target.load_from_save(saves)
    assert len(saves) == 0
    assert len(positions) == 8 * count
    for chunk in source.dirty_chunks():
        assert chunk.position in positions

    whole = ((-16, -16, -16), 1, (32, 32, 32))
    assert target.read_region(*whole) == source.read_region(*whole)
    assert list(target.dirty_chunks()) == list(source.dirty_chunks())


def test_load_ignores_unrelated_save():
    tree = make_tree()
    foreign = ChunkSave(5, (0, 0, 0), (0.0,) * 4096, (None,) * 4096)
    saves = deque([foreign])
    assert tree.load_from_save(saves) == []
    assert list(saves) == [foreign]
    assert tree.is_leaf()


def test_dirty_chunk_positions_include_neighbours():
    tree = make_tree()
    assert tree.dirty_chunk_positions() == []
    tree.get_leaf(-1, -1, -1).set_value_and_material(-1, -1, -1, 0.0, None, True, False)
    leaf = tree.get_leaf(-1, -1, -1)
    positions = tree.dirty_chunk_positions()
    assert len(positions) == 8
    assert leaf.position in positions
    s = leaf.size()
    px, py, pz = leaf.position
    assert (px - s, py - s, pz - s) in positions