import pytest

from voxelkit.cellular import (
    CellularDistance,
    CellularReturnType,
    cellular_2d,
    cellular_2edge_2d,
    cellular_2edge_3d,
    cellular_3d,
)
from voxelkit.permutation import Permutation, val_coord_2d, val_coord_3d

SEED = 1337
PERM = Permutation(SEED)
EUC = CellularDistance.EUCLIDEAN
MAN = CellularDistance.MANHATTAN
NAT = CellularDistance.NATURAL
RT = CellularReturnType


def test_zero_jitter_at_lattice_point_has_zero_distance():
    assert cellular_2d(PERM, SEED, 2.0, 3.0, EUC, RT.DISTANCE, 0.0, None) == 0.0
    assert cellular_3d(PERM, SEED, 2.0, 3.0, -1.0, EUC, RT.DISTANCE, 0.0, None) == 0.0


@pytest.mark.parametrize("point", [(2.2, 3.1), (-4.3, 0.4), (10.45, -7.2)])
def test_natural_is_sum_of_manhattan_and_euclidean_without_jitter(point):
    x, y = point
    euc = cellular_2d(PERM, SEED, x, y, EUC, RT.DISTANCE, 0.0, None)
    man = cellular_2d(PERM, SEED, x, y, MAN, RT.DISTANCE, 0.0, None)
    nat = cellular_2d(PERM, SEED, x, y, NAT, RT.DISTANCE, 0.0, None)
    assert nat == pytest.approx(euc + man)


def test_natural_3d_is_sum_without_jitter():
    args = (PERM, SEED, 1.3, -2.2, 5.4)
    euc = cellular_3d(*args, EUC, RT.DISTANCE, 0.0, None)
    man = cellular_3d(*args, MAN, RT.DISTANCE, 0.0, None)
    nat = cellular_3d(*args, NAT, RT.DISTANCE, 0.0, None)
    assert nat == pytest.approx(euc + man)


def test_cell_value_matches_hash_of_nearest_cell():
    assert cellular_2d(PERM, SEED, 2.2, 3.1, EUC, RT.CELL_VALUE, 0.0, None) == val_coord_2d(SEED, 2, 3)
    assert cellular_3d(PERM, SEED, 2.2, 3.1, -0.9, EUC, RT.CELL_VALUE, 0.0, None) == val_coord_3d(SEED, 2, 3, -1)


def test_noise_lookup_receives_feature_point():
    calls = []

    def lookup(*coords):
        calls.append(coords)
        return 0.25

    result = cellular_2d(PERM, SEED, 2.2, 3.1, EUC, RT.NOISE_LOOKUP, 0.0, lookup)
    assert result == 0.25
    assert calls == [(2.0, 3.0)]

    calls.clear()
    cellular_3d(PERM, SEED, 2.2, 3.1, 4.3, EUC, RT.NOISE_LOOKUP, 0.0, lookup)
    assert calls == [(2.0, 3.0, 4.0)]


def test_noise_lookup_without_source_raises():
    with pytest.raises(ValueError):
        cellular_2d(PERM, SEED, 0.5, 0.5, EUC, RT.NOISE_LOOKUP, 0.45, None)
    with pytest.raises(ValueError):
        cellular_3d(PERM, SEED, 0.5, 0.5, 0.5, EUC, RT.NOISE_LOOKUP, 0.45, None)


def test_edge_return_types_fall_back_to_zero_in_single_cellular():
    assert cellular_3d(PERM, SEED, 0.3, 0.7, 1.1, EUC, RT.DISTANCE2, 0.45, None) == 0.0
    assert cellular_2edge_2d(PERM, 0.3, 0.7, EUC, RT.CELL_VALUE, 0.45, 0, 1) == 0.0


@pytest.mark.parametrize("metric", list(CellularDistance))
def test_first_edge_distance_equals_nearest_distance(metric):
    nearest = cellular_2d(PERM, SEED, 3.7, -1.2, metric, RT.DISTANCE, 0.45, None)
    edge = cellular_2edge_2d(PERM, 3.7, -1.2, metric, RT.DISTANCE2, 0.45, 0, 0)
    assert edge == pytest.approx(nearest)
    nearest3 = cellular_3d(PERM, SEED, 3.7, -1.2, 0.6, metric, RT.DISTANCE, 0.45, None)
    edge3 = cellular_2edge_3d(PERM, 3.7, -1.2, 0.6, metric, RT.DISTANCE2, 0.45, 0, 0)
    assert edge3 == pytest.approx(nearest3)


def test_distances_are_ordered():
    ds = [cellular_2edge_2d(PERM, 5.1, 2.9, EUC, RT.DISTANCE2, 0.45, 0, i) for i in range(4)]
    assert ds == sorted(ds)
    ds3 = [cellular_2edge_3d(PERM, 5.1, 2.9, 0.2, EUC, RT.DISTANCE2, 0.45, 0, i) for i in range(4)]
    assert ds3 == sorted(ds3)


@pytest.mark.parametrize("fn,args", [
    (cellular_2edge_2d, (PERM, 1.7, -3.3)),
    (cellular_2edge_3d, (PERM, 1.7, -3.3, 2.4)),
])
def test_combinations_of_two_distances(fn, args):
    d0 = fn(*args, EUC, RT.DISTANCE2, 0.45, 0, 0)
    d1 = fn(*args, EUC, RT.DISTANCE2, 0.45, 0, 1)
    assert fn(*args, EUC, RT.DISTANCE2_ADD, 0.45, 0, 1) == pytest.approx(d1 + d0)
    assert fn(*args, EUC, RT.DISTANCE2_SUB, 0.45, 0, 1) == pytest.approx(d1 - d0)
    assert fn(*args, EUC, RT.DISTANCE2_MUL, 0.45, 0, 1) == pytest.approx(d1 * d0)
    assert fn(*args, EUC, RT.DISTANCE2_DIV, 0.45, 0, 1) == pytest.approx(d0 / d1)


def test_indices_are_sorted_and_clamped():
    a = cellular_2edge_2d(PERM, 0.4, 0.9, MAN, RT.DISTANCE2_SUB, 0.45, 0, 1)
    b = cellular_2edge_2d(PERM, 0.4, 0.9, MAN, RT.DISTANCE2_SUB, 0.45, 1, 0)
    assert a == b
    c = cellular_2edge_2d(PERM, 0.4, 0.9, MAN, RT.DISTANCE2, 0.45, 0, 3)
    d = cellular_2edge_2d(PERM, 0.4, 0.9, MAN, RT.DISTANCE2, 0.45, -2, 9)
    assert c == d


def test_accepts_integer_enum_values():
    by_enum = cellular_2d(PERM, SEED, 0.4, 0.9, MAN, RT.DISTANCE, 0.45, None)
    by_int = cellular_2d(PERM, SEED, 0.4, 0.9, 1, 2, 0.45, None)
    assert by_enum == by_int