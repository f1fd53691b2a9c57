import pytest

from voxelkit.permutation import Permutation
from voxelkit.simplex import simplex_2d, simplex_3d, simplex_4d


@pytest.fixture(scope="module")
def perm():
    return Permutation(1337)


def test_simplex_2d_vanishes_at_origin(perm):
    assert simplex_2d(perm, 0, 0.0, 0.0) == 0.0


@pytest.mark.parametrize("n", [0, 1, 2, 5, 17, 60])
def test_simplex_3d_vanishes_on_diagonal_lattice(perm, n):
    assert simplex_3d(perm, 0, float(n), float(n), float(n)) == 0.0


def test_simplex_4d_vanishes_at_origin(perm):
    assert simplex_4d(perm, 0, 0.0, 0.0, 0.0, 0.0) == 0.0


def test_simplex_2d_near_origin_uses_only_first_corner(perm):
    x, y = 0.05, 0.02
    t = 0.5 - x * x - y * y
    expected = 70 * t ** 4 * perm.grad_coord_2d(0, 0, 0, x, y)
    result = simplex_2d(perm, 0, x, y)
    assert result == pytest.approx(expected)
    assert result != 0.0


def test_simplex_3d_near_origin_uses_only_first_corner(perm):
    x, y, z = 0.05, 0.02, 0.01
    t = 0.6 - x * x - y * y - z * z
    expected = 32 * t ** 4 * perm.grad_coord_3d(0, 0, 0, 0, x, y, z)
    result = simplex_3d(perm, 0, x, y, z)
    assert result == pytest.approx(expected)
    assert result != 0.0


def test_simplex_4d_near_origin_uses_only_first_corner(perm):
    x, y, z, w = 0.1, 0.2, 0.3, 0.4
    t = 0.6 - x * x - y * y - z * z - w * w
    expected = 27 * t ** 4 * perm.grad_coord_4d(0, 0, 0, 0, 0, x, y, z, w)
    assert simplex_4d(perm, 0, x, y, z, w) == pytest.approx(expected, abs=1e-12)


def test_simplex_is_deterministic_per_seed(perm):
    other = Permutation(1337)
    for i in range(15):
        x, y, z, w = i * 0.37, i * 0.61 - 3, i * 0.19 + 1, -i * 0.23
        assert simplex_2d(perm, 0, x, y) == simplex_2d(other, 0, x, y)
        assert simplex_3d(perm, 4, x, y, z) == simplex_3d(other, 4, x, y, z)
        assert simplex_4d(perm, 9, x, y, z, w) == simplex_4d(other, 9, x, y, z, w)


def test_simplex_2d_varies_over_space(perm):
    samples = {simplex_2d(perm, 0, i * 0.29 + 0.13, i * 0.41 + 0.07) for i in range(30)}
    assert len(samples) > 10


def test_simplex_3d_varies_over_space(perm):
    samples = {simplex_3d(perm, 0, i * 0.29 + 0.13, i * 0.41 + 0.07, i * 0.11) for i in range(30)}
    assert len(samples) > 10


def test_simplex_3d_is_continuous(perm):
    base = simplex_3d(perm, 0, 1.234, 5.678, 9.1011)
    nudged = simplex_3d(perm, 0, 1.234 + 1e-8, 5.678, 9.1011)
    assert nudged == pytest.approx(base, abs=1e-5)


def test_simplex_2d_depends_on_seed():
    first = Permutation(1)
    second = Permutation(2)
    points = [(i * 0.37 + 0.1, i * 0.53 + 0.2) for i in range(30)]
    assert any(simplex_2d(first, 0, x, y) != simplex_2d(second, 0, x, y) for x, y in points)