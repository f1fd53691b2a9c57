import math

import pytest

from voxelkit.cellular import CellularDistance, CellularReturnType
from voxelkit.fastnoise import FastNoise, FractalType, NoiseType
from voxelkit.lattice import CUBIC_2D_BOUNDING, Interp
from voxelkit.permutation import val_coord_3d

POINTS = [(0.3, 1.7, -2.2), (10.5, -3.25, 7.0), (-100.1, 42.42, 0.01), (5.0, 5.0, 5.0)]


@pytest.fixture
def noise():
    return FastNoise(1337)


def test_same_seed_is_deterministic():
    a, b = FastNoise(7), FastNoise(7)
    for p in POINTS:
        assert a.get_noise(*p) == b.get_noise(*p)


def test_seed_setter_matches_constructor():
    a = FastNoise(1)
    a.seed = 42
    b = FastNoise(42)
    a.noise_type = b.noise_type = NoiseType.PERLIN
    for p in POINTS:
        assert a.get_noise(*p) == b.get_noise(*p)
    assert a.permutation.perm == b.permutation.perm


def test_perlin_is_zero_at_lattice_points(noise):
    noise.frequency = 1.0
    noise.noise_type = NoiseType.PERLIN
    for p in [(3, 5, 7), (-4, 0, 12), (1, 1, 1)]:
        assert noise.get_noise(*p) == pytest.approx(0.0, abs=1e-12)


def test_cubic_at_lattice_points(noise):
    noise.frequency = 1.0
    noise.noise_type = NoiseType.CUBIC
    expected = noise.permutation.value_2d_fast(0, 3, 5) * CUBIC_2D_BOUNDING
    assert noise.get_noise(3, 5) == pytest.approx(expected)


def test_get_value_matches_get_noise(noise):
    noise.noise_type = NoiseType.VALUE
    noise.interp = Interp.HERMITE
    for p in POINTS:
        assert noise.get_value(*p) == noise.get_noise(*p)
        assert noise.get_value(*p[:2]) == noise.get_noise(*p[:2])


def test_fractal_bounding_default(noise):
    assert noise.fractal_bounding == pytest.approx(1 / 1.75)
    noise.octaves = 1
    assert noise.fractal_bounding == 1.0


@pytest.mark.parametrize(
    "fractal,single",
    [
        (FractalType.BILLOW, lambda v: abs(v) * 2 - 1),
        (FractalType.RIGID_MULTI, lambda v: 1 - abs(v)),
    ],
)
def test_single_octave_fractal_shapes(noise, fractal, single):
    noise.octaves = 1
    noise.fractal_type = FractalType.FBM
    base = [noise.get_perlin_fractal(*p) for p in POINTS]
    noise.fractal_type = fractal
    for p, b in zip(POINTS, base):
        assert noise.get_perlin_fractal(*p) == pytest.approx(single(b))


@pytest.mark.parametrize(
    "noise_type",
    [NoiseType.VALUE_FRACTAL, NoiseType.PERLIN_FRACTAL, NoiseType.SIMPLEX_FRACTAL, NoiseType.CUBIC_FRACTAL],
)
def test_fbm_stays_bounded(noise, noise_type):
    noise.noise_type = noise_type
    for p in POINTS:
        assert abs(noise.get_noise(*p)) <= 1.5
        assert abs(noise.get_noise(*p[:2])) <= 1.5


def test_simplex_4d_bounded(noise):
    noise.frequency = 0.37
    for p in POINTS:
        assert abs(noise.get_simplex(*p, 1.25)) <= 1.2


def test_white_noise_range_and_dispatch(noise):
    noise.frequency = 1.0
    noise.noise_type = NoiseType.WHITE_NOISE
    for p in POINTS:
        v = noise.get_white_noise(*p)
        assert -1.0 <= v < 1.0
        assert noise.get_noise(*p) == v


def test_white_noise_int_uses_seed(noise):
    assert noise.get_white_noise_int(4, -5, 6) == val_coord_3d(1337, 4, -5, 6)


def test_cellular_distance_non_negative(noise):
    noise.noise_type = NoiseType.CELLULAR
    noise.cellular_return_type = CellularReturnType.DISTANCE
    for metric in CellularDistance:
        noise.cellular_distance_function = metric
        for p in POINTS:
            assert noise.get_noise(*p) >= 0
            assert noise.get_cellular(*p[:2]) >= 0


def test_cellular_two_edge_sub_non_negative(noise):
    noise.cellular_return_type = CellularReturnType.DISTANCE2_SUB
    for p in POINTS:
        assert noise.get_cellular(*p) >= 0


def test_cellular_lookup(noise):
    lookup = FastNoise(9)
    lookup.noise_type = NoiseType.VALUE
    noise.cellular_return_type = CellularReturnType.NOISE_LOOKUP
    noise.cellular_noise_lookup = lookup
    for p in POINTS:
        assert -1.0 <= noise.get_cellular(*p) <= 1.0


def test_cellular_lookup_missing_raises(noise):
    noise.cellular_return_type = CellularReturnType.NOISE_LOOKUP
    with pytest.raises(ValueError):
        noise.get_cellular(1.0, 2.0, 3.0)


def test_set_cellular_indices_sorts_and_clamps(noise):
    noise.set_cellular_distance2_indices(3, -1)
    assert noise.cellular_distance2_indices == (0, 3)
    noise.set_cellular_distance2_indices(9, 2)
    assert noise.cellular_distance2_indices == (2, 3)


def test_gradient_perturb_zero_amplitude(noise):
    noise.gradient_perturb_amp = 0.0
    assert noise.gradient_perturb(1.5, -2.5, 3.5) == (1.5, -2.5, 3.5)
    assert noise.gradient_perturb_fractal(1.5, -2.5) == (1.5, -2.5)


def test_gradient_perturb_moves_within_amplitude(noise):
    noise.gradient_perturb_amp = 2.0
    x, y, z = noise.gradient_perturb(10.3, 20.7, 30.1)
    dist = math.dist((x, y, z), (10.3, 20.7, 30.1))
    assert dist <= 2.0 * math.sqrt(3) + 1e-9


def test_coordinates_with_gap_rejected(noise):
    with pytest.raises(TypeError):
        noise.get_simplex(1.0, 2.0, None, 3.0)