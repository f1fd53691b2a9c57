"""Configurable coherent-noise generator: value, Perlin, simplex, cubic, cellular and white noise."""

from __future__ import annotations

import struct
from enum import Enum
from typing import Callable, Optional

from voxelkit.cellular import (
    CELLULAR_INDEX_MAX,
    CellularDistance,
    CellularReturnType,
    cellular_2d,
    cellular_2edge_2d,
    cellular_2edge_3d,
    cellular_3d,
)
from voxelkit.lattice import Interp, cubic_2d, cubic_3d, perlin_2d, perlin_3d, value_2d, value_3d
from voxelkit.permutation import Permutation, val_coord_2d, val_coord_3d, val_coord_4d
from voxelkit.perturb import gradient_perturb_2d, gradient_perturb_3d
from voxelkit.simplex import simplex_2d, simplex_3d, simplex_4d

Coords = tuple[float, ...]


class NoiseType(Enum):
    """Kind of noise produced by :meth:`FastNoise.get_noise`."""

    VALUE = 0
    VALUE_FRACTAL = 1
    PERLIN = 2
    PERLIN_FRACTAL = 3
    SIMPLEX = 4
    SIMPLEX_FRACTAL = 5
    CELLULAR = 6
    WHITE_NOISE = 7
    CUBIC = 8
    CUBIC_FRACTAL = 9


class FractalType(Enum):
    """How successive octaves are combined."""

    FBM = 0
    BILLOW = 1
    RIGID_MULTI = 2


_EDGE_FREE_RETURNS = (
    CellularReturnType.CELL_VALUE,
    CellularReturnType.NOISE_LOOKUP,
    CellularReturnType.DISTANCE,
)


def _float_hash(f: float) -> int:
    """Fold the bits of a single-precision float into a lattice coordinate."""
    bits = struct.unpack("<i", struct.pack("<f", f))[0]
    return bits ^ (bits >> 16)


def _present(*coords: Optional[float]) -> Coords:
    values = []
    for c in coords:
        if c is None:
            break
        values.append(c)
    if any(c is not None for c in coords[len(values):]):
        raise TypeError("coordinates must be given in order without gaps")
    return tuple(values)


class FastNoise:
    """Seeded noise generator; all parameters are plain attributes."""

    def __init__(self, seed: int = 1337) -> None:
        self.frequency = 0.01
        self.interp = Interp.QUINTIC
        self.noise_type = NoiseType.SIMPLEX
        self.lacunarity = 2.0
        self.fractal_type = FractalType.FBM
        self.cellular_distance_function = CellularDistance.EUCLIDEAN
        self.cellular_return_type = CellularReturnType.CELL_VALUE
        self.cellular_noise_lookup: Optional[FastNoise] = None
        self.cellular_jitter = 0.45
        self.gradient_perturb_amp = 1.0
        self._index0 = 0
        self._index1 = 1
        self._octaves = 3
        self._gain = 0.5
        self._fractal_bounding = 1.0
        self._update_bounding()
        self.seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    @seed.setter
    def seed(self, seed: int) -> None:
        self._seed = seed
        self.permutation = Permutation(seed)

    @property
    def octaves(self) -> int:
        return self._octaves

    @octaves.setter
    def octaves(self, octaves: int) -> None:
        self._octaves = octaves
        self._update_bounding()

    @property
    def gain(self) -> float:
        return self._gain

    @gain.setter
    def gain(self, gain: float) -> None:
        self._gain = gain
        self._update_bounding()

    @property
    def fractal_bounding(self) -> float:
        """Scale that keeps summed octaves within the single-octave range."""
        return self._fractal_bounding

    @property
    def cellular_distance2_indices(self) -> tuple[int, int]:
        return self._index0, self._index1

    def set_cellular_distance2_indices(self, index0: int, index1: int) -> None:
        """Choose which two nearest distances the two-edge return types combine."""
        low, high = min(index0, index1), max(index0, index1)
        self._index0 = min(max(low, 0), CELLULAR_INDEX_MAX)
        self._index1 = min(max(high, 0), CELLULAR_INDEX_MAX)

    def _update_bounding(self) -> None:
        amp = self._gain
        amp_fractal = 1.0
        for _ in range(1, self._octaves):
            amp_fractal += amp
            amp *= self._gain
        self._fractal_bounding = 1.0 / amp_fractal

    def _scaled(self, coords: Coords) -> Coords:
        return tuple(c * self.frequency for c in coords)

    # Single-octave kernels, each taking (offset, *coords).

    def _value(self, offset: int, *c: float) -> float:
        if len(c) == 2:
            return value_2d(self.permutation, self.interp, offset, *c)
        return value_3d(self.permutation, self.interp, offset, *c)

    def _perlin(self, offset: int, *c: float) -> float:
        if len(c) == 2:
            return perlin_2d(self.permutation, self.interp, offset, *c)
        return perlin_3d(self.permutation, self.interp, offset, *c)

    def _simplex(self, offset: int, *c: float) -> float:
        if len(c) == 2:
            return simplex_2d(self.permutation, offset, *c)
        if len(c) == 3:
            return simplex_3d(self.permutation, offset, *c)
        return simplex_4d(self.permutation, offset, *c)

    def _cubic(self, offset: int, *c: float) -> float:
        if len(c) == 2:
            return cubic_2d(self.permutation, offset, *c)
        return cubic_3d(self.permutation, offset, *c)

    def _fractal(self, single: Callable[..., float], coords: Coords) -> float:
        kind = FractalType(self.fractal_type)
        perm = self.permutation.perm

        def sample(octave: int, c: Coords) -> float:
            v = single(perm[octave], *c)
            if kind is FractalType.BILLOW:
                return abs(v) * 2 - 1
            if kind is FractalType.RIGID_MULTI:
                return 1 - abs(v)
            return v

        total = sample(0, coords)
        amp = 1.0
        for octave in range(1, self._octaves):
            coords = tuple(c * self.lacunarity for c in coords)
            amp *= self._gain
            if kind is FractalType.RIGID_MULTI:
                total -= sample(octave, coords) * amp
            else:
                total += sample(octave, coords) * amp
        if kind is FractalType.RIGID_MULTI:
            return total
        return total * self._fractal_bounding

    def _cellular(self, coords: Coords) -> float:
        kind = CellularReturnType(self.cellular_return_type)
        metric = CellularDistance(self.cellular_distance_function)
        perm = self.permutation
        if kind in _EDGE_FREE_RETURNS:
            lookup = self.cellular_noise_lookup.get_noise if self.cellular_noise_lookup else None
            if len(coords) == 2:
                return cellular_2d(perm, self._seed, *coords, metric, kind, self.cellular_jitter, lookup)
            return cellular_3d(perm, self._seed, *coords, metric, kind, self.cellular_jitter, lookup)
        if len(coords) == 2:
            return cellular_2edge_2d(
                perm, *coords, metric, kind, self.cellular_jitter, self._index0, self._index1
            )
        return cellular_2edge_3d(
            perm, *coords, metric, kind, self.cellular_jitter, self._index0, self._index1
        )

    # Public sampling API. Omitting z samples the 2D variant.

    def get_noise(self, x: float, y: float, z: Optional[float] = None) -> float:
        """Sample the configured noise type at a 2D or 3D point."""
        coords = self._scaled(_present(x, y, z))
        kind = NoiseType(self.noise_type)
        singles = {
            NoiseType.VALUE: self._value,
            NoiseType.PERLIN: self._perlin,
            NoiseType.SIMPLEX: self._simplex,
            NoiseType.CUBIC: self._cubic,
        }
        fractals = {
            NoiseType.VALUE_FRACTAL: self._value,
            NoiseType.PERLIN_FRACTAL: self._perlin,
            NoiseType.SIMPLEX_FRACTAL: self._simplex,
            NoiseType.CUBIC_FRACTAL: self._cubic,
        }
        if kind in singles:
            return singles[kind](0, *coords)
        if kind in fractals:
            return self._fractal(fractals[kind], coords)
        if kind is NoiseType.CELLULAR:
            return self._cellular(coords)
        return self.get_white_noise(*coords)

    def get_value(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._value(0, *self._scaled(_present(x, y, z)))

    def get_value_fractal(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._fractal(self._value, self._scaled(_present(x, y, z)))

    def get_perlin(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._perlin(0, *self._scaled(_present(x, y, z)))

    def get_perlin_fractal(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._fractal(self._perlin, self._scaled(_present(x, y, z)))

    def get_simplex(
        self, x: float, y: float, z: Optional[float] = None, w: Optional[float] = None
    ) -> float:
        return self._simplex(0, *self._scaled(_present(x, y, z, w)))

    def get_simplex_fractal(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._fractal(self._simplex, self._scaled(_present(x, y, z)))

    def get_cubic(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._cubic(0, *self._scaled(_present(x, y, z)))

    def get_cubic_fractal(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._fractal(self._cubic, self._scaled(_present(x, y, z)))

    def get_cellular(self, x: float, y: float, z: Optional[float] = None) -> float:
        return self._cellular(self._scaled(_present(x, y, z)))

    def get_white_noise(
        self, x: float, y: float, z: Optional[float] = None, w: Optional[float] = None
    ) -> float:
        """Hash the bit pattern of the (unscaled) coordinates to a value in [-1, 1)."""
        return self.get_white_noise_int(*(_float_hash(c) for c in _present(x, y, z, w)))

    def get_white_noise_int(
        self, x: int, y: int, z: Optional[int] = None, w: Optional[int] = None
    ) -> float:
        """Hash integer coordinates to a value in [-1, 1)."""
        coords = _present(x, y, z, w)
        if len(coords) == 2:
            return val_coord_2d(self._seed, *coords)
        if len(coords) == 3:
            return val_coord_3d(self._seed, *coords)
        return val_coord_4d(self._seed, *coords)

    def _perturb(self, offset: int, amp: float, freq: float, coords: Coords) -> Coords:
        if len(coords) == 2:
            return gradient_perturb_2d(self.permutation, self.interp, offset, amp, freq, *coords)
        return gradient_perturb_3d(self.permutation, self.interp, offset, amp, freq, *coords)

    def gradient_perturb(self, x: float, y: float, z: Optional[float] = None) -> Coords:
        """Return the point warped by one octave of gradient perturbation."""
        return self._perturb(0, self.gradient_perturb_amp, self.frequency, _present(x, y, z))

    def gradient_perturb_fractal(self, x: float, y: float, z: Optional[float] = None) -> Coords:
        """Return the point warped by every octave of gradient perturbation."""
        perm = self.permutation.perm
        amp = self.gradient_perturb_amp * self._fractal_bounding
        freq = self.frequency
        coords = self._perturb(perm[0], amp, freq, _present(x, y, z))
        for octave in range(1, self._octaves):
            freq *= self.lacunarity
            amp *= self._gain
            coords = self._perturb(perm[octave], amp, freq, coords)
        return coords