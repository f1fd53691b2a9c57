"""Seeded permutation tables and the lattice hashing built on them."""

from __future__ import annotations

from voxelkit.noise_tables import GRAD_4D, GRAD_X, GRAD_Y, GRAD_Z, VAL_LUT

X_PRIME = 1619
Y_PRIME = 31337
Z_PRIME = 6971
W_PRIME = 1013

_MASK32 = 0xFFFFFFFF


def _wrap32(n: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    n &= _MASK32
    return n - (1 << 32) if n & 0x80000000 else n


def _coord_value(n: int) -> float:
    return _wrap32(n * n * n * 60493) / 2147483648.0


def val_coord_2d(seed: int, x: int, y: int) -> float:
    """Hash an integer 2D coordinate to a value in [-1, 1)."""
    n = _wrap32(seed)
    n ^= _wrap32(X_PRIME * x)
    n ^= _wrap32(Y_PRIME * y)
    return _coord_value(n)


def val_coord_3d(seed: int, x: int, y: int, z: int) -> float:
    """Hash an integer 3D coordinate to a value in [-1, 1)."""
    n = _wrap32(seed)
    n ^= _wrap32(X_PRIME * x)
    n ^= _wrap32(Y_PRIME * y)
    n ^= _wrap32(Z_PRIME * z)
    return _coord_value(n)


def val_coord_4d(seed: int, x: int, y: int, z: int, w: int) -> float:
    """Hash an integer 4D coordinate to a value in [-1, 1)."""
    n = _wrap32(seed)
    n ^= _wrap32(X_PRIME * x)
    n ^= _wrap32(Y_PRIME * y)
    n ^= _wrap32(Z_PRIME * z)
    n ^= _wrap32(W_PRIME * w)
    return _coord_value(n)


class _MersenneTwister:
    """32-bit Mersenne Twister (MT19937) seeded with a single integer."""

    _N = 624
    _M = 397

    def __init__(self, seed: int) -> None:
        state = [seed & _MASK32]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        state = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (state[i] & 0x80000000) | (state[(i + 1) % n] & 0x7FFFFFFF)
            value = state[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= 0x9908B0DF
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


def _uniform_int(gen: _MersenneTwister, low: int, high: int) -> int:
    """Draw an integer in [low, high] by rejection and down-scaling."""
    span = high - low + 1
    scaling = _MASK32 // span
    past = span * scaling
    while True:
        ret = gen()
        if ret < past:
            return ret // scaling + low


class Permutation:
    """Seeded 512-entry permutation tables used to hash lattice points."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        gen = _MersenneTwister(seed)
        perm = list(range(256)) + [0] * 256
        perm12 = [0] * 512
        for j in range(256):
            k = _uniform_int(gen, 0, 256 - j) + j
            previous = perm[j]
            perm[j] = perm[j + 256] = perm[k]
            perm[k] = previous
            perm12[j] = perm12[j + 256] = perm[j] % 12
        self.perm: tuple[int, ...] = tuple(perm)
        self.perm12: tuple[int, ...] = tuple(perm12)

    def index2d_12(self, offset: int, x: int, y: int) -> int:
        p = self.perm
        return self.perm12[(x & 0xFF) + p[(y & 0xFF) + offset]]

    def index3d_12(self, offset: int, x: int, y: int, z: int) -> int:
        p = self.perm
        return self.perm12[(x & 0xFF) + p[(y & 0xFF) + p[(z & 0xFF) + offset]]]

    def index4d_32(self, offset: int, x: int, y: int, z: int, w: int) -> int:
        p = self.perm
        return p[(x & 0xFF) + p[(y & 0xFF) + p[(z & 0xFF) + p[(w & 0xFF) + offset]]]] & 31

    def index2d_256(self, offset: int, x: int, y: int) -> int:
        p = self.perm
        return p[(x & 0xFF) + p[(y & 0xFF) + offset]]

    def index3d_256(self, offset: int, x: int, y: int, z: int) -> int:
        p = self.perm
        return p[(x & 0xFF) + p[(y & 0xFF) + p[(z & 0xFF) + offset]]]

    def index4d_256(self, offset: int, x: int, y: int, z: int, w: int) -> int:
        p = self.perm
        return p[(x & 0xFF) + p[(y & 0xFF) + p[(z & 0xFF) + p[(w & 0xFF) + offset]]]]

    def value_2d_fast(self, offset: int, x: int, y: int) -> float:
        """Table-driven lattice value for a 2D point."""
        return VAL_LUT[self.index2d_256(offset, x, y)]

    def value_3d_fast(self, offset: int, x: int, y: int, z: int) -> float:
        """Table-driven lattice value for a 3D point."""
        return VAL_LUT[self.index3d_256(offset, x, y, z)]

    def grad_coord_2d(self, offset: int, x: int, y: int, xd: float, yd: float) -> float:
        """Dot product of the lattice gradient at (x, y) with (xd, yd)."""
        lut = self.index2d_12(offset, x, y)
        return xd * GRAD_X[lut] + yd * GRAD_Y[lut]

    def grad_coord_3d(
        self, offset: int, x: int, y: int, z: int, xd: float, yd: float, zd: float
    ) -> float:
        """Dot product of the lattice gradient at (x, y, z) with (xd, yd, zd)."""
        lut = self.index3d_12(offset, x, y, z)
        return xd * GRAD_X[lut] + yd * GRAD_Y[lut] + zd * GRAD_Z[lut]

    def grad_coord_4d(
        self,
        offset: int,
        x: int,
        y: int,
        z: int,
        w: int,
        xd: float,
        yd: float,
        zd: float,
        wd: float,
    ) -> float:
        """Dot product of the 4D lattice gradient with (xd, yd, zd, wd)."""
        lut = self.index4d_32(offset, x, y, z, w) << 2
        return (
            xd * GRAD_4D[lut]
            + yd * GRAD_4D[lut + 1]
            + zd * GRAD_4D[lut + 2]
            + wd * GRAD_4D[lut + 3]
        )