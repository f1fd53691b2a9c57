"""Value, Perlin and cubic lattice noise kernels with their interpolation helpers."""

from __future__ import annotations

from enum import Enum

from voxelkit.permutation import Permutation

CUBIC_2D_BOUNDING = 1.0 / (1.5 * 1.5)
CUBIC_3D_BOUNDING = 1.0 / (1.5 * 1.5 * 1.5)


class Interp(Enum):
    """Interpolation curve applied to the fractional lattice position."""

    LINEAR = 0
    HERMITE = 1
    QUINTIC = 2


def fast_floor(f: float) -> int:
    """Floor by truncation; strictly negative whole numbers land one lower."""
    return int(f) if f >= 0 else int(f) - 1


def fast_round(f: float) -> int:
    """Round half away from zero."""
    return int(f + 0.5) if f >= 0 else int(f - 0.5)


def interpolate(interp: Interp | int, t: float) -> float:
    """Apply the interpolation curve ``interp`` to ``t``."""
    kind = Interp(interp)
    if kind is Interp.HERMITE:
        return t * t * (3 - 2 * t)
    if kind is Interp.QUINTIC:
        return t * t * t * (t * (t * 6 - 15) + 10)
    return t


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _cubic_lerp(a: float, b: float, c: float, d: float, t: float) -> float:
    p = (d - c) - (a - b)
    return t * t * t * p + t * t * ((a - b) - p) + t * (c - a) + b


def value_2d(perm: Permutation, interp: Interp | int, offset: int, x: float, y: float) -> float:
    """Interpolated value noise at a 2D point."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = interpolate(interp, x - x0)
    ys = interpolate(interp, y - y0)

    xf0 = _lerp(perm.value_2d_fast(offset, x0, y0), perm.value_2d_fast(offset, x1, y0), xs)
    xf1 = _lerp(perm.value_2d_fast(offset, x0, y1), perm.value_2d_fast(offset, x1, y1), xs)
    return _lerp(xf0, xf1, ys)


def value_3d(
    perm: Permutation, interp: Interp | int, offset: int, x: float, y: float, z: float
) -> float:
    """Interpolated value noise at a 3D point."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = interpolate(interp, x - x0)
    ys = interpolate(interp, y - y0)
    zs = interpolate(interp, z - z0)

    val = perm.value_3d_fast
    xf00 = _lerp(val(offset, x0, y0, z0), val(offset, x1, y0, z0), xs)
    xf10 = _lerp(val(offset, x0, y1, z0), val(offset, x1, y1, z0), xs)
    xf01 = _lerp(val(offset, x0, y0, z1), val(offset, x1, y0, z1), xs)
    xf11 = _lerp(val(offset, x0, y1, z1), val(offset, x1, y1, z1), xs)

    yf0 = _lerp(xf00, xf10, ys)
    yf1 = _lerp(xf01, xf11, ys)
    return _lerp(yf0, yf1, zs)


def perlin_2d(perm: Permutation, interp: Interp | int, offset: int, x: float, y: float) -> float:
    """Gradient (Perlin) noise at a 2D point."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = interpolate(interp, x - x0)
    ys = interpolate(interp, y - y0)

    xd0 = x - x0
    yd0 = y - y0
    xd1 = xd0 - 1
    yd1 = yd0 - 1

    grad = perm.grad_coord_2d
    xf0 = _lerp(grad(offset, x0, y0, xd0, yd0), grad(offset, x1, y0, xd1, yd0), xs)
    xf1 = _lerp(grad(offset, x0, y1, xd0, yd1), grad(offset, x1, y1, xd1, yd1), xs)
    return _lerp(xf0, xf1, ys)


def perlin_3d(
    perm: Permutation, interp: Interp | int, offset: int, x: float, y: float, z: float
) -> float:
    """Gradient (Perlin) noise at a 3D point."""
    x0 = fast_floor(x)
    y0 = fast_floor(y)
    z0 = fast_floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = interpolate(interp, x - x0)
    ys = interpolate(interp, y - y0)
    zs = interpolate(interp, z - z0)

    xd0 = x - x0
    yd0 = y - y0
    zd0 = z - z0
    xd1 = xd0 - 1
    yd1 = yd0 - 1
    zd1 = zd0 - 1

    grad = perm.grad_coord_3d
    xf00 = _lerp(grad(offset, x0, y0, z0, xd0, yd0, zd0), grad(offset, x1, y0, z0, xd1, yd0, zd0), xs)
    xf10 = _lerp(grad(offset, x0, y1, z0, xd0, yd1, zd0), grad(offset, x1, y1, z0, xd1, yd1, zd0), xs)
    xf01 = _lerp(grad(offset, x0, y0, z1, xd0, yd0, zd1), grad(offset, x1, y0, z1, xd1, yd0, zd1), xs)
    xf11 = _lerp(grad(offset, x0, y1, z1, xd0, yd1, zd1), grad(offset, x1, y1, z1, xd1, yd1, zd1), xs)

    yf0 = _lerp(xf00, xf10, ys)
    yf1 = _lerp(xf01, xf11, ys)
    return _lerp(yf0, yf1, zs)


def cubic_2d(perm: Permutation, offset: int, x: float, y: float) -> float:
    """Bicubic value noise at a 2D point."""
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    xs = x - x1
    ys = y - y1

    columns = range(x1 - 1, x1 + 3)
    rows = [
        _cubic_lerp(*(perm.value_2d_fast(offset, xi, yi) for xi in columns), xs)
        for yi in range(y1 - 1, y1 + 3)
    ]
    return _cubic_lerp(*rows, ys) * CUBIC_2D_BOUNDING


def cubic_3d(perm: Permutation, offset: int, x: float, y: float, z: float) -> float:
    """Tricubic value noise at a 3D point."""
    x1 = fast_floor(x)
    y1 = fast_floor(y)
    z1 = fast_floor(z)
    xs = x - x1
    ys = y - y1
    zs = z - z1

    columns = range(x1 - 1, x1 + 3)
    rows = range(y1 - 1, y1 + 3)

    def plane(zi: int) -> float:
        lines = [
            _cubic_lerp(*(perm.value_3d_fast(offset, xi, yi, zi) for xi in columns), xs)
            for yi in rows
        ]
        return _cubic_lerp(*lines, ys)

    planes = [plane(zi) for zi in range(z1 - 1, z1 + 3)]
    return _cubic_lerp(*planes, zs) * CUBIC_3D_BOUNDING