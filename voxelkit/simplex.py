"""Simplex noise kernels in two, three and four dimensions."""

from __future__ import annotations

import math

from voxelkit.lattice import fast_floor
from voxelkit.noise_tables import SIMPLEX_4D
from voxelkit.permutation import Permutation

_SQRT3 = 1.7320508075688772935274463415059
F2 = 0.5 * (_SQRT3 - 1.0)
G2 = (3.0 - _SQRT3) / 6.0

F3 = 1.0 / 3.0
G3 = 1.0 / 6.0

F4 = (math.sqrt(5.0) - 1) / 4
G4 = (5 - math.sqrt(5.0)) / 2


def simplex_2d(perm: Permutation, offset: int, x: float, y: float) -> float:
    """Simplex noise at a 2D point."""
    t = (x + y) * F2
    i = fast_floor(x + t)
    j = fast_floor(y + t)

    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    i1, j1 = (1, 0) if x0 > y0 else (0, 1)

    corners = (
        (0, 0, x0, y0),
        (i1, j1, x0 - i1 + G2, y0 - j1 + G2),
        (1, 1, x0 - 1 + 2 * G2, y0 - 1 + 2 * G2),
    )

    total = 0.0
    for di, dj, dx, dy in corners:
        t = 0.5 - dx * dx - dy * dy
        if t >= 0:
            t *= t
            total += t * t * perm.grad_coord_2d(offset, i + di, j + dj, dx, dy)
    return 70 * total


def _simplex_3d_order(x0: float, y0: float, z0: float) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
    if x0 >= y0:
        if y0 >= z0:
            return (1, 0, 0), (1, 1, 0)
        if x0 >= z0:
            return (1, 0, 0), (1, 0, 1)
        return (0, 0, 1), (1, 0, 1)
    if y0 < z0:
        return (0, 0, 1), (0, 1, 1)
    if x0 < z0:
        return (0, 1, 0), (0, 1, 1)
    return (0, 1, 0), (1, 1, 0)


def simplex_3d(perm: Permutation, offset: int, x: float, y: float, z: float) -> float:
    """Simplex noise at a 3D point."""
    t = (x + y + z) * F3
    i = fast_floor(x + t)
    j = fast_floor(y + t)
    k = fast_floor(z + t)

    t = (i + j + k) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    (i1, j1, k1), (i2, j2, k2) = _simplex_3d_order(x0, y0, z0)

    corners = (
        (0, 0, 0, x0, y0, z0),
        (i1, j1, k1, x0 - i1 + G3, y0 - j1 + G3, z0 - k1 + G3),
        (i2, j2, k2, x0 - i2 + 2 * G3, y0 - j2 + 2 * G3, z0 - k2 + 2 * G3),
        (1, 1, 1, x0 - 1 + 3 * G3, y0 - 1 + 3 * G3, z0 - 1 + 3 * G3),
    )

    total = 0.0
    for di, dj, dk, dx, dy, dz in corners:
        t = 0.6 - dx * dx - dy * dy - dz * dz
        if t >= 0:
            t *= t
            total += t * t * perm.grad_coord_3d(offset, i + di, j + dj, k + dk, dx, dy, dz)
    return 32 * total


def simplex_4d(perm: Permutation, offset: int, x: float, y: float, z: float, w: float) -> float:
    """Simplex noise at a 4D point."""
    t = (x + y + z + w) * F4
    i = fast_floor(x + t)
    j = fast_floor(y + t)
    k = fast_floor(z + t)
    l = fast_floor(w + t)

    t = (i + j + k + l) * G4
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)
    w0 = w - (l - t)

    c = (
        (32 if x0 > y0 else 0)
        + (16 if x0 > z0 else 0)
        + (8 if y0 > z0 else 0)
        + (4 if x0 > w0 else 0)
        + (2 if y0 > w0 else 0)
        + (1 if z0 > w0 else 0)
    ) << 2
    ranks = SIMPLEX_4D[c:c + 4]

    origin = (x0, y0, z0, w0)
    corners = [((0, 0, 0, 0), origin)]
    for step, threshold in enumerate((3, 2, 1), start=1):
        shift = tuple(1 if r >= threshold else 0 for r in ranks)
        corners.append((shift, tuple(o - s + step * G4 for o, s in zip(origin, shift))))
    corners.append(((1, 1, 1, 1), tuple(o - 1 + 4 * G4 for o in origin)))

    total = 0.0
    for (di, dj, dk, dl), (dx, dy, dz, dw) in corners:
        t = 0.6 - dx * dx - dy * dy - dz * dz - dw * dw
        if t >= 0:
            t *= t
            total += t * t * perm.grad_coord_4d(
                offset, i + di, j + dj, k + dk, l + dl, dx, dy, dz, dw
            )
    return 27 * total