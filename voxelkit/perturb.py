"""Gradient perturbation (domain warping) of 2D and 3D coordinates."""

from __future__ import annotations

from voxelkit.cell_tables_2d import CELL_2D_X, CELL_2D_Y
from voxelkit.cell_tables_3d import CELL_3D_X, CELL_3D_Y, CELL_3D_Z
from voxelkit.lattice import Interp, fast_floor, interpolate
from voxelkit.permutation import Permutation


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def gradient_perturb_2d(
    perm: Permutation,
    interp: Interp | int,
    offset: int,
    warp_amp: float,
    frequency: float,
    x: float,
    y: float,
) -> tuple[float, float]:
    """Return ``(x, y)`` displaced by an interpolated lattice vector field."""
    xf = x * frequency
    yf = y * frequency

    x0 = fast_floor(xf)
    y0 = fast_floor(yf)
    x1 = x0 + 1
    y1 = y0 + 1

    xs = interpolate(interp, xf - x0)
    ys = interpolate(interp, yf - y0)

    a = perm.index2d_256(offset, x0, y0)
    b = perm.index2d_256(offset, x1, y0)
    lx0x = _lerp(CELL_2D_X[a], CELL_2D_X[b], xs)
    ly0x = _lerp(CELL_2D_Y[a], CELL_2D_Y[b], xs)

    a = perm.index2d_256(offset, x0, y1)
    b = perm.index2d_256(offset, x1, y1)
    lx1x = _lerp(CELL_2D_X[a], CELL_2D_X[b], xs)
    ly1x = _lerp(CELL_2D_Y[a], CELL_2D_Y[b], xs)

    return (
        x + _lerp(lx0x, lx1x, ys) * warp_amp,
        y + _lerp(ly0x, ly1x, ys) * warp_amp,
    )


def gradient_perturb_3d(
    perm: Permutation,
    interp: Interp | int,
    offset: int,
    warp_amp: float,
    frequency: float,
    x: float,
    y: float,
    z: float,
) -> tuple[float, float, float]:
    """Return ``(x, y, z)`` displaced by an interpolated lattice vector field."""
    xf = x * frequency
    yf = y * frequency
    zf = z * frequency

    x0 = fast_floor(xf)
    y0 = fast_floor(yf)
    z0 = fast_floor(zf)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    xs = interpolate(interp, xf - x0)
    ys = interpolate(interp, yf - y0)
    zs = interpolate(interp, zf - z0)

    def along_x(yi: int, zi: int) -> tuple[float, float, float]:
        a = perm.index3d_256(offset, x0, yi, zi)
        b = perm.index3d_256(offset, x1, yi, zi)
        return (
            _lerp(CELL_3D_X[a], CELL_3D_X[b], xs),
            _lerp(CELL_3D_Y[a], CELL_3D_Y[b], xs),
            _lerp(CELL_3D_Z[a], CELL_3D_Z[b], xs),
        )

    def along_y(zi: int) -> tuple[float, ...]:
        low = along_x(y0, zi)
        high = along_x(y1, zi)
        return tuple(_lerp(l, h, ys) for l, h in zip(low, high))

    near = along_y(z0)
    far = along_y(z1)
    dx, dy, dz = (_lerp(n, f, zs) * warp_amp for n, f in zip(near, far))
    return x + dx, y + dy, z + dz