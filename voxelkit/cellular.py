"""Cellular (Worley) noise in two and three dimensions."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Iterator, Optional

from voxelkit.cell_tables_2d import CELL_2D_X, CELL_2D_Y
from voxelkit.cell_tables_3d import CELL_3D_X, CELL_3D_Y, CELL_3D_Z
from voxelkit.lattice import fast_round
from voxelkit.permutation import Permutation, val_coord_2d, val_coord_3d

CELLULAR_INDEX_MAX = 3
_FAR = 999999.0


class CellularDistance(Enum):
    """Metric used to measure the distance to a cell's feature point."""

    EUCLIDEAN = 0
    MANHATTAN = 1
    NATURAL = 2


class CellularReturnType(Enum):
    """What a cellular noise evaluation reports."""

    CELL_VALUE = 0
    NOISE_LOOKUP = 1
    DISTANCE = 2
    DISTANCE2 = 3
    DISTANCE2_ADD = 4
    DISTANCE2_SUB = 5
    DISTANCE2_MUL = 6
    DISTANCE2_DIV = 7


def _measure(metric: CellularDistance, *vec: float) -> float:
    if metric is CellularDistance.MANHATTAN:
        return sum(abs(v) for v in vec)
    squared = sum(v * v for v in vec)
    if metric is CellularDistance.NATURAL:
        return sum(abs(v) for v in vec) + squared
    return squared


def _cells_2d(
    perm: Permutation, x: float, y: float, jitter: float
) -> Iterator[tuple[int, int, float, float]]:
    xr = fast_round(x)
    yr = fast_round(y)
    for xi in range(xr - 1, xr + 2):
        for yi in range(yr - 1, yr + 2):
            lut = perm.index2d_256(0, xi, yi)
            yield (
                xi,
                yi,
                xi - x + CELL_2D_X[lut] * jitter,
                yi - y + CELL_2D_Y[lut] * jitter,
            )


def _cells_3d(
    perm: Permutation, x: float, y: float, z: float, jitter: float
) -> Iterator[tuple[int, int, int, float, float, float]]:
    xr = fast_round(x)
    yr = fast_round(y)
    zr = fast_round(z)
    for xi in range(xr - 1, xr + 2):
        for yi in range(yr - 1, yr + 2):
            for zi in range(zr - 1, zr + 2):
                lut = perm.index3d_256(0, xi, yi, zi)
                yield (
                    xi,
                    yi,
                    zi,
                    xi - x + CELL_3D_X[lut] * jitter,
                    yi - y + CELL_3D_Y[lut] * jitter,
                    zi - z + CELL_3D_Z[lut] * jitter,
                )


def cellular_2d(
    perm: Permutation,
    seed: int,
    x: float,
    y: float,
    distance_function: CellularDistance | int,
    return_type: CellularReturnType | int,
    jitter: float,
    lookup: Optional[Callable[[float, float], float]],
) -> float:
    """Nearest-feature cellular noise at a 2D point.

    ``lookup`` is called with the feature point's coordinates when the
    return type is ``NOISE_LOOKUP``.
    """
    metric = CellularDistance(distance_function)
    kind = CellularReturnType(return_type)

    distance = _FAR
    xc, yc = fast_round(x), fast_round(y)
    for xi, yi, vx, vy in _cells_2d(perm, x, y, jitter):
        d = _measure(metric, vx, vy)
        if d < distance:
            distance, xc, yc = d, xi, yi

    if kind is CellularReturnType.CELL_VALUE:
        return val_coord_2d(seed, xc, yc)
    if kind is CellularReturnType.NOISE_LOOKUP:
        if lookup is None:
            raise ValueError("NOISE_LOOKUP requires a lookup noise source")
        lut = perm.index2d_256(0, xc, yc)
        return lookup(xc + CELL_2D_X[lut] * jitter, yc + CELL_2D_Y[lut] * jitter)
    if kind is CellularReturnType.DISTANCE:
        return distance
    return 0.0


def cellular_3d(
    perm: Permutation,
    seed: int,
    x: float,
    y: float,
    z: float,
    distance_function: CellularDistance | int,
    return_type: CellularReturnType | int,
    jitter: float,
    lookup: Optional[Callable[[float, float, float], float]],
) -> float:
    """Nearest-feature cellular noise at a 3D point."""
    metric = CellularDistance(distance_function)
    kind = CellularReturnType(return_type)

    distance = _FAR
    xc, yc, zc = fast_round(x), fast_round(y), fast_round(z)
    for xi, yi, zi, vx, vy, vz in _cells_3d(perm, x, y, z, jitter):
        d = _measure(metric, vx, vy, vz)
        if d < distance:
            distance, xc, yc, zc = d, xi, yi, zi

    if kind is CellularReturnType.CELL_VALUE:
        return val_coord_3d(seed, xc, yc, zc)
    if kind is CellularReturnType.NOISE_LOOKUP:
        if lookup is None:
            raise ValueError("NOISE_LOOKUP requires a lookup noise source")
        lut = perm.index3d_256(0, xc, yc, zc)
        return lookup(
            xc + CELL_3D_X[lut] * jitter,
            yc + CELL_3D_Y[lut] * jitter,
            zc + CELL_3D_Z[lut] * jitter,
        )
    if kind is CellularReturnType.DISTANCE:
        return distance
    return 0.0


def _normalise_indices(index0: int, index1: int) -> tuple[int, int]:
    low, high = min(index0, index1), max(index0, index1)
    clamp = lambda i: min(max(i, 0), CELLULAR_INDEX_MAX)  # noqa: E731
    return clamp(low), clamp(high)


def _insert(distances: list[float], d: float, index1: int) -> None:
    for i in range(index1, 0, -1):
        distances[i] = max(min(distances[i], d), distances[i - 1])
    distances[0] = min(distances[0], d)


def _combine(
    kind: CellularReturnType, distances: list[float], index0: int, index1: int
) -> float:
    d0 = distances[index0]
    d1 = distances[index1]
    if kind is CellularReturnType.DISTANCE2:
        return d1
    if kind is CellularReturnType.DISTANCE2_ADD:
        return d1 + d0
    if kind is CellularReturnType.DISTANCE2_SUB:
        return d1 - d0
    if kind is CellularReturnType.DISTANCE2_MUL:
        return d1 * d0
    if kind is CellularReturnType.DISTANCE2_DIV:
        if d1 == 0:
            return math.nan if d0 == 0 else math.copysign(math.inf, d0)
        return d0 / d1
    return 0.0


def cellular_2edge_2d(
    perm: Permutation,
    x: float,
    y: float,
    distance_function: CellularDistance | int,
    return_type: CellularReturnType | int,
    jitter: float,
    index0: int,
    index1: int,
) -> float:
    """Cellular noise combining two of the nearest feature distances at a 2D point."""
    metric = CellularDistance(distance_function)
    kind = CellularReturnType(return_type)
    index0, index1 = _normalise_indices(index0, index1)

    distances = [_FAR] * (CELLULAR_INDEX_MAX + 1)
    for _, _, vx, vy in _cells_2d(perm, x, y, jitter):
        _insert(distances, _measure(metric, vx, vy), index1)
    return _combine(kind, distances, index0, index1)


def cellular_2edge_3d(
    perm: Permutation,
    x: float,
    y: float,
    z: float,
    distance_function: CellularDistance | int,
    return_type: CellularReturnType | int,
    jitter: float,
    index0: int,
    index1: int,
) -> float:
    """Cellular noise combining two of the nearest feature distances at a 3D point."""
    metric = CellularDistance(distance_function)
    kind = CellularReturnType(return_type)
    index0, index1 = _normalise_indices(index0, index1)

    distances = [_FAR] * (CELLULAR_INDEX_MAX + 1)
    for _, _, _, vx, vy, vz in _cells_3d(perm, x, y, z, jitter):
        _insert(distances, _measure(metric, vx, vy, vz), index1)
    return _combine(kind, distances, index0, index1)