"""Octree storing the voxel values and materials that differ from the generator."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Protocol

from voxelkit.octree import CHUNK_WIDTH, Octree, Vector, int_pow9

CHUNK_VOLUME = CHUNK_WIDTH ** 3


class WorldGenerator(Protocol):
    """Source of the unmodified value and material of every voxel."""

    def get_value(self, x: int, y: int, z: int) -> float: ...

    def get_material(self, x: int, y: int, z: int) -> Any: ...


@dataclass(frozen=True)
class ChunkSave:
    """Saved contents of one modified 16x16x16 chunk."""

    id: int
    position: Vector
    values: tuple[float, ...]
    materials: tuple[Any, ...]

    def __post_init__(self) -> None:
        if len(self.values) != CHUNK_VOLUME or len(self.materials) != CHUNK_VOLUME:
            raise ValueError(f"a chunk save holds exactly {CHUNK_VOLUME} values and materials")


def _index(x: int, y: int, z: int) -> int:
    if not (0 <= x < CHUNK_WIDTH and 0 <= y < CHUNK_WIDTH and 0 <= z < CHUNK_WIDTH):
        raise IndexError(f"local coordinates {(x, y, z)} outside the chunk")
    return x + CHUNK_WIDTH * y + CHUNK_WIDTH * CHUNK_WIDTH * z


def _split(pivot: int, start: int, start_index: int, count: int, step: int) -> Iterator[tuple[int, int, int]]:
    """Split a strided run of ``count`` samples at ``pivot`` into below/above parts."""
    below = min(count, max(0, -((start - pivot) // step)))
    if below > 0:
        yield start, start_index, below
    if count - below > 0:
        yield start + below * step, start_index + below, count - below


class ValueOctree(Octree):
    """Octree node holding modified values and materials.

    Unmodified regions are read from ``world_generator``; a chunk of depth 0
    becomes dirty, and stores its 16x16x16 voxels, as soon as it is edited.
    """

    def __init__(self, world_generator: WorldGenerator, position: Iterable[int], depth: int, id: int) -> None:
        super().__init__(position, depth, id)
        self.world_generator = world_generator
        self._children: list[ValueOctree] = []
        self._values: Optional[list[float]] = None
        self._materials: Optional[list[Any]] = None
        self._dirty = False

    def is_dirty(self) -> bool:
        """Whether this node, or anything below it, has been modified."""
        return self._dirty

    def read_region(self, start: Iterable[int], step: int, size: Iterable[int]) -> tuple[list[float], list[Any]]:
        """Sample a strided box of voxels.

        Returns ``(values, materials)``, flat lists where sample ``(i, j, k)``
        sits at ``i + sx * j + sx * sy * k``.
        """
        sx, sy, sz = size
        start = tuple(start)
        if min(sx, sy, sz) < 0:
            raise ValueError("region size must not be negative")
        if step < 1:
            raise ValueError("step must be at least 1")
        count = sx * sy * sz
        values: list[float] = [0.0] * count
        materials: list[Any] = [None] * count
        if count == 0:
            return values, materials
        last = (start[0] + (sx - 1) * step, start[1] + (sy - 1) * step, start[2] + (sz - 1) * step)
        if not self.contains(*start) or not self.contains(*last):
            raise ValueError("region lies outside this octree")
        self._fill(values, materials, start, (0, 0, 0), step, (sx, sy, sz), (sx, sy, sz))
        return values, materials

    def _fill(
        self,
        values: list[float],
        materials: list[Any],
        start: Vector,
        start_index: Vector,
        step: int,
        size: Vector,
        array_size: Vector,
    ) -> None:
        sx, sy, sz = size
        if sx <= 0 or sy <= 0 or sz <= 0:
            return
        if self.is_leaf():
            ax, ay, _ = array_size
            ix, iy, iz = start_index
            gen = self.world_generator
            for k in range(sz):
                z = start[2] + k * step
                for j in range(sy):
                    y = start[1] + j * step
                    for i in range(sx):
                        x = start[0] + i * step
                        index = (ix + i) + ax * (iy + j) + ax * ay * (iz + k)
                        if self._dirty:
                            local = _index(*self.global_to_local(x, y, z))
                            values[index] = self._values[local]
                            materials[index] = self._materials[local]
                        else:
                            values[index] = gen.get_value(x, y, z)
                            materials[index] = gen.get_material(x, y, z)
            return

        px, py, pz = self.position
        for x0, i0, nx in _split(px, start[0], start_index[0], sx, step):
            for y0, j0, ny in _split(py, start[1], start_index[1], sy, step):
                for z0, k0, nz in _split(pz, start[2], start_index[2], sz, step):
                    self.get_child(x0, y0, z0)._fill(
                        values, materials, (x0, y0, z0), (i0, j0, k0), step, (nx, ny, nz), array_size
                    )

    def set_value_and_material(
        self,
        x: int,
        y: int,
        z: int,
        value: float,
        material: Any,
        set_value: bool,
        set_material: bool,
    ) -> None:
        """Edit one voxel of this leaf, subdividing down to a chunk if needed."""
        if not self.is_leaf():
            raise RuntimeError("voxels can only be set on a leaf")
        if not self.contains(x, y, z):
            raise ValueError(f"voxel {(x, y, z)} lies outside this octree")

        if self.depth != 0:
            self._create_children()
            self._dirty = True
            self.get_child(x, y, z).set_value_and_material(x, y, z, value, material, set_value, set_material)
            return

        if not self._dirty:
            self._set_as_dirty()
        index = _index(*self.global_to_local(x, y, z))
        if set_value:
            self._values[index] = value
        if set_material:
            self._materials[index] = material

    def dirty_chunks(self) -> Iterator[ChunkSave]:
        """Yield a save record for every modified chunk, in tree order."""
        if not self._dirty:
            return
        if self.is_leaf():
            yield ChunkSave(self.id, self.position, tuple(self._values), tuple(self._materials))
            return
        for child in self._children:
            yield from child.dirty_chunks()

    def load_from_save(self, saves: Iterable[ChunkSave]) -> list[Vector]:
        """Load chunk saves, in tree order, consuming them from the front of ``saves``.

        ``saves`` is consumed in place when it is a deque. Returns the
        positions of the chunks that need updating, most recent first.
        """
        queue = saves if isinstance(saves, deque) else deque(saves)
        modified: deque[Vector] = deque()
        self._load(queue, modified)
        return list(modified)

    def _load(self, saves: deque, modified: deque) -> None:
        if not saves:
            return
        if self.depth == 0:
            save = saves[0]
            if save.id == self.id:
                self._dirty = True
                self._values = list(save.values)
                self._materials = list(save.materials)
                saves.popleft()
                modified.extendleft(self._neighbour_positions())
            return

        power = int_pow9(self.depth)
        if self.id // power == saves[0].id // power:
            if self.is_leaf():
                self._create_children()
                self._dirty = True
            for child in self._children:
                child._load(saves, modified)

    def get_child(self, x: int, y: int, z: int) -> ValueOctree:
        """The direct child owning the voxel."""
        if self.is_leaf():
            raise RuntimeError("a leaf has no children")
        px, py, pz = self.position
        return self._children[(x >= px) + 2 * (y >= py) + 4 * (z >= pz)]

    def get_leaf(self, x: int, y: int, z: int) -> ValueOctree:
        """The leaf owning the voxel."""
        if not self.contains(x, y, z):
            raise ValueError(f"voxel {(x, y, z)} lies outside this octree")
        node = self
        while not node.is_leaf():
            node = node.get_child(x, y, z)
        return node

    def dirty_chunk_positions(self) -> list[Vector]:
        """Positions of the modified chunks and their neighbours, most recent first."""
        positions: deque[Vector] = deque()
        self._collect_dirty_positions(positions)
        return list(positions)

    def _collect_dirty_positions(self, positions: deque) -> None:
        if not self._dirty:
            return
        if self.is_leaf():
            positions.extendleft(self._neighbour_positions())
            return
        for child in self._children:
            child._collect_dirty_positions(positions)

    def _neighbour_positions(self) -> list[Vector]:
        s = self.size()
        px, py, pz = self.position
        return [
            (px - dx, py - dy, pz - dz)
            for dz in (0, s)
            for dy in (0, s)
            for dx in (0, s)
        ]

    def _create_children(self) -> None:
        if not self.is_leaf() or self._children:
            raise RuntimeError("children already exist")
        if self.depth == 0:
            raise RuntimeError("a chunk of depth 0 cannot be subdivided")
        d = self.size() // 4
        power = int_pow9(self.depth - 1)
        px, py, pz = self.position
        for k in range(8):
            offset = (
                d if k & 1 else -d,
                d if k & 2 else -d,
                d if k & 4 else -d,
            )
            self._children.append(
                ValueOctree(
                    self.world_generator,
                    (px + offset[0], py + offset[1], pz + offset[2]),
                    self.depth - 1,
                    self.id + (k + 1) * power,
                )
            )
        self._has_children = True

    def _set_as_dirty(self) -> None:
        if self._dirty:
            raise RuntimeError("chunk is already dirty")
        if self.depth != 0:
            raise RuntimeError("only chunks of depth 0 store voxels")
        values: list[float] = [0.0] * CHUNK_VOLUME
        materials: list[Any] = [None] * CHUNK_VOLUME
        shape = (CHUNK_WIDTH, CHUNK_WIDTH, CHUNK_WIDTH)
        self._fill(values, materials, self.minimal_corner(), (0, 0, 0), 1, shape, shape)
        self._values = values
        self._materials = materials
        self._dirty = True