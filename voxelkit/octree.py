"""Base cubic octree node: geometry, identifiers and coordinate conversion."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterable

Vector = tuple[int, int, int]

MAX_DEPTH = 19
CHUNK_WIDTH = 16


def int_pow9(power: int) -> int:
    """Return 9 raised to ``power``; identifiers only fit up to power 19."""
    if power > MAX_DEPTH:
        raise ValueError(f"power {power} exceeds the maximum of {MAX_DEPTH}")
    result = 1
    for _ in range(power):
        result *= 9
    return result


@total_ordering
class Octree:
    """A cubic region of voxel space centred on ``position``.

    ``depth`` is the distance to the highest resolution; a node of depth ``d``
    is ``16 << d`` voxels wide. ``id`` encodes the node's place in the tree.
    """

    def __init__(self, position: Iterable[int], depth: int, id: int) -> None:
        if not 0 <= depth <= MAX_DEPTH:
            raise ValueError(f"depth must be between 0 and {MAX_DEPTH}, got {depth}")
        x, y, z = position
        self.position: Vector = (int(x), int(y), int(z))
        self.depth = depth
        self.id = id
        self._has_children = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Octree):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Octree):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position}, depth={self.depth}, id={self.id})"

    def size(self) -> int:
        """Width of this node in voxels."""
        return CHUNK_WIDTH << self.depth

    def minimal_corner(self) -> Vector:
        half = self.size() // 2
        px, py, pz = self.position
        return (px - half, py - half, pz - half)

    def maximal_corner(self) -> Vector:
        half = self.size() // 2
        px, py, pz = self.position
        return (px + half, py + half, pz + half)

    def bounds(self) -> tuple[Vector, Vector]:
        """The (minimal, maximal) corners of this node."""
        return self.minimal_corner(), self.maximal_corner()

    def is_leaf(self) -> bool:
        return not self._has_children

    def contains(self, x: int, y: int, z: int) -> bool:
        """Whether the voxel lies in this node (the maximal faces excluded)."""
        half = self.size() // 2
        px, py, pz = self.position
        return (
            px - half <= x < px + half
            and py - half <= y < py + half
            and pz - half <= z < pz + half
        )

    def local_to_global(self, x: int, y: int, z: int) -> Vector:
        """Convert node-local coordinates to voxel space."""
        mx, my, mz = self.minimal_corner()
        return (x + mx, y + my, z + mz)

    def global_to_local(self, x: int, y: int, z: int) -> Vector:
        """Convert voxel-space coordinates to node-local ones."""
        mx, my, mz = self.minimal_corner()
        return (x - mx, y - my, z - mz)

    @staticmethod
    def top_id_from_depth(depth: int) -> int:
        """Identifier of the root node of a tree of the given depth."""
        return int_pow9(depth)