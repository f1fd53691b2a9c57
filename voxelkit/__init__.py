"""Sparse voxel value octrees and procedural noise generators."""

__version__ = "0.1.0"