[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelkit"
version = "0.1.0"
description = "Sparse voxel value octrees with procedural noise generators"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "octree", "noise", "perlin", "simplex", "cellular", "procedural"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxelkit"]

[tool.pytest.ini_options]
addopts = "-ra"
