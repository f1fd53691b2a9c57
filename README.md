# voxelkit

Sparse voxel octrees and procedural noise for voxel terrain.

voxelkit has two parts:

- **Voxel octrees**: `ValueOctree` covers a cubic region 16 × 2^depth voxels
  wide. Voxels that you have not edited are read from a world generator.
  Voxels that you have edited are stored in 16³ leaf chunks. You can save the
  modified chunks as `ChunkSave` records and load them into another tree.
- **Noise**: `FastNoise` gives value, Perlin, simplex, cubic, cellular and
  white noise. Value, Perlin, simplex and cubic noise can also be layered as
  fractals. It also gives gradient perturbation for domain warping. Every
  noise type is deterministic for a given seed.

The package has no dependencies outside the standard library.

## Installation

```
pip install voxelkit
```

To run the tests, install with the `test` extra:

```
pip install "voxelkit[test]"
pytest
```

## Noise

```python
from voxelkit.fastnoise import FastNoise, NoiseType, FractalType

noise = FastNoise(1337)
print(noise.get_perlin(1.5, 2.5, 3.5))
print(noise.get_simplex_fractal(10.0, 20.0, 30.0))
print(noise.get_cellular(4.0, 5.0, 6.0))

noise.noise_type = NoiseType.PERLIN_FRACTAL
noise.fractal_type = FractalType.BILLOW
noise.octaves = 5
print(noise.get_noise(1.0, 2.0))         # leave out z to sample in 2D
```

`FastNoise` settings are plain attributes. Their defaults are:

| Setting | Default |
| --- | --- |
| `seed` | 1337 |
| `frequency` | 0.01 |
| `interp` | `Interp.QUINTIC` |
| `noise_type` | `NoiseType.SIMPLEX` |
| `octaves` | 3 |
| `lacunarity` | 2.0 |
| `gain` | 0.5 |
| `fractal_type` | `FractalType.FBM` |
| `cellular_distance_function` | `CellularDistance.EUCLIDEAN` |
| `cellular_return_type` | `CellularReturnType.CELL_VALUE` |
| `cellular_jitter` | 0.45 |
| `gradient_perturb_amp` | 1.0 |

Setting `seed` rebuilds the permutation table. Setting `octaves` or `gain`
recomputes `fractal_bounding`.

`set_cellular_distance2_indices(index0, index1)` chooses the two nearest
distances that the `DISTANCE2*` return types combine. The indices are sorted
and clamped to 0–3.

For the `NOISE_LOOKUP` return type, set `cellular_noise_lookup` to another
`FastNoise`. Without one, a `ValueError` is raised.

`get_white_noise` hashes the single-precision bit pattern of the coordinates.
`get_white_noise_int` hashes integer coordinates. `gradient_perturb` and
`gradient_perturb_fractal` return the warped point as a tuple.

The lower-level modules, `lattice`, `simplex`, `cellular` and `perturb`, expose
the single-octave functions. They work on a `Permutation` table built from a
seed:

```python
from voxelkit.permutation import Permutation
from voxelkit.simplex import simplex_2d

perm = Permutation(42)
print(simplex_2d(perm, 0, 0.3, 0.7))
```

## Voxel octrees

A world generator is any object with two methods:

- `get_value(x, y, z)`
- `get_material(x, y, z)`

A tree of depth `d` has a root centred at `(0, 0, 0)`. Its identifier is
`Octree.top_id_from_depth(d)`. It contains the voxels from `-8 << d` up to,
but not including, `8 << d` on each axis.

```python
from voxelkit.octree import Octree
from voxelkit.value_octree import ValueOctree


class Flat:
    def get_value(self, x, y, z):
        return float(z)

    def get_material(self, x, y, z):
        return "stone"


root = ValueOctree(Flat(), (0, 0, 0), 2, Octree.top_id_from_depth(2))  # 64 wide

# Edits go to the leaf that owns the voxel. Editing a leaf that is not a
# 16³ chunk subdivides it down to one.
root.get_leaf(0, 0, 0).set_value_and_material(0, 0, 0, -1.0, None, True, False)

values, materials = root.read_region((0, 0, 0), 1, (2, 1, 1))
print(values)     # [-1.0, 0.0]
print(materials)  # ['stone', 'stone']
```

`read_region(start, step, size)` samples a strided box. It returns flat lists
in which sample `(i, j, k)` is at index `i + sx * j + sx * sy * k`. It raises
`ValueError` if the box leaves the tree, if `step` is less than 1, or if a
size is negative.

Saving and loading:

```python
saves = list(root.dirty_chunks())        # ChunkSave records, in tree order
fresh = ValueOctree(Flat(), (0, 0, 0), 2, Octree.top_id_from_depth(2))
positions = fresh.load_from_save(saves)  # chunk positions that need updating
```

`dirty_chunk_positions()` lists the positions of the modified chunks and their
neighbours.

## What the package does not do

voxelkit gives the octree and the noise, but no world object on top of them.
In particular, it does not:

- fall back to the generator for points outside the tree (`read_region`
  raises instead);
- clamp coordinates to the world;
- lock against concurrent readers and writers;
- wrap the chunk saves in a container that records the world depth;
- check that a world generator is consistent.

Saves are plain `ChunkSave` records, and writing them to disk is left to you.