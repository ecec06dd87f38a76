# wireshapes

Wireframe line meshes for drawing collision shapes while debugging a 3D scene.

Each generator in `wireshapes.debugdraw` returns a `WireGeometry` from
`wireshapes.mesh`. A `WireGeometry` holds:

- `vertex_data`: packed bytes, two vertices per line segment;
- `bounds_min` and `bounds_max`: the axis-aligned bounds, as `Vec3`;
- `primitive_type`: always `PrimitiveType.LINES`;
- `stride` (32), `position_offset` (0) and `normal_offset` (16);
- `segments`: the `LineSegment` objects the data was packed from.

Each vertex is eight little-endian 32-bit floats: the position (x, y, z and a
zero pad) followed by the normal (x, y, z and a zero pad). Creating a
`WireGeometry` whose data length is not a multiple of the stride, or with a
stride that is not positive, raises `ValueError`.

`vertex_count()` returns the number of vertices and `positions()` decodes the
position of each one as a `Vec3`.

## Shapes

```python
from wireshapes.mesh import Vec3
from wireshapes.debugdraw import (
    box_geometry,
    sphere_geometry,
    capsule_geometry,
    plane_geometry,
    height_field_geometry,
    convex_mesh_geometry,
    triangle_mesh_geometry,
)

box = box_geometry(Vec3(1.0, 2.0, 3.0))      # the 12 edges of a box centred on the origin
sphere = sphere_geometry(2.0)                # one circle around each axis
capsule = capsule_geometry(0.5, 1.0)         # long axis along x
plane = plane_geometry()                     # 100 x 100 square in z = 0 with spokes to the centre

print(box.vertex_count())                    # 24
print(box.positions()[:2])
data = box.vertex_data                       # packed bytes, ready for a GPU buffer
```

Half extents and other points may be given as a `Vec3` or as any sequence of
three numbers.

For the capsule, `half_height` is the distance from the centre to the centre
of each cap; its bounds reach `half_height + radius` along x. The plane's
bounds are 5 deep on each side of z = 0 so that the box is not flat.

### Height fields

Pass a grid of samples, with rows as the outer list. Sample `(row, col)` is
placed at `(row * row_scale, height * height_scale, col * column_scale)`, and
lines join each sample to its neighbours along rows and columns. A grid with
fewer than two rows or two columns produces no geometry, and the function
returns `None`; rows of differing lengths raise `ValueError`. The vertical
bounds always include zero.

```python
grid = [[0, 1, 0], [1, 2, 1], [0, 1, 0]]
field = height_field_geometry(grid, height_scale=0.5, row_scale=1.0, column_scale=1.0)
```

### Convex and triangle meshes

A convex mesh is given as its vertices and its polygons, each polygon a list of
vertex indices that is drawn as the outlines of a triangle fan from its first
vertex. A triangle mesh is given as its vertices and index triples. The bounds
are those of all the vertices.

```python
verts = [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)]
tetra = convex_mesh_geometry(verts, [[0, 2, 1], [0, 1, 3], [0, 3, 2], [1, 2, 3]])
tris = triangle_mesh_geometry(verts, [(0, 1, 2), (0, 1, 3)])
```

An empty vertex list or a polygon with two or fewer indices raises
`ValueError`; an index outside the vertex list raises `IndexError`.

## Building meshes yourself

`LineMeshBuilder` collects segments. `add_line(start, end, normal)` appends
one (the normal defaults to `(0, 1, 0)`), `segments()` returns them in the
order they were added, and `vertex_data()` packs them in the layout above.

```python
from wireshapes.mesh import LineMeshBuilder

builder = LineMeshBuilder()
builder.add_line((0, 0, 0), (1, 0, 0))
print(len(builder.vertex_data()))            # 64
```

## What it does not do

The package only builds geometry. It does not render it, read shapes from a
physics engine or a file, or provide a command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```