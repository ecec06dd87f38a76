"""Wireframe debug geometry for collision shapes."""

from __future__ import annotations

import math
import struct
from typing import Iterable, Optional, Sequence

from wireshapes.mesh import LineMeshBuilder, Vec3, VecLike, WireGeometry

_F32 = struct.Struct("<f")
_TAU = 2 * math.pi

_PLANE_HALF_SIZE = 50.0
_PLANE_HALF_DEPTH = 5.0  # keeps the bounding box from being flat


def _f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


def _as_vec(value: VecLike) -> Vec3:
    if isinstance(value, Vec3):
        return value
    x, y, z = value
    return Vec3(float(x), float(y), float(z))


def _geometry(builder: LineMeshBuilder, low: Vec3, high: Vec3) -> WireGeometry:
    return WireGeometry(
        vertex_data=builder.vertex_data(),
        bounds_min=low,
        bounds_max=high,
        segments=builder.segments(),
    )


def _circle_points(radius: float, segments: int) -> list[tuple[float, float]]:
    """Points of a circle, stepping the angle in single precision."""
    step = _f32(_TAU / segments)
    r = _f32(radius)
    points = []
    theta = 0.0
    while theta < _TAU:
        points.append((_f32(r * _f32(math.cos(theta))), _f32(r * _f32(math.sin(theta)))))
        theta = _f32(theta + step)
    return points


def _closed_loop(points: list) -> Iterable[tuple]:
    return zip(points, points[1:] + points[:1])


def _open_path(points: list) -> Iterable[tuple]:
    return zip(points, points[1:])


def box_geometry(half_extents: VecLike) -> WireGeometry:
    """The twelve edges of a box centred on the origin."""
    he = _as_vec(half_extents)
    x, y, z = he.x, he.y, he.z
    builder = LineMeshBuilder()
    for depth in (z, -z):
        builder.add_line((-x, -y, depth), (-x, y, depth))
        builder.add_line((-x, y, depth), (x, y, depth))
        builder.add_line((x, y, depth), (x, -y, depth))
        builder.add_line((x, -y, depth), (-x, -y, depth))
    builder.add_line((x, -y, z), (x, -y, -z))
    builder.add_line((-x, -y, -z), (-x, -y, z))
    builder.add_line((x, y, z), (x, y, -z))
    builder.add_line((-x, y, -z), (-x, y, z))
    return _geometry(builder, -he, he)


def sphere_geometry(radius: float) -> WireGeometry:
    """One circle around each axis."""
    points = _circle_points(radius, 24)
    builder = LineMeshBuilder()
    for (a1, b1), (a2, b2) in _closed_loop(points):
        builder.add_line((0.0, a1, b1), (0.0, a2, b2), (1.0, 0.0, 0.0))
    for (a1, b1), (a2, b2) in _closed_loop(points):
        builder.add_line((a1, 0.0, b1), (a2, 0.0, b2), (0.0, 1.0, 0.0))
    for (a1, b1), (a2, b2) in _closed_loop(points):
        builder.add_line((a1, b1, 0.0), (a2, b2, 0.0), (0.0, 0.0, 1.0))
    return _geometry(builder, Vec3(-radius, -radius, -radius), Vec3(radius, radius, radius))


def capsule_geometry(radius: float, half_height: float) -> WireGeometry:
    """A capsule along the x axis; ``half_height`` is the distance to each cap centre."""
    points = _circle_points(radius, 32)
    h = half_height
    builder = LineMeshBuilder()

    for cap in (h, -h):
        for (a1, b1), (a2, b2) in _closed_loop(points):
            builder.add_line((cap, a1, b1), (cap, a2, b2), (1.0, 0.0, 0.0))

    builder.add_line((h, 0.0, radius), (-h, 0.0, radius), (0.0, 0.0, 1.0))
    builder.add_line((h, 0.0, -radius), (-h, 0.0, -radius), (0.0, 0.0, -1.0))
    builder.add_line((h, -radius, 0.0), (-h, -radius, 0.0), (0.0, -1.0, 0.0))
    builder.add_line((h, radius, 0.0), (-h, radius, 0.0), (0.0, 1.0, 0.0))

    half = len(points) // 2
    top = points[: half + 1]
    bottom = points[half:] + points[:1]

    for (a1, b1), (a2, b2) in _open_path(top):
        builder.add_line((b1 + h, a1, 0.0), (b2 + h, a2, 0.0), (0.0, 0.0, 1.0))
    for (a1, b1), (a2, b2) in _open_path(bottom):
        builder.add_line((b1 - h, a1, 0.0), (b2 - h, a2, 0.0), (0.0, 0.0, 1.0))
    for (a1, b1), (a2, b2) in _open_path(top):
        builder.add_line((b1 + h, 0.0, a1), (b2 + h, 0.0, a2), (0.0, 1.0, 0.0))
    for (a1, b1), (a2, b2) in _open_path(bottom):
        builder.add_line((b1 - h, 0.0, a1), (b2 - h, 0.0, a2), (0.0, 1.0, 0.0))

    extent = h + radius
    return _geometry(builder, Vec3(-extent, -radius, -radius), Vec3(extent, radius, radius))


def plane_geometry() -> WireGeometry:
    """A square outline in the z = 0 plane with spokes to the centre."""
    s = _PLANE_HALF_SIZE
    d = _PLANE_HALF_DEPTH
    corners = [(-s, -s, 0.0), (s, -s, 0.0), (s, s, 0.0), (-s, s, 0.0)]
    builder = LineMeshBuilder()
    for corner, following in _closed_loop(corners):
        builder.add_line(corner, following)
        builder.add_line(corner, (0.0, 0.0, 0.0))
    return _geometry(builder, Vec3(-s, -s, -d), Vec3(s, s, d))


def height_field_geometry(
    heights: Sequence[Sequence[float]],
    height_scale: float,
    row_scale: float,
    column_scale: float,
) -> Optional[WireGeometry]:
    """A grid of lines over a height field given as rows of samples.

    Returns None when the field has fewer than two rows or two columns.
    """
    rows = [list(row) for row in heights]
    if len(rows) < 2 or len(rows[0]) < 2:
        return None
    num_cols = len(rows[0])
    if any(len(row) != num_cols for row in rows):
        raise ValueError("every row of a height field must have the same number of samples")
    num_rows = len(rows)

    min_height = 0.0
    max_height = 0.0

    def sample(row: int, col: int) -> Vec3:
        nonlocal min_height, max_height
        height = rows[row][col] * height_scale
        max_height = max(max_height, height)
        min_height = min(min_height, height)
        return Vec3(row * row_scale, height, col * column_scale)

    builder = LineMeshBuilder()
    for row in range(num_rows):
        for col in range(num_cols):
            if row < num_rows - 1:
                builder.add_line(sample(row, col), sample(row + 1, col))
            if col < num_cols - 1:
                builder.add_line(sample(row, col), sample(row, col + 1))

    size_x = row_scale * (num_rows - 1)
    size_z = column_scale * (num_cols - 1)
    return _geometry(builder, Vec3(0.0, min_height, 0.0), Vec3(size_x, max_height, size_z))


def _local_bounds(vertices: list[Vec3]) -> tuple[Vec3, Vec3]:
    if not vertices:
        raise ValueError("a mesh needs at least one vertex")
    low = Vec3(*(min(c) for c in zip(*((v.x, v.y, v.z) for v in vertices))))
    high = Vec3(*(max(c) for c in zip(*((v.x, v.y, v.z) for v in vertices))))
    return low, high


def _lookup(vertices: list[Vec3], index: int) -> Vec3:
    if not 0 <= index < len(vertices):
        raise IndexError(f"vertex index {index} out of range for {len(vertices)} vertices")
    return vertices[index]


def _add_triangle(builder: LineMeshBuilder, p0: Vec3, p1: Vec3, p2: Vec3) -> None:
    builder.add_line(p0, p1)
    builder.add_line(p1, p2)
    builder.add_line(p2, p0)


def convex_mesh_geometry(
    vertices: Iterable[VecLike], polygons: Iterable[Sequence[int]]
) -> WireGeometry:
    """Triangle-fan outlines of every polygon of a convex hull."""
    verts = [_as_vec(v) for v in vertices]
    low, high = _local_bounds(verts)
    builder = LineMeshBuilder()
    for polygon in polygons:
        indices = list(polygon)
        if len(indices) <= 2:
            raise ValueError(f"a hull polygon needs more than two vertices, got {len(indices)}")
        p0 = _lookup(verts, indices[0])
        for i1, i2 in _open_path(indices[1:]):
            _add_triangle(builder, p0, _lookup(verts, i1), _lookup(verts, i2))
    return _geometry(builder, low, high)


def triangle_mesh_geometry(
    vertices: Iterable[VecLike], triangles: Iterable[Sequence[int]]
) -> WireGeometry:
    """Outlines of every triangle of a triangle mesh."""
    verts = [_as_vec(v) for v in vertices]
    low, high = _local_bounds(verts)
    builder = LineMeshBuilder()
    for triangle in triangles:
        i0, i1, i2 = triangle
        _add_triangle(builder, _lookup(verts, i0), _lookup(verts, i1), _lookup(verts, i2))
    return _geometry(builder, low, high)