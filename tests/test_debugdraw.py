import math

import pytest

from wireshapes.debugdraw import (
    box_geometry,
    capsule_geometry,
    convex_mesh_geometry,
    height_field_geometry,
    plane_geometry,
    sphere_geometry,
    triangle_mesh_geometry,
)
from wireshapes.mesh import Vec3


def _within(geometry, tol=1e-4):
    lo, hi = geometry.bounds_min, geometry.bounds_max
    return all(
        lo.x - tol <= p.x <= hi.x + tol
        and lo.y - tol <= p.y <= hi.y + tol
        and lo.z - tol <= p.z <= hi.z + tol
        for p in geometry.positions()
    )


def test_box_bounds_and_corners():
    geometry = box_geometry(Vec3(1.0, 2.0, 3.0))
    assert geometry.bounds_min == Vec3(-1.0, -2.0, -3.0)
    assert geometry.bounds_max == Vec3(1.0, 2.0, 3.0)
    for p in geometry.positions():
        assert (abs(p.x), abs(p.y), abs(p.z)) == (1.0, 2.0, 3.0)


def test_box_edges_are_axis_aligned_and_each_corner_has_three():
    geometry = box_geometry((1.0, 2.0, 3.0))
    corners = {}
    for segment in geometry.segments:
        diffs = [
            segment.start.x != segment.end.x,
            segment.start.y != segment.end.y,
            segment.start.z != segment.end.z,
        ]
        assert sum(diffs) == 1
        for p in (segment.start, segment.end):
            corners[p] = corners.get(p, 0) + 1
    assert set(corners.values()) == {3}
    assert geometry.vertex_count() == 2 * len(geometry.segments)


def test_sphere_points_lie_on_radius():
    radius = 2.5
    geometry = sphere_geometry(radius)
    assert geometry.bounds_max == Vec3(radius, radius, radius)
    for p in geometry.positions():
        assert math.sqrt(p.x ** 2 + p.y ** 2 + p.z ** 2) == pytest.approx(radius, rel=1e-5)


def test_sphere_circles_are_closed_and_normals_per_axis():
    geometry = sphere_geometry(1.0)
    segments = geometry.segments
    assert len(segments) % 3 == 0
    third = len(segments) // 3
    normals = [Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)]
    for group_index, normal in enumerate(normals):
        group = segments[group_index * third:(group_index + 1) * third]
        assert all(s.normal == normal for s in group)
        for current, following in zip(group, group[1:] + group[:1]):
            assert current.end == following.start


def test_capsule_bounds_and_containment():
    geometry = capsule_geometry(1.0, 2.0)
    assert geometry.bounds_min == Vec3(-3.0, -1.0, -1.0)
    assert geometry.bounds_max == Vec3(3.0, 1.0, 1.0)
    assert _within(geometry)


def test_capsule_has_cylinder_lines():
    geometry = capsule_geometry(1.0, 2.0)
    starts_ends = {(s.start, s.end, s.normal) for s in geometry.segments}
    assert (Vec3(2.0, 0.0, 1.0), Vec3(-2.0, 0.0, 1.0), Vec3(0.0, 0.0, 1.0)) in starts_ends
    assert (Vec3(2.0, -1.0, 0.0), Vec3(-2.0, -1.0, 0.0), Vec3(0.0, -1.0, 0.0)) in starts_ends


def test_capsule_caps_reach_tips():
    geometry = capsule_geometry(1.0, 2.0)
    xs = [p.x for p in geometry.positions()]
    assert max(xs) == pytest.approx(3.0, abs=1e-5)
    assert min(xs) == pytest.approx(-3.0, abs=1e-5)


def test_plane_bounds_and_centre_spokes():
    geometry = plane_geometry()
    assert geometry.bounds_min == Vec3(-50.0, -50.0, -5.0)
    assert geometry.bounds_max == Vec3(50.0, 50.0, 5.0)
    spokes = [s for s in geometry.segments if s.end == Vec3(0.0, 0.0, 0.0)]
    assert len(spokes) * 2 == len(geometry.segments)
    assert all(p.z == 0.0 for p in geometry.positions())


def test_height_field_too_small_returns_none():
    assert height_field_geometry([[1.0, 2.0]], 1.0, 1.0, 1.0) is None
    assert height_field_geometry([[1.0], [2.0]], 1.0, 1.0, 1.0) is None


def test_height_field_bounds_and_lines():
    heights = [[0.0, 1.0, 2.0], [-1.0, 3.0, 0.5]]
    geometry = height_field_geometry(heights, 2.0, 1.5, 0.5)
    assert geometry.bounds_min == Vec3(0.0, -2.0, 0.0)
    assert geometry.bounds_max == Vec3(1.5, 6.0, 1.0)
    rows, cols = len(heights), len(heights[0])
    assert len(geometry.segments) == rows * (cols - 1) + cols * (rows - 1)
    assert _within(geometry)


def test_height_field_rejects_ragged_rows():
    with pytest.raises(ValueError):
        height_field_geometry([[0.0, 1.0], [0.0]], 1.0, 1.0, 1.0)


def test_convex_mesh_fans_polygon():
    vertices = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
    geometry = convex_mesh_geometry(vertices, [[0, 1, 2, 3]])
    assert len(geometry.segments) == 3 * (len(vertices) - 2)
    assert geometry.segments[0].start == Vec3(0.0, 0.0, 0.0)
    assert geometry.segments[0].end == Vec3(1.0, 0.0, 0.0)
    assert geometry.bounds_min == Vec3(0.0, 0.0, 0.0)
    assert geometry.bounds_max == Vec3(1.0, 1.0, 0.0)


def test_convex_mesh_rejects_degenerate_polygon():
    with pytest.raises(ValueError):
        convex_mesh_geometry([(0, 0, 0), (1, 0, 0)], [[0, 1]])


def test_convex_mesh_rejects_bad_index():
    with pytest.raises(IndexError):
        convex_mesh_geometry([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [[0, 1, 7]])


def test_triangle_mesh_outlines():
    vertices = [(0, 0, 0), (2, 0, 0), (0, 3, 1)]
    geometry = triangle_mesh_geometry(vertices, [(0, 1, 2)])
    segments = geometry.segments
    assert [(s.start, s.end) for s in segments] == [
        (Vec3(0, 0, 0), Vec3(2, 0, 0)),
        (Vec3(2, 0, 0), Vec3(0, 3, 1)),
        (Vec3(0, 3, 1), Vec3(0, 0, 0)),
    ]
    assert geometry.bounds_max == Vec3(2.0, 3.0, 1.0)
    assert geometry.positions()[0] == Vec3(0.0, 0.0, 0.0)


def test_triangle_mesh_rejects_bad_index():
    with pytest.raises(IndexError):
        triangle_mesh_geometry([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, -1)])


def test_triangle_mesh_needs_vertices():
    with pytest.raises(ValueError):
        triangle_mesh_geometry([], [])