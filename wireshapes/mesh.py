"""Line-list meshes and the geometry description that carries them."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import Iterable, Union

_VERTEX = struct.Struct("<8f")
_POSITION = struct.Struct("<3f")


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)


VecLike = Union[Vec3, Iterable[float]]


def _as_vec(value: VecLike) -> Vec3:
    if isinstance(value, Vec3):
        return value
    x, y, z = value
    return Vec3(float(x), float(y), float(z))


_DEFAULT_NORMAL = Vec3(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class LineSegment:
    """A line between two points, with the normal shared by both ends."""

    start: Vec3
    end: Vec3
    normal: Vec3 = _DEFAULT_NORMAL


class LineMeshBuilder:
    """Collects line segments and packs them into interleaved vertex data.

    Each vertex takes 32 bytes: a position (x, y, z, padding) followed by a
    normal (x, y, z, padding), all little-endian 32-bit floats.
    """

    def __init__(self) -> None:
        self._segments: list[LineSegment] = []

    def add_line(self, start: VecLike, end: VecLike, normal: VecLike = _DEFAULT_NORMAL) -> None:
        """Append a line from ``start`` to ``end``."""
        self._segments.append(LineSegment(_as_vec(start), _as_vec(end), _as_vec(normal)))

    def segments(self) -> list[LineSegment]:
        """Return the segments added so far, in order."""
        return list(self._segments)

    def vertex_data(self) -> bytes:
        """Pack all segments into a line-list vertex buffer."""
        return b"".join(
            _VERTEX.pack(p.x, p.y, p.z, 0.0, s.normal.x, s.normal.y, s.normal.z, 0.0)
            for s in self._segments
            for p in (s.start, s.end)
        )


class PrimitiveType(enum.Enum):
    """How the vertices of a geometry are assembled."""

    LINES = "lines"


@dataclass
class WireGeometry:
    """Vertex data, bounds and layout of a wireframe mesh."""

    vertex_data: bytes
    bounds_min: Vec3
    bounds_max: Vec3
    primitive_type: PrimitiveType = PrimitiveType.LINES
    stride: int = _VERTEX.size
    position_offset: int = 0
    normal_offset: int = 16
    segments: list[LineSegment] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.stride <= 0:
            raise ValueError("stride must be positive")
        if len(self.vertex_data) % self.stride:
            raise ValueError(
                f"vertex data length {len(self.vertex_data)} is not a multiple of stride {self.stride}"
            )

    def vertex_count(self) -> int:
        """Number of vertices held in the vertex data."""
        return len(self.vertex_data) // self.stride

    def positions(self) -> list[Vec3]:
        """Decode the position of every vertex."""
        return [
            Vec3(*_POSITION.unpack_from(self.vertex_data, offset))
            for offset in range(self.position_offset, len(self.vertex_data), self.stride)
        ]