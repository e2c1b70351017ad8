"""Indexed triangle meshes."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from hexmapper.vertex import SimpleVertex, UnlitVertex, VertexFormat

Vertex = Union[SimpleVertex, UnlitVertex]

_VERTEX_TYPES = {
    VertexFormat.SIMPLE: SimpleVertex,
    VertexFormat.UNLIT: UnlitVertex,
}


@dataclass(frozen=True)
class Mesh:
    """Vertices of one format plus triangle indices into them."""

    format: VertexFormat
    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...]

    def __post_init__(self) -> None:
        vertex_format = VertexFormat(self.format)
        vertices = tuple(self.vertices)
        indices = tuple(int(index) for index in self.indices)

        vertex_type = _VERTEX_TYPES.get(vertex_format)
        if vertex_type is None:
            raise ValueError(f"a mesh cannot use vertex format {vertex_format.name}")
        if not all(isinstance(vertex, vertex_type) for vertex in vertices):
            raise ValueError(f"all vertices must be {vertex_type.__name__}")
        if len(indices) % 3:
            raise ValueError("the index count must be a multiple of 3")
        bad = [index for index in indices if not 0 <= index < len(vertices)]
        if bad:
            raise ValueError(f"index {bad[0]} is out of range for {len(vertices)} vertices")

        object.__setattr__(self, "format", vertex_format)
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "indices", indices)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def vertex_bytes(self) -> bytes:
        """The vertex buffer contents."""
        return b"".join(vertex.pack() for vertex in self.vertices)

    def index_bytes(self) -> bytes:
        """The index buffer contents as 16-bit unsigned integers."""
        return struct.pack(f"<{len(self.indices)}H", *self.indices)

    def triangles(self) -> Iterator[tuple[Vertex, Vertex, Vertex]]:
        """Yield each triangle as its three vertices."""
        corners = iter(self.indices)
        for a, b, c in zip(corners, corners, corners):
            yield self.vertices[a], self.vertices[b], self.vertices[c]