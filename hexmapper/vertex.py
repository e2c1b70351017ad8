"""Vertex layouts as they are laid out in GPU buffers."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum


class VertexFormat(IntEnum):
    """The vertex layouts a mesh can hold."""

    NONE = 0
    SIMPLE = 1
    UNLIT = 2


_SIMPLE_LAYOUT = struct.Struct("<10f")
_UNLIT_LAYOUT = struct.Struct("<9f")


@dataclass(frozen=True)
class SimpleVertex:
    """A lit vertex: position, normal and RGBA colour."""

    x: float
    y: float
    z: float
    nx: float
    ny: float
    nz: float
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def pack(self) -> bytes:
        """The vertex as packed little-endian 32-bit floats."""
        return _SIMPLE_LAYOUT.pack(*astuple(self))


@dataclass(frozen=True)
class UnlitVertex:
    """An unlit vertex: position, texture coordinate and RGBA colour."""

    x: float
    y: float
    z: float
    u: float
    v: float
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def pack(self) -> bytes:
        """The vertex as packed little-endian 32-bit floats."""
        return _UNLIT_LAYOUT.pack(*astuple(self))


def format_size(vertex_format: VertexFormat) -> int:
    """Size in bytes of one vertex of the given format; 0 for ``NONE``."""
    if vertex_format == VertexFormat.SIMPLE:
        return _SIMPLE_LAYOUT.size
    if vertex_format == VertexFormat.UNLIT:
        return _UNLIT_LAYOUT.size
    return 0