import struct

import pytest

from hexmapper.vertex import SimpleVertex, UnlitVertex, VertexFormat, format_size


def test_format_sizes():
    assert format_size(VertexFormat.SIMPLE) == 40
    assert format_size(VertexFormat.UNLIT) == 36
    assert format_size(VertexFormat.NONE) == 0


def test_format_values_match_enum_numbers():
    assert VertexFormat(1) is VertexFormat.SIMPLE
    assert VertexFormat(2) is VertexFormat.UNLIT
    assert VertexFormat(0) is VertexFormat.NONE


def test_simple_vertex_pack_round_trip():
    vertex = SimpleVertex(-1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 0.5, 0.25, 1.0, 0.75)
    data = vertex.pack()
    assert len(data) == format_size(VertexFormat.SIMPLE)
    assert struct.unpack("<10f", data) == (-1.0, 1.0, -1.0, 0.0, 0.0, -1.0, 0.5, 0.25, 1.0, 0.75)


def test_unlit_vertex_pack_round_trip():
    vertex = UnlitVertex(-0.5, 0.75, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0)
    data = vertex.pack()
    assert len(data) == format_size(VertexFormat.UNLIT)
    assert struct.unpack("<9f", data) == (-0.5, 0.75, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0)


def test_colour_defaults_to_opaque_white():
    vertex = UnlitVertex(0.0, 0.0, 0.0, 0.5, 0.5)
    assert (vertex.r, vertex.g, vertex.b, vertex.a) == (1.0, 1.0, 1.0, 1.0)
    assert struct.unpack("<9f", vertex.pack())[5:] == (1.0, 1.0, 1.0, 1.0)


def test_vertices_are_immutable():
    vertex = SimpleVertex(0, 0, 0, 0, 1, 0)
    with pytest.raises(AttributeError):
        vertex.x = 3.0
    assert vertex.x == 0
    assert struct.unpack("<10f", vertex.pack())[:6] == (0.0, 0.0, 0.0, 0.0, 1.0, 0.0)