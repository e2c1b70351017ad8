import math

import pytest

from hexmapper.icosphere import create_icosphere
from hexmapper.matrix import identity
from hexmapper.renderable import (
    CubeRenderable,
    IcoSphereRenderable,
    Renderable,
    create_cube,
)
from hexmapper.transforms import transform_point
from hexmapper.vector import Vec3


def _assert_vec(actual, expected):
    assert actual.x == pytest.approx(expected.x, abs=1e-9)
    assert actual.y == pytest.approx(expected.y, abs=1e-9)
    assert actual.z == pytest.approx(expected.z, abs=1e-9)


def test_default_transform_is_identity():
    assert Renderable().world_transform() == identity()


def test_position_moves_origin():
    r = Renderable()
    r.set_position(3.0, -2.0, 4.5)
    _assert_vec(transform_point(r.world_transform(), Vec3()), Vec3(3.0, -2.0, 4.5))


def test_scale_then_translate():
    r = Renderable()
    r.set_scale(2.0)
    r.set_position(5.0, 1.0, 0.0)
    p = Vec3(1.0, 1.0, 1.0)
    _assert_vec(transform_point(r.world_transform(), p), r.position + p * 2.0)


def test_rotation_is_stored_in_radians():
    r = Renderable()
    r.set_rotation(180.0, 90.0, 0.0)
    assert r.rotation.x == pytest.approx(math.pi)
    assert r.rotation.y == pytest.approx(math.pi / 2)
    assert r.rotation.z == 0.0


def test_rotation_about_y():
    r = Renderable()
    r.set_rotation(0.0, 90.0, 0.0)
    _assert_vec(transform_point(r.world_transform(), Vec3(1.0, 0.0, 0.0)), Vec3(0.0, 0.0, -1.0))


def test_rotation_preserves_length():
    r = Renderable()
    r.set_rotation(30.0, 45.0, 60.0)
    p = Vec3(1.0, 2.0, 3.0)
    assert transform_point(r.world_transform(), p).length() == pytest.approx(p.length())


def test_hooks_leave_state_unchanged():
    r = Renderable()
    r.set_position(1.0, 2.0, 3.0)
    before = r.world_transform()
    r.update(0.5)
    r.mouse_moved(1.0, 1.0)
    r.mouse_clicked(1.0, 1.0)
    r.clear_focus()
    assert r.world_transform() == before


def test_cube_counts():
    mesh = create_cube()
    assert mesh.vertex_count == 24
    assert mesh.index_count == 36
    assert mesh.indices[:6] == (0, 1, 2, 3, 2, 0)


def test_cube_corners_and_face_normals():
    mesh = create_cube()
    for v in mesh.vertices:
        assert {abs(v.x), abs(v.y), abs(v.z)} == {1.0}
        normal = Vec3(v.nx, v.ny, v.nz)
        assert normal.length() == pytest.approx(1.0)
        # the vertex lies on the face its normal points out of
        assert Vec3(v.x, v.y, v.z).dot(normal) == pytest.approx(1.0)
    for start in range(0, 24, 4):
        normals = {(v.nx, v.ny, v.nz) for v in mesh.vertices[start:start + 4]}
        assert len(normals) == 1


def test_cube_renderable_holds_cube_mesh():
    assert CubeRenderable().mesh == create_cube()


def test_icosphere_renderable_mesh_level():
    assert IcoSphereRenderable(1).mesh == create_icosphere(1)
    assert IcoSphereRenderable().mesh.vertex_count == create_icosphere(4).vertex_count