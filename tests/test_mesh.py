"""Tests for wireframe model construction."""
import math

import pytest

from perspective_wireframe.errors import SceneValidationError
from perspective_wireframe.math_utils import Matrix, Vector
from perspective_wireframe.mesh import Model, ModelKind


class TestGeneric:

    def test_vertices_become_homogeneous(self):
        model = Model.generic([[1, 2, 3]], [[0, 0]])
        assert model.vertices == (Vector(1, 2, 3, 1),)

    def test_default_matrix_is_identity(self):
        assert Model.generic([[0, 0, 0], [1, 0, 0]], [[0, 1]]).matrix == Matrix.identity()

    def test_segments_follow_polylines(self):
        model = Model.generic([[0, 0, 0]] * 4, [[0, 1, 2], [3, 0]])
        assert list(model.segments()) == [(0, 1), (1, 2), (3, 0)]

    def test_edge_index_out_of_range(self):
        with pytest.raises(SceneValidationError) as exc:
            Model.generic([[0, 0, 0], [1, 0, 0]], [[0, 2]])
        assert exc.value.path == "edges[0][1]"

    def test_negative_index_rejected(self):
        with pytest.raises(SceneValidationError):
            Model.generic([[0, 0, 0], [1, 0, 0]], [[0, -1]])

    def test_short_edge_rejected(self):
        with pytest.raises(SceneValidationError):
            Model.generic([[0, 0, 0]], [[0]])

    def test_input_lists_are_copied(self):
        vertices = [[0, 0, 0], [1, 0, 0]]
        edges = [[0, 1]]
        model = Model.generic(vertices, edges)
        edges[0].append(0)
        vertices[0][0] = 9
        assert model.edges == ((0, 1),)
        assert model.vertices[0] == Vector(0, 0, 0, 1)


class TestCube:

    @pytest.fixture
    def cube(self):
        return Model.cube((1, 2, 3), width=2, height=4, depth=6)

    def test_kind(self, cube):
        assert cube.kind is ModelKind.CUBE

    def test_vertex_count(self, cube):
        assert len(cube.vertices) == 8

    def test_rings_at_half_depth(self, cube):
        assert all(v.z == 6.0 for v in cube.vertices[:4])
        assert all(v.z == 0.0 for v in cube.vertices[4:])

    def test_extent(self, cube):
        xs = {v.x for v in cube.vertices}
        ys = {v.y for v in cube.vertices}
        assert xs == {0.0, 2.0}
        assert ys == {0.0, 4.0}

    def test_edges(self, cube):
        assert cube.edges == ((0, 1, 2, 3, 0), (4, 5, 6, 7, 4), (0, 4), (1, 5), (2, 6), (3, 7))

    def test_twelve_segments(self, cube):
        assert len(set(frozenset(s) for s in cube.segments())) == 12


class TestCylinder:

    def test_counts_for_eight_sides(self):
        model = Model.cylinder((0, 0, 0), radius=1, height=2, sides=8)
        assert len(model.vertices) == 16
        assert len(model.edges) == 10

    def test_ring_edges_close(self):
        model = Model.cylinder((0, 0, 0), radius=1, height=2, sides=5)
        assert model.edges[0] == (0, 1, 2, 3, 4, 0)
        assert model.edges[1] == (5, 6, 7, 8, 9, 5)
        assert model.edges[2:] == ((0, 5), (1, 6), (2, 7), (3, 8), (4, 9))

    def test_vertices_on_circle(self):
        model = Model.cylinder((1, 2, 3), radius=2, height=4, sides=6)
        for i, v in enumerate(model.vertices):
            assert math.hypot(v.x - 1, v.z - 3) == pytest.approx(2.0)
            assert v.y == (4.0 if i < 6 else 0.0)

    def test_angular_spacing(self):
        model = Model.cylinder((0, 0, 0), radius=1, height=2, sides=4)
        assert model.vertices[1].x == pytest.approx(0.0, abs=1e-12)
        assert model.vertices[1].z == pytest.approx(1.0)

    def test_too_few_sides(self):
        with pytest.raises(SceneValidationError):
            Model.cylinder((0, 0, 0), radius=1, height=2, sides=2)


class TestObj:

    def test_faces_become_closed_loops(self, tmp_path):
        path = tmp_path / "tri.obj"
        path.write_text("# triangle\nv 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\nf 1//1 2//1 3//1\n")
        model = Model.from_obj(path)
        assert model.kind is ModelKind.GENERIC
        assert len(model.vertices) == 3
        assert model.edges == ((0, 1, 2, 0),)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SceneValidationError):
            Model.from_obj(tmp_path / "missing.obj")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.obj"
        path.write_text("# nothing\n")
        with pytest.raises(SceneValidationError):
            Model.from_obj(path)

    def test_bad_face_index(self, tmp_path):
        path = tmp_path / "bad.obj"
        path.write_text("v 0 0 0\nv 1 0 0\nf 1 2 7\n")
        with pytest.raises(SceneValidationError):
            Model.from_obj(path)
