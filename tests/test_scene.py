"""Tests for scene ingestion and validation."""
import copy
import json

import pytest

from perspective_wireframe.camera import View
from perspective_wireframe.errors import DegenerateViewError, SceneValidationError
from perspective_wireframe.mesh import ModelKind
from perspective_wireframe.scene import Scene, load_scene


class TestFromDict:

    def test_builds_models_in_order(self, scene_dict):
        scene = Scene.from_dict(scene_dict)
        assert [m.kind for m in scene.models] == [ModelKind.GENERIC, ModelKind.CUBE,
                                                 ModelKind.CYLINDER]

    def test_view_fields(self, scene_dict):
        view = Scene.from_dict(scene_dict).view
        assert tuple(view.prp) == (0.0, 0.0, 5.0)
        assert view.clip == (-1.0, 1.0, -1.0, 1.0, 1.0, 10.0)
        assert view.z_min == pytest.approx(-0.1)

    def test_does_not_keep_references_to_input(self, scene_dict):
        scene = Scene.from_dict(scene_dict)
        scene_dict["models"][0]["edges"][0].append(1)
        assert scene.models[0].edges == ((0, 1, 2, 0),)

    def test_empty_model_list(self, scene_dict):
        scene_dict["models"] = []
        assert Scene.from_dict(scene_dict).models == ()

    @pytest.mark.parametrize("mutate,path", [
        (lambda d: d.pop("view"), "scene"),
        (lambda d: d["view"].pop("vup"), "view"),
        (lambda d: d["view"].update(fov=60), "view"),
        (lambda d: d["view"].update(clip=[-1, 1, -1, 1, 1]), "view.clip"),
        (lambda d: d["view"].update(prp=[0, 0]), "view.prp"),
        (lambda d: d["view"]["srp"].__setitem__(1, "up"), "view.srp[1]"),
        (lambda d: d["view"].update(clip=[1, -1, -1, 1, 1, 10]), "view.clip"),
        (lambda d: d["view"].update(clip=[-1, 1, -1, 1, 10, 1]), "view.clip"),
        (lambda d: d["view"].update(clip=[-1, 1, -1, 1, 0, 10]), "view.clip"),
        (lambda d: d.update(models={}), "models"),
        (lambda d: d["models"][1].update(type="sphere"), "models[1].type"),
        (lambda d: d["models"][1].pop("type"), "models[1]"),
        (lambda d: d["models"][1].pop("depth"), "models[1]"),
        (lambda d: d["models"][1].update(animation={"axis": "y"}), "models[1]"),
        (lambda d: d["models"][1].update(width=-2), "models[1].width"),
        (lambda d: d["models"][2].update(sides=2.5), "models[2].sides"),
        (lambda d: d["models"][2].update(sides=2), "models[2].sides"),
        (lambda d: d["models"][0]["edges"][0].__setitem__(1, 3), "models[0].edges[0][1]"),
        (lambda d: d["models"][0]["edges"].append(1), "models[0].edges"),
        (lambda d: d["models"][0]["vertices"].append([1, 2]), "models[0].vertices[3]"),
        (lambda d: d["view"]["prp"].__setitem__(2, float("nan")), "view.prp[2]"),
        (lambda d: d["view"]["clip"].__setitem__(0, float("-inf")), "view.clip[0]"),
        (lambda d: d["models"][1].update(width=float("inf")), "models[1].width"),
        (lambda d: d["models"][0]["vertices"][1].__setitem__(0, 10 ** 400), "models[0].vertices[1][0]"),
    ])
    def test_malformed_scene_rejected(self, scene_dict, mutate, path):
        mutate(scene_dict)
        with pytest.raises(SceneValidationError) as exc:
            Scene.from_dict(scene_dict)
        assert exc.value.path == path

    def test_degenerate_view_rejected_at_construction(self, scene_dict):
        scene_dict["view"]["srp"] = list(scene_dict["view"]["prp"])
        with pytest.raises(DegenerateViewError):
            Scene.from_dict(scene_dict)

    def test_not_a_mapping(self):
        with pytest.raises(SceneValidationError):
            Scene.from_dict([1, 2, 3])


class TestSceneValue:

    def test_with_view_returns_new_scene(self, scene_dict, unit_view):
        scene = Scene.from_dict(scene_dict)
        moved = scene.with_view(unit_view)
        assert moved.view is unit_view
        assert scene.view is not unit_view
        assert moved.models == scene.models

    def test_scene_is_frozen(self, scene_dict, unit_view):
        scene = Scene.from_dict(scene_dict)
        with pytest.raises(AttributeError):
            scene.view = unit_view

    def test_view_validates_clip(self):
        with pytest.raises(SceneValidationError):
            View(prp=(0, 0, 1), srp=(0, 0, 0), vup=(0, 1, 0), clip=(-1, 1, 1, -1, 1, 3))

    @pytest.mark.parametrize("field, kwargs", [
        ("prp", {"prp": (0, 0, float("nan"))}),
        ("vup", {"vup": (0, float("inf"), 0)}),
        ("clip", {"clip": (-1, 1, -1, 1, 1, float("inf"))}),
        ("clip", {"clip": (float("nan"), 1, -1, 1, 1, 3)}),
    ])
    def test_view_rejects_non_finite_values(self, field, kwargs):
        params = dict(prp=(0, 0, 1), srp=(0, 0, 0), vup=(0, 1, 0), clip=(-1, 1, -1, 1, 1, 3))
        params.update(kwargs)
        with pytest.raises(SceneValidationError) as exc:
            View(**params)
        assert exc.value.path == field


class TestLoadScene:

    def test_load_from_file(self, tmp_path, scene_dict):
        path = tmp_path / "scene.json"
        path.write_text(json.dumps(scene_dict))
        scene = load_scene(path)
        assert len(scene.models) == 3

    def test_nan_tokens_in_file_rejected(self, tmp_path, scene_dict):
        text = json.dumps(scene_dict).replace('"prp": [0, 0, 5]', '"prp": [0, 0, NaN]')
        assert "NaN" in text
        path = tmp_path / "scene.json"
        path.write_text(text)
        with pytest.raises(SceneValidationError) as exc:
            load_scene(path)
        assert exc.value.path == "view.prp[2]"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("{not json")
        with pytest.raises(SceneValidationError):
            load_scene(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SceneValidationError):
            load_scene(tmp_path / "nope.json")

    def test_bundled_example_scene(self):
        from pathlib import Path
        path = Path(__file__).resolve().parent.parent / "scenes" / "cube.json"
        scene = load_scene(path)
        assert [m.kind for m in scene.models] == [ModelKind.GENERIC, ModelKind.CUBE,
                                                 ModelKind.CYLINDER]


def test_scene_dict_fixture_is_untouched_between_tests(scene_dict):
    original = copy.deepcopy(scene_dict)
    Scene.from_dict(scene_dict)
    assert scene_dict == original
