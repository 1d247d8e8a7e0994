#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import json
import logging
import math
from dataclasses import dataclass, field, replace
from typing import Tuple

from .camera import View
from .errors import SceneValidationError
from .mesh import Model, ModelKind
from .transforms import perspective_normalization

logger = logging.getLogger(__name__)

# Accepted keys per model type (besides 'type').
_MODEL_FIELDS = {
    ModelKind.GENERIC: ('vertices', 'edges'),
    ModelKind.CUBE: ('center', 'width', 'height', 'depth'),
    ModelKind.CYLINDER: ('center', 'radius', 'height', 'sides'),
}
_VIEW_FIELDS = ('prp', 'srp', 'vup', 'clip')


@dataclass(frozen=True)
class Scene:
    """
    One view plus an ordered list of models.

    Scenes are immutable; camera commands and scene updates produce a new
    Scene that replaces the old one as a whole.
    """
    view: View
    models: Tuple[Model, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'models', tuple(self.models))

    def with_view(self, view: View) -> 'Scene':
        return replace(self, view=view)

    def with_models(self, models) -> 'Scene':
        return replace(self, models=tuple(models))

    @classmethod
    def from_dict(cls, data) -> 'Scene':
        """
        Build a scene from its JSON-shaped description:

            view:   {prp, srp, vup, clip}
            models: [{type: generic, vertices, edges}
                     | {type: cube, center, width, height, depth}
                     | {type: cylinder, center, radius, height, sides}]

        Raises SceneValidationError for missing or unknown fields, bad
        values (including NaN and infinities) and out-of-range edge indices.
        Raises DegenerateViewError when the view transform cannot be built.
        """
        _require_mapping(data, 'scene', ('view', 'models'))
        view = _parse_view(data['view'])
        models = data['models']
        if not isinstance(models, list):
            raise SceneValidationError("expected a list", 'models')
        scene = cls(view, tuple(_parse_model(m, f"models[{i}]") for i, m in enumerate(models)))

        # Refuse views the transform builder cannot handle now rather than mid-frame.
        perspective_normalization(view)
        return scene


def load_scene(path) -> Scene:
    """Read a scene description from a JSON file."""
    logger.info(f"Loading scene from: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SceneValidationError(f"could not read scene: {e}", str(path)) from e
    scene = Scene.from_dict(data)
    logger.info(f"Loaded scene with {len(scene.models)} model(s)")
    return scene


# ── Validation helpers ──────────────────────────────────────────────────

def _require_mapping(obj, path, fields, optional=()):
    if not isinstance(obj, dict):
        raise SceneValidationError("expected an object", path)
    for name in fields:
        if name not in obj:
            raise SceneValidationError(f"missing required field '{name}'", path)
    extra = set(obj) - set(fields) - set(optional)
    if extra:
        raise SceneValidationError(f"unexpected field(s): {', '.join(sorted(extra))}", path)


def _number(value, path) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneValidationError(f"expected a number, got {value!r}", path)
    try:
        num = float(value)
    except OverflowError:
        num = math.inf
    if not math.isfinite(num):
        raise SceneValidationError(f"expected a finite number, got {value!r}", path)
    return num


def _positive(value, path) -> float:
    num = _number(value, path)
    if num <= 0:
        raise SceneValidationError(f"must be positive, got {num}", path)
    return num


def _triple(value, path):
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise SceneValidationError("expected [x, y, z]", path)
    return [_number(c, f"{path}[{i}]") for i, c in enumerate(value)]


def _parse_view(data) -> View:
    _require_mapping(data, 'view', _VIEW_FIELDS)
    clip = data['clip']
    if not isinstance(clip, (list, tuple)) or len(clip) != 6:
        raise SceneValidationError("expected [left, right, bottom, top, near, far]", 'view.clip')
    clip = [_number(c, f"view.clip[{i}]") for i, c in enumerate(clip)]
    prp = _triple(data['prp'], 'view.prp')
    srp = _triple(data['srp'], 'view.srp')
    vup = _triple(data['vup'], 'view.vup')
    try:
        return View(prp=prp, srp=srp, vup=vup, clip=clip)
    except SceneValidationError as e:
        raise SceneValidationError(e.message, f"view.{e.path}") from None


def _parse_model(data, path) -> Model:
    if not isinstance(data, dict) or 'type' not in data:
        raise SceneValidationError("expected an object with a 'type'", path)
    try:
        kind = ModelKind(data['type'])
    except ValueError:
        raise SceneValidationError(f"unknown model type {data['type']!r}", f"{path}.type") from None
    _require_mapping(data, path, ('type',) + _MODEL_FIELDS[kind])

    try:
        if kind is ModelKind.GENERIC:
            vertices = data['vertices']
            edges = data['edges']
            if not isinstance(vertices, list):
                raise SceneValidationError("expected a list", f"{path}.vertices")
            if not isinstance(edges, list) or not all(isinstance(e, list) for e in edges):
                raise SceneValidationError("expected a list of index lists", f"{path}.edges")
            points = [_triple(v, f"{path}.vertices[{i}]") for i, v in enumerate(vertices)]
            return Model.generic(points, edges)

        center = _triple(data['center'], f"{path}.center")
        height = _positive(data['height'], f"{path}.height")
        if kind is ModelKind.CUBE:
            return Model.cube(center,
                              _positive(data['width'], f"{path}.width"),
                              height,
                              _positive(data['depth'], f"{path}.depth"))

        sides = data['sides']
        if isinstance(sides, bool) or not isinstance(sides, int):
            raise SceneValidationError(f"expected an integer, got {sides!r}", f"{path}.sides")
        return Model.cylinder(center, _positive(data['radius'], f"{path}.radius"), height, sides)
    except SceneValidationError as e:
        if e.path.startswith(path):
            raise
        # Errors raised by Model carry paths relative to the model.
        raise SceneValidationError(e.message, f"{path}.{e.path}") from None
