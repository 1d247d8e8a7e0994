#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from .errors import SceneValidationError
from .math_utils import Vector


@dataclass(frozen=True)
class View:
    """
    Camera state for the perspective pipeline.

    prp:  projection reference point (eye position, world space)
    srp:  scene reference point (look-at target)
    vup:  view-up direction
    clip: (left, right, bottom, top, near, far) of the view window;
          near/far are distances along the negated view axis.

    Views are values; the camera commands below return new instances.
    """
    prp: Vector
    srp: Vector
    vup: Vector
    clip: Tuple[float, float, float, float, float, float]

    def __post_init__(self):
        for name in ('prp', 'srp', 'vup'):
            vec = getattr(self, name)
            if not isinstance(vec, Vector):
                vec = Vector(vec)
            if vec.dim != 3:
                raise SceneValidationError("expected 3 components", name)
            if not all(math.isfinite(c) for c in vec):
                raise SceneValidationError("components must be finite", name)
            object.__setattr__(self, name, vec)

        clip = tuple(float(c) for c in self.clip)
        if len(clip) != 6:
            raise SceneValidationError(f"expected 6 values, got {len(clip)}", 'clip')
        if not all(math.isfinite(c) for c in clip):
            raise SceneValidationError("values must be finite", 'clip')
        left, right, bottom, top, near, far = clip
        if not left < right:
            raise SceneValidationError("left must be less than right", 'clip')
        if not bottom < top:
            raise SceneValidationError("bottom must be less than top", 'clip')
        if not 0.0 < near < far:
            raise SceneValidationError("expected 0 < near < far", 'clip')
        object.__setattr__(self, 'clip', clip)

    @property
    def near(self) -> float:
        return self.clip[4]

    @property
    def far(self) -> float:
        return self.clip[5]

    @property
    def z_min(self) -> float:
        """Near plane position in the canonical view volume."""
        return -self.near / self.far


# ── Camera commands ─────────────────────────────────────────────────────
# Each command is a pure function of the current view; PRP and SRP move together.

def translate_view(view: View, dx: float, dz: float) -> View:
    offset = Vector(dx, 0.0, dz)
    return replace(view, prp=view.prp + offset, srp=view.srp + offset)


def rotate_view(view: View, angle: float) -> View:
    """Rotate the PRP->SRP vector about PRP around the world y-axis."""
    c = math.cos(angle)
    s = math.sin(angle)
    d = view.srp - view.prp
    rotated = Vector(d.x * c - d.z * s, d.y, d.x * s + d.z * c)
    return replace(view, srp=view.prp + rotated)


COMMANDS = ('move_forward', 'move_left', 'move_backward', 'move_right',
            'rotate_left', 'rotate_right')

# Held-key bindings, listed in the order commands are applied each tick.
KEY_BINDINGS = (
    ('w', 'move_forward'),
    ('a', 'move_left'),
    ('s', 'move_backward'),
    ('d', 'move_right'),
    ('left', 'rotate_left'),
    ('right', 'rotate_right'),
)


def commands_for_keys(keys: Iterable[str]) -> List[str]:
    """Translate a set of currently held keys into command names."""
    held = {k.lower() for k in keys}
    return [command for key, command in KEY_BINDINGS if key in held]


class CameraController:
    """Discrete navigation commands with a fixed step and turn angle."""
    __slots__ = ('step', 'angle')

    def __init__(self, step: float = 1.0, angle: float = 0.5):
        self.step = step      # world units per move command
        self.angle = angle    # radians per rotate command

    def move_forward(self, view: View) -> View:
        return translate_view(view, 0.0, -self.step)

    def move_backward(self, view: View) -> View:
        return translate_view(view, 0.0, self.step)

    def move_left(self, view: View) -> View:
        return translate_view(view, -self.step, 0.0)

    def move_right(self, view: View) -> View:
        return translate_view(view, self.step, 0.0)

    def rotate_left(self, view: View) -> View:
        return rotate_view(view, self.angle)

    def rotate_right(self, view: View) -> View:
        return rotate_view(view, -self.angle)

    def apply(self, view: View, command: str) -> View:
        if command not in COMMANDS:
            raise ValueError(f"unknown camera command: {command!r}")
        return getattr(self, command)(view)
