#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/viewer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from typing import Iterable, Optional

from .camera import CameraController, commands_for_keys
from .canvas import DrawingPort
from .errors import WireframeError
from .renderer import Renderer
from .scene import Scene
from .transforms import perspective_normalization

logger = logging.getLogger(__name__)


class Viewer:
    """
    Host-facing driver: owns the current scene and draws it on request.

    The host calls tick() once per frame (or draw() after an update). Calls
    must not overlap; a scene or view is only ever replaced as a whole.
    """

    def __init__(self, scene: Scene, port: DrawingPort, width: float, height: float,
                 controller: Optional[CameraController] = None):
        perspective_normalization(scene.view)
        self.scene = scene
        self.port = port
        self.width = width
        self.height = height
        self.controller = controller or CameraController()
        self.renderer = Renderer()

    def draw(self) -> int:
        return self.renderer.draw(self.scene, self.port, self.width, self.height)

    def update_scene(self, data) -> int:
        """Replace the scene (a Scene or its dict description) and redraw.

        On a validation error the current scene stays active and the error
        propagates.
        """
        try:
            scene = data if isinstance(data, Scene) else Scene.from_dict(data)
            perspective_normalization(scene.view)
        except WireframeError as e:
            logger.warning(f"Rejected scene update: {e}")
            raise
        self.scene = scene
        return self.draw()

    def apply_command(self, command: str) -> int:
        """Run one camera command and redraw.

        A command producing a degenerate view is refused; the view is left as it was.
        """
        view = self.controller.apply(self.scene.view, command)
        perspective_normalization(view)
        self.scene = self.scene.with_view(view)
        return self.draw()

    def tick(self, keys: Iterable[str] = ()) -> int:
        """Apply the commands for the currently held keys, then draw one frame."""
        view = self.scene.view
        for command in commands_for_keys(keys):
            view = self.controller.apply(view, command)
        if view is not self.scene.view:
            perspective_normalization(view)
            self.scene = self.scene.with_view(view)
        return self.draw()
