#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .canvas import DrawingPort
from .clipping import clip_segment
from .math_utils import multiply
from .scene import Scene
from .transforms import composite_matrix, project_to_pixels, viewport

logger = logging.getLogger(__name__)


class Renderer:
    """
    Stateless wireframe renderer.

    draw(scene, port, width, height) emits one frame of 2-D segments to the
    drawing port.
    """

    def draw(self, scene: Scene, port: DrawingPort, width: float, height: float) -> int:
        """
        Render one frame and return the number of segments drawn.

        Pipeline:
          1. Clear the port
          2. Build MPer @ N_per once from the current view
          3. Per model: transform vertices into canonical space
          4. Per edge segment: clip in 3-D, viewport + divide, draw

        Models and edges are drawn in scene order; there is no sorting and
        no hidden-line removal. A degenerate view raises before any segment
        is drawn.
        """
        port.clear_canvas()

        composite = composite_matrix(scene.view)
        vp = viewport(width, height)
        z_min = scene.view.z_min

        drawn = 0
        dropped = 0
        for model in scene.models:
            xform = multiply([composite, model.matrix])
            canonical = [xform.mul_vec(v) for v in model.vertices]

            for a, b in model.segments():
                clipped = clip_segment(canonical[a], canonical[b], z_min)
                if clipped is None:
                    continue

                p0 = project_to_pixels(clipped[0], width, height, vp)
                p1 = project_to_pixels(clipped[1], width, height, vp)
                if p0 is None or p1 is None:
                    dropped += 1
                    continue

                port.draw_segment(p0[0], p0[1], p1[0], p1[1])
                drawn += 1

        if dropped:
            logger.debug(f"Dropped {dropped} segment(s) with a degenerate projection")
        return drawn
