#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .errors import (WireframeError, DimensionError, DegenerateGeometryError,
                     DegenerateViewError, SceneValidationError)
from .math_utils import Vector, Matrix, multiply
from .camera import View, CameraController, commands_for_keys
from .transforms import (perspective_normalization, composite_matrix, mper,
                         viewport, project_to_pixels)
from .clipping import outcode, clip_segment
from .mesh import Model, ModelKind
from .scene import Scene, load_scene
from .canvas import Canvas, DrawingPort, SegmentRecorder
from .renderer import Renderer
from .viewer import Viewer
from .config import RenderConfig
from .logging_config import setup_logging
