#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass

from .camera import CameraController


@dataclass
class RenderConfig:
    """Configuration for the interactive viewer."""
    use_braille: bool = True
    move_step: float = 1.0       # world units per move command
    rotate_angle: float = 0.5    # radians per rotate command
    frame_delay: float = 0.05    # seconds between ticks

    def make_controller(self) -> CameraController:
        return CameraController(step=self.move_step, angle=self.rotate_angle)

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console font often lacks braille, so default off there
        return cls(use_braille=supports_utf8 and not is_linux_console)
