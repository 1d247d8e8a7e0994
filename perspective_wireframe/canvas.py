#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import List, Protocol, Tuple

from .rasterizer import draw_line_dda, draw_marker


class DrawingPort(Protocol):
    """Drawing collaborator used by the renderer."""

    def clear_canvas(self) -> None:
        ...

    def draw_segment(self, x0: float, y0: float, x1: float, y1: float) -> None:
        """Draw a line between two pixel points and mark both endpoints."""
        ...


class SegmentRecorder:
    """Headless port: remembers every segment drawn since the last clear."""

    def __init__(self):
        self.segments: List[Tuple[float, float, float, float]] = []
        self.clears = 0

    def clear_canvas(self):
        self.segments = []
        self.clears += 1

    def draw_segment(self, x0, y0, x1, y1):
        self.segments.append((x0, y0, x1, y1))


class Canvas:
    """
    Terminal pixel canvas packed into 2x4 cells (one Braille glyph per cell).

    Pixel (0, 0) is the bottom-left corner; y grows upwards like the
    viewport transform, so rows are flipped when packing.
    """
    __slots__ = ['w', 'h', 'grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.clear_canvas()

    def clear_canvas(self):
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (self.w // 2 + 1) for _ in range(self.h // 4 + 1)]

    def set_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        row = self.h - 1 - y
        cx, cy = x >> 1, row >> 2
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[cy][cx] |= (1 << ((row & 3) + (x & 1) * 4))

    def draw_segment(self, x0, y0, x1, y1):
        draw_line_dda(self, (x0, y0), (x1, y1))
        draw_marker(self, (x0, y0))
        draw_marker(self, (x1, y1))

    def rows(self, use_braille: bool = True) -> List[str]:
        """Render every cell row as a string."""
        render = render_cell_braille if use_braille else render_cell_ascii
        return [''.join(render(mask) for mask in row) for row in self.grid]


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
