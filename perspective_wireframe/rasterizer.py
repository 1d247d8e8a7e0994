#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


def draw_line_dda(canvas, p1, p2):
    """
    Draws a line using the DDA algorithm.
    canvas is anything with set_pixel(x, y).
    p1, p2 are (x, y) pixel coordinates; both endpoints are set.
    """
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc


def draw_marker(canvas, p, size: int = 2):
    """Set a size x size block of pixels at p to make an endpoint visible."""
    x0, y0 = int(round(p[0])), int(round(p[1]))
    for dy in range(size):
        for dx in range(size):
            canvas.set_pixel(x0 + dx, y0 + dy)
