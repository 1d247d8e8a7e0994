#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/clipping.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
3-D Cohen-Sutherland line clipping against the canonical perspective volume.

In canonical space the side planes pass through the z-axis:

    LEFT   x = z        RIGHT  x = -z
    BOTTOM y = z        TOP    y = -z
    FAR    z = -1       NEAR   z = z_min

Points are homogeneous 4-vectors; only x, y, z take part in the tests and
interpolation carries w along linearly.
"""

import logging
from typing import Optional, Tuple

from .math_utils import Vector

logger = logging.getLogger(__name__)

LEFT = 32    # binary 100000
RIGHT = 16   # binary 010000
BOTTOM = 8   # binary 001000
TOP = 4      # binary 000100
FAR = 2      # binary 000010
NEAR = 1     # binary 000001

# Tolerance on every boundary test; points on a plane count as inside.
FLOAT_EPSILON = 1e-6

MAX_CLIP_PASSES = 6


def outcode(p: Vector, z_min: float) -> int:
    """6-bit mask of the canonical half-spaces that `p` lies outside of."""
    code = 0
    if p.x < p.z - FLOAT_EPSILON:
        code |= LEFT
    elif p.x > -p.z + FLOAT_EPSILON:
        code |= RIGHT
    if p.y < p.z - FLOAT_EPSILON:
        code |= BOTTOM
    elif p.y > -p.z + FLOAT_EPSILON:
        code |= TOP
    if p.z < -1.0 - FLOAT_EPSILON:
        code |= FAR
    elif p.z > z_min + FLOAT_EPSILON:
        code |= NEAR
    return code


def _plane_value(bit: int, p: Vector, z_min: float) -> float:
    """Signed plane function; zero on the plane, linear along a segment."""
    if bit == LEFT:
        return p.x - p.z
    if bit == RIGHT:
        return p.x + p.z
    if bit == BOTTOM:
        return p.y - p.z
    if bit == TOP:
        return p.y + p.z
    if bit == NEAR:
        return p.z - z_min
    return p.z + 1.0  # FAR


# Fixed plane order for each clipping pass.
PLANES = (LEFT, RIGHT, BOTTOM, TOP, NEAR, FAR)


def clip_segment(p0: Vector, p1: Vector, z_min: float) -> Optional[Tuple[Vector, Vector]]:
    """
    Clip the segment p0-p1 against the canonical volume.

    Returns the (possibly shortened) segment, or None when nothing of it is
    visible. A segment that is already inside comes back unchanged, so
    clipping is idempotent. A segment shortened to a single point is still
    returned.
    """
    out0 = outcode(p0, z_min)
    out1 = outcode(p1, z_min)

    for _ in range(MAX_CLIP_PASSES):
        if not (out0 | out1):
            return p0, p1
        if out0 & out1:
            return None

        for bit in PLANES:
            if not (out0 ^ out1) & bit:
                continue
            f0 = _plane_value(bit, p0, z_min)
            f1 = _plane_value(bit, p1, z_min)
            denom = f0 - f1
            if denom == 0.0:
                continue
            t = min(max(f0 / denom, 0.0), 1.0)
            crossing = p0.lerp(p1, t)
            if out0 & bit:
                p0 = crossing
            else:
                p1 = crossing
            out0 = outcode(p0, z_min)
            out1 = outcode(p1, z_min)
            if not (out0 | out1) or out0 & out1:
                break

    if not (out0 | out1):
        return p0, p1
    if not (out0 & out1):
        logger.debug("Clipping did not converge after %d passes for %r-%r; dropping segment",
                     MAX_CLIP_PASSES, p0, p1)
    return None
