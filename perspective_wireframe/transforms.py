#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/transforms.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import Optional, Tuple

from .camera import View
from .errors import DegenerateGeometryError, DegenerateViewError
from .math_utils import Matrix, Vector, multiply

# |w| below this after the viewport transform means the point sits in the eye plane.
W_EPSILON = 1e-9


def view_basis(view: View) -> Tuple[Vector, Vector, Vector]:
    """Orthonormal view-reference basis (u, v, n) for the camera."""
    try:
        n = (view.prp - view.srp).normalize()
    except DegenerateGeometryError:
        raise DegenerateViewError(f"PRP {view.prp!r} coincides with SRP {view.srp!r}") from None
    try:
        u = view.vup.cross(n).normalize()
    except DegenerateGeometryError:
        raise DegenerateViewError(f"VUP {view.vup!r} is parallel to the view axis") from None
    v = n.cross(u)
    return u, v, n


def perspective_normalization(view: View) -> Matrix:
    """
    World -> canonical perspective view volume (N_per).

    Application order:
      1. translate PRP to the origin
      2. rotate (u, v, n) onto (x, y, z)
      3. shear so the centre of the clip window lies on the z-axis
      4. scale so the volume is bounded by x, y in [z, -z] and z in [-1, z_min]
    """
    left, right, bottom, top, near, far = view.clip
    prp = view.prp
    u, v, n = view_basis(view)

    translate_prp = Matrix.translation(-prp.x, -prp.y, -prp.z)

    rotate_vrc = Matrix.from_rows([
        [u.x, u.y, u.z, 0.0],
        [v.x, v.y, v.z, 0.0],
        [n.x, n.y, n.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])

    dop = Vector((left + right) / 2.0, (bottom + top) / 2.0, -near)
    shear_cw = Matrix.shear_xy(-dop.x / dop.z, -dop.y / dop.z)

    scale_per = Matrix.scale(
        (2.0 * near) / ((right - left) * far),
        (2.0 * near) / ((top - bottom) * far),
        1.0 / far
    )

    n_per = multiply([scale_per, shear_cw, rotate_vrc, translate_prp])
    if not all(math.isfinite(c) for row in n_per.m for c in row):
        raise DegenerateViewError(f"view transform overflows for PRP {prp!r}, SRP {view.srp!r}")
    return n_per


def mper() -> Matrix:
    """Perspective -> parallel: copies -z into w so the later divide is the perspective divide."""
    mat = Matrix.identity()
    mat.m[3][2] = -1.0
    mat.m[3][3] = 0.0
    return mat


def viewport(width: float, height: float) -> Matrix:
    """Map [-1, 1] x [-1, 1] (after the divide) onto [0, width] x [0, height]."""
    return Matrix.from_rows([
        [width / 2.0, 0.0, 0.0, width / 2.0],
        [0.0, height / 2.0, 0.0, height / 2.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def composite_matrix(view: View) -> Matrix:
    """MPer @ N_per: the matrix applied to every vertex before clipping.

    MPer leaves x, y and z untouched, so clipping against the canonical
    volume works on the composite output directly.
    """
    return multiply([mper(), perspective_normalization(view)])


def project_to_pixels(v: Vector, width: float, height: float,
                      vp: Optional[Matrix] = None) -> Optional[Tuple[float, float]]:
    """
    Viewport transform followed by the homogeneous divide.

    Returns (px, py), or None when |w| is too small to divide by; such a
    point must not be drawn.
    """
    if vp is None:
        vp = viewport(width, height)
    p = vp.mul_vec(v)
    if abs(p.w) < W_EPSILON:
        return None
    return p.x / p.w, p.y / p.w
