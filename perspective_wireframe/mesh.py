#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from enum import Enum
from typing import Optional, Sequence

from .errors import SceneValidationError
from .math_utils import Matrix, Vector


class ModelKind(str, Enum):
    GENERIC = 'generic'
    CUBE = 'cube'
    CYLINDER = 'cylinder'


class Model:
    """
    Wireframe model: homogeneous vertices plus polyline edges.

    Each edge is a sequence of vertex indices; consecutive indices are drawn
    as connected segments. `matrix` is the model-local transform (identity
    unless given). Vertices and edges are stored as tuples and never change
    after construction.
    """
    __slots__ = ('kind', 'vertices', 'edges', 'matrix')

    def __init__(self, kind: ModelKind, vertices, edges, matrix: Optional[Matrix] = None):
        self.kind = ModelKind(kind)
        self.vertices = tuple(_as_point(v, f"vertices[{i}]") for i, v in enumerate(vertices))
        self.edges = tuple(tuple(e) for e in edges)
        self.matrix = matrix.copy() if matrix is not None else Matrix.identity()
        self._check_edges()

    def __repr__(self):
        return f"Model({self.kind.value}, V:{len(self.vertices)}, E:{len(self.edges)})"

    def _check_edges(self):
        count = len(self.vertices)
        for i, edge in enumerate(self.edges):
            if len(edge) < 2:
                raise SceneValidationError("edge needs at least two indices", f"edges[{i}]")
            for j, idx in enumerate(edge):
                if isinstance(idx, bool) or not isinstance(idx, int):
                    raise SceneValidationError(f"index must be an integer, got {idx!r}",
                                               f"edges[{i}][{j}]")
                if not 0 <= idx < count:
                    raise SceneValidationError(f"index {idx} out of range for {count} vertices",
                                               f"edges[{i}][{j}]")

    def segments(self):
        """Yield (i, j) vertex index pairs for every drawn segment, in edge order."""
        for edge in self.edges:
            for a, b in zip(edge, edge[1:]):
                yield a, b

    # ── Factories ───────────────────────────────────────────────────────
    @classmethod
    def generic(cls, vertices, edges, matrix: Optional[Matrix] = None) -> 'Model':
        return cls(ModelKind.GENERIC, vertices, edges, matrix)

    @classmethod
    def cube(cls, center: Sequence[float], width: float, height: float, depth: float) -> 'Model':
        """Box centred on `center`: a ring at +depth/2, a ring at -depth/2, four connectors."""
        cx, cy, cz = center
        hw, hh, hd = width / 2.0, height / 2.0, depth / 2.0
        vertices = []
        for zsign in (1, -1):
            z = cz + zsign * hd
            vertices += [
                Vector.point(cx - hw, cy + hh, z),
                Vector.point(cx + hw, cy + hh, z),
                Vector.point(cx + hw, cy - hh, z),
                Vector.point(cx - hw, cy - hh, z),
            ]
        edges = [
            [0, 1, 2, 3, 0],
            [4, 5, 6, 7, 4],
            [0, 4], [1, 5], [2, 6], [3, 7],
        ]
        return cls(ModelKind.CUBE, vertices, edges)

    @classmethod
    def cylinder(cls, center: Sequence[float], radius: float, height: float, sides: int) -> 'Model':
        """Prism approximation with its axis along world y."""
        if sides < 3:
            raise SceneValidationError(f"cylinder needs at least 3 sides, got {sides}", 'sides')
        cx, cy, cz = center
        step = 2.0 * math.pi / sides
        vertices = []
        for y in (cy + height / 2.0, cy - height / 2.0):
            for k in range(sides):
                vertices.append(Vector.point(cx + radius * math.cos(step * k),
                                             y,
                                             cz + radius * math.sin(step * k)))
        top = list(range(sides)) + [0]
        bottom = list(range(sides, 2 * sides)) + [sides]
        edges = [top, bottom] + [[k, k + sides] for k in range(sides)]
        return cls(ModelKind.CYLINDER, vertices, edges)

    @classmethod
    def from_obj(cls, filename) -> 'Model':
        """Load an OBJ file as a generic model; every face becomes a closed edge loop."""
        vertices = []
        edges = []
        try:
            with open(filename, 'r') as f:
                for line in f:
                    if line.startswith('v '):
                        vertices.append([float(x) for x in line.split()[1:4]])
                    elif line.startswith('f '):
                        # Handle v/vt/vn format by splitting by '/'
                        face = [int(x.split('/')[0]) - 1 for x in line.split()[1:]]
                        if face:
                            edges.append(face + [face[0]])
        except (OSError, ValueError) as e:
            raise SceneValidationError(f"could not load OBJ file: {e}", str(filename)) from e

        if not vertices or not edges:
            raise SceneValidationError("OBJ file has no vertices or faces", str(filename))
        return cls.generic(vertices, edges)


def _as_point(v, path: str) -> Vector:
    """Accept a 3-sequence (w=1 added) or a homogeneous 4-vector."""
    try:
        vec = v if isinstance(v, Vector) else Vector(v)
    except (TypeError, ValueError) as e:
        raise SceneValidationError(f"not a vertex: {e}", path) from None
    if vec.dim == 3:
        return Vector.point(vec.x, vec.y, vec.z)
    return vec
