#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

from .errors import DegenerateGeometryError, DimensionError

# Norm below which a vector cannot be normalized.
NORMALIZE_EPSILON = 1e-9

_AXES = ('x', 'y', 'z', 'w')


class Vector:
    """Fixed-size (3 or 4) numeric vector with value semantics.

    Components are addressable as x, y, z and (for 4-vectors) w.
    Every operation returns a new Vector; inputs are never modified.
    """
    __slots__ = ('values',)

    def __init__(self, *components):
        if len(components) == 1 and not isinstance(components[0], (int, float)):
            components = tuple(components[0])
        if len(components) not in (3, 4):
            raise DimensionError(f"Vector must have 3 or 4 components, got {len(components)}")
        self.values = tuple(float(c) for c in components)

    @classmethod
    def point(cls, x, y, z) -> 'Vector':
        """Homogeneous point (w=1)."""
        return cls(x, y, z, 1.0)

    def __repr__(self):
        return "Vector(" + ", ".join(f"{c:.4f}" for c in self.values) + ")"

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self.values == other.values
        return NotImplemented

    def __hash__(self):
        return hash(self.values)

    def __getattr__(self, name):
        # Only reached for names not found normally, i.e. the axis accessors.
        if name in _AXES:
            i = _AXES.index(name)
            if i < len(self.values):
                return self.values[i]
        raise AttributeError(f"{type(self).__name__} has no attribute '{name}'")

    @property
    def dim(self) -> int:
        return len(self.values)

    def copy(self) -> 'Vector':
        return Vector(self.values)

    def _check_same_dim(self, other):
        if not isinstance(other, Vector):
            raise TypeError(f"expected Vector, got {type(other).__name__}")
        if other.dim != self.dim:
            raise DimensionError(f"dimension mismatch: {self.dim} vs {other.dim}")

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dim(other)
        return Vector([a + b for a, b in zip(self.values, other.values)])

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector([c * scalar for c in self.values])

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vector([c / scalar for c in self.values])

    def subtract(self, other) -> 'Vector':
        self._check_same_dim(other)
        return Vector([a - b for a, b in zip(self.values, other.values)])

    def dot(self, other) -> float:
        self._check_same_dim(other)
        return sum(a * b for a, b in zip(self.values, other.values))

    def cross(self, other) -> 'Vector':
        """Cross product, defined for 3-vectors only."""
        self._check_same_dim(other)
        if self.dim != 3:
            raise DimensionError("cross product is only defined for 3-vectors")
        ax, ay, az = self.values
        bx, by, bz = other.values
        return Vector(
            ay * bz - az * by,
            az * bx - ax * bz,
            ax * by - ay * bx
        )

    def magnitude(self) -> float:
        return math.sqrt(sum(c * c for c in self.values))

    def normalize(self) -> 'Vector':
        m = self.magnitude()
        if m < NORMALIZE_EPSILON:
            raise DegenerateGeometryError(f"cannot normalize near-zero vector {self!r}")
        return self / m

    def lerp(self, other, t: float) -> 'Vector':
        """Linear interpolation of every component: self + t * (other - self)."""
        self._check_same_dim(other)
        return Vector([a + t * (b - a) for a, b in zip(self.values, other.values)])


class Matrix:
    """rows x columns matrix stored as a list of row lists ([row][col])."""
    __slots__ = ('m',)

    def __init__(self, rows: int = 4, columns: int = 4):
        self.m = [[0.0] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows) -> 'Matrix':
        rows = [list(r) for r in rows]
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise DimensionError("matrix rows must be non-empty and of equal length")
        mat = cls(len(rows), len(rows[0]))
        mat.m = [[float(c) for c in r] for r in rows]
        return mat

    @property
    def rows(self) -> int:
        return len(self.m)

    @property
    def columns(self) -> int:
        return len(self.m[0])

    def __repr__(self):
        return f"Matrix({self.m!r})"

    def __eq__(self, other):
        if isinstance(other, Matrix):
            return self.m == other.m
        return NotImplemented

    def copy(self) -> 'Matrix':
        return Matrix.from_rows(self.m)

    @classmethod
    def identity(cls, size: int = 4) -> 'Matrix':
        res = cls(size, size)
        for i in range(size):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def translation(cls, x, y, z) -> 'Matrix':
        mat = cls.identity()
        mat.m[0][3] = x
        mat.m[1][3] = y
        mat.m[2][3] = z
        return mat

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Matrix':
        mat = cls.identity()
        mat.m[0][0] = sx
        mat.m[1][1] = sy
        mat.m[2][2] = sz
        return mat

    @classmethod
    def shear_xy(cls, shx, shy) -> 'Matrix':
        """Shear parallel to the xy-plane: x += shx*z, y += shy*z."""
        mat = cls.identity()
        mat.m[0][2] = shx
        mat.m[1][2] = shy
        return mat

    @classmethod
    def rotation_x(cls, rad: float) -> 'Matrix':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[1][1] = c
        mat.m[1][2] = -s
        mat.m[2][1] = s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Matrix':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][2] = s
        mat.m[2][0] = -s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Matrix':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][1] = -s
        mat.m[1][0] = s
        mat.m[1][1] = c
        return mat

    def mul_vec(self, v: Vector) -> Vector:
        """Matrix times column vector; each output component is a row dot product."""
        if self.columns != v.dim:
            raise DimensionError(f"cannot multiply {self.rows}x{self.columns} matrix by {v.dim}-vector")
        return Vector([sum(a * b for a, b in zip(row, v.values)) for row in self.m])

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return self.mul_vec(other)
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise DimensionError(
                    f"cannot multiply {self.rows}x{self.columns} by {other.rows}x{other.columns}")
            res = Matrix(self.rows, other.columns)
            for r in range(self.rows):
                for c in range(other.columns):
                    val = 0.0
                    for k in range(self.columns):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    @staticmethod
    def multiply(chain):
        """Product M1 @ M2 @ ... @ Mk, evaluated left to right.

        The last operand may be a Vector, in which case a Vector is returned.
        Applied to a vector, the rightmost matrix acts first.
        """
        chain = list(chain)
        if not chain:
            raise DimensionError("multiply() needs at least one operand")
        for operand in chain[:-1]:
            if not isinstance(operand, Matrix):
                raise DimensionError("only the last operand of multiply() may be a Vector")
        result = chain[0]
        for operand in chain[1:]:
            result = result @ operand
        return result


multiply = Matrix.multiply
