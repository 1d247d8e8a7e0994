#
# PROJECT: perspective-wireframe
# MODULE: perspective_wireframe/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class WireframeError(Exception):
    """Base class for all errors raised by the pipeline."""


class DimensionError(WireframeError, ValueError):
    """Operands of a vector/matrix operation have incompatible shapes."""


class DegenerateGeometryError(WireframeError, ArithmeticError):
    """A geometric construction has no well-defined result (zero-length normal etc.)."""


class DegenerateViewError(DegenerateGeometryError):
    """The camera cannot be turned into a view transform.

    Raised when PRP coincides with SRP or when VUP is parallel to the view axis.
    """


class SceneValidationError(WireframeError, ValueError):
    """A scene description is malformed.

    `path` names the offending field, e.g. ``models[1].edges[0][2]``.
    """

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
