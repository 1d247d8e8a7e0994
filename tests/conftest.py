"""Shared fixtures for the pipeline tests."""
import pytest

from perspective_wireframe.camera import View


@pytest.fixture
def unit_view():
    """Eye at z=1 looking at the origin; clip [-1, 1, -1, 1, 1, 3] (z_min = -1/3)."""
    return View(prp=(0, 0, 1), srp=(0, 0, 0), vup=(0, 1, 0), clip=(-1, 1, -1, 1, 1, 3))


@pytest.fixture
def far_view():
    """Eye pulled back to z=5 with a deep frustum; a 2x2x2 cube at the origin fits inside."""
    return View(prp=(0, 0, 5), srp=(0, 0, 0), vup=(0, 1, 0), clip=(-1, 1, -1, 1, 1, 10))


@pytest.fixture
def oblique_view():
    """Off-axis camera with an asymmetric clip window."""
    return View(prp=(0, 10, 42), srp=(20, 15, -40), vup=(1, 1, 0), clip=(-12, 6, -12, 6, 10, 100))


@pytest.fixture
def scene_dict():
    return {
        "view": {
            "prp": [0, 0, 5],
            "srp": [0, 0, 0],
            "vup": [0, 1, 0],
            "clip": [-1, 1, -1, 1, 1, 10],
        },
        "models": [
            {"type": "generic",
             "vertices": [[0, 0, 0], [1, 0, 0], [1, 1, 0]],
             "edges": [[0, 1, 2, 0]]},
            {"type": "cube", "center": [0, 0, 0], "width": 2, "height": 2, "depth": 2},
            {"type": "cylinder", "center": [0, 0, 0], "radius": 1, "height": 2, "sides": 8},
        ],
    }
