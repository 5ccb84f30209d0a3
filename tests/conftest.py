import os
import sys

import pytest

# Make the repository root importable so pytest finds viewer.py and the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

os.environ.setdefault("TF_CPP_MIN_LOG_LEVEL", "3")
os.environ.setdefault("MPLBACKEND", "Agg")

from mandelbrot_viewer import logs, Viewport  # noqa: E402


@pytest.fixture
def viewport():
    """Fresh default viewport, [-2, 1] x [-1.2, 1.2]."""
    return Viewport()


@pytest.fixture(autouse=True)
def quiet_logs():
    logs.set_verbose(False)
    yield
    logs.set_verbose(False)
