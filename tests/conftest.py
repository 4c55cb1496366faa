"""Pytest fixtures for inkerase tests."""

import tempfile

import pytest

from inkerase.models import Path, Point


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def default_config():
    """Create default configuration."""
    from inkerase.config import EraserConfig
    return EraserConfig()


def make_path(*coords, **attributes):
    """Build a Path from (x, y) pairs and optional attributes."""
    return Path(coords=[Point(x=x, y=y) for x, y in coords], **attributes)


def xy(path):
    """Coordinates of a path as a list of (x, y) tuples."""
    return [(p.x, p.y) for p in path.coords]


@pytest.fixture
def diagonal_path():
    """A single segment from the origin to (100, 100)."""
    return make_path((0, 0), (100, 100), stroke="#000000")


@pytest.fixture
def horizontal_path():
    """A straight three-point path along the x axis."""
    return make_path((0, 0), (10, 0), (20, 0), stroke="#ff0000")
