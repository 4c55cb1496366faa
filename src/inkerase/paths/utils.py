"""
Path utilities: eraser trail cleaning and attribute-preserving path cloning.
"""

import copy

from inkerase.geometry.primitives import same_point
from inkerase.models import Path


def clean_trail(points):
    """
    Remove consecutive duplicate points from an eraser trail.

    A single-point trail is returned unchanged. A trail made only of
    duplicates keeps its first point.

    Args:
        points: list of Point

    Returns:
        new list of Point
    """
    if len(points) <= 1:
        return list(points)

    cleaned = [points[0]]
    for point in points[1:]:
        if not same_point(point, cleaned[-1]):
            cleaned.append(point)

    return cleaned


def clone_path_shell(path):
    """
    Create an empty Path carrying deep copies of `path`'s attributes.

    The returned path owns a fresh, empty coordinate list ready to receive
    a run of coordinates. Attribute values are deep-copied so sub-paths
    split off the same source never share mutable state.
    """
    attributes = copy.deepcopy(path.model_extra or {})
    return Path.model_construct(coords=[], **attributes)


def make_sub_path(path, coords):
    """Build a sub-path of `path` holding `coords`."""
    sub_path = clone_path_shell(path)
    sub_path.coords = list(coords)
    return sub_path
