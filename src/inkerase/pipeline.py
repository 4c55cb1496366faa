"""
Erase orchestrator.

Cleans the eraser trail, then clips the paths with a single circular pass
(one-point trail) or with one capsule pass per trail segment, each pass
consuming the output of the previous one.
"""

import math

from inkerase.config import EraserConfig
from inkerase.erase.passes import capsule_erase, point_erase
from inkerase.models import Point, to_path, to_point
from inkerase.paths.utils import clean_trail
from inkerase.tracer import get_tracer, trace


@trace(label="erase")
def erase(paths, eraser_trail, erase_radius=None, config=None):
    """
    Remove everything under the eraser from the paths.

    Args:
        paths: list of Path (or raw {"coords": [...], ...} mappings)
        eraser_trail: non-empty list of Points the eraser moved through
        erase_radius: eraser radius; None or 0 uses the configured default (20)
        config: EraserConfig object (optional)

    Returns:
        new list of Paths, each with at least one coordinate

    Raises:
        ValueError: the trail is empty or the radius is negative
        pydantic.ValidationError: a path has no coordinates
    """
    tracer = get_tracer()

    if config is None:
        config = EraserConfig()

    radius = erase_radius or config.erase.default_radius
    if radius < 0:
        raise ValueError(f"Erase radius must be positive, got {radius}")
    if not eraser_trail:
        raise ValueError("Eraser trail must contain at least one point")

    paths = [to_path(p) for p in paths]
    trail = clean_trail([to_point(p) for p in eraser_trail])
    tracer.event(f"Erasing {len(paths)} paths with a {len(trail)}-point trail, radius {radius}")

    if len(trail) == 1:
        paths = point_erase(paths, center=trail[0], radius=radius)
    else:
        for index in range(len(trail) - 1):
            paths = capsule_erase(
                paths, start=trail[index], end=trail[index + 1], radius=radius
            )

    if config.erase.round_coordinates:
        paths = round_paths(paths)

    tracer.event(f"Erase produced {len(paths)} paths")
    return paths


def _round_half_up(value):
    return float(math.floor(value + 0.5))


def round_paths(paths):
    """Round every coordinate of the paths to the nearest integer, halves up, in place."""
    for path in paths:
        path.coords = [Point(x=_round_half_up(p.x), y=_round_half_up(p.y)) for p in path.coords]
    return paths
