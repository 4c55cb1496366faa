"""
Pydantic data models for the eraser engine.

Paths flow through these validated models so that every path handed to the
engine carries at least one coordinate. Auxiliary path attributes (stroke
color, ids, ...) are kept as extra fields and are opaque to the engine.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """A 2-D point. Value type, compared by coordinates."""
    x: float
    y: float

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __repr__(self):
        return f"Point({self.x!r}, {self.y!r})"


class Path(BaseModel):
    """
    A polyline stroke.

    Any field besides `coords` is an auxiliary attribute and is carried
    over to every sub-path split off this path.
    """
    coords: List[Point] = Field(..., min_length=1)

    model_config = ConfigDict(extra="allow")

    @property
    def attributes(self):
        """Auxiliary attributes of the path (everything except coords)."""
        return dict(self.model_extra or {})

    @property
    def is_point_path(self):
        """A single-coordinate path represents a dot."""
        return len(self.coords) == 1


class LocationIndex(BaseModel):
    """
    Where a point lies relative to a capsule.

    Flags for the circle around the start point, the circle around the end
    point and the box between them. Zero, one or two flags may be set.
    """
    in_start_circle: bool = False
    in_end_circle: bool = False
    in_box: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def inside(self):
        """A point is inside the capsule if any flag is set."""
        return self.in_start_circle or self.in_end_circle or self.in_box


def to_point(value):
    """
    Coerce a Point, an {"x": .., "y": ..} mapping or an (x, y) pair to a Point.
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, dict):
        return Point.model_validate(value)
    x, y = value
    return Point(x=x, y=y)


def to_path(value):
    """Coerce a Path or a raw {"coords": [...], ...} mapping to a validated Path."""
    if isinstance(value, Path):
        return value
    return Path.model_validate(value)


def compute_bbox(points):
    """
    Compute bounding box from a list of Points.

    Returns [min_x, min_y, max_x, max_y]. Paths always carry at least one
    coordinate, so `points` is never empty.
    """
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return [min(xs), min(ys), max(xs), max(ys)]
