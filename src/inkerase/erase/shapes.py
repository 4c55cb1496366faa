"""
Erase shapes.

An erase shape bundles the containment and crossing tests a single erase
pass needs. The path-splitting walk only talks to this interface, so the
same walk serves the circular eraser (single-point trail) and the capsule
eraser (one trail segment).
"""

from abc import ABC, abstractmethod

from inkerase.geometry.capsule import segment_capsule_intersection, segment_capsule_intersections
from inkerase.geometry.circle import segment_circle_intersection, segment_circle_intersections
from inkerase.geometry.primitives import EPS, classify, inside_circle


class EraseShape(ABC):
    """Base class for the footprint of the eraser during one pass."""

    # When a run reaches the shape but no entry crossing can be computed,
    # either drop the run and restart past the inside point, or keep the run
    # open through that point.
    restart_on_missed_entry = True

    @abstractmethod
    def locate(self, point):
        """Classify a point; the result is fed back to is_inside and crossing."""

    @abstractmethod
    def is_inside(self, location):
        """True if a located point is inside the shape."""

    @abstractmethod
    def crossing(self, inside, location, outside):
        """Exit point of inside->outside, or None."""

    @abstractmethod
    def crossings(self, a, b):
        """(entry, exit) of a->b with both endpoints outside, or None."""

    @abstractmethod
    def bbox(self):
        """Bounding box [min_x, min_y, max_x, max_y] of the shape."""

    def contains(self, point):
        return self.is_inside(self.locate(point))


class CircleEraser(EraseShape):
    """Circular eraser of radius `radius` around `center`."""

    def __init__(self, center, radius):
        self.center = center
        self.radius = radius

    def locate(self, point):
        return inside_circle(point, self.center, self.radius)

    def is_inside(self, location):
        return location

    def crossing(self, inside, location, outside):
        return segment_circle_intersection(inside, outside, self.center, self.radius)

    def crossings(self, a, b):
        return segment_circle_intersections(a, b, self.center, self.radius)

    def bbox(self):
        r = self.radius + EPS
        return [self.center.x - r, self.center.y - r, self.center.x + r, self.center.y + r]

    def __repr__(self):
        return f"CircleEraser(center={self.center!r}, radius={self.radius!r})"


class CapsuleEraser(EraseShape):
    """Capsule eraser swept by a circle of radius `radius` from `start` to `end`."""

    # cuts from the previous trail segment sit on this capsule's start circle
    restart_on_missed_entry = False

    def __init__(self, start, end, radius):
        self.start = start
        self.end = end
        self.radius = radius

    def locate(self, point):
        return classify(point, self.start, self.end, self.radius)

    def is_inside(self, location):
        return location.inside

    def crossing(self, inside, location, outside):
        return segment_capsule_intersection(
            inside, location, outside, self.start, self.end, self.radius
        )

    def crossings(self, a, b):
        return segment_capsule_intersections(a, b, self.start, self.end, self.radius)

    def bbox(self):
        r = self.radius + EPS
        return [
            min(self.start.x, self.end.x) - r,
            min(self.start.y, self.end.y) - r,
            max(self.start.x, self.end.x) + r,
            max(self.start.y, self.end.y) + r,
        ]

    def __repr__(self):
        return (
            f"CapsuleEraser(start={self.start!r}, end={self.end!r}, "
            f"radius={self.radius!r})"
        )
