"""
Geometric primitives for the eraser engine.

Distances, containment tests and segment-segment intersection. A point lying
exactly on the border of a shape (at distance equal to the radius) is
considered to be outside that shape.
"""

import math

from inkerase.models import LocationIndex, Point

# Segments shorter than this collapse to their start point when projecting.
EPS = 1e-6


def distance(a, b):
    """Euclidean distance between two points."""
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2)


def same_point(a, b):
    """Exact coordinate equality."""
    return a.x == b.x and a.y == b.y


def inside_circle(p, center, r):
    """True if p lies strictly inside the circle."""
    return distance(p, center) < r


def inside_box(p, seg_a, seg_b, r):
    """
    True if p lies strictly inside the box of half-width r around seg_a->seg_b.

    The projection of p onto the segment axis must fall strictly between 0
    and the segment length, and the perpendicular offset must be smaller
    than r in absolute value. A zero-length segment has an empty box.
    """
    ab_x = seg_b.x - seg_a.x
    ab_y = seg_b.y - seg_a.y
    ap_x = p.x - seg_a.x
    ap_y = p.y - seg_a.y

    mag_ab = math.sqrt(ab_x ** 2 + ab_y ** 2)
    if mag_ab == 0:
        return False

    # the normal (-ab_y, ab_x) has the same magnitude as ab
    u_ab_x, u_ab_y = ab_x / mag_ab, ab_y / mag_ab
    u_n_x, u_n_y = -ab_y / mag_ab, ab_x / mag_ab

    along = ap_x * u_ab_x + ap_y * u_ab_y
    if along <= 0 or along >= mag_ab:
        return False

    across = ap_x * u_n_x + ap_y * u_n_y
    if across >= r or across <= -r:
        return False

    return True


def classify(p, seg_a, seg_b, r):
    """Locate p against the capsule of radius r around seg_a->seg_b."""
    return LocationIndex(
        in_start_circle=inside_circle(p, seg_a, r),
        in_end_circle=inside_circle(p, seg_b, r),
        in_box=inside_box(p, seg_a, seg_b, r),
    )


def closest_point_on_segment(a, b, p):
    """
    Closest point to p on the finite segment a->b.

    Degenerate segments (shorter than EPS) collapse to a.
    """
    ab_x = b.x - a.x
    ab_y = b.y - a.y
    length = math.sqrt(ab_x * ab_x + ab_y * ab_y)
    if length < EPS:
        return a

    k = (ab_x * (p.x - a.x) + ab_y * (p.y - a.y)) / length
    if k < 0:
        return a
    if k > length:
        return b
    return Point(x=a.x + ab_x * k / length, y=a.y + ab_y * k / length)


def line_segment_intersection(a, b, c, d):
    """
    Intersection of segments a->b and c->d.

    Returns None for parallel segments or when the intersection falls
    outside either segment.
    """
    s1_x = b.x - a.x
    s1_y = b.y - a.y
    s2_x = d.x - c.x
    s2_y = d.y - c.y

    denom = -s2_x * s1_y + s1_x * s2_y
    if denom == 0:
        return None

    s = (-s1_y * (a.x - c.x) + s1_x * (a.y - c.y)) / denom
    t = (s2_x * (a.y - c.y) - s2_y * (a.x - c.x)) / denom

    if 0 <= s <= 1 and 0 <= t <= 1:
        return Point(x=a.x + t * s1_x, y=a.y + t * s1_y)
    return None


def capsule_boundary_segments(c0, c1, r):
    """
    Corners of the box of half-width r around c0->c1.

        b0 ------------------- b3
        |                       |
        c0                     c1
        |                       |
        b1 ------------------- b2

    The side edges of the capsule are b0->b3 and b1->b2.
    """
    v_x = c1.x - c0.x
    v_y = c1.y - c0.y
    mag = math.sqrt(v_x ** 2 + v_y ** 2)
    if mag == 0:
        # no direction to offset along; the box degenerates to the point
        return c0, c0, c1, c1

    u_n_x, u_n_y = -v_y / mag, v_x / mag

    b0 = Point(x=c0.x + r * u_n_x, y=c0.y + r * u_n_y)
    b1 = Point(x=c0.x - r * u_n_x, y=c0.y - r * u_n_y)
    b2 = Point(x=c1.x - r * u_n_x, y=c1.y - r * u_n_y)
    b3 = Point(x=c1.x + r * u_n_x, y=c1.y + r * u_n_y)
    return b0, b1, b2, b3
