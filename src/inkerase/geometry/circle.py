"""
Segment-circle intersections.

Two routines: one for a segment with one endpoint inside the circle (a
single crossing) and one for a segment with both endpoints outside (zero or
two crossings; a tangent touch is not a crossing).
"""

import math

from inkerase.geometry.primitives import closest_point_on_segment, distance, same_point
from inkerase.models import Point


def segment_circle_intersection(inside, outside, center, r):
    """
    Point where the segment inside->outside leaves the circle.

    Use when `inside` is known to be inside the circle and `outside` is not.
    The center is projected onto the segment's line and the crossing lies
    one chord half-length past the projection, toward `outside`.

    Returns None if the crossing coincides with `inside`.
    """
    ab_x = outside.x - inside.x
    ab_y = outside.y - inside.y
    ac_x = center.x - inside.x
    ac_y = center.y - inside.y

    mag_ab = math.sqrt(ab_x ** 2 + ab_y ** 2)
    u_x, u_y = ab_x / mag_ab, ab_y / mag_ab
    ac_proj_ab = ac_x * u_x + ac_y * u_y

    # foot of the perpendicular from the center onto the line
    foot_x = inside.x + ac_proj_ab * u_x
    foot_y = inside.y + ac_proj_ab * u_y
    dist_center_foot = math.sqrt((center.x - foot_x) ** 2 + (center.y - foot_y) ** 2)

    if dist_center_foot == 0:
        half_chord = r
    else:
        half_chord = math.sqrt(max(r ** 2 - dist_center_foot ** 2, 0.0))

    intersection = Point(
        x=inside.x + ac_proj_ab * u_x + half_chord * u_x,
        y=inside.y + ac_proj_ab * u_y + half_chord * u_y,
    )
    if same_point(intersection, inside):
        return None
    return intersection


def segment_circle_intersections(a, b, center, r):
    """
    Entry and exit points of the segment a->b through the circle.

    Use when both endpoints are outside the circle. The closest point on the
    finite segment rejects segments whose infinite line cuts the circle but
    which stop short of it.

    Returns a (entry, exit) tuple ordered along a->b, or None if the segment
    does not pass through the circle or the entry coincides with `a`.
    """
    closest = closest_point_on_segment(a, b, center)
    if distance(closest, center) >= r:
        return None

    ab_x = b.x - a.x
    ab_y = b.y - a.y
    ac_x = center.x - a.x
    ac_y = center.y - a.y

    # normal and direction share the magnitude of ab
    mag_ab = math.sqrt(ab_x ** 2 + ab_y ** 2)
    u_n_x, u_n_y = -ab_y / mag_ab, ab_x / mag_ab
    u_x, u_y = ab_x / mag_ab, ab_y / mag_ab

    # signed distance from the center to the line through a and b
    mag_d = ac_x * u_n_x + ac_y * u_n_y

    half_chord = math.sqrt(max(r ** 2 - mag_d ** 2, 0.0))
    foot_x = center.x - mag_d * u_n_x
    foot_y = center.y - mag_d * u_n_y

    entry = Point(x=foot_x - u_x * half_chord, y=foot_y - u_y * half_chord)
    exit_ = Point(x=foot_x + u_x * half_chord, y=foot_y + u_y * half_chord)
    if same_point(entry, a):
        return None
    return entry, exit_
