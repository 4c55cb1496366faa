"""
Segment-capsule intersections.

A capsule is the union of two circles of radius r centered on c0 and c1 and
the box of half-width r between them. Crossings are gathered from every part
of the boundary that the segment can hit, then the right candidate is picked
by distance.
"""

import numpy as np

from inkerase.geometry.circle import segment_circle_intersection, segment_circle_intersections
from inkerase.geometry.primitives import (
    capsule_boundary_segments,
    line_segment_intersection,
    same_point,
)


def _nearest(candidates, target, fallback):
    """
    Candidate strictly closest to target, or fallback if none is closer.

    None entries are ignored. Ties keep the earlier entry, with the
    fallback ranked first.
    """
    pool = [fallback] + [c for c in candidates if c is not None]
    xs = np.array([p.x for p in pool], dtype=np.float64)
    ys = np.array([p.y for p in pool], dtype=np.float64)
    dists = np.sqrt((xs - target.x) ** 2 + (ys - target.y) ** 2)
    return pool[int(np.argmin(dists))]


def _side_crossings(a, b, c0, c1, r):
    """Crossings of a->b with the two straight sides of the capsule."""
    b0, b1, b2, b3 = capsule_boundary_segments(c0, c1, r)
    return [
        line_segment_intersection(a, b, b0, b3),
        line_segment_intersection(a, b, b1, b2),
    ]


def segment_capsule_intersection(inside, location, outside, c0, c1, r):
    """
    Point where the segment inside->outside leaves the capsule.

    Use when `inside` is in the capsule and `outside` is not; `location` is
    the LocationIndex of `inside`. The candidate closest to `outside` is the
    first boundary crossing met walking away from `inside`.

    Returns None if no candidate is found or it coincides with `inside`.
    """
    candidates = []

    if location.in_start_circle and not location.in_end_circle:
        candidates.append(segment_circle_intersection(inside, outside, c0, r))
        candidates.extend(_side_crossings(inside, outside, c0, c1, r))
        pair = segment_circle_intersections(inside, outside, c1, r)
        if pair:
            candidates.extend(pair)
    elif location.in_end_circle and not location.in_start_circle:
        candidates.append(segment_circle_intersection(inside, outside, c1, r))
        candidates.extend(_side_crossings(inside, outside, c0, c1, r))
        pair = segment_circle_intersections(inside, outside, c0, r)
        if pair:
            candidates.extend(pair)
    elif location.in_start_circle and location.in_end_circle:
        candidates.append(segment_circle_intersection(inside, outside, c0, r))
        candidates.extend(_side_crossings(inside, outside, c0, c1, r))
        candidates.append(segment_circle_intersection(inside, outside, c1, r))
    else:
        # box only
        for center in (c1, c0):
            pair = segment_circle_intersections(inside, outside, center, r)
            if pair:
                candidates.extend(pair)
        candidates.extend(_side_crossings(inside, outside, c0, c1, r))

    intersection = _nearest(candidates, outside, inside)
    if same_point(intersection, inside):
        return None
    return intersection


def segment_capsule_intersections(a, b, c0, c1, r):
    """
    Entry and exit points of the segment a->b through the capsule.

    Use when neither endpoint is in the capsule. The entry is the candidate
    closest to `a`, the exit the candidate closest to `b`.

    Returns None if the segment does not pass through the capsule.
    """
    candidates = []
    for center in (c0, c1):
        pair = segment_circle_intersections(a, b, center, r)
        if pair:
            candidates.extend(pair)
    candidates.extend(_side_crossings(a, b, c0, c1, r))

    # the farthest possible crossing from a is b, and from b is a
    entry = _nearest(candidates, a, b)
    exit_ = _nearest(candidates, b, a)
    if same_point(entry, b) or same_point(exit_, a):
        return None
    return entry, exit_
