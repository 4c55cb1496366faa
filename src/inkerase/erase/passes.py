"""
Erase passes.

A pass clips every path against one erase shape. Each path is walked one
segment at a time; runs of points that survive are flushed as independent
sub-paths, cut where the segment crosses the shape's boundary.

The same walk serves both erasers:
- point_erase: a single circle (eraser trail of one point)
- capsule_erase: the capsule around one eraser trail segment
"""

from inkerase.erase.shapes import CapsuleEraser, CircleEraser
from inkerase.geometry.primitives import same_point
from inkerase.models import compute_bbox
from inkerase.paths.utils import make_sub_path
from inkerase.tracer import get_tracer, trace


class _Run:
    """
    The unflushed run of kept points of a path being walked.

    The run starts at index `start` of the source coordinates. Its first
    point may be replaced by a boundary crossing (`head`); the source
    coordinates themselves are never modified.
    """

    def __init__(self, coords):
        self.coords = coords
        self.start = 0
        self.head = coords[0]

    def point_at(self, index):
        return self.head if index == self.start else self.coords[index]

    def restart(self, index, head=None):
        self.start = index
        self.head = self.coords[index] if head is None else head

    def points(self, stop):
        """Points of the run up to, not including, source index `stop`."""
        return [self.head] + self.coords[self.start + 1:stop]


def split_path(path, shape):
    """
    Clip a single path against an erase shape.

    Args:
        path: Path to clip
        shape: EraseShape to clip against

    Returns:
        list of sub-paths that survive, in walk order
    """
    coords = path.coords

    if path.is_point_path:
        if shape.contains(coords[0]):
            return []
        return [make_sub_path(path, coords)]

    pieces = []
    run = _Run(coords)
    last_index = len(coords) - 1
    # set while the run head is a crossing on the current segment; the
    # shapes are convex, so that segment cannot cross the boundary again
    head_on_boundary = False
    i = 0

    while i < last_index:
        p0 = run.point_at(i)
        p1 = coords[i + 1]
        loc0 = shape.locate(p0)
        loc1 = shape.locate(p1)
        in0 = shape.is_inside(loc0)
        in1 = shape.is_inside(loc1)

        if in0 and in1:
            # p0 is erased
            i += 1
            run.restart(i)
            head_on_boundary = False

        elif in0:
            # the run continues from where p0->p1 leaves the shape
            crossing = None if head_on_boundary else shape.crossing(p0, loc0, p1)
            if crossing is not None:
                run.restart(i, crossing)
                head_on_boundary = True
            else:
                i += 1
                head_on_boundary = False

        elif in1:
            # the run ends where p0->p1 enters the shape
            crossing = shape.crossing(p1, loc1, p0)
            i += 1
            head_on_boundary = False
            if crossing is not None:
                pieces.append(make_sub_path(path, run.points(i) + [crossing]))
                run.restart(i)
            elif shape.restart_on_missed_entry:
                run.restart(i)

        else:
            pair = None if head_on_boundary else shape.crossings(p0, p1)
            head_on_boundary = False
            if pair is None:
                i += 1
                continue

            entry, exit_ = pair
            piece = run.points(i + 1)
            if not same_point(piece[-1], entry):
                piece.append(entry)
            if len(piece) > 1:
                pieces.append(make_sub_path(path, piece))

            # the run resumes at the exit point, standing in for p0
            if same_point(p1, exit_):
                i += 1
                run.restart(i)
            else:
                run.restart(i, exit_)
                head_on_boundary = True

    if run.start != i:
        pieces.append(make_sub_path(path, run.points(len(coords))))

    return pieces


def _bboxes_disjoint(a, b):
    return a[2] < b[0] or b[2] < a[0] or a[3] < b[1] or b[3] < a[1]


def erase_pass(paths, shape):
    """
    Clip every path against one erase shape.

    Paths whose bounding box misses the shape are copied through without
    walking them. Output keeps input order, and each path's sub-paths stay
    in walk order.

    Returns:
        new list of Paths
    """
    tracer = get_tracer()

    shape_bbox = shape.bbox()
    result = []
    untouched = 0

    for path in paths:
        if _bboxes_disjoint(compute_bbox(path.coords), shape_bbox):
            result.append(make_sub_path(path, path.coords))
            untouched += 1
            continue
        result.extend(split_path(path, shape))

    tracer.event(
        f"Erased with {shape!r}: {len(paths)} -> {len(result)} paths "
        f"({untouched} outside the eraser)",
        level="DEBUG",
    )
    return result


@trace(label="point_erase", arg_names=["center", "radius"])
def point_erase(paths, center, radius):
    """
    Clip all paths against a circular eraser.

    Args:
        paths: list of Path
        center: Point at the center of the eraser
        radius: eraser radius

    Returns:
        new list of Paths
    """
    return erase_pass(paths, CircleEraser(center, radius))


@trace(label="capsule_erase", arg_names=["start", "end", "radius"])
def capsule_erase(paths, start, end, radius):
    """
    Clip all paths against the capsule swept by the eraser from start to end.

    Args:
        paths: list of Path
        start, end: Points of one eraser trail segment
        radius: eraser radius

    Returns:
        new list of Paths
    """
    return erase_pass(paths, CapsuleEraser(start, end, radius))
