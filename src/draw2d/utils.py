"""
General geometry helpers for the draw2d model.
"""
import logging
import numpy as np
log = logging.getLogger(__name__)


def path_bbox(coords):
    """Calculate the bounding box of a path."""

    if not coords:
        return (0, 0, 0, 0)

    coords = np.array(coords, dtype=float)
    left   = float(np.min(coords[:, 0]))
    top    = float(np.min(coords[:, 1]))
    width  = float(np.max(coords[:, 0])) - left
    height = float(np.max(coords[:, 1])) - top

    return (left, top, width, height)

def is_click_in_bbox(click_x, click_y, bbox):
    """Check if a click is inside a bounding box (edges included)."""
    x, y, w, h = bbox
    return x <= click_x <= x + w and y <= click_y <= y + h

def location_transform(coords, from_pts, to_pts, eps = 1e-20):
    """
    Map coordinates from one two-corner box onto another.

    from_pts and to_pts are the (corner 0, corner 2) pairs of the old and
    new box. Corner 0 of the old box lands on corner 0 of the new one and
    each axis is scaled by the ratio of the signed extents. An axis whose
    old extent is below eps is only translated.
    """
    (fx0, fy0), (fx2, fy2) = from_pts
    (tx0, ty0), (tx2, ty2) = to_pts

    old_w, old_h = fx2 - fx0, fy2 - fy0

    sx, sy = 1.0, 1.0
    if abs(old_w) > eps:
        sx = (tx2 - tx0) / old_w
    else:
        log.debug("degenerate old width %s, not scaling x", old_w)
    if abs(old_h) > eps:
        sy = (ty2 - ty0) / old_h
    else:
        log.debug("degenerate old height %s, not scaling y", old_h)

    if not coords:
        return []

    arr = np.array(coords, dtype=float)
    arr[:, 0] = tx0 + (arr[:, 0] - fx0) * sx
    arr[:, 1] = ty0 + (arr[:, 1] - fy0) * sy

    return [ (float(x), float(y)) for x, y in arr ]

def polygon_crossings(coords, pt):
    """
    Count how often a ray from pt in +x direction crosses the outline.

    The outline is closed implicitly (last point connects to the first).
    An edge is only considered when (y0 > py) != (y1 > py), so a vertex
    lying exactly on the ray is counted for one of its two edges only.
    Crossings are counted when they lie strictly right of pt.
    """
    if len(coords) < 2:
        return 0

    px, py = pt
    start = np.array(coords, dtype=float)
    end   = np.roll(start, -1, axis=0)

    x0, y0 = start[:, 0], start[:, 1]
    x1, y1 = end[:, 0], end[:, 1]

    straddle = (y0 > py) != (y1 > py)
    if not straddle.any():
        return 0

    x0, y0, x1, y1 = x0[straddle], y0[straddle], x1[straddle], y1[straddle]
    cross_x = x0 + (x1 - x0) * (py - y0) / (y1 - y0)

    return int(np.count_nonzero(cross_x > px))

def is_point_in_polygon(coords, pt):
    """Crossing-number test: pt is inside iff the crossing count is odd."""
    return polygon_crossings(coords, pt) % 2 == 1
