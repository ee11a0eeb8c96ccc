"""Polygon is a shape made of an ordered list of points."""

import logging
from .location import Location
from .shape import Shape
from .bus import ChangeResult
from .events import ShapeEvent, PointAddEvent
from .utils import path_bbox, location_transform, is_point_in_polygon
log = logging.getLogger(__name__)

# old extents below this are not scaled when the location is changed
RESCALE_EPSILON = 1e-20


class Polygon(Shape):
    """
    Class for polygons.

    The location of a polygon is the bounding box of its points. When
    points are appended, the location grows to include them; this is an
    "internal" location change and leaves the points alone. When the
    location is changed from outside (moving or resizing the polygon),
    all points are mapped from the old location onto the new one.

    If closed (the default), the last point connects back to the first.
    """
    type = "polygon"

    def __init__(self, points = None, closed = True, color = None):
        points = [ (p[0], p[1]) for p in points or [] ]
        location = None
        if points:
            x, y, w, h = path_bbox(points)
            location = Location(x, y, x + w, y + h)

        super().__init__(location, color)
        self.__points = points
        self.__closed = closed

    # ------------ Polygon point methods ------------------
    def point_count(self):
        """Return the number of points."""
        return len(self.__points)

    def point(self, index):
        """Return the point at index."""
        return self.__points[index]

    def points(self):
        """Return a copy of the list of points."""
        return list(self.__points)

    def point_append(self, pt):
        """
        Append a point to the polygon.

        The location is expanded first if the point lies outside of it.
        If that location change is rejected, the point is not added and
        no point events are sent.
        """
        pt = (pt[0], pt[1])

        if not self.__points:
            res = self._location_change(Location.from_points(pt, pt), internal = True)
        else:
            res = self.__location_expand(pt)

        if not res:
            log.debug("location change for new point %s rejected", pt)
            return res

        index = len(self.__points)
        res = self._fire(PointAddEvent.before(self, index, pt))
        if res:
            self.__points.append(pt)
            self._fire(PointAddEvent.after(self, index, pt))
        return res

    def __location_expand(self, pt):
        """
        Grow the location so that it includes pt.

        Corners 0 and 2 span the location, but either of them can be the
        leftmost one, and independently of that either can be the topmost
        one. Only the coordinates that pt actually violates are moved.
        """
        location = self.location()
        pt0, pt2 = location.pt(0), location.pt(2)

        left   = 0 if pt0[0] < pt2[0] else 2
        right  = 2 - left
        top    = 0 if pt0[1] < pt2[1] else 2
        bottom = 2 - top

        x, y = pt
        changed = False

        if x < location.pt(left)[0]:
            location.pt_set(left, (x, location.pt(left)[1]))
            changed = True
        if x > location.pt(right)[0]:
            location.pt_set(right, (x, location.pt(right)[1]))
            changed = True
        if y < location.pt(top)[1]:
            location.pt_set(top, (location.pt(top)[0], y))
            changed = True
        if y > location.pt(bottom)[1]:
            location.pt_set(bottom, (location.pt(bottom)[0], y))
            changed = True

        if not changed:
            return ChangeResult.ok()

        return self._location_change(location, internal = True)

    def _on_location_changed_after_events(self, old_location, internal):
        """Scale all points to the new location, unless the change was internal."""
        super()._on_location_changed_after_events(old_location, internal)
        if internal:
            return

        new_location = self.location()
        log.debug("rescaling %d points from %s to %s",
                  len(self.__points), old_location, new_location)
        self.__points[:] = location_transform(self.__points,
                                              (old_location.pt(0), old_location.pt(2)),
                                              (new_location.pt(0), new_location.pt(2)),
                                              RESCALE_EPSILON)
        self._fire(ShapeEvent.after(self))

    # ------------ Polygon attribute methods ------------------
    def closed(self):
        """Is the polygon closed?"""
        return self.__closed

    def closed_set(self, closed):
        """Open or close the polygon."""
        if closed != self.__closed:
            self.__closed = closed
            self._fire(ShapeEvent.after(self))
        return ChangeResult.ok()

    def contains(self, pt):
        """
        Check whether pt lies within the polygon.

        Crossing number test on the outline, always including the closing
        edge. A point on an edge at the minimum x or minimum y side of the
        polygon counts as inside, on the maximum x or maximum y side as
        outside.
        """
        if not super().contains(pt):
            return False

        if len(self.__points) < 2:
            return False

        return is_point_in_polygon(self.__points, pt)

    def copy(self):
        """Create a standalone copy of the polygon."""
        new = super().copy()
        new.__points = list(self.__points)
        new.__closed = self.__closed
        return new
