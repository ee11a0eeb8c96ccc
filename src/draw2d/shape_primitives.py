"""
These classes are the simple shapes: rectangles and ellipses, both fully
described by their location.
"""

import logging
from .location import Location
from .shape import Shape
log = logging.getLogger(__name__)


class Rectangle(Shape):
    """Class for rectangles. The rectangle is its bounding box."""
    type = "rectangle"

    def __init__(self, x1 = 0, y1 = 0, x2 = 0, y2 = 0, color = None):
        super().__init__(Location(x1, y1, x2, y2), color)


class Ellipse(Shape):
    """
    Class for ellipses.

    The ellipse is inscribed in the bounding box of the location. It is
    cached as (cx, cy, rx, ry) and recalculated on every location change.
    """
    type = "ellipse"

    def __init__(self, x1 = 0, y1 = 0, x2 = 0, y2 = 0, color = None):
        super().__init__(Location(x1, y1, x2, y2), color)
        self.__ellipse = None
        self.__ellipse_update()

    def __ellipse_update(self):
        x, y, w, h = self.bbox()
        self.__ellipse = (x + w / 2, y + h / 2, w / 2, h / 2)

    def _on_location_changed(self, old_location):
        super()._on_location_changed(old_location)
        self.__ellipse_update()

    def ellipse(self):
        """Return the ellipse as (center x, center y, radius x, radius y)."""
        return self.__ellipse

    def contains(self, pt):
        """Check whether pt lies within the ellipse."""
        cx, cy, rx, ry = self.__ellipse
        if rx <= 0 or ry <= 0:
            return False
        dx, dy = (pt[0] - cx) / rx, (pt[1] - cy) / ry
        return dx * dx + dy * dy <= 1
