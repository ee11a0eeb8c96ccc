"""
Location is the coordinate primitive of all shapes: a rectangle given by
two diagonal corner points, in no particular order.
"""

from .utils import is_click_in_bbox


class Location:
    """
    A rectangle defined by the two diagonal corners (x1, y1) and (x2, y2).

    The corners are numbered clockwise starting from (x1, y1):

        0 = (x1, y1)    1 = (x2, y1)
        3 = (x1, y2)    2 = (x2, y2)

    Setting a corner changes exactly the two scalars it is made of, so the
    diagonally opposite corner stays where it is. Nothing is normalized on
    storage; x1 may be larger than x2. The normalized bounding box is
    computed by bbox().
    """

    def __init__(self, x1 = 0, y1 = 0, x2 = 0, y2 = 0):
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2

    @classmethod
    def from_points(cls, pt0, pt2):
        """Create a location from corner 0 and corner 2."""
        return cls(pt0[0], pt0[1], pt2[0], pt2[1])

    def copy(self):
        """Return a copy of the location."""
        return Location(self.x1, self.y1, self.x2, self.y2)

    def coords(self):
        """Return the four scalars as (x1, y1, x2, y2)."""
        return (self.x1, self.y1, self.x2, self.y2)

    def pt(self, n):
        """Return corner n (0 to 3) as a tuple."""
        if n == 0:
            return (self.x1, self.y1)
        if n == 1:
            return (self.x2, self.y1)
        if n == 2:
            return (self.x2, self.y2)
        if n == 3:
            return (self.x1, self.y2)
        raise IndexError(f"no such corner: {n}")

    def pt_set(self, n, pt):
        """Set corner n (0 to 3) to pt."""
        x, y = pt
        if n == 0:
            self.x1, self.y1 = x, y
        elif n == 1:
            self.x2, self.y1 = x, y
        elif n == 2:
            self.x2, self.y2 = x, y
        elif n == 3:
            self.x1, self.y2 = x, y
        else:
            raise IndexError(f"no such corner: {n}")

    def bbox(self):
        """Return the normalized bounding box as (x, y, width, height)."""
        return (min(self.x1, self.x2),
                min(self.y1, self.y2),
                abs(self.x2 - self.x1),
                abs(self.y2 - self.y1))

    def center(self):
        """Return the center of the rectangle."""
        return ((self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2)

    def move(self, dx, dy):
        """Move the location by dx, dy."""
        self.x1 += dx
        self.x2 += dx
        self.y1 += dy
        self.y2 += dy

    def move_center_to(self, x, y):
        """Move the location so that its center is at x, y."""
        cx, cy = self.center()
        self.move(x - cx, y - cy)

    def contains(self, x, y):
        """Check whether x, y lies within the bounding box."""
        return is_click_in_bbox(x, y, self.bbox())

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return self.coords() == other.coords()

    def __hash__(self):
        return hash(self.coords())

    def __repr__(self):
        return f"Location({self.x1}, {self.y1}, {self.x2}, {self.y2})"
