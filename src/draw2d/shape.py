"""
Shape is the base class of all objects that can be placed in a drawing.
It holds the location, color and tags, and implements the before/after
event protocol used by every mutation.
"""

import copy
import logging
from .location import Location
from .bus import Bus, ChangeResult
from .events import LocationChangeEvent, ColorChangeEvent, TagChangeEvent
from .utils import is_click_in_bbox
log = logging.getLogger(__name__)

COLORS = {
        "black": (0, 0, 0),
        "white": (1, 1, 1),
        "red": (1, 0, 0),
        "green": (0, .7, 0),
        "blue": (0, 0, .5),
        "yellow": (1, 1, 0),
        "cyan": (0, 1, 1),
        "magenta": (1, 0, 1),
        "purple": (0.5, 0, 0.5),
        "grey": (0.5, 0.5, 0.5)
}

DEFAULT_COLOR = COLORS["red"]


class Shape:
    """
    Base class for shapes.

    A shape lives in a continuous 2D coordinate system. Its position and
    size are given by a Location (see location()). Every mutation goes
    through two phases: a before-change event is sent to all listeners,
    any of which may veto the change by raising ChangeRejected. Only if
    nobody objects, the change is made and an after-change event is sent.
    Mutators return a ChangeResult which is falsy if the change was
    rejected.

    Shapes are compared by identity. Two shapes with the same geometry are
    still two different objects.

    Attributes:
        type (str): The kind of shape, e.g. "rectangle" or "polygon".
    """
    type = None

    def __init__(self, location = None, color = None):
        if self.type is None:
            raise TypeError("Shape cannot be instantiated directly")

        self.__location = location.copy() if location else Location()
        self.__color    = color if color is not None else DEFAULT_COLOR
        self.__tags     = { }
        self.__bus      = Bus()

    def __repr__(self):
        return f"<{self.__class__.__name__} at {self.__location.coords()}>"

    # ------------ Shape listener methods ------------------
    def add_shape_listener(self, listener, priority = 0):
        """Register a listener for all events of this shape."""
        self.__bus.on("*", listener, priority = priority)

    def remove_shape_listener(self, listener):
        """Remove a listener registered with add_shape_listener."""
        self.__bus.off("*", listener)

    def on(self, kind, listener, priority = 0):
        """Register a listener for events of one kind only."""
        self.__bus.on(kind, listener, priority = priority)

    def off(self, kind, listener):
        """Remove a listener registered with on()."""
        self.__bus.off(kind, listener)

    def shape_listeners(self):
        """Return the listeners registered for all events."""
        return self.__bus.listeners("*")

    def _fire(self, event):
        """Send an event to the listeners, returning a ChangeResult."""
        return self.__bus.emit(event)

    # ------------ Shape location methods ------------------
    def location(self):
        """Return a copy of the location of the shape."""
        return self.__location.copy()

    def location_set(self, location):
        """
        Relocate the shape by specifying its new location.

        This changes the position, the dimensions or both. All the other
        location changing methods end up here.
        """
        return self._location_change(location, internal = False)

    def _location_change(self, location, internal):
        """
        Carry out a location change.

        internal is True when the shape itself adjusts its location to
        its content (e.g. a polygon growing its bounding box for a new
        point); it is passed on to _on_location_changed_after_events.
        """
        old_location = self.__location.copy()
        new_location = location.copy()

        res = self._fire(LocationChangeEvent.before(self, old_location, new_location))
        if not res:
            return res

        self.__location = new_location
        self._on_location_changed(old_location)
        self._fire(LocationChangeEvent.after(self, old_location, new_location))
        self._on_location_changed_after_events(old_location, internal)
        return res

    def location_set_pts(self, pt0, pt2):
        """Set the location by its corners 0 and 2."""
        return self.location_set(Location.from_points(pt0, pt2))

    def location_pt(self, n):
        """Return corner n of the location."""
        return self.__location.pt(n)

    def location_pt_set(self, n, pt):
        """Move corner n of the location, leaving the opposite corner alone."""
        location = self.location()
        location.pt_set(n, pt)
        return self.location_set(location)

    def move(self, dx, dy):
        """Move the shape by dx, dy."""
        location = self.location()
        location.move(dx, dy)
        return self.location_set(location)

    def move_center_to(self, x, y):
        """Move the shape so that its center is at x, y."""
        location = self.location()
        location.move_center_to(x, y)
        return self.location_set(location)

    def bbox(self):
        """Return the bounding box of the shape as (x, y, width, height)."""
        return self.__location.bbox()

    def _on_location_changed(self, old_location):
        """
        Called right after the location has changed, before the
        after-change event is sent. Does nothing here.
        """

    def _on_location_changed_after_events(self, old_location, internal):
        """
        Called after the location has changed and the after-change event
        has been sent to all listeners. Does nothing here.
        """

    # ------------ Shape attribute methods ------------------
    def color(self):
        """Return the color of the shape."""
        return self.__color

    def color_set(self, color):
        """Set the color of the shape."""
        old_color = self.__color

        res = self._fire(ColorChangeEvent.before(self, old_color, color))
        if res:
            self.__color = color
            self._fire(ColorChangeEvent.after(self, old_color, color))
        return res

    def tag(self, name, default = None):
        """Return the value of a tag."""
        return self.__tags.get(name, default)

    def tag_names(self):
        """Return the names of all tags."""
        return list(self.__tags.keys())

    def tags(self):
        """Return a copy of all tags."""
        return dict(self.__tags)

    def tag_set(self, name, value):
        """Set a tag."""
        old_value = self.__tags.get(name)

        res = self._fire(TagChangeEvent.before(self, name, old_value, value))
        if res:
            self.__tags[name] = value
            self._fire(TagChangeEvent.after(self, name, old_value, value))
        return res

    def tag_delete(self, name):
        """Delete a tag."""
        old_value = self.__tags.get(name)

        res = self._fire(TagChangeEvent.before(self, name, old_value, None))
        if res:
            self.__tags.pop(name, None)
            self._fire(TagChangeEvent.after(self, name, old_value, None))
        return res

    def tags_set(self, tags):
        """
        Replace all tags.

        The old tags are deleted and the new ones set one by one, with
        the usual events. Stops at the first rejected change.
        """
        for name in self.tag_names():
            res = self.tag_delete(name)
            if not res:
                return res
        for name, value in tags.items():
            res = self.tag_set(name, value)
            if not res:
                return res
        return ChangeResult.ok()

    # ------------ Shape query methods ------------------
    def contains(self, pt):
        """Check whether pt lies within the shape (here: its bounding box)."""
        return is_click_in_bbox(pt[0], pt[1], self.bbox())

    def copy(self):
        """
        Create a standalone copy of the shape.

        The copy has the same location, color and (deep copied) tags, but
        no listeners and does not belong to any drawing.
        """
        new = self.__class__()
        new.__location = self.__location.copy()
        new.__color    = self.__color
        new.__tags     = copy.deepcopy(self.__tags)
        new._on_location_changed(new.location())
        return new
