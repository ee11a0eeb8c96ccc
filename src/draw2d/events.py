"""
Event objects fired by shapes and drawings.

Every change is announced twice: a before-change event, which listeners
may reject by raising ChangeRejected, and an after-change event once the
change has been made. Generic notifications (ShapeEvent) only exist as
after-change events.
"""


class Event:
    """Base class for all events."""
    kind = "event"

    def __init__(self, source, before_change = False):
        self.source        = source
        self.before_change = before_change

    @property
    def after_change(self):
        """Is this a post-change event?"""
        return not self.before_change

    @classmethod
    def before(cls, source, *args):
        """Create the before-change event."""
        return cls(source, True, *args)

    @classmethod
    def after(cls, source, *args):
        """Create the after-change event."""
        return cls(source, False, *args)

    def __repr__(self):
        phase = "before" if self.before_change else "after"
        return f"<{self.__class__.__name__} {phase} source={self.source!r}>"

## ---------------------------------------------------------------------
## shape events

class ShapeEvent(Event):
    """Something about a shape has changed."""
    kind = "shape_changed"

    def __init__(self, source, before_change = False):
        super().__init__(source, before_change)

    @property
    def shape(self):
        """The shape this event is about."""
        return self.source


class LocationChangeEvent(ShapeEvent):
    """The location of a shape changes."""
    kind = "location_change"

    def __init__(self, source, before_change, last_location, new_location):
        super().__init__(source, before_change)
        self.last_location = last_location.copy()
        self.new_location  = new_location.copy()


class ColorChangeEvent(ShapeEvent):
    """The color of a shape changes."""
    kind = "color_change"

    def __init__(self, source, before_change, last_color, new_color):
        super().__init__(source, before_change)
        self.last_color = last_color
        self.new_color  = new_color


class TagChangeEvent(ShapeEvent):
    """
    A tag of a shape is added, changed or deleted.

    new_value is None for deletions.
    """
    kind = "tag_change"

    def __init__(self, source, before_change, tag_name, last_value, new_value):
        super().__init__(source, before_change)
        self.tag_name   = tag_name
        self.last_value = last_value
        self.new_value  = new_value


class PointAddEvent(ShapeEvent):
    """A point is appended to a polygon."""
    kind = "point_add"

    def __init__(self, source, before_change, point_index, new_point):
        super().__init__(source, before_change)
        self.point_index = point_index
        self.new_point   = (new_point[0], new_point[1])

## ---------------------------------------------------------------------
## drawing events

class DrawingEvent(Event):
    """Base class for changes of the drawing itself."""
    kind = "drawing_changed"

    @property
    def drawing(self):
        """The drawing this event is about."""
        return self.source


class ShapeAddOrMoveEvent(DrawingEvent):
    """
    A shape is added to a drawing or moved within its z-order.

    For adds, old_index is -1.
    """

    def __init__(self, source, before_change, old_index, new_index, shape):
        super().__init__(source, before_change)
        self.old_index = old_index
        self.new_index = new_index
        self.shape     = shape

    @property
    def kind(self):
        """Either "shape_move" or "shape_add"."""
        return "shape_move" if self.is_moved() else "shape_add"

    def is_moved(self):
        """Was the shape already in the drawing?"""
        return self.old_index != -1


class ShapeRemoveEvent(DrawingEvent):
    """
    A shape is removed from a drawing.

    The shape is carried along because after the removal it can no longer
    be looked up by its index.
    """
    kind = "shape_remove"

    def __init__(self, source, before_change, index, shape):
        super().__init__(source, before_change)
        self.index = index
        self.shape = shape


class DrawingTagChangeEvent(DrawingEvent):
    """A tag of the drawing is added, changed or deleted."""
    kind = "drawing_tag_change"

    def __init__(self, source, before_change, tag_name, last_value, new_value):
        super().__init__(source, before_change)
        self.tag_name   = tag_name
        self.last_value = last_value
        self.new_value  = new_value
