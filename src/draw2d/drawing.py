"""
A Drawing is an ordered stack of shapes. It fires events when shapes are
added, moved or removed and forwards all events of its shapes, so that a
single listener sees everything that happens to the drawing.
"""

import logging
from .bus import Bus, ChangeResult
from .events import ShapeAddOrMoveEvent, ShapeRemoveEvent, DrawingTagChangeEvent
log = logging.getLogger(__name__)


class Drawing:
    """
    Container for shapes.

    The shapes are kept in z-order: objects() lists them from the bottom
    to the top, later shapes are drawn above earlier ones. A shape can be
    in the drawing only once; shapes are compared by identity.

    Listeners registered with add_drawing_listener receive the drawing's
    own events (ShapeAddOrMoveEvent, ShapeRemoveEvent,
    DrawingTagChangeEvent) as well as every event of every member shape.
    Rejecting a forwarded before-change event rejects the change of the
    shape itself.
    """

    def __init__(self, shapes = None):
        self.__objects = []
        self.__tags    = { }
        self.__bus     = Bus()

        for shape in shapes or []:
            self.shape_add(shape)

    def __repr__(self):
        return f"<Drawing with {len(self.__objects)} shapes>"

    # ------------ Drawing listener methods ------------------
    def add_drawing_listener(self, listener, priority = 0):
        """Register a listener for all events of the drawing and its shapes."""
        self.__bus.on("*", listener, priority = priority)

    def remove_drawing_listener(self, listener):
        """Remove a listener registered with add_drawing_listener."""
        self.__bus.off("*", listener)

    def on(self, kind, listener, priority = 0):
        """Register a listener for events of one kind only."""
        self.__bus.on(kind, listener, priority = priority)

    def off(self, kind, listener):
        """Remove a listener registered with on()."""
        self.__bus.off(kind, listener)

    def _fire(self, event):
        """Send an event to the listeners, returning a ChangeResult."""
        return self.__bus.emit(event)

    def __forward(self, event):
        """
        Forward an event of a member shape to the drawing listeners.

        The shape is still dispatching the event, so raising the rejection
        here makes the shape's own change fail.
        """
        res = self._fire(event)
        if not res:
            raise res.rejection

    # ------------ Drawing object methods ------------------
    def shape_add(self, shape, index = None):
        """
        Add shape at position index of the z-order (default: on top).

        If the shape is already in the drawing, it is moved to index
        instead. Moving a shape to where it already is does nothing.
        """
        old_index = self.index_of(shape)
        n = len(self.__objects)

        if old_index == -1:
            if index is None:
                index = n
            if not 0 <= index <= n:
                raise IndexError(f"index {index} out of range for {n} shapes")
            return self.__shape_insert(shape, index)

        if index is None:
            index = n - 1
        if not 0 <= index < n:
            raise IndexError(f"index {index} out of range for {n} shapes")
        if index == old_index:
            return ChangeResult.ok()
        return self.__shape_move(shape, old_index, index)

    def __shape_insert(self, shape, index):
        res = self._fire(ShapeAddOrMoveEvent.before(self, -1, index, shape))
        if res:
            log.debug("adding %s at %d", shape, index)
            self.__objects.insert(index, shape)
            shape.add_shape_listener(self.__forward)
            self._fire(ShapeAddOrMoveEvent.after(self, -1, index, shape))
        return res

    def __shape_move(self, shape, old_index, index):
        res = self._fire(ShapeAddOrMoveEvent.before(self, old_index, index, shape))
        if res:
            log.debug("moving %s from %d to %d", shape, old_index, index)
            self.__objects.pop(old_index)
            self.__objects.insert(index, shape)
            self._fire(ShapeAddOrMoveEvent.after(self, old_index, index, shape))
        return res

    def shape_remove(self, shape):
        """Remove shape from the drawing. Does nothing for non-members."""
        index = self.index_of(shape)
        if index == -1:
            return ChangeResult.ok()
        return self.shape_remove_at(index)

    def shape_remove_at(self, index):
        """Remove the shape at position index of the z-order."""
        shape = self.get(index)

        res = self._fire(ShapeRemoveEvent.before(self, index, shape))
        if res:
            log.debug("removing %s from %d", shape, index)
            self.__objects.pop(index)
            shape.remove_shape_listener(self.__forward)
            self._fire(ShapeRemoveEvent.after(self, index, shape))
        return res

    def shapes_set(self, shapes):
        """
        Replace all shapes, removing the old ones and adding the new ones
        with the usual events. Stops at the first rejected change.
        """
        while self.__objects:
            res = self.shape_remove_at(0)
            if not res:
                return res
        for shape in shapes:
            res = self.shape_add(shape)
            if not res:
                return res
        return ChangeResult.ok()

    def index_of(self, shape):
        """Return the position of shape in the z-order, or -1."""
        for i, obj in enumerate(self.__objects):
            if obj is shape:
                return i
        return -1

    def contains_shape(self, shape):
        """Is shape part of the drawing?"""
        return self.index_of(shape) != -1

    def get(self, index):
        """Return the shape at position index of the z-order."""
        if not 0 <= index < len(self.__objects):
            raise IndexError(f"index {index} out of range for {len(self.__objects)} shapes")
        return self.__objects[index]

    def object_count(self):
        """Return the number of shapes."""
        return len(self.__objects)

    def objects(self):
        """Return a list of all shapes, from the bottom to the top."""
        return self.__objects[:]

    def __len__(self):
        return len(self.__objects)

    def __iter__(self):
        return iter(self.__objects[:])

    def __contains__(self, shape):
        return self.contains_shape(shape)

    # ------------ Drawing query methods ------------------
    def shapes_at(self, pt):
        """Return all shapes containing pt, topmost first."""
        return [ obj for obj in self.__objects[::-1] if obj.contains(pt) ]

    def topmost_shape_at(self, pt):
        """Return the topmost shape containing pt, or None."""
        for obj in self.__objects[::-1]:
            if obj.contains(pt):
                return obj
        return None

    # ------------ Drawing tag methods ------------------
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

        res = self._fire(DrawingTagChangeEvent.before(self, name, old_value, value))
        if res:
            self.__tags[name] = value
            self._fire(DrawingTagChangeEvent.after(self, name, old_value, value))
        return res

    def tag_delete(self, name):
        """Delete a tag."""
        old_value = self.__tags.get(name)

        res = self._fire(DrawingTagChangeEvent.before(self, name, old_value, None))
        if res:
            self.__tags.pop(name, None)
            self._fire(DrawingTagChangeEvent.after(self, name, old_value, None))
        return res

    def tags_set(self, tags):
        """Replace all tags. Stops at the first rejected change."""
        for name in self.tag_names():
            res = self.tag_delete(name)
            if not res:
                return res
        for name, value in tags.items():
            res = self.tag_set(name, value)
            if not res:
                return res
        return ChangeResult.ok()
