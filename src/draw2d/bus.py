"""An event bus for dispatching change events, with support for vetoes."""
import logging
log = logging.getLogger(__name__)


class ChangeRejected(Exception):
    """
    Raised by a listener to reject a pending change.

    Only meaningful for before-change events. The mutator that fired the
    event leaves its state untouched and reports the rejection in the
    ChangeResult it returns.
    """

    def __init__(self, reason = None):
        super().__init__(reason)
        self.reason = reason


class ChangeResult:
    """
    Outcome of a mutation.

    Truthy if the change was carried out (or there was nothing to change),
    falsy if a listener rejected it. In the latter case, the
    ChangeRejected exception raised by the listener is in `rejection`.
    """

    def __init__(self, rejection = None):
        self.rejection = rejection

    @classmethod
    def ok(cls):
        """The change went through."""
        return cls()

    @classmethod
    def rejected(cls, rejection):
        """The change was rejected by a listener."""
        return cls(rejection)

    def accepted(self):
        """Was the change accepted?"""
        return self.rejection is None

    @property
    def reason(self):
        """Reason given by the rejecting listener, if any."""
        if self.rejection is None:
            return None
        return self.rejection.reason

    def __bool__(self):
        return self.accepted()

    def __repr__(self):
        if self.accepted():
            return "ChangeResult(accepted)"
        return f"ChangeResult(rejected: {self.reason!r})"


class Bus:
    """
    A simple event bus for dispatching events between objects.

    Listeners are registered for an event kind, or for "*" to receive all
    events. They are called with the event object as the only argument.
    """

    def __init__(self):
        self.__listeners = {}

    def on(self, event, listener, priority = 0):
        """Add a listener for an event kind."""
        if listener is None:
            raise ValueError("Listener cannot be None")

        if not callable(listener):
            raise ValueError("Listener must be callable")

        if event is None:
            raise ValueError("Event cannot be None")

        if event not in self.__listeners:
            self.__listeners[event] = []

        self.__listeners[event].append((listener, priority))
        # sort is stable, so equal priorities keep the registration order
        self.__listeners[event].sort(key = lambda x: -x[1])

    def off(self, event, listener):
        """Remove a listener for an event kind. Returns True if it was registered."""
        registered = self.__listeners.get(event, [])
        remaining  = [ x for x in registered if x[0] != listener ]
        if len(remaining) == len(registered):
            return False
        self.__listeners[event] = remaining
        return True

    def listeners(self, event = None):
        """Return the listeners registered for an event kind, or all of them."""
        if event is not None:
            return [ x[0] for x in self.__listeners.get(event, []) ]
        return [ x[0] for lst in self.__listeners.values() for x in lst ]

    def emit(self, event):
        """
        Dispatch an event to all listeners.

        The promiscuous ("*") listeners are called first, then the ones
        registered for event.kind. We iterate over a snapshot, so listeners
        added or removed during the dispatch only matter for the next one.

        If a listener raises ChangeRejected for a before-change event,
        dispatching stops and a rejected ChangeResult is returned. For
        any other event a rejection is logged and ignored.
        """

        log.debug("emitting event %s", event)

        listeners = self.__listeners.get('*', []) + self.__listeners.get(event.kind, [])

        for listener, _ in listeners:
            try:
                listener(event)
            except ChangeRejected as rejection:
                if event.before_change:
                    log.debug("event %s rejected by %s: %s", event, listener, rejection.reason)
                    return ChangeResult.rejected(rejection)
                log.warning("ignoring rejection of after-change event %s by %s",
                            event, listener)

        return ChangeResult.ok()
