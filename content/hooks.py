"""
Named filter hooks for the content listing.

A filter hook passes a value through each subscriber in turn; every subscriber
receives the value returned by the previous one plus any extra arguments, and
must return the (possibly modified) value. Subscriptions can carry a
``dispatch_uid`` in the same way Django signal receivers do, so subscribing the
same uid twice is a no-op.
"""
import logging
import threading

logger = logging.getLogger(__name__)


class FilterHook:

    def __init__(self, name):
        self.name = name
        self._subscribers = []
        self._lock = threading.Lock()

    def __repr__(self):
        return f"<FilterHook {self.name}: {len(self._subscribers)} subscribers>"

    @staticmethod
    def _make_id(callback, dispatch_uid):
        if dispatch_uid is not None:
            return dispatch_uid
        # Bound methods are recreated on each attribute access, key them on
        # the underlying instance and function instead.
        if hasattr(callback, '__func__'):
            return (id(callback.__self__), id(callback.__func__))
        return id(callback)

    def subscribe(self, callback, dispatch_uid=None):
        """
        Add ``callback`` to the end of the subscriber list.

        Returns False when a subscriber with the same id is already present.
        """
        if not callable(callback):
            raise TypeError(f"Subscribers to {self.name} must be callable.")

        lookup_key = self._make_id(callback, dispatch_uid)
        with self._lock:
            if any(key == lookup_key for key, _ in self._subscribers):
                return False
            self._subscribers.append((lookup_key, callback))

        logger.debug(f"Subscribed {callback!r} to {self.name}")
        return True

    def unsubscribe(self, callback=None, dispatch_uid=None):
        lookup_key = self._make_id(callback, dispatch_uid)
        with self._lock:
            for index, (key, _) in enumerate(self._subscribers):
                if key == lookup_key:
                    del self._subscribers[index]
                    return True
        return False

    def has_subscribers(self):
        return bool(self._subscribers)

    def subscriber_count(self):
        return len(self._subscribers)

    def apply(self, value, *args):
        """
        Run ``value`` through every subscriber and return the final result.
        """
        with self._lock:
            subscribers = [callback for _, callback in self._subscribers]

        for callback in subscribers:
            value = callback(value, *args)
        return value


# Collects the extra labels shown next to an item in the admin listing.
# Subscribers are called as ``callback(post_states, post)`` and return a mapping.
display_post_states = FilterHook('display_post_states')
