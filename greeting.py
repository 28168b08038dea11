from threading import Lock


class GreetingStore:
    """Holds the greeting template used to build every greeting message."""

    def __init__(self, default):
        self._default = default
        self._current = default
        self._lock = Lock()

    @property
    def default(self):
        return self._default

    def get_message(self):
        with self._lock:
            return self._current

    def set_message(self, value):
        """Replaces the template. Empty strings are stored as given."""
        with self._lock:
            self._current = value
