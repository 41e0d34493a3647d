import threading

DEFAULT_BASE_STRING = "Base string msg"


class SharedTextState:
    """
    Base text used to build every chatter message.
    Written by the modify_string service, read once per tick by the broadcast loop.
    """

    def __init__(self, value=DEFAULT_BASE_STRING):
        self._value = value
        # rospy delivers service calls on their own threads
        self._lock = threading.Lock()

    def get(self):
        with self._lock:
            return self._value

    def set(self, value):
        with self._lock:
            self._value = value
