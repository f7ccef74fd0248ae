"""Observable integer used to publish the repetition count."""

from __future__ import annotations

from typing import Callable, List

CountListener = Callable[[int], None]


class CountNotifier:
    """Holds a value and calls listeners synchronously whenever it changes.

    Assigning the current value again is a no-op. Listeners run in registration
    order on the thread that performed the assignment; an exception raised by a
    listener propagates to that caller.
    """

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._listeners: List[CountListener] = []
        self._disposed = False

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, new_value: int) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        for listener in list(self._listeners):
            listener(new_value)

    def add_listener(self, listener: CountListener) -> None:
        if self._disposed:
            raise RuntimeError("CountNotifier was disposed")
        self._listeners.append(listener)

    def remove_listener(self, listener: CountListener) -> None:
        """Unregister ``listener``; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def dispose(self) -> None:
        self._listeners.clear()
        self._disposed = True
