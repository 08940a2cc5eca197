"""Observable value holder with replay-on-subscribe semantics."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Handler = Callable[[T], None]


class Subscription:
    """Handle returned by ``ObservableValue.subscribe``.

    Cancelling detaches the handler from its source. Cancelling twice is a no-op.
    """

    def __init__(self, source: ObservableValue, handler: Callable) -> None:
        self._source = source
        self._handler = handler
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._source._detach(self._handler)


class ObservableValue(Generic[T]):
    """Holds a current value and notifies subscribers on every write.

    Dispatch is synchronous and follows subscription order. Writing the same
    value twice notifies twice; subscribers rely on write events, not changes.
    Exceptions raised by a handler propagate to whoever called ``set``.
    """

    def __init__(self, initial: T, name: str = "") -> None:
        self._value = initial
        self._handlers: list[Callable[[T], None]] = []
        self.name = name

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        # copy so a handler may subscribe/cancel while we dispatch
        for handler in list(self._handlers):
            handler(value)

    @property
    def value(self) -> T:
        """Current value (alias for ``get``/``set``)."""
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def subscribe(self, handler: Callable[[T], None]) -> Subscription:
        """Call ``handler`` with the current value, then register it.

        If the replay raises, the handler is not registered.
        """
        handler(self._value)
        self._handlers.append(handler)
        return Subscription(self, handler)

    def subscriber_count(self) -> int:
        return len(self._handlers)

    def _detach(self, handler: Callable[[T], None]) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return f"<ObservableValue{label}={self._value!r}>"
