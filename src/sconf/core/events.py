"""Change records and the synchronous notification channel."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List

from pyee import EventEmitter

CHANGE_EVENT = "change"

Listener = Callable[..., Any]


def change_event(key: str) -> str:
    """Name of the per-key event fired for ``key``."""
    return f"{CHANGE_EVENT}:{key}"


class Alteration:
    """One property's new value. The key is fixed once constructed."""

    __slots__ = ("_key", "value")

    def __init__(self, key: str, value: Any):
        self._key = key
        self.value = value

    @property
    def key(self) -> str:
        return self._key

    def matches(self, key: str) -> bool:
        return self._key == key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alteration):
            return NotImplemented
        return self._key == other._key and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Alteration(key={self._key!r}, value={self.value!r})"


class ChangeChannel:
    """
    Publish alterations to listeners.

    Delivery is synchronous: every listener has run by the time ``publish``
    returns. Listener exceptions are not caught, so a failing listener stops
    the rest of the batch and reaches the publisher's caller.
    """

    def __init__(self, exposed_events: bool = False):
        self.exposed_events = exposed_events
        self._emitter = EventEmitter()

    def on(self, event: str, listener: Listener) -> Listener:
        self._emitter.on(event, listener)
        return listener

    def once(self, event: str, listener: Listener) -> Listener:
        self._emitter.once(event, listener)
        return listener

    def ignore(self, event: str) -> None:
        """Remove every listener registered for ``event``."""
        self._emitter.remove_all_listeners(event)

    def listeners(self, event: str) -> List[Listener]:
        return self._emitter.listeners(event)

    def publish(self, alterations: Iterable[Alteration]) -> None:
        """Fire the batch event, then one per-key event per alteration if exposed."""
        batch = list(alterations)
        self._emitter.emit(CHANGE_EVENT, batch)
        if not self.exposed_events:
            return
        for alteration in batch:
            self._emitter.emit(change_event(alteration.key), alteration.value)
