"""Synchronous observable values with subscribe/unsubscribe."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Observable(Generic[T]):
    """Holds a value and pushes it to subscribers on every set().

    A new subscriber is called immediately with the current value.
    """

    def __init__(self, value: T):
        self._value = value
        self._subscribers: list[Subscriber] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        # copy so callbacks may unsubscribe during notification
        for callback in list(self._subscribers):
            callback(value)

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        # first delivery happens before registering, so a raising callback is not kept
        callback(self._value)
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def readonly(self) -> Readable[T]:
        return Readable(self)


class Readable(Generic[T]):
    """Read-only view of an Observable."""

    def __init__(self, source: Observable[T]):
        self._source = source

    def get(self) -> T:
        return self._source.get()

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        return self._source.subscribe(callback)
