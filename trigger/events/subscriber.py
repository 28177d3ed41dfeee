"""
Subscriber types.

Anything with a callable ``receive(event)`` can be subscribed. Two ready-made
forms exist:

- InlineSubscriber: wraps a plain function taking the event.
- Subscriber: base class for class-based handlers. ``receive`` builds an
  instance bound to the event and returns the result of ``perform()``.

Usage:
    class GreetSubscriber(Subscriber, receives=("name",)):
        def perform(self):
            return f"Hello, {self.name}"

    GreetSubscriber.receive(Event("greet", {"name": "Chris"}))  # "Hello, Chris"
"""
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Tuple

from ..errors import SubscriberNotImplemented
from .event import Event


def _data_accessor(key: str) -> property:
    def getter(self):
        return self.event[key]

    getter.__name__ = key
    getter.__doc__ = f"Shortcut for ``self.event[{key!r}]``."
    return property(getter)


class Subscriber:
    """Base class for class-based event handlers."""

    received_keys: Tuple[str, ...] = ()

    def __init_subclass__(cls, receives: Iterable[str] = (), **kwargs):
        super().__init_subclass__(**kwargs)
        if isinstance(receives, str):
            receives = (receives,)
        keys = tuple(receives)
        reserved = [key for key in keys if key in _RESERVED_KEYS]
        if reserved:
            raise TypeError(f"{cls.__name__} cannot receive reserved names: {', '.join(reserved)}")
        for key in keys:
            setattr(cls, key, _data_accessor(key))
        cls.received_keys = cls.received_keys + tuple(k for k in keys if k not in cls.received_keys)

    def __init__(self, event_or_name: Any, data: Optional[Mapping] = None):
        self.event = Event.wrap(event_or_name, data)

    @classmethod
    def receive(cls, event_or_name: Any, data: Optional[Mapping] = None) -> Any:
        """Handle an event: instantiate with it and return ``perform()``."""
        event = Event.wrap(event_or_name, data)
        return cls(event).perform()

    def perform(self) -> Any:
        raise SubscriberNotImplemented(f"{type(self).__name__}.perform is not implemented")


_RESERVED_KEYS = frozenset(dir(Subscriber)) | {"event"}


class InlineSubscriber:
    """Adapts a one-argument callable to the subscriber interface."""

    __slots__ = ("callback",)

    def __init__(self, callback: Callable[[Event], Any]):
        self.callback = callback

    def receive(self, event: Event) -> Any:
        return self.callback(event)

    def __repr__(self):
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"InlineSubscriber({name})"


def create_inline_subscriber(callback: Callable[[Event], Any]) -> InlineSubscriber:
    return InlineSubscriber(callback)


def is_subscriber(candidate: Any) -> bool:
    """True when ``candidate`` answers ``receive(event)``."""
    return callable(getattr(candidate, "receive", None))
