"""
Client - the dispatcher a host embeds to broadcast events.

Each Client owns its own subscriber registry and enabled flag. Hosts either
hold a Client and delegate to it, or subclass it to override ``publish``.

Usage:
    client = Client()

    @client.on("greet")
    def hello(event):
        print(f"Hello, {event['name']}")

    client.subscribe("greet:spanish", lambda event: print(f"Hola, {event['name']}"))

    client.trigger("greet", {"name": "Chris"})          # both handlers
    client.trigger("greet:spanish", {"name": "Chris"})  # only the spanish one
"""
import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from loguru import logger

from ..errors import InvalidSubscriber
from .event import Event
from .name import EventName
from .registry import Registry
from .subscriber import InlineSubscriber, create_inline_subscriber, is_subscriber

if TYPE_CHECKING:
    from ..config import TriggerSettings


class EnableScope:
    """
    Returned by ``Client.enable()``.

    The client is already enabled when this is created; using it as a context
    manager restores the previous state on exit.
    """

    def __init__(self, client: "Client", previous: bool):
        self.client = client
        self.previous = previous

    def __enter__(self) -> "Client":
        return self.client

    def __exit__(self, exc_type, exc, tb):
        self.client._set_enabled(self.previous)
        return False


class Client:
    """Synchronous publish/subscribe dispatcher."""

    def __init__(self, enabled: bool = True):
        self._registry = Registry()
        self._enabled = bool(enabled)

    @classmethod
    def create(cls) -> "Client":
        """Factory for a fresh, empty client."""
        return cls()

    @classmethod
    def from_settings(cls, settings: "TriggerSettings") -> "Client":
        return cls(enabled=settings.enabled)

    @property
    def registry(self) -> Registry:
        return self._registry

    # --- Subscription ---

    def create_inline_subscriber(self, callback: Callable[[Event], Any]) -> InlineSubscriber:
        return create_inline_subscriber(callback)

    def subscribe(self, name: Any, handler: Any = None, namespace: Optional[str] = None) -> Any:
        """
        Subscribe a handler to an event name.

        Args:
            name: Event name, optionally namespaced ("greet:spanish")
            handler: Object or class answering ``receive(event)``, or a plain
                callable taking the event
            namespace: Optional tag, same as writing "name:namespace"

        Returns:
            The stored subscriber (the wrapper for plain callables)

        Raises:
            InvalidSubscriber: If handler cannot receive events
        """
        if is_subscriber(handler):
            subscriber = handler
        elif callable(handler):
            subscriber = self.create_inline_subscriber(handler)
        else:
            raise InvalidSubscriber(f"Subscriber for {name!r} must respond to receive() or be callable, got {handler!r}")

        event_name = EventName.build(name, namespace)
        self._registry.add(event_name.name, event_name.namespace, subscriber)
        logger.debug(f"Subscribed to {event_name.full_name}: {subscriber!r}")
        return subscriber

    def on(self, name: Any, namespace: Optional[str] = None):
        """
        Decorator form of ``subscribe`` for inline handlers.

        Usage:
            @client.on("greet")
            def hello(event):
                ...
        """
        def decorator(func):
            return self.subscribe(name, func, namespace)
        return decorator

    def subscribe_object(self, host: Any) -> int:
        """
        Subscribe every method of ``host`` marked with @subscribes.

        Returns:
            Number of subscriptions made
        """
        count = 0
        for attr, method in inspect.getmembers(host, predicate=inspect.ismethod):
            for name in getattr(method, "_subscribed_events", ()):
                self.subscribe(name, method)
                count += 1
                logger.debug(f"{type(host).__name__}.{attr} auto-subscribed to: {name}")
        return count

    def subscribers_for(self, name: Any, namespace: Optional[str] = None) -> List[Any]:
        """
        Subscribers that a trigger of ``name`` would reach, in dispatch order.

        subscribers_for("greet")           -> all greet subscribers, tag ignored
        subscribers_for("greet:spanish")   -> only greet subscribers tagged spanish
        subscribers_for("greet", "spanish") is the same as the line above.
        """
        event_name = EventName.build(name, namespace)
        return self._registry.handlers_for(event_name.name, event_name.namespace)

    # --- Dispatch ---

    def build_event(self, name: Any, data: Optional[Mapping] = None) -> Event:
        return Event.wrap(name, data)

    def trigger(self, name: Any, data: Optional[Mapping] = None) -> None:
        """
        Deliver an event to every matching subscriber, synchronously.

        Does nothing while the client is disabled. An exception from a
        subscriber propagates and skips the remaining subscribers.
        """
        if not self._enabled:
            logger.debug(f"Client disabled, dropping {name}")
            return

        event = self.build_event(name, data)
        subscribers = self.subscribers_for(event.full_name)
        logger.debug(f"Triggering {event.full_name}, subscribers={len(subscribers)}")

        for subscriber in subscribers:
            subscriber.receive(event)

    def publish(self, name: Any, data: Optional[Mapping] = None) -> None:
        """
        Public entry point for raising events; triggers immediately.

        Subclasses may override this (for example to queue events) and call
        ``super().publish(name, data)`` to deliver.
        """
        self.trigger(name, data)

    # --- Enable gate ---

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def disabled(self) -> bool:
        return not self._enabled

    def disable(self) -> "Client":
        self._set_enabled(False)
        return self

    def enable(self) -> EnableScope:
        """
        Enable dispatch.

        Usable on its own or as a scope that restores the prior state:
            with client.enable():
                client.trigger("greet")
        """
        previous = self._enabled
        self._set_enabled(True)
        return EnableScope(self, previous)

    def _set_enabled(self, value: bool) -> None:
        if value != self._enabled:
            logger.debug(f"Client {'enabled' if value else 'disabled'}")
        self._enabled = value
