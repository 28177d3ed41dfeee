"""
Event System - synchronous, namespaced pub/sub.

Provides:
- EventName: "name" / "name:namespace" grammar
- Event: name plus read-only data payload
- Subscriber / InlineSubscriber: the two handler styles
- Registry: ordered subscriber storage with namespace matching
- Client: subscribe / trigger / publish plus the enable gate

Usage:
    from trigger.events import Client

    client = Client()
    client.subscribe("greet", lambda event: print(event["name"]))
    client.publish("greet", {"name": "Chris"})
"""
from .name import EventName
from .event import Event
from .subscriber import Subscriber, InlineSubscriber, create_inline_subscriber
from .registry import Registry, RegistryEntry
from .client import Client, EnableScope


__all__ = [
    "EventName",
    "Event",
    "Subscriber",
    "InlineSubscriber",
    "create_inline_subscriber",
    "Registry",
    "RegistryEntry",
    "Client",
    "EnableScope",
]
