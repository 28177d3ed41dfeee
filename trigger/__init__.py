"""
trigger - in-process publish/subscribe for any host component.

Usage:
    from trigger import Client, Subscriber

    class GreetInFrench(Subscriber, receives=("name",)):
        def perform(self):
            return f"Bonjour, {self.name}"

    client = Client()
    client.subscribe("greet:french", GreetInFrench)
    client.trigger("greet", {"name": "Chris"})
"""
from .errors import TriggerError, InvalidSubscriber, SubscriberNotImplemented
from .events import (
    EventName,
    Event,
    Subscriber,
    InlineSubscriber,
    create_inline_subscriber,
    Registry,
    RegistryEntry,
    Client,
    EnableScope,
)
from .decorators import subscribes
from .config import ConfigManager, AppConfig, TriggerSettings, LoggingSettings
from .logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Events
    "EventName",
    "Event",
    "Subscriber",
    "InlineSubscriber",
    "create_inline_subscriber",
    "Registry",
    "RegistryEntry",
    "Client",
    "EnableScope",
    "subscribes",

    # Errors
    "TriggerError",
    "InvalidSubscriber",
    "SubscriberNotImplemented",

    # Configuration
    "ConfigManager",
    "AppConfig",
    "TriggerSettings",
    "LoggingSettings",
    "setup_logging",
]
