"""
Decorator Utilities for trigger.

Usage:
    class Mailer:
        @subscribes("user:created", "user:invited")
        def send_welcome(self, event):
            ...

    client.subscribe_object(Mailer())
"""
from typing import Any


def subscribes(*event_names: Any):
    """
    Mark a method as a handler for the given event names.

    Marked methods are picked up by ``Client.subscribe_object``.
    """
    def decorator(func):
        func._subscribed_events = list(getattr(func, "_subscribed_events", [])) + list(event_names)
        return func
    return decorator
