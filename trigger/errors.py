"""
Trigger exceptions.

Only misuse of the subscription API raises from inside the library.
Errors raised by handlers reach the caller of ``trigger`` untouched.
"""


class TriggerError(Exception):
    """Base class for all errors raised by trigger itself."""
    pass


class InvalidSubscriber(TriggerError, TypeError):
    """Raised when subscribe() receives nothing that can handle an event."""
    pass


class SubscriberNotImplemented(TriggerError, NotImplementedError):
    """Raised when a class-based subscriber does not override perform()."""
    pass
