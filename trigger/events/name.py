"""
Event name grammar.

An event name is ``<name>`` or ``<name>:<namespace>``. Only the first colon
separates the two parts; a trailing colon means "no namespace".
"""
from enum import Enum
from typing import Any, Optional, Tuple

SEPARATOR = ":"


class EventName:
    """
    Parsed event name. Read-only once created.

    Usage:
        EventName("greet:spanish").namespace  # "spanish"
        EventName("greet:").namespace         # None
    """

    __slots__ = ("_name", "_namespace")

    def __init__(self, raw: Any):
        self._name, self._namespace = self.parse(raw)

    @staticmethod
    def parse(raw: Any) -> Tuple[str, Optional[str]]:
        """Split a raw name into ``(name, namespace)``. Never raises."""
        if isinstance(raw, EventName):
            return raw.name, raw.namespace
        if isinstance(raw, Enum):
            raw = raw.value
        name, _, namespace = str(raw).partition(SEPARATOR)
        return name, namespace or None

    @classmethod
    def build(cls, name: Any, namespace: Optional[str] = None) -> "EventName":
        """Parse ``name`` and apply an explicit namespace tag if one is given."""
        base, parsed_namespace = cls.parse(name)
        if namespace:
            parsed_namespace = str(namespace)
        event_name = cls.__new__(cls)
        event_name._name, event_name._namespace = base, parsed_namespace
        return event_name

    @property
    def name(self) -> str:
        return self._name

    @property
    def namespace(self) -> Optional[str]:
        return self._namespace

    @property
    def full_name(self) -> str:
        if self._namespace is None:
            return self._name
        return f"{self._name}{SEPARATOR}{self._namespace}"

    def __eq__(self, other):
        if not isinstance(other, EventName):
            return NotImplemented
        return (self._name, self._namespace) == (other._name, other._namespace)

    def __hash__(self):
        return hash((self._name, self._namespace))

    def __str__(self):
        return self.full_name

    def __repr__(self):
        return f"EventName({self.full_name!r})"
