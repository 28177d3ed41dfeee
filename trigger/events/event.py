from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from .name import EventName


class Event:
    """
    A triggered event: a parsed name plus a data payload.

    Built fresh for every trigger call and shared read-only with each
    subscriber. ``event[key]`` is a shortcut for ``event.data.get(key)``.
    """

    __slots__ = ("_event_name", "_data")

    def __init__(self, name: Any, data: Optional[Mapping] = None):
        self._event_name = EventName(name)
        if not isinstance(data, Mapping):
            data = {}
        self._data = MappingProxyType(dict(data))

    @classmethod
    def wrap(cls, event_or_name: Any, data: Optional[Mapping] = None) -> "Event":
        """Return ``event_or_name`` if it already is an Event, else build one."""
        if isinstance(event_or_name, Event):
            return event_or_name
        return cls(event_or_name, data)

    @property
    def event_name(self) -> EventName:
        return self._event_name

    @property
    def name(self) -> str:
        return self._event_name.name

    @property
    def namespace(self) -> Optional[str]:
        return self._event_name.namespace

    @property
    def full_name(self) -> str:
        return self._event_name.full_name

    @property
    def data(self) -> Mapping:
        return self._data

    def get(self, key: Any, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __getitem__(self, key: Any) -> Any:
        return self._data.get(key)

    def __repr__(self):
        return f"Event({self.full_name!r}, {dict(self._data)!r})"
