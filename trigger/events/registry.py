from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RegistryEntry:
    handler: Any
    namespace: Optional[str] = None


class Registry:
    """
    Subscriber storage keyed by base event name.

    Entries keep insertion order, which is the dispatch order. Matching:
        handlers_for("greet", None)       -> every "greet" entry, tagged or not
        handlers_for("greet", "spanish")  -> only entries tagged "spanish"
    """

    def __init__(self):
        self._entries: Dict[str, List[RegistryEntry]] = {}

    def add(self, name: str, namespace: Optional[str], handler: Any) -> RegistryEntry:
        entry = RegistryEntry(handler, namespace)
        self._entries.setdefault(name, []).append(entry)
        return entry

    def entries(self, name: str) -> List[RegistryEntry]:
        return list(self._entries.get(name, []))

    def handlers_for(self, name: str, namespace: Optional[str] = None) -> List[Any]:
        # Plain entries never match a namespaced query.
        return [
            entry.handler
            for entry in self._entries.get(name, [])
            if namespace is None or entry.namespace == namespace
        ]

    def names(self) -> List[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, name: str) -> bool:
        return bool(self._entries.get(name))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())
