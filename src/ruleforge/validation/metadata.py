"""Key/value metadata store for class-level validation schemas.

Entries are keyed by (metadata key, class). Annotations write into the
store at class-definition time; the schema extractor reads it back.
"""

import weakref
from collections.abc import Callable
from typing import Any

# Metadata keys
TARGET_RULES_KEY = "ruleforge:target-rules"
TARGET_OPTIONS_KEY = "ruleforge:target-options"


def class_of(target: Any) -> type:
    """Return `target` if it is a class, else its class."""
    return target if isinstance(target, type) else type(target)


class MetadataStore:
    """Per-class metadata storage.

    Classes are held weakly so dynamically created record classes can be
    garbage collected together with their metadata.
    """

    def __init__(self) -> None:
        self._entries: weakref.WeakKeyDictionary[type, dict[str, Any]] = weakref.WeakKeyDictionary()

    def get(self, key: str, target: Any, default: Any = None) -> Any:
        """Metadata stored directly on `target` (no inheritance)."""
        return self._entries.get(class_of(target), {}).get(key, default)

    def set(self, key: str, target: Any, value: Any) -> None:
        cls = class_of(target)
        if cls not in self._entries:
            self._entries[cls] = {}
        self._entries[cls][key] = value

    def has_own(self, key: str, target: Any) -> bool:
        return key in self._entries.get(class_of(target), {})

    def get_inherited(self, key: str, target: Any, default: Any = None) -> Any:
        """Metadata of the nearest class in `target`'s MRO that has `key`."""
        for klass in class_of(target).__mro__:
            entries = self._entries.get(klass)
            if entries is not None and key in entries:
                return entries[key]
        return default

    def get_merged(self, key: str, target: Any) -> dict[str, list[Any]]:
        """Per-property mapping merged base-first across `target`'s MRO.

        Every base contributes its properties, so with several bases a
        property declared only by a later base is still present. A class's
        list for a property replaces the list inherited for it.

        Returns:
            Ordered mapping of property name to a copy of its list
        """
        merged: dict[str, list[Any]] = {}
        for klass in reversed(class_of(target).__mro__):
            own = self._entries.get(klass, {}).get(key)
            if not own:
                continue
            for property_name, values in own.items():
                merged[property_name] = list(values)
        return merged

    def update_property(
        self,
        key: str,
        target: Any,
        property_name: str,
        merge: Callable[[list[Any]], list[Any]],
    ) -> dict[str, list[Any]]:
        """Merge into the per-property list stored under `key`.

        Starts from the mapping merged across every base (copied, never
        mutated), applies `merge(old_list)` to the property's list and
        writes the whole mapping back on `target`.

        Returns:
            The mapping now stored on `target`
        """
        properties = self.get_merged(key, target)
        properties[property_name] = list(merge(properties.get(property_name, [])))
        self.set(key, target, properties)
        return properties

    def clear(self) -> None:
        """Drop all metadata. Primarily for testing."""
        self._entries.clear()


default_store = MetadataStore()
