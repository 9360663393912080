"""Schema extraction: read the validation schema of a record class."""

from collections.abc import Mapping
from typing import Any

from ruleforge.validation.annotations import validated
from ruleforge.validation.metadata import (
    TARGET_OPTIONS_KEY,
    TARGET_RULES_KEY,
    MetadataStore,
    default_store,
)
from ruleforge.validation.types import RuleSpec, ValidateTargetOptions


def get_target_rules(target: Any, store: MetadataStore | None = None) -> dict[str, list[RuleSpec]]:
    """Return the property -> rule list mapping of a class.

    Walks the inheritance chain base-first, so inherited properties come
    before properties introduced by subclasses and a subclass's list for a
    property replaces the inherited one (it already starts from it).

    Args:
        target: A class or an instance of it
        store: Metadata store to read (default: default_store)

    Returns:
        Ordered mapping of property name to a copy of its rule list
    """
    store = store if store is not None else default_store
    return store.get_merged(TARGET_RULES_KEY, target)


def get_validate_target_options(target: Any, store: MetadataStore | None = None) -> ValidateTargetOptions:
    """Return the class-level options (nearest ancestor wins), or empty options."""
    store = store if store is not None else default_store
    options = store.get_inherited(TARGET_OPTIONS_KEY, target)
    if options is None:
        return ValidateTargetOptions()
    return ValidateTargetOptions().merge(options)


def build_target_class(
    name: str,
    properties: Mapping[str, Any],
    store: MetadataStore | None = None,
    bases: tuple[type, ...] = (),
) -> type:
    """Create a record class from a property -> rule list mapping.

    Used for schemas declared as data (e.g. YAML) rather than in code.
    """
    cls = type(name, bases, {"__module__": __name__})
    return validated(properties, store=store)(cls)
