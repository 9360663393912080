"""Translation catalogs for validation messages.

Catalogs are nested mappings loaded from `<locale>.yaml` files. Keys are
addressed with dotted paths ("validator.required") and values may contain
`%{name}` placeholders. A mapping with zero/one/other keys is a plural
entry selected by the `count` parameter.
"""

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ruleforge.validation.errors import CatalogError

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"%\{(?P<name>\w+)\}")

PLURAL_KEYS = ("zero", "one", "other")


def load_catalog(path: Path) -> dict[str, Any]:
    """Load a single YAML catalog file.

    Raises:
        CatalogError: If the file can't be read or is not a mapping
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(f"Cannot load translation catalog {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise CatalogError(f"Translation catalog {path} must contain a mapping")
    return dict(data)


def _deep_merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = _deep_merge(dict(result[key]), value)
        elif isinstance(value, Mapping):
            result[key] = _deep_merge({}, value)
        else:
            result[key] = value
    return result


def _format_param(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


class Translator:
    """Translation collaborator used by the validation engine.

    Example:
        translator = Translator({"en": {"validator": {"required": "Required"}}})
        translator.translate("validator.required")  # "Required"
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, Any]] | None = None,
        locale: str = "en",
        fallback_locale: str = "en",
    ):
        self._catalogs: dict[str, dict[str, Any]] = {}
        self.locale = locale
        self.fallback_locale = fallback_locale
        for catalog_locale, catalog in (catalogs or {}).items():
            self.register_translations(catalog_locale, catalog)

    @classmethod
    def from_directory(cls, path: Path, **kwargs: Any) -> "Translator":
        """Create a translator from a directory of `<locale>.yaml` files."""
        translator = cls(**kwargs)
        translator.load_directory(path)
        return translator

    def load_directory(self, path: Path) -> list[str]:
        """Merge every `<locale>.yaml` catalog found in `path`.

        Returns:
            The locales that were loaded, in file name order
        """
        path = Path(path)
        if not path.is_dir():
            raise CatalogError(f"Translation directory not found: {path}")
        loaded = []
        for yaml_path in sorted(path.glob("*.yaml")):
            self.register_translations(yaml_path.stem, load_catalog(yaml_path))
            loaded.append(yaml_path.stem)
        logger.debug("Loaded translation catalogs %s from %s", loaded, path)
        return loaded

    def register_translations(self, locale: str, catalog: Mapping[str, Any]) -> None:
        """Deep-merge `catalog` into the catalog for `locale`."""
        self._catalogs[locale] = _deep_merge(self._catalogs.get(locale, {}), catalog)

    @property
    def locales(self) -> list[str]:
        return sorted(self._catalogs)

    def set_locale(self, locale: str) -> None:
        self.locale = locale

    def _lookup(self, key: str, locale: str | None = None) -> Any:
        for candidate in (locale or self.locale, self.fallback_locale):
            node: Any = self._catalogs.get(candidate)
            for part in key.split("."):
                if not isinstance(node, Mapping) or part not in node:
                    node = None
                    break
                node = node[part]
            if node is not None:
                return node
        return None

    def has_translation(self, key: str, locale: str | None = None) -> bool:
        return self._lookup(key, locale) is not None

    def get_nested_translation(self, key: str, locale: str | None = None) -> dict[str, Any]:
        """Return the catalog section at `key`, or an empty dict."""
        node = self._lookup(key, locale)
        return dict(node) if isinstance(node, Mapping) else {}

    def translate(
        self,
        key: str,
        params: Mapping[str, Any] | None = None,
        /,
        *,
        locale: str | None = None,
        **kwargs: Any,
    ) -> str:
        """Translate `key`, interpolating `%{name}` placeholders.

        Missing keys translate to the key itself; unknown placeholders are
        left untouched.
        """
        values = dict(params or {})
        values.update(kwargs)
        entry = self._lookup(key, locale)
        if isinstance(entry, Mapping):
            entry = self._pluralize(entry, values.get("count"))
        if entry is None:
            return key
        return self.interpolate(str(entry), values)

    def interpolate(self, template: str, values: Mapping[str, Any]) -> str:
        def replace(match: re.Match) -> str:
            name = match.group("name")
            if name not in values:
                return match.group(0)
            return _format_param(values[name])

        return PLACEHOLDER_PATTERN.sub(replace, template)

    def _pluralize(self, entry: Mapping[str, Any], count: Any) -> Any:
        if not any(k in entry for k in PLURAL_KEYS):
            return None
        if count == 0 and "zero" in entry:
            return entry["zero"]
        if count == 1 and "one" in entry:
            return entry["one"]
        return entry.get("other", entry.get("one"))

    def translate_target(
        self,
        target: Any,
        data: Any = None,
        locale: str | None = None,
    ) -> dict[str, str]:
        """Translate the property names of a record class.

        Reads the catalog section named by the class's `__translation_key__`
        (or the class name), walking the inheritance chain so subclasses
        inherit and override their parents' labels.

        Returns:
            Mapping of property name to display name
        """
        cls = target if isinstance(target, type) else type(target)
        names: dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            section = klass.__dict__.get("__translation_key__", klass.__name__)
            for prop, label in self.get_nested_translation(section, locale).items():
                if isinstance(label, str) and label.strip():
                    names[prop] = label
        return names
