"""Engine configuration and validator factory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ruleforge.i18n import BUNDLED_CATALOG_DIR, Translator
from ruleforge.validation.metadata import MetadataStore
from ruleforge.validation.registry import RuleRegistry
from ruleforge.validation.rules import register_builtin_rules
from ruleforge.validation.services import Validator


@dataclass
class EngineConfig:
    """Validation engine configuration.

    Attributes:
        locale: Locale used for messages
        fallback_locale: Locale used when a key is missing in `locale`
        catalog_dir: Optional directory of `<locale>.yaml` catalogs merged
            over the bundled ones
    """

    locale: str = "en"
    fallback_locale: str = "en"
    catalog_dir: Path | None = None

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Create config from environment variables.

        - RULEFORGE_LOCALE (default "en")
        - RULEFORGE_FALLBACK_LOCALE (default "en")
        - RULEFORGE_CATALOG_DIR (optional)
        """
        catalog_dir = os.environ.get("RULEFORGE_CATALOG_DIR")
        return cls(
            locale=os.environ.get("RULEFORGE_LOCALE") or "en",
            fallback_locale=os.environ.get("RULEFORGE_FALLBACK_LOCALE") or "en",
            catalog_dir=Path(catalog_dir) if catalog_dir else None,
        )

    def create_translator(self) -> Translator:
        translator = Translator.from_directory(
            BUNDLED_CATALOG_DIR,
            locale=self.locale,
            fallback_locale=self.fallback_locale,
        )
        if self.catalog_dir is not None:
            translator.load_directory(self.catalog_dir)
        return translator


def create_validator(
    config: EngineConfig | None = None,
    *,
    registry: RuleRegistry | None = None,
    store: MetadataStore | None = None,
) -> Validator:
    """Build a fully wired Validator with the built-in rules registered.

    Args:
        config: Engine configuration (default: EngineConfig.from_env())
        registry: Registry to use (default: a fresh RuleRegistry)
        store: Metadata store to read schemas from (default: default_store)
    """
    config = config or EngineConfig.from_env()
    registry = registry if registry is not None else RuleRegistry()
    register_builtin_rules(registry)
    return Validator(registry=registry, translator=config.create_translator(), store=store)
