"""Translation support for ruleforge messages.

The bundled catalogs (English and French) live next to this module in
`locales/`. Applications can merge their own catalogs over them, either
with Translator.register_translations() or a directory of YAML files.
"""

from pathlib import Path

from ruleforge.i18n.translator import Translator, load_catalog

BUNDLED_CATALOG_DIR = Path(__file__).parent / "locales"

_default_translator: Translator | None = None


def get_translator() -> Translator:
    """Process-wide translator loaded with the bundled catalogs."""
    global _default_translator
    if _default_translator is None:
        _default_translator = Translator.from_directory(BUNDLED_CATALOG_DIR)
    return _default_translator


def set_translator(translator: Translator | None) -> None:
    """Replace the process-wide translator (None resets to the bundled one)."""
    global _default_translator
    _default_translator = translator


__all__ = [
    "BUNDLED_CATALOG_DIR",
    "Translator",
    "get_translator",
    "load_catalog",
    "set_translator",
]
