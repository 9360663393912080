"""Tests for engine configuration and the validator factory."""

from pathlib import Path

import pytest

from ruleforge.config import EngineConfig, create_validator
from ruleforge.validation.errors import CatalogError, RuleValidationError
from ruleforge.validation.registry import RuleRegistry


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("RULEFORGE_LOCALE", "RULEFORGE_FALLBACK_LOCALE", "RULEFORGE_CATALOG_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig.from_env()
        assert config.locale == "en"
        assert config.fallback_locale == "en"
        assert config.catalog_dir is None

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RULEFORGE_LOCALE", "fr")
        monkeypatch.setenv("RULEFORGE_FALLBACK_LOCALE", "de")
        monkeypatch.setenv("RULEFORGE_CATALOG_DIR", str(tmp_path))

        config = EngineConfig.from_env()
        assert config.locale == "fr"
        assert config.fallback_locale == "de"
        assert config.catalog_dir == Path(tmp_path)

    def test_create_translator_uses_locale(self):
        translator = EngineConfig(locale="fr").create_translator()
        assert translator.translate("validator.required") == "Ce champ est obligatoire"

    def test_catalog_dir_overrides_bundled_messages(self, tmp_path):
        (tmp_path / "en.yaml").write_text(
            "validator:\n  required: 'Please fill this in'\n", encoding="utf-8"
        )
        translator = EngineConfig(catalog_dir=tmp_path).create_translator()
        assert translator.translate("validator.required") == "Please fill this in"
        assert translator.translate("validator.email") == "Please enter a valid email address"

    def test_missing_catalog_dir(self, tmp_path):
        with pytest.raises(CatalogError):
            EngineConfig(catalog_dir=tmp_path / "missing").create_translator()


class TestCreateValidator:
    @pytest.mark.asyncio
    async def test_registers_builtin_rules(self):
        validator = create_validator(EngineConfig())
        assert validator.find_registered_rule("Required") is not None

        with pytest.raises(RuleValidationError, match="This field is required"):
            await validator.validate("", ["Required"])

    def test_uses_fresh_registry_by_default(self):
        first = create_validator(EngineConfig())
        second = create_validator(EngineConfig())
        assert first.registry is not second.registry

    def test_uses_given_registry(self):
        registry = RuleRegistry()
        validator = create_validator(EngineConfig(), registry=registry)
        assert validator.registry is registry
        assert registry.is_registered("Email")

    @pytest.mark.asyncio
    async def test_locale_from_env(self, monkeypatch):
        monkeypatch.setenv("RULEFORGE_LOCALE", "fr")
        validator = create_validator()
        with pytest.raises(RuleValidationError, match="Ce champ est obligatoire"):
            await validator.validate(None, ["Required"])
