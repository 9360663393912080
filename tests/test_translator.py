"""Tests for translation catalogs."""

import pytest

from ruleforge.i18n import BUNDLED_CATALOG_DIR, Translator, load_catalog
from ruleforge.validation.errors import CatalogError


@pytest.fixture
def translator():
    return Translator(
        {
            "en": {
                "validator": {
                    "required": "This field is required",
                    "minLength": "At least %{minLength} characters",
                    "items": {"zero": "No items", "one": "One item", "other": "%{count} items"},
                },
                "User": {"name": "Full name", "email": "E-mail"},
            },
            "fr": {
                "validator": {"required": "Ce champ est obligatoire"},
                "User": {"name": "Nom complet"},
            },
        }
    )


class TestTranslate:
    def test_plain_key(self, translator):
        assert translator.translate("validator.required") == "This field is required"

    def test_interpolation(self, translator):
        assert translator.translate("validator.minLength", minLength=3) == "At least 3 characters"

    def test_params_mapping(self, translator):
        assert translator.translate("validator.minLength", {"minLength": 5}) == "At least 5 characters"

    def test_unknown_placeholder_is_kept(self, translator):
        assert translator.translate("validator.minLength") == "At least %{minLength} characters"

    def test_list_params_are_joined(self, translator):
        translator.register_translations("en", {"choices": "One of %{values}"})
        assert translator.translate("choices", values=["a", "b"]) == "One of a, b"

    def test_missing_key_returns_key(self, translator):
        assert translator.translate("validator.unknown") == "validator.unknown"

    @pytest.mark.parametrize("count, expected", [(0, "No items"), (1, "One item"), (7, "7 items")])
    def test_plurals(self, translator, count, expected):
        assert translator.translate("validator.items", count=count) == expected

    def test_section_without_plural_keys_is_missing(self, translator):
        assert translator.translate("User") == "User"

    def test_locale_argument(self, translator):
        assert translator.translate("validator.required", locale="fr") == "Ce champ est obligatoire"

    def test_falls_back_to_fallback_locale(self, translator):
        translator.set_locale("fr")
        assert translator.translate("validator.minLength", minLength=2) == "At least 2 characters"

    def test_has_translation(self, translator):
        assert translator.has_translation("validator.required")
        assert not translator.has_translation("validator.nope")


class TestCatalogs:
    def test_register_translations_deep_merges(self, translator):
        translator.register_translations("en", {"validator": {"email": "Bad e-mail"}})
        assert translator.translate("validator.email") == "Bad e-mail"
        assert translator.translate("validator.required") == "This field is required"

    def test_nested_translation(self, translator):
        assert translator.get_nested_translation("User") == {"name": "Full name", "email": "E-mail"}
        assert translator.get_nested_translation("validator.required") == {}

    def test_locales(self, translator):
        assert translator.locales == ["en", "fr"]

    def test_bundled_catalogs(self):
        translator = Translator.from_directory(BUNDLED_CATALOG_DIR)
        assert {"en", "fr"} <= set(translator.locales)
        assert translator.translate("validator.failedForNFields", count=3) == "Validation failed for 3 fields"

    def test_load_directory(self, tmp_path):
        (tmp_path / "en.yaml").write_text("greeting: 'Hello %{name}'\n", encoding="utf-8")
        (tmp_path / "de.yaml").write_text("greeting: 'Hallo %{name}'\n", encoding="utf-8")

        translator = Translator()
        assert translator.load_directory(tmp_path) == ["de", "en"]
        assert translator.translate("greeting", name="Ada") == "Hello Ada"
        assert translator.translate("greeting", locale="de", name="Ada") == "Hallo Ada"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            Translator().load_directory(tmp_path / "missing")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "en.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_non_mapping_catalog(self, tmp_path):
        path = tmp_path / "en.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(CatalogError, match="must contain a mapping"):
            load_catalog(path)

    def test_empty_catalog(self, tmp_path):
        path = tmp_path / "en.yaml"
        path.write_text("", encoding="utf-8")
        assert load_catalog(path) == {}


class TestTranslateTarget:
    def test_class_labels(self, translator):
        class User:
            pass

        assert translator.translate_target(User) == {"name": "Full name", "email": "E-mail"}
        assert translator.translate_target(User()) == {"name": "Full name", "email": "E-mail"}

    def test_locale(self, translator):
        class User:
            pass

        assert translator.translate_target(User, locale="fr") == {"name": "Nom complet"}

    def test_subclass_overrides_parent_labels(self, translator):
        translator.register_translations("en", {"Admin": {"email": "Admin e-mail", "role": "Role"}})

        class User:
            pass

        class Admin(User):
            pass

        assert translator.translate_target(Admin) == {
            "name": "Full name",
            "email": "Admin e-mail",
            "role": "Role",
        }

    def test_blank_labels_are_ignored(self, translator):
        translator.register_translations("en", {"Blank": {"name": "  ", "code": 3}})

        class Blank:
            pass

        assert translator.translate_target(Blank) == {}

    def test_unknown_class(self, translator):
        class Unknown:
            pass

        assert translator.translate_target(Unknown) == {}
