"""Tests for the ruleforge CLI."""

import pytest
from click.testing import CliRunner

from ruleforge.cli.main import cli


@pytest.fixture
def runner(monkeypatch):
    for name in ("RULEFORGE_LOCALE", "RULEFORGE_FALLBACK_LOCALE", "RULEFORGE_CATALOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "user.yaml"
    path.write_text(
        "name: User\n"
        "rules:\n"
        "  id: ['NumberIsDifferentFrom[10]']\n"
        "  name: ['Required', 'MinLength[3]']\n"
        "labels:\n"
        "  name: Full name\n",
        encoding="utf-8",
    )
    return path


class TestRulesCommands:
    def test_list(self, runner):
        result = runner.invoke(cli, ["rules", "list"])
        assert result.exit_code == 0
        assert "  Required" in result.output
        assert "  NumberNotEqual" in result.output
        assert "rule(s) registered" in result.output

    def test_parse(self, runner):
        result = runner.invoke(cli, ["rules", "parse", "MinLength[3]", "NumberBetween[1, 5]"])
        assert result.exit_code == 0
        assert "MinLength[3] -> MinLength('3')" in result.output
        assert "NumberBetween[1, 5] -> NumberBetween('1', '5')" in result.output

    def test_parse_unknown_rule(self, runner):
        result = runner.invoke(cli, ["rules", "parse", "Required", "Nope[1]"])
        assert result.exit_code == 1
        assert "Nope[1] -> not registered" in result.output


class TestValidateCommand:
    def test_valid_value(self, runner):
        result = runner.invoke(cli, ["validate", "hello", "-r", "Required", "-r", "MinLength[3]"])
        assert result.exit_code == 0
        assert "Valid" in result.output

    def test_invalid_value(self, runner):
        result = runner.invoke(cli, ["validate", "hi", "-r", "MinLength[3]"])
        assert result.exit_code == 1
        assert "This field must be at least 3 characters long" in result.output

    def test_value_is_parsed_as_yaml(self, runner):
        assert runner.invoke(cli, ["validate", "42", "-r", "Number"]).exit_code == 0
        assert runner.invoke(cli, ["validate", "42", "--raw", "-r", "Number"]).exit_code == 1

    def test_unknown_rule(self, runner):
        result = runner.invoke(cli, ["validate", "x", "-r", "Nope"])
        assert result.exit_code == 1
        assert "Invalid validation rule: Nope" in result.output

    def test_locale_option(self, runner):
        result = runner.invoke(cli, ["validate", "", "--raw", "-r", "Required", "--locale", "fr"])
        assert result.exit_code == 1
        assert "Ce champ est obligatoire" in result.output


class TestCheckCommand:
    def test_valid_record(self, runner, schema_file, tmp_path):
        data = tmp_path / "data.yaml"
        data.write_text("id: 1\nname: Ada\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(schema_file), str(data)])
        assert result.exit_code == 0
        assert "data.yaml is valid" in result.output

    def test_invalid_record(self, runner, schema_file, tmp_path):
        data = tmp_path / "data.yaml"
        data.write_text("id: 10\nname: ''\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(schema_file), str(data)])
        assert result.exit_code == 1
        assert "Validation failed for 2 fields" in result.output
        lines = [line.strip() for line in result.output.splitlines() if line.strip().startswith("✗")]
        assert lines == [
            "✗ [id] : Please enter a number different from 10",
            "✗ [Full name] : This field is required",
        ]

    def test_rules_key_reports_field_errors(self, runner, tmp_path):
        schema = tmp_path / "schema.yaml"
        schema.write_text("name: User\nrules:\n  name: [Required]\n", encoding="utf-8")
        data = tmp_path / "data.yaml"
        data.write_text("name: ''\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(schema), str(data)])
        assert result.exit_code == 1
        assert "✗ [name] : This field is required" in result.output

    def test_top_level_property_mapping(self, runner, tmp_path):
        schema = tmp_path / "schema.yaml"
        schema.write_text(
            "name: Contact\nemail: [Required, Email]\nlabels:\n  email: E-mail\n",
            encoding="utf-8",
        )
        data = tmp_path / "data.yaml"
        data.write_text("email: not-an-email\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(schema), str(data)])
        assert result.exit_code == 1
        assert "✗ [E-mail] : Please enter a valid email address" in result.output

    def test_top_level_name_property(self, runner, tmp_path):
        schema = tmp_path / "schema.yaml"
        schema.write_text("name: [Required]\n", encoding="utf-8")
        data = tmp_path / "data.yaml"
        data.write_text("name: ''\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(schema), str(data)])
        assert result.exit_code == 1
        assert "✗ [name] : This field is required" in result.output

    def test_schema_without_rules(self, runner, tmp_path):
        schema = tmp_path / "schema.yaml"
        schema.write_text("name: Broken\n", encoding="utf-8")
        data = tmp_path / "data.yaml"
        data.write_text("{}\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(schema), str(data)])
        assert result.exit_code == 2

    def test_data_must_be_mapping(self, runner, schema_file, tmp_path):
        data = tmp_path / "data.yaml"
        data.write_text("- 1\n- 2\n", encoding="utf-8")

        result = runner.invoke(cli, ["check", str(schema_file), str(data)])
        assert result.exit_code == 2
