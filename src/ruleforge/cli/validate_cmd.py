"""Validation CLI commands: validate a single value or check a record file."""

import asyncio
from collections.abc import Mapping
from pathlib import Path

import click
import yaml

from ruleforge.config import EngineConfig, create_validator
from ruleforge.validation.errors import RuleValidationError, TargetValidationError
from ruleforge.validation.metadata import MetadataStore
from ruleforge.validation.schema import build_target_class


def _config(locale: str | None) -> EngineConfig:
    config = EngineConfig.from_env()
    if locale:
        config.locale = locale
    return config


def _load_yaml(path: Path, what: str):
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        click.echo(f"Error: cannot parse {what} {path}: {e}", err=True)
        raise SystemExit(2)


@click.command()
@click.argument("value")
@click.option("--rule", "-r", "rule_specs", multiple=True, help="Rule specification, e.g. 'MinLength[3]'.")
@click.option("--field", "field_name", default=None, help="Field name used in messages.")
@click.option("--locale", default=None, help="Message locale (default: RULEFORGE_LOCALE or en).")
@click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="Validate VALUE as a plain string instead of parsing it as YAML.",
)
def validate(value: str, rule_specs: tuple[str, ...], field_name: str | None, locale: str | None, raw: bool):
    """Validate VALUE against one or more rules."""
    validator = create_validator(_config(locale))
    parsed_value = value
    if not raw:
        try:
            parsed_value = yaml.safe_load(value)
        except yaml.YAMLError:
            pass  # Not a YAML scalar, validate the plain string

    try:
        asyncio.run(validator.validate(parsed_value, list(rule_specs), field_name=field_name))
    except RuleValidationError as e:
        click.echo(click.style(e.message, fg="red"))
        raise SystemExit(1)

    click.echo(click.style("✓ Valid", fg="green"))


SCHEMA_META_KEYS = ("name", "labels")


def _schema_rules(schema: Mapping) -> Mapping:
    """Property -> rule list of a schema file."""
    if isinstance(schema.get("rules"), Mapping):
        return schema["rules"]
    # Top-level form: `name` and `labels` are properties only when they hold a rule list
    return {
        key: value
        for key, value in schema.items()
        if key not in SCHEMA_META_KEYS or isinstance(value, list)
    }


def _schema_name(schema: Mapping) -> str:
    name = schema.get("name")
    return name if isinstance(name, str) and name.strip() else "Record"


@click.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("data_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--locale", default=None, help="Message locale (default: RULEFORGE_LOCALE or en).")
def check(schema_path: Path, data_path: Path, locale: str | None):
    """Validate the record in DATA_PATH against the schema in SCHEMA_PATH.

    The schema is a YAML mapping of property -> rule list, either at the
    top level or under `rules`. Optional top-level keys: `name` (record
    class name) and `labels` (property -> display name).
    """
    schema = _load_yaml(schema_path, "schema")
    data = _load_yaml(data_path, "data")
    if not isinstance(schema, Mapping) or not _schema_rules(schema):
        click.echo(f"Error: schema {schema_path} must map properties to rule lists", err=True)
        raise SystemExit(2)
    if data is not None and not isinstance(data, Mapping):
        click.echo(f"Error: data {data_path} must be a mapping", err=True)
        raise SystemExit(2)

    config = _config(locale)
    store = MetadataStore()
    validator = create_validator(config, store=store)
    target = build_target_class(_schema_name(schema), _schema_rules(schema), store=store)
    labels = schema.get("labels")
    if isinstance(labels, Mapping):
        validator.translator.register_translations(config.locale, {target.__name__: dict(labels)})

    try:
        asyncio.run(validator.validate_target(target, data or {}))
    except TargetValidationError as e:
        click.echo(click.style(e.message, fg="red"))
        for error in e.errors:
            click.echo(click.style(f"  ✗ {error.message}", fg="red"))
        raise SystemExit(1)

    click.echo(click.style(f"✓ {data_path.name} is valid", fg="green"))
