"""Rule CLI commands: list and parse."""

import click

from ruleforge.config import EngineConfig, create_validator
from ruleforge.validation.types import RuleDescriptor


@click.group()
def rules():
    """Rule registry commands."""
    pass


@rules.command("list")
def list_rules():
    """List the registered rule names."""
    validator = create_validator(EngineConfig.from_env())
    names = validator.registry.list_registered()
    for name in names:
        click.echo(f"  {name}")
    click.echo(f"\n{len(names)} rule(s) registered")


@rules.command("parse")
@click.argument("specs", nargs=-1, required=True)
def parse_rules(specs: tuple[str, ...]):
    """Show how rule specifications are parsed."""
    validator = create_validator(EngineConfig.from_env())
    parsed = validator.parse_and_validate_rules(list(specs))

    for descriptor in parsed.sanitized_rules:
        if isinstance(descriptor, RuleDescriptor):
            params = ", ".join(repr(p) for p in descriptor.params)
            click.echo(f"  {descriptor.raw_rule_name} -> {descriptor.rule_name}({params})")

    for invalid in parsed.invalid_rules:
        click.echo(click.style(f"  {invalid} -> not registered", fg="red"))

    if parsed.invalid_rules:
        raise SystemExit(1)
