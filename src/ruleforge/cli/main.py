"""ruleforge CLI entry point."""

import logging

import click


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool):
    """ruleforge: rule-based data validation CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
from ruleforge.cli.rules_cmd import rules  # noqa: E402
from ruleforge.cli.validate_cmd import check, validate  # noqa: E402

cli.add_command(rules)
cli.add_command(validate)
cli.add_command(check)
