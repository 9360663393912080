"""Presence rules: Required and the always-passing marker rules."""

from typing import Any

from ruleforge.validation.types import RuleContext


def is_empty(value: Any) -> bool:
    """Check if a value is considered empty."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def required(ctx: RuleContext) -> bool | str:
    return not is_empty(ctx.value) or ctx.translate("validator.required")


# Marker rules: they always pass, their presence in a rule list is the signal

def nullable(ctx: RuleContext) -> bool:
    return True


def empty(ctx: RuleContext) -> bool:
    return True


def sometimes(ctx: RuleContext) -> bool:
    return True
