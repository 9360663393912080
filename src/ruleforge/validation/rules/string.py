"""String rules: type checks, lengths, prefixes and suffixes."""

from ruleforge.validation.rules.numeric import to_number
from ruleforge.validation.rules.presence import is_empty
from ruleforge.validation.types import RuleContext


def is_string(ctx: RuleContext) -> bool | str:
    return isinstance(ctx.value, str) or ctx.translate("validator.string")


def non_null_string(ctx: RuleContext) -> bool | str:
    value = ctx.value
    return (isinstance(value, str) and value.strip() != "") or ctx.translate("validator.nonNullString")


def length(ctx: RuleContext) -> bool | str:
    """Length[n] for an exact length, Length[min,max] for a range."""
    params = ctx.rule_params
    value = ctx.value if isinstance(ctx.value, str) else ""
    min_length = to_number(params[0]) if len(params) > 0 else None
    max_length = to_number(params[1]) if len(params) > 1 else None

    if min_length is not None and max_length is not None:
        message = ctx.translate(
            "validator.lengthRange",
            minLength=_format_count(min_length),
            maxLength=_format_count(max_length),
        )
        return min_length <= len(value) <= max_length or message
    if min_length is not None:
        message = ctx.translate("validator.length", length=_format_count(min_length))
        return len(value.strip()) == min_length or message
    return True


def min_length(ctx: RuleContext) -> bool | str:
    """MinLength[n]; empty values pass (combine with Required)."""
    limit = _first_param(ctx)
    if is_empty(ctx.value):
        return True
    message = ctx.translate("validator.minLength", minLength=_format_count(limit))
    return (isinstance(ctx.value, str) and len(ctx.value) >= limit) or message


def max_length(ctx: RuleContext) -> bool | str:
    """MaxLength[n]; empty values pass."""
    limit = _first_param(ctx)
    if is_empty(ctx.value):
        return True
    message = ctx.translate("validator.maxLength", maxLength=_format_count(limit))
    return (isinstance(ctx.value, str) and len(ctx.value) <= limit) or message


def starts_with_one_of(ctx: RuleContext) -> bool | str:
    prefixes = [p for p in ctx.rule_params if isinstance(p, str) and p]
    if not ctx.rule_params:
        return ctx.translate("validator.invalidRuleParams", rule="StartsWithOneOf")
    if isinstance(ctx.value, str) and any(ctx.value.startswith(p) for p in prefixes):
        return True
    return ctx.translate("validator.startsWithOneOf", prefixes=ctx.rule_params)


def ends_with_one_of(ctx: RuleContext) -> bool | str:
    endings = [e for e in ctx.rule_params if isinstance(e, str) and e]
    if not ctx.rule_params:
        return ctx.translate("validator.invalidRuleParams", rule="EndsWithOneOf")
    if isinstance(ctx.value, str) and any(ctx.value.endswith(e) for e in endings):
        return True
    return ctx.translate("validator.endsWithOneOf", endings=ctx.rule_params)


def _first_param(ctx: RuleContext) -> float:
    number = to_number(ctx.rule_params[0]) if ctx.rule_params else None
    return number or 0


def _format_count(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else str(number)
