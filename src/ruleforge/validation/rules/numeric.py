"""Numeric rules.

Comparison rules take one parameter, e.g. "NumberLessThan[10]". Values and
parameters may be numbers or numeric strings; anything else fails.
"""

import math
import operator
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from ruleforge.validation.types import RuleContext


def to_number(value: Any) -> float | None:
    """Convert a number or numeric string to float, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def _compare(ctx: RuleContext, compare: Callable[[float, float], bool], message_key: str) -> bool | str:
    message = ctx.translate(message_key)
    value = to_number(ctx.value)
    if value is None or not ctx.rule_params:
        return message
    target = to_number(ctx.rule_params[0])
    if target is None:
        return message
    return compare(value, target) or message


def number_less_than(ctx: RuleContext) -> bool | str:
    return _compare(ctx, operator.lt, "validator.numberLessThan")


def number_less_than_or_equals(ctx: RuleContext) -> bool | str:
    return _compare(ctx, operator.le, "validator.numberLessThanOrEquals")


def number_greater_than(ctx: RuleContext) -> bool | str:
    return _compare(ctx, operator.gt, "validator.numberGreaterThan")


def number_greater_than_or_equals(ctx: RuleContext) -> bool | str:
    return _compare(ctx, operator.ge, "validator.numberGreaterThanOrEquals")


def number_equals(ctx: RuleContext) -> bool | str:
    return _compare(ctx, operator.eq, "validator.numberEquals")


def number_is_different_from(ctx: RuleContext) -> bool | str:
    return _compare(ctx, operator.ne, "validator.numberIsDifferentFrom")


def number_between(ctx: RuleContext) -> bool | str:
    """NumberBetween[min,max], bounds inclusive."""
    params = ctx.rule_params
    if len(params) < 2:
        return ctx.translate("validator.invalidRuleParams", rule="NumberBetween")

    value = to_number(ctx.value)
    if value is None:
        return ctx.translate("validator.number")

    low, high = to_number(params[0]), to_number(params[1])
    if low is None or high is None:
        return ctx.translate("validator.invalidRuleParams", rule="NumberBetween")

    return low <= value <= high or ctx.translate("validator.numberBetween", min=params[0], max=params[1])


def is_number(ctx: RuleContext) -> bool | str:
    value = ctx.value
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return True
    return ctx.translate("validator.number")


def is_integer(ctx: RuleContext) -> bool | str:
    number = to_number(ctx.value)
    if number is not None and math.isfinite(number) and number.is_integer():
        return True
    return ctx.translate("validator.integer")


def decimal_places(ctx: RuleContext) -> bool | str:
    """DecimalPlaces[n] for an exact count, DecimalPlaces[min,max] for a range."""
    params = ctx.rule_params
    if not params:
        return ctx.translate("validator.invalidRuleParams", rule="DecimalPlaces")

    if to_number(ctx.value) is None:
        return ctx.translate("validator.number")

    text = ctx.value.strip() if isinstance(ctx.value, str) else str(ctx.value)
    _, dot, decimals = text.partition(".")
    actual = len(decimals) if dot else 0

    bounds = [to_number(p) for p in params[:2]]
    if any(b is None for b in bounds):
        return ctx.translate("validator.invalidRuleParams", rule="DecimalPlaces")
    low, high = bounds[0], bounds[-1]

    message = ctx.translate(
        "validator.decimalPlaces",
        places="-".join(str(p) for p in params[:2]),
        actualPlaces=actual,
    )
    return low <= actual <= high or message
