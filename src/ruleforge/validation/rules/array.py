"""Array rules: type check, lengths, required members and uniqueness.

Lists and tuples count as arrays.
"""

import json
from typing import Any

from ruleforge.validation.rules.numeric import to_number
from ruleforge.validation.types import RuleContext


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _length_param(ctx: RuleContext) -> int | None:
    number = to_number(ctx.rule_params[0]) if ctx.rule_params else None
    if number is None or number < 0 or not number.is_integer():
        return None
    return int(number)


def _comparable(item: Any) -> Any:
    # Containers compare by their JSON form
    if isinstance(item, (dict, list, tuple)):
        return json.dumps(item, sort_keys=True, default=str)
    return item


def is_array(ctx: RuleContext) -> bool | str:
    return _is_array(ctx.value) or ctx.translate("validator.array")


def array_min_length(ctx: RuleContext) -> bool | str:
    if not _is_array(ctx.value):
        return ctx.translate("validator.array")
    limit = _length_param(ctx)
    if limit is None:
        return ctx.translate("validator.invalidRuleParams", rule="ArrayMinLength")
    if len(ctx.value) >= limit:
        return True
    return ctx.translate("validator.arrayMinLength", minLength=limit, actualLength=len(ctx.value))


def array_max_length(ctx: RuleContext) -> bool | str:
    if not _is_array(ctx.value):
        return ctx.translate("validator.array")
    limit = _length_param(ctx)
    if limit is None:
        return ctx.translate("validator.invalidRuleParams", rule="ArrayMaxLength")
    if len(ctx.value) <= limit:
        return True
    return ctx.translate("validator.arrayMaxLength", maxLength=limit, actualLength=len(ctx.value))


def array_length(ctx: RuleContext) -> bool | str:
    if not _is_array(ctx.value):
        return ctx.translate("validator.array")
    length = _length_param(ctx)
    if length is None:
        return ctx.translate("validator.invalidRuleParams", rule="ArrayLength")
    if len(ctx.value) == length:
        return True
    return ctx.translate("validator.arrayLength", length=length, actualLength=len(ctx.value))


def array_contains(ctx: RuleContext) -> bool | str:
    """ArrayContains[a,b]: every parameter must be a member of the array.

    Parameters parsed from a rule string are strings; use the mapping form
    ({"ArrayContains": [1, 2]}) to require other types.
    """
    required = ctx.rule_params
    message = ctx.translate("validator.arrayContains", requiredValues=required)
    if not _is_array(ctx.value):
        return message
    if not required:
        return ctx.translate("validator.invalidRuleParams", rule="ArrayContains")
    members = [_comparable(item) for item in ctx.value]
    return all(_comparable(r) in members for r in required) or message


def array_unique(ctx: RuleContext) -> bool | str:
    message = ctx.translate("validator.arrayUnique")
    if not _is_array(ctx.value):
        return message
    seen: list[Any] = []
    for item in ctx.value:
        key = _comparable(item)
        if key in seen:
            return message
        seen.append(key)
    return True
