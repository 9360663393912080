"""Format rules: email, url, file name, UUID, JSON, hex color and regex."""

import json
import re

from ruleforge.validation.types import RuleContext

# Email: Basic RFC 5322 compliant pattern
EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)

# URL: Basic URL pattern
URL_PATTERN = re.compile(
    r"^https?://[^\s/$.?#].[^\s]*$",
    re.IGNORECASE
)

# File names: no \ / : * ? " < > |, no leading dot, no reserved device names
FILE_NAME_FORBIDDEN_CHARS = re.compile(r'^[^\\/:*?"<>|]+$')
FILE_NAME_LEADING_DOT = re.compile(r"^\.")
FILE_NAME_RESERVED = re.compile(r"^(nul|prn|con|lpt[0-9]|com[0-9])(\.|$)", re.IGNORECASE)

# UUID versions 1-5
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE
)

# #RGB, #RGBA, #RRGGBB, #RRGGBBAA
HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{3}|[A-Fa-f0-9]{4}|[A-Fa-f0-9]{6}|[A-Fa-f0-9]{8})$")


def email(ctx: RuleContext) -> bool | str:
    """Email; empty and non-string values pass (combine with Required)."""
    value = ctx.value
    if not value or not isinstance(value, str):
        return True
    return bool(EMAIL_PATTERN.match(value)) or ctx.translate("validator.email")


def url(ctx: RuleContext) -> bool | str:
    value = ctx.value
    if not value or not isinstance(value, str):
        return True
    return bool(URL_PATTERN.match(value)) or ctx.translate("validator.url")


def file_name(ctx: RuleContext) -> bool | str:
    value = ctx.value
    message = ctx.translate("validator.fileName")
    if not isinstance(value, str) or not value.strip():
        return message
    valid = (
        FILE_NAME_FORBIDDEN_CHARS.match(value) is not None
        and FILE_NAME_LEADING_DOT.match(value) is None
        and FILE_NAME_RESERVED.match(value) is None
    )
    return valid or message


def uuid(ctx: RuleContext) -> bool | str:
    value = ctx.value
    if isinstance(value, str) and UUID_PATTERN.match(value):
        return True
    return ctx.translate("validator.uuid")


def json_string(ctx: RuleContext) -> bool | str:
    """JSON: the value is a string holding a valid JSON document."""
    value = ctx.value
    if isinstance(value, str):
        try:
            json.loads(value)
            return True
        except ValueError:
            pass
    return ctx.translate("validator.json")


def hex_color(ctx: RuleContext) -> bool | str:
    value = ctx.value
    if isinstance(value, str) and HEX_COLOR_PATTERN.match(value):
        return True
    return ctx.translate("validator.hexColor")


def regex(ctx: RuleContext) -> bool | str:
    """Regex[pattern]; the pattern is searched anywhere in the value.

    Rule string parameters are split on "," and lose their first "]", so
    patterns with either character must be given as {"Regex": [pattern]}.
    """
    pattern = ctx.rule_params[0] if ctx.rule_params else None
    if not isinstance(pattern, str) or not pattern:
        return ctx.translate("validator.invalidRuleParams", rule="Regex")
    try:
        compiled = re.compile(pattern)
    except re.error:
        return ctx.translate("validator.invalidRuleParams", rule="Regex")
    if isinstance(ctx.value, str) and compiled.search(ctx.value):
        return True
    return ctx.translate("validator.regex", pattern=pattern)
