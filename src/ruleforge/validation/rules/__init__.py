"""Built-in rules for ruleforge.

These are ready-to-use rules that ship with the engine. They are not
registered on import; call register_builtin_rules() at startup.

Available rules:
- Required, Nullable, Empty, Sometimes
- Number, Integer, NumberBetween
- NumberLessThan, NumberLessThanOrEquals, NumberGreaterThan,
  NumberGreaterThanOrEquals, NumberEquals, NumberIsDifferentFrom
- String, NonNullString, Length, MinLength, MaxLength,
  StartsWithOneOf, EndsWithOneOf
- Email, Url, FileName, UUID, JSON, HexColor, Regex
- DecimalPlaces
- Array, ArrayMinLength, ArrayMaxLength, ArrayLength, ArrayContains,
  ArrayUnique
"""

from ruleforge.validation.registry import RuleRegistry, default_registry
from ruleforge.validation.rules.array import (
    array_contains,
    array_length,
    array_max_length,
    array_min_length,
    array_unique,
    is_array,
)
from ruleforge.validation.rules.format import (
    email,
    file_name,
    hex_color,
    json_string,
    regex,
    url,
    uuid,
)
from ruleforge.validation.rules.numeric import (
    decimal_places,
    is_integer,
    is_number,
    number_between,
    number_equals,
    number_greater_than,
    number_greater_than_or_equals,
    number_is_different_from,
    number_less_than,
    number_less_than_or_equals,
    to_number,
)
from ruleforge.validation.rules.presence import empty, is_empty, nullable, required, sometimes
from ruleforge.validation.rules.string import (
    ends_with_one_of,
    is_string,
    length,
    max_length,
    min_length,
    non_null_string,
    starts_with_one_of,
)

BUILTIN_RULES = {
    "Required": required,
    "Nullable": nullable,
    "Empty": empty,
    "Sometimes": sometimes,
    "Number": is_number,
    "Integer": is_integer,
    "NumberBetween": number_between,
    "NumberLessThan": number_less_than,
    "NumberLessThanOrEquals": number_less_than_or_equals,
    "NumberGreaterThan": number_greater_than,
    "NumberGreaterThanOrEquals": number_greater_than_or_equals,
    "NumberEquals": number_equals,
    "NumberIsDifferentFrom": number_is_different_from,
    "String": is_string,
    "NonNullString": non_null_string,
    "Length": length,
    "MinLength": min_length,
    "MaxLength": max_length,
    "StartsWithOneOf": starts_with_one_of,
    "EndsWithOneOf": ends_with_one_of,
    "Email": email,
    "Url": url,
    "FileName": file_name,
    "UUID": uuid,
    "JSON": json_string,
    "HexColor": hex_color,
    "Regex": regex,
    "DecimalPlaces": decimal_places,
    "Array": is_array,
    "ArrayMinLength": array_min_length,
    "ArrayMaxLength": array_max_length,
    "ArrayLength": array_length,
    "ArrayContains": array_contains,
    "ArrayUnique": array_unique,
}

# Alternate spellings seen at call sites -> canonical rule name
BUILTIN_ALIASES = {
    "NumberDifferentFrom": "NumberIsDifferentFrom",
    "NumberNotEqual": "NumberIsDifferentFrom",
}


def register_builtin_rules(registry: RuleRegistry | None = None, overwrite: bool = True) -> None:
    """Register all built-in rules and their aliases.

    Args:
        registry: Target registry (default: default_registry)
        overwrite: If False, names that are already registered are kept
    """
    registry = registry if registry is not None else default_registry
    for name, rule_fn in BUILTIN_RULES.items():
        if overwrite or not registry.is_registered(name):
            registry.register_rule(name, rule_fn)
    for alias_name, canonical_name in BUILTIN_ALIASES.items():
        if overwrite or not registry.is_registered(alias_name):
            registry.alias(alias_name, canonical_name)


__all__ = [
    "BUILTIN_ALIASES",
    "BUILTIN_RULES",
    "array_contains",
    "array_length",
    "array_max_length",
    "array_min_length",
    "array_unique",
    "decimal_places",
    "email",
    "empty",
    "ends_with_one_of",
    "file_name",
    "hex_color",
    "is_array",
    "is_empty",
    "is_integer",
    "is_number",
    "is_string",
    "json_string",
    "length",
    "max_length",
    "min_length",
    "non_null_string",
    "nullable",
    "number_between",
    "number_equals",
    "number_greater_than",
    "number_greater_than_or_equals",
    "number_is_different_from",
    "number_less_than",
    "number_less_than_or_equals",
    "regex",
    "register_builtin_rules",
    "required",
    "sometimes",
    "starts_with_one_of",
    "to_number",
    "url",
    "uuid",
]
