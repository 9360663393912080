"""Rule specification parser.

Normalizes a mixed list of rule specifications into RuleDescriptors:

    "Required"                -> Required, params []
    "Between[10, 20]"         -> Between, params ["10", "20"]
    {"Between": [10, 20]}     -> Between, params [10, 20]
    some_rule_function        -> passed through unchanged

Names with no registry binding are collected as invalid instead of raising.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ruleforge.validation.registry import RuleRegistry, default_registry
from ruleforge.validation.types import ParsedRules, RuleDescriptor

logger = logging.getLogger(__name__)


def parse_rule_string(spec: str) -> tuple[str, list[str]]:
    """Split a string specification into its rule name and parameters.

    The trailing "]" is removed, the remainder split on the first "[", and
    the parameter blob split on ",". Each parameter is stripped of one stray
    "]" and surrounding whitespace.
    """
    name = spec.strip()
    if "[" not in name:
        return name, []
    if name.endswith("]"):
        name = name[:-1]
    name, _, blob = name.partition("[")
    params = [segment.replace("]", "", 1).strip() for segment in blob.split(",")]
    return name.strip(), params


def parse_and_validate_rules(
    specs: Any,
    registry: RuleRegistry | None = None,
) -> ParsedRules:
    """Resolve rule specifications against a registry.

    Pure and order-preserving: sanitized rules keep their input order and
    nothing is executed.

    Args:
        specs: List of rule specifications (anything else counts as empty)
        registry: Registry to resolve names in (default: default_registry)

    Returns:
        ParsedRules with the executable rules and the unresolvable specs
    """
    registry = registry if registry is not None else default_registry
    parsed = ParsedRules()
    if not isinstance(specs, (list, tuple)):
        return parsed

    for spec in specs:
        if isinstance(spec, str):
            if not spec.strip():
                continue
            name, params = parse_rule_string(spec)
            rule_fn = registry.find_registered_rule(name)
            if rule_fn is None:
                parsed.invalid_rules.append(spec)
                continue
            parsed.sanitized_rules.append(
                RuleDescriptor(rule_name=name, raw_rule_name=spec, params=params, rule_function=rule_fn)
            )
        elif isinstance(spec, Mapping):
            for name, raw_params in spec.items():
                rule_fn = registry.find_registered_rule(name)
                if rule_fn is None:
                    parsed.invalid_rules.append(name)
                    continue
                if isinstance(raw_params, (list, tuple)):
                    params = list(raw_params)
                else:
                    # Non-list parameters are not wrapped; the rule runs without params
                    if raw_params is not None:
                        logger.debug(
                            "Rule '%s' parameters %r are not a list and were dropped",
                            name,
                            raw_params,
                        )
                    params = []
                parsed.sanitized_rules.append(
                    RuleDescriptor(rule_name=name, raw_rule_name=str(name), params=params, rule_function=rule_fn)
                )
        elif callable(spec):
            parsed.sanitized_rules.append(spec)

    return parsed
