"""Declarative validation annotations for record classes.

Property annotations attach rule specifications to one property of a
class; class annotations attach target validation options. Both write into
a MetadataStore when applied, typically at class-definition time:

    @validate_target_options(context={"tenant": "acme"})
    @validated(
        id=[IsNumberIsDifferentFrom([10])],
        name=[IsRequired, HasMinLength([3])],
        email=["Email"],
    )
    class User:
        id: int
        name: str
        email: str

Annotations on the same property accumulate in application order, and a
subclass starts from its parent's lists.
"""

import dataclasses
import functools
from collections.abc import Callable, Mapping
from typing import Any

from ruleforge.validation.metadata import (
    TARGET_OPTIONS_KEY,
    TARGET_RULES_KEY,
    MetadataStore,
    default_store,
)
from ruleforge.validation.rules import (
    ends_with_one_of,
    length,
    max_length,
    min_length,
    number_between,
    number_equals,
    number_greater_than,
    number_greater_than_or_equals,
    number_is_different_from,
    number_less_than,
    number_less_than_or_equals,
    starts_with_one_of,
)
from ruleforge.validation.types import (
    ErrorMessageBuilder,
    RuleContext,
    RuleFn,
    RuleSpec,
    ValidateTargetOptions,
)


class PropertyAnnotation:
    """Attaches rule specifications to a property of a class."""

    def __init__(self, specs: list[RuleSpec]):
        self.specs = list(specs)

    def __call__(self, target: type, property_name: str, store: MetadataStore | None = None) -> None:
        store = store if store is not None else default_store
        store.update_property(
            TARGET_RULES_KEY,
            target,
            property_name,
            lambda existing: existing + self.specs,
        )

    def __repr__(self) -> str:
        return f"PropertyAnnotation({self.specs!r})"


def validation_rules(*specs: RuleSpec | list[RuleSpec]) -> PropertyAnnotation:
    """Create a property annotation from rule specifications.

    Accepts specifications as separate arguments or as one list.
    """
    flat: list[RuleSpec] = []
    for spec in specs:
        if isinstance(spec, (list, tuple)):
            flat.extend(spec)
        else:
            flat.append(spec)
    return PropertyAnnotation(flat)


def rule_annotation(rule_fn: RuleFn) -> Callable[[Any], PropertyAnnotation]:
    """Turn a rule function into a parameterized annotation factory.

    The factory takes the rule parameters at the annotation site, so one
    rule implementation can be reused with different parameters without
    referencing it by name:

        HasMinLength = rule_annotation(min_length)
        HasMinLength([3])  # property annotation running min_length with ["3"]
    """

    def factory(rule_params: Any = None) -> PropertyAnnotation:
        if rule_params is None:
            params: list[Any] = []
        elif isinstance(rule_params, (list, tuple)):
            params = list(rule_params)
        else:
            params = [rule_params]

        @functools.wraps(rule_fn)
        def configured_rule(ctx: RuleContext) -> Any:
            return rule_fn(dataclasses.replace(ctx, rule_params=list(params)))

        return PropertyAnnotation([configured_rule])

    factory.rule_function = rule_fn  # type: ignore[attr-defined]
    return factory


def validated(
    properties: Mapping[str, Any] | None = None,
    /,
    *,
    store: MetadataStore | None = None,
    **kwargs: Any,
) -> Callable[[type], type]:
    """Class decorator applying property annotations.

    Each property maps to an annotation, a rule specification, or a list
    mixing both; they are applied in order. Properties given positionally
    (as a mapping) come before keyword properties.
    """
    items: dict[str, Any] = dict(properties or {})
    items.update(kwargs)

    def decorator(cls: type) -> type:
        for property_name, entries in items.items():
            if not isinstance(entries, (list, tuple)):
                entries = [entries]
            for entry in entries:
                annotation = entry if isinstance(entry, PropertyAnnotation) else validation_rules(entry)
                annotation(cls, property_name, store=store)
        return cls

    return decorator


def validate_target_options(
    error_message_builder: ErrorMessageBuilder | None = None,
    context: Any = None,
    *,
    store: MetadataStore | None = None,
) -> Callable[[type], type]:
    """Class decorator attaching target validation options to the class."""
    options = ValidateTargetOptions(context=context, error_message_builder=error_message_builder)

    def decorator(cls: type) -> type:
        (store if store is not None else default_store).set(TARGET_OPTIONS_KEY, cls, options)
        return cls

    return decorator


# =============================================================================
# Ready-made annotations
# =============================================================================

IsRequired = validation_rules("Required")
IsNullable = validation_rules("Nullable")
IsNumber = validation_rules("Number")
IsInteger = validation_rules("Integer")
IsString = validation_rules("String")
IsNonNullString = validation_rules("NonNullString")
IsEmail = validation_rules("Email")
IsUrl = validation_rules("Url")
IsFileName = validation_rules("FileName")

HasLength = rule_annotation(length)
HasMinLength = rule_annotation(min_length)
HasMaxLength = rule_annotation(max_length)
IsNumberLessThan = rule_annotation(number_less_than)
IsNumberLessThanOrEquals = rule_annotation(number_less_than_or_equals)
IsNumberGreaterThan = rule_annotation(number_greater_than)
IsNumberGreaterThanOrEquals = rule_annotation(number_greater_than_or_equals)
IsNumberEquals = rule_annotation(number_equals)
IsNumberIsDifferentFrom = rule_annotation(number_is_different_from)
IsNumberBetween = rule_annotation(number_between)
StartsWithOneOf = rule_annotation(starts_with_one_of)
EndsWithOneOf = rule_annotation(ends_with_one_of)
