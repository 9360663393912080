"""Validator facade for ruleforge.

The Validator wires a rule registry, a translator and a metadata store
together and exposes every engine operation. Module-level functions
delegate to a process-wide default Validator that uses default_registry
(with the built-in rules registered), the bundled translator and
default_store.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ruleforge.validation.metadata import MetadataStore, default_store
from ruleforge.validation.parser import parse_and_validate_rules
from ruleforge.validation.pipeline import ValidationPipeline
from ruleforge.validation.registry import RuleRegistry, default_registry
from ruleforge.validation.rules import register_builtin_rules
from ruleforge.validation.schema import get_target_rules, get_validate_target_options
from ruleforge.validation.target import TargetValidator
from ruleforge.validation.types import (
    ParsedRules,
    RuleFn,
    RuleSpec,
    TargetReport,
    ValidateTargetOptions,
    ValidationRequest,
)

if TYPE_CHECKING:
    from ruleforge.i18n.translator import Translator


class Validator:
    """Entry point for rule registration and validation.

    Example:
        validator = Validator(registry=RuleRegistry())
        validator.register_rule("IsEven", lambda ctx: ctx.value % 2 == 0 or "must be even")

        await validator.validate(4, ["IsEven"])   # returns the request
        await validator.validate(3, ["IsEven"])   # raises RuleValidationError
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        translator: Translator | None = None,
        store: MetadataStore | None = None,
    ):
        self.registry = registry if registry is not None else default_registry
        self.store = store if store is not None else default_store
        self.pipeline = ValidationPipeline(self.registry, translator)
        self.translator = self.pipeline.translator
        self.target_validator = TargetValidator(self.pipeline, self.translator, self.store)

    # Registry

    def register_rule(self, name: str, rule_fn: RuleFn) -> None:
        self.registry.register_rule(name, rule_fn)

    def get_rules(self) -> dict[str, RuleFn]:
        return self.registry.get_rules()

    def find_registered_rule(self, name: str) -> RuleFn | None:
        return self.registry.find_registered_rule(name)

    # Parsing and validation

    def parse_and_validate_rules(self, specs: Any) -> ParsedRules:
        return parse_and_validate_rules(specs, self.registry)

    async def validate(
        self,
        value: Any,
        rules: list[RuleSpec] | None = None,
        *,
        field_name: str | None = None,
        context: Any = None,
        **extra: Any,
    ) -> ValidationRequest:
        return await self.pipeline.validate(
            value, rules, field_name=field_name, context=context, **extra
        )

    async def validate_target(
        self,
        target: Any,
        data: Any,
        options: ValidateTargetOptions | Mapping[str, Any] | None = None,
    ) -> TargetReport:
        return await self.target_validator.validate_target(target, data, options)

    async def validate_target_report(
        self,
        target: Any,
        data: Any,
        options: ValidateTargetOptions | Mapping[str, Any] | None = None,
    ) -> TargetReport:
        return await self.target_validator.validate_target_report(target, data, options)

    # Schema

    def get_target_rules(self, target: Any) -> dict[str, list[RuleSpec]]:
        return get_target_rules(target, self.store)

    def get_validate_target_options(self, target: Any) -> ValidateTargetOptions:
        return get_validate_target_options(target, self.store)


_default_validator: Validator | None = None


def get_default_validator() -> Validator:
    """Process-wide Validator; registers the built-in rules on first use.

    Rules already registered on default_registry under a built-in name are
    kept.
    """
    global _default_validator
    if _default_validator is None:
        register_builtin_rules(default_registry, overwrite=False)
        _default_validator = Validator()
    return _default_validator


def register_rule(name: str, rule_fn: RuleFn) -> None:
    """Register a rule on default_registry (last write wins)."""
    default_registry.register_rule(name, rule_fn)


def get_rules() -> dict[str, RuleFn]:
    return get_default_validator().get_rules()


def find_registered_rule(name: str) -> RuleFn | None:
    return get_default_validator().find_registered_rule(name)


async def validate(
    value: Any,
    rules: list[RuleSpec] | None = None,
    **kwargs: Any,
) -> ValidationRequest:
    return await get_default_validator().validate(value, rules, **kwargs)


async def validate_target(
    target: Any,
    data: Any,
    options: ValidateTargetOptions | Mapping[str, Any] | None = None,
) -> TargetReport:
    return await get_default_validator().validate_target(target, data, options)
