"""Single-value validation pipeline.

Runs the rules of one request sequentially and stops at the first rule
that does not pass. Every run is asynchronous, even when all rule
functions are synchronous: execution is deferred by one event loop tick
before the first rule is invoked.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any

from ruleforge.validation.errors import RuleValidationError
from ruleforge.validation.parser import parse_and_validate_rules
from ruleforge.validation.registry import RuleRegistry, default_registry
from ruleforge.validation.types import (
    RuleContext,
    RuleDescriptor,
    RuleFn,
    ValidationRequest,
)

if TYPE_CHECKING:
    from ruleforge.i18n.translator import Translator

logger = logging.getLogger(__name__)

SEPARATOR_KEY = "validator.separators.multiple"


def _bundled_translator() -> Translator:
    from ruleforge.i18n import get_translator

    return get_translator()


class ValidationPipeline:
    """Sequential, fail-fast rule executor for a single value.

    Rule results are interpreted as follows:
    - True (or any other non-failing value): continue with the next rule
    - False or an empty string: fail with the default "invalid" message
    - A non-empty string: fail with that string as the message
    - An exception, returned or raised (sync or async): fail with str(exc)
    """

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        translator: Translator | None = None,
    ):
        self.registry = registry if registry is not None else default_registry
        self.translator = translator if translator is not None else _bundled_translator()

    async def validate(
        self,
        value: Any,
        rules: Any = None,
        *,
        field_name: str | None = None,
        context: Any = None,
        **extra: Any,
    ) -> ValidationRequest:
        """Validate a value against a list of rule specifications.

        Args:
            value: The value to validate
            rules: Rule specifications, run in order
            field_name: Name of the field being validated
            context: Shared context passed to every rule
            **extra: Additional arguments made available to rules

        Returns:
            The ValidationRequest, unchanged, if every rule passed

        Raises:
            RuleValidationError: On an invalid rule reference or the first
                failing rule
        """
        request = ValidationRequest(
            value=value,
            rules=rules if rules is not None else [],
            field_name=field_name,
            context=context,
            extra=extra,
        )
        return await self.run(request)

    async def run(self, request: ValidationRequest) -> ValidationRequest:
        """Execute a prepared request."""
        parsed = parse_and_validate_rules(request.rules, self.registry)

        # Invalid references pre-empt execution of every valid rule
        if parsed.invalid_rules:
            raise self._invalid_rules_error(request, parsed.invalid_rules)

        if not parsed.sanitized_rules:
            return request

        await asyncio.sleep(0)

        for rule in parsed.sanitized_rules:
            await self._apply(request, rule)

        return request

    async def _apply(self, request: ValidationRequest, rule: RuleDescriptor | RuleFn) -> None:
        if isinstance(rule, RuleDescriptor):
            rule_fn = rule.rule_function
            rule_name: str | None = rule.rule_name
            raw_rule_name: str | None = rule.raw_rule_name
            rule_params = list(rule.params)
        else:
            rule_fn = rule
            rule_name = None
            raw_rule_name = None
            rule_params = []

        ctx = RuleContext(
            value=request.value,
            rule_params=rule_params,
            rule_name=rule_name,
            raw_rule_name=raw_rule_name,
            field_name=request.field_name,
            translated_name=request.extra.get("translated_name"),
            context=request.context,
            rules=request.rules,
            translator=self.translator,
            extra=request.extra,
        )

        try:
            result = rule_fn(ctx)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.debug(
                "Rule '%s' raised for field '%s': %r",
                rule_name or getattr(rule_fn, "__name__", rule_fn),
                request.field_name,
                e,
            )
            result = e

        message = self._failure_message(result, ctx, rule_fn)
        if message is None:
            return

        raise RuleValidationError(
            message,
            value=request.value,
            rules=request.rules,
            rule=rule,
            rule_name=rule_name,
            raw_rule_name=raw_rule_name,
            rule_params=rule_params,
            field_name=request.field_name,
            extra=request.extra,
        )

    def _failure_message(self, result: Any, ctx: RuleContext, rule_fn: RuleFn) -> str | None:
        """Return the failure message for a rule result, or None if it passed."""
        if isinstance(result, BaseException):
            return str(result) or type(result).__name__
        if isinstance(result, str):
            return result if result.strip() else self._default_message(ctx, rule_fn)
        if result is False:
            return self._default_message(ctx, rule_fn)
        return None

    def _default_message(self, ctx: RuleContext, rule_fn: RuleFn) -> str:
        rule_label = ctx.rule_name or getattr(rule_fn, "__name__", "")
        return self.translator.translate(
            "validator.invalidMessage",
            rule=rule_label,
            ruleName=ctx.rule_name,
            rawRuleName=ctx.raw_rule_name,
            ruleParams=ctx.rule_params,
            field=ctx.label,
            value=ctx.value,
        )

    def _invalid_rules_error(
        self,
        request: ValidationRequest,
        invalid_rules: list[Any],
    ) -> RuleValidationError:
        logger.debug("Invalid rule reference(s) for field '%s': %s", request.field_name, invalid_rules)
        separator = self.translator.translate(SEPARATOR_KEY)
        if separator == SEPARATOR_KEY:
            separator = ", "
        message = separator.join(
            self.translator.translate(
                "validator.invalidRule",
                rule=rule if isinstance(rule, str) and rule else "unnamed rule",
            )
            for rule in invalid_rules
        )
        return RuleValidationError(
            message,
            value=request.value,
            rules=request.rules,
            field_name=request.field_name,
            invalid_rules=invalid_rules,
            extra=request.extra,
        )
