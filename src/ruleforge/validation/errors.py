"""Exceptions raised by the ruleforge validation engine.

Validation failures are reported by raising; every exception carries the
structured payload a caller needs to present the failure.
"""

from typing import Any

from ruleforge.validation.types import FieldError, TargetReport


class ValidationEngineError(Exception):
    """Base class for all ruleforge errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class RuleRegistrationError(ValidationEngineError, ValueError):
    """A rule could not be registered (bad name or non-callable)."""
    pass


class CatalogError(ValidationEngineError):
    """A translation catalog could not be loaded."""
    pass


class RuleValidationError(ValidationEngineError):
    """A single-value pipeline run failed.

    Raised either because a rule specification references an unregistered
    rule (`invalid_rules` is non-empty and no rule ran) or because a rule
    returned a failing result.
    """

    def __init__(
        self,
        message: str,
        *,
        value: Any = None,
        rules: Any = None,
        rule: Any = None,
        rule_name: str | None = None,
        raw_rule_name: str | None = None,
        rule_params: list[Any] | None = None,
        field_name: str | None = None,
        invalid_rules: list[Any] | None = None,
        extra: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.value = value
        self.rules = rules
        self.rule = rule
        self.rule_name = rule_name
        self.raw_rule_name = raw_rule_name
        self.rule_params = list(rule_params or [])
        self.field_name = field_name
        self.invalid_rules = list(invalid_rules or [])
        self.extra = dict(extra or {})

    @property
    def is_invalid_rule(self) -> bool:
        return bool(self.invalid_rules)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "value": self.value,
            "ruleName": self.rule_name,
            "rawRuleName": self.raw_rule_name,
            "ruleParams": self.rule_params,
            "fieldName": self.field_name,
            "invalidRules": [str(r) for r in self.invalid_rules],
        }


class TargetValidationError(ValidationEngineError):
    """One or more properties of a record failed validation."""

    status = "error"
    success = False

    def __init__(self, message: str, errors: list[FieldError], data: Any = None):
        super().__init__(message)
        self.errors = list(errors)
        self.data = data

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    @property
    def report(self) -> TargetReport:
        return TargetReport(
            success=False,
            errors=list(self.errors),
            data=self.data,
            message=self.message,
        )

    def to_dict(self) -> dict[str, Any]:
        return self.report.to_dict()
