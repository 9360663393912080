"""Core types for the ruleforge validation engine.

This module defines the data structures shared by every layer:
- RuleContext: what a rule function receives
- RuleDescriptor / ParsedRules: normalized rule specifications
- ValidationRequest: input to a single-value pipeline run
- ValidateTargetOptions: per-class (and per-call) target validation options
- FieldError / TargetReport: outcome of validating a whole record
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ruleforge.i18n.translator import Translator


# Rule function signature: (RuleContext) -> bool | str | Exception, possibly awaitable
RuleResult = Union[bool, str, Exception, None]
RuleFn = Callable[["RuleContext"], Union[RuleResult, Awaitable[RuleResult]]]

# "Name", "Name[p1,p2]", {"Name": [p1, p2]} or a bare rule function
RuleSpec = Union[str, Mapping[str, Any], RuleFn]

# (translated_name, raw_message, details) -> formatted message
ErrorMessageBuilder = Callable[[str, str, dict[str, Any]], str]


@dataclass(frozen=True)
class RuleContext:
    """Runtime arguments passed to every rule function.

    Attributes:
        value: The value being validated (never mutated by the engine)
        rule_params: Parameters parsed from the rule specification
        rule_name: Registered rule name, or None for bare rule functions
        raw_rule_name: The specification the rule was parsed from
        field_name: Name of the field being validated, if any
        translated_name: Display name of the field, if any
        context: Caller-supplied shared context object
        rules: The full rule list of the request
        translator: Translation collaborator used for messages
        extra: Any additional keyword arguments of the request
    """

    value: Any
    rule_params: list[Any] = field(default_factory=list)
    rule_name: str | None = None
    raw_rule_name: str | None = None
    field_name: str | None = None
    translated_name: str | None = None
    context: Any = None
    rules: Any = None
    translator: Translator | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def label(self) -> str:
        """Best available display name for the field."""
        return self.translated_name or self.field_name or ""

    def translate(self, key: str, **params: Any) -> str:
        """Translate a message key with the rule's own details pre-filled."""
        if self.translator is None:
            return key
        values: dict[str, Any] = {
            "field": self.label,
            "value": self.value,
            "rule": self.rule_name or "",
            "ruleParams": self.rule_params,
        }
        values.update(params)
        return self.translator.translate(key, values)


@dataclass(frozen=True)
class RuleDescriptor:
    """A rule specification resolved against the registry.

    Attributes:
        rule_name: Name the rule is registered under
        raw_rule_name: The original specification (e.g. "MinLength[3]")
        params: Parsed parameters (strings for the string grammar)
        rule_function: The registered rule function
    """

    rule_name: str
    raw_rule_name: str
    params: list[Any]
    rule_function: RuleFn


@dataclass
class ParsedRules:
    """Result of parsing a list of rule specifications."""

    sanitized_rules: list[RuleDescriptor | RuleFn] = field(default_factory=list)
    invalid_rules: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationRequest:
    """Input of a single pipeline run; returned unchanged on success."""

    value: Any
    rules: Any = field(default_factory=list)
    field_name: str | None = None
    context: Any = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidateTargetOptions:
    """Options for validating a whole record against its class schema.

    Attributes:
        context: Shared context handed to every rule
        error_message_builder: Formats one message per failing property
    """

    context: Any = None
    error_message_builder: ErrorMessageBuilder | None = None

    @classmethod
    def coerce(cls, options: Any) -> ValidateTargetOptions:
        """Accept None, a mapping or an options instance."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls(
                context=options.get("context"),
                error_message_builder=options.get("error_message_builder"),
            )
        raise TypeError(f"Unsupported validation options: {options!r}")

    def merge(self, other: ValidateTargetOptions | None) -> ValidateTargetOptions:
        """Return new options where non-None values of `other` win."""
        if other is None:
            return ValidateTargetOptions(self.context, self.error_message_builder)
        return ValidateTargetOptions(
            context=other.context if other.context is not None else self.context,
            error_message_builder=other.error_message_builder
            if other.error_message_builder is not None
            else self.error_message_builder,
        )


@dataclass(frozen=True)
class FieldError:
    """A failed property of a validated record.

    Attributes:
        field_name: Name of the failing field
        property_name: Name of the schema property (same as field_name)
        message: Formatted message produced by the error message builder
        raw_message: Message produced by the failing rule
        rule_name: Name of the failing rule, if known
        rule_params: Parameters of the failing rule
        value: The offending value
    """

    field_name: str
    property_name: str
    message: str
    raw_message: str = ""
    rule_name: str | None = None
    rule_params: list[Any] = field(default_factory=list)
    value: Any = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "fieldName": self.field_name,
            "propertyName": self.property_name,
            "message": self.message,
            "rawMessage": self.raw_message,
            "ruleName": self.rule_name,
            "ruleParams": list(self.rule_params),
        }


@dataclass
class TargetReport:
    """Aggregated result of validating a record.

    Attributes:
        success: True if every property passed
        errors: One entry per failing property, in schema order
        data: The validated record (the same object that was passed in)
        message: Summary message when validation failed
    """

    success: bool
    errors: list[FieldError] = field(default_factory=list)
    data: Any = None
    message: str = ""

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success}
        if self.success:
            result["data"] = self.data
        else:
            result["status"] = "error"
            result["message"] = self.message
            result["errors"] = [e.to_dict() for e in self.errors]
        return result
