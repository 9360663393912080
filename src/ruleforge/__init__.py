"""ruleforge: rule-based data validation.

Named rules, a rule specification parser, an asynchronous fail-fast
validation pipeline and class schemas built from declarative annotations.
"""

from ruleforge.validation import (
    RuleContext,
    RuleRegistry,
    RuleValidationError,
    TargetReport,
    TargetValidationError,
    ValidateTargetOptions,
    Validator,
    register_builtin_rules,
    rule,
    validate,
    validate_target,
    validate_target_options,
    validated,
    validation_rules,
)
from ruleforge.i18n import Translator, get_translator
from ruleforge.config import EngineConfig, create_validator

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "RuleContext",
    "RuleRegistry",
    "RuleValidationError",
    "TargetReport",
    "TargetValidationError",
    "Translator",
    "ValidateTargetOptions",
    "Validator",
    "create_validator",
    "get_translator",
    "register_builtin_rules",
    "rule",
    "validate",
    "validate_target",
    "validate_target_options",
    "validated",
    "validation_rules",
]
