"""ruleforge validation engine.

This package provides the validation layers:
- Registry: named rule functions
- Parser: rule specifications ("MinLength[3]", {"Between": [1, 5]}, callables)
- Pipeline: sequential, fail-fast validation of one value
- Annotations/Schema: per-class, per-property rule lists
- Target validator: concurrent validation of whole records

Usage:
    from ruleforge.validation import (
        IsRequired,
        RuleRegistry,
        Validator,
        register_builtin_rules,
        validated,
    )

    # At application startup
    registry = RuleRegistry()
    register_builtin_rules(registry)
    validator = Validator(registry=registry)

    @validated(name=[IsRequired, "MinLength[3]"])
    class User:
        name: str

    await validator.validate_target(User, {"name": "Ada"})
"""

from ruleforge.validation.annotations import (
    EndsWithOneOf,
    HasLength,
    HasMaxLength,
    HasMinLength,
    IsEmail,
    IsFileName,
    IsInteger,
    IsNonNullString,
    IsNullable,
    IsNumber,
    IsNumberBetween,
    IsNumberEquals,
    IsNumberGreaterThan,
    IsNumberGreaterThanOrEquals,
    IsNumberIsDifferentFrom,
    IsNumberLessThan,
    IsNumberLessThanOrEquals,
    IsRequired,
    IsString,
    IsUrl,
    PropertyAnnotation,
    StartsWithOneOf,
    rule_annotation,
    validate_target_options,
    validated,
    validation_rules,
)
from ruleforge.validation.errors import (
    CatalogError,
    RuleRegistrationError,
    RuleValidationError,
    TargetValidationError,
    ValidationEngineError,
)
from ruleforge.validation.metadata import (
    TARGET_OPTIONS_KEY,
    TARGET_RULES_KEY,
    MetadataStore,
    default_store,
)
from ruleforge.validation.parser import parse_and_validate_rules, parse_rule_string
from ruleforge.validation.pipeline import ValidationPipeline
from ruleforge.validation.registry import RuleRegistry, default_registry, rule
from ruleforge.validation.rules import register_builtin_rules
from ruleforge.validation.schema import (
    build_target_class,
    get_target_rules,
    get_validate_target_options,
)
from ruleforge.validation.services import (
    Validator,
    find_registered_rule,
    get_default_validator,
    get_rules,
    register_rule,
    validate,
    validate_target,
)
from ruleforge.validation.target import TargetValidator, default_error_message_builder
from ruleforge.validation.types import (
    FieldError,
    ParsedRules,
    RuleContext,
    RuleDescriptor,
    TargetReport,
    ValidateTargetOptions,
    ValidationRequest,
)

__all__ = [
    # Types
    "FieldError",
    "ParsedRules",
    "RuleContext",
    "RuleDescriptor",
    "TargetReport",
    "ValidateTargetOptions",
    "ValidationRequest",
    # Errors
    "CatalogError",
    "RuleRegistrationError",
    "RuleValidationError",
    "TargetValidationError",
    "ValidationEngineError",
    # Registry and parser
    "RuleRegistry",
    "default_registry",
    "rule",
    "parse_and_validate_rules",
    "parse_rule_string",
    "register_builtin_rules",
    # Metadata and annotations
    "MetadataStore",
    "TARGET_OPTIONS_KEY",
    "TARGET_RULES_KEY",
    "default_store",
    "PropertyAnnotation",
    "rule_annotation",
    "validate_target_options",
    "validated",
    "validation_rules",
    "IsRequired",
    "IsNullable",
    "IsNumber",
    "IsInteger",
    "IsString",
    "IsNonNullString",
    "IsEmail",
    "IsUrl",
    "IsFileName",
    "HasLength",
    "HasMinLength",
    "HasMaxLength",
    "IsNumberLessThan",
    "IsNumberLessThanOrEquals",
    "IsNumberGreaterThan",
    "IsNumberGreaterThanOrEquals",
    "IsNumberEquals",
    "IsNumberIsDifferentFrom",
    "IsNumberBetween",
    "StartsWithOneOf",
    "EndsWithOneOf",
    # Schema
    "build_target_class",
    "get_target_rules",
    "get_validate_target_options",
    # Services
    "TargetValidator",
    "ValidationPipeline",
    "Validator",
    "default_error_message_builder",
    "find_registered_rule",
    "get_default_validator",
    "get_rules",
    "register_rule",
    "validate",
    "validate_target",
]
