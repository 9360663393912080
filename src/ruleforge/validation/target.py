"""Whole-record validation against a class schema.

Every schema property gets its own pipeline run; the runs execute
concurrently and each failure is caught individually, so one failing
property never aborts its siblings. Errors are reported in schema order.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ruleforge.validation.errors import RuleValidationError, TargetValidationError
from ruleforge.validation.metadata import MetadataStore, class_of, default_store
from ruleforge.validation.pipeline import ValidationPipeline
from ruleforge.validation.schema import get_target_rules, get_validate_target_options
from ruleforge.validation.types import FieldError, RuleSpec, TargetReport, ValidateTargetOptions

if TYPE_CHECKING:
    from ruleforge.i18n.translator import Translator

logger = logging.getLogger(__name__)


def default_error_message_builder(translated_name: str, message: str, details: dict[str, Any]) -> str:
    return f"[{translated_name}] : {message}"


def read_property(data: Any, property_name: str) -> Any:
    """Read a property from a mapping or an object."""
    if data is None:
        return None
    if isinstance(data, Mapping):
        return data.get(property_name)
    return getattr(data, property_name, None)


class TargetValidator:
    """Validates records against the schema of their class."""

    def __init__(
        self,
        pipeline: ValidationPipeline,
        translator: Translator | None = None,
        store: MetadataStore | None = None,
    ):
        self.pipeline = pipeline
        self.translator = translator if translator is not None else pipeline.translator
        self.store = store if store is not None else default_store

    async def validate_target(
        self,
        target: Any,
        data: Any,
        options: ValidateTargetOptions | Mapping[str, Any] | None = None,
    ) -> TargetReport:
        """Validate `data` against the schema of `target`.

        Args:
            target: The record class (or an instance of it)
            data: The record, as a mapping or an object with attributes
            options: Call-site options; non-None values override the class's

        Returns:
            A successful TargetReport whose `data` is the record passed in

        Raises:
            TargetValidationError: If one or more properties failed
        """
        report = await self.validate_target_report(target, data, options)
        if not report.success:
            raise TargetValidationError(report.message, report.errors, data=data)
        return report

    async def validate_target_report(
        self,
        target: Any,
        data: Any,
        options: ValidateTargetOptions | Mapping[str, Any] | None = None,
    ) -> TargetReport:
        """Like validate_target(), but returns the report instead of raising."""
        schema = get_target_rules(target, self.store)
        merged = get_validate_target_options(target, self.store).merge(
            ValidateTargetOptions.coerce(options)
        )
        if not schema:
            return TargetReport(success=True, data=data)

        translated = self.translator.translate_target(target, data=data) or {}
        property_names = list(schema)

        # Run all properties in parallel; gather preserves schema order
        outcomes = await asyncio.gather(
            *(
                self._validate_property(
                    name,
                    schema[name],
                    data,
                    self._translated_name(translated, name),
                    merged,
                )
                for name in property_names
            ),
            return_exceptions=True,
        )

        errors: list[FieldError] = []
        for name, outcome in zip(property_names, outcomes):
            if isinstance(outcome, BaseException):
                # The error message builder itself failed
                errors.append(
                    FieldError(
                        field_name=name,
                        property_name=name,
                        message=str(outcome) or type(outcome).__name__,
                        raw_message=str(outcome),
                        value=read_property(data, name),
                    )
                )
            elif outcome is not None:
                errors.append(outcome)

        if not errors:
            return TargetReport(success=True, data=data)

        message = self.translator.translate("validator.failedForNFields", count=len(errors))
        logger.info(
            "Validation of %s failed for %d field(s): %s",
            class_of(target).__name__,
            len(errors),
            ", ".join(e.property_name for e in errors),
        )
        return TargetReport(success=False, errors=errors, data=data, message=message)

    async def _validate_property(
        self,
        property_name: str,
        rules: list[RuleSpec],
        data: Any,
        translated_name: str,
        options: ValidateTargetOptions,
    ) -> FieldError | None:
        value = read_property(data, property_name)
        try:
            await self.pipeline.validate(
                value,
                rules,
                field_name=property_name,
                context=options.context,
                property_name=property_name,
                translated_name=translated_name,
                data=data,
            )
        except RuleValidationError as e:
            raw_message = e.message
            rule_name = e.rule_name
            rule_params = e.rule_params
        except Exception as e:
            raw_message = str(e) or type(e).__name__
            rule_name = None
            rule_params = []
        else:
            return None

        builder = options.error_message_builder or default_error_message_builder
        details = {
            "property_name": property_name,
            "translated_name": translated_name,
            "message": raw_message,
            "rule_name": rule_name,
            "rule_params": rule_params,
            "value": value,
            "data": data,
        }
        return FieldError(
            field_name=property_name,
            property_name=property_name,
            message=builder(translated_name, raw_message, details),
            raw_message=raw_message,
            rule_name=rule_name,
            rule_params=rule_params,
            value=value,
        )

    @staticmethod
    def _translated_name(translated: Mapping[str, Any], property_name: str) -> str:
        name = translated.get(property_name)
        return name if isinstance(name, str) and name.strip() else property_name
