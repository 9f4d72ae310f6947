"""Setup-form validator — deterministic rule engine for monitoring agent configuration.

Usage:
    from config_validator.validators import validation_engine

    report = validation_engine.validate_form(form_values)
    if not report.can_proceed:
        # Show report.issues and block deployment
"""

from config_validator.validators.engine import ValidationEngine, validation_engine
from config_validator.validators.registry import RuleRegistry
from config_validator.validators.cross_field import CrossFieldRuleSet
from config_validator.validators.summarizer import summarize
from config_validator.validators.models import (
    FieldResult,
    ResultRecord,
    Severity,
    ValidationReport,
    ValidationSummary,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "RuleRegistry",
    "CrossFieldRuleSet",
    "summarize",
    "FieldResult",
    "ResultRecord",
    "Severity",
    "ValidationReport",
    "ValidationSummary",
]
