"""Validation Engine — orchestrates field and cross-field rules, produces the verdict.

This is the main entry point for setup-form validation. It runs the registered
field rule for every submitted field, then every cross-field rule, and reduces
the flat result list to a summary.

Usage:
    engine = ValidationEngine()
    results = engine.evaluate_all(form_values)
    summary = engine.summarize(results)
    if not summary.can_proceed:
        # Block deployment until errors are fixed
"""

import time
from typing import Mapping, Optional

import structlog

from config_validator.validators.cross_field import CrossFieldRuleSet
from config_validator.validators.models import (
    FieldResult,
    ResultRecord,
    Severity,
    ValidationReport,
    ValidationSummary,
)
from config_validator.validators.registry import RuleRegistry
from config_validator.validators.summarizer import summarize

logger = structlog.get_logger()


class ValidationEngine:
    """Stateless evaluator over a registry and a cross-field rule set.

    Design principles:
        - Deterministic: same input → same output, in the same order
        - Never aborts: one bad field never stops evaluation of the others
        - Observable: logs every evaluation pass with timing
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        cross_field_rules: Optional[CrossFieldRuleSet] = None,
        report_all_warnings: bool = False,
    ):
        """Initialize with the default catalogue or custom rules.

        Args:
            registry: Field rules. If None, uses the setup-form catalogue.
            cross_field_rules: Cross-field rules. If None, uses the defaults.
            report_all_warnings: Emit one record per applicable warning of a
                field instead of only the first matching check.
        """
        self.registry = registry if registry is not None else RuleRegistry()
        self.cross_field_rules = cross_field_rules if cross_field_rules is not None else CrossFieldRuleSet()
        self.report_all_warnings = report_all_warnings

    def validate_field(self, field_id: str, value: Optional[str]) -> FieldResult:
        """Validate a single field, e.g. on every input change."""
        return self.registry.validate_field(field_id, value)

    def evaluate_all(self, values: Mapping[str, Optional[str]]) -> list[ResultRecord]:
        """Evaluate a snapshot of form values.

        Args:
            values: Field identifier → raw value. Iteration order is preserved.

        Returns:
            Field records in input order, followed by cross-field records
        """
        start_time = time.perf_counter()
        results: list[ResultRecord] = []

        for field_id, value in values.items():
            try:
                if self.report_all_warnings:
                    field_results = self.registry.findings(field_id, value)
                else:
                    field_results = [self.registry.validate_field(field_id, value)]
            except Exception as e:
                logger.error("rule_failed", field=field_id, error=str(e))
                field_results = [FieldResult(severity=Severity.ERROR, message=f"Validation rule crashed: {e}")]
            results.extend(ResultRecord.from_result(field_id, r) for r in field_results)

        for rule in self.cross_field_rules:
            try:
                record = rule.validate(values)
            except Exception as e:
                logger.error("cross_field_rule_failed", rule=rule.name, error=str(e))
                record = ResultRecord(
                    field=rule.name,
                    severity=Severity.ERROR,
                    message=f"Validation rule crashed: {e}",
                )
            if record is not None:
                results.append(record)

        logger.debug(
            "evaluation_complete",
            fields=len(values),
            records=len(results),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return results

    def summarize(self, results: list[ResultRecord]) -> ValidationSummary:
        return summarize(results)

    def validate_form(
        self,
        fields: Mapping[str, Optional[str]],
        extra_fields: Optional[Mapping[str, Optional[str]]] = None,
    ) -> ValidationReport:
        """Validate a whole setup form and produce the report.

        Every catalogue field is evaluated, missing ones as empty. Submitted
        values and then extra fields are laid over the catalogue; a key that is
        already present keeps its position.

        Args:
            fields: Submitted form values
            extra_fields: Caller-specific fields validated alongside the form

        Returns:
            ValidationReport with ordered results, summary and can_proceed
        """
        form_data: dict[str, Optional[str]] = {field_id: None for field_id in self.registry.field_ids}
        form_data.update(fields)
        if extra_fields:
            form_data.update(extra_fields)

        results = self.evaluate_all(form_data)
        summary = self.summarize(results)
        report = ValidationReport.build(results, summary)

        logger.info(
            "validation_complete",
            can_proceed=report.can_proceed,
            severity=summary.severity,
            error_count=summary.error_count,
            warning_count=summary.warning_count,
            total_records=len(results),
        )

        return report


# Module-level default; the engine holds no mutable state
validation_engine = ValidationEngine()
