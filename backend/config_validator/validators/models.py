"""Validation models — severity levels, per-field results, summary and report structure.

All validation is deterministic: same input → same output, no I/O, no network calls.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Validation outcome classification.

    For aggregation: error outranks warning, which outranks success and info.
    """

    SUCCESS = "success"  # Value passed every check
    WARNING = "warning"  # Advisory, does not block deployment
    ERROR = "error"      # Must be fixed before deployment
    INFO = "info"        # No rules apply to this field


NO_RULES_MESSAGE = "No validation rules for this field"


class FieldResult(BaseModel):
    """Outcome of a single field rule."""

    severity: Severity
    message: str

    model_config = {"use_enum_values": True, "frozen": True}


class ResultRecord(BaseModel):
    """A single entry of a full evaluation pass."""

    field: str
    severity: Severity
    message: str

    model_config = {"use_enum_values": True, "frozen": True}

    @classmethod
    def from_result(cls, field: str, result: FieldResult) -> "ResultRecord":
        return cls(field=field, severity=result.severity, message=result.message)


class ValidationSummary(BaseModel):
    """Aggregate verdict over all result records of one evaluation pass."""

    severity: Severity
    message: str
    error_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)

    model_config = {"use_enum_values": True, "frozen": True}

    @property
    def can_proceed(self) -> bool:
        """Warnings are advisory; only errors block deployment."""
        return self.error_count == 0


class ValidationReport(BaseModel):
    """Complete output of a form validation — results plus verdict."""

    results: list[ResultRecord] = Field(default_factory=list)
    summary: ValidationSummary
    can_proceed: bool = Field(description="True when the summary has no errors")

    @classmethod
    def build(cls, results: list[ResultRecord], summary: ValidationSummary) -> "ValidationReport":
        return cls(results=results, summary=summary, can_proceed=summary.can_proceed)

    @property
    def issues(self) -> list[ResultRecord]:
        """Every record that is not a success, in evaluation order."""
        return [r for r in self.results if r.severity != Severity.SUCCESS]

    def for_field(self, field: str) -> list[ResultRecord]:
        return [r for r in self.results if r.field == field]


class RuleDescriptor(BaseModel):
    """Catalogue entry for a registered field rule."""

    field: str
    label: str
    required: bool = True
    description: Optional[str] = None
