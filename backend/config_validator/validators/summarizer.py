"""Summarizer — reduces a result list to one deployment-readiness verdict."""

from typing import Iterable

from config_validator.validators.models import ResultRecord, Severity, ValidationSummary

READY_MESSAGE = "Configuration valid! Ready for deployment"


def summarize(results: Iterable[ResultRecord]) -> ValidationSummary:
    """Count errors and warnings; any single error outranks any number of warnings."""
    error_count = 0
    warning_count = 0
    for record in results:
        if record.severity == Severity.ERROR:
            error_count += 1
        elif record.severity == Severity.WARNING:
            warning_count += 1

    if error_count > 0:
        severity = Severity.ERROR
        message = f"{error_count} error(s) must be fixed"
    elif warning_count > 0:
        severity = Severity.WARNING
        message = f"{warning_count} warning(s) - review recommended"
    else:
        severity = Severity.SUCCESS
        message = READY_MESSAGE

    return ValidationSummary(
        severity=severity,
        message=message,
        error_count=error_count,
        warning_count=warning_count,
    )
