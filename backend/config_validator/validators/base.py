"""Base rules — abstract classes for field and cross-field validation.

Each rule is a standalone, independently testable unit.
New rules are added without modifying the engine.
"""

from abc import ABC, abstractmethod
import re
from typing import Callable, Mapping, NamedTuple, Optional

from config_validator.validators.models import FieldResult, ResultRecord, RuleDescriptor, Severity


class Check(NamedTuple):
    """One ordered precondition of a field rule: when `applies(value)` is true, report it."""

    severity: Severity
    message: str
    applies: Callable[[str], bool]


class FieldRule(ABC):
    """Abstract base for single-field rules.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() never raises for malformed input, it reports it
        - An empty or missing value is always reported as required first
        - checks() lists errors before warnings; the first match wins
    """

    field_id: str = ""
    label: str = ""
    success_message: str = ""

    @property
    def name(self) -> str:
        """Human-readable name for logging."""
        return type(self).__name__

    @abstractmethod
    def checks(self) -> list[Check]:
        """Ordered checks run once the required check has passed."""
        ...

    def validate(self, value: Optional[str]) -> FieldResult:
        if not value:
            return self._result(Severity.ERROR, f"{self.label} is required")
        for check in self.checks():
            if check.applies(value):
                return self._result(check.severity, check.message)
        return self._result(Severity.SUCCESS, self.success_message)

    def findings(self, value: Optional[str]) -> list[FieldResult]:
        """Like validate(), but lists every applicable warning once all errors pass."""
        first = self.validate(value)
        if first.severity != Severity.WARNING:
            return [first]
        return [
            self._result(check.severity, check.message)
            for check in self.checks()
            if check.severity == Severity.WARNING and check.applies(value)
        ]

    def describe(self) -> RuleDescriptor:
        summary = self.__doc__.strip().splitlines()[0] if self.__doc__ else None
        return RuleDescriptor(field=self.field_id, label=self.label, description=summary)

    # ── Helper Methods ──

    def _result(self, severity: Severity, message: str) -> FieldResult:
        """Convenience method to create a FieldResult."""
        return FieldResult(severity=severity, message=message)

    def _error(self, message: str, applies: Callable[[str], bool]) -> Check:
        return Check(Severity.ERROR, message, applies)

    def _warning(self, message: str, applies: Callable[[str], bool]) -> Check:
        return Check(Severity.WARNING, message, applies)

    @staticmethod
    def _has_space(value: str) -> bool:
        return " " in value

    @staticmethod
    def _lacks(pattern: str) -> Callable[[str], bool]:
        """Predicate that is true when the pattern is not found anywhere in the value."""
        compiled = re.compile(pattern)
        return lambda value: compiled.search(value) is None


class CrossFieldRule(ABC):
    """Abstract base for rules that inspect several fields together.

    validate() returns None when the rule does not apply, otherwise a single
    ResultRecord attached to the field the finding should be shown on.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, values: Mapping[str, Optional[str]]) -> Optional[ResultRecord]:
        ...

    def _warning(self, field: str, message: str) -> ResultRecord:
        return ResultRecord(field=field, severity=Severity.WARNING, message=message)
