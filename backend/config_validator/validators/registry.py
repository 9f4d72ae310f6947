"""Rule Registry — one field rule per known field identifier."""

from typing import Iterator, Optional

from config_validator.validators.base import FieldRule
from config_validator.validators.field_rules import default_field_rules
from config_validator.validators.models import NO_RULES_MESSAGE, FieldResult, RuleDescriptor, Severity


class RuleRegistry:
    """Immutable lookup from field identifier to its rule.

    Rules are fixed at construction; registering two rules for the same field
    is a programming error.
    """

    def __init__(self, rules: Optional[list[FieldRule]] = None):
        self._rules: dict[str, FieldRule] = {}
        for rule in default_field_rules() if rules is None else rules:
            if rule.field_id in self._rules:
                raise ValueError(f"Duplicate rule for field '{rule.field_id}'")
            self._rules[rule.field_id] = rule

    def validate_field(self, field_id: str, value: Optional[str]) -> FieldResult:
        """Run the rule registered for field_id; unknown fields get an info result."""
        rule = self._rules.get(field_id)
        if rule is None:
            return FieldResult(severity=Severity.INFO, message=NO_RULES_MESSAGE)
        return rule.validate(value)

    def findings(self, field_id: str, value: Optional[str]) -> list[FieldResult]:
        rule = self._rules.get(field_id)
        if rule is None:
            return [FieldResult(severity=Severity.INFO, message=NO_RULES_MESSAGE)]
        return rule.findings(value)

    def get(self, field_id: str) -> Optional[FieldRule]:
        return self._rules.get(field_id)

    @property
    def field_ids(self) -> list[str]:
        """Registered identifiers in registration order."""
        return list(self._rules)

    def catalogue(self) -> list[RuleDescriptor]:
        return [rule.describe() for rule in self._rules.values()]

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._rules

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)
