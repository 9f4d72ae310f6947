"""Cross-Field Rules — relationships between fields that no single-field rule can see.

Every applicable rule fires; rules are not short-circuited against each other.
"""

from typing import Iterator, Mapping, Optional

from config_validator.validators.base import CrossFieldRule
from config_validator.validators.models import ResultRecord


class IdenticalValuesRule(CrossFieldRule):
    """Warns when two naming fields hold exactly the same non-empty value."""

    def __init__(self, first: str, second: str, report_on: str, message: str):
        self.first = first
        self.second = second
        self.report_on = report_on
        self.message = message

    @property
    def name(self) -> str:
        return f"IdenticalValuesRule({self.first}, {self.second})"

    def validate(self, values: Mapping[str, Optional[str]]) -> Optional[ResultRecord]:
        left = values.get(self.first)
        right = values.get(self.second)
        # Raw comparison, no trimming; empty on either side never matches
        if left and right and left == right:
            return self._warning(self.report_on, self.message)
        return None


def default_cross_field_rules() -> list[CrossFieldRule]:
    """Cross-field rules in evaluation order."""
    return [
        IdenticalValuesRule(
            "app-name", "tier-name",
            report_on="tier-name",
            message="Application and tier names are identical",
        ),
        IdenticalValuesRule(
            "node-name", "tier-name",
            report_on="node-name",
            message="Node and tier names are identical",
        ),
    ]


class CrossFieldRuleSet:
    """Ordered, fixed collection of cross-field rules."""

    def __init__(self, rules: Optional[list[CrossFieldRule]] = None):
        self._rules = tuple(default_cross_field_rules() if rules is None else rules)

    def evaluate(self, values: Mapping[str, Optional[str]]) -> list[ResultRecord]:
        """Run every rule against the snapshot and keep the ones that fired."""
        records = []
        for rule in self._rules:
            record = rule.validate(values)
            if record is not None:
                records.append(record)
        return records

    def __iter__(self) -> Iterator[CrossFieldRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
