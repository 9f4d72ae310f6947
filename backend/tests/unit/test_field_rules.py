"""Tests for the setup-form field rules.

Every rule checks required-ness first, then errors, then warnings, and
returns on the first match.
"""

import pytest

from config_validator.validators.field_rules import (
    AccessKeyRule,
    AccountNameRule,
    AppNameRule,
    ControllerHostRule,
    ControllerPortRule,
    NodeNameRule,
    TierNameRule,
    default_field_rules,
    parse_port,
    text_length,
)
from config_validator.validators.models import Severity


REQUIRED_MESSAGES = {
    "controller-host": "Controller host is required",
    "controller-port": "Controller port is required",
    "account-name": "Account name is required",
    "access-key": "Access key is required",
    "app-name": "Application name is required",
    "tier-name": "Tier name is required",
    "node-name": "Node name is required",
}


@pytest.mark.parametrize("rule", default_field_rules(), ids=lambda r: r.field_id)
@pytest.mark.parametrize("value", ["", None])
def test_empty_value_is_required_error(rule, value):
    result = rule.validate(value)
    assert result.severity == Severity.ERROR
    assert result.message == REQUIRED_MESSAGES[rule.field_id]


def test_catalogue_order():
    assert [r.field_id for r in default_field_rules()] == list(REQUIRED_MESSAGES)


class TestControllerHost:
    rule = ControllerHostRule()

    def test_valid_domain(self):
        result = self.rule.validate("acme.saas.appdynamics.com")
        assert result.severity == Severity.SUCCESS
        assert result.message == "Valid controller host"

    def test_space_is_error_even_without_domain(self):
        result = self.rule.validate("my host")
        assert result.severity == Severity.ERROR
        assert result.message == "Host cannot contain spaces"

    def test_foreign_domain_warns(self):
        result = self.rule.validate("controller.example.com")
        assert result.severity == Severity.WARNING
        assert result.message == "Host should be a valid AppDynamics domain"


class TestControllerPort:
    rule = ControllerPortRule()

    @pytest.mark.parametrize("value", ["443", "80", " 443"])
    def test_standard_ports(self, value):
        result = self.rule.validate(value)
        assert result.severity == Severity.SUCCESS
        assert result.message == "Valid port"

    @pytest.mark.parametrize("value", ["8080", "8090", "8080abc"])
    def test_non_standard_port_warns(self, value):
        result = self.rule.validate(value)
        assert result.severity == Severity.WARNING
        assert result.message == "Non-standard port detected"

    @pytest.mark.parametrize("value", ["70000", "0", "-1", "65536"])
    def test_out_of_range(self, value):
        result = self.rule.validate(value)
        assert result.severity == Severity.ERROR
        assert result.message == "Port must be between 1-65535"

    @pytest.mark.parametrize("value", ["abc", " ", "port 443"])
    def test_not_a_number(self, value):
        result = self.rule.validate(value)
        assert result.severity == Severity.ERROR
        assert result.message == "Port must be a number"

    @pytest.mark.parametrize("value", ["0x1BB", "0X50", " 0x1bb"])
    def test_hex_ports_are_read_as_numbers(self, value):
        result = self.rule.validate(value)
        assert result.severity == Severity.SUCCESS
        assert result.message == "Valid port"

    @pytest.mark.parametrize("value", ["0x", "0xZZ", "-0x"])
    def test_hex_prefix_without_digits_is_not_a_number(self, value):
        result = self.rule.validate(value)
        assert result.severity == Severity.ERROR
        assert result.message == "Port must be a number"

    def test_bounds_are_inclusive(self):
        assert self.rule.validate("1").severity == Severity.WARNING
        assert self.rule.validate("65535").severity == Severity.WARNING


def test_text_length_counts_utf16_units():
    assert text_length("web") == 3
    assert text_length("caf\u00e9") == 4
    assert text_length("\U0001F600") == 2


def test_parse_port_reads_leading_integer():
    assert parse_port("443") == 443
    assert parse_port("  80") == 80
    assert parse_port("8080abc") == 8080
    assert parse_port("44.3") == 44
    assert parse_port("+443") == 443
    assert parse_port("abc") is None
    assert parse_port("0x1BB") == 443
    assert parse_port("0x1F90zz") == 8080
    assert parse_port("-0x10") == -16
    assert parse_port("0x") is None
    assert parse_port("007") == 7
    assert parse_port("") is None


class TestAccountName:
    rule = AccountNameRule()

    def test_valid(self):
        assert self.rule.validate("acme").severity == Severity.SUCCESS

    def test_too_short(self):
        result = self.rule.validate("ab")
        assert result.severity == Severity.ERROR
        assert result.message == "Account name too short"

    def test_short_with_space_reports_length_first(self):
        assert self.rule.validate("a ").message == "Account name too short"

    def test_space_warns(self):
        result = self.rule.validate("acme corp")
        assert result.severity == Severity.WARNING
        assert result.message == "Spaces in account name may cause issues"


class TestAccessKey:
    rule = AccessKeyRule()

    def test_valid_twenty_chars(self):
        result = self.rule.validate("ABCDEFGHIJ1234567890")
        assert result.severity == Severity.SUCCESS
        assert result.message == "Valid access key format"

    def test_short_key_reports_length_before_character_classes(self):
        result = self.rule.validate("short")
        assert result.severity == Severity.ERROR
        assert result.message == "Access key appears too short"

    def test_space_is_error(self):
        result = self.rule.validate("ABCDEFGHIJ 123456789")
        assert result.severity == Severity.ERROR
        assert result.message == "Access key cannot contain spaces"

    def test_missing_uppercase(self):
        result = self.rule.validate("abcdefghij1234567890")
        assert result.severity == Severity.WARNING
        assert result.message == "Access key should contain uppercase letters"

    def test_missing_digits(self):
        result = self.rule.validate("ABCDEFGHIJKLMNOPQRST")
        assert result.severity == Severity.WARNING
        assert result.message == "Access key should contain numbers"

    def test_validate_reports_first_warning_only(self):
        result = self.rule.validate("abcdefghijklmnopqrst")
        assert result.message == "Access key should contain uppercase letters"

    def test_findings_lists_every_warning(self):
        findings = self.rule.findings("abcdefghijklmnopqrst")
        assert [f.message for f in findings] == [
            "Access key should contain uppercase letters",
            "Access key should contain numbers",
        ]
        assert all(f.severity == Severity.WARNING for f in findings)

    def test_findings_on_error_is_single_result(self):
        findings = self.rule.findings("short")
        assert len(findings) == 1
        assert findings[0].severity == Severity.ERROR

    def test_findings_on_success(self):
        findings = self.rule.findings("ABCDEFGHIJ1234567890")
        assert [f.severity for f in findings] == [Severity.SUCCESS]


class TestAppName:
    rule = AppNameRule()

    def test_valid(self):
        result = self.rule.validate("checkout_svc-2")
        assert result.severity == Severity.SUCCESS
        assert result.message == "Valid application name"

    def test_length_limit(self):
        assert self.rule.validate("a" * 50).severity == Severity.SUCCESS
        result = self.rule.validate("a" * 51)
        assert result.severity == Severity.WARNING
        assert result.message == "Application name is very long"

    @pytest.mark.parametrize("value", ["my app", "app.name", "café"])
    def test_special_characters(self, value):
        result = self.rule.validate(value)
        assert result.severity == Severity.WARNING
        assert result.message == "Special characters may cause issues"

    def test_findings_long_and_special(self):
        findings = self.rule.findings("a" * 50 + "!")
        assert [f.message for f in findings] == [
            "Application name is very long",
            "Special characters may cause issues",
        ]


class TestNamingLimits:
    def test_tier_name(self):
        rule = TierNameRule()
        assert rule.validate("t" * 30).message == "Valid tier name"
        result = rule.validate("t" * 31)
        assert result.severity == Severity.WARNING
        assert result.message == "Tier name is very long"

    def test_node_name(self):
        rule = NodeNameRule()
        assert rule.validate("n" * 40).message == "Valid node name"
        result = rule.validate("n" * 41)
        assert result.severity == Severity.WARNING
        assert result.message == "Node name is very long"

    def test_astral_characters_count_as_two_units(self):
        assert TierNameRule().validate("\U0001F600" * 15).severity == Severity.SUCCESS
        result = TierNameRule().validate("\U0001F600" * 16)
        assert result.severity == Severity.WARNING
        assert result.message == "Tier name is very long"

    def test_access_key_length_in_utf16_units(self):
        key = "A1" + "\U0001F600" * 9
        assert AccessKeyRule().validate(key).message == "Valid access key format"
        assert AccessKeyRule().validate("A1" + "\U0001F600" * 8).message == "Access key appears too short"

    def test_whitespace_only_is_not_empty(self):
        assert TierNameRule().validate("   ").severity == Severity.SUCCESS


def test_rules_are_deterministic():
    rule = AccessKeyRule()
    assert rule.validate("abcdefghij1234567890") == rule.validate("abcdefghij1234567890")


def test_describe_uses_docstring_summary():
    descriptor = TierNameRule().describe()
    assert descriptor.field == "tier-name"
    assert descriptor.label == "Tier name"
    assert descriptor.description == "Tier name should stay short."
