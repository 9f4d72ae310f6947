"""Field Rules — the fixed catalogue of setup-form fields and their checks.

Thresholds and messages are part of the form's contract with existing
configuration pages and must not drift.
"""

import re
from typing import Optional

from config_validator.validators.base import Check, FieldRule

CONTROLLER_DOMAIN = ".appdynamics.com"
STANDARD_PORTS = {80, 443}
MIN_PORT, MAX_PORT = 1, 65535

MIN_ACCOUNT_NAME_LENGTH = 3
MIN_ACCESS_KEY_LENGTH = 20
MAX_APP_NAME_LENGTH = 50
MAX_TIER_NAME_LENGTH = 30
MAX_NODE_NAME_LENGTH = 40

_HEX_INT = re.compile(r"^\s*([+-]?)0[xX]([0-9a-fA-F]*)")
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
_APP_NAME_SPECIAL = re.compile(r"[^a-zA-Z0-9_\-]")


def text_length(value: str) -> int:
    """Length in UTF-16 code units, so characters outside the BMP count twice."""
    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


def parse_port(value: str) -> Optional[int]:
    """Parse the leading integer of a port value, the way browsers read form input.

    ' 443' → 443, '8080abc' → 8080, '0x1BB' → 443, '0x' → None, 'abc' → None.
    """
    hex_match = _HEX_INT.match(value)
    if hex_match is not None:
        sign, digits = hex_match.groups()
        if not digits:
            return None
        number = int(digits, 16)
        return -number if sign == "-" else number
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


class ControllerHostRule(FieldRule):
    """Controller host must be a space-free AppDynamics domain."""

    field_id = "controller-host"
    label = "Controller host"
    success_message = "Valid controller host"

    def checks(self) -> list[Check]:
        return [
            self._error("Host cannot contain spaces", self._has_space),
            self._warning(
                "Host should be a valid AppDynamics domain",
                lambda v: CONTROLLER_DOMAIN not in v,
            ),
        ]


class ControllerPortRule(FieldRule):
    """Controller port must be an integer in range, ideally 80 or 443."""

    field_id = "controller-port"
    label = "Controller port"
    success_message = "Valid port"

    def checks(self) -> list[Check]:
        return [
            self._error("Port must be a number", lambda v: parse_port(v) is None),
            self._error(
                f"Port must be between {MIN_PORT}-{MAX_PORT}",
                lambda v: not MIN_PORT <= parse_port(v) <= MAX_PORT,
            ),
            self._warning("Non-standard port detected", lambda v: parse_port(v) not in STANDARD_PORTS),
        ]


class AccountNameRule(FieldRule):
    """Account name needs a minimum length and should avoid spaces."""

    field_id = "account-name"
    label = "Account name"
    success_message = "Valid account name"

    def checks(self) -> list[Check]:
        return [
            self._error("Account name too short", lambda v: text_length(v) < MIN_ACCOUNT_NAME_LENGTH),
            self._warning("Spaces in account name may cause issues", self._has_space),
        ]


class AccessKeyRule(FieldRule):
    """Access key format check; the key itself is never verified against a controller."""

    field_id = "access-key"
    label = "Access key"
    success_message = "Valid access key format"

    def checks(self) -> list[Check]:
        return [
            self._error("Access key appears too short", lambda v: text_length(v) < MIN_ACCESS_KEY_LENGTH),
            self._error("Access key cannot contain spaces", self._has_space),
            self._warning("Access key should contain uppercase letters", self._lacks(r"[A-Z]")),
            self._warning("Access key should contain numbers", self._lacks(r"[0-9]")),
        ]


class AppNameRule(FieldRule):
    """Application name should be short and limited to letters, digits, '_' and '-'."""

    field_id = "app-name"
    label = "Application name"
    success_message = "Valid application name"

    def checks(self) -> list[Check]:
        return [
            self._warning("Application name is very long", lambda v: text_length(v) > MAX_APP_NAME_LENGTH),
            self._warning(
                "Special characters may cause issues",
                lambda v: _APP_NAME_SPECIAL.search(v) is not None,
            ),
        ]


class TierNameRule(FieldRule):
    """Tier name should stay short."""

    field_id = "tier-name"
    label = "Tier name"
    success_message = "Valid tier name"

    def checks(self) -> list[Check]:
        return [
            self._warning("Tier name is very long", lambda v: text_length(v) > MAX_TIER_NAME_LENGTH),
        ]


class NodeNameRule(FieldRule):
    """Node name should stay short."""

    field_id = "node-name"
    label = "Node name"
    success_message = "Valid node name"

    def checks(self) -> list[Check]:
        return [
            self._warning("Node name is very long", lambda v: text_length(v) > MAX_NODE_NAME_LENGTH),
        ]


def default_field_rules() -> list[FieldRule]:
    """The setup-form catalogue, in form order."""
    return [
        ControllerHostRule(),
        ControllerPortRule(),
        AccountNameRule(),
        AccessKeyRule(),
        AppNameRule(),
        TierNameRule(),
        NodeNameRule(),
    ]
