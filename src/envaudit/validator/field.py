"""Per-field validation — one rule against one value.

Evaluation order:
  1. presence (required and blank → critical error, stop)
  2. optional and blank → nothing, stop
  3. length bounds
  4. format pattern
  5. entropy (encryption keys only)
  6. placeholder markers
  7. weak / default values

Every check after the presence step runs, so a field may collect several
findings.
"""

from __future__ import annotations

import re
from typing import List, Optional, Union

from envaudit.findings.models import Findings, SecretError, SecretWarning, Severity
from envaudit.rules.models import SecretRule
from envaudit.validator.entropy import shannon_entropy

PLACEHOLDER_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"your[_-]?[a-zA-Z0-9_-]+",
        r"placeholder",
        r"example",
        r"test[_-]?[a-zA-Z0-9_-]+",
        r"demo",
        r"sample",
        r"dummy",
        r"fake",
        r"mock",
        r"changeme",
        r"replace",
    )
)

WEAK_VALUES: tuple[str, ...] = (
    "password",
    "123456",
    "admin",
    "secret",
    "key",
    "token",
    "test",
    "demo",
    "example",
    "default",
    "changeme",
)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_placeholder(value: str) -> bool:
    return any(p.search(value) for p in PLACEHOLDER_PATTERNS)


def is_weak_value(value: str) -> bool:
    lowered = value.lower()
    return any(weak in lowered for weak in WEAK_VALUES)


def validate_field(name: str, rule: SecretRule, value: Optional[str]) -> Findings:
    """Validate *value* for field *name* against *rule*."""
    if value is None or is_blank(value):
        if rule.required:
            return Findings.of(
                SecretError(
                    field=name,
                    message=f"{name} is required but not set",
                    severity=Severity.CRITICAL,
                    suggestion=f"Set {name} in your environment configuration",
                    security_impact="Critical security vulnerability - service will not function",
                )
            )
        return Findings()

    found: List[Union[SecretError, SecretWarning]] = []

    if rule.min_length is not None and len(value) < rule.min_length:
        found.append(
            SecretError(
                field=name,
                message=f"{name} is too short (minimum {rule.min_length} characters)",
                severity=Severity.ERROR,
                suggestion=f"Ensure {name} is at least {rule.min_length} characters long",
                security_impact="Insufficient length may compromise security",
            )
        )

    # Overlong values are a hygiene concern, not a failure
    if rule.max_length is not None and len(value) > rule.max_length:
        found.append(
            SecretWarning(
                field=name,
                message=f"{name} is too long (maximum {rule.max_length} characters)",
                suggestion=f"Consider shortening {name} to improve performance",
                security_impact="Excessive length may impact performance",
            )
        )

    if not rule.matches_format(value):
        found.append(
            SecretError(
                field=name,
                message=f"{name} does not match expected format",
                severity=Severity.ERROR,
                suggestion=f"Ensure {name} follows the correct format: {rule.example}",
                security_impact="Invalid format may cause authentication failures",
            )
        )

    if rule.checks_entropy:
        entropy = shannon_entropy(value)
        if entropy < rule.min_entropy:  # type: ignore[operator]
            found.append(
                SecretWarning(
                    field=name,
                    message=f"{name} has low entropy ({entropy:.2f} bits)",
                    suggestion=(
                        "Use a more random key with higher entropy "
                        f"(minimum {rule.min_entropy} bits)"
                    ),
                    security_impact="Low entropy reduces cryptographic security",
                )
            )

    if is_placeholder(value):
        found.append(
            SecretError(
                field=name,
                message=f"{name} contains placeholder text",
                severity=Severity.CRITICAL,
                suggestion=f"Replace placeholder with actual {rule.description}",
                security_impact="Placeholder values are a critical security vulnerability",
            )
        )

    if is_weak_value(value):
        found.append(
            SecretWarning(
                field=name,
                message=f"{name} appears to be a weak or default value",
                suggestion=f"Use a strong, unique value for {rule.description}",
                security_impact="Weak values are easily compromised",
            )
        )

    return Findings.of(*found)
