"""Cross-field security analysis over the whole secret map.

These checks only ever produce warnings and recommendations; single-field
correctness failures belong to :mod:`envaudit.validator.field`.
"""

from __future__ import annotations

from functools import reduce
from typing import Dict, List, Mapping

from envaudit.findings.models import (
    Findings,
    Priority,
    SecretRecommendation,
    SecretWarning,
)
from envaudit.validator.entropy import has_low_entropy

DUPLICATE_MIN_LENGTH = 10
MIN_KEY_LENGTH = 32

JWT_SECRET_FIELD = "JWT_SECRET"
ENCRYPTION_KEY_FIELD = "ENCRYPTION_KEY"
SERVICE_ROLE_FIELD = "SUPABASE_SERVICE_ROLE_KEY"
ENVIRONMENT_FIELD = "NODE_ENV"

# Fields whose presence earns a hygiene bonus in the score
BONUS_FIELDS: tuple[str, ...] = (JWT_SECRET_FIELD, ENCRYPTION_KEY_FIELD, SERVICE_ROLE_FIELD)


def check_duplicates(secrets: Mapping[str, str]) -> Findings:
    """One warning per value shared by two or more fields."""
    by_value: Dict[str, List[str]] = {}
    for name, value in secrets.items():
        if value and len(value) > DUPLICATE_MIN_LENGTH:
            by_value.setdefault(value, []).append(name)

    return Findings.of(*(
        SecretWarning(
            field=", ".join(names),
            message="Duplicate secret values detected",
            suggestion="Use unique values for each secret to improve security",
            security_impact="Duplicate secrets reduce security isolation",
        )
        for names in by_value.values()
        if len(names) > 1
    ))


def _has_credentials_in_url(value: str) -> bool:
    scheme_at = value.find("://")
    return scheme_at != -1 and "@" in value[scheme_at + 3:]


def check_credentials_in_urls(secrets: Mapping[str, str]) -> Findings:
    return Findings.of(*(
        SecretWarning(
            field=name,
            message="Secret may contain credentials in URL",
            suggestion="Use separate fields for URL and credentials",
            security_impact="Credentials in URLs may be logged or exposed",
        )
        for name, value in secrets.items()
        if value and _has_credentials_in_url(value)
    ))


def check_weak_encryption(secrets: Mapping[str, str]) -> Findings:
    """Audit every *KEY* / *SECRET* field for length and entropy."""
    found: List[SecretWarning] = []
    for name, value in secrets.items():
        if not value or ("KEY" not in name and "SECRET" not in name):
            continue
        if len(value) < MIN_KEY_LENGTH:
            found.append(
                SecretWarning(
                    field=name,
                    message="Encryption key is too short",
                    suggestion=f"Use at least {MIN_KEY_LENGTH} characters for encryption keys",
                    security_impact="Short keys are vulnerable to brute force attacks",
                )
            )
        if has_low_entropy(value):
            found.append(
                SecretWarning(
                    field=name,
                    message="Encryption key has low entropy",
                    suggestion="Use a cryptographically secure random generator",
                    security_impact="Low entropy keys are predictable and insecure",
                )
            )
    return Findings.of(*found)


def check_missing_security(secrets: Mapping[str, str]) -> Findings:
    found: List[SecretRecommendation | SecretWarning] = []
    if not secrets.get(JWT_SECRET_FIELD):
        found.append(
            SecretRecommendation(
                field=JWT_SECRET_FIELD,
                recommendation=f"Configure {JWT_SECRET_FIELD} for secure token signing",
                priority=Priority.HIGH,
                security_benefit="Prevents token forgery and improves authentication security",
            )
        )
    if not secrets.get(ENCRYPTION_KEY_FIELD):
        found.append(
            SecretRecommendation(
                field=ENCRYPTION_KEY_FIELD,
                recommendation=f"Configure {ENCRYPTION_KEY_FIELD} for data encryption",
                priority=Priority.MEDIUM,
                security_benefit="Enables encryption of sensitive data at rest",
            )
        )
    if not secrets.get(SERVICE_ROLE_FIELD):
        found.append(
            SecretWarning(
                field=SERVICE_ROLE_FIELD,
                message="Service role key not configured",
                suggestion="Configure service role key for server-side operations",
                security_impact="Some features may not work without service role access",
            )
        )
    return Findings.of(*found)


def check_transport(secrets: Mapping[str, str]) -> Findings:
    if not any(value.startswith("http://") for value in secrets.values() if value):
        return Findings()
    return Findings.of(
        SecretRecommendation(
            field="URLs",
            recommendation="Use HTTPS for all URLs",
            priority=Priority.CRITICAL,
            security_benefit="Prevents man-in-the-middle attacks and data interception",
        )
    )


def check_environment(secrets: Mapping[str, str]) -> Findings:
    if (secrets.get(ENVIRONMENT_FIELD) or "development") != "production":
        return Findings()
    return Findings.of(
        SecretRecommendation(
            field=ENVIRONMENT_FIELD,
            recommendation="Review all secrets for production readiness",
            priority=Priority.CRITICAL,
            security_benefit="Ensures production environment is properly secured",
        )
    )


SECURITY_CHECKS = (
    check_duplicates,
    check_credentials_in_urls,
    check_weak_encryption,
    check_missing_security,
    check_transport,
    check_environment,
)


def analyze_security(secrets: Mapping[str, str]) -> Findings:
    """Run every cross-field check once over *secrets*, in order."""
    return reduce(lambda acc, check: acc + check(secrets), SECURITY_CHECKS, Findings())
