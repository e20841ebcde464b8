"""Finding and result models."""

from envaudit.findings.models import (
    Findings,
    Priority,
    SecretError,
    SecretRecommendation,
    SecretWarning,
    Severity,
    ValidationResult,
)

__all__ = [
    "Findings",
    "Priority",
    "SecretError",
    "SecretRecommendation",
    "SecretWarning",
    "Severity",
    "ValidationResult",
]
