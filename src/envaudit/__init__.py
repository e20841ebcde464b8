"""envaudit — validate and score deployment secrets before they ship."""

__version__ = "0.1.0"

from envaudit.environment import get_security_score, validate_secrets
from envaudit.findings.models import (
    Priority,
    SecretError,
    SecretRecommendation,
    SecretWarning,
    Severity,
    ValidationResult,
)
from envaudit.output.text_report import render_report
from envaudit.validator.engine import SecretsValidator, validate

__all__ = [
    "Priority",
    "SecretError",
    "SecretRecommendation",
    "SecretWarning",
    "SecretsValidator",
    "Severity",
    "ValidationResult",
    "__version__",
    "get_security_score",
    "render_report",
    "validate",
    "validate_secrets",
]
