"""Validator — entropy, per-field rules, cross-field analysis, scoring."""

from envaudit.validator.engine import SecretsValidator, validate
from envaudit.validator.entropy import has_low_entropy, shannon_entropy
from envaudit.validator.field import validate_field
from envaudit.validator.scoring import calculate_score
from envaudit.validator.security import analyze_security

__all__ = [
    "SecretsValidator",
    "analyze_security",
    "calculate_score",
    "has_low_entropy",
    "shannon_entropy",
    "validate",
    "validate_field",
]
