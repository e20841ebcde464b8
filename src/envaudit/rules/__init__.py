"""Rule registry — models, format patterns, built-in rules."""

from envaudit.rules.models import SecretRule, SecretType, SecurityLevel
from envaudit.rules.patterns import FORMAT_PATTERNS
from envaudit.rules.registry import RuleError, RuleRegistry, build_registry, default_registry

__all__ = [
    "FORMAT_PATTERNS",
    "RuleError",
    "RuleRegistry",
    "SecretRule",
    "SecretType",
    "SecurityLevel",
    "build_registry",
    "default_registry",
]
