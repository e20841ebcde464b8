"""Validation engine — registry pass, cross-field pass, score.

The engine is pure: it takes the secret map as an argument, never reads the
process environment, and builds a fresh result on every call.
"""

from __future__ import annotations

import logging
from functools import reduce
from types import MappingProxyType
from typing import Mapping, Optional

from envaudit.findings.models import Findings, ValidationResult
from envaudit.rules.registry import RuleRegistry, default_registry
from envaudit.validator.field import validate_field
from envaudit.validator.scoring import calculate_score
from envaudit.validator.security import analyze_security

logger = logging.getLogger(__name__)

_DEFAULT_REGISTRY: Optional[RuleRegistry] = None


def _builtin_registry() -> RuleRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = default_registry()
    return _DEFAULT_REGISTRY


def normalize_secrets(secrets: Mapping[str, Optional[str]]) -> Mapping[str, str]:
    """Drop unset (``None``) entries and freeze the result."""
    return MappingProxyType({k: v for k, v in secrets.items() if v is not None})


def validate(
    secrets: Mapping[str, Optional[str]],
    registry: Optional[RuleRegistry] = None,
) -> ValidationResult:
    """Validate *secrets* against *registry* (built-in rules by default)."""
    registry = registry if registry is not None else _builtin_registry()
    view = normalize_secrets(secrets)

    per_field = reduce(
        lambda acc, rule: acc + validate_field(rule.name, rule, view.get(rule.name)),
        registry,
        Findings(),
    )
    findings = per_field + analyze_security(view)

    score = calculate_score(findings.errors, findings.warnings, view)
    logger.debug(
        "Validated %d field(s) against %d rule(s): %d error(s), %d warning(s), "
        "%d recommendation(s), score %d",
        len(view), len(registry), len(findings.errors), len(findings.warnings),
        len(findings.recommendations), score,
    )
    return ValidationResult(
        score=score,
        errors=findings.errors,
        warnings=findings.warnings,
        recommendations=findings.recommendations,
    )


class SecretsValidator:
    """Binds a secret map (and optionally a registry) for repeated use."""

    def __init__(
        self,
        secrets: Mapping[str, Optional[str]],
        registry: Optional[RuleRegistry] = None,
    ) -> None:
        self._secrets = normalize_secrets(secrets)
        self._registry = registry

    @property
    def secrets(self) -> Mapping[str, str]:
        return self._secrets

    def validate(self) -> ValidationResult:
        return validate(self._secrets, self._registry)

    def get_security_score(self) -> int:
        return self.validate().score

    def get_security_report(self) -> str:
        """Validate the bound map and render the plain-text report."""
        from envaudit.output.text_report import render_report

        return render_report(self.validate())
