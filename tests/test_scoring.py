"""Tests for the score calculator."""

from envaudit.findings.models import SecretError, SecretWarning, Severity
from envaudit.validator.scoring import calculate_score


def _error(severity: Severity) -> SecretError:
    return SecretError(
        field="F", message="m", severity=severity,
        suggestion="fix it", security_impact="impact",
    )


def _warning() -> SecretWarning:
    return SecretWarning(field="F", message="m", suggestion="fix it", security_impact="impact")


class TestScore:
    def test_clean_is_100(self):
        assert calculate_score([], [], {}) == 100

    def test_penalties(self):
        errors = [_error(Severity.CRITICAL), _error(Severity.ERROR)]
        assert calculate_score(errors, [_warning(), _warning()], {}) == 66

    def test_bonus_fields(self):
        errors = [_error(Severity.CRITICAL), _error(Severity.ERROR)]
        secrets = {
            "JWT_SECRET": "x",
            "ENCRYPTION_KEY": "y",
            "SUPABASE_SERVICE_ROLE_KEY": "z",
        }
        assert calculate_score(errors, [_warning(), _warning()], secrets) == 81

    def test_bonus_needs_non_empty_value(self):
        assert calculate_score([_error(Severity.ERROR)], [], {"JWT_SECRET": ""}) == 90
        assert calculate_score([_error(Severity.ERROR)], [], {"JWT_SECRET": "weak"}) == 95

    def test_clamped_high(self):
        secrets = {"JWT_SECRET": "x", "ENCRYPTION_KEY": "y", "SUPABASE_SERVICE_ROLE_KEY": "z"}
        assert calculate_score([], [], secrets) == 100

    def test_clamped_low(self):
        errors = [_error(Severity.CRITICAL)] * 10
        assert calculate_score(errors, [_warning()] * 50, {}) == 0
