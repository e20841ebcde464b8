"""Tests for per-field validation."""

import pytest

from envaudit.findings.models import Findings, Severity
from envaudit.rules.builtin.keys import ENCRYPTION_KEY, JWT_SECRET
from envaudit.rules.builtin.supabase import SUPABASE_ANON_KEY, SUPABASE_URL
from envaudit.rules.builtin.tooling import EXPO_TOKEN
from envaudit.rules.models import SecretRule, SecretType, SecurityLevel
from envaudit.validator.field import is_placeholder, is_weak_value, validate_field


def _plain_rule(**kwargs) -> SecretRule:
    defaults = dict(
        name="PLAIN",
        type=SecretType.API_KEY,
        required=False,
        description="plain value",
        example="",
        security_level=SecurityLevel.LOW,
    )
    defaults.update(kwargs)
    return SecretRule(**defaults)


class TestPresence:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_required_missing_is_single_critical_error(self, value):
        found = validate_field(SUPABASE_URL.name, SUPABASE_URL, value)
        assert len(found.errors) == 1
        assert found.warnings == ()
        error = found.errors[0]
        assert error.severity is Severity.CRITICAL
        assert error.field == "EXPO_PUBLIC_SUPABASE_URL"
        assert "required but not set" in error.message

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_optional_missing_is_silent(self, value):
        assert validate_field(JWT_SECRET.name, JWT_SECRET, value) == Findings()


class TestLength:
    def test_too_short_is_error(self):
        found = validate_field(SUPABASE_ANON_KEY.name, SUPABASE_ANON_KEY, "eyJabc.eyJdef")
        assert len(found.errors) == 1
        assert found.errors[0].severity is Severity.ERROR
        assert "too short" in found.errors[0].message
        assert "100" in found.errors[0].suggestion

    def test_too_long_is_only_a_warning(self):
        rule = _plain_rule(max_length=10)
        found = validate_field(rule.name, rule, "abcdefghijklmnop")
        assert found.errors == ()
        assert len(found.warnings) == 1
        assert "too long" in found.warnings[0].message


class TestFormat:
    def test_mismatch_cites_example(self):
        found = validate_field(SUPABASE_URL.name, SUPABASE_URL, "https://nqwblorpguhvqa.supabase.com")
        assert len(found.errors) == 1
        error = found.errors[0]
        assert error.severity is Severity.ERROR
        assert "does not match expected format" in error.message
        assert SUPABASE_URL.example in error.suggestion

    def test_match_is_clean(self):
        found = validate_field(SUPABASE_URL.name, SUPABASE_URL, "https://nqwblorpguhvqa.supabase.co")
        assert found == Findings()


class TestEntropy:
    def test_repeated_key_passes_length_but_warns(self):
        found = validate_field(ENCRYPTION_KEY.name, ENCRYPTION_KEY, "a" * 32)
        assert found.errors == ()
        assert len(found.warnings) == 1
        assert "low entropy (0.00 bits)" in found.warnings[0].message
        assert "4.5" in found.warnings[0].suggestion

    def test_random_key_is_clean(self):
        found = validate_field(
            ENCRYPTION_KEY.name, ENCRYPTION_KEY, "aB3dE5fG7hJ9kL1mN2pQ4rS6tU8vW0xY2zC4eF6g"
        )
        assert found == Findings()

    def test_entropy_ignored_for_other_types(self):
        rule = _plain_rule(min_entropy=4.0)
        assert validate_field(rule.name, rule, "a" * 32) == Findings()


class TestPlaceholders:
    @pytest.mark.parametrize("value", ["YOUR_API_KEY", "your_api_key", "Your-Api-Key"])
    def test_case_insensitive(self, value):
        found = validate_field(EXPO_TOKEN.name, EXPO_TOKEN, value)
        placeholder_errors = [e for e in found.errors if "placeholder" in e.message]
        assert len(placeholder_errors) == 1
        assert placeholder_errors[0].severity is Severity.CRITICAL
        assert EXPO_TOKEN.description in placeholder_errors[0].suggestion

    @pytest.mark.parametrize("value", [
        "placeholder", "my-example-value", "test_token", "DEMO", "sample", "dummy",
        "fake", "mock", "changeme", "replace-me",
    ])
    def test_markers(self, value):
        assert is_placeholder(value)

    @pytest.mark.parametrize("value", ["your", "test", "Hq7Zp2Lw9Xv4Nc8Rb1Tm6Ks3Fy5Gd0Ju"])
    def test_not_placeholders(self, value):
        # "your" and "test" only count when followed by more characters
        assert not is_placeholder(value)

    def test_placeholder_and_weak_both_fire(self):
        found = validate_field(EXPO_TOKEN.name, EXPO_TOKEN, "changeme-changeme-changeme")
        assert [e.severity for e in found.errors] == [Severity.CRITICAL]
        assert len(found.warnings) == 1
        assert "weak or default" in found.warnings[0].message


class TestWeakValues:
    @pytest.mark.parametrize("value", ["Password1", "admin", "123456789", "my-TOKEN", "default"])
    def test_denylist(self, value):
        assert is_weak_value(value)

    def test_weak_value_is_warning_only(self):
        value = "admin-Hq7Zp2Lw9Xv4Nc8Rb1Tm6Ks3Fy5Gd0Ju7Pe2Aw9"
        found = validate_field(JWT_SECRET.name, JWT_SECRET, value)
        assert found.errors == ()
        assert len(found.warnings) == 1
        assert JWT_SECRET.description in found.warnings[0].suggestion


class TestAccumulation:
    def test_checks_keep_running_after_a_failure(self):
        found = validate_field(ENCRYPTION_KEY.name, ENCRYPTION_KEY, "short")
        assert len(found.errors) == 1
        assert "too short" in found.errors[0].message
        assert len(found.warnings) == 1
        assert "low entropy" in found.warnings[0].message

    def test_every_finding_names_the_field(self):
        found = validate_field("CUSTOM_NAME", EXPO_TOKEN, "your_token")
        assert found
        assert all(f.field == "CUSTOM_NAME" for f in (*found.errors, *found.warnings))
