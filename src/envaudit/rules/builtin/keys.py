"""Signing and encryption key rules — entropy-checked."""

from envaudit.rules.models import SecretRule, SecretType, SecurityLevel

JWT_SECRET = SecretRule(
    name="JWT_SECRET",
    type=SecretType.ENCRYPTION_KEY,
    required=False,
    min_length=32,
    min_entropy=4.0,
    description="JWT signing secret",
    example="your-super-secret-jwt-key",
    security_level=SecurityLevel.CRITICAL,
)

ENCRYPTION_KEY = SecretRule(
    name="ENCRYPTION_KEY",
    type=SecretType.ENCRYPTION_KEY,
    required=False,
    min_length=32,
    min_entropy=4.5,
    description="Data encryption key",
    example="your-super-secret-encryption-key",
    security_level=SecurityLevel.CRITICAL,
)

ALL_KEY_RULES = [JWT_SECRET, ENCRYPTION_KEY]
