"""Supabase project URL and API key rules."""

from envaudit.rules.models import SecretRule, SecretType, SecurityLevel
from envaudit.rules.patterns import FORMAT_PATTERNS

SUPABASE_URL = SecretRule(
    name="EXPO_PUBLIC_SUPABASE_URL",
    type=SecretType.URL,
    required=True,
    pattern=FORMAT_PATTERNS["supabase_url"],
    description="Supabase project URL",
    example="https://your-project.supabase.co",
    security_level=SecurityLevel.MEDIUM,
)

SUPABASE_ANON_KEY = SecretRule(
    name="EXPO_PUBLIC_SUPABASE_ANON_KEY",
    type=SecretType.JWT_TOKEN,
    required=True,
    min_length=100,
    pattern=FORMAT_PATTERNS["jwt"],
    description="Supabase anonymous key (JWT token)",
    example="eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    security_level=SecurityLevel.HIGH,
)

SUPABASE_SERVICE_ROLE_KEY = SecretRule(
    name="SUPABASE_SERVICE_ROLE_KEY",
    type=SecretType.JWT_TOKEN,
    required=True,
    min_length=100,
    pattern=FORMAT_PATTERNS["jwt"],
    description="Supabase service role key (JWT token)",
    example="eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
    security_level=SecurityLevel.CRITICAL,
)

ALL_SUPABASE_RULES = [SUPABASE_URL, SUPABASE_ANON_KEY, SUPABASE_SERVICE_ROLE_KEY]
