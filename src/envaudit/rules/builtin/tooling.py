"""Build and deployment tooling credentials."""

from envaudit.rules.models import SecretRule, SecretType, SecurityLevel

EXPO_TOKEN = SecretRule(
    name="EXPO_TOKEN",
    type=SecretType.API_KEY,
    required=False,
    min_length=20,
    description="Expo authentication token",
    example="your-expo-token",
    security_level=SecurityLevel.MEDIUM,
)

GCP_SA_KEY = SecretRule(
    name="GCP_SA_KEY",
    type=SecretType.API_KEY,
    required=False,
    min_length=100,
    description="Google Cloud Platform service account key",
    example='{"type": "service_account", ...}',
    security_level=SecurityLevel.CRITICAL,
)

ALL_TOOLING_RULES = [EXPO_TOKEN, GCP_SA_KEY]
