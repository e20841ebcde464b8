"""AI service credentials and endpoints."""

from envaudit.rules.models import SecretRule, SecretType, SecurityLevel
from envaudit.rules.patterns import FORMAT_PATTERNS

DEEPSEEK_API_KEY = SecretRule(
    name="EXPO_PUBLIC_DEEPSEEK_API_KEY",
    type=SecretType.API_KEY,
    required=True,
    min_length=20,
    pattern=FORMAT_PATTERNS["deepseek_api_key"],
    description="DeepSeek API key for AI features",
    example="sk-your-deepseek-api-key",
    security_level=SecurityLevel.HIGH,
)

DEEPSEEK_API_URL = SecretRule(
    name="DEEPSEEK_API_URL",
    type=SecretType.URL,
    required=False,
    pattern=FORMAT_PATTERNS["https_url"],
    description="DeepSeek API endpoint URL",
    example="https://api.deepseek.com/v1/chat/completions",
    security_level=SecurityLevel.LOW,
)

ALL_AI_RULES = [DEEPSEEK_API_KEY, DEEPSEEK_API_URL]
