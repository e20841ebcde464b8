"""Rule data model — one immutable rule per configuration field."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SecretType(str, Enum):
    JWT_TOKEN = "jwt_token"
    API_KEY = "api_key"
    DATABASE_URL = "database_url"
    ENCRYPTION_KEY = "encryption_key"
    PASSWORD = "password"
    URL = "url"
    EMAIL = "email"
    UUID = "uuid"


class SecurityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class SecretRule:
    """Validation rule for a single named secret.

    ``pattern`` holds a compiled matcher taken from
    :data:`envaudit.rules.patterns.FORMAT_PATTERNS` (or compiled from a custom
    rule file), so the rule itself stays plain data.
    """

    name: str
    type: SecretType
    required: bool
    description: str
    example: str
    security_level: SecurityLevel
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[re.Pattern[str]] = None
    min_entropy: Optional[float] = None

    @property
    def checks_entropy(self) -> bool:
        """Entropy is only enforced on encryption keys with a threshold."""
        return self.type is SecretType.ENCRYPTION_KEY and self.min_entropy is not None

    def matches_format(self, value: str) -> bool:
        if self.pattern is None:
            return True
        return self.pattern.search(value) is not None
