"""Security score calculation."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from envaudit.findings.models import SecretError, SecretWarning, Severity
from envaudit.validator.security import BONUS_FIELDS

BASE_SCORE = 100
ERROR_PENALTY: dict[Severity, int] = {
    Severity.CRITICAL: 20,
    Severity.ERROR: 10,
}
WARNING_PENALTY = 2
PRESENCE_BONUS = 5


def clamp_score(score: int) -> int:
    return max(0, min(100, score))


def calculate_score(
    errors: Iterable[SecretError],
    warnings: Sequence[SecretWarning],
    secrets: Mapping[str, str],
    bonus_fields: Sequence[str] = BONUS_FIELDS,
) -> int:
    """Aggregate findings into a score in ``[0, 100]``.

    Bonus fields earn their points for being set at all, whether or not
    they passed their own validation.
    """
    score = BASE_SCORE
    score -= sum(ERROR_PENALTY[e.severity] for e in errors)
    score -= WARNING_PENALTY * len(warnings)
    score += PRESENCE_BONUS * sum(1 for name in bonus_fields if secrets.get(name))
    return clamp_score(score)
