"""Finding data models — errors, warnings, recommendations, results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Severity(str, Enum):
    ERROR = "error"
    CRITICAL = "critical"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


PRIORITY_ORDER: dict[Priority, int] = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.CRITICAL: 3,
}


def _require_guidance(kind: str, **texts: str) -> None:
    for label, text in texts.items():
        if not text or not text.strip():
            raise ValueError(f"{kind} requires a non-empty {label}")


@dataclass(frozen=True, slots=True)
class SecretError:
    """A correctness failure; any error makes the result invalid."""

    field: str
    message: str
    severity: Severity
    suggestion: str
    security_impact: str

    def __post_init__(self) -> None:
        _require_guidance("SecretError", suggestion=self.suggestion,
                          security_impact=self.security_impact)


@dataclass(frozen=True, slots=True)
class SecretWarning:
    field: str
    message: str
    suggestion: str
    security_impact: str

    def __post_init__(self) -> None:
        _require_guidance("SecretWarning", suggestion=self.suggestion,
                          security_impact=self.security_impact)


@dataclass(frozen=True, slots=True)
class SecretRecommendation:
    field: str
    recommendation: str
    priority: Priority
    security_benefit: str

    def __post_init__(self) -> None:
        _require_guidance("SecretRecommendation", recommendation=self.recommendation,
                          security_benefit=self.security_benefit)


@dataclass(frozen=True)
class Findings:
    """Immutable accumulator produced by each validation pass.

    Passes return their own ``Findings`` and the engine combines them with
    ``+``, so no pass ever appends to a shared list.
    """

    errors: Tuple[SecretError, ...] = ()
    warnings: Tuple[SecretWarning, ...] = ()
    recommendations: Tuple[SecretRecommendation, ...] = ()

    def __add__(self, other: "Findings") -> "Findings":
        if not isinstance(other, Findings):
            return NotImplemented
        return Findings(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
            recommendations=self.recommendations + other.recommendations,
        )

    def __bool__(self) -> bool:
        return bool(self.errors or self.warnings or self.recommendations)

    @classmethod
    def of(cls, *items: SecretError | SecretWarning | SecretRecommendation) -> "Findings":
        """Sort loose findings into a ``Findings`` by kind, keeping order."""
        return cls(
            errors=tuple(i for i in items if isinstance(i, SecretError)),
            warnings=tuple(i for i in items if isinstance(i, SecretWarning)),
            recommendations=tuple(i for i in items if isinstance(i, SecretRecommendation)),
        )


@dataclass(frozen=True)
class ValidationResult:
    """Complete result of one validation run."""

    score: int
    errors: Tuple[SecretError, ...] = ()
    warnings: Tuple[SecretWarning, ...] = ()
    recommendations: Tuple[SecretRecommendation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def critical_errors(self) -> Tuple[SecretError, ...]:
        return tuple(e for e in self.errors if e.severity is Severity.CRITICAL)

    def errors_for(self, field_name: str) -> Tuple[SecretError, ...]:
        return tuple(e for e in self.errors if e.field == field_name)

    def warnings_for(self, field_name: str) -> Tuple[SecretWarning, ...]:
        return tuple(w for w in self.warnings if w.field == field_name)
