"""JSON reporter for CI pipelines.

Only field names and messages are emitted — secret values never appear.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from envaudit.findings.models import ValidationResult
from envaudit.output.text_report import verdict_label


def to_dict(result: ValidationResult) -> Dict[str, Any]:
    """Convert ValidationResult to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "is_valid": result.is_valid,
        "score": result.score,
        "verdict": verdict_label(result.score),
        "errors": [
            {
                "field": e.field,
                "message": e.message,
                "severity": e.severity.value,
                "suggestion": e.suggestion,
                "security_impact": e.security_impact,
            }
            for e in result.errors
        ],
        "warnings": [
            {
                "field": w.field,
                "message": w.message,
                "suggestion": w.suggestion,
                "security_impact": w.security_impact,
            }
            for w in result.warnings
        ],
        "recommendations": [
            {
                "field": r.field,
                "recommendation": r.recommendation,
                "priority": r.priority.value,
                "security_benefit": r.security_benefit,
            }
            for r in result.recommendations
        ],
    }


def render(result: ValidationResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
