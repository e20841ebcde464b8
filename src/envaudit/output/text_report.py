"""Plain-text security report — formatting only, no analysis."""

from __future__ import annotations

from typing import List

from envaudit.findings.models import PRIORITY_ORDER, ValidationResult

GOOD_SCORE = 80
FAIR_SCORE = 60


def verdict_label(score: int) -> str:
    if score >= GOOD_SCORE:
        return "Good security posture"
    if score >= FAIR_SCORE:
        return "Security improvements needed"
    return "Critical security issues detected"


def verdict(score: int) -> str:
    """One-line banner for *score*."""
    if score >= GOOD_SCORE:
        icon = "✅"
    elif score >= FAIR_SCORE:
        icon = "⚠️ "
    else:
        icon = "❌"
    return f"{icon} {verdict_label(score)}"


def render_report(result: ValidationResult) -> str:
    """Render *result* as text. Empty sections are left out entirely."""
    lines: List[str] = ["🔒 Secrets Security Report", "", f"Security Score: {result.score}/100", ""]

    if result.errors:
        lines.append("❌ Critical Issues:")
        for error in result.errors:
            lines.append(f"  • {error.field}: {error.message}")
            lines.append(f"    💡 {error.suggestion}")
            lines.append(f"    ⚠️  {error.security_impact}")
            lines.append("")

    if result.warnings:
        lines.append("⚠️  Security Warnings:")
        for warning in result.warnings:
            lines.append(f"  • {warning.field}: {warning.message}")
            lines.append(f"    💡 {warning.suggestion}")
            lines.append(f"    ⚠️  {warning.security_impact}")
            lines.append("")

    if result.recommendations:
        lines.append("💡 Security Recommendations:")
        ordered = sorted(
            result.recommendations,
            key=lambda r: PRIORITY_ORDER[r.priority],
            reverse=True,
        )
        for rec in ordered:
            lines.append(f"  • [{rec.priority.value.upper()}] {rec.field}: {rec.recommendation}")
            lines.append(f"    🔒 {rec.security_benefit}")
            lines.append("")

    lines.append(verdict(result.score))
    return "\n".join(lines) + "\n"
