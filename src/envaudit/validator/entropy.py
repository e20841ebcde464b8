"""Shannon entropy calculator."""

from __future__ import annotations

import math
from collections import Counter

LOW_ENTROPY_THRESHOLD = 3.0


def shannon_entropy(s: str) -> float:
    """Compute Shannon entropy (bits per character) of string *s*.

    H = Σ p(c) · log₂(1 / p(c))  over unique characters c.
    """
    if not s:
        return 0.0
    counts = Counter(s)
    total = len(s)
    # Every term is non-negative, so a single-symbol string yields +0.0
    return sum((c / total) * math.log2(total / c) for c in counts.values())


def has_low_entropy(s: str, threshold: float = LOW_ENTROPY_THRESHOLD) -> bool:
    """Return True if *s* carries fewer than *threshold* bits per character."""
    return shannon_entropy(s) < threshold
