"""Format pattern table — name → compiled matcher, shared by all rules."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

FORMAT_PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType({
    "supabase_url": re.compile(r"^https://[a-zA-Z0-9\-]+\.supabase\.co$"),
    # Two or more dot-delimited base64 / base64url segments, header first.
    "jwt": re.compile(r"^eyJ[A-Za-z0-9+/=_\-]+\.eyJ[A-Za-z0-9+/=_\-]+\.?[A-Za-z0-9+/=_\-]*$"),
    "deepseek_api_key": re.compile(r"^sk-[a-zA-Z0-9]{20,}$"),
    "https_url": re.compile(r"^https://[a-zA-Z0-9\-.]+\.[a-zA-Z]{2,}(/.*)?$"),
    "postgres_url": re.compile(r"^postgresql://[^:]+:[^@]+@[^:]+:\d+/[^?]+"),
    "email": re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$"),
    "uuid": re.compile(
        r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
    ),
})


def get_pattern(name: str) -> re.Pattern[str]:
    """Return the compiled matcher registered under *name*.

    Raises ``KeyError`` with the list of known names when *name* is unknown.
    """
    try:
        return FORMAT_PATTERNS[name]
    except KeyError:
        known = ", ".join(sorted(FORMAT_PATTERNS))
        raise KeyError(f"Unknown format pattern {name!r} (known: {known})") from None
