"""Process-environment and dotenv wrappers around the pure engine.

Everything that reads ``os.environ`` or the filesystem lives here; the
engine in :mod:`envaudit.validator` only ever sees the map it is given.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values

from envaudit.findings.models import ValidationResult
from envaudit.validator.engine import validate

logger = logging.getLogger(__name__)


class EnvFileError(Exception):
    """Raised when a dotenv file cannot be read."""


def load_env_file(path: Union[str, Path]) -> Dict[str, Optional[str]]:
    """Parse the dotenv file at *path* without touching ``os.environ``.

    Keys declared without a value (``KEY`` on its own line) map to ``None``
    and are later treated as unset.
    """
    p = Path(path)
    if not p.is_file():
        raise EnvFileError(f"Env file not found: {p}")
    try:
        values = dotenv_values(p, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvFileError(f"Failed to read {p}: {exc}") from exc
    logger.debug("Loaded %d variable(s) from %s", len(values), p)
    return dict(values)


def collect_secrets(
    env_file: Optional[Union[str, Path]] = None,
    *,
    include_environ: bool = True,
) -> Dict[str, Optional[str]]:
    """Build the secret map: process environment first, then *env_file* on top."""
    secrets: Dict[str, Optional[str]] = dict(os.environ) if include_environ else {}
    if env_file is not None:
        secrets.update(load_env_file(env_file))
    return secrets


def validate_secrets(secrets: Optional[Mapping[str, Optional[str]]] = None) -> ValidationResult:
    """Validate *secrets*, defaulting to the live process environment."""
    return validate(os.environ if secrets is None else secrets)


def get_security_score(secrets: Optional[Mapping[str, Optional[str]]] = None) -> int:
    return validate_secrets(secrets).score
