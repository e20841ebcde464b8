"""Load and merge configuration from .envaudit.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from envaudit.config.schema import (
    OUTPUT_FORMATS,
    EnvAuditConfig,
    OutputConfig,
    RulesConfig,
    SourceConfig,
    ThresholdConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".envaudit.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(raw) - valid_fields)
    if unknown:
        logger.debug("Ignoring unknown keys in [%s]: %s", section, ", ".join(unknown))
    return cls(**{k: v for k, v in raw.items() if k in valid_fields})


def _check_type(value: Any, expected: type, key: str) -> None:
    if not isinstance(value, expected):
        raise ConfigError(f"{key} must be a {expected.__name__}, got {value!r}")


def _validate(cfg: EnvAuditConfig) -> None:
    if cfg.source.env_file is not None:
        _check_type(cfg.source.env_file, str, "source.env_file")
    _check_type(cfg.source.include_environ, bool, "source.include_environ")
    for key in ("enable", "disable"):
        names = getattr(cfg.rules, key)
        _check_type(names, list, f"rules.{key}")
        if not all(isinstance(n, str) for n in names):
            raise ConfigError(f"rules.{key} must be a list of rule names")
    _check_type(cfg.rules.custom_dir, str, "rules.custom_dir")
    _check_type(cfg.output.show_summary, bool, "output.show_summary")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {cfg.output.format!r} "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )
    if isinstance(cfg.threshold.min_score, bool) or not isinstance(cfg.threshold.min_score, int):
        raise ConfigError("threshold.min_score must be an integer")
    if not 0 <= cfg.threshold.min_score <= 100:
        raise ConfigError("threshold.min_score must be between 0 and 100")


def _merge_env_overrides(cfg: EnvAuditConfig) -> None:
    """Apply ENVAUDIT_* environment variable overrides."""
    if val := os.environ.get("ENVAUDIT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("ENVAUDIT_MIN_SCORE"):
        try:
            score = int(val)
        except ValueError:
            logger.debug("Ignoring non-integer ENVAUDIT_MIN_SCORE")
        else:
            if 0 <= score <= 100:
                cfg.threshold.min_score = score
    if val := os.environ.get("ENVAUDIT_DISABLE_RULES"):
        cfg.rules.disable.extend(r.strip() for r in val.split(",") if r.strip())
    if val := os.environ.get("ENVAUDIT_ENV_FILE"):
        cfg.source.env_file = val


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> EnvAuditConfig:
    """Load, validate, and return an EnvAuditConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = EnvAuditConfig()
    else:
        logger.debug("Loading config from %s", config_path)
        raw = _parse_toml(config_path)
        cfg = EnvAuditConfig(
            version=str(raw.get("version", "1.0")),
            source=_build_section(raw, SourceConfig, "source"),
            rules=_build_section(raw, RulesConfig, "rules"),
            output=_build_section(raw, OutputConfig, "output"),
            threshold=_build_section(raw, ThresholdConfig, "threshold"),
        )

    _validate(cfg)
    _merge_env_overrides(cfg)
    return cfg
