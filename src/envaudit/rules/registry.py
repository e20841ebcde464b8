"""Rule registry — built-in and custom rules, filtered by config."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml

from envaudit.config.schema import EnvAuditConfig
from envaudit.rules.models import SecretRule, SecretType, SecurityLevel
from envaudit.rules.patterns import get_pattern

logger = logging.getLogger(__name__)


class RuleError(Exception):
    """Raised when a custom rule file is malformed."""


class RuleRegistry:
    """Ordered store of secret rules keyed by field name.

    Rules are immutable; enabling or disabling them only changes which
    names the registry yields.
    """

    def __init__(self, rules: Optional[List[SecretRule]] = None) -> None:
        self._rules: Dict[str, SecretRule] = {}
        self._disabled: set[str] = set()
        if rules:
            self.register_many(rules)

    # ---- registration ----

    def register(self, rule: SecretRule) -> None:
        if rule.name in self._rules:
            logger.debug("Rule %s replaced", rule.name)
        self._rules[rule.name] = rule

    def register_many(self, rules: List[SecretRule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[SecretRule]:
        return list(self._rules.values())

    def get(self, name: str) -> Optional[SecretRule]:
        return self._rules.get(name)

    def is_enabled(self, name: str) -> bool:
        return name in self._rules and name not in self._disabled

    def enabled_rules(self) -> List[SecretRule]:
        return [r for r in self._rules.values() if r.name not in self._disabled]

    def __iter__(self) -> Iterator[SecretRule]:
        return iter(self.enabled_rules())

    def __len__(self) -> int:
        return len(self.enabled_rules())

    # ---- config filtering ----

    def apply_config(self, config: EnvAuditConfig) -> None:
        """Enable / disable rules based on config.rules."""
        enable_list = config.rules.enable
        disable_list = config.rules.disable

        disabled: set[str] = set()
        for name in self._rules:
            # An explicit enable-list restricts the registry to those names
            if enable_list and name not in enable_list:
                disabled.add(name)
            if name in disable_list:
                disabled.add(name)
        self._disabled = disabled

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        logger.debug("Loaded %d custom rule(s) from %s", count, directory)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise RuleError(f"Failed to read {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            self.register(rule_from_dict(entry, source=str(path)))
            count += 1
        return count


def rule_from_dict(entry: Any, *, source: str = "<custom>") -> SecretRule:
    """Build a SecretRule from a custom-rule mapping.

    The format may be given either as ``pattern`` (a name from the pattern
    table) or ``regex`` (a raw expression compiled here).
    """
    if not isinstance(entry, dict) or "name" not in entry or "type" not in entry:
        raise RuleError(f"{source}: each rule needs at least 'name' and 'type'")
    name = str(entry["name"])
    try:
        secret_type = SecretType(entry["type"])
        level = SecurityLevel(entry.get("security_level", "medium"))
    except ValueError as exc:
        raise RuleError(f"{source}: rule {name}: {exc}") from exc

    pattern: Optional[re.Pattern[str]] = None
    try:
        if entry.get("regex"):
            pattern = re.compile(entry["regex"])
        elif entry.get("pattern"):
            pattern = get_pattern(entry["pattern"])
    except (re.error, KeyError) as exc:
        raise RuleError(f"{source}: rule {name}: {exc}") from exc

    return SecretRule(
        name=name,
        type=secret_type,
        required=_typed(entry, "required", (bool,), False, source, name),
        description=_typed(entry, "description", (str,), name, source, name),
        example=_typed(entry, "example", (str,), "", source, name),
        security_level=level,
        min_length=_typed(entry, "min_length", (int,), None, source, name),
        max_length=_typed(entry, "max_length", (int,), None, source, name),
        pattern=pattern,
        min_entropy=_typed(entry, "min_entropy", (int, float), None, source, name),
    )


def _typed(entry: Dict[str, Any], key: str, types: tuple, default: Any, source: str, name: str) -> Any:
    """Return ``entry[key]`` if it has one of *types*, else raise RuleError."""
    value = entry.get(key, default)
    if value is default:
        return value
    # bool is an int subclass; only accept it where bool is asked for
    if (isinstance(value, bool) and bool not in types) or not isinstance(value, types):
        expected = " or ".join(t.__name__ for t in types)
        raise RuleError(f"{source}: rule {name}: '{key}' must be {expected}, got {value!r}")
    return value


def default_registry() -> RuleRegistry:
    """Registry holding only the built-in rules, all enabled."""
    from envaudit.rules.builtin import ALL_BUILTIN_RULES

    return RuleRegistry(ALL_BUILTIN_RULES)


def build_registry(config: EnvAuditConfig, root: Path) -> RuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    registry = default_registry()

    custom_dir = Path(config.rules.custom_dir)
    if not custom_dir.is_absolute():
        custom_dir = root / custom_dir
    registry.load_custom_rules(custom_dir)

    registry.apply_config(config)
    return registry
