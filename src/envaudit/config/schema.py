"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

OutputFormat = Literal["text", "terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("text", "terminal", "json")


@dataclass
class SourceConfig:
    env_file: Optional[str] = None  # dotenv file merged over the process environment
    include_environ: bool = True


@dataclass
class RulesConfig:
    enable: List[str] = field(default_factory=list)  # empty = all enabled
    disable: List[str] = field(default_factory=list)
    custom_dir: str = ".envaudit-rules"


@dataclass
class OutputConfig:
    format: OutputFormat = "text"
    show_summary: bool = True


@dataclass
class ThresholdConfig:
    min_score: int = 0  # fail when the security score drops below this


@dataclass
class EnvAuditConfig:
    version: str = "1.0"
    source: SourceConfig = field(default_factory=SourceConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    threshold: ThresholdConfig = field(default_factory=ThresholdConfig)
