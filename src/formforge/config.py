"""Engine configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from formforge.core.types import ConfigError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class EngineConfig:
    """Evaluation and logging settings.

    Attributes:
        max_evaluation_depth: Limit on nested should_display/is_valid calls.
            None leaves evaluation unguarded, so a cycle between display
            conditions or validators recurses until Python raises
            RecursionError. With a limit, evaluations past it fail closed:
            the field is reported hidden or invalid.
        log_level: Level name applied by the command line.
    """

    max_evaluation_depth: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.max_evaluation_depth is not None and self.max_evaluation_depth < 1:
            raise ConfigError(
                f"max_evaluation_depth must be positive, got {self.max_evaluation_depth}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level '{self.log_level}'. "
                "Expected one of: " + ", ".join(_LOG_LEVELS)
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls, base: EngineConfig | None = None) -> EngineConfig:
        """Create config from environment variables.

        Reads:
        1. FORMFORGE_MAX_DEPTH (integer; empty or "none" disables the guard)
        2. FORMFORGE_LOG_LEVEL
        Unset variables keep the value from ``base`` (or the defaults).
        """
        config = base or cls()

        depth = os.environ.get("FORMFORGE_MAX_DEPTH")
        if depth is not None:
            config = replace(config, max_evaluation_depth=_parse_depth(depth))

        level = os.environ.get("FORMFORGE_LOG_LEVEL")
        if level:
            config = replace(config, log_level=level)

        return config

    @classmethod
    def from_file(cls, path: Path) -> EngineConfig:
        """Create config from a YAML mapping with the attribute names as keys."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EngineConfig:
        unknown = set(data) - {"max_evaluation_depth", "log_level"}
        if unknown:
            raise ConfigError("Unknown config keys: " + ", ".join(sorted(unknown)))

        depth = data.get("max_evaluation_depth")
        if isinstance(depth, bool):
            raise ConfigError(f"max evaluation depth must be an integer, got {depth}")
        if depth is not None and not isinstance(depth, int):
            depth = _parse_depth(str(depth))

        return cls(
            max_evaluation_depth=depth,
            log_level=str(data.get("log_level", "WARNING")),
        )

    @classmethod
    def load(cls, path: Path | None = None) -> EngineConfig:
        """Resolve config: defaults, then the YAML file if given, then env."""
        base = cls.from_file(path) if path is not None else cls()
        return cls.from_env(base)


def _parse_depth(raw: str) -> int | None:
    raw = raw.strip()
    if raw == "" or raw.lower() == "none":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(
            f"max evaluation depth must be an integer, got '{raw}'"
        ) from e
