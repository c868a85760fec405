"""Load viewer configuration overrides from a JSON profile."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

from fpl_consistency.config import DEFAULT_CONFIG, ViewerConfig


class ConfigError(ValueError):
    """Raised when a configuration profile cannot be applied."""


_KNOWN_KEYS = frozenset(field.name for field in fields(ViewerConfig))


@dataclass
class ConfigProfile:
    overrides: Dict[str, Any]

    @classmethod
    def load(cls, path: Path) -> "ConfigProfile":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Unable to read config profile {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config profile {path} must contain a JSON object")
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
        return cls(overrides=data)

    def apply(self, base: ViewerConfig = DEFAULT_CONFIG) -> ViewerConfig:
        try:
            return replace(base, **self.overrides)
        except (TypeError, ValueError) as exc:
            raise ConfigError(str(exc)) from exc
