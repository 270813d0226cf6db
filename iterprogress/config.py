"""Configuration model and loaders for the demo CLI.

Responsibilities:
- Define demo run settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.
- Merge sources with deterministic precedence (CLI > YAML > env > defaults).

Key types:
- `DemoConfig`: normalized settings for the `count` and `fib` commands.
- `ConfigLoader`: static construction helpers for `DemoConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_non_negative_int

_DEFAULT_COUNT = 113
_DEFAULT_INTERVAL_MS = 100
_DEFAULT_FIB_LENGTH = 10_000

_ENV_KEYS = {
    "count": "ITERPROGRESS_COUNT",
    "interval_ms": "ITERPROGRESS_INTERVAL_MS",
    "fib_length": "ITERPROGRESS_FIB_LENGTH",
}


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Settings for one demo run.

    Attributes:
        count: Number of values drained by the `count` command.
        interval_ms: Minimum milliseconds between values in the `count` command.
        fib_length: Number of Fibonacci terms produced by the `fib` command.
    """

    count: int = _DEFAULT_COUNT
    interval_ms: int = _DEFAULT_INTERVAL_MS
    fib_length: int = _DEFAULT_FIB_LENGTH

    @property
    def interval_seconds(self) -> float:
        """Return the rate limit interval in seconds."""

        return self.interval_ms / 1000.0

    def validate(self) -> None:
        """Validate all fields, raising `ValueError` on the first invalid one."""

        for config_field in fields(self):
            parse_non_negative_int(getattr(self, config_field.name), config_field.name)

    def with_overrides(self, **overrides: int | None) -> DemoConfig:
        """Return a copy with every non-`None` override applied and validated."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        config = replace(self, **applied)
        config.validate()
        return config


class ConfigLoader:
    """Factory methods for loading `DemoConfig` from supported sources."""

    @staticmethod
    def from_yaml(path: Path, base: DemoConfig | None = None) -> DemoConfig:
        """Load config from a YAML mapping on top of `base` (defaults when omitted).

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the payload is not a mapping, has unknown keys or bad values.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML syntax: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError("top-level YAML value must be a mapping.")
        return ConfigLoader._build_config_from_mapping(
            payload, base or DemoConfig(), f"config file `{path}`"
        )

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None, base: DemoConfig | None = None
    ) -> DemoConfig:
        """Create a validated config from `ITERPROGRESS_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        values: dict[str, Any] = {}
        for name, env_key in _ENV_KEYS.items():
            raw_value = normalize_optional_string(env_map.get(env_key))
            if raw_value is not None:
                values[name] = parse_non_negative_int(raw_value, env_key)
        return (base or DemoConfig()).with_overrides(**values)

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], base: DemoConfig, source_label: str
    ) -> DemoConfig:
        """Build config from a parsed mapping, rejecting unknown keys."""

        unknown = sorted(str(key) for key in payload if key not in _ENV_KEYS)
        if unknown:
            raise ValueError(
                f"unknown keys in {source_label}: {', '.join(unknown)}. "
                f"Supported keys: {', '.join(sorted(_ENV_KEYS))}."
            )
        values = {
            name: parse_non_negative_int(value, name)
            for name, value in payload.items()
            if value is not None
        }
        return base.with_overrides(**values)
