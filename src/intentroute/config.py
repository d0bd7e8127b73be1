"""Runtime configuration for routing.

The router never reads configuration on its own. Callers take a
ConfigSnapshot (an immutable value) from the ConfigStore for each request
and pass it in, so admin updates can swap the store's snapshot at any time
without the routing engine needing locks.

Configuration lives in ~/.intentroute/config.yaml (or the path in
INTENTROUTE_CONFIG):

    standard_model: claude-haiku-4-5-20251001
    premium_model: claude-haiku-4-5-20251001
    category_model_overrides:
      web_search: gpt-4o
    alternate_search_enabled: true
"""

import logging
import os
import threading
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from intentroute.routing.categories import Category

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "INTENTROUTE_CONFIG"

# Claude Haiku 4.5 is fast enough for voice use on both tiers
DEFAULT_STANDARD_MODEL = "claude-haiku-4-5-20251001"
DEFAULT_PREMIUM_MODEL = "claude-haiku-4-5-20251001"

# Every model the assistant is allowed to call (OpenAI and Anthropic)
VALID_MODELS: frozenset[str] = frozenset({
    # GPT-4o series
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4o-2024-08-06",
    "chatgpt-4o-latest",
    # GPT-4 series
    "gpt-4-turbo",
    "gpt-3.5-turbo",
    # GPT-4.1 series
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
    # GPT-5 series
    "gpt-5",
    "gpt-5.1",
    "gpt-5-mini",
    "gpt-5-nano",
    "gpt-5-pro",
    # O-series reasoning models
    "o1",
    "o1-mini",
    "o1-pro",
    "o3",
    "o3-mini",
    "o4-mini",
    # Claude
    "claude-haiku-4-5-20251001",
    "claude-3-5-haiku-20241022",
    "claude-3-5-haiku-latest",
    "claude-3-5-sonnet-20241022",
    "claude-3-5-sonnet-latest",
    "claude-sonnet-4-20250514",
    "claude-3-opus-20240229",
})

_CATEGORY_KEYS = frozenset(c.value for c in Category)


class ConfigError(ValueError):
    """Invalid configuration value."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{message} (field: {field})")
        self.field = field
        self.message = message

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ConfigError":
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "config"
        return cls(field, first.get("msg", "Invalid configuration"))


class ConfigSnapshot(BaseModel):
    """Immutable routing configuration handed to the router per request."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    standard_model: str = DEFAULT_STANDARD_MODEL
    premium_model: str = DEFAULT_PREMIUM_MODEL
    # Read-only view, so a shared snapshot cannot be edited in place
    category_model_overrides: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True)
    alternate_search_enabled: bool = True

    @field_validator("standard_model", "premium_model")
    @classmethod
    def _check_model(cls, value: str) -> str:
        if value not in VALID_MODELS:
            raise ValueError(f"Invalid model: {value}")
        return value

    @field_validator("category_model_overrides")
    @classmethod
    def _check_overrides(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        for category, model in value.items():
            if category not in _CATEGORY_KEYS:
                raise ValueError(f"Unknown category: {category}")
            # Empty means "no override", same as leaving the key out
            if model and model not in VALID_MODELS:
                raise ValueError(f"Invalid model for category {category}: {model}")
        return MappingProxyType(dict(value))

    @field_serializer("category_model_overrides")
    def _dump_overrides(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)


def make_snapshot(**values: Any) -> ConfigSnapshot:
    """Build a snapshot, raising ConfigError instead of ValidationError."""
    try:
        return ConfigSnapshot(**values)
    except ValidationError as e:
        raise ConfigError.from_validation_error(e) from e


def get_config_path() -> Path:
    """Get the config file path."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".intentroute" / "config.yaml"


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load the raw configuration mapping (empty if the file is missing)."""
    config_path = path or get_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError("config", f"Cannot read {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("config", f"{config_path} must contain a mapping")
    return data


def save_config(snapshot: ConfigSnapshot, path: Path | None = None) -> Path:
    """Save configuration to file."""
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(snapshot.model_dump(), f, default_flow_style=False)
    return config_path


def load_snapshot(path: Path | None = None) -> ConfigSnapshot:
    """Load and validate the configuration file into a snapshot."""
    return make_snapshot(**load_config(path))


class ConfigStore:
    """Thread-safe holder of the current configuration.

    Usage:
        store = ConfigStore(load_snapshot())
        decision = router.route(text, store.snapshot())
        store.update(premium_model="gpt-4.1")  # from an admin handler
    """

    def __init__(self, snapshot: ConfigSnapshot | None = None):
        self._lock = threading.RLock()
        self._snapshot = snapshot or ConfigSnapshot()

    def snapshot(self) -> ConfigSnapshot:
        """Current configuration. The value is frozen, safe to share."""
        with self._lock:
            return self._snapshot

    def update(self, **changes: Any) -> ConfigSnapshot:
        """Validate and atomically apply changes.

        Raises:
            ConfigError: If the resulting configuration is invalid. The
                current snapshot is left untouched.
        """
        with self._lock:
            values = self._snapshot.model_dump()
            values.update(changes)
            new_snapshot = make_snapshot(**values)
            self._snapshot = new_snapshot

        logger.info(f"Configuration updated: {', '.join(sorted(changes)) or 'no changes'}")
        return new_snapshot

    def replace(self, snapshot: ConfigSnapshot) -> None:
        """Swap in an already validated snapshot (e.g. after a reload)."""
        with self._lock:
            self._snapshot = snapshot
