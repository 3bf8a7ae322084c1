"""Configuration loading and management for churnscope.

Configuration sources are merged in priority order:
    1. Defaults (defined in MetricsConfig)
    2. Global config (~/.churnscope.toml)
    3. Project config (./churnscope.toml)
    4. Explicit config file
    5. Environment variables (CHURNSCOPE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(churn_commit_count=200)
    >>> config.churn_commit_count
    200
    >>> config.churn_period_days
    90
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ChurnscopeError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class MetricsConfig:
    """Settings for one metrics run.

    Attributes:
        Churn window:
            churn_commit_count: Size of the commit-count window
            churn_period_days: Span of the time window, counted back from the
                newest commit

        External commands:
            batch_size: Paths per `git ls-files` / `wc` invocation, bounded by
                the OS command-line length limit
            write_commit_graph: Refresh git's commit-graph file before
                querying history

        Output control:
            verbosity: Logging verbosity level
    """

    # Churn window
    churn_commit_count: int = 100
    churn_period_days: int = 90

    # External commands
    batch_size: int = 1000
    write_commit_graph: bool = True

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for field_name in ("churn_commit_count", "churn_period_days", "batch_size"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidConfigError(field_name, value, "must be a positive integer")

        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITIES)}"
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


DEFAULT_CONFIG = MetricsConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> MetricsConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated MetricsConfig instance

    Raises:
        ChurnscopeError: If a config file is invalid or missing
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".churnscope.toml"
    if global_config.exists():
        merged.update(_load_section(global_config, "global config"))

    project_config = Path.cwd() / "churnscope.toml"
    if project_config.exists():
        merged.update(_load_section(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ChurnscopeError(f"Config file not found: {config_file}")
        merged.update(_load_section(config_file, "config file"))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    try:
        return MetricsConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ChurnscopeError(f"Invalid configuration: {e}")


def _load_section(path: Path, label: str) -> dict:
    """Read a TOML file, accepting either top-level keys or a [churnscope] table."""
    try:
        data = _load_toml_file(path)
    except ChurnscopeError:
        raise
    except Exception as e:
        raise ChurnscopeError(f"Invalid {label} '{path}': {e}")

    section = data.get("churnscope", data)
    if not isinstance(section, dict):
        raise ChurnscopeError(f"Invalid {label} '{path}': [churnscope] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CHURNSCOPE_* environment variables.

    Supported environment variables:
        CHURNSCOPE_CHURN_COMMIT_COUNT: int
        CHURNSCOPE_CHURN_PERIOD_DAYS: int
        CHURNSCOPE_BATCH_SIZE: int
        CHURNSCOPE_WRITE_COMMIT_GRAPH: bool (true/false/1/0)
        CHURNSCOPE_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(MetricsConfig)

    result: dict[str, Any] = {}

    for field_name in MetricsConfig.__dataclass_fields__:
        env_key = f"CHURNSCOPE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ChurnscopeError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        return tomllib.load(f)
