"""Configuration loading and management for Bellavista.

Configuration sources are merged in priority order:
    1. Defaults (defined in VisualizerConfig)
    2. Global config (~/.bellavista.toml)
    3. Project config (./bellavista.toml)
    4. Explicit config file
    5. Environment variables (BELLAVISTA_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(width=1024, height=768)
    >>> config.bounds.area
    786432.0
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .geometry import Rect

Verbosity = Literal["quiet", "normal", "verbose"]
LayoutMode = Literal["squarify", "split"]

_LAYOUT_MODES = ("squarify", "split")
_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class VisualizerConfig:
    """Settings for the scan/layout shell.

    Attributes:
        width: Width of the layout bounds (pixels or any unit)
        height: Height of the layout bounds
        layout_mode: "squarify" (default) or "split" (simple proportional split)
        top_entries: How many of the largest entries the CLI lists
        verbosity: Logging verbosity level
        report_title: Title of the generated HTML report
    """

    width: float = 600.0
    height: float = 400.0
    layout_mode: LayoutMode = "squarify"
    top_entries: int = 20
    verbosity: Verbosity = "normal"
    report_title: str = "Bellavista"

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative")
        if self.layout_mode not in _LAYOUT_MODES:
            raise ValueError(f"layout_mode must be one of: {', '.join(_LAYOUT_MODES)}")
        if self.top_entries < 1:
            raise ValueError("top_entries must be at least 1")
        if self.verbosity not in _VERBOSITIES:
            raise ValueError(f"verbosity must be one of: {', '.join(_VERBOSITIES)}")

    @property
    def bounds(self) -> Rect:
        """Layout bounds anchored at the origin."""
        return Rect.from_size(float(self.width), float(self.height))


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> VisualizerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated VisualizerConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value or key is invalid
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".bellavista.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "bellavista.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(VisualizerConfig)}
    for key in merged:
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown configuration key")

    try:
        return VisualizerConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from BELLAVISTA_* environment variables.

    Supported environment variables:
        BELLAVISTA_WIDTH: float
        BELLAVISTA_HEIGHT: float
        BELLAVISTA_LAYOUT_MODE: squarify/split
        BELLAVISTA_TOP_ENTRIES: int
        BELLAVISTA_VERBOSITY: quiet/normal/verbose
        BELLAVISTA_REPORT_TITLE: str
    """
    type_hints = get_type_hints(VisualizerConfig)
    result: dict[str, Any] = {}

    for f in fields(VisualizerConfig):
        env_key = f"BELLAVISTA_{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[f.name] = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # str and Literal aliases
    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}") from e
