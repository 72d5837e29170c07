"""
Configuration Management for DemoReel

Provides configuration loading from multiple sources:
- Default values
- Configuration files (YAML, TOML, JSON)
- Environment variables
- Command line arguments

Configuration precedence (highest to lowest):
1. Command line arguments
2. Environment variables (DEMOREEL_*)
3. Configuration file
4. Default values
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from demoreel.core.constants import DEFAULT_AIRTIME_THRESHOLD, AirshotRule
from demoreel.core.utils import safe_float

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Dataclasses
# ============================================================================


@dataclass
class AnalyserConfig:
    """Configuration for the game details analyser."""

    # Which rule decides that a victim was airborne
    airshot_rule: AirshotRule = AirshotRule.CONDITION

    # Continuous airtime needed under AirshotRule.AIRTIME
    airtime_threshold_seconds: float = DEFAULT_AIRTIME_THRESHOLD

    # In POV demos only record airshots the local player performed
    pov_local_airshots_only: bool = True


@dataclass
class ExportConfig:
    """Configuration for summary export."""

    json_indent: int = 2
    csv_delimiter: str = ","


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str | None = None
    file_max_bytes: int = 10 * 1024 * 1024  # 10MB
    file_backup_count: int = 5


@dataclass
class DemoReelConfig:
    """Main configuration container."""

    analyser: AnalyserConfig = field(default_factory=AnalyserConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Version of the config format
    config_version: str = "1.0"


# ============================================================================
# Configuration Loading
# ============================================================================


def get_default_config_paths() -> list[Path]:
    """Get the default paths to search for configuration files."""
    paths = []

    paths.append(Path.cwd() / "demoreel.yaml")
    paths.append(Path.cwd() / "demoreel.toml")
    paths.append(Path.cwd() / "demoreel.json")

    home = Path.home()
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(home / ".config"))
    paths.append(Path(xdg_config) / "demoreel" / "config.yaml")
    paths.append(Path(xdg_config) / "demoreel" / "config.toml")

    return paths


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a YAML file."""
    import yaml

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_toml_config(path: Path) -> dict[str, Any]:
    """Load configuration from a TOML file."""
    import tomllib

    with open(path, "rb") as f:
        return tomllib.load(f)


def load_json_config(path: Path) -> dict[str, Any]:
    """Load configuration from a JSON file."""
    with open(path) as f:
        return json.load(f)


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a file, detecting format from extension."""
    if not path.exists():
        return {}

    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return load_yaml_config(path)
    elif suffix == ".toml":
        return load_toml_config(path)
    elif suffix == ".json":
        return load_json_config(path)
    else:
        logger.warning(f"Unknown config file format: {suffix}")
        return {}


def load_env_config() -> dict[str, Any]:
    """Load configuration from environment variables."""
    config: dict[str, Any] = {}

    env_mappings = {
        "DEMOREEL_LOG_LEVEL": ("logging", "level"),
        "DEMOREEL_LOG_FILE": ("logging", "file"),
        "DEMOREEL_AIRSHOT_RULE": ("analyser", "airshot_rule"),
        "DEMOREEL_AIRTIME_THRESHOLD": ("analyser", "airtime_threshold_seconds"),
        "DEMOREEL_EXPORT_INDENT": ("export", "json_indent"),
    }

    for env_var, (section, key) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            if section not in config:
                config[section] = {}

            # Type conversion
            if value.lower() in ("true", "false"):
                value = value.lower() == "true"
            elif value.isdigit():
                value = int(value)
            else:
                try:
                    value = float(value)
                except ValueError:
                    pass

            config[section][key] = value

    return config


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two configuration dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def dict_to_config(data: dict[str, Any]) -> DemoReelConfig:
    """Convert a dictionary to DemoReelConfig."""
    config = DemoReelConfig()

    for section in ("analyser", "export", "logging"):
        target = getattr(config, section)
        for key, value in (data.get(section) or {}).items():
            if hasattr(target, key):
                setattr(target, key, value)
            else:
                logger.warning(f"Ignoring unknown config key: {section}.{key}")

    # Normalize values that arrive as plain strings/numbers from files or env
    analyser = config.analyser
    if not isinstance(analyser.airshot_rule, AirshotRule):
        try:
            analyser.airshot_rule = AirshotRule(str(analyser.airshot_rule).lower())
        except ValueError:
            logger.warning(f"Unknown airshot rule {analyser.airshot_rule!r}, using condition")
            analyser.airshot_rule = AirshotRule.CONDITION
    threshold = safe_float(analyser.airtime_threshold_seconds, -1.0)
    if threshold < 0:
        logger.warning(
            f"Invalid airtime threshold {analyser.airtime_threshold_seconds!r}, using {DEFAULT_AIRTIME_THRESHOLD}"
        )
        threshold = DEFAULT_AIRTIME_THRESHOLD
    analyser.airtime_threshold_seconds = threshold

    return config


def load_config(config_file: Path | None = None, include_env: bool = True) -> DemoReelConfig:
    """
    Load configuration from all sources.

    Args:
        config_file: Explicit path to a config file (optional)
        include_env: Whether to include environment variables

    Returns:
        Merged DemoReelConfig
    """
    config_data: dict[str, Any] = {}

    if config_file:
        config_data = load_config_file(config_file)
        logger.info(f"Loaded config from: {config_file}")
    else:
        for path in get_default_config_paths():
            if path.exists():
                config_data = load_config_file(path)
                logger.info(f"Loaded config from: {path}")
                break

    if include_env:
        env_config = load_env_config()
        config_data = merge_configs(config_data, env_config)

    return dict_to_config(config_data)


def config_to_dict(config: DemoReelConfig) -> dict[str, Any]:
    """Convert DemoReelConfig to a dictionary."""
    data = asdict(config)
    data["analyser"]["airshot_rule"] = config.analyser.airshot_rule.value
    return data


# ============================================================================
# Global Configuration
# ============================================================================

_global_config: DemoReelConfig | None = None


def get_config() -> DemoReelConfig:
    """Get the global configuration, loading it if necessary."""
    global _global_config

    if _global_config is None:
        _global_config = load_config()

    return _global_config


def set_config(config: DemoReelConfig) -> None:
    """Set the global configuration."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _global_config
    _global_config = None
