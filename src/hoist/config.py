"""Hoist Configuration

Configuration loading with environment variable support and sensible defaults.

Environment Variables:
    HOIST_CONFIG_PATH: Path to config file (default: hoist.yaml in the base dir)
    HOIST_LOG_LEVEL: Override logging level from config

Configuration Schema:
    feature_directories: dict - Ordered mapping of directory -> module namespace.
        Every directory is scanned for flag classes; the first one is where
        `hoist make` writes new flags.
    logging:
        level: str - Logging level (default: "WARNING")
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "hoist.yaml"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""
    pass


DEFAULT_FEATURE_DIRECTORIES: Dict[str, str] = {
    "app/features": "app.features",
}

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "feature_directories": DEFAULT_FEATURE_DIRECTORIES,
    "logging": {
        "level": "WARNING",
    },
}

# Sections replaced as a whole by the config file instead of deep-merged
REPLACED_SECTIONS = {"feature_directories"}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge override dict into base dict.

    Args:
        base: Base dictionary (defaults)
        override: Override dictionary (user config)

    Returns:
        Merged dictionary with override values taking precedence
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _merge_file_config(config: Dict[str, Any], file_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge a loaded config file, replacing sections listed in REPLACED_SECTIONS.

    An empty mapping section (``logging:`` with nothing under it) counts as {}.

    Raises:
        ConfigurationError: If a mapping section holds a scalar or a list
    """
    file_config = dict(file_config)
    for key, value in file_config.items():
        if key in REPLACED_SECTIONS or not isinstance(config.get(key), dict):
            continue
        if value is None:
            file_config[key] = {}
        elif not isinstance(value, dict):
            raise ConfigurationError(
                f"Config section '{key}' must be a mapping, got {type(value).__name__}"
            )

    replaced = {k: v for k, v in file_config.items() if k in REPLACED_SECTIONS}
    merged = _deep_merge(config, {k: v for k, v in file_config.items() if k not in REPLACED_SECTIONS})
    merged.update(replaced)
    return merged


def _resolve_path(path: Optional[str], base_dir: Path) -> Optional[Path]:
    """
    Resolve a path, making relative paths absolute from base_dir.

    Args:
        path: Path string (absolute or relative) or None
        base_dir: Base directory for relative path resolution

    Returns:
        Resolved absolute Path or None if path was None
    """
    if path is None:
        return None

    path_obj = Path(path)
    if path_obj.is_absolute():
        return path_obj
    return (base_dir / path_obj).resolve()


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")
    return data


def load_config(
    config_path: Optional[str] = None,
    base_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """
    Load configuration from YAML file with environment variable overrides.

    Configuration Loading Order (later overrides earlier):
    1. Default values (DEFAULT_CONFIG)
    2. Config file (config_path parameter, HOIST_CONFIG_PATH, or hoist.yaml
       in base_dir)
    3. Environment variable overrides (HOIST_LOG_LEVEL)

    Relative feature directories are resolved against the directory of the
    config file they came from, or base_dir for defaults.

    Args:
        config_path: Explicit config file path (overrides HOIST_CONFIG_PATH)
        base_dir: Project directory for relative path resolution (default: cwd)

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigurationError: If an explicit config file is invalid YAML, or
            feature_directories is malformed

    Examples:
        # Load with defaults (no config file required)
        config = load_config()

        # Load from specific file
        config = load_config("/path/to/hoist.yaml")
    """
    if base_dir is None:
        base_dir = Path.cwd()
    base_dir = Path(base_dir)

    config = copy.deepcopy(DEFAULT_CONFIG)
    directories_base = base_dir

    file_path = config_path or os.environ.get("HOIST_CONFIG_PATH")

    if file_path:
        # Explicit config path - must be valid if it exists
        resolved_path = _resolve_path(file_path, base_dir)
        if resolved_path and resolved_path.exists():
            try:
                config = _merge_file_config(config, _read_yaml(resolved_path))
                directories_base = resolved_path.parent
                logger.info(f"Loaded configuration from: {resolved_path}")
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in config file: {e}")
            except IOError as e:
                raise ConfigurationError(f"Cannot read config file: {e}")
        else:
            logger.warning(f"Config file not found (using defaults): {file_path}")
    else:
        default_config_path = base_dir / CONFIG_FILENAME
        if default_config_path.exists():
            try:
                config = _merge_file_config(config, _read_yaml(default_config_path))
                directories_base = default_config_path.parent
                logger.info(f"Loaded configuration from: {default_config_path}")
            except (yaml.YAMLError, ConfigurationError) as e:
                logger.warning(f"Invalid default config (ignoring): {e}")
            except IOError as e:
                logger.warning(f"Cannot read default config (ignoring): {e}")
        else:
            logger.debug("No config file found, using defaults")

    log_level_override = os.environ.get("HOIST_LOG_LEVEL")
    if log_level_override:
        config.setdefault("logging", {})["level"] = log_level_override

    config["feature_directories"] = {
        str(_resolve_path(directory, directories_base)): namespace
        for directory, namespace in get_feature_directories(config).items()
    }
    config["base_dir"] = str(directories_base)

    return config


def get_feature_directories(config: Dict[str, Any]) -> Dict[str, str]:
    """
    Extract the ordered directory -> namespace mapping.

    Args:
        config: Configuration dictionary from load_config()

    Returns:
        Mapping in configured order (empty if configured as empty/null)

    Raises:
        ConfigurationError: If the section is not a mapping of strings
    """
    directories = config.get("feature_directories")
    if directories is None:
        return {}
    if not isinstance(directories, dict):
        raise ConfigurationError(
            f"feature_directories must be a mapping of directory to namespace, "
            f"got {type(directories).__name__}"
        )

    result: Dict[str, str] = {}
    for directory, namespace in directories.items():
        if namespace is None:
            namespace = ""
        if not isinstance(directory, str) or not isinstance(namespace, str):
            raise ConfigurationError(
                f"Invalid feature directory entry: {directory!r} -> {namespace!r}"
            )
        result[directory] = namespace
    return result


def get_log_level(config: Dict[str, Any]) -> int:
    """
    Get the configured logging level as a logging module constant.

    Unknown level names fall back to WARNING.
    """
    logging_config = config.get("logging") or {}
    name = str(logging_config.get("level") or "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
