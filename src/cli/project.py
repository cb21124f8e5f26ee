"""Project lookup and configuration loading shared by CLI commands."""

import logging
import sys
from pathlib import Path
from typing import Any

import typer

from hoist.config import CONFIG_FILENAME, ConfigurationError, get_log_level, load_config

from .console import print_error, print_warning


def find_project_root(start: Path | None = None) -> Path:
    """Find project root by looking for hoist.yaml in start and its parents.

    Falls back to start (default: cwd) when no config file is found.
    """
    cwd = start or Path.cwd()
    for path in [cwd] + list(cwd.parents):
        if (path / CONFIG_FILENAME).is_file():
            return path
    return cwd


def load_project_config(config_path: str | None = None) -> dict[str, Any]:
    """Load configuration for the current project, exiting on invalid config.

    Also applies the configured logging level, unless debug logging was
    already requested with --verbose.
    """
    project_root = find_project_root()
    if config_path:
        # --config is relative to where the command runs, not the project root
        config_path = str(Path(config_path).resolve())
        if not Path(config_path).is_file():
            print_warning(f"Config file not found, using defaults: {config_path}")
    try:
        config = load_config(config_path, base_dir=project_root)
    except ConfigurationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    root_logger = logging.getLogger()
    if root_logger.level != logging.DEBUG:
        root_logger.setLevel(get_log_level(config))

    return config


def ensure_importable(config: dict[str, Any]) -> None:
    """Put the project base directory on sys.path so feature namespaces import."""
    base_dir = config.get("base_dir")
    if base_dir and base_dir not in sys.path:
        sys.path.insert(0, base_dir)
