"""Configuration file management for informer."""

from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any, Dict

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore

import tomli_w

# Default configuration file location
CONFIG_FILE = Path.home() / ".informer.toml"

# Default configuration
DEFAULT_CONFIG = {
    "panel": {
        "width": 65,
    },
    "report": {
        "follow_symlinks": False,
        "fail_fast": False,
    },
}


def load_config() -> Dict[str, Any]:
    """Load configuration from file or return defaults."""
    if not CONFIG_FILE.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(CONFIG_FILE, "rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as err:
        print(
            f"Warning: Ignoring unreadable configuration {CONFIG_FILE}: {err}",
            file=sys.stderr,
        )
        return copy.deepcopy(DEFAULT_CONFIG)
    # Merge with defaults to ensure all keys exist
    return _merge_config(DEFAULT_CONFIG, config)


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "wb") as f:
            tomli_w.dump(config, f)
    except OSError as err:
        print(f"Warning: Failed to save configuration to {CONFIG_FILE}: {err}", file=sys.stderr)


def _merge_config(default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Merge user config with defaults, preserving user values."""
    result = copy.deepcopy(default)
    for key, value in user.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_config(result[key], value)
        else:
            result[key] = value
    return result


def create_default_config() -> None:
    """Create default configuration file if it doesn't exist."""
    if CONFIG_FILE.exists():
        return

    save_config(DEFAULT_CONFIG)


def get_panel_width() -> int:
    """Get the configured inner panel width."""
    config = load_config()
    panel = config.get("panel")
    if not isinstance(panel, dict):
        panel = {}
    width = panel.get("width", DEFAULT_CONFIG["panel"]["width"])
    if not isinstance(width, int) or isinstance(width, bool):
        return DEFAULT_CONFIG["panel"]["width"]
    return width


def get_report_settings() -> Dict[str, bool]:
    """Get the ``follow_symlinks`` and ``fail_fast`` switches."""
    config = load_config()
    report = config.get("report")
    if not isinstance(report, dict):
        report = {}
    defaults = DEFAULT_CONFIG["report"]
    return {key: bool(report.get(key, default)) for key, default in defaults.items()}


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
    "create_default_config",
    "get_panel_width",
    "get_report_settings",
]
