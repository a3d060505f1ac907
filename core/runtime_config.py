"""Configuration loading and logging bootstrap."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from core.errors import ParseError

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "names_file": "~/.config/gnav/workspaces.yaml",
    },
    "commands": {
        "wmctrl": "wmctrl",
        "gsettings": "gsettings",
        "fuzzy_finder": ["wofi", "--show", "dmenu", "-i", "--allow-images", "--allow-markup"],
    },
    "gsettings": {
        "dynamic_schema": "org.gnome.mutter",
        "dynamic_key": "dynamic-workspaces",
        "count_schema": "org.gnome.desktop.wm.preferences",
        "count_key": "num-workspaces",
    },
    "display": {
        "active_marker": "*",
        "highlight_color": "#ff5555",
        "new_workspace_label": "New Workspace",
    },
    "logging": {
        "level": "WARNING",
    },
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def user_config_path() -> Path:
    """Return the per-user config file location."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "gnav" / "config.yaml"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_names_path(config: dict[str, Any]) -> Path:
    """Expand the configured names file path."""
    raw = config.get("paths", {}).get("names_file", DEFAULT_CONFIG["paths"]["names_file"])
    return Path(os.path.expandvars(str(raw))).expanduser()


def load_effective_config(root: Path, user_path: Path | None = None) -> dict[str, Any]:
    """Merge built-in defaults, the repo default file and the user file."""
    repo_cfg = load_yaml(root / "config" / "default.yaml")
    user_cfg = load_yaml(user_path if user_path is not None else user_config_path())
    merged = merge_dicts(copy.deepcopy(DEFAULT_CONFIG), repo_cfg)
    return merge_dicts(merged, user_cfg)


def configure_logging(
    config: dict[str, Any],
    verbose: bool = False,
    handler: logging.Handler | None = None,
) -> None:
    """Install a single root handler at the configured level."""
    level_name = "DEBUG" if verbose else str(config.get("logging", {}).get("level", "WARNING"))
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    handlers = [handler] if handler is not None else None
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
