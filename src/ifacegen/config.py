"""Configuration management with XDG paths and precedence resolution.

This module handles all persistent configuration for ifacegen:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.ifacegen/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~ifacegen.models.GlobalConfig`
  JSON file storing rendering and output defaults.
* **Project config** -- An optional ``./ifacegen.json`` next to the API docs
  document, so a repository can pin its layout and enum style.
* **Precedence resolution** -- :func:`resolve_render_options` merges CLI
  flags, environment variables, project-local config, and global config into
  the effective :class:`~ifacegen.models.RenderOptions`.

Writes go through :func:`~ifacegen.writer.atomic_write`.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ifacegen.exceptions import ConfigError
from ifacegen.models import GlobalConfig, RenderOptions
from ifacegen.writer import atomic_write

logger = logging.getLogger(__name__)

_APP_NAME = "ifacegen"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "ifacegen.json"

ENV_LAYOUT = "IFACEGEN_LAYOUT"
ENV_ENUM_STYLE = "IFACEGEN_ENUM_STYLE"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/ifacegen/`` (default ``~/.config/ifacegen/``).
    On macOS/Windows: ``~/.ifacegen/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/ifacegen/`` (default ``~/.local/share/ifacegen/``).
    On macOS/Windows: ``~/.ifacegen/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Global config ---


def _global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~ifacegen.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    atomic_write(_global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./ifacegen.json``.

    The file has the same shape as the global config but every key is
    optional, e.g. ``{"render": {"layout": "pretty"}}``.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


# --- Precedence resolution ---


def resolve_render_options(
    cli_layout: Optional[str] = None,
    cli_enum_style: Optional[str] = None,
    cli_export: Optional[bool] = None,
    cli_indent: Optional[int] = None,
) -> RenderOptions:
    """Resolve the effective render options with the full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_layout``, ``cli_enum_style``, ``cli_export``, ``cli_indent``)
        2. Environment variables (``IFACEGEN_LAYOUT``, ``IFACEGEN_ENUM_STYLE``)
        3. Project config (``./ifacegen.json``)
        4. User config (``~/.config/ifacegen/config.json``)
        5. Defaults

    Raises:
        ConfigError: If a config file is invalid or the merged values do not
            validate (e.g. ``IFACEGEN_LAYOUT=wide``).
    """
    # 5 + 4
    merged: dict[str, Any] = load_global_config().render.model_dump(mode="json")

    # 3
    project = load_project_config()
    if project is not None:
        project_render = project.get("render") or {}
        if not isinstance(project_render, dict):
            raise ConfigError("Invalid project config: 'render' must be an object")
        merged.update(project_render)

    # 2
    env_layout = os.environ.get(ENV_LAYOUT)
    if env_layout:
        merged["layout"] = env_layout
    env_enum_style = os.environ.get(ENV_ENUM_STYLE)
    if env_enum_style:
        merged["enum_style"] = env_enum_style

    # 1
    overrides = {
        "layout": cli_layout,
        "enum_style": cli_enum_style,
        "export": cli_export,
        "indent": cli_indent,
    }
    merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        options = RenderOptions.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid render options: {exc}") from exc

    logger.debug("Resolved render options: %s", options)
    return options
