"""Configuration: install options from settings.json, env and explicit args."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SETTINGS_DIR_NAME = ".droidkit"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class InstallOptions:
    force: bool = False  # overwrite existing destinations
    link: bool = False  # symlink instead of copying
    use_platform_www: bool = False  # mirror web assets into platform_www too


def _to_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _env_flag(name: str) -> bool | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return _to_bool(value)


def _apply_settings(options: InstallOptions, path: Path) -> None:
    """Apply the ``installOptions`` block of a single settings.json file."""
    if not path.exists():
        return
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError):
        return
    block = data.get("installOptions", {}) if isinstance(data, dict) else {}
    if not isinstance(block, dict):
        return
    if "force" in block:
        options.force = _to_bool(block["force"])
    if "link" in block:
        options.link = _to_bool(block["link"])
    if "usePlatformWww" in block:
        options.use_platform_www = _to_bool(block["usePlatformWww"])


def load_options(
    project_dir: Path | None = None,
    *,
    force: bool | None = None,
    link: bool | None = None,
    use_platform_www: bool | None = None,
) -> InstallOptions:
    """Load options with priority: explicit args > env > .env > settings.json > defaults."""
    load_dotenv()

    options = InstallOptions()

    if project_dir is not None:
        _apply_settings(options, project_dir / SETTINGS_DIR_NAME / "settings.json")

    if (env_force := _env_flag("DROIDKIT_FORCE")) is not None:
        options.force = env_force
    if (env_link := _env_flag("DROIDKIT_LINK")) is not None:
        options.link = env_link
    if (env_www := _env_flag("DROIDKIT_USE_PLATFORM_WWW")) is not None:
        options.use_platform_www = env_www

    if force is not None:
        options.force = force
    if link is not None:
        options.link = link
    if use_platform_www is not None:
        options.use_platform_www = use_platform_www

    return options
