"""
Merge Settings Resolution

Loads the defaults the merger applies to every version (projects limit, theme
prefix, fallback color and icon, section ordering) from an optional YAML file
layered over the built-in defaults.

Examples:
    # Built-in defaults only
    >>> settings = load_merge_settings()

    # Layer a settings file on top
    >>> settings = load_merge_settings(Path("config/merge_settings.yaml"))
    >>> settings.projects_limit
    3
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from versa.contexts.templating.defaults import (
    CANONICAL_SECTIONS,
    DEFAULT_ICON,
    DEFAULT_PROJECTS_LIMIT,
    DEFAULT_SECTIONS_ORDER,
    DEFAULT_THEME_BASE,
    DEFAULT_THEME_COLOR,
    is_hex_color,
)

load_dotenv()
SETTINGS_PATH = os.getenv("VERSA_SETTINGS_PATH")


@dataclass
class MergeSettings:
    """
    Defaults applied by the merger when a version leaves a field unset.

    Attributes:
        projects_limit: Project cap for versions without a valid projects_limit
        theme_base: Theme class prefix when version_config is absent
        theme_color: Fallback theme color for missing or invalid hex values
        icon: Fallback version icon
        sections_order: Render order for versions without sections_order
        available_sections: Recognized section names when version_config is absent
    """

    projects_limit: int = DEFAULT_PROJECTS_LIMIT
    theme_base: str = DEFAULT_THEME_BASE
    theme_color: str = DEFAULT_THEME_COLOR
    icon: str = DEFAULT_ICON
    sections_order: List[str] = field(default_factory=lambda: list(DEFAULT_SECTIONS_ORDER))
    available_sections: List[str] = field(default_factory=lambda: list(CANONICAL_SECTIONS))


def load_merge_settings(config_path: Optional[Path] = None) -> MergeSettings:
    """
    Load merge settings, layering a YAML file over the built-in defaults.

    Args:
        config_path: Optional path to a settings YAML (defaults to VERSA_SETTINGS_PATH;
            built-in defaults are returned when neither is set)

    Returns:
        MergeSettings instance

    Raises:
        FileNotFoundError: If the settings file does not exist
        ValueError: If the file has unknown keys, wrong types, or invalid values
    """
    if config_path is None:
        if not SETTINGS_PATH:
            return MergeSettings()
        config_path = Path(SETTINGS_PATH)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Settings file not found: {config_path}")

    base = OmegaConf.structured(MergeSettings)
    try:
        merged = OmegaConf.merge(base, OmegaConf.load(config_path))
    except OmegaConfBaseException as e:
        allowed = [f.name for f in fields(MergeSettings)]
        raise ValueError(f"Invalid settings in {config_path}: {e}. Allowed keys: {allowed}") from e

    settings = OmegaConf.to_object(merged)

    if settings.projects_limit < 0:
        raise ValueError(f"projects_limit must be non-negative, got {settings.projects_limit}")
    if not is_hex_color(settings.theme_color):
        raise ValueError(f"theme_color must be a hex color, got {settings.theme_color!r}")

    return settings
