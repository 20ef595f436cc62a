"""
Default values for VERSA version resolution.

Provides shared defaults used by:
- schema_validator.py (recognized sections and detail groups, hex color check)
- merger.py (synthesized version_config, per-version fallbacks)
- projector.py (section ordering and detail group labels)
"""

import re
from typing import Any, Dict, List

# Every section the merged model knows how to feed to the renderer
CANONICAL_SECTIONS = [
    "summary",
    "technical_skills",
    "projects",
    "phd_research",
    "education",
    "publications",
    "certifications",
]

# Sections a renderer can draw beyond the canonical list
EXTRA_RENDERABLE_SECTIONS = ["work_experience"]

RENDERABLE_SECTIONS = CANONICAL_SECTIONS + EXTRA_RENDERABLE_SECTIONS

# Order used when a version does not declare sections_order
DEFAULT_SECTIONS_ORDER = ["summary", "technical_skills", "projects", "education"]

DEFAULT_PROJECTS_LIMIT = 5
DEFAULT_THEME_BASE = "theme-"
DEFAULT_THEME_COLOR = "#666666"
DEFAULT_ICON = "fas fa-file-alt"

HEX_COLOR_PATTERN = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")

PUBLICATION_TYPES = ("Paper", "Poster")

# Recognized skill detail groups, in display order, with their labels.
# "keywords" is the only group carried by legacy technical_skills items.
DETAIL_GROUP_LABELS = {
    "tech_stack": "TECH STACK",
    "core_skill": "CORE SKILL",
    "methodology": "METHODOLOGY",
    "use_scenario": "USE SCENARIO",
    "keywords": "KEYWORDS",
}


def is_hex_color(value: Any) -> bool:
    """True for '#' followed by 3 or 6 hex digits."""
    return isinstance(value, str) and bool(HEX_COLOR_PATTERN.fullmatch(value))


def is_integer(value: Any) -> bool:
    """True for real integers (bools are rejected even though they subclass int)."""
    return isinstance(value, int) and not isinstance(value, bool)


def get_default_version_config(
    version_keys: List[str],
    skill_ids: List[str],
    theme_base: str = DEFAULT_THEME_BASE,
    available_sections: List[str] = None,
) -> Dict[str, Any]:
    """
    Build the version_config used when the version set does not carry one.

    Args:
        version_keys: Version keys in document order
        skill_ids: Skill pool keys in document order
        theme_base: Theme class prefix
        available_sections: Recognized section names (defaults to CANONICAL_SECTIONS)

    Returns:
        Dict with default_version, theme_base, available_sections, skill_categories
    """
    return {
        "default_version": version_keys[0] if version_keys else None,
        "theme_base": theme_base,
        "available_sections": list(available_sections or CANONICAL_SECTIONS),
        "skill_categories": list(skill_ids),
    }
