"""
Field lookup helpers shared by the schema validator and the merger.

Version entries come in two shapes: the separated version set nests content
selection under ``content_config``, while the legacy single document puts
``skills_focus``/``sections_order``/``projects_limit`` directly on the entry.
Both shapes are read through lookup_version_field() so every component agrees
on where a field lives.
"""

from typing import Any, Dict, List, Optional, Tuple

# Accepted spellings per logical field, in lookup priority order
FIELD_ALIASES = {
    "skills_focus": ("selected_skills", "skills_focus"),
}

SKILLS_POOL_KEY = "skills_pool"
LEGACY_SKILLS_KEY = "technical_skills"


def lookup_version_field(version: Dict[str, Any], name: str) -> Tuple[str, Any]:
    """
    Find a field on a version entry, then inside its content_config.

    Args:
        version: Raw version entry (must be a dict)
        name: Logical field name (e.g., "skills_focus")

    Returns:
        (key actually found, value) or (name, None) when absent

    Example:
        >>> lookup_version_field({"content_config": {"selected_skills": ["py"]}}, "skills_focus")
        ('selected_skills', ['py'])
    """
    aliases = FIELD_ALIASES.get(name, (name,))
    scopes = [version]
    content_config = version.get("content_config")
    if isinstance(content_config, dict):
        scopes.append(content_config)

    for scope in scopes:
        for alias in aliases:
            if scope.get(alias) is not None:
                return alias, scope[alias]

    return name, None


def get_skill_pool(profile: Dict[str, Any]) -> Tuple[Optional[str], Dict[str, Any]]:
    """
    Return the profile's skill pool and which key it came from.

    skills_pool wins; the legacy technical_skills category mapping is used
    only when skills_pool is absent.

    Returns:
        (key, pool) - key is None and pool empty when the profile has neither
    """
    for key in (SKILLS_POOL_KEY, LEGACY_SKILLS_KEY):
        pool = profile.get(key)
        if isinstance(pool, dict):
            return key, pool
    return None, {}


def get_skill_ids(profile: Dict[str, Any]) -> List[str]:
    """Skill ids (or legacy category ids) in document order."""
    _, pool = get_skill_pool(profile)
    return list(pool.keys())
