"""
Profile + Version Set Merging

Combines the versionless profile document with the version-set document into
a single MergedModel: the shared profile plus one ResolvedVersion per key.

Failure policy:
- StructuralError only when nothing can be merged (profile not a mapping,
  versions missing/empty/not a mapping, a version entry not a mapping).
- Everything else (dangling skill ids, invalid default version, bad
  projects_limit, invalid theme color) falls back to a default and is
  recorded as a warning on the model.
"""

import copy
from typing import Any, Dict, List, Optional

from versa.contexts.templating.config_resolver import MergeSettings
from versa.contexts.templating.defaults import (
    get_default_version_config,
    is_hex_color,
    is_integer,
)
from versa.contexts.templating.exceptions import StructuralError
from versa.contexts.templating.fields import get_skill_ids, lookup_version_field
from versa.contexts.templating.version_data_structures import (
    MergedModel,
    ResolvedVersion,
    VersionConfig,
)


def merge(
    profile: Any,
    version_set: Any,
    settings: Optional[MergeSettings] = None,
) -> MergedModel:
    """
    Merge a profile and a version set into a MergedModel.

    Inputs are not modified; the model owns deep copies.

    Args:
        profile: Decoded profile document
        version_set: Decoded version-set document ({config?, versions})
        settings: Merge defaults (built-in defaults when None)

    Returns:
        MergedModel with resolved versions and collected warnings

    Raises:
        StructuralError: If the documents cannot be merged at all

    Example:
        >>> model = merge(profile, {"versions": {"ai": {"display_name": "AI"}}})
        >>> model.version_keys()
        ['ai']
    """
    settings = settings or MergeSettings()
    versions = _check_structure(profile, version_set)

    profile = copy.deepcopy(profile)
    warnings: List[str] = []

    skill_ids = get_skill_ids(profile)
    projects = profile.get("projects")
    # Only string ids can be referenced by include_projects or overrides
    project_ids = [
        p["id"]
        for p in (projects if isinstance(projects, list) else [])
        if isinstance(p, dict) and isinstance(p.get("id"), str) and p["id"]
    ]

    config = _resolve_config(version_set, list(versions), skill_ids, settings, warnings)

    resolved = {
        key: _resolve_version(key, entry, profile, skill_ids, project_ids, settings, warnings)
        for key, entry in versions.items()
    }

    return MergedModel(
        profile=profile,
        config=config,
        versions=resolved,
        warnings=warnings,
    )


def _check_structure(profile: Any, version_set: Any) -> Dict[str, Any]:
    """Raise StructuralError for unmergeable input; return the versions mapping."""
    if not isinstance(profile, dict):
        raise StructuralError("Invalid profile data structure: profile must be an object")

    if not isinstance(version_set, dict) or version_set.get("versions") is None:
        raise StructuralError("Invalid versions data structure: versions object is required")

    versions = version_set["versions"]
    if not isinstance(versions, dict):
        raise StructuralError("Invalid versions data structure: versions must be an object")

    if not versions:
        raise StructuralError("At least one version configuration is required")

    for key, entry in versions.items():
        if not isinstance(entry, dict):
            raise StructuralError(f'Version "{key}": Configuration must be an object', version_key=key)

    return versions


def _resolve_config(
    version_set: Dict[str, Any],
    version_keys: List[str],
    skill_ids: List[str],
    settings: MergeSettings,
    warnings: List[str],
) -> VersionConfig:
    defaults = get_default_version_config(
        version_keys,
        skill_ids,
        theme_base=settings.theme_base,
        available_sections=settings.available_sections,
    )

    raw = version_set.get("config", version_set.get("version_config"))
    if raw is None:
        return VersionConfig(**defaults)

    if not isinstance(raw, dict):
        warnings.append("version_config should be an object; using default configuration")
        return VersionConfig(**defaults)

    default_version = raw.get("default_version")
    if default_version is None:
        default_version = defaults["default_version"]
    elif default_version not in version_keys:
        warnings.append(
            f'Default version "{default_version}" not found; '
            f'falling back to "{defaults["default_version"]}"'
        )
        default_version = defaults["default_version"]

    theme_base = raw.get("theme_base")
    if not isinstance(theme_base, str):
        theme_base = defaults["theme_base"]

    available_sections = raw.get("available_sections")
    if not isinstance(available_sections, list) or not available_sections:
        available_sections = defaults["available_sections"]

    skill_categories = raw.get("skill_categories")
    if not isinstance(skill_categories, list):
        skill_categories = defaults["skill_categories"]

    return VersionConfig(
        default_version=default_version,
        theme_base=theme_base,
        available_sections=[s for s in available_sections if isinstance(s, str)],
        skill_categories=[s for s in skill_categories if isinstance(s, str)],
    )


def _resolve_version(
    key: str,
    entry: Dict[str, Any],
    profile: Dict[str, Any],
    skill_ids: List[str],
    project_ids: List[str],
    settings: MergeSettings,
    warnings: List[str],
) -> ResolvedVersion:
    context = f'Version "{key}"'

    display_name = entry.get("display_name")
    if not isinstance(display_name, str) or not display_name:
        display_name = key

    theme_color = entry.get("theme_color")
    if theme_color is None:
        theme_color = settings.theme_color
    elif not is_hex_color(theme_color):
        warnings.append(
            f'{context}: Invalid theme_color "{theme_color}"; using {settings.theme_color}'
        )
        theme_color = settings.theme_color

    icon = entry.get("icon")
    if not isinstance(icon, str) or not icon:
        icon = settings.icon

    summary = entry.get("summary")
    if not isinstance(summary, str):
        summary = None

    _, skills_focus = lookup_version_field(entry, "skills_focus")
    selected_skill_ids = _resolve_skill_selection(context, skills_focus, skill_ids, warnings)

    _, sections_order = lookup_version_field(entry, "sections_order")
    sections_order = _resolve_sections_order(context, sections_order, settings, warnings)

    _, projects_limit = lookup_version_field(entry, "projects_limit")
    if projects_limit is None:
        projects_limit = settings.projects_limit
    elif not is_integer(projects_limit) or projects_limit < 0:
        warnings.append(
            f"{context}: projects_limit {projects_limit!r} is not a non-negative integer; "
            f"using {settings.projects_limit}"
        )
        projects_limit = settings.projects_limit

    _, include_projects = lookup_version_field(entry, "include_projects")
    include_project_ids = None
    if isinstance(include_projects, list):
        # Unknown ids are hints, not requirements
        include_project_ids = [pid for pid in project_ids if pid in include_projects]

    project_descriptions = _resolve_description_overrides(entry, project_ids)

    _, include_cover_letter = lookup_version_field(entry, "include_cover_letter")
    include_cover_letter = include_cover_letter is True
    cover_letters = profile.get("cover_letters")
    if include_cover_letter and not (isinstance(cover_letters, dict) and key in cover_letters):
        warnings.append(f"{context}: include_cover_letter is set but no cover letter exists")

    return ResolvedVersion(
        key=key,
        display_name=display_name,
        theme_color=theme_color,
        icon=icon,
        summary=summary,
        sections_order=sections_order,
        projects_limit=projects_limit,
        selected_skill_ids=selected_skill_ids,
        include_project_ids=include_project_ids,
        project_descriptions=project_descriptions,
        include_cover_letter=include_cover_letter,
    )


def _resolve_skill_selection(
    context: str,
    skills_focus: Any,
    available: List[str],
    warnings: List[str],
) -> List[str]:
    """
    Filter a focus list against the skill pool.

    Unknown ids are dropped with a single warning naming them and the available
    set. An absent focus list, or one that filters down to nothing, selects
    every available skill.
    """
    if not isinstance(skills_focus, list):
        return list(available)

    available_set = set(available)
    selected: List[str] = []
    dropped: List[str] = []
    for skill_id in skills_focus:
        if isinstance(skill_id, str) and skill_id in available_set:
            if skill_id not in selected:
                selected.append(skill_id)
        else:
            dropped.append(str(skill_id))

    if dropped:
        message = (
            f"{context}: Invalid skill ids dropped: {', '.join(dropped)}. "
            f"Available: {', '.join(available)}"
        )
        if not selected:
            message += ". No valid ids remain; using all available skills"
        warnings.append(message)

    return selected or list(available)


def _resolve_sections_order(
    context: str,
    sections_order: Any,
    settings: MergeSettings,
    warnings: List[str],
) -> List[str]:
    if sections_order is None:
        return list(settings.sections_order)

    if not isinstance(sections_order, list):
        warnings.append(f"{context}: sections_order must be an array; using default order")
        return list(settings.sections_order)

    resolved: List[str] = []
    for section in sections_order:
        if not isinstance(section, str):
            warnings.append(f"{context}: Ignoring non-string section {section!r}")
        elif section not in resolved:
            resolved.append(section)
    return resolved


def _resolve_description_overrides(entry: Dict[str, Any], project_ids: List[str]) -> Dict[str, str]:
    """Keep only overrides that point at an existing project and carry text."""
    content_overrides = entry.get("content_overrides")
    if not isinstance(content_overrides, dict):
        return {}

    descriptions = content_overrides.get("project_descriptions")
    if not isinstance(descriptions, dict):
        return {}

    return {
        project_id: description
        for project_id, description in descriptions.items()
        if project_id in project_ids and isinstance(description, str)
    }
