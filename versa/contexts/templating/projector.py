"""
Version Projection

Derives the render model for one version from a MergedModel. Projection is a
pure read: it never modifies the model, and two calls with the same inputs
return deep-equal results. Every list and dict in the result is a copy, so a
renderer may mutate what it receives.
"""

import copy
from dataclasses import replace
from typing import Any, Callable, Dict, List, Union

from versa.contexts.templating.defaults import DETAIL_GROUP_LABELS
from versa.contexts.templating.exceptions import VersionNotFound
from versa.contexts.templating.fields import LEGACY_SKILLS_KEY, get_skill_pool
from versa.contexts.templating.logger import _log_warning, log_projection
from versa.contexts.templating.version_data_structures import MergedModel, RenderModel

DEFAULT_SKILL_CATEGORY = "general"


def project(model: MergedModel, version_key: str) -> Union[RenderModel, VersionNotFound]:
    """
    Project the merged model onto one version.

    Args:
        model: MergedModel from merge()
        version_key: Version to project

    Returns:
        RenderModel, or VersionNotFound (falsy) for an unknown key

    Example:
        >>> render = project(model, "ai") or project(model, model.default_version_key)
    """
    version = model.get_version(version_key)
    if version is None:
        return VersionNotFound(version_key=version_key, available=model.version_keys())

    profile = model.profile
    pool_key, pool = get_skill_pool(profile)
    selected = model.effective_skill_ids(version_key)
    unselected = [skill_id for skill_id in pool if skill_id not in selected]

    if pool_key == LEGACY_SKILLS_KEY:
        skills = _legacy_skill_groups(pool, selected)
        unselected_skills = _legacy_skill_groups(pool, unselected)
    else:
        skills = _skill_groups(pool, selected)
        unselected_skills = _skill_groups(pool, unselected)

    projects = [_project_entry(p) for p in model.effective_projects(version_key)]

    cover_letter = None
    if version.include_cover_letter:
        cover_letters = profile.get("cover_letters")
        if isinstance(cover_letters, dict):
            cover_letter = copy.deepcopy(cover_letters.get(version_key))

    render_model = RenderModel(
        version_key=version_key,
        display_name=version.display_name,
        theme_color=version.theme_color,
        theme_class=model.theme_class(version_key),
        icon=version.icon,
        summary=version.summary,
        sections_order=[],
        skills=skills,
        unselected_skills=unselected_skills,
        projects=projects,
        personal_info=_copy_of(profile.get("personal_info"), dict),
        education=_copy_of(profile.get("education"), list),
        publications=_copy_of(profile.get("publications"), list),
        certifications=_copy_of(profile.get("certifications"), list),
        phd_research=_copy_of(profile.get("phd_research"), dict) or None,
        work_experience=_copy_of(profile.get("work_experience"), list),
        cover_letter=cover_letter,
    )

    # sections_order depends on which sections ended up with content
    sections_order = [
        name for name in version.sections_order if _section_has_content(name, render_model)
    ]
    render_model = replace(render_model, sections_order=sections_order)

    log_projection(version_key, render_model)
    return render_model


def project_or_default(model: MergedModel, version_key: str) -> RenderModel:
    """
    Project a version, falling back to the default version on a lookup miss.

    Args:
        model: MergedModel from merge()
        version_key: Requested version

    Returns:
        RenderModel for version_key, or for the default version if unknown
    """
    result = project(model, version_key)
    if isinstance(result, VersionNotFound):
        _log_warning(f"{result.message}; using {model.default_version_key}")
        result = project(model, model.default_version_key)
    return result


SECTION_CONTENT_CHECKS: Dict[str, Callable[[RenderModel], bool]] = {
    "summary": lambda rm: bool(rm.summary),
    "technical_skills": lambda rm: bool(rm.skills),
    "projects": lambda rm: bool(rm.projects),
    "education": lambda rm: bool(rm.education),
    "publications": lambda rm: bool(rm.publications),
    "certifications": lambda rm: bool(rm.certifications),
    "phd_research": lambda rm: bool(rm.phd_research and rm.phd_research.get("sections")),
    "work_experience": lambda rm: bool(rm.work_experience),
}


def _copy_of(value: Any, expected_type: type) -> Any:
    """Deep copy of value, or an empty expected_type when the shape is wrong."""
    if isinstance(value, expected_type):
        return copy.deepcopy(value)
    return expected_type()


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


def _section_has_content(name: str, render_model: RenderModel) -> bool:
    check = SECTION_CONTENT_CHECKS.get(name)
    return check is not None and check(render_model)


def _detail_groups(entry: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Recognized, non-empty detail groups in declared order."""
    groups = []
    for key, label in DETAIL_GROUP_LABELS.items():
        items = entry.get(key)
        if isinstance(items, list) and items:
            groups.append({"key": key, "label": label, "items": list(items)})
    return groups


def _category_title(category: str) -> str:
    return category.replace("_", " ").title()


def _skill_groups(pool: Dict[str, Any], skill_ids: List[str]) -> List[Dict[str, Any]]:
    """Group skills by category; categories in first-appearance order."""
    groups: Dict[str, Dict[str, Any]] = {}
    for skill_id in skill_ids:
        skill = pool.get(skill_id)
        if not isinstance(skill, dict):
            continue
        category = skill.get("category")
        if not isinstance(category, str) or not category:
            category = DEFAULT_SKILL_CATEGORY
        group = groups.setdefault(
            category, {"category": category, "title": _category_title(category), "items": []}
        )
        group["items"].append(
            {
                "id": skill_id,
                "name": skill.get("name", skill_id),
                "level": skill.get("level"),
                "detail_groups": _detail_groups(skill),
            }
        )
    return list(groups.values())


def _legacy_skill_groups(pool: Dict[str, Any], category_ids: List[str]) -> List[Dict[str, Any]]:
    """One group per legacy technical_skills category."""
    groups = []
    for category_id in category_ids:
        category = pool.get(category_id)
        if not isinstance(category, dict):
            continue
        items = [
            {
                "id": None,
                "name": item.get("name"),
                "level": item.get("level"),
                "detail_groups": _detail_groups(item),
            }
            for item in _as_list(category.get("items"))
            if isinstance(item, dict)
        ]
        groups.append(
            {
                "category": category_id,
                "title": category.get("title") or _category_title(str(category_id)),
                "items": items,
            }
        )
    return groups


def _project_entry(project: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": project.get("id"),
        "title": project.get("title"),
        "description": project.get("description"),
        "features": _as_list(project.get("features")),
        "tech_stack": project.get("tech_stack"),
        "case_studies": copy.deepcopy(_as_list(project.get("items"))),
    }
