"""
Version Data Structures

Defines the merged model built from a profile and a version set, and the
render model projected from it for one version. These structures are the
interface between the Templating context and the external renderer.

MergedModel instances are frozen: a version switch selects a different
ResolvedVersion, it never modifies the model. A reload builds a new model.
"""

import copy
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from versa.contexts.templating.fields import get_skill_pool


def _string_id(project: Dict[str, Any]) -> Optional[str]:
    """Project id when it is a string; other ids cannot be referenced."""
    project_id = project.get("id")
    return project_id if isinstance(project_id, str) else None


def _list_length(value: Any) -> int:
    return len(value) if isinstance(value, list) else 0


@dataclass(frozen=True)
class VersionConfig:
    """
    Version-set level configuration, with defaults applied.

    Attributes:
        default_version: Key used on initial load and as lookup-miss fallback
        theme_base: Theme class prefix (class = theme_base + version key)
        available_sections: Recognized section names
        skill_categories: Recognized skill categories / skill ids
    """

    default_version: str
    theme_base: str
    available_sections: List[str] = field(default_factory=list)
    skill_categories: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ResolvedVersion:
    """
    A version's configuration after defaults and reference filtering.

    Attributes:
        key: Version key
        display_name: Label for version selectors
        theme_color: Hex color handed to the theming collaborator
        icon: Icon class for version selectors
        summary: Version-specific professional summary
        sections_order: Section names in render order
        projects_limit: Maximum number of projects rendered
        selected_skill_ids: Skill ids (or legacy category ids) in focus order
        include_project_ids: Project allow-list, None when every project is allowed
        project_descriptions: Project id -> replacement description
        include_cover_letter: Whether the renderer should lead with a cover letter
    """

    key: str
    display_name: str
    theme_color: str
    icon: str
    summary: Optional[str]
    sections_order: List[str]
    projects_limit: int
    selected_skill_ids: List[str]
    include_project_ids: Optional[List[str]] = None
    project_descriptions: Dict[str, str] = field(default_factory=dict)
    include_cover_letter: bool = False


@dataclass(frozen=True)
class MergedModel:
    """
    One shared profile plus one ResolvedVersion per version key.

    Attributes:
        profile: Deep copy of the profile document, read-only by convention
        config: Resolved version configuration
        versions: Version key -> ResolvedVersion, in document order
        warnings: Reference warnings collected while merging
    """

    profile: Dict[str, Any]
    config: VersionConfig
    versions: Dict[str, ResolvedVersion]
    warnings: List[str] = field(default_factory=list)

    @property
    def default_version_key(self) -> str:
        return self.config.default_version

    def version_keys(self) -> List[str]:
        """Version keys in document order."""
        return list(self.versions.keys())

    def has_version(self, version_key: str) -> bool:
        return version_key in self.versions

    def get_version(self, version_key: str) -> Optional[ResolvedVersion]:
        """Resolved version for a key, or None when the key is unknown."""
        return self.versions.get(version_key)

    def theme_class(self, version_key: str) -> str:
        return f"{self.config.theme_base}{version_key}"

    def theme_pairs(self) -> List[Tuple[str, str]]:
        """(version key, theme color) pairs for the theming collaborator."""
        return [(key, version.theme_color) for key, version in self.versions.items()]

    def effective_projects(self, version_key: str) -> List[Dict[str, Any]]:
        """
        Projects shown by a version.

        Profile projects in source order, filtered by the version's allow-list
        (if any), capped at projects_limit, with description overrides applied.
        Returned dicts are copies. Unknown version keys yield an empty list.
        """
        version = self.versions.get(version_key)
        if version is None:
            return []

        projects = self.profile.get("projects")
        if not isinstance(projects, list):
            return []
        projects = [p for p in projects if isinstance(p, dict)]
        if version.include_project_ids is not None:
            allowed = set(version.include_project_ids)
            projects = [p for p in projects if _string_id(p) in allowed]

        result = []
        for project in projects[: version.projects_limit]:
            project = copy.deepcopy(project)
            override = version.project_descriptions.get(_string_id(project))
            if override is not None:
                project["description"] = override
            result.append(project)
        return result

    def effective_skill_ids(self, version_key: str) -> List[str]:
        """Selected skill ids in focus order (natural pool order when unfocused)."""
        version = self.versions.get(version_key)
        if version is None:
            return []
        return list(version.selected_skill_ids)

    def stats(self) -> Dict[str, Any]:
        """Counts describing what was loaded."""
        _, pool = get_skill_pool(self.profile)
        return {
            "versions": len(self.versions),
            "projects": _list_length(self.profile.get("projects")),
            "publications": _list_length(self.profile.get("publications")),
            "skills": len(pool),
            "sections": len(self.config.available_sections),
        }

    def version_stats(self) -> Dict[str, Any]:
        """Per-version themes plus the union of sections and selected skills."""
        sections: List[str] = []
        skills: List[str] = []
        for version in self.versions.values():
            sections.extend(s for s in version.sections_order if s not in sections)
            skills.extend(s for s in version.selected_skill_ids if s not in skills)

        return {
            "total": len(self.versions),
            "default": self.default_version_key,
            "themes": [
                {"key": key, "name": version.display_name, "color": version.theme_color}
                for key, version in self.versions.items()
            ],
            "sections": sections,
            "skills": skills,
        }


@dataclass(frozen=True)
class RenderModel:
    """
    Render-ready content for a single version.

    Skills are grouped as ``{category, title, items: [{id, name, level, detail_groups}]}``
    where each detail group is ``{key, label, items}``. Projects are
    ``{id, title, description, features, tech_stack, case_studies}``.
    Education, publications, certifications, phd_research and work_experience
    are copied from the profile unmodified.
    """

    version_key: str
    display_name: str
    theme_color: str
    theme_class: str
    icon: str
    summary: Optional[str]
    sections_order: List[str]
    skills: List[Dict[str, Any]]
    unselected_skills: List[Dict[str, Any]]
    projects: List[Dict[str, Any]]
    personal_info: Dict[str, Any]
    education: List[Any]
    publications: List[Any]
    certifications: List[Any]
    phd_research: Optional[Dict[str, Any]]
    work_experience: List[Any]
    cover_letter: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form, ready for JSON serialization."""
        return asdict(self)
