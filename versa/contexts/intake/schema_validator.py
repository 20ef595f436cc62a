"""
Schema validation for résumé data before merging.

Checks the structure of the combined profile + version-set document and
collects every finding in one pass:
- errors: structural or type problems (wrong type, missing required field,
  invalid hex color, level out of range). Any error makes the data invalid.
- warnings: soft problems (missing recommended sections, empty lists,
  non-integer publication years, unrecognized names). Never affect validity.

Validation never stops at the first problem and never raises for bad data.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from versa.contexts.intake.documents import combine_documents
from versa.contexts.templating.defaults import (
    DETAIL_GROUP_LABELS,
    PUBLICATION_TYPES,
    RENDERABLE_SECTIONS,
    is_hex_color,
    is_integer,
)
from versa.contexts.templating.fields import lookup_version_field
from versa.utils.report_formatter import TableFormatter

REQUIRED_SECTIONS = ["versions"]

# (display name, accepted keys)
RECOMMENDED_SECTIONS = [
    ("education", ("education",)),
    ("skills_pool", ("skills_pool", "technical_skills")),
    ("projects", ("projects",)),
]

# (field, python type, type name used in messages)
REQUIRED_VERSION_FIELDS = [
    ("display_name", str, "string"),
    ("summary", str, "string"),
    ("skills_focus", list, "array"),
    ("sections_order", list, "array"),
]

REQUIRED_EDUCATION_FIELDS = ["degree", "institution", "period"]
REQUIRED_PUBLICATION_FIELDS = ["title", "authors", "venue", "year", "type"]

# Names that may appear in sections_order without being a data section
SECTION_ORDER_MARKERS = ["cover_letter"]


@dataclass
class ValidationResult:
    """
    Result of schema validation.

    Attributes:
        is_valid: True iff errors is empty
        errors: Blocking problems, in discovery order
        warnings: Non-blocking problems, in discovery order
        structural_errors: Subset of errors that leave nothing to merge
            (no usable versions, a version entry or a document not an object)
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    structural_errors: List[str] = field(default_factory=list)

    @property
    def issues(self) -> List[str]:
        """Errors followed by warnings."""
        return self.errors + self.warnings


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class SchemaValidator:
    """
    Field-by-field validator for the combined résumé document.

    Each call to validate() starts from a clean slate, so one instance can be
    reused; instances hold no state between calls that callers can observe.
    """

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.structural_errors: List[str] = []

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate a combined (or legacy) résumé document.

        Args:
            data: Decoded JSON value

        Returns:
            ValidationResult with every error and warning found
        """
        self.errors = []
        self.warnings = []
        self.structural_errors = []

        if not isinstance(data, dict):
            self._add_structural_error("Data must be a valid object")
            return self._result()

        self._validate_top_level(data)

        available_sections = None
        if "version_config" in data:
            available_sections = self._validate_version_config(data["version_config"])

        if "versions" in data:
            self._validate_versions(data["versions"], available_sections)

        self._validate_core_sections(data)

        return self._result()

    def _result(self) -> ValidationResult:
        return ValidationResult(
            is_valid=not self.errors,
            errors=list(self.errors),
            warnings=list(self.warnings),
            structural_errors=list(self.structural_errors),
        )

    def _add_error(self, message: str) -> None:
        self.errors.append(message)

    def _add_structural_error(self, message: str) -> None:
        self.errors.append(message)
        self.structural_errors.append(message)

    def _add_warning(self, message: str) -> None:
        self.warnings.append(message)

    # ------------------------------------------------------------------
    # Top level and version configuration
    # ------------------------------------------------------------------

    def _validate_top_level(self, data: Dict[str, Any]) -> None:
        for section in REQUIRED_SECTIONS:
            if data.get(section) is None:
                self._add_structural_error(f"Missing required section: {section}")

        for name, keys in RECOMMENDED_SECTIONS:
            if not any(data.get(key) for key in keys):
                self._add_warning(f"Recommended section missing: {name}")

    def _validate_version_config(self, version_config: Any) -> List[str]:
        """Validate version_config; returns its available_sections when usable."""
        if not isinstance(version_config, dict):
            self._add_warning("version_config should be an object")
            return None

        for key in ("default_version", "theme_base"):
            value = version_config.get(key)
            if value is not None and not isinstance(value, str):
                self._add_error(f"version_config.{key} must be a string")

        available_sections = None
        for key in ("available_sections", "skill_categories"):
            value = version_config.get(key)
            if value is None:
                continue
            if not isinstance(value, list):
                self._add_error(f"version_config.{key} must be an array")
            elif not value:
                self._add_warning(f"version_config.{key} is empty")
            elif key == "available_sections":
                available_sections = [s for s in value if isinstance(s, str)]

        return available_sections

    def _validate_versions(self, versions: Any, available_sections: List[str]) -> None:
        if not isinstance(versions, dict):
            self._add_structural_error("versions must be an object")
            return

        if not versions:
            self._add_structural_error("At least one version configuration is required")
            return

        recognized = set(RENDERABLE_SECTIONS) | set(SECTION_ORDER_MARKERS)
        if available_sections:
            recognized |= set(available_sections)

        for key, version in versions.items():
            self._validate_single_version(key, version, recognized)

    def _validate_single_version(self, key: str, version: Any, recognized: set) -> None:
        context = f'Version "{key}"'

        if not isinstance(version, dict):
            self._add_structural_error(f"{context}: Configuration must be an object")
            return

        for name, expected_type, type_name in REQUIRED_VERSION_FIELDS:
            _, value = lookup_version_field(version, name)
            if _is_missing(value):
                self._add_error(f'{context}: Missing required field "{name}"')
            elif not isinstance(value, expected_type):
                self._add_error(f'{context}: Field "{name}" must be of type {type_name}')

        theme_color = version.get("theme_color")
        if theme_color is not None and not is_hex_color(theme_color):
            self._add_error(f'{context}: Invalid theme_color format "{theme_color}"')

        icon = version.get("icon")
        if icon is not None and not isinstance(icon, str):
            self._add_error(f"{context}: icon must be a string")

        _, projects_limit = lookup_version_field(version, "projects_limit")
        if projects_limit is not None:
            if not is_integer(projects_limit):
                self._add_error(f"{context}: projects_limit must be an integer")
            elif projects_limit < 0:
                self._add_error(f"{context}: projects_limit must not be negative")

        project_focus = version.get("project_focus")
        if project_focus is not None and not isinstance(project_focus, dict):
            self._add_error(f"{context}: project_focus must be an object")

        self._validate_string_list(context, version, "skills_focus")
        self._validate_string_list(context, version, "sections_order")

        _, sections_order = lookup_version_field(version, "sections_order")
        if isinstance(sections_order, list):
            for section in sections_order:
                if isinstance(section, str) and section not in recognized:
                    self._add_warning(f'{context}: Unknown section "{section}" in sections_order')

        self._validate_content_blocks(context, version)

    def _validate_string_list(self, context: str, version: Dict[str, Any], name: str) -> None:
        found_key, values = lookup_version_field(version, name)
        if not isinstance(values, list):
            return
        if not values:
            self._add_warning(f"{context}: {found_key} array is empty")
        if any(not isinstance(value, str) for value in values):
            self._add_error(f"{context}: All {found_key} items must be strings")

    def _validate_content_blocks(self, context: str, version: Dict[str, Any]) -> None:
        content_config = version.get("content_config")
        if content_config is not None:
            if not isinstance(content_config, dict):
                self._add_error(f"{context}: content_config must be an object")
            else:
                include_projects = content_config.get("include_projects")
                if include_projects is not None and not isinstance(include_projects, list):
                    self._add_error(f"{context}: content_config.include_projects must be an array")
                include_cover_letter = content_config.get("include_cover_letter")
                if include_cover_letter is not None and not isinstance(include_cover_letter, bool):
                    self._add_error(
                        f"{context}: content_config.include_cover_letter must be a boolean"
                    )

        content_overrides = version.get("content_overrides")
        if content_overrides is None:
            return
        if not isinstance(content_overrides, dict):
            self._add_error(f"{context}: content_overrides must be an object")
            return
        descriptions = content_overrides.get("project_descriptions")
        if descriptions is not None and not isinstance(descriptions, dict):
            self._add_error(f"{context}: content_overrides.project_descriptions must be an object")

    # ------------------------------------------------------------------
    # Profile sections
    # ------------------------------------------------------------------

    def _validate_core_sections(self, data: Dict[str, Any]) -> None:
        validators = [
            ("personal_info", self._validate_personal_info),
            ("education", self._validate_education),
            ("skills_pool", self._validate_skills_pool),
            ("technical_skills", self._validate_technical_skills),
            ("projects", self._validate_projects),
            ("publications", self._validate_publications),
            ("phd_research", self._validate_phd_research),
            ("certifications", self._validate_certifications),
            ("work_experience", self._validate_work_experience),
            ("cover_letters", self._validate_cover_letters),
        ]
        for key, validator in validators:
            if data.get(key) is not None:
                validator(data[key])

    def _validate_personal_info(self, personal_info: Any) -> None:
        if not isinstance(personal_info, dict):
            self._add_error("personal_info must be an object")

    def _validate_education(self, education: Any) -> None:
        if not isinstance(education, list):
            self._add_error("education must be an array")
            return

        for index, item in enumerate(education, start=1):
            context = f"Education item {index}"
            if not isinstance(item, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue
            for name in REQUIRED_EDUCATION_FIELDS:
                if _is_missing(item.get(name)):
                    self._add_error(f"{context}: Missing {name} field")
            highlights = item.get("highlights")
            if highlights is not None and not isinstance(highlights, list):
                self._add_error(f"{context}: highlights must be an array")

    def _check_level(self, context: str, entry: Dict[str, Any]) -> None:
        level = entry.get("level")
        if level is None:
            return
        if not is_integer(level) or not 1 <= level <= 5:
            self._add_error(f"{context}: level must be an integer between 1 and 5")

    def _validate_skills_pool(self, pool: Any) -> None:
        if not isinstance(pool, dict):
            self._add_error("skills_pool must be an object")
            return

        for skill_id, skill in pool.items():
            context = f'Skill "{skill_id}"'
            if not isinstance(skill, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue

            if _is_missing(skill.get("name")):
                self._add_error(f"{context}: Missing name field")

            category = skill.get("category")
            if category is not None and not isinstance(category, str):
                self._add_error(f"{context}: category must be a string")

            self._check_level(context, skill)

            for key, value in skill.items():
                if key in DETAIL_GROUP_LABELS:
                    if not isinstance(value, list):
                        self._add_error(f"{context}: {key} must be an array")
                    elif any(not isinstance(item, str) for item in value):
                        self._add_error(f"{context}: All {key} items must be strings")
                elif isinstance(value, list):
                    self._add_warning(f'{context}: Unrecognized detail group "{key}" is ignored')

    def _validate_technical_skills(self, technical_skills: Any) -> None:
        if not isinstance(technical_skills, dict):
            self._add_error("technical_skills must be an object")
            return

        for category, skill_data in technical_skills.items():
            context = f'Skill category "{category}"'
            if not isinstance(skill_data, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue

            if _is_missing(skill_data.get("title")):
                self._add_error(f"{context}: Missing title field")

            items = skill_data.get("items")
            if items is None:
                continue
            if not isinstance(items, list):
                self._add_error(f"{context}: items must be an array")
                continue

            for index, item in enumerate(items, start=1):
                item_context = f"{context}, item {index}"
                if not isinstance(item, dict):
                    self._add_error(f"{item_context}: Entry must be an object")
                    continue
                if _is_missing(item.get("name")):
                    self._add_error(f"{item_context}: Missing name field")
                self._check_level(item_context, item)
                keywords = item.get("keywords")
                if keywords is not None and not isinstance(keywords, list):
                    self._add_error(f"{item_context}: keywords must be an array")

    def _validate_projects(self, projects: Any) -> None:
        if not isinstance(projects, list):
            self._add_error("projects must be an array")
            return

        seen_ids = set()
        for index, project in enumerate(projects, start=1):
            context = f"Project {index}"
            if not isinstance(project, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue

            if _is_missing(project.get("title")):
                self._add_error(f"{context}: Missing title field")

            project_id = project.get("id")
            if _is_missing(project_id):
                self._add_warning(f"{context}: Missing id field, versions cannot reference it")
            elif not isinstance(project_id, str):
                self._add_error(f"{context}: id must be a string")
            elif project_id in seen_ids:
                self._add_error(f'{context}: Duplicate id "{project_id}"')
            else:
                seen_ids.add(project_id)

            for key in ("features", "items"):
                value = project.get(key)
                if value is not None and not isinstance(value, list):
                    self._add_error(f"{context}: {key} must be an array")

            case_studies = project.get("items")
            if isinstance(case_studies, list):
                for case_index, case_study in enumerate(case_studies, start=1):
                    case_context = f"{context}, case study {case_index}"
                    if not isinstance(case_study, dict):
                        self._add_error(f"{case_context}: Entry must be an object")
                        continue
                    if _is_missing(case_study.get("title")):
                        self._add_error(f"{case_context}: Missing title field")
                    details = case_study.get("details")
                    if details is not None and not isinstance(details, list):
                        self._add_error(f"{case_context}: details must be an array")

    def _validate_publications(self, publications: Any) -> None:
        if not isinstance(publications, list):
            self._add_error("publications must be an array")
            return

        for index, publication in enumerate(publications, start=1):
            context = f"Publication {index}"
            if not isinstance(publication, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue

            for name in REQUIRED_PUBLICATION_FIELDS:
                if _is_missing(publication.get(name)):
                    self._add_error(f"{context}: Missing {name} field")

            year = publication.get("year")
            if not _is_missing(year) and not is_integer(year):
                self._add_warning(f"{context}: Year should be a valid integer")

            pub_type = publication.get("type")
            if not _is_missing(pub_type) and pub_type not in PUBLICATION_TYPES:
                self._add_warning(
                    f'{context}: type "{pub_type}" should be one of {", ".join(PUBLICATION_TYPES)}'
                )

    def _validate_phd_research(self, phd_research: Any) -> None:
        if not isinstance(phd_research, dict):
            self._add_error("phd_research must be an object")
            return

        sections = phd_research.get("sections")
        if not isinstance(sections, list):
            self._add_error("phd_research.sections must be an array")
            return

        for index, section in enumerate(sections, start=1):
            context = f"PhD research section {index}"
            if not isinstance(section, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue

            if _is_missing(section.get("title")):
                self._add_error(f"{context}: Missing title field")

            items = section.get("items")
            if not isinstance(items, list):
                self._add_error(f"{context}: items must be an array")
                continue

            for item_index, item in enumerate(items, start=1):
                if not isinstance(item, dict) or _is_missing(item.get("point")):
                    self._add_error(f"{context}, item {item_index}: Missing point field")

    def _validate_certifications(self, certifications: Any) -> None:
        if not isinstance(certifications, list):
            self._add_error("certifications must be an array")
            return

        for index, certification in enumerate(certifications, start=1):
            if not isinstance(certification, str):
                self._add_error(f"Certification {index} must be a string")

    def _validate_work_experience(self, work_experience: Any) -> None:
        if not isinstance(work_experience, list):
            self._add_error("work_experience must be an array")
            return

        for index, job in enumerate(work_experience, start=1):
            context = f"Work experience {index}"
            if not isinstance(job, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue
            for name in ("title", "company"):
                if _is_missing(job.get(name)):
                    self._add_error(f"{context}: Missing {name} field")
            for name in ("responsibilities", "achievements"):
                value = job.get(name)
                if value is not None and not isinstance(value, list):
                    self._add_error(f"{context}: {name} must be an array")

    def _validate_cover_letters(self, cover_letters: Any) -> None:
        if not isinstance(cover_letters, dict):
            self._add_error("cover_letters must be an object")
            return

        for key, letter in cover_letters.items():
            context = f'Cover letter "{key}"'
            if not isinstance(letter, dict):
                self._add_error(f"{context}: Entry must be an object")
                continue
            body = letter.get("body")
            if body is not None and not isinstance(body, list):
                self._add_error(f"{context}: body must be an array")


def validate(data: Any) -> ValidationResult:
    """
    Validate a combined (or legacy) résumé document.

    Args:
        data: Decoded JSON value

    Returns:
        ValidationResult; is_valid is True iff no errors were found

    Example:
        >>> result = validate({"versions": {}})
        >>> result.errors
        ['At least one version configuration is required']
    """
    return SchemaValidator().validate(data)


def validate_documents(profile: Any, version_set: Any) -> ValidationResult:
    """
    Validate the separated profile/version-set pair.

    Args:
        profile: Decoded profile.json
        version_set: Decoded versions.json

    Returns:
        ValidationResult for the combined document
    """
    if not isinstance(profile, dict):
        message = "Profile data must be a valid object"
        return ValidationResult(is_valid=False, errors=[message], structural_errors=[message])

    if version_set is not None and not isinstance(version_set, dict):
        message = "Version data must be a valid object"
        return ValidationResult(is_valid=False, errors=[message], structural_errors=[message])

    return validate(combine_documents(profile, version_set or {}))


def format_validation_report(result: ValidationResult) -> str:
    """
    Format a ValidationResult as a readable text report.

    Args:
        result: ValidationResult from validate()

    Returns:
        Multi-line report with status, numbered errors and numbered warnings
    """
    report = TableFormatter(total_width=40)
    report.add_section_header("Resume Data Validation Report")
    report.add_text("Validation PASSED" if result.is_valid else "Validation FAILED")
    report.add_numbered_list("ERRORS:", result.errors)
    report.add_numbered_list("WARNINGS:", result.warnings)

    if not result.errors and not result.warnings:
        report.add_blank_line()
        report.add_text("No issues found!")

    return report.render()
