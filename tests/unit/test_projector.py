"""Unit tests for projecting a merged model onto one version."""

import json
from pathlib import Path

import pytest

from versa.contexts.templating import (
    RenderModel,
    VersionNotFound,
    merge,
    project,
    project_or_default,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def model():
    return merge(load_fixture("profile.json"), load_fixture("versions.json"))


@pytest.mark.unit
def test_project_returns_render_model(model):
    """Test projecting a known version carries its metadata."""
    render = project(model, "ai")

    assert isinstance(render, RenderModel)
    assert render.version_key == "ai"
    assert render.display_name == "AI Engineer"
    assert render.theme_color == "#1f6feb"
    assert render.theme_class == "theme-ai"
    assert render.icon == "fas fa-brain"
    assert render.summary == "Machine learning engineer focused on retrieval."


@pytest.mark.unit
def test_unknown_version_is_falsy_not_found(model):
    """Test a lookup miss returns a falsy VersionNotFound instead of raising."""
    result = project(model, "ghost")

    assert isinstance(result, VersionNotFound)
    assert not result
    assert result.version_key == "ghost"
    assert result.available == ["ai", "web"]
    assert result.message == 'Version "ghost" not found. Available versions: ai, web'


@pytest.mark.unit
def test_project_or_default_falls_back(model):
    """Test unknown keys project the default version."""
    render = project_or_default(model, "ghost")

    assert render.version_key == "ai"


@pytest.mark.unit
def test_skills_grouped_by_category_in_focus_order(model):
    """Test skill groups follow first appearance in the focus list."""
    render = project(model, "ai")

    assert [group["category"] for group in render.skills] == ["ai_ml", "programming", "data_science"]
    assert render.skills[0]["title"] == "Ai Ml"
    assert [item["id"] for item in render.skills[0]["items"]] == ["pytorch"]


@pytest.mark.unit
def test_detail_groups_are_labelled_in_declared_order(model):
    """Test detail groups carry labels and skip absent groups."""
    render = project(model, "ai")
    python = render.skills[1]["items"][0]

    assert python["name"] == "Python"
    assert python["level"] == 5
    assert python["detail_groups"] == [
        {"key": "tech_stack", "label": "TECH STACK", "items": ["NumPy", "pandas", "asyncio"]},
        {"key": "use_scenario", "label": "USE SCENARIO", "items": ["Data pipelines", "Backend services"]},
    ]


@pytest.mark.unit
def test_unselected_skills(model):
    """Test pool skills outside the selection are grouped separately."""
    render = project(model, "ai")

    unselected = [item["id"] for group in render.unselected_skills for item in group["items"]]
    assert unselected == ["react", "docker"]


@pytest.mark.unit
def test_selected_skills_round_trip_as_set(model):
    """Test the rendered skill ids equal the valid selection."""
    render = project(model, "web")

    rendered = {item["id"] for group in render.skills for item in group["items"]}
    assert rendered == {"react", "docker"}


@pytest.mark.unit
def test_projects_respect_allow_list_limit_and_overrides(model):
    """Test the ai version shows p1 and p3 with p3's override."""
    render = project(model, "ai")

    assert [p["id"] for p in render.projects] == ["p1", "p3"]
    assert render.projects[1]["description"] == "Evaluation tooling for retrieval research."
    assert render.projects[1]["case_studies"][0]["title"] == "Figure pipeline"


@pytest.mark.unit
@pytest.mark.parametrize("version_key", ["ai", "web"])
def test_project_count_never_exceeds_limit(model, version_key):
    """Test len(projects) <= projects_limit for every version."""
    render = project(model, version_key)

    assert len(render.projects) <= model.get_version(version_key).projects_limit


@pytest.mark.unit
def test_cover_letter_only_when_enabled(model):
    """Test cover letters come from profile.cover_letters for enabled versions."""
    assert project(model, "ai").cover_letter["greeting"] == "Dear Hiring Team,"
    assert project(model, "web").cover_letter is None


@pytest.mark.unit
def test_sections_order_keeps_sections_with_content():
    """Test empty or unknown sections are dropped from sections_order."""
    profile = {"skills_pool": {"py": {"name": "Python"}}, "projects": []}
    version_set = {
        "versions": {
            "v": {"summary": "S", "sections_order": ["projects", "summary", "hobbies", "technical_skills"]}
        }
    }

    render = project(merge(profile, version_set), "v")

    assert render.sections_order == ["summary", "technical_skills"]


@pytest.mark.unit
def test_skill_without_category_uses_general_group():
    """Test uncategorized skills fall into the general group."""
    model = merge({"skills_pool": {"py": {"name": "Python"}}}, {"versions": {"v": {}}})

    render = project(model, "v")

    assert render.skills == [
        {
            "category": "general",
            "title": "General",
            "items": [{"id": "py", "name": "Python", "level": None, "detail_groups": []}],
        }
    ]


@pytest.mark.unit
def test_wrongly_shaped_sections_project_without_raising():
    """Test profile sections of the wrong type become empty instead of failing."""
    profile = {
        "skills_pool": {"py": {"name": "Python", "category": ["programming"]}},
        "projects": [{"id": "p1", "title": "One", "features": "fast", "items": {"a": 1}}],
        "education": {"degree": "BSc"},
        "phd_research": ["not", "an", "object"],
        "cover_letters": ["letter"],
        "publications": "none",
    }
    model = merge(profile, {"versions": {"v": {"content_config": {"include_cover_letter": True}}}})

    render = project(model, "v")

    assert render.skills[0]["category"] == "general"
    assert render.projects[0]["features"] == []
    assert render.projects[0]["case_studies"] == []
    assert render.education == []
    assert render.phd_research is None
    assert render.cover_letter is None
    assert model.stats()["publications"] == 0


@pytest.mark.unit
def test_legacy_skill_groups():
    """Test legacy technical_skills categories render one group each."""
    data = load_fixture("data.json")
    profile = {k: v for k, v in data.items() if k not in ("versions", "version_config")}
    model = merge(profile, {"versions": data["versions"]})

    render = project(model, "research")

    assert len(render.skills) == 1
    group = render.skills[0]
    assert group["category"] == "ai_ml"
    assert group["title"] == "AI & Machine Learning"
    assert [item["name"] for item in group["items"]] == ["PyTorch", "scikit-learn"]
    assert group["items"][0]["detail_groups"] == [
        {"key": "keywords", "label": "KEYWORDS", "items": ["Training", "Evaluation"]}
    ]
    assert [g["category"] for g in render.unselected_skills] == ["web_technologies"]
    assert [p["id"] for p in render.projects] == ["p1"]


@pytest.mark.unit
def test_projection_is_idempotent(model):
    """Test two projections of the same version are deep-equal."""
    assert project(model, "ai") == project(model, "ai")


@pytest.mark.unit
def test_render_model_mutation_does_not_leak(model):
    """Test render model contents are copies of the merged model."""
    render = project(model, "ai")
    render.projects[0]["title"] = "changed"
    render.education.clear()
    render.personal_info["name"] = "changed"

    again = project(model, "ai")

    assert again.projects[0]["title"] == "Retrieval Benchmark"
    assert again.education
    assert again.personal_info["name"] == "Alex Rivera"


@pytest.mark.unit
def test_to_dict_is_json_serializable(model):
    """Test the plain-data form survives json.dumps."""
    payload = json.loads(json.dumps(project(model, "web").to_dict()))

    assert payload["version_key"] == "web"
    assert payload["sections_order"] == [
        "summary",
        "projects",
        "technical_skills",
        "education",
        "certifications",
    ]
