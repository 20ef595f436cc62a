"""Integration tests for ResumeSession."""

import asyncio
import json
import shutil
from pathlib import Path

import pytest

from versa.contexts.rendering import ResumeSession
from versa.contexts.templating import MergeSettings, StructuralError

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.fixture
def session():
    return ResumeSession.from_documents(load_fixture("profile.json"), load_fixture("versions.json"))


@pytest.mark.integration
def test_session_starts_on_default_version(session):
    """Test a new session shows the configured default."""
    assert session.current_version == "ai"
    assert session.theme_class == "theme-ai"
    assert session.current_version_config.display_name == "AI Engineer"
    assert session.validation.is_valid


@pytest.mark.integration
def test_switch_version(session):
    """Test switching changes the render model but not the merged model."""
    model = session.model

    assert session.switch_version("web") is True
    assert session.current_version == "web"
    assert session.render_model().version_key == "web"
    assert session.model is model


@pytest.mark.integration
def test_switch_to_unknown_version(session):
    """Test unknown keys are refused and the current version is kept."""
    assert session.switch_version("ghost") is False
    assert session.current_version == "ai"


@pytest.mark.integration
def test_render_model_falls_back_to_default(session):
    """Test an unknown explicit key renders the default version."""
    assert session.render_model("ghost").version_key == "ai"


@pytest.mark.integration
def test_export_configuration(session):
    """Test the exported snapshot is JSON-serializable and tracks the current version."""
    session.switch_version("web")

    exported = json.loads(json.dumps(session.export_configuration()))

    assert exported["current_version"] == "web"
    assert exported["version_config"]["default_version"] == "ai"
    assert exported["versions"]["ai"]["projects_limit"] == 2
    assert "exported_at" in exported


@pytest.mark.integration
def test_critical_version_errors_refuse_session():
    """Test structural validation errors stop the session."""
    with pytest.raises(StructuralError, match="Critical validation errors"):
        ResumeSession.from_documents(load_fixture("profile.json"), {"versions": []})


@pytest.mark.integration
def test_empty_versions_refuse_session():
    """Test an empty version set cannot back a session."""
    with pytest.raises(StructuralError, match="At least one version configuration is required"):
        ResumeSession.from_documents(load_fixture("profile.json"), {"versions": {}})


@pytest.mark.integration
def test_non_object_version_entry_refuses_session():
    """Test a version entry that is not an object stops the session."""
    with pytest.raises(StructuralError, match='Version "ai": Configuration must be an object'):
        ResumeSession.from_documents(load_fixture("profile.json"), {"versions": {"ai": "AI"}})


@pytest.mark.integration
def test_non_string_project_id_is_best_effort():
    """Test a project id error is reported without stopping the session."""
    profile = load_fixture("profile.json")
    profile["projects"].append({"id": ["versions"], "title": "Odd"})

    session = ResumeSession.from_documents(profile, load_fixture("versions.json"))

    assert session.validation.structural_errors == []
    assert any("id must be a string" in error for error in session.validation.errors)
    assert session.render_model().projects


@pytest.mark.integration
def test_non_critical_errors_are_best_effort():
    """Test version-level errors are logged and rendering still proceeds."""
    version_set = {"versions": {"ai": {"display_name": "AI", "theme_color": "zzz"}}}

    session = ResumeSession.from_documents(load_fixture("profile.json"), version_set)

    assert not session.validation.is_valid
    assert session.render_model().theme_color == "#666666"


@pytest.mark.integration
def test_settings_flow_into_merge():
    """Test session settings replace merge defaults."""
    version_set = {"versions": {"bare": {}}}

    session = ResumeSession.from_documents(
        load_fixture("profile.json"), version_set, settings=MergeSettings(projects_limit=1)
    )

    assert len(session.render_model().projects) == 1


@pytest.mark.integration
def test_load_and_reload(tmp_path):
    """Test a reload picks up changes and keeps the current version if it still exists."""
    shutil.copy(FIXTURES_PATH / "profile.json", tmp_path)
    shutil.copy(FIXTURES_PATH / "versions.json", tmp_path)

    session = asyncio.run(ResumeSession.load(tmp_path))
    session.switch_version("web")

    version_set = load_fixture("versions.json")
    version_set["versions"]["web"]["display_name"] = "Frontend Developer"
    (tmp_path / "versions.json").write_text(json.dumps(version_set))

    asyncio.run(session.reload())

    assert session.current_version == "web"
    assert session.render_model().display_name == "Frontend Developer"


@pytest.mark.integration
def test_reload_moves_to_default_when_version_disappears(tmp_path):
    """Test a removed current version falls back to the new default."""
    shutil.copy(FIXTURES_PATH / "profile.json", tmp_path)
    shutil.copy(FIXTURES_PATH / "versions.json", tmp_path)

    session = asyncio.run(ResumeSession.load(tmp_path))
    session.switch_version("web")

    version_set = load_fixture("versions.json")
    del version_set["versions"]["web"]
    (tmp_path / "versions.json").write_text(json.dumps(version_set))

    asyncio.run(session.reload())

    assert session.current_version == "ai"
