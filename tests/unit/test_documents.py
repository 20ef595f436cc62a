"""Unit tests for separated/legacy document conversion."""

import json
from pathlib import Path

import pytest

from versa.contexts.intake.documents import (
    LoadedDocuments,
    combine_documents,
    split_legacy_document,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES_PATH / name).read_text(encoding="utf-8"))


@pytest.mark.unit
def test_combine_renames_config():
    """Test the version set's config becomes version_config."""
    combined = combine_documents(
        {"projects": []}, {"config": {"default_version": "ai"}, "versions": {"ai": {}}}
    )

    assert combined == {
        "projects": [],
        "versions": {"ai": {}},
        "version_config": {"default_version": "ai"},
    }


@pytest.mark.unit
def test_combine_leaves_missing_versions_missing():
    """Test a version set without versions stays without versions."""
    assert "versions" not in combine_documents({"projects": []}, {})


@pytest.mark.unit
def test_combine_does_not_modify_inputs():
    """Test inputs are untouched."""
    profile = {"projects": []}
    version_set = {"config": {}, "versions": {}}

    combine_documents(profile, version_set)

    assert profile == {"projects": []}
    assert version_set == {"config": {}, "versions": {}}


@pytest.mark.unit
def test_split_legacy_document():
    """Test data.json splits into profile and version set."""
    profile, version_set = split_legacy_document(load_fixture("data.json"))

    assert "versions" not in profile
    assert "version_config" not in profile
    assert "technical_skills" in profile
    assert set(version_set) == {"versions", "config"}
    assert version_set["config"] == {"default_version": "research"}


@pytest.mark.unit
def test_split_rejects_non_object():
    """Test only mappings can be split."""
    with pytest.raises(ValueError, match="must be an object"):
        split_legacy_document([1, 2, 3])


@pytest.mark.unit
def test_split_then_combine_restores_legacy_shape():
    """Test splitting and recombining yields the original document."""
    data = load_fixture("data.json")

    assert combine_documents(*split_legacy_document(data)) == data


@pytest.mark.unit
def test_loaded_documents_combined_property():
    """Test LoadedDocuments exposes the combined shape."""
    documents = LoadedDocuments(
        profile=load_fixture("profile.json"),
        version_set=load_fixture("versions.json"),
        structure="separated",
        source="tests/fixtures",
    )

    combined = documents.combined

    assert combined["version_config"]["default_version"] == "ai"
    assert combined["personal_info"]["name"] == "Alex Rivera"
