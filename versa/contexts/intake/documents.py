"""
Document shapes handled by the intake context.

Two layouts exist on disk:
- separated: profile.json (content) + versions.json ({config, versions})
- legacy: data.json carrying the profile keys next to version_config/versions

combine_documents() and split_legacy_document() convert between them so the
validator always sees the combined shape and the merger always sees the
separated one.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

PROFILE_FILENAME = "profile.json"
VERSIONS_FILENAME = "versions.json"
LEGACY_FILENAME = "data.json"

VERSION_SET_KEYS = ("versions", "config", "version_config")


@dataclass
class LoadedDocuments:
    """
    Raw documents as decoded from the source.

    Attributes:
        profile: Profile document (versionless content)
        version_set: Version-set document ({config?, versions})
        structure: "separated" or "legacy"
        source: Directory or base URL the documents came from
    """

    profile: Dict[str, Any]
    version_set: Dict[str, Any]
    structure: str
    source: str

    @property
    def combined(self) -> Dict[str, Any]:
        """Combined document, the shape the schema validator checks."""
        return combine_documents(self.profile, self.version_set)


def combine_documents(profile: Dict[str, Any], version_set: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the combined (legacy-shaped) document from the separated pair.

    The version set's ``config`` becomes ``version_config``. Keys missing from
    the version set stay missing so the validator reports them.

    Args:
        profile: Profile document
        version_set: Version-set document

    Returns:
        New dict; inputs are not modified
    """
    combined = {k: v for k, v in profile.items() if k not in VERSION_SET_KEYS}

    if isinstance(version_set, dict):
        if "versions" in version_set:
            combined["versions"] = version_set["versions"]
        config = version_set.get("config", version_set.get("version_config"))
        if config is not None:
            combined["version_config"] = config

    return combined


def split_legacy_document(data: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split a legacy data.json into (profile, version_set).

    Accepts both ``version_config`` and ``config`` for the configuration block.

    Raises:
        ValueError: If data is not a mapping
    """
    if not isinstance(data, dict):
        raise ValueError(f"Legacy document must be an object, got {type(data).__name__}")

    profile = {k: v for k, v in data.items() if k not in VERSION_SET_KEYS}

    version_set = {}
    if "versions" in data:
        version_set["versions"] = data["versions"]
    config = data.get("version_config", data.get("config"))
    if config is not None:
        version_set["config"] = config

    return profile, version_set
