"""
Resume Session

Owns the loaded documents, the merged model and the current version for one
rendering surface. The renderer asks the session for a render model on first
load and after every version switch; the model itself is never modified by a
switch, and a reload replaces it wholesale.
"""

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx

from versa.contexts.intake.documents import LoadedDocuments
from versa.contexts.intake.loader import load_documents
from versa.contexts.intake.logger import log_validation_result
from versa.contexts.intake.schema_validator import validate_documents
from versa.contexts.rendering.logger import (
    _log_error,
    log_session_ready,
    log_version_switch,
)
from versa.contexts.templating.config_resolver import MergeSettings
from versa.contexts.templating.exceptions import StructuralError
from versa.contexts.templating.logger import log_merge_result
from versa.contexts.templating.merger import merge
from versa.contexts.templating.projector import project_or_default
from versa.contexts.templating.version_data_structures import RenderModel, ResolvedVersion
from versa.utils.timestamp import now_iso


class ResumeSession:
    """
    Validated, merged résumé data plus the version currently on display.

    Build with from_documents() for in-memory data or load() for a directory
    or base URL.

    Attributes:
        documents: LoadedDocuments the model was built from
        validation: ValidationResult for those documents
        model: MergedModel
        settings: MergeSettings used by merge()
    """

    def __init__(self, documents: LoadedDocuments, settings: Optional[MergeSettings] = None):
        self.settings = settings or MergeSettings()
        self._current_version: Optional[str] = None
        self._build(documents)

    @classmethod
    def from_documents(
        cls,
        profile: Dict[str, Any],
        version_set: Dict[str, Any],
        settings: Optional[MergeSettings] = None,
    ) -> "ResumeSession":
        """
        Build a session from already decoded documents.

        Raises:
            StructuralError: If validation reports structural errors (nothing to merge)
        """
        documents = LoadedDocuments(
            profile=profile, version_set=version_set, structure="separated", source="<memory>"
        )
        return cls(documents, settings=settings)

    @classmethod
    async def load(
        cls,
        source: Union[str, Path, None] = None,
        settings: Optional[MergeSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ResumeSession":
        """
        Load documents from a directory or base URL and build a session.

        Raises:
            DocumentLoadError: If no documents could be loaded
            StructuralError: If the documents cannot be used
        """
        documents = await load_documents(source, transport=transport)
        return cls(documents, settings=settings)

    async def reload(
        self,
        source: Union[str, Path, None] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Reload documents (from the original source by default) and rebuild the model.

        The current version is kept if it still exists; otherwise the session
        moves to the new default version.
        """
        documents = await load_documents(
            source if source is not None else self.documents.source, transport=transport
        )
        self._build(documents)

    def _build(self, documents: LoadedDocuments) -> None:
        validation = validate_documents(documents.profile, documents.version_set)
        log_validation_result(validation)

        if validation.structural_errors:
            raise StructuralError(
                "Critical validation errors found. Cannot build session: "
                + "; ".join(validation.structural_errors)
            )

        model = merge(documents.profile, documents.version_set, settings=self.settings)
        log_merge_result(model)

        self.documents = documents
        self.validation = validation
        self.model = model
        if self._current_version is None or not model.has_version(self._current_version):
            self._current_version = model.default_version_key
        log_session_ready(self)

    @property
    def current_version(self) -> str:
        return self._current_version

    @property
    def current_version_config(self) -> ResolvedVersion:
        return self.model.get_version(self._current_version)

    @property
    def theme_class(self) -> str:
        return self.model.theme_class(self._current_version)

    def switch_version(self, version_key: str) -> bool:
        """
        Make version_key the current version.

        Returns:
            True on success; False (current version unchanged) if the key is unknown
        """
        if not self.model.has_version(version_key):
            _log_error(
                f'Version "{version_key}" not found. '
                f"Available versions: {', '.join(self.model.version_keys())}"
            )
            return False

        previous = self._current_version
        self._current_version = version_key
        log_version_switch(previous, version_key, self.theme_class)
        return True

    def render_model(self, version_key: Optional[str] = None) -> RenderModel:
        """Render model for version_key (default: current), or the default version on a miss."""
        return project_or_default(self.model, version_key or self._current_version)

    def export_configuration(self) -> Dict[str, Any]:
        """Snapshot of the resolved configuration, suitable for JSON backup."""
        return {
            "version_config": asdict(self.model.config),
            "versions": {key: asdict(version) for key, version in self.model.versions.items()},
            "current_version": self._current_version,
            "exported_at": now_iso(),
        }
