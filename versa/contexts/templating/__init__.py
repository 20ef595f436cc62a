"""
Templating Context

Responsibilities:
- Merges the profile document with the version-set document
- Applies per-version defaults and filters dangling references
- Projects the merged model onto a single version for rendering

Owns: MergedModel, ResolvedVersion, RenderModel, merge defaults
Never: Fetches documents or produces markup
"""

from versa.contexts.templating.config_resolver import MergeSettings, load_merge_settings
from versa.contexts.templating.exceptions import (
    DocumentLoadError,
    StructuralError,
    VersionNotFound,
)
from versa.contexts.templating.merger import merge
from versa.contexts.templating.projector import project, project_or_default
from versa.contexts.templating.version_data_structures import (
    MergedModel,
    RenderModel,
    ResolvedVersion,
    VersionConfig,
)

__all__ = [
    # Orchestrators
    "merge",
    "project",
    "project_or_default",
    # Configuration
    "MergeSettings",
    "load_merge_settings",
    # Data structures
    "MergedModel",
    "RenderModel",
    "ResolvedVersion",
    "VersionConfig",
    # Errors and lookup results
    "StructuralError",
    "DocumentLoadError",
    "VersionNotFound",
]
