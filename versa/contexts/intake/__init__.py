"""
Intake Context

Responsibilities:
- Loads profile and version-set documents (separated or legacy layout)
- Validates document structure before merging

Owns: Document loading, schema validation, validation reports
Never: Applies defaults or resolves cross-references (templating does)
"""

from versa.contexts.intake.documents import (
    LoadedDocuments,
    combine_documents,
    split_legacy_document,
)
from versa.contexts.intake.loader import load_documents, load_documents_sync
from versa.contexts.intake.schema_validator import (
    SchemaValidator,
    ValidationResult,
    format_validation_report,
    validate,
    validate_documents,
)

__all__ = [
    "LoadedDocuments",
    "combine_documents",
    "split_legacy_document",
    "load_documents",
    "load_documents_sync",
    "SchemaValidator",
    "ValidationResult",
    "format_validation_report",
    "validate",
    "validate_documents",
]
