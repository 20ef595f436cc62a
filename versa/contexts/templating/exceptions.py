"""Custom exceptions and lookup results for the templating context."""

from dataclasses import dataclass, field
from typing import List, Optional


class StructuralError(ValueError):
    """
    Exception raised when the input documents cannot be merged at all.

    Raised for a profile that is not a mapping, a missing or empty versions
    mapping, or a version entry that is not a mapping. Callers must not try
    to render from a data set that raised this.

    Attributes:
        message: Error description
        version_key: Offending version key, when the problem is a single entry
    """

    def __init__(self, message: str, version_key: Optional[str] = None):
        self.message = message
        self.version_key = version_key
        super().__init__(message)


class DocumentLoadError(Exception):
    """
    Exception raised when neither the separated nor the legacy documents load.

    Attributes:
        message: Error description
        source: Directory or base URL that was tried
        original_error: The last underlying failure
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.source = source
        self.original_error = original_error

        parts = [message]
        if source:
            parts.append(f"Source: {source}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


@dataclass(frozen=True)
class VersionNotFound:
    """
    Lookup miss returned by project() for an unknown version key.

    Falsy, so callers can write ``result = project(...) or project(model, default)``.
    """

    version_key: str
    available: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f'Version "{self.version_key}" not found. Available versions: {", ".join(self.available)}'
