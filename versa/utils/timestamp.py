"""Timestamp helpers for log directories and exports."""

from datetime import datetime


def now() -> str:
    """Compact timestamp for directory names (e.g., "20251114_183540")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_iso() -> str:
    """ISO 8601 timestamp, used when exporting configurations."""
    return datetime.now().isoformat()
