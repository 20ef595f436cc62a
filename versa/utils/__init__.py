"""
Shared utilities for VERSA.

Common functionality used across contexts:
- Logger setup
- Report formatting
- Timestamps
"""

from versa.utils.report_formatter import Column, TableFormatter
from versa.utils.timestamp import now, now_iso

__all__ = ["Column", "TableFormatter", "now", "now_iso"]
