"""
Utility functions for formatting text-based reports and tables.

Provides consistent formatting for validation reports and version listings.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        """Format column header with alignment."""
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format column value with alignment."""
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text reports with optional aligned columns."""

    def __init__(self, columns: List[Column] = None, total_width: int = 80):
        """
        Args:
            columns: List of Column definitions (may be empty for plain reports)
            total_width: Total report width for separators
        """
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names."""
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        """Add horizontal separator line."""
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_numbered_list(self, title: str, items: List[str]) -> "TableFormatter":
        """Add a titled list with 1-based numbering. Skipped when items is empty."""
        if not items:
            return self
        self.lines.append("")
        self.lines.append(title)
        for index, item in enumerate(items, start=1):
            self.lines.append(f"{index}. {item}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        """Add blank line."""
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        """Add arbitrary text line."""
        self.lines.append(text)
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)
