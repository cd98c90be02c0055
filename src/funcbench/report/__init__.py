"""Plain text and markdown rendering of comparison reports."""

from funcbench.report.renderer import (
    UNDEFINED_DELTA,
    format_delta,
    format_markdown_table,
    format_value,
    render_exclusions,
    render_markdown,
    render_plain,
)

__all__ = [
    "UNDEFINED_DELTA",
    "format_delta",
    "format_markdown_table",
    "format_value",
    "render_exclusions",
    "render_markdown",
    "render_plain",
]
