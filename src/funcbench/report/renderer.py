"""Rendering of comparison reports.

render_plain produces column-aligned text tables, one block per metric
kind. format_markdown_table turns such text into GitHub-flavoured markdown
tables without knowing which metrics are present; render_markdown builds a
complete pull request comment from a report.
"""

from __future__ import annotations

import re

from funcbench.models.benchmark import ComparisonReport, MetricDelta
from funcbench.models.enums import MetricKind

__all__ = [
    "UNDEFINED_DELTA",
    "format_delta",
    "format_markdown_table",
    "format_value",
    "render_exclusions",
    "render_markdown",
    "render_plain",
]

UNDEFINED_DELTA = "undefined"

_COLUMN_PADDING = 5
_HEADER_UNIT_RE = re.compile(r"\bold (\S+)")


def format_value(kind: MetricKind, value: float) -> str:
    """Format a measurement the way ``go test -bench`` prints it."""
    if kind is MetricKind.time:
        if value < 10:
            return f"{value:.2f}"
        if value < 100:
            return f"{value:.1f}"
        return f"{value:.0f}"
    if kind is MetricKind.throughput:
        return f"{value:.2f}"
    if value.is_integer():
        return f"{value:.0f}"
    return f"{value:.2f}"


def format_delta(delta: MetricDelta) -> str:
    if delta.delta_percent is None:
        return UNDEFINED_DELTA
    return f"{delta.delta_percent:+.2f}%"


def _align(rows: list[list[str]]) -> list[str]:
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    pad = " " * _COLUMN_PADDING
    lines = []
    for row in rows:
        cells = [row[0].ljust(widths[0])]
        cells.extend(cell.rjust(width) for cell, width in zip(row[1:], widths[1:]))
        lines.append(pad.join(cells).rstrip())
    return lines


def render_plain(report: ComparisonReport) -> str:
    """Render a report as plain text tables.

    Each metric kind gets its own block::

        benchmark          old ns/op     new ns/op     delta
        BenchmarkFoo-8     1234          1100          -10.86%

    Blocks are separated by a blank line.
    """
    blocks: list[str] = []
    for kind in report.kinds:
        label = kind.column_label
        rows = [["benchmark", f"old {label}", f"new {label}", "delta"]]
        for metric in report.metrics:
            delta = metric.delta(kind)
            if delta is None:
                continue
            rows.append(
                [
                    metric.name,
                    format_value(kind, delta.old),
                    format_value(kind, delta.new),
                    format_delta(delta),
                ]
            )
        blocks.append("\n".join(_align(rows)))
    return "\n\n".join(blocks) + "\n"


def render_exclusions(report: ComparisonReport) -> str:
    """List benchmarks left out of the comparison, one per line."""
    return "\n".join(f"{item.name}: {item.reason.value}" for item in report.excluded)


def format_markdown_table(raw_table: str) -> str:
    """Convert plain text tables into markdown tables.

    Header lines (first field ``benchmark`` and containing ``old <unit>``)
    are replaced by a pipe-delimited header plus a separator row. Every
    other non-empty line has its whitespace runs replaced by a single
    ``|``. Blank lines are kept as they are.
    """
    lines: list[str] = []
    for line in raw_table.split("\n"):
        fields = line.split()
        if not fields:
            lines.append(line)
            continue
        match = _HEADER_UNIT_RE.search(line)
        if match is not None and fields[0].lower() == "benchmark":
            unit = match.group(1)
            last = fields[-1].capitalize()
            lines.append(f"| Benchmark | Old {unit} | New {unit} | {last} |")
            lines.append("|-|-|-|-|")
            continue
        lines.append("|".join(fields))
    return "\n".join(lines)


def render_markdown(report: ComparisonReport) -> str:
    """Render a complete markdown comment for a report."""
    parts = [
        f"**Benchmark comparison:** `{report.label}`",
        format_markdown_table(render_plain(report)).rstrip("\n"),
    ]
    if report.excluded:
        excluded = "\n".join(
            f"- `{item.name}`: {item.reason.value}" for item in report.excluded
        )
        parts.append(f"Excluded from comparison:\n{excluded}")
    return "\n\n".join(parts) + "\n"
