import html
import pathlib
import typing

import lockdiff.constants
import lockdiff.util
from lockdiff.models import report as report_models
from lockdiff.render import html_style

OutputFormat = typing.Literal["json", "html", "md", "txt"]

OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("json", "html", "md", "txt")

# Groups whose HTML section starts collapsed
_COLLAPSED_GROUPS = {lockdiff.constants.core_extensions_group, lockdiff.constants.other_group}


def display_version(version: str | None) -> str:
    return version if version is not None else ""


def summary_line(counts: report_models.GroupSummary) -> str:
    return ", ".join(f"{status}={counts.count(status)}" for status in report_models.STATUSES)


def render_json(report: report_models.Report) -> str:
    return report.model_dump_json(by_alias=True, indent=4)


def render_markdown(report: report_models.Report) -> str:
    lines = [
        "## Summary per group",
        "",
        "| Group | Added | Removed | Updated | Unchanged |",
        "|---|---|---|---|---|",
    ]
    for group, counts in report.summary.items():
        lines.append(
            f"| {group} | {counts.added} | {counts.removed} | {counts.updated} "
            f"| {counts.unchanged} |"
        )
    lines.append("")

    for group, statuses in report.groups.items():
        lines.extend([f"## {group}", ""])
        for status, entries in statuses.items():
            if len(entries) == 0:
                continue
            lines.extend([f"### {status}", "", "| Package | From | To |", "|---|---|---|"])
            for name, delta in entries.items():
                from_version = display_version(delta.from_version)
                to_version = display_version(delta.to_version)
                lines.append(f"| {name} | {from_version} | {to_version} |")
            lines.append("")

    return "\n".join(lines) + "\n"


def render_text(report: report_models.Report) -> str:
    lines = ["SUMMARY PER GROUP"]
    for group, counts in report.summary.items():
        lines.append(f"{group.upper()}: {summary_line(counts)}")
    lines.append("")

    for group, statuses in report.groups.items():
        lines.append(group.upper())
        for status, entries in statuses.items():
            if len(entries) == 0:
                continue
            lines.append(f"  {status}")
            for name, delta in entries.items():
                from_version = display_version(delta.from_version)
                to_version = display_version(delta.to_version)
                lines.append(f"    {name}: {from_version} -> {to_version}")
        lines.append("")

    return "\n".join(lines) + "\n"


def render_html(report: report_models.Report) -> str:
    esc = html.escape
    parts = [f"<html><head><style>{html_style.STYLESHEET}</style></head><body>"]

    parts.append('<h2>Contents</h2><ul class="contents"><li><a href="#summary">Summary</a></li>')
    for group in report.groups:
        parts.append(f'<li><a href="#{esc(group)}">{esc(group)}</a></li>')
    parts.append("</ul>")

    parts.append(
        '<details open id="summary"><summary><h2>Summary per group</h2></summary>'
        '<table class="summary-table"><tr><th>Group</th><th>Added</th><th>Removed</th>'
        "<th>Updated</th><th>Unchanged</th></tr>"
    )
    for group, counts in report.summary.items():
        cells = "".join(
            f"<td class='{status}'>{counts.count(status)}</td>"
            for status in report_models.STATUSES
        )
        parts.append(f"<tr><td>{esc(group)}</td>{cells}</tr>")
    parts.append("</table></details>")

    for group, statuses in report.groups.items():
        open_attr = "" if group in _COLLAPSED_GROUPS else " open"
        parts.append(
            f'<details{open_attr} id="{esc(group)}"><summary><h2>{esc(group)}</h2></summary>'
            "<table><tr><th>Status</th><th>Package</th><th>From</th><th>To</th></tr>"
        )
        for status, entries in statuses.items():
            for name, delta in entries.items():
                parts.append(
                    f"<tr class='{status}'><td>{status}</td><td>{esc(name)}</td>"
                    f"<td>{esc(display_version(delta.from_version))}</td>"
                    f"<td>{esc(display_version(delta.to_version))}</td></tr>"
                )
        parts.append("</table></details>")

    parts.append("</body></html>")
    return "".join(parts)


_RENDERERS: dict[OutputFormat, typing.Callable[[report_models.Report], str]] = {
    "json": render_json,
    "html": render_html,
    "md": render_markdown,
    "txt": render_text,
}


def render(report: report_models.Report, output_format: OutputFormat) -> str:
    return _RENDERERS[output_format](report)


def default_filename(output_format: OutputFormat) -> pathlib.Path:
    return pathlib.Path(f"{lockdiff.constants.default_report_name}.{output_format}")


def write_report(path: pathlib.Path, content: str) -> pathlib.Path:
    """
    Write rendered report content, creating parent directories as needed.
    Returns the absolute path of the written file.
    """
    lockdiff.util.ensure_path(path.parent)
    with path.open("w", encoding="utf-8") as f:
        f.write(content)
    return path.resolve()
