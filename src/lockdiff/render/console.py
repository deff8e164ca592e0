import typer

from lockdiff.models import report as report_models
from lockdiff.render import files as render_files

STATUS_COLORS: dict[report_models.Status, str] = {
    "added": typer.colors.GREEN,
    "removed": typer.colors.RED,
    "updated": typer.colors.YELLOW,
    "unchanged": typer.colors.BRIGHT_BLACK,
}


def print_report(report: report_models.Report) -> None:
    """
    Print the report to standard output, colored by status.
    """
    typer.echo("")
    typer.secho("Summary per group", fg=typer.colors.GREEN)
    for group, counts in report.summary.items():
        group_label = typer.style(group, fg=typer.colors.YELLOW)
        typer.echo(f"  {group_label}: {render_files.summary_line(counts)}")

    for group, statuses in report.groups.items():
        typer.echo("")
        typer.secho(group, fg=typer.colors.GREEN)
        for status, entries in statuses.items():
            if len(entries) == 0:
                continue
            typer.secho(f" {status}", fg=STATUS_COLORS[status])
            for name, delta in entries.items():
                from_version = render_files.display_version(delta.from_version)
                to_version = render_files.display_version(delta.to_version)
                typer.echo(f"   {name}: {from_version} -> {to_version}")
