import pathlib
import typing

import typer

import lockdiff.constants
import lockdiff.git
import lockdiff.logging
from lockdiff import errors
from lockdiff.diff import engine as diff_engine
from lockdiff.diff import groups as diff_groups
from lockdiff.render import console as render_console
from lockdiff.render import files as render_files


def select_output_format(
    json: bool, html: bool, md: bool, txt: bool
) -> render_files.OutputFormat | None:
    flags: dict[render_files.OutputFormat, bool] = {
        "json": json,
        "html": html,
        "md": md,
        "txt": txt,
    }
    selected = [output_format for output_format, enabled in flags.items() if enabled]
    if len(selected) > 1:
        raise errors.OutputPathError(
            "Only one output format may be selected, got: "
            + ", ".join(f"--{output_format}" for output_format in selected)
        )
    return selected[0] if len(selected) == 1 else None


def resolve_output_path(
    output_format: render_files.OutputFormat, filename: pathlib.Path | None
) -> pathlib.Path:
    if filename is None:
        return render_files.default_filename(output_format)

    if filename.suffix != f".{output_format}":
        raise errors.OutputPathError(
            f"--filename must end in .{output_format} when using --{output_format}, "
            f"got {filename}"
        )
    return filename


def run_compare(
    from_ref: str | None,
    to_ref: str | None,
    repo: pathlib.Path,
    lock_file: str,
    group_options: list[str],
    output_format: render_files.OutputFormat | None,
    output_path: pathlib.Path | None,
) -> None:
    """
    Compare the lock file between two references and emit the report.

    Both snapshots are loaded before anything is compared, so a bad reference never produces a
    partial report.
    """
    rules = diff_groups.rules_from_options(group_options)
    loader = lockdiff.git.GitSnapshotLoader(repo, lock_file)

    if from_ref is None or to_ref is None:
        from_ref, to_ref = lockdiff.git.resolve_references(from_ref, to_ref, loader.list_tags())

    lockdiff.logging.info("Comparing from %s to %s", from_ref, to_ref)
    from_snapshot = loader.fetch(from_ref)
    to_snapshot = loader.fetch(to_ref)

    report = diff_engine.compare(from_snapshot, to_snapshot, rules)

    if output_format is None:
        render_console.print_report(report)
        return

    assert output_path is not None
    content = render_files.render(report, output_format)
    try:
        written = render_files.write_report(output_path, content)
    except OSError as e:
        raise errors.OutputPathError(f"Could not write report to {output_path}: {e}") from e
    lockdiff.logging.info("File written to %s", written)


def compare(
    from_ref: typing.Annotated[
        str | None, typer.Option("--from", help="Source git reference")
    ] = None,
    to_ref: typing.Annotated[str | None, typer.Option("--to", help="Target git reference")] = None,
    repo: typing.Annotated[
        pathlib.Path | None,
        typer.Option(help="Path to the git repository, defaults to the working directory"),
    ] = None,
    lock_file: typing.Annotated[
        str, typer.Option(help="Lock file path inside the repository")
    ] = lockdiff.constants.default_lock_file,
    group: typing.Annotated[
        list[str] | None,
        typer.Option(
            "--group",
            help='Custom package group as "groupName:prefix1,prefix2", may be repeated',
        ),
    ] = None,
    json: typing.Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    html: typing.Annotated[bool, typer.Option("--html", help="Output as HTML")] = False,
    md: typing.Annotated[bool, typer.Option("--md", help="Output as Markdown")] = False,
    txt: typing.Annotated[bool, typer.Option("--txt", help="Output as plain text")] = False,
    filename: typing.Annotated[
        pathlib.Path | None,
        typer.Option(help="Target output filename, must match the output format"),
    ] = None,
):
    """
    Compare the lock file between two git references.
    """
    if repo is None:
        repo = pathlib.Path.cwd()
    if group is None:
        group = []

    try:
        output_format = select_output_format(json=json, html=html, md=md, txt=txt)
        output_path = None
        if output_format is not None:
            output_path = resolve_output_path(output_format, filename)
        elif filename is not None:
            lockdiff.logging.warning("--filename %s is ignored without an output format", filename)

        run_compare(
            from_ref=from_ref,
            to_ref=to_ref,
            repo=repo,
            lock_file=lock_file,
            group_options=group,
            output_format=output_format,
            output_path=output_path,
        )
    except errors.LockDiffError as e:
        lockdiff.logging.error("%s", e)
        raise typer.Exit(code=1) from e
