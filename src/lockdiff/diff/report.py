import collections.abc
import typing

from lockdiff.models import report as report_models

if typing.TYPE_CHECKING:
    from lockdiff.diff import engine as diff_engine


def summarize(
    statuses: collections.abc.Mapping[report_models.Status, collections.abc.Sized],
) -> report_models.GroupSummary:
    """
    Count the entries of each status. A missing bucket counts as zero.
    """
    return report_models.GroupSummary(
        **{status: len(statuses.get(status, ())) for status in report_models.STATUSES}
    )


def assemble(
    classified: collections.abc.Iterable["diff_engine.ClassifiedPackage"],
    group_order: list[str],
) -> report_models.Report:
    """
    Arrange classified packages into a report.

    Groups follow `group_order`, statuses follow the canonical status order and packages are
    sorted by name. Empty groups and status buckets are left out.
    """
    buckets: dict[str, dict[report_models.Status, dict[str, report_models.VersionDelta]]] = {
        group: {} for group in group_order
    }
    for package in classified:
        # Groups outside group_order are appended in the order they are first seen
        group_buckets = buckets.setdefault(package.group, {})
        group_buckets.setdefault(package.status, {})[package.name] = package.delta

    groups: dict[str, dict[report_models.Status, dict[str, report_models.VersionDelta]]] = {}
    for group, statuses in buckets.items():
        if len(statuses) == 0:
            continue
        groups[group] = {
            status: {name: statuses[status][name] for name in sorted(statuses[status])}
            for status in report_models.STATUSES
            if status in statuses
        }

    summary = {group: summarize(statuses) for group, statuses in groups.items()}
    return report_models.Report(summary=summary, groups=groups)
