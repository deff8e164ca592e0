import typing

import lockdiff.constants
from lockdiff.diff import groups as diff_groups
from lockdiff.diff import report as diff_report
from lockdiff.models import lock as lock_models
from lockdiff.models import report as report_models
from lockdiff.snapshot import core as snapshot_core


class ClassifiedPackage(typing.NamedTuple):
    name: str
    group: str
    status: report_models.Status
    delta: report_models.VersionDelta


def _short_ref(reference: str) -> str:
    return reference[: lockdiff.constants.short_reference_length]


def classify_change(
    from_pkg: lock_models.LockPackage | None,
    to_pkg: lock_models.LockPackage | None,
) -> tuple[report_models.Status, report_models.VersionDelta]:
    """
    Decide the status of a package present on at least one side.

    Checks run in a fixed order and the first match wins:
    added, removed, version changed, same branch version built from a different commit,
    unchanged. For the branch case the displayed versions carry a short commit suffix so the two
    builds can be told apart.
    """
    assert from_pkg is not None or to_pkg is not None

    from_version = from_pkg.version if from_pkg is not None else None
    to_version = to_pkg.version if to_pkg is not None else None
    from_ref = from_pkg.reference if from_pkg is not None else None
    to_ref = to_pkg.reference if to_pkg is not None else None

    status: report_models.Status
    if from_version is None:
        status = "added"
    elif to_version is None:
        status = "removed"
    elif from_version != to_version:
        status = "updated"
    elif (
        from_version.startswith(lockdiff.constants.floating_version_marker)
        and from_ref is not None
        and to_ref is not None
        and from_ref != to_ref
    ):
        status = "updated"
        from_version = f"{from_version} ({_short_ref(from_ref)})"
        to_version = f"{to_version} ({_short_ref(to_ref)})"
    else:
        status = "unchanged"

    return status, report_models.VersionDelta(
        from_version=from_version,
        to_version=to_version,
        from_ref=from_ref,
        to_ref=to_ref,
    )


def classify_packages(
    from_snapshot: snapshot_core.LockSnapshot,
    to_snapshot: snapshot_core.LockSnapshot,
    rules: diff_groups.GroupRules,
) -> list[ClassifiedPackage]:
    """
    Assign a group and a status to every package found in either snapshot.
    """
    # Packages of the target snapshot come first, then those only in the origin
    names = list(to_snapshot.pkg_map)
    names.extend(name for name in from_snapshot.pkg_map if name not in to_snapshot)

    classified: list[ClassifiedPackage] = []
    for name in names:
        from_pkg = from_snapshot.get(name)
        to_pkg = to_snapshot.get(name)

        type_source = to_pkg if to_pkg is not None else from_pkg
        assert type_source is not None
        group = rules.classify(name, type_source.type)

        status, delta = classify_change(from_pkg, to_pkg)
        classified.append(ClassifiedPackage(name=name, group=group, status=status, delta=delta))

    return classified


def compare(
    from_snapshot: snapshot_core.LockSnapshot,
    to_snapshot: snapshot_core.LockSnapshot,
    rules: diff_groups.GroupRules | None = None,
) -> report_models.Report:
    if rules is None:
        rules = diff_groups.GroupRules()

    classified = classify_packages(from_snapshot, to_snapshot, rules)
    return diff_report.assemble(classified, rules.group_order())
