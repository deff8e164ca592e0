import typing

import pytest

from lockdiff.diff import engine as diff_engine
from lockdiff.diff import groups as diff_groups
from lockdiff.models import group as group_models
from lockdiff.models import lock as lock_models
from lockdiff.models import report as report_models

if typing.TYPE_CHECKING:
    import tests.conftest


def lock_pkg(version: str, reference: str | None = None) -> lock_models.LockPackage:
    source = lock_models.LockSource(reference=reference) if reference is not None else None
    return lock_models.LockPackage(name="vendor/pkg", version=version, source=source)


class TestClassifyChange:
    @pytest.mark.parametrize(
        "from_pkg,to_pkg,expected_status,expected_from,expected_to",
        [
            (None, lock_pkg("1.0.0"), "added", None, "1.0.0"),
            (lock_pkg("1.0.0"), None, "removed", "1.0.0", None),
            (lock_pkg("1.0.0"), lock_pkg("1.1.0"), "updated", "1.0.0", "1.1.0"),
            (lock_pkg("1.0.0"), lock_pkg("1.0.0"), "unchanged", "1.0.0", "1.0.0"),
            # Version strings are compared exactly
            (lock_pkg("v1.0.0"), lock_pkg("1.0.0"), "updated", "v1.0.0", "1.0.0"),
            # Same fixed release built from another commit is not a change
            (
                lock_pkg("1.0.0", "aaaaaaa1"),
                lock_pkg("1.0.0", "bbbbbbb2"),
                "unchanged",
                "1.0.0",
                "1.0.0",
            ),
            # Branch versions need both references to tell builds apart
            (
                lock_pkg("dev-main", "abcdef1234"),
                lock_pkg("dev-main"),
                "unchanged",
                "dev-main",
                "dev-main",
            ),
            (
                lock_pkg("dev-main"),
                lock_pkg("dev-main", "abcdef1234"),
                "unchanged",
                "dev-main",
                "dev-main",
            ),
            (
                lock_pkg("dev-main", "abcdef1234"),
                lock_pkg("dev-main", "abcdef1234"),
                "unchanged",
                "dev-main",
                "dev-main",
            ),
        ],
    )
    def test_status(self, from_pkg, to_pkg, expected_status, expected_from, expected_to):
        status, delta = diff_engine.classify_change(from_pkg, to_pkg)

        assert status == expected_status
        assert delta.from_version == expected_from
        assert delta.to_version == expected_to

    def test_branch_alias_rewrite(self):
        # GIVEN: the same branch version built from two different commits
        from_pkg = lock_pkg("dev-main", "abcdef1234")
        to_pkg = lock_pkg("dev-main", "1234567890")

        # WHEN: classifying the change
        status, delta = diff_engine.classify_change(from_pkg, to_pkg)

        # THEN: it is an update and both versions carry a short commit suffix
        assert status == "updated"
        assert delta.from_version == "dev-main (abcdef1)"
        assert delta.to_version == "dev-main (1234567)"
        assert delta.from_ref == "abcdef1234"
        assert delta.to_ref == "1234567890"

    def test_short_reference_kept_whole(self):
        status, delta = diff_engine.classify_change(
            lock_pkg("dev-develop", "abc"), lock_pkg("dev-develop", "def")
        )

        assert status == "updated"
        assert delta.from_version == "dev-develop (abc)"
        assert delta.to_version == "dev-develop (def)"

    def test_references_carried(self):
        _, delta = diff_engine.classify_change(None, lock_pkg("1.0.0", "ffff"))

        assert delta == report_models.VersionDelta(to_version="1.0.0", to_ref="ffff")


class TestCompare:
    def test_end_to_end(self, helpers: "tests.conftest.Helpers"):
        # GIVEN: a package updated and a package added, neither matching a built-in group
        from_snapshot = helpers.snapshot("v1", [helpers.lock_pkg("core/pkg", "1.0.0")])
        to_snapshot = helpers.snapshot(
            "v2",
            [helpers.lock_pkg("core/pkg", "1.1.0"), helpers.lock_pkg("new/pkg", "2.0.0")],
        )

        # WHEN: comparing without custom rules
        report = diff_engine.compare(from_snapshot, to_snapshot)

        # THEN: both land in "other" with the expected statuses
        assert list(report.groups) == ["other"]
        assert report.groups["other"] == {
            "added": {"new/pkg": report_models.VersionDelta(from_version=None, to_version="2.0.0")},
            "updated": {
                "core/pkg": report_models.VersionDelta(from_version="1.0.0", to_version="1.1.0")
            },
        }
        assert report.summary["other"] == report_models.GroupSummary(
            added=1, removed=0, updated=1, unchanged=0
        )

    def test_every_package_has_one_status(self, helpers: "tests.conftest.Helpers"):
        from_snapshot = helpers.snapshot(
            "v1",
            [
                helpers.lock_pkg("a/removed", "1.0"),
                helpers.lock_pkg("a/same", "1.0"),
                helpers.lock_pkg("a/bumped", "1.0"),
                helpers.lock_pkg("a/branch", "dev-main", reference="1111111111"),
            ],
        )
        to_snapshot = helpers.snapshot(
            "v2",
            [
                helpers.lock_pkg("a/same", "1.0"),
                helpers.lock_pkg("a/bumped", "2.0"),
                helpers.lock_pkg("a/branch", "dev-main", reference="2222222222"),
                helpers.lock_pkg("a/new", "1.0"),
            ],
        )

        report = diff_engine.compare(from_snapshot, to_snapshot)

        seen: list[str] = []
        for statuses in report.groups.values():
            for entries in statuses.values():
                seen.extend(entries)
        assert sorted(seen) == ["a/branch", "a/bumped", "a/new", "a/removed", "a/same"]
        assert report.summary["other"] == report_models.GroupSummary(
            added=1, removed=1, updated=2, unchanged=1
        )

    def test_grouping_uses_target_type(self, helpers: "tests.conftest.Helpers"):
        # GIVEN: a package whose type changed between snapshots
        from_snapshot = helpers.snapshot(
            "v1", [helpers.lock_pkg("acme/site", "1.0", pkg_type="library")]
        )
        to_snapshot = helpers.snapshot(
            "v2", [helpers.lock_pkg("acme/site", "1.0", pkg_type="typo3-cms-extension")]
        )

        report = diff_engine.compare(from_snapshot, to_snapshot)

        # THEN: the target type decides the group
        assert list(report.groups) == ["extensions"]

    def test_removed_package_uses_origin_type(self, helpers: "tests.conftest.Helpers"):
        from_snapshot = helpers.snapshot(
            "v1", [helpers.lock_pkg("typo3/cms-form", "12.4.0", pkg_type="typo3-cms-framework")]
        )
        to_snapshot = helpers.snapshot("v2", [])

        report = diff_engine.compare(from_snapshot, to_snapshot)

        assert report.entries("core-extensions", "removed") == {
            "typo3/cms-form": report_models.VersionDelta(from_version="12.4.0")
        }

    def test_custom_groups(self, helpers: "tests.conftest.Helpers"):
        rules = diff_groups.GroupRules(
            [group_models.CustomGroupRule(name="acme", prefixes=("acme/",))]
        )
        packages = [
            helpers.lock_pkg("typo3/cms-core", "12.4.0", pkg_type="typo3-cms-framework"),
            helpers.lock_pkg("acme/sitepackage", "1.0", pkg_type="typo3-cms-extension"),
            helpers.lock_pkg("symfony/console", "6.4.0"),
        ]
        from_snapshot = helpers.snapshot("v1", packages)
        to_snapshot = helpers.snapshot("v2", packages)

        report = diff_engine.compare(from_snapshot, to_snapshot, rules)

        assert list(report.groups) == ["core", "acme", "other"]
        assert list(report.entries("acme", "unchanged")) == ["acme/sitepackage"]

    def test_empty_snapshots(self, helpers: "tests.conftest.Helpers"):
        report = diff_engine.compare(helpers.snapshot("v1", []), helpers.snapshot("v2", []))

        assert report.groups == {}
        assert report.summary == {}

    def test_fresh_result_per_call(self, helpers: "tests.conftest.Helpers"):
        from_snapshot = helpers.snapshot("v1", [helpers.lock_pkg("a/a", "1.0")])
        to_snapshot = helpers.snapshot("v2", [helpers.lock_pkg("a/a", "2.0")])

        assert diff_engine.compare(from_snapshot, to_snapshot) == diff_engine.compare(
            from_snapshot, to_snapshot
        )
