import json
import typing

import pytest

from lockdiff.snapshot import core as snapshot_core


class Helpers:
    @staticmethod
    def lock_pkg(
        name: str,
        version: str,
        pkg_type: str = "library",
        reference: str | None = None,
        description: str | None = None,
    ) -> dict[str, typing.Any]:
        pkg: dict[str, typing.Any] = {"name": name, "version": version, "type": pkg_type}
        if description is not None:
            pkg["description"] = description
        if reference is not None:
            pkg["source"] = {"type": "git", "url": f"https://example.com/{name}.git"}
            pkg["source"]["reference"] = reference
        return pkg

    @staticmethod
    def lock_text(packages: list[dict[str, typing.Any]]) -> str:
        return json.dumps(
            {
                "_readme": ["This file locks the dependencies of your project"],
                "content-hash": "0123456789abcdef",
                "packages": packages,
                "packages-dev": [],
            },
            ensure_ascii=False,
            indent=4,
        )

    @staticmethod
    def snapshot(
        reference: str, packages: list[dict[str, typing.Any]]
    ) -> snapshot_core.LockSnapshot:
        return snapshot_core.load_snapshot(Helpers.lock_text(packages), reference)


@pytest.fixture(name="helpers")
def helpers_fixture() -> Helpers:
    return Helpers()

