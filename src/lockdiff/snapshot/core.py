import typing

import pydantic

from lockdiff import errors
from lockdiff.models import lock as lock_models


class LockSnapshot:
    """
    The packages recorded in a lock file at one git reference.
    """

    def __init__(self, reference: str, manifest: lock_models.LockManifest):
        self.reference = reference
        self.packages: tuple[lock_models.LockPackage, ...] = tuple(manifest.packages)

        # Later entries for the same name overwrite earlier ones; dict keeps first-seen order
        self.pkg_map: dict[str, lock_models.LockPackage] = {}
        for package in self.packages:
            self.pkg_map[package.name] = package

    def get(self, name: str) -> lock_models.LockPackage | None:
        return self.pkg_map.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.pkg_map

    def __len__(self) -> int:
        return len(self.pkg_map)

    def __eq__(self, rhs: typing.Any) -> bool:
        if not isinstance(rhs, LockSnapshot):
            return False
        return self.reference == rhs.reference and self.packages == rhs.packages


def parse_manifest(text: str, reference: str) -> lock_models.LockManifest:
    """
    Parse the JSON text of a lock file.
    """
    try:
        return lock_models.LockManifest.model_validate_json(text)
    except pydantic.ValidationError as e:
        raise errors.InvalidManifestError(
            reference, f"{e.error_count()} validation error(s), first: {e.errors()[0]['msg']}"
        ) from e


def load_snapshot(text: str, reference: str) -> LockSnapshot:
    return LockSnapshot(reference, parse_manifest(text, reference))
