import pathlib
import typing

import lockdiff.constants
import lockdiff.logging
import lockdiff.process
from lockdiff import errors
from lockdiff.snapshot import core as snapshot_core


class GitSnapshotLoader:
    """
    Reads the lock file of a repository as it was at a git reference.
    """

    def __init__(
        self,
        repo: pathlib.Path,
        lock_file: str = lockdiff.constants.default_lock_file,
    ):
        self.repo = repo
        self.lock_file = lock_file

    def reference_exists(self, reference: str) -> bool:
        result = lockdiff.process.run_git(
            ["rev-parse", "--verify", "--quiet", f"{reference}^{{commit}}"], self.repo
        )
        return result.returncode == 0 and result.stdout.strip() != ""

    def read_lock_file(self, reference: str) -> str:
        result = lockdiff.process.run_git(["show", f"{reference}:{self.lock_file}"], self.repo)
        if result.returncode != 0:
            lockdiff.logging.debug("git show failed: %s", result.stderr.strip())
            raise errors.ManifestMissingError(reference, self.lock_file)
        return result.stdout

    def fetch(self, reference: str) -> snapshot_core.LockSnapshot:
        if not self.reference_exists(reference):
            raise errors.ReferenceNotFoundError(reference)
        return snapshot_core.load_snapshot(self.read_lock_file(reference), reference)

    def list_tags(self) -> list[str]:
        """
        List tags of the repository, most recently created first.
        """
        result = lockdiff.process.run_git(["tag", "--sort=-creatordate"], self.repo)
        if result.returncode != 0:
            raise errors.GitCommandError(
                f"Could not list tags of {self.repo}: {result.stderr.strip()}"
            )
        return [line.strip() for line in result.stdout.splitlines() if line.strip() != ""]


class ResolvedReferences(typing.NamedTuple):
    from_ref: str
    to_ref: str


def _fallback_for(explicit: str, tags: list[str], side: str) -> str:
    if len(tags) == 0:
        raise errors.InsufficientReferencesError(
            f'No git tags found to determine fallback "{side}" reference.'
        )

    latest = tags[0]
    previous = tags[1] if len(tags) > 1 else None
    fallback = latest if explicit != latest else previous
    if fallback is None:
        raise errors.AmbiguousReferenceError(
            f'Could not determine fallback "{side}" reference distinct from {explicit}. '
            "Provide both --from and --to."
        )

    lockdiff.logging.info("Using fallback %s reference %s", side, fallback)
    return fallback


def resolve_references(
    from_ref: str | None, to_ref: str | None, tags: list[str]
) -> ResolvedReferences:
    """
    Fill in missing references from the list of tags, given most recent first.

    With no explicit reference, the two most recent tags are compared. With one, the most recent
    tag that differs from it is used for the other side.
    """
    if from_ref is None and to_ref is None:
        if len(tags) < 2:
            raise errors.InsufficientReferencesError("Not enough git tags found to compare.")
        return ResolvedReferences(from_ref=tags[1], to_ref=tags[0])

    if from_ref is None:
        assert to_ref is not None
        return ResolvedReferences(from_ref=_fallback_for(to_ref, tags, "from"), to_ref=to_ref)

    if to_ref is None:
        return ResolvedReferences(from_ref=from_ref, to_ref=_fallback_for(from_ref, tags, "to"))

    return ResolvedReferences(from_ref=from_ref, to_ref=to_ref)
