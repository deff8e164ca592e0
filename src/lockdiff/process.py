import pathlib
import shutil
import subprocess

import lockdiff.constants
import lockdiff.logging
from lockdiff import errors


def run_git(
    args: list[str],
    repo: pathlib.Path,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command against the given repository and capture its output.

    A non-zero exit status is returned to the caller rather than raised, since callers give
    different meanings to a failing rev-parse and a failing show.
    """
    git = shutil.which("git")
    if git is None:
        raise errors.GitCommandError("git is not found in PATH")

    if timeout is None:
        timeout = lockdiff.constants.git_timeout_seconds

    cmd = [git, "-C", str(repo), *args]
    lockdiff.logging.debug("Executing %s", " ".join(cmd))
    try:
        return subprocess.run(
            cmd, text=True, encoding="utf-8", capture_output=True, timeout=timeout
        )
    except subprocess.TimeoutExpired as e:
        raise errors.GitCommandError(
            f"git {' '.join(args)} timed out after {timeout} seconds"
        ) from e
