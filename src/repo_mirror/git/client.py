"""Git command wrapper using subprocess."""

import subprocess
from pathlib import Path

import structlog

from repo_mirror.core.exceptions import GitCommandError

logger = structlog.get_logger(__name__)

# Ordered "current branch" queries; the first non-empty answer wins.
BRANCH_QUERIES: tuple[tuple[str, ...], ...] = (
    ("branch", "--show-current"),
    ("symbolic-ref", "--short", "HEAD"),
    ("rev-parse", "--abbrev-ref", "HEAD"),
)


class GitClient:
    """Runs the handful of git commands repo-mirror needs.

    Uses subprocess + git CLI directly (no gitpython dependency).
    """

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    def _run_git(self, *args: str, cwd: Path | str | None = None) -> str:
        """Run a git command and return stdout."""
        command = [self._executable, *args]
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                f"git {' '.join(args)} failed",
                command=command,
                stderr=(e.stderr or "").strip(),
                details={"cwd": str(cwd) if cwd else None, "returncode": e.returncode},
            ) from e
        except (FileNotFoundError, NotADirectoryError) as e:
            raise GitCommandError(
                f"Could not run {self._executable}: {e}",
                command=command,
                details={"cwd": str(cwd) if cwd else None},
            ) from e
        return result.stdout.strip()

    def get_remote_url(self, path: Path, primary: str = "origin") -> str | None:
        """Get the primary remote URL, falling back to the first listed remote."""
        try:
            url = self._run_git("remote", "get-url", primary, cwd=path)
            if url:
                return url
        except GitCommandError:
            logger.debug("Primary remote not found", path=str(path), remote=primary)

        listing = self._run_git("remote", "-v", cwd=path)
        for line in listing.splitlines():
            parts = line.split()
            if len(parts) >= 2:
                return parts[1]
        return None

    def get_current_branch(self, path: Path, default: str = "main") -> str:
        """Get the checked-out branch name, or ``default`` when there is none."""
        for query in BRANCH_QUERIES:
            try:
                branch = self._run_git(*query, cwd=path)
            except GitCommandError:
                continue
            if branch and branch != "HEAD":
                return branch
        logger.debug("Falling back to default branch", path=str(path), branch=default)
        return default

    def clone_single_branch(self, url: str, target: Path | str, branch: str) -> None:
        """Clone only ``branch`` of ``url`` into ``target``."""
        self._run_git("clone", "--branch", branch, "--single-branch", url, str(target))
