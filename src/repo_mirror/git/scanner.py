"""Repository discovery on the local filesystem."""

import os
from collections.abc import Iterator
from pathlib import Path

import structlog

from repo_mirror.core.exceptions import GitCommandError
from repo_mirror.core.models import DiscoveredRepository
from repo_mirror.git.client import GitClient

logger = structlog.get_logger(__name__)

GIT_DIR = ".git"
HOME_MARKER = "~"


def find_repository_roots(base: Path) -> list[Path]:
    """Return every directory under ``base`` that directly contains a ``.git`` directory.

    ``.git`` directories themselves are not descended into, and unreadable
    directories are skipped.
    """

    def _on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory", path=error.filename, error=error.strerror)

    roots = []
    for dirpath, dirnames, _ in os.walk(base, onerror=_on_error):
        dirnames.sort()
        if GIT_DIR in dirnames:
            roots.append(Path(dirpath))
            dirnames.remove(GIT_DIR)
    return roots


def _inside_repository(directory: Path, base: Path) -> bool:
    """Whether ``directory`` or one of its ancestors up to ``base`` is a repository root."""
    for candidate in (directory, *directory.parents):
        if (candidate / GIT_DIR).exists():
            return True
        if candidate == base:
            break
    return False


def exclude_nested(roots: list[Path], base: Path) -> list[Path]:
    """Drop repositories whose parent directory lies inside another repository.

    Only ancestors up to and including ``base`` are considered.
    """
    kept = []
    for root in roots:
        if root != base and _inside_repository(root.parent, base):
            logger.debug("Skipping nested repository", path=str(root))
            continue
        kept.append(root)
    return kept


def to_display_path(path: Path, home: Path | None = None) -> str:
    """Render ``path`` with the home directory replaced by ``~``.

    Both sides are resolved first so a symlinked home still matches.
    """
    home = (home or Path.home()).resolve()
    try:
        relative = path.resolve().relative_to(home)
    except ValueError:
        return str(path)
    if relative == Path("."):
        return HOME_MARKER
    return f"{HOME_MARKER}/{relative.as_posix()}"


class RepositoryScanner:
    """Finds repository roots under a base path and reads their metadata."""

    def __init__(
        self,
        git: GitClient,
        primary_remote: str = "origin",
        default_branch: str = "main",
        home: Path | None = None,
    ) -> None:
        self._git = git
        self._primary_remote = primary_remote
        self._default_branch = default_branch
        self._home = home

    def inspect(self, root: Path) -> DiscoveredRepository:
        """Read remote URL and branch of one repository.

        A failing remote query is reported as a repository without remote.
        """
        try:
            remote_url = self._git.get_remote_url(root, primary=self._primary_remote)
        except GitCommandError as e:
            logger.warning("Could not read remote", path=str(root), error=e.message, stderr=e.stderr)
            remote_url = None

        branch = self._git.get_current_branch(root, default=self._default_branch)
        return DiscoveredRepository(
            path=root,
            remote_url=remote_url,
            branch=branch,
            display_path=to_display_path(root, self._home),
        )

    def iter_repositories(self, base: Path) -> Iterator[DiscoveredRepository]:
        roots = exclude_nested(find_repository_roots(base), base)
        logger.debug("Repository roots found", base=str(base), count=len(roots))
        for root in roots:
            yield self.inspect(root)
