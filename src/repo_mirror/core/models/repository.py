"""Repository record models."""

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

FIELD_SEPARATOR = "|"


def repo_name_from_url(url: str) -> str:
    """Return the last path segment of a remote URL without ``.git``."""
    segment = re.split(r"[/:]", url.rstrip("/"))[-1]
    return segment.removesuffix(".git") or segment


class RepositoryRecord(BaseModel):
    """One line of a configuration file: where a repository lives and what to check out."""

    model_config = ConfigDict(frozen=True)

    remote_url: str = Field(min_length=1)
    target_path: str = Field(min_length=1)
    branch: str = Field(min_length=1)
    line_number: int | None = None

    @property
    def name(self) -> str:
        return repo_name_from_url(self.remote_url)

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join((self.remote_url, self.target_path, self.branch))


class DiscoveredRepository(BaseModel):
    """A repository root found while scanning.

    ``remote_url`` is ``None`` when no remote could be read. ``display_path``
    is the path as written to the configuration file, with the home
    directory replaced by ``~``.
    """

    path: Path
    remote_url: str | None = None
    branch: str = "main"
    display_path: str

    @property
    def name(self) -> str:
        if self.remote_url:
            return repo_name_from_url(self.remote_url)
        return self.path.name

    def to_record(self) -> RepositoryRecord:
        return RepositoryRecord(
            remote_url=self.remote_url or "",
            target_path=self.display_path,
            branch=self.branch,
        )
