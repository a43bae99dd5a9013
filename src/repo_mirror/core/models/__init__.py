"""Domain models for repo-mirror."""

from repo_mirror.core.models.config_file import LineError, LineErrorKind
from repo_mirror.core.models.repository import (
    FIELD_SEPARATOR,
    DiscoveredRepository,
    RepositoryRecord,
    repo_name_from_url,
)
from repo_mirror.core.models.run import CloneOutcome, CloneSummary, RunContext, ScanReport

__all__ = [
    "FIELD_SEPARATOR",
    "RepositoryRecord",
    "DiscoveredRepository",
    "repo_name_from_url",
    "LineError",
    "LineErrorKind",
    "ScanReport",
    "CloneOutcome",
    "CloneSummary",
    "RunContext",
]
