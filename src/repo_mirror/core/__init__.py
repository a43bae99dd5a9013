"""Core domain models and exceptions for repo-mirror."""

from repo_mirror.core.exceptions import (
    CloneError,
    ConfigurationError,
    GitCommandError,
    InvalidURLError,
    MalformedLineError,
    MissingFieldError,
    PreconditionError,
    RepoMirrorError,
    RepositoryError,
    ValidationError,
)
from repo_mirror.core.models import (
    CloneOutcome,
    CloneSummary,
    DiscoveredRepository,
    LineError,
    LineErrorKind,
    RepositoryRecord,
    RunContext,
    ScanReport,
)

__all__ = [
    # Models
    "RepositoryRecord",
    "DiscoveredRepository",
    "LineError",
    "LineErrorKind",
    "ScanReport",
    "CloneOutcome",
    "CloneSummary",
    "RunContext",
    # Exceptions
    "RepoMirrorError",
    "ConfigurationError",
    "PreconditionError",
    "ValidationError",
    "MalformedLineError",
    "MissingFieldError",
    "InvalidURLError",
    "RepositoryError",
    "GitCommandError",
    "CloneError",
]
