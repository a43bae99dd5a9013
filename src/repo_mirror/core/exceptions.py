"""Exception hierarchy for repo-mirror."""

from typing import Any


class RepoMirrorError(Exception):
    """Base exception for all repo-mirror errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RepoMirrorError):
    """Invalid application settings."""


class PreconditionError(RepoMirrorError):
    """A fatal precondition failed before any work started.

    Raised for a missing scan base path or an unreadable configuration file.
    """


class ValidationError(RepoMirrorError):
    """A configuration line could not be turned into a record."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.line_number = line_number


class MalformedLineError(ValidationError):
    """The line does not have the three pipe-separated fields."""


class MissingFieldError(ValidationError):
    """One of the fields is empty after trimming and expansion."""


class InvalidURLError(ValidationError):
    """The repository URL is not an accepted hosting-provider URL."""


class RepositoryError(RepoMirrorError):
    """Base for errors raised while working with a repository."""


class GitCommandError(RepositoryError):
    """A git invocation failed or git could not be executed."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        stderr: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.command = command or []
        self.stderr = stderr


class CloneError(RepositoryError):
    """A repository could not be cloned to its target path."""
