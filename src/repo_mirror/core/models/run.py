"""Models describing a scan or clone run."""

from enum import Enum

from pydantic import BaseModel, Field

from repo_mirror.core.models.config_file import LineError
from repo_mirror.core.models.repository import DiscoveredRepository, RepositoryRecord


class ScanReport(BaseModel):
    """Result of scanning a directory tree."""

    records: list[RepositoryRecord] = Field(default_factory=list)
    non_host: list[DiscoveredRepository] = Field(default_factory=list)
    without_remote: list[DiscoveredRepository] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    def sorted_records(self) -> list[RepositoryRecord]:
        return sorted(self.records, key=lambda record: record.to_line())


class CloneOutcome(str, Enum):
    """What happened to a single record."""

    CLONED = "cloned"
    SKIPPED = "skipped"
    FAILED = "failed"


class RunContext(BaseModel):
    """Batch policy for one cloner run.

    Both flags start false and are only ever switched on by an operator
    answer; they apply to every later pre-existing target in the same run.
    """

    skip_all: bool = False
    reclone_all: bool = False


class CloneSummary(BaseModel):
    """Counters for a cloner run.

    ``bootstrapped`` is set when the run only created the example file.
    """

    bootstrapped: bool = False
    cloned: int = 0
    skipped: int = 0
    clone_failures: int = 0
    line_errors: list[LineError] = Field(default_factory=list)

    def record(self, outcome: CloneOutcome) -> None:
        if outcome is CloneOutcome.CLONED:
            self.cloned += 1
        elif outcome is CloneOutcome.SKIPPED:
            self.skipped += 1
        else:
            self.clone_failures += 1

    @property
    def succeeded(self) -> int:
        return self.cloned + self.skipped

    @property
    def failed(self) -> int:
        return self.clone_failures + len(self.line_errors)
