"""Business logic services for repo-mirror."""

from repo_mirror.services.cloning import CloneReporter, CloneService
from repo_mirror.services.scanning import ScanReporter, ScanService

__all__ = [
    "CloneReporter",
    "CloneService",
    "ScanReporter",
    "ScanService",
]
