"""Scanning service: local checkouts to a configuration file."""

import os
from datetime import datetime
from pathlib import Path

import structlog

from repo_mirror.configfile import write_config
from repo_mirror.core.exceptions import PreconditionError
from repo_mirror.core.models import DiscoveredRepository, ScanReport
from repo_mirror.git.scanner import RepositoryScanner
from repo_mirror.git.url_resolver import URLResolver

logger = structlog.get_logger(__name__)


class ScanReporter:
    """Receives per-repository progress from a scan. Does nothing by default."""

    def found(self, repo: DiscoveredRepository) -> None:
        pass

    def accepted(self, repo: DiscoveredRepository) -> None:
        pass

    def non_host(self, repo: DiscoveredRepository) -> None:
        pass

    def no_remote(self, repo: DiscoveredRepository) -> None:
        pass


def resolve_base_path(base: Path | str) -> Path:
    """Resolve ``base`` to an absolute, readable directory."""
    path = Path(base).expanduser().resolve()
    if not path.is_dir():
        raise PreconditionError(f"Directory not found: {path}", details={"path": str(path)})
    if not os.access(path, os.R_OK | os.X_OK):
        raise PreconditionError(f"Directory not readable: {path}", details={"path": str(path)})
    return path


class ScanService:
    """Finds repositories hosted on one provider and records them."""

    def __init__(
        self,
        scanner: RepositoryScanner,
        resolver: URLResolver,
        reporter: ScanReporter | None = None,
    ) -> None:
        self._scanner = scanner
        self._resolver = resolver
        self._reporter = reporter or ScanReporter()

    def scan(self, base: Path | str) -> ScanReport:
        base_path = resolve_base_path(base)
        report = ScanReport()

        for repo in self._scanner.iter_repositories(base_path):
            self._reporter.found(repo)
            if not repo.remote_url:
                report.without_remote.append(repo)
                self._reporter.no_remote(repo)
            elif not self._resolver.matches_host(repo.remote_url):
                report.non_host.append(repo)
                self._reporter.non_host(repo)
            else:
                report.records.append(repo.to_record())
                self._reporter.accepted(repo)

        logger.info(
            "Scan finished",
            base=str(base_path),
            accepted=report.count,
            non_host=len(report.non_host),
            without_remote=len(report.without_remote),
        )
        return report

    def write(
        self,
        report: ScanReport,
        output: Path | str,
        base: Path | str,
        generated_at: datetime | None = None,
    ) -> Path | None:
        """Write the sorted configuration file.

        Nothing is written when the scan accepted no repository.
        """
        if not report.records:
            logger.info("No repositories to write", output=str(output))
            return None
        path = write_config(output, report.records, base, generated_at)
        logger.info("Configuration written", output=str(path), records=report.count)
        return path
