"""Git integration module for repo-mirror."""

from repo_mirror.git.client import GitClient
from repo_mirror.git.scanner import RepositoryScanner
from repo_mirror.git.url_resolver import URLResolver

__all__ = ["GitClient", "RepositoryScanner", "URLResolver"]
