"""Settings and logging for repo-mirror."""

from repo_mirror.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
