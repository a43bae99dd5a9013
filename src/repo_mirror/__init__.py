"""repo-mirror: record local GitHub checkouts and replay them on a new machine."""

__version__ = "0.1.0"
