"""Configuration file writers."""

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from repo_mirror.core.models import RepositoryRecord

FORMAT_LINE = "# Format: REPO_URL|TARGET_PATH|BRANCH"

TEMPLATE = """\
# GitHub Repository Configuration
# Format: REPO_URL|TARGET_PATH|BRANCH
# Lines starting with # are comments
# Example entries:

https://github.com/torvalds/linux|./projects/linux|master
https://github.com/microsoft/vscode|./projects/vscode|main
git@github.com:facebook/react.git|./projects/react|main
https://github.com/nodejs/node|./projects/nodejs|v18.x
"""


def render_config(
    records: Iterable[RepositoryRecord],
    base_path: Path | str,
    generated_at: datetime,
) -> str:
    """Render records as a configuration file, sorted by their full line."""
    header = [
        "# GitHub Repository Configuration",
        f"# Generated on {generated_at.strftime('%a %b %d %H:%M:%S %Y')}",
        FORMAT_LINE,
        f"# Base path scanned: {base_path}",
        "",
    ]
    lines = sorted(record.to_line() for record in records)
    return "\n".join(header + lines) + "\n"


def write_config(
    path: Path | str,
    records: Iterable[RepositoryRecord],
    base_path: Path | str,
    generated_at: datetime | None = None,
) -> Path:
    path = Path(path)
    content = render_config(records, base_path, generated_at or datetime.now())
    path.write_text(content, encoding="utf-8")
    return path


def write_template(path: Path | str) -> Path:
    """Write the commented example file used on first run."""
    path = Path(path)
    path.write_text(TEMPLATE, encoding="utf-8")
    return path
