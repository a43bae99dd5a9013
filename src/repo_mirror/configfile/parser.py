"""Line-oriented configuration file parser.

Each record line is ``REPO_URL|TARGET_PATH|BRANCH``. Blank lines and lines
starting with ``#`` are ignored. There is no escaping: a ``|`` cannot appear
in the URL or path, and anything after the second separator belongs to the
branch field.
"""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

import structlog

from repo_mirror.core.exceptions import (
    InvalidURLError,
    MalformedLineError,
    MissingFieldError,
    PreconditionError,
    ValidationError,
)
from repo_mirror.core.models import FIELD_SEPARATOR, LineError, LineErrorKind, RepositoryRecord
from repo_mirror.git.url_resolver import URLResolver

logger = structlog.get_logger(__name__)

COMMENT_PREFIX = "#"

_ERROR_KINDS: dict[type[ValidationError], LineErrorKind] = {
    MalformedLineError: LineErrorKind.MALFORMED,
    MissingFieldError: LineErrorKind.MISSING_FIELDS,
    InvalidURLError: LineErrorKind.INVALID_URL,
}


def expand_target_path(value: str) -> str:
    """Expand a leading ``~`` and ``$VAR``/``${VAR}`` references.

    Unknown variables are left untouched.
    """
    return os.path.expandvars(os.path.expanduser(value))


def parse_line(raw: str, line_number: int, resolver: URLResolver) -> RepositoryRecord | None:
    """Parse one physical line.

    Returns ``None`` for blank and comment lines and raises a
    ``ValidationError`` subclass for lines that cannot become a record.
    """
    stripped = raw.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    parts = stripped.split(FIELD_SEPARATOR, 2)
    if len(parts) < 3:
        raise MalformedLineError(
            f"Line {line_number}: expected REPO_URL|TARGET_PATH|BRANCH",
            line_number=line_number,
            details={"line": stripped},
        )

    url, target_path, branch = (part.strip() for part in parts)
    if target_path:
        target_path = expand_target_path(target_path)

    if not url or not target_path or not branch:
        raise MissingFieldError(
            f"Line {line_number}: Missing required fields (repo_url|target_path|branch)",
            line_number=line_number,
            details={"line": stripped},
        )

    url = resolver.normalize(url)
    if not resolver.is_valid(url):
        raise InvalidURLError(
            f"Line {line_number}: Invalid {resolver.host} repository URL: {url}",
            line_number=line_number,
            details={"url": url},
        )

    return RepositoryRecord(
        remote_url=url,
        target_path=target_path,
        branch=branch,
        line_number=line_number,
    )


def iter_config(
    lines: Iterable[str], resolver: URLResolver
) -> Iterator[RepositoryRecord | LineError]:
    """Yield a record or a ``LineError`` for every meaningful line.

    A bad line never stops the iteration.
    """
    for line_number, raw in enumerate(lines, start=1):
        try:
            record = parse_line(raw, line_number, resolver)
        except ValidationError as e:
            logger.warning("Rejected configuration line", line_number=line_number, error=e.message)
            yield LineError(
                line_number=line_number,
                kind=_ERROR_KINDS.get(type(e), LineErrorKind.MALFORMED),
                message=e.message,
                raw=raw.rstrip("\r\n"),
            )
            continue
        if record is not None:
            yield record


def _iter_and_close(
    handle: TextIO, resolver: URLResolver
) -> Iterator[RepositoryRecord | LineError]:
    with handle:
        yield from iter_config(handle, resolver)


def read_config(path: Path | str, resolver: URLResolver) -> Iterator[RepositoryRecord | LineError]:
    """Open a configuration file and stream its records and errors.

    The file gets its own handle so stdin stays free for prompts.
    """
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError as e:
        raise PreconditionError(
            f"Cannot read configuration file: {path}",
            details={"path": str(path), "error": str(e)},
        ) from e
    return _iter_and_close(handle, resolver)
