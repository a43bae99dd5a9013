"""Configuration file parsing models."""

from enum import Enum

from pydantic import BaseModel


class LineErrorKind(str, Enum):
    """Why a configuration line was rejected."""

    MALFORMED = "malformed"
    MISSING_FIELDS = "missing_fields"
    INVALID_URL = "invalid_url"


class LineError(BaseModel):
    """A rejected configuration line, reported instead of a record."""

    line_number: int
    kind: LineErrorKind
    message: str
    raw: str = ""
