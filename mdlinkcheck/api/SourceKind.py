"""Where a target's document text comes from."""

from enum import Enum


class SourceKind(Enum):
    FILE = "file"
    URL = "url"
    STDIN = "stdin"
