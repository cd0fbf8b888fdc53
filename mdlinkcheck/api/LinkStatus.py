"""Classification of one checked hyperlink."""

from enum import Enum


class LinkStatus(str, Enum):
    ALIVE = "alive"
    DEAD = "dead"
    IGNORED = "ignored"
    ERROR = "error"
