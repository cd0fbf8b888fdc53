"""Link result dataclass."""

from dataclasses import dataclass

from .LinkStatus import LinkStatus


@dataclass(frozen=True)
class LinkResult:
    """One hyperlink evaluated by the checker."""

    link: str
    status: LinkStatus
    status_code: int | None = None
    err: str | None = None
