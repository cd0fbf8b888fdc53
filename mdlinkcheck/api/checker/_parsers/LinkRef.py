"""Link reference dataclass."""

from dataclasses import dataclass


@dataclass
class LinkRef:
    """A reference to a link found in a document."""

    line_number: int
    column_number: int
    raw_target: str
    link_type: str  # "url", "image", "reference", "autolink", "bare"
