"""Target dataclass - one document to check."""

from dataclasses import dataclass, field
from typing import TextIO

from .OptionsBag import OptionsBag
from .SourceKind import SourceKind


@dataclass
class Target:
    """One unit of work: a file, URL or standard input.

    ``display_name`` is what the user typed (``None`` for stdin) and
    ``location`` is what gets read. ``stream`` is only used for stdin
    targets and defaults to ``sys.stdin`` when read.
    """

    display_name: str | None
    source: SourceKind
    location: str | None = None
    options: OptionsBag = field(default_factory=OptionsBag)
    stream: TextIO | None = None

    @classmethod
    def stdin(cls, stream: TextIO | None = None) -> "Target":
        return cls(display_name=None, source=SourceKind.STDIN, stream=stream)
