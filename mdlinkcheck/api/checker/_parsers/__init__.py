"""Link parsers used by the checker backends."""

from ._BaseParser import BaseParser
from ._MarkdownParser import MarkdownParser
from .LinkRef import LinkRef

__all__ = ["BaseParser", "LinkRef", "MarkdownParser"]
