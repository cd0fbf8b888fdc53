"""Markdown link parser."""

import re
from collections.abc import Iterator

from ._BaseParser import BaseParser, LinkRef

# Compiled regex patterns
FENCE_PATTERN = re.compile(r"^\s{0,3}(```|~~~)")
INLINE_CODE_PATTERN = re.compile(r"`+[^`]*`+")
MARKDOWN_URL_PATTERN = re.compile(r"(!)?\[([^\]]*)\]\(\s*<?([^)\s>]+)>?(?:\s+[\"'(][^)]*)?\)")
REFERENCE_PATTERN = re.compile(r"^\s{0,3}\[([^\]]+)\]:\s*<?([^\s>]+)>?")
AUTOLINK_PATTERN = re.compile(r"<(https?://[^>\s]+)>")
BARE_URL_PATTERN = re.compile(r"https?://[^\s<>()\[\]`\"']+")
DISABLE_COMMENT_PATTERN = re.compile(
    r"<!--\s*markdown-link-check-(disable-next-line|disable-line|disable|enable)\s*-->"
)
TRAILING_PUNCTUATION = ".,;:!?"


def _mask(line: str, start: int, end: int) -> str:
    return line[:start] + " " * (end - start) + line[end:]


class MarkdownParser(BaseParser):
    """Parser for standard Markdown links.

    Finds inline links and images, reference definitions, ``<...>`` autolinks
    and bare URLs. Fenced code blocks and inline code spans are skipped.
    ``markdown-link-check-*`` HTML comments switch checking off and on
    unless ``honor_disable_comments`` is False.
    """

    def __init__(self, honor_disable_comments: bool = True):
        self.honor_disable_comments = honor_disable_comments

    def parse(self, text: str) -> Iterator[LinkRef]:
        in_fence = False
        disabled = False
        skip_next = False

        for line_num, line in enumerate(text.splitlines(), start=1):
            if FENCE_PATTERN.match(line):
                in_fence = not in_fence
                continue
            if in_fence:
                continue

            skip_line = skip_next
            skip_next = False
            if self.honor_disable_comments:
                for match in DISABLE_COMMENT_PATTERN.finditer(line):
                    directive = match.group(1)
                    if directive == "disable":
                        disabled = True
                    elif directive == "enable":
                        disabled = False
                    elif directive == "disable-next-line":
                        skip_next = True
                    else:
                        skip_line = True
            if disabled or skip_line:
                continue

            yield from self._parse_line(line, line_num)

    def _parse_line(self, line: str, line_num: int) -> Iterator[LinkRef]:
        for match in INLINE_CODE_PATTERN.finditer(line):
            line = _mask(line, match.start(), match.end())

        # 1. Reference definitions: [id]: target
        reference = REFERENCE_PATTERN.match(line)
        if reference:
            yield LinkRef(
                line_number=line_num,
                column_number=reference.start(2) + 1,
                raw_target=reference.group(2),
                link_type="reference",
            )
            return

        # 2. Inline links and images: [alias](target "title")
        for match in MARKDOWN_URL_PATTERN.finditer(line):
            yield LinkRef(
                line_number=line_num,
                column_number=match.start() + 1,
                raw_target=match.group(3).strip(),
                link_type="image" if match.group(1) else "url",
            )
            line = _mask(line, match.start(), match.end())

        # 3. Autolinks: <https://...>
        for match in AUTOLINK_PATTERN.finditer(line):
            yield LinkRef(
                line_number=line_num,
                column_number=match.start() + 1,
                raw_target=match.group(1),
                link_type="autolink",
            )
            line = _mask(line, match.start(), match.end())

        # 4. Whatever URLs remain in running text
        for match in BARE_URL_PATTERN.finditer(line):
            url = match.group(0).rstrip(TRAILING_PUNCTUATION)
            if url:
                yield LinkRef(
                    line_number=line_num,
                    column_number=match.start() + 1,
                    raw_target=url,
                    link_type="bare",
                )
