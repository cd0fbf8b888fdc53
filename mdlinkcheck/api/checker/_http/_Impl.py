"""HTTP(S) and filesystem checker backend."""

import asyncio
import logging
import re
import sys
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urljoin, urlsplit

import aiohttp
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from ...LinkResult import LinkResult
from ...LinkStatus import LinkStatus
from .._AbstractImpl import _AbstractImpl
from .._parsers import MarkdownParser

logger = logging.getLogger(__name__)

DEFAULT_PARALLEL = 2
DEFAULT_TIMEOUT_MS = 10_000
DEFAULT_ALIVE_STATUS_CODES = frozenset({200})
# Status reported for a relative file link that does not exist
MISSING_FILE_STATUS = 400
CHECKED_SCHEMES = ("http", "https", "file")


class _Impl(_AbstractImpl):
    """Probe each distinct link once.

    ``http(s)`` links get a HEAD request, falling back to GET when HEAD does
    not come back alive; ``file`` links are alive when the path exists.
    Retry options (``retryOn429``, ``retryCount``, ``fallbackRetryDelayMs``)
    are accepted but not acted on.
    """

    async def check(self, markdown: str, options: dict[str, Any]) -> list[LinkResult]:
        parser = MarkdownParser(honor_disable_comments=not options.get("ignoreDisableComments", False))
        links = list(dict.fromkeys(ref.raw_target for ref in parser.parse(markdown)))

        semaphore = asyncio.Semaphore(options.get("parallelRequestCount") or DEFAULT_PARALLEL)
        timeout = aiohttp.ClientTimeout(total=(options.get("timeoutMs") or DEFAULT_TIMEOUT_MS) / 1000)
        show_progress = options.get("showProgressBar", False) and not options.get("quiet", False)

        async with aiohttp.ClientSession(timeout=timeout) as session:
            with Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=Console(file=sys.stderr),
                disable=not show_progress,
                transient=True,
            ) as progress:
                task_id = progress.add_task("Checking links", total=len(links))

                async def check_one(link: str) -> LinkResult:
                    async with semaphore:
                        result = await self._check_link(session, link, options)
                    progress.advance(task_id)
                    return result

                return list(await asyncio.gather(*(check_one(link) for link in links)))

    async def _check_link(self, session: aiohttp.ClientSession, link: str, options: dict[str, Any]) -> LinkResult:
        url = _apply_replacements(link, options)

        if _is_ignored(url, options.get("ignorePatterns")):
            return LinkResult(link=link, status=LinkStatus.IGNORED)
        if url.startswith("#"):
            return LinkResult(link=link, status=LinkStatus.IGNORED)

        resolved = _resolve(url, options.get("baseUrl"))
        scheme = urlsplit(resolved).scheme.lower()
        if not scheme:
            return LinkResult(link=link, status=LinkStatus.ERROR, err="relative link without a base URL")
        if scheme not in CHECKED_SCHEMES:
            return LinkResult(link=link, status=LinkStatus.IGNORED)

        alive_codes = options.get("aliveStatusCodes") or DEFAULT_ALIVE_STATUS_CODES
        if scheme == "file":
            path = Path(unquote(urlsplit(resolved).path))
            if path.exists():
                return LinkResult(link=link, status=LinkStatus.ALIVE, status_code=200)
            return LinkResult(link=link, status=LinkStatus.DEAD, status_code=MISSING_FILE_STATUS)

        headers = _headers_for(resolved, options.get("httpHeaders"))
        try:
            status_code = await _probe(session, "HEAD", resolved, headers)
            if status_code not in alive_codes:
                status_code = await _probe(session, "GET", resolved, headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("Request to %s failed: %r", resolved, e)
            return LinkResult(link=link, status=LinkStatus.DEAD, status_code=0, err=str(e) or type(e).__name__)

        status = LinkStatus.ALIVE if status_code in alive_codes else LinkStatus.DEAD
        return LinkResult(link=link, status=status, status_code=status_code)


async def _probe(session: aiohttp.ClientSession, method: str, url: str, headers: dict[str, str]) -> int:
    async with session.request(method, url, headers=headers, allow_redirects=True) as response:
        return response.status


def _apply_replacements(link: str, options: dict[str, Any]) -> str:
    project_base_url = options.get("projectBaseUrl", "")
    for entry in options.get("replacementPatterns") or []:
        replacement = entry.get("replacement", "").replace("{{BASEURL}}", project_base_url)
        link = re.sub(entry["pattern"], replacement, link)
    return link


def _is_ignored(link: str, ignore_patterns: list[dict[str, Any]] | None) -> bool:
    return any(re.search(entry["pattern"], link) for entry in ignore_patterns or [])


def _resolve(link: str, base_url: str | None) -> str:
    if urlsplit(link).scheme or not base_url:
        return link
    # file bases are directories without a trailing slash
    if not base_url.endswith("/"):
        base_url = f"{base_url}/"
    return urljoin(base_url, link)


def _headers_for(url: str, http_headers: list[dict[str, Any]] | None) -> dict[str, str]:
    headers: dict[str, str] = {}
    for entry in http_headers or []:
        if any(url.startswith(prefix) for prefix in entry.get("urls", [])):
            headers.update(entry.get("headers", {}))
    return headers
