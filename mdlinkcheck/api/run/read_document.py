"""Fetch a target's document text."""

import asyncio
import logging
import sys
from pathlib import Path

import aiohttp

from ..SourceKind import SourceKind
from ..Target import Target

logger = logging.getLogger(__name__)


async def read_document(target: Target, session: aiohttp.ClientSession) -> str:
    """Return the whole document for a target.

    URLs are fetched with ``session`` and the body is used whatever the
    status; files are read as UTF-8; stdin is read to EOF. Blocking reads
    run in a worker thread.

    Raises:
        OSError: If a file cannot be read.
        aiohttp.ClientError: If a URL cannot be fetched.
    """
    if target.source is SourceKind.URL:
        async with session.get(target.location) as response:
            if response.status >= 400:
                logger.warning("GET %s returned HTTP %s", target.location, response.status)
            return await response.text()

    if target.source is SourceKind.FILE:
        return await asyncio.to_thread(Path(target.location).read_text, encoding="utf-8")  # type: ignore[arg-type]

    stream = target.stream if target.stream is not None else sys.stdin
    return await asyncio.to_thread(stream.read)
