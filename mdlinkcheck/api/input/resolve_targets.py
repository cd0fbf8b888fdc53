"""Turn positional CLI arguments into check targets."""

import logging
import os
from pathlib import Path

from ...utils.path_to_file_url import path_to_file_url
from ..OptionsBag import OptionsBag
from ..SourceKind import SourceKind
from ..Target import Target
from ._is_url import _is_url
from ._url_base import _url_base
from ._walk_markdown_files import _walk_markdown_files

logger = logging.getLogger(__name__)


def _file_target(path: Path, display_name: str) -> Target:
    # abspath, not resolve(): a symlinked file keeps the directory it was reached through
    return Target(
        display_name=display_name,
        source=SourceKind.FILE,
        location=str(path),
        options=OptionsBag(base_url=path_to_file_url(os.path.dirname(os.path.abspath(path)))),
    )


def resolve_targets(filenames_or_urls: list[str] | None) -> list[Target]:
    """Resolve arguments to an ordered list of targets.

    - no arguments: a single stdin target
    - ``http:``/``https:`` argument: a URL target based at the URL's directory
    - directory: one target per ``.md`` file found recursively
    - file: one target

    URLs that cannot be parsed are skipped without a diagnostic.

    Raises:
        FileNotFoundError: If a path argument does not exist. This aborts the
            whole invocation rather than a single target.
    """
    if not filenames_or_urls:
        return [Target.stdin()]

    targets: list[Target] = []
    for argument in filenames_or_urls:
        if _is_url(argument):
            try:
                base_url = _url_base(argument)
            except ValueError as exc:
                logger.debug("Skipping malformed URL %r: %s", argument, exc)
                continue
            logger.debug("baseUrl: %s", base_url)
            targets.append(
                Target(
                    display_name=argument,
                    source=SourceKind.URL,
                    location=argument,
                    options=OptionsBag(base_url=base_url),
                )
            )
            continue

        path = Path(argument)
        if not path.exists():
            raise FileNotFoundError(f"no such file or directory: '{argument}'")

        if path.is_dir():
            for file_path in _walk_markdown_files(path):
                targets.append(_file_target(file_path, str(file_path)))
        else:
            targets.append(_file_target(path, argument))

    return targets
