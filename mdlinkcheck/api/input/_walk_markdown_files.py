import os
from collections.abc import Iterator
from pathlib import Path

MARKDOWN_SUFFIX = ".md"


def _walk_markdown_files(root: Path, _visited: set[Path] | None = None) -> Iterator[Path]:
    """Yield every markdown file below root, depth first, in scandir order.

    Symlinked directories are followed, but each resolved directory is
    entered at most once so link cycles terminate.
    """
    visited = _visited if _visited is not None else set()
    resolved = root.resolve()
    if resolved in visited:
        return
    visited.add(resolved)

    with os.scandir(root) as entries:
        for entry in entries:
            path = Path(entry.path)
            if entry.is_dir():
                yield from _walk_markdown_files(path, visited)
            elif entry.name.endswith(MARKDOWN_SUFFIX):
                yield path
