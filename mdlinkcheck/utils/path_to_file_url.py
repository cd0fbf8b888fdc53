import os
from pathlib import Path


def path_to_file_url(path: Path | str) -> str:
    """Prefix an absolute path with the file scheme.

    The path is made absolute but otherwise left untouched (no hostname, no
    percent-encoding), so ``/docs/guide`` becomes ``file:///docs/guide``.
    """
    return f"file://{os.path.abspath(path)}"
