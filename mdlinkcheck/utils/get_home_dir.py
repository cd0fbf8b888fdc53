"""Utility to discover the mdlinkcheck home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get home directory based on MDLINKCHECK_HOME or default to ~/.mdlinkcheck."""
    home_env = os.environ.get("MDLINKCHECK_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".mdlinkcheck"
