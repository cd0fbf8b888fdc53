import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, verbose: bool = False) -> None:
    """Configure unified mdlinkcheck logging.

    Args:
        home: Directory holding the log file. If None, derived from environment.
        verbose: Log at DEBUG instead of INFO.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("mdlinkcheck")
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "mdlinkcheck.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
