"""Input resolution: arguments to targets."""

from .apply_global_flags import apply_global_flags
from .resolve_targets import resolve_targets

__all__ = ["apply_global_flags", "resolve_targets"]
