"""Link checker boundary."""

from ._BACKEND_REGISTRY import BACKEND_REGISTRY
from .Checker import Checker
from .CheckerError import CheckerError

__all__ = ["BACKEND_REGISTRY", "Checker", "CheckerError"]
