"""Checker public API."""

import logging

from ..LinkResult import LinkResult
from ..OptionsBag import OptionsBag
from ._AbstractImpl import _AbstractImpl
from ._BACKEND_REGISTRY import BACKEND_REGISTRY
from .CheckerError import CheckerError

logger = logging.getLogger(__name__)


class Checker:
    """Public API over a link-checking backend."""

    def __init__(self, backend_type: str = "http"):
        if backend_type not in BACKEND_REGISTRY:
            raise ValueError(
                f"Unsupported checker backend: {backend_type!r} (supported: {list(BACKEND_REGISTRY.keys())})"
            )
        self.backend_type = backend_type

        # Import backend implementation class directly from backend _Impl module
        module = __import__(f"mdlinkcheck.api.checker._{backend_type}._Impl", fromlist=[""])
        self._impl: _AbstractImpl = module._Impl()

    async def check(self, markdown: str, options: OptionsBag) -> list[LinkResult]:
        """Check a document, awaiting the backend's single completion.

        Raises:
            CheckerError: If the backend fails on the document as a whole.
        """
        try:
            return await self._impl.check(markdown, options.checker_options())
        except CheckerError:
            raise
        except Exception as e:
            logger.exception("Checker backend %r failed", self.backend_type)
            raise CheckerError(f"{type(e).__name__}: {e}") from e
