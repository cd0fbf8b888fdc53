"""Abstract base class for checker backends."""

from abc import ABC, abstractmethod
from typing import Any

from ..LinkResult import LinkResult


class _AbstractImpl(ABC):
    @abstractmethod
    async def check(self, markdown: str, options: dict[str, Any]) -> list[LinkResult]:
        """Check every hyperlink in ``markdown``.

        Args:
            markdown: Document text
            options: camelCase checker options (``baseUrl``, ``timeoutMs``, ...)

        Returns:
            One result per distinct link, in document order
        """
        pass
