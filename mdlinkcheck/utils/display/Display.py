"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod

from ...api.LinkResult import LinkResult


class Display(ABC):
    """Abstract base for run output."""

    @abstractmethod
    def header(self, message: str, **kwargs) -> None:
        """Display the heading that opens a target's output.

        Args:
            message: Heading text (file name or URL)
            kwargs: Implementation-specific options
        """
        pass

    @abstractmethod
    def link(self, result: LinkResult, show_status: bool = False, **kwargs) -> None:
        """Display one checked link.

        Args:
            result: Link result from the checker
            show_status: Include the status code (and diagnostic, if any)
            kwargs: Implementation-specific options
        """
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message.

        Args:
            message: Info text
            kwargs: Implementation-specific options
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message.

        Args:
            message: Warning text
            kwargs: Implementation-specific options
        """
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """
        pass
