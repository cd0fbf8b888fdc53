"""Display abstraction shared by the API and the CLI."""

from .Display import Display

__all__ = ["Display"]
