"""CLI display implementation using Rich library."""

from rich.console import Console
from rich.text import Text

from ...api.LinkResult import LinkResult
from ...api.LinkStatus import LinkStatus
from ...utils.display.Display import Display

STATUS_LABELS = {
    LinkStatus.ALIVE: ("✓", "green"),
    LinkStatus.DEAD: ("✖", "red"),
    LinkStatus.IGNORED: ("/", "bright_black"),
    LinkStatus.ERROR: ("⚠", "yellow"),
}


class CLIDisplay(Display):
    """Terminal display using Rich library.

    Results go to stdout, errors to stderr. Everything is printed as
    ``Text`` so link text is never read as console markup.
    """

    def __init__(self, console: Console | None = None, stderr_console: Console | None = None):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.stderr_console = stderr_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def header(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print()
        self.console.print(Text(f"FILE: {message}", style="cyan"))

    def link(self, result: LinkResult, show_status: bool = False, **kwargs) -> None:  # noqa: ARG002
        glyph, style = STATUS_LABELS[result.status]
        line = Text.assemble("  [", (glyph, style), "] ", result.link)
        if show_status:
            line.append(f" → Status: {result.status_code}")
            if result.err:
                line.append(f" {result.err}")
        self.console.print(line)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(Text(message))

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.console.print(Text(message, style="yellow"))

    def error(self, message: str, **kwargs) -> None:
        self.stderr_console.print(Text(message, style="red"))
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(Text(details, style="dim"))
