"""Render one run's link results and decide pass/fail."""

from ...utils.display.Display import Display
from ..LinkResult import LinkResult
from ..LinkStatus import LinkStatus
from ..OptionsBag import OptionsBag
from ..RunOutcome import RunOutcome

STDIN_NAME = "stdin"


def report_results(
    display_name: str | None,
    results: list[LinkResult],
    options: OptionsBag,
    display: Display,
) -> RunOutcome:
    """Print per-link lines and the dead-link summary for one run.

    Quiet mode prints only the dead-link summary, which then names the
    source (``stdin`` when it has no name) since no header was shown.
    With ``verbose``, quiet mode also lists dead links inline. The run
    fails iff at least one link is dead; ``ignored`` and ``error`` links
    never fail it.
    """
    if not results and not options.quiet:
        display.warning("  No hyperlinks found!")

    for result in results:
        if options.quiet and result.status is not LinkStatus.DEAD:
            continue
        if options.verbose:
            display.link(result, show_status=True)
        elif not options.quiet:
            display.link(result)

    if not options.quiet:
        display.info(f"\n  {len(results)} links checked.")

    dead = [result for result in results if result.status is LinkStatus.DEAD]
    if dead:
        if options.quiet:
            display.error(f"\n  ERROR: {len(dead)} dead links found in {display_name or STDIN_NAME} !")
        else:
            display.error(f"\n  ERROR: {len(dead)} dead links found!")
        for result in dead:
            display.link(result, show_status=True)

    return RunOutcome(display_name=display_name, total=len(results), dead=dead)
