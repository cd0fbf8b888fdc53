"""Run the checker against a single target."""

import logging

import aiohttp

from ...utils.display.Display import Display
from ..checker.Checker import Checker
from ..checker.CheckerError import CheckerError
from ..config.merge_options import merge_options
from ..RunOutcome import RunOutcome
from ..Target import Target
from .read_document import read_document
from .report_results import report_results

logger = logging.getLogger(__name__)


async def run_target(
    target: Target,
    checker: Checker,
    display: Display,
    session: aiohttp.ClientSession,
) -> RunOutcome:
    """Read, configure, check and report one target.

    Raises:
        ConfigError: If the config file cannot be loaded (fatal for the batch).
    """
    markdown = await read_document(target, session)

    if not target.options.quiet and target.display_name:
        display.header(target.display_name)

    options = merge_options(target.options)
    logger.debug("Checking %s with %s", target.display_name or "<stdin>", options.checker_options())

    try:
        results = await checker.check(markdown, options)
    except CheckerError as e:
        display.error("\n  ERROR: something went wrong!", details=str(e))
        return RunOutcome(display_name=target.display_name, error=str(e))

    return report_results(target.display_name, results, options, display)
