"""Run every target in order and aggregate the outcome."""

import logging
import time

import aiohttp

from ...utils.display.Display import Display
from ..BatchResult import BatchResult
from ..checker.Checker import Checker
from ..config.ConfigError import ConfigError
from ..RunOutcome import RunOutcome
from ..Target import Target
from .run_target import run_target

logger = logging.getLogger(__name__)


async def run_batch(
    targets: list[Target],
    display: Display,
    checker: Checker | None = None,
) -> BatchResult:
    """Check targets one at a time, in order.

    A failure inside one run marks that target failed and the next target
    still runs. ``ConfigError`` is the exception: it propagates and ends
    the batch.
    """
    if checker is None:
        checker = Checker()

    start = time.perf_counter()
    outcomes: list[RunOutcome] = []
    async with aiohttp.ClientSession() as session:
        for target in targets:
            name = target.display_name or "<stdin>"
            try:
                outcome = await run_target(target, checker, display, session)
            except ConfigError:
                raise
            except Exception as e:
                logger.exception("Run failed for %s", name)
                display.error(f"\n  ERROR: could not check {name}", details=f"{type(e).__name__}: {e}")
                outcome = RunOutcome(display_name=target.display_name, error=f"{type(e).__name__}: {e}")
            logger.info("%s: %d links, %d dead, failed=%s", name, outcome.total, outcome.dead_count, outcome.failed)
            outcomes.append(outcome)

    result = BatchResult(outcomes=outcomes, elapsed=time.perf_counter() - start)
    display.info(f"Links checked in: {result.elapsed:.3f}s")
    display.info(f"Exit code {result.exit_code}")
    return result
