"""Overall result of a batch of runs."""

from dataclasses import dataclass, field

from .RunOutcome import RunOutcome


@dataclass
class BatchResult:
    outcomes: list[RunOutcome] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def succeeded(self) -> bool:
        return all(not outcome.failed for outcome in self.outcomes)

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1
