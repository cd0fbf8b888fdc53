"""Per-target run outcome."""

from dataclasses import dataclass, field

from .LinkResult import LinkResult


@dataclass
class RunOutcome:
    """Result of checking one target."""

    display_name: str | None
    total: int = 0
    dead: list[LinkResult] = field(default_factory=list)
    error: str | None = None

    @property
    def dead_count(self) -> int:
        return len(self.dead)

    @property
    def failed(self) -> bool:
        """A run fails on any dead link or on a checker error."""
        return bool(self.dead) or self.error is not None
