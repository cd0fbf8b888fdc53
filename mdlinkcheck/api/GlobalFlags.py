"""Immutable record of flags applied uniformly to every target."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GlobalFlags:
    """CLI flags, parsed once and copied by value into each target's options."""

    show_progress_bar: bool = False
    quiet: bool = False
    verbose: bool = False
    retry_on_429: bool = False
    parallel_request_count: int | None = None
    alive_status_codes: frozenset[int] | None = None
    config_path: str | None = None
    project_base_url: str | None = None

    @classmethod
    def from_cli(
        cls,
        progress: bool | None = None,
        quiet: bool | None = None,
        verbose: bool | None = None,
        retry: bool | None = None,
        parallel: int | None = None,
        alive: list[int] | None = None,
        config: str | None = None,
        project_base_url: str | None = None,
    ) -> "GlobalFlags":
        """Build from raw option values, forcing unset booleans to False."""
        return cls(
            show_progress_bar=progress is True,
            quiet=quiet is True,
            verbose=verbose is True,
            retry_on_429=retry is True,
            parallel_request_count=parallel,
            alive_status_codes=frozenset(alive) if alive is not None else None,
            config_path=config.strip() if config else None,
            project_base_url=project_base_url,
        )
