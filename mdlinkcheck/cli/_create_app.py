"""Create the mdlinkcheck Typer CLI app."""

import asyncio

import typer

from mdlinkcheck.api.config.ConfigError import ConfigError
from mdlinkcheck.api.GlobalFlags import GlobalFlags
from mdlinkcheck.api.input import apply_global_flags, resolve_targets
from mdlinkcheck.api.run import run_batch
from mdlinkcheck.cli._parse_alive_codes import _parse_alive_codes
from mdlinkcheck.cli.display import CLIDisplay
from mdlinkcheck.utils import configure_logging, get_package_version


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mdlinkcheck {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Check markdown files, directories or URLs for dead hyperlinks.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def check(
        filenames_or_urls: list[str] | None = typer.Argument(
            None, help="Files, directories or URLs to check (default: read standard input)"
        ),
        progress: bool = typer.Option(False, "--progress", "-p", help="show progress bar"),
        parallel: int | None = typer.Option(
            None, "--parallel", "-n", min=1, help="number of parallel requests (default: 2)"
        ),
        config: str | None = typer.Option(
            None, "--config", "-c", help="apply a config file (JSON), holding e.g. url specific header configuration"
        ),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="displays errors only"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="displays detailed error information"),
        alive: str | None = typer.Option(
            None, "--alive", "-a", help="comma separated list of HTTP codes to be considered as alive"
        ),
        retry: bool = typer.Option(
            False, "--retry", "-r", help="retry after the duration indicated in 'retry-after' header when HTTP code is 429"
        ),
        project_base_url: str | None = typer.Option(
            None, "--projectBaseUrl", "--project-base-url", help="the URL to use for {{BASEURL}} replacement"
        ),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        """Check hyperlinks in markdown documents and exit 1 if any are dead."""
        configure_logging(verbose=verbose)
        flags = GlobalFlags.from_cli(
            progress=progress,
            quiet=quiet,
            verbose=verbose,
            retry=retry,
            parallel=parallel,
            alive=_parse_alive_codes(alive),
            config=config,
            project_base_url=project_base_url,
        )
        display = CLIDisplay()

        try:
            targets = apply_global_flags(resolve_targets(filenames_or_urls), flags)
        except OSError as e:
            display.error(f"\nERROR: {e}")
            raise typer.Exit(1) from e

        try:
            result = asyncio.run(run_batch(targets, display=display))
        except ConfigError as e:
            display.error(f"\nERROR: {e.detail}.", details=e.path)
            raise typer.Exit(1) from e

        raise typer.Exit(result.exit_code)

    return app
