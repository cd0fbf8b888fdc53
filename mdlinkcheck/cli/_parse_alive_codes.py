import typer


def _parse_alive_codes(value: str | None) -> list[int] | None:
    """Parse ``--alive 200,206`` into a list of HTTP status codes."""
    if value is None:
        return None
    try:
        return [int(item) for item in value.split(",")]
    except ValueError:
        raise typer.BadParameter(f"expected comma separated HTTP codes, got {value!r}", param_hint="'--alive'") from None
