import re

URL_PREFIX_PATTERN = re.compile(r"https?:", re.IGNORECASE)


def _is_url(value: str | None) -> bool:
    """True when the argument names a remote document rather than a path."""
    return value is not None and URL_PREFIX_PATTERN.match(value) is not None
