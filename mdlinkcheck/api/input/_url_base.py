from urllib.parse import urlsplit, urlunsplit


def _url_base(url: str) -> str:
    """Return the containing directory of a URL.

    Query and fragment are dropped and the path is cut after its last ``/``,
    so ``https://example.com/a/b?x=1#y`` gives ``https://example.com/a/``.
    An empty path counts as ``/``.

    Raises:
        ValueError: If the URL cannot be parsed.
    """
    parts = urlsplit(url)
    # Accessing port validates it; urlsplit alone does not.
    parts.port  # noqa: B018
    path = parts.path or "/"
    slash = path.rfind("/")
    if slash != -1:
        path = path[: slash + 1]
    return urlunsplit((parts.scheme, parts.netloc, path, "", ""))
