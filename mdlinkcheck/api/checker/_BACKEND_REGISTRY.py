"""Checker backend registry."""

# Backend type -> description; modules live at ``_<type>/_Impl.py``
BACKEND_REGISTRY = {
    "http": "Probe links over HTTP(S) and the local filesystem",
}
