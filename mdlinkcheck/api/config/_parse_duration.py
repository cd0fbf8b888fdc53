import re

DURATION_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h)?\s*$")
_UNIT_MS = {None: 1, "ms": 1, "s": 1000, "m": 60_000, "h": 3_600_000}


def _parse_duration(value: int | float | str) -> int:
    """Normalize ``500``, ``"500ms"``, ``"10s"`` or ``"1m"`` to milliseconds.

    Raises:
        ValueError: If the value is negative or not a recognized duration.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        if value < 0:
            raise ValueError(f"invalid duration: {value!r}")
        return int(value)

    match = DURATION_PATTERN.match(value)
    if match is None:
        raise ValueError(f"invalid duration: {value!r}")
    amount, unit = match.groups()
    return int(float(amount) * _UNIT_MS[unit])
