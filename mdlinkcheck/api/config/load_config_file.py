"""Load the JSON config file."""

import json
from pathlib import Path

from pydantic import ValidationError

from .ConfigError import ConfigError
from .ConfigFile import ConfigFile


def load_config_file(path: str) -> ConfigFile:
    """Read and validate a config file.

    Raises:
        ConfigError: If the file is not readable, is not valid JSON, or a
            recognized key has the wrong type.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(path, "Config file not accessible") from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(path, f"Invalid JSON in config file ({e})") from e

    if not isinstance(raw, dict):
        raise ConfigError(path, "Config file must contain a JSON object")

    try:
        return ConfigFile.model_validate(raw)
    except ValidationError as e:
        error_list = e.errors() or [{"msg": str(e), "loc": ()}]
        first = error_list[0]
        loc = first.get("loc", ())
        field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
        error_msg = first.get("msg", str(e))
        detail = f"{field}: {error_msg}" if field else error_msg
        raise ConfigError(path, f"Configuration validation error ({detail})") from e
