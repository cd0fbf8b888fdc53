"""Config file loading and option merging."""

from .ConfigError import ConfigError
from .ConfigFile import ConfigFile
from .load_config_file import load_config_file
from .merge_options import merge_options

__all__ = ["ConfigError", "ConfigFile", "load_config_file", "merge_options"]
