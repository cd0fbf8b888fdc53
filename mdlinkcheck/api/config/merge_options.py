"""Overlay the config file onto a target's CLI-derived options."""

from ..OptionsBag import OptionsBag
from .load_config_file import load_config_file


def merge_options(options: OptionsBag) -> OptionsBag:
    """Return the final options for one run.

    The config file is re-read on every call. Keys present in the file win
    over CLI values, except ``parallel``: an explicit ``--parallel`` is kept
    and the file only fills it in when the flag was not given.

    Raises:
        ConfigError: If the config file cannot be loaded.
    """
    if not options.config_path:
        return options

    config = load_config_file(options.config_path)
    update = config.option_overrides()
    if options.parallel_request_count is None and config.parallel is not None:
        update["parallel_request_count"] = config.parallel
    return options.model_copy(update=update)
