"""Copy the global CLI flags into every target's options."""

import os

from ...utils.path_to_file_url import path_to_file_url
from ..GlobalFlags import GlobalFlags
from ..Target import Target


def apply_global_flags(targets: list[Target], flags: GlobalFlags) -> list[Target]:
    """Return the targets with flags merged into their options.

    ``projectBaseUrl`` is computed once (the flag value, or the current
    working directory) and is the same for every target.
    """
    if flags.project_base_url:
        project_base_url = f"file://{flags.project_base_url}"
    else:
        project_base_url = path_to_file_url(os.getcwd())

    for target in targets:
        target.options = target.options.model_copy(
            update={
                "show_progress_bar": flags.show_progress_bar,
                "quiet": flags.quiet,
                "verbose": flags.verbose,
                "retry_on_429": flags.retry_on_429,
                "parallel_request_count": flags.parallel_request_count,
                # fresh set per target: options are never shared
                "alive_status_codes": set(flags.alive_status_codes) if flags.alive_status_codes is not None else None,
                "config_path": flags.config_path,
                "project_base_url": project_base_url,
            }
        )
    return targets
