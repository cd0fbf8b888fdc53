"""Configuration file error."""


class ConfigError(Exception):
    """Raised when the JSON config file cannot be read or parsed.

    Always fatal: the invocation stops instead of failing a single target.
    """

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"{detail}: {path}")
