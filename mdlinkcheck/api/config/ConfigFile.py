"""JSON configuration file model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._parse_duration import _parse_duration

# ConfigFile field -> OptionsBag field
OPTION_FIELDS = {
    "ignore_patterns": "ignore_patterns",
    "replacement_patterns": "replacement_patterns",
    "http_headers": "http_headers",
    "timeout": "timeout_ms",
    "ignore_disable": "ignore_disable_comments",
    "retry_on_429": "retry_on_429",
    "retry_count": "retry_count",
    "fallback_retry_delay": "fallback_retry_delay_ms",
    "alive_status_codes": "alive_status_codes",
}


class ConfigFile(BaseModel):
    """Recognized keys of the ``--config`` file; anything else is ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ignore_patterns: list[dict[str, Any]] | None = Field(default=None, alias="ignorePatterns")
    replacement_patterns: list[dict[str, Any]] | None = Field(default=None, alias="replacementPatterns")
    http_headers: list[dict[str, Any]] | None = Field(default=None, alias="httpHeaders")
    timeout: int | None = None
    ignore_disable: bool | None = Field(default=None, alias="ignoreDisable")
    retry_on_429: bool | None = Field(default=None, alias="retryOn429")
    retry_count: int | None = Field(default=None, alias="retryCount")
    fallback_retry_delay: int | None = Field(default=None, alias="fallbackRetryDelay")
    alive_status_codes: set[int] | None = Field(default=None, alias="aliveStatusCodes")
    parallel: int | None = None

    @field_validator("timeout", "fallback_retry_delay", mode="before")
    @classmethod
    def _durations_to_ms(cls, value: Any) -> Any:
        if value is None:
            return None
        return _parse_duration(value)

    def option_overrides(self) -> dict[str, Any]:
        """OptionsBag updates for every key present in the file."""
        present = self.model_fields_set
        return {option: getattr(self, name) for name, option in OPTION_FIELDS.items() if name in present}
