"""Merged options for a single checker invocation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Keys owned by this layer that the checker never sees
_LOCAL_FIELDS = {"verbose", "config_path"}


class OptionsBag(BaseModel):
    """Options for one run.

    Attributes are snake_case; aliases are the camelCase keys the checker
    understands, so ``checker_options()`` can hand them over unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    base_url: str | None = Field(default=None, alias="baseUrl")
    project_base_url: str | None = Field(default=None, alias="projectBaseUrl")
    show_progress_bar: bool = Field(default=False, alias="showProgressBar")
    quiet: bool = False
    verbose: bool = False
    retry_on_429: bool = Field(default=False, alias="retryOn429")
    parallel_request_count: int | None = Field(default=None, alias="parallelRequestCount")
    alive_status_codes: set[int] | None = Field(default=None, alias="aliveStatusCodes")
    ignore_patterns: list[dict[str, Any]] | None = Field(default=None, alias="ignorePatterns")
    replacement_patterns: list[dict[str, Any]] | None = Field(default=None, alias="replacementPatterns")
    http_headers: list[dict[str, Any]] | None = Field(default=None, alias="httpHeaders")
    timeout_ms: int | None = Field(default=None, alias="timeoutMs")
    ignore_disable_comments: bool | None = Field(default=None, alias="ignoreDisableComments")
    retry_count: int | None = Field(default=None, alias="retryCount")
    fallback_retry_delay_ms: int | None = Field(default=None, alias="fallbackRetryDelayMs")
    config_path: str | None = Field(default=None, alias="configPath")

    def checker_options(self) -> dict[str, Any]:
        """Options in the checker's vocabulary, unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True, exclude=_LOCAL_FIELDS)
