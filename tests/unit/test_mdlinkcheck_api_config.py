import json

import pytest

from mdlinkcheck.api.config import ConfigError, ConfigFile, load_config_file, merge_options
from mdlinkcheck.api.config._parse_duration import _parse_duration
from mdlinkcheck.api.OptionsBag import OptionsBag


@pytest.fixture
def write_config(tmp_path):
    def _write(data: dict | str) -> str:
        path = tmp_path / "config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


def test_no_config_path_returns_options_unchanged():
    options = OptionsBag(base_url="file:///docs", parallel_request_count=3)

    assert merge_options(options) is options


def test_parallel_from_config_when_cli_unset(write_config):
    options = OptionsBag(config_path=write_config({"parallel": 5}))

    assert merge_options(options).parallel_request_count == 5


def test_cli_parallel_wins_over_config(write_config):
    options = OptionsBag(config_path=write_config({"parallel": 5}), parallel_request_count=3)

    assert merge_options(options).parallel_request_count == 3


def test_config_overrides_cli_values(write_config):
    path = write_config(
        {
            "aliveStatusCodes": [200, 206],
            "retryOn429": False,
            "ignorePatterns": [{"pattern": "^http://localhost"}],
            "replacementPatterns": [{"pattern": "^/", "replacement": "{{BASEURL}}/"}],
            "httpHeaders": [{"urls": ["https://example.com"], "headers": {"Authorization": "Basic x"}}],
            "timeout": "20s",
            "ignoreDisable": True,
            "retryCount": 5,
            "fallbackRetryDelay": "30s",
        }
    )
    options = OptionsBag(config_path=path, alive_status_codes={200}, retry_on_429=True, base_url="file:///docs")

    merged = merge_options(options)

    assert merged.alive_status_codes == {200, 206}
    assert merged.retry_on_429 is False
    assert merged.ignore_patterns == [{"pattern": "^http://localhost"}]
    assert merged.replacement_patterns == [{"pattern": "^/", "replacement": "{{BASEURL}}/"}]
    assert merged.http_headers[0]["headers"] == {"Authorization": "Basic x"}
    assert merged.timeout_ms == 20_000
    assert merged.ignore_disable_comments is True
    assert merged.retry_count == 5
    assert merged.fallback_retry_delay_ms == 30_000
    assert merged.base_url == "file:///docs"
    # the input bag is left alone
    assert options.alive_status_codes == {200}


def test_keys_absent_from_config_keep_cli_values(write_config):
    options = OptionsBag(config_path=write_config({"timeout": 500}), alive_status_codes={200, 301}, retry_on_429=True)

    merged = merge_options(options)

    assert merged.timeout_ms == 500
    assert merged.alive_status_codes == {200, 301}
    assert merged.retry_on_429 is True


def test_unknown_keys_are_ignored(write_config):
    config = load_config_file(write_config({"parallel": 2, "somethingElse": True}))

    assert config.parallel == 2


def test_config_reread_on_every_merge(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"retryCount": 1}), encoding="utf-8")
    options = OptionsBag(config_path=str(path))

    first = merge_options(options)
    path.write_text(json.dumps({"retryCount": 2}), encoding="utf-8")
    second = merge_options(options)

    assert (first.retry_count, second.retry_count) == (1, 2)


def test_unreadable_config_raises_config_error(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_config_file(str(tmp_path / "missing.json"))

    assert exc_info.value.detail == "Config file not accessible"
    assert exc_info.value.path.endswith("missing.json")


def test_malformed_json_raises_config_error(write_config):
    with pytest.raises(ConfigError, match="Invalid JSON"):
        merge_options(OptionsBag(config_path=write_config("{not json")))


def test_non_object_json_raises_config_error(write_config):
    with pytest.raises(ConfigError, match="JSON object"):
        load_config_file(write_config("[1, 2]"))


def test_wrong_field_type_raises_config_error(write_config):
    with pytest.raises(ConfigError, match="parallel"):
        load_config_file(write_config({"parallel": "many"}))


def test_option_overrides_only_lists_present_keys():
    config = ConfigFile.model_validate({"retryCount": 3, "parallel": 4})

    assert config.option_overrides() == {"retry_count": 3}


@pytest.mark.parametrize(
    ("value", "expected"),
    [(250, 250), ("250", 250), ("250ms", 250), ("10s", 10_000), ("1.5s", 1_500), ("2m", 120_000), ("1h", 3_600_000)],
)
def test_parse_duration(value, expected):
    assert _parse_duration(value) == expected


@pytest.mark.parametrize("value", ["soon", "-5s", -1, True, "10 parsecs"])
def test_parse_duration_rejects_garbage(value):
    with pytest.raises(ValueError):
        _parse_duration(value)
