from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from fred_api_client.config import DEFAULT_TIMEOUT_SECONDS, FredClientConfig, TransportConfig


def test_config_validate_rejects_empty_base_url():
    cfg = FredClientConfig(base_url="")
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_is_immutable():
    cfg = FredClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.base_url = "http://localhost"  # type: ignore[misc]


def test_config_defaults():
    cfg = FredClientConfig()
    assert cfg.base_url == "https://api.stlouisfed.org/fred"
    assert cfg.api_key_env == "FRED_API_KEY"
    assert cfg.probe_on_init is True
    assert cfg.probe_category_id == 125
    assert cfg.transport.timeout_read_seconds == DEFAULT_TIMEOUT_SECONDS == 30.0


@pytest.mark.parametrize(
    "field",
    [
        "timeout_connect_seconds",
        "timeout_read_seconds",
        "timeout_write_seconds",
        "timeout_pool_seconds",
    ],
)
def test_config_validate_rejects_non_positive_timeouts(field):
    cfg = FredClientConfig(transport=TransportConfig(**{field: 0.0}))
    with pytest.raises(ValueError, match=f"transport.{field} must be > 0"):
        cfg.validate()


def test_config_validate_rejects_non_bool_probe_flag():
    cfg = FredClientConfig(probe_on_init="yes")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="probe_on_init must be bool"):
        cfg.validate()


def test_config_validate_rejects_empty_api_key_env():
    with pytest.raises(ValueError, match="api_key_env"):
        FredClientConfig(api_key_env="").validate()


def test_read_api_key_uses_configured_variable(monkeypatch):
    monkeypatch.setenv("MY_FRED_KEY", "abc123")
    assert FredClientConfig(api_key_env="MY_FRED_KEY").read_api_key() == "abc123"


def test_read_api_key_defaults_to_empty_string(monkeypatch):
    monkeypatch.delenv("FRED_API_KEY", raising=False)
    assert FredClientConfig().read_api_key() == ""
