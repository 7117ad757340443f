from __future__ import annotations

import pytest

from espclient.config import EspConfig
from espclient.exceptions import EspConfigError


def test_defaults() -> None:
    config = EspConfig()

    assert config.base_url == "http://localhost:8080"
    assert config.api_root == "/api/v1.0"
    assert config.request_timeout == 30.0


def test_trailing_slashes_are_stripped() -> None:
    config = EspConfig(base_url="http://esp.test/", api_root="/api/v1.0/")

    assert config.base_url == "http://esp.test"
    assert config.api_root == "/api/v1.0"


def test_from_env_reads_esp_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ESP_BASE_URL", "http://campus.example:9000")
    monkeypatch.setenv("ESP_API_ROOT", "/api/v2")
    monkeypatch.setenv("ESP_REQUEST_TIMEOUT", "2.5")

    config = EspConfig.from_env()

    assert config.base_url == "http://campus.example:9000"
    assert config.api_root == "/api/v2"
    assert config.request_timeout == 2.5


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ESP_BASE_URL", "http://from-env")
    monkeypatch.setenv("ESP_REQUEST_TIMEOUT", "not-a-number")

    config = EspConfig.from_env(base_url="http://explicit", request_timeout=1.0)

    assert config.base_url == "http://explicit"
    assert config.request_timeout == 1.0


def test_from_env_rejects_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ESP_REQUEST_TIMEOUT", "soon")

    with pytest.raises(EspConfigError):
        EspConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [{"base_url": ""}, {"api_root": "api/v1.0"}, {"request_timeout": -1.0}],
)
def test_invalid_values_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(EspConfigError):
        EspConfig(**kwargs)  # type: ignore[arg-type]


def test_from_env_reads_user_agent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ESP_USER_AGENT", "enrollment-portal/2.0")

    assert EspConfig.from_env().user_agent == "enrollment-portal/2.0"
    assert EspConfig.from_env(user_agent="explicit/1").user_agent == "explicit/1"
