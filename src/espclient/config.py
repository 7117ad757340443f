"""Client configuration for espclient."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from espclient._constants import API_ROOT, BASE_URL, USER_AGENT
from espclient.exceptions import EspConfigError


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise EspConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class EspConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Scheme and host of the web service, without a trailing path.
    api_root : str
        Path prefix shared by every collection resource.
    request_timeout : float
        Total timeout in seconds applied by the HTTP transport to each
        request. Set to ``0`` to leave requests unbounded.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    api_root: str = API_ROOT
    request_timeout: float = 30.0
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url:
            raise EspConfigError("base_url must be non-empty")
        if not self.api_root.startswith("/"):
            raise EspConfigError(f"api_root must start with '/', got {self.api_root!r}")
        if self.request_timeout < 0:
            raise EspConfigError("request_timeout must be >= 0")
        # Normalize trailing slashes so paths join cleanly.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "api_root", self.api_root.rstrip("/") or "/")

    @classmethod
    def from_env(cls, **overrides: Any) -> EspConfig:
        """Create configuration from environment variables.

        Reads ``ESP_BASE_URL``, ``ESP_API_ROOT``, ``ESP_REQUEST_TIMEOUT`` and
        ``ESP_USER_AGENT``. Explicit keyword arguments override environment
        values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "ESP_BASE_URL": "base_url",
            "ESP_API_ROOT": "api_root",
            "ESP_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("ESP_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_float("ESP_REQUEST_TIMEOUT", timeout_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
