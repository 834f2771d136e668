"""Client configuration for vehicledash."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from vehicledash._constants import BASE_URL, USER_AGENT
from vehicledash.exceptions import DashboardConfigError


@dataclasses.dataclass(frozen=True)
class DashboardConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Origin of the vehicle service (scheme, host and optional port).
        A trailing slash is stripped.
    request_timeout : float or None
        Total per-request timeout in seconds. ``None`` keeps the
        aiohttp session default.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    request_timeout: float | None = None
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        base = self.base_url.strip().rstrip("/")
        if not base:
            raise DashboardConfigError("base_url must be non-empty")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise DashboardConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "base_url", base)

    @classmethod
    def from_env(cls, **overrides: Any) -> DashboardConfig:
        """Create configuration from environment variables.

        Reads ``VEHICLEDASH_BASE_URL``, ``VEHICLEDASH_REQUEST_TIMEOUT`` and
        ``VEHICLEDASH_USER_AGENT``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        base_url = env.get("VEHICLEDASH_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        user_agent = env.get("VEHICLEDASH_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        timeout_env = env.get("VEHICLEDASH_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise DashboardConfigError(
                    f"VEHICLEDASH_REQUEST_TIMEOUT is not a number: {timeout_env!r}"
                ) from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
