"""JSON-over-HTTP transport for the vehicle service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from vehicledash.config import DashboardConfig
from vehicledash.exceptions import RequestFailedError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        payload: Mapping[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        ...


class HttpTransport:
    """aiohttp-backed transport that maps every failure to :class:`RequestFailedError`."""

    def __init__(self, config: DashboardConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = (
            aiohttp.ClientTimeout(total=config.request_timeout) if config.request_timeout is not None else None
        )

    async def request_json(
        self,
        method: str,
        endpoint: str,
        *,
        payload: Mapping[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Any:
        """Send *payload* as JSON and return the decoded JSON reply.

        When *expect_body* is false, or the reply body is empty, ``None``
        is returned.
        """
        url = f"{self._config.base_url}{endpoint}"
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        request_kwargs: dict[str, Any] = {"headers": headers}
        if payload is not None:
            request_kwargs["json"] = dict(payload)
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, **request_kwargs) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise RequestFailedError(
                        f"HTTP {resp.status} from {method} {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except RequestFailedError:
            raise
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError) as exc:
            raise RequestFailedError(
                f"{method} {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        if not expect_body or not text.strip():
            return None

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise RequestFailedError(
                f"Invalid JSON from {method} {endpoint}: {text[:200]}",
                status_code=resp.status,
                endpoint=endpoint,
            ) from exc
