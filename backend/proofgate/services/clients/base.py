"""
Fail-Closed Service Client Base

Shared evaluate-or-degrade path for the remote proof and policy services.
Every client operation returns a LegResult; no exception crosses this boundary.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar
from urllib.parse import quote

import aiohttp

from proofgate.services.base import ExternalAPIError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceClientConfig:
    """Immutable client configuration, built once at startup."""

    base_url: str
    timeout_ms: int
    path: str = ""

    @property
    def timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.timeout_ms / 1000)


@dataclass(frozen=True)
class LegResult(Generic[T]):
    """
    Two-case result of one dependency call.

    success: value set, reason None
    failure: value None, reason set (degraded)
    """

    value: Optional[T] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "LegResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> "LegResult[T]":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.reason is None and self.value is not None

    @property
    def degraded(self) -> bool:
        return not self.ok


async def call_or_degrade(
    method: str,
    url: str,
    parse: Callable[[Any], T],
    *,
    service_name: str,
    timeout: aiohttp.ClientTimeout,
    session: Optional[aiohttp.ClientSession] = None,
    payload: Optional[dict] = None,
) -> LegResult[T]:
    """
    Issue one request and fold every failure into a degraded result.

    Failure modes: non-2xx status, timeout, transport error,
    unparseable or schema-invalid body. No retries.
    """
    try:
        if session is None:
            async with aiohttp.ClientSession() as own_session:
                return await _request(own_session, method, url, parse, service_name, timeout, payload)
        return await _request(session, method, url, parse, service_name, timeout, payload)
    except ExternalAPIError as e:
        reason = e.message
    except asyncio.TimeoutError:
        reason = f"timed out after {timeout.total}s"
    except aiohttp.ClientError as e:
        reason = f"transport error: {type(e).__name__}: {e}"
    except Exception as e:
        reason = f"invalid response body: {type(e).__name__}: {e}"

    logger.warning(f"[{service_name}] {method} {url} degraded: {reason}")
    return LegResult.failure(reason)


async def _request(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    parse: Callable[[Any], T],
    service_name: str,
    timeout: aiohttp.ClientTimeout,
    payload: Optional[dict],
) -> LegResult[T]:
    async with session.request(method, url, json=payload, timeout=timeout) as resp:
        if not 200 <= resp.status < 300:
            raise ExternalAPIError(
                service_name,
                f"HTTP {resp.status}",
                {"status": resp.status},
            )
        body = await resp.json(content_type=None)
        return LegResult.success(parse(body))


class FailClosedClient:
    """
    Base for remote dependency clients.

    Holds only read-only configuration and an optional shared session,
    so one instance can serve many concurrent previews.
    """

    name = "FailClosedClient"

    def __init__(
        self,
        config: ServiceClientConfig,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self._config = config
        self._session = session

    @property
    def config(self) -> ServiceClientConfig:
        return self._config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}{path}"

    def _resource_url(self, collection: str, resource_id: str) -> str:
        return self._url(f"/{collection}/{quote(resource_id, safe='')}")

    async def _call(
        self,
        method: str,
        url: str,
        parse: Callable[[Any], T],
        payload: Optional[dict] = None,
    ) -> LegResult[T]:
        if not self._config.base_url:
            logger.warning(f"[{self.name}] base URL not configured, failing closed")
            return LegResult.failure("service not configured")

        return await call_or_degrade(
            method,
            url,
            parse,
            service_name=self.name,
            timeout=self._config.timeout,
            session=self._session,
            payload=payload,
        )

    async def health_check(self) -> bool:
        """Client is usable once a base URL is configured."""
        return bool(self._config.base_url)
