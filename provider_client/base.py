"""Base HTTP client with retry logic."""

import asyncio
from typing import Any

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from provider_client.errors import ProviderShapeMismatch, ProviderUnavailable
from settings import API_TIMEOUT, MAX_CONCURRENT

# Transport failures worth a second attempt against the same provider
TRANSIENT_ERRORS = (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)


class BaseClient:
    """Base async HTTP client with a concurrency cap and transport retries.

    Subclasses set ``BASE_URL`` and expose one method per endpoint. The client
    is opened with ``async with`` (or ``open()``/``aclose()`` for long-lived
    instances owned by the app container).
    """

    BASE_URL = ""

    def __init__(
        self,
        api_key: str = "",
        base_url: str | None = None,
        max_concurrent: int = MAX_CONCURRENT,
        timeout: float = API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url or self.BASE_URL
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
                transport=self._transport,
            )

    async def aclose(self) -> None:
        logger.info("{}: total API requests: {}", self.__class__.__name__, self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    @property
    def request_count(self) -> int:
        return self._request_count

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        reraise=True,
    )
    async def _request(self, url: str, params: dict | None, headers: dict | None) -> httpx.Response:
        async with self._sem:
            self._request_count += 1
            return await self._client.get(url, params=params, headers=headers)

    async def _get(self, url: str, params: dict | None = None, headers: dict | None = None) -> Any:
        """GET a JSON document, mapping transport and status failures to provider errors."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open")
        name = self.__class__.__name__
        try:
            resp = await self._request(url, params, headers)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise ProviderUnavailable(f"{name}: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderUnavailable(f"{name}: {e!r}") from e
        except ValueError as e:
            raise ProviderShapeMismatch(f"{name}: response is not JSON") from e

    def _parse(self, schema: Any, payload: Any) -> Any:
        """Validate a payload against a pydantic schema (or list of schemas)."""
        try:
            return TypeAdapter(schema).validate_python(payload)
        except ValidationError as e:
            raise ProviderShapeMismatch(
                f"{self.__class__.__name__}: unexpected response ({e.error_count()} errors)"
            ) from e
