"""CourtListener API client for case law verification.

Requires an API token. Get one free at https://www.courtlistener.com/sign-in/
Wraps three endpoints: citation-lookup (batch), opinion search by case name,
and cluster retrieval. Lookup and search are retried with a fixed delay.
"""

import asyncio
import logging
from typing import Any

import httpx
from pydantic import TypeAdapter

from citecheck.models.api import CaseSearchHit, LookupResponse, OpinionRecord, SearchResponse
from citecheck.verifier.errors import (
    NON_RETRYABLE,
    CourtListenerError,
    ForbiddenError,
    InvalidDataError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    RateLimitedError,
    ServerError,
    UnauthorizedError,
    UnknownError,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://www.courtlistener.com/api/rest/v4"

_LOOKUP_ADAPTER = TypeAdapter(list[LookupResponse])


class CourtListenerClient:
    """Authenticated client owning the single mutable API token.

    The token is only read or written while holding ``_lock``; each request
    snapshots it there before going out. The network wait and retry sleeps
    happen outside the lock so concurrent calls keep making progress.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = BASE_URL,
        max_attempts: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 60.0,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._token = api_key or ""
        self._lock = asyncio.Lock()
        self.base_url = base_url.rstrip("/")
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> "CourtListenerClient":
        return cls(
            api_key=settings.courtlistener_api_key,
            base_url=settings.courtlistener_base_url,
            max_attempts=settings.max_attempts,
            retry_delay=settings.retry_delay,
            timeout=settings.request_timeout,
        )

    # -- token -------------------------------------------------------------

    async def set_token(self, token: str) -> None:
        async with self._lock:
            self._token = token
        logger.debug("API token set (%d chars)", len(token))

    async def has_valid_token(self) -> bool:
        async with self._lock:
            return bool(self._token)

    async def _auth_headers(self) -> dict[str, str]:
        async with self._lock:
            token = self._token
        if not token:
            raise UnauthorizedError()
        return {
            "Authorization": f"Token {token}",
            "Content-Type": "application/json",
        }

    # -- endpoints ---------------------------------------------------------

    async def lookup_citations_in_text(self, text: str) -> list[LookupResponse]:
        """POST text to citation-lookup; one entry per citation-like span."""

        async def attempt() -> list[LookupResponse]:
            response = await self._send("POST", "citation-lookup/", json={"text": text})
            return self._decode(response, _LOOKUP_ADAPTER)

        results = await self._with_retry("citation lookup", attempt)
        logger.info("Citation lookup returned %d entries", len(results))
        return results

    async def search_case_name(self, case_name: str) -> list[CaseSearchHit]:
        """Search opinions by case name."""

        async def attempt() -> SearchResponse:
            response = await self._send(
                "GET", "search/", params={"type": "o", "case_name": case_name}
            )
            return self._decode(response, SearchResponse)

        search = await self._with_retry("case name search", attempt)
        logger.debug("Search for %r returned %d results", case_name, len(search.results))
        return search.results

    async def get_opinion_text(self, cluster_id: str | int) -> OpinionRecord:
        """Fetch a cluster with its plain text. Single attempt, never retried."""
        response = await self._send("GET", f"clusters/{cluster_id}/")
        return self._decode(response, OpinionRecord)

    async def health_check(self) -> bool:
        await self._send("GET", "search/", params={"type": "o", "q": "test"})
        return True

    # -- plumbing ----------------------------------------------------------

    async def _with_retry(self, operation: str, call):
        """Run ``call`` up to max_attempts times with a fixed delay between tries.

        Unauthorized and Forbidden propagate at once. Any other client error is
        retried; the last one propagates when the budget is spent.
        """
        last_error: CourtListenerError | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await call()
            except NON_RETRYABLE:
                raise
            except CourtListenerError as e:
                last_error = e
                logger.warning(
                    "CourtListener %s failed: %s (attempt %d/%d)",
                    operation, e, attempt, self.max_attempts,
                )
                if attempt < self.max_attempts:
                    await asyncio.sleep(self.retry_delay)
        raise last_error

    async def _send(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        headers = await self._auth_headers()
        url = f"{self.base_url}/{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method, url, params=params, json=json, headers=headers
                )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise InvalidURLError(str(e)) from e
        except (httpx.RemoteProtocolError, httpx.DecodingError) as e:
            raise InvalidResponseError(str(e)) from e
        except httpx.TransportError as e:
            raise NetworkError(e) from e
        except httpx.HTTPError as e:
            raise UnknownError(str(e)) from e

        _raise_for_status(response)
        return response

    @staticmethod
    def _decode(response: httpx.Response, model):
        adapter = model if isinstance(model, TypeAdapter) else TypeAdapter(model)
        try:
            return adapter.validate_json(response.content)
        except ValueError as e:
            logger.debug("Undecodable CourtListener body: %s", response.text[:200])
            raise InvalidDataError() from e


def _raise_for_status(response: httpx.Response) -> None:
    status = response.status_code
    if status == 200:
        return
    logger.debug("CourtListener HTTP %s: %s", status, response.text[:200])
    if status == 401:
        raise UnauthorizedError()
    if status == 403:
        raise ForbiddenError()
    if status == 429:
        raise RateLimitedError()
    raise ServerError(status)
