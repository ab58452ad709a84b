"""HTTP client for the Avni REST API.

This module provides the AvniClient class, a thin facade over
``httpx.AsyncClient`` that:
1. Binds the Avni base URL
2. Sends the three headers Avni expects on every request
   (``auth-token``, ``Accept`` and ``Content-Type``)
3. Decodes JSON responses into either a list of raw objects or a typed
   record from ``avni_mcp.records``

Authentication is a single static API key. There is no token refresh, no
retry and no timeout beyond httpx's defaults.

Usage:
    client = AvniClient(base_url="https://staging.avniproject.org", api_key="...")
    groups = await client.get_list("/web/groups")
    org = await client.post_for_record("/organisation", payload, Organisation)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from avni_mcp.config import AVNI_API_KEY, AVNI_BASE_URL

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class AvniError(Exception):
    """Base class for every failure raised by the Avni client."""


class AvniAPIError(AvniError):
    """Raised on network failures and non-2xx responses.

    ``status_code`` is 0 when no response was received at all.
    """

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        if status_code:
            super().__init__(f"HTTP {status_code}: {detail}")
        else:
            super().__init__(detail)


class AvniDecodeError(AvniError):
    """Raised when a response body cannot be projected onto a record."""


def project(items: Iterable[Any], record_type: type[RecordT]) -> list[RecordT]:
    """Project raw JSON objects onto ``record_type``, preserving order.

    Raises:
        AvniDecodeError: If any element is missing a required field or is
            not a JSON object.
    """
    records: list[RecordT] = []
    for index, item in enumerate(items):
        try:
            records.append(record_type.model_validate(item))
        except ValidationError as exc:
            raise AvniDecodeError(
                f"Element {index} is not a valid {record_type.__name__}: {exc}"
            ) from exc
    return records


class AvniClient:
    """Async HTTP client for the Avni REST API.

    The client is immutable after construction and safe to share between
    concurrent tool invocations.

    Attributes:
        base_url: The Avni server URL (e.g., "https://staging.avniproject.org").
    """

    def __init__(
        self,
        base_url: str = AVNI_BASE_URL,
        api_key: str = AVNI_API_KEY,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")

        if not api_key:
            logger.warning(
                "AVNI_API_KEY is empty; requests to %s will likely be rejected",
                self.base_url,
            )

        # transport= lets tests swap in httpx.MockTransport.
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "auth-token": api_key,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    # --- API Request Methods ---

    async def get_list(self, path: str) -> list[Any]:
        """GET ``path`` and return the decoded JSON array.

        Args:
            path: API path relative to the base URL (e.g., "/catchment").

        Returns:
            The raw list elements. An empty 2xx body yields ``[]``.

        Raises:
            AvniAPIError: On network failure or a non-2xx status.
            AvniDecodeError: If the body is not a JSON array.
        """
        response = await self._request("GET", path)
        if not response.content.strip():
            return []

        data = self._decode(response, path)
        if data is None:
            return []
        if not isinstance(data, list):
            raise AvniDecodeError(
                f"Expected a JSON array from {path}, got {type(data).__name__}"
            )
        return data

    async def post_for_record(
        self,
        path: str,
        payload: Any,
        record_type: type[RecordT],
    ) -> RecordT:
        """POST ``payload`` as JSON and decode the response into ``record_type``.

        Batch endpoints such as ``/locations`` may answer with a list; a
        single-element list is unwrapped, anything longer is rejected
        because only one record was sent.

        Args:
            path: API path relative to the base URL (e.g., "/organisation").
            payload: The JSON body (dict or list).
            record_type: The record model to decode into.

        Returns:
            The decoded record.

        Raises:
            AvniAPIError: On network failure or a non-2xx status.
            AvniDecodeError: If the body is empty, not JSON, or does not fit
                ``record_type``.
        """
        response = await self._request("POST", path, json_data=payload)
        if not response.content.strip():
            raise AvniDecodeError(f"Empty response body from {path}")

        data = self._decode(response, path)
        if isinstance(data, list):
            if len(data) != 1:
                raise AvniDecodeError(
                    f"Expected a single {record_type.__name__} from {path}, "
                    f"got {len(data)} elements"
                )
            data = data[0]

        try:
            return record_type.model_validate(data)
        except ValidationError as exc:
            raise AvniDecodeError(
                f"Response from {path} is not a valid {record_type.__name__}: {exc}"
            ) from exc

    async def _request(
        self,
        method: str,
        path: str,
        json_data: Any = None,
    ) -> httpx.Response:
        """Send a request and raise AvniAPIError unless it succeeded."""
        logger.debug("%s %s", method, path)
        try:
            response = await self._http.request(method, path, json=json_data)
        except httpx.HTTPError as exc:
            raise AvniAPIError(
                status_code=0,
                detail=f"Request to {self.base_url}{path} failed: {exc}",
            ) from exc

        if not response.is_success:
            logger.warning(
                "%s %s returned HTTP %d", method, path, response.status_code
            )
            raise AvniAPIError(
                status_code=response.status_code,
                detail=response.text,
            )

        return response

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise AvniDecodeError(f"Response from {path} is not valid JSON: {exc}") from exc


# --- Module-level singleton ---
# One shared client for the whole process. Tool functions call get_client()
# rather than building their own, so tests can patch it per module.

_client: AvniClient | None = None


async def get_client() -> AvniClient:
    """Get or create the shared AvniClient singleton.

    Returns:
        The AvniClient built from ``avni_mcp.config``.
    """
    global _client  # noqa: PLW0603
    if _client is None:
        _client = AvniClient()
    return _client


async def close_client() -> None:
    """Close the shared client, if one was created."""
    global _client  # noqa: PLW0603
    if _client is not None:
        await _client.close()
        _client = None
