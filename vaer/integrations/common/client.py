"""
Base API client.

Provides shared functionality for API clients:
- httpx.AsyncClient lifecycle management
- Async context manager support
- Pydantic response decoding helpers
"""

from typing import Any, Self, TypeVar

import httpx
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseAPIClient:
    """
    Base class for API clients using httpx.

    An existing httpx.AsyncClient can be passed in, in which case the caller
    stays responsible for closing it. Otherwise a client is created and
    closed together with this one:

        async with OpenWeatherClient(api_key=key) as client:
            current = await client.get_current_by_city("Oslo", unit=Unit.METRIC)
    """

    client: httpx.AsyncClient

    def __init__(self, *, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    # ======================
    # Response decoding
    # ======================

    def _decode_json(
        self, response: httpx.Response, response_type: type[T]
    ) -> T:
        """
        Decode a JSON response into a Pydantic model.

        Uses model_validate_json for efficiency (single parse).
        """
        return response_type.model_validate_json(response.text)
