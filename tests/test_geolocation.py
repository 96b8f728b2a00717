import httpx
import pytest

from vaer.exceptions import (
    GeolocationPermissionDenied,
    GeolocationUnsupported,
    PositionUnavailable,
)
from vaer.geolocation import (
    DeniedLocationProvider,
    FixedLocationProvider,
    IPGeolocationProvider,
    UnsupportedLocationProvider,
    get_provider,
)

pytestmark = pytest.mark.asyncio


def ip_provider(response: httpx.Response | Exception) -> IPGeolocationProvider:
    def handler(request: httpx.Request) -> httpx.Response:
        if isinstance(response, Exception):
            raise response
        return response

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return IPGeolocationProvider(url="https://ip.test/json/", client=client)


async def test_ip_provider() -> None:
    provider = ip_provider(
        httpx.Response(200, json={"latitude": 59.9, "longitude": 10.7, "city": "Oslo"})
    )

    assert await provider.locate() == (59.9, 10.7)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(429, json={"error": True, "reason": "RateLimited"}),
        httpx.Response(200, json={"error": True}),
        httpx.ConnectError("Name or service not known"),
    ],
)
async def test_ip_provider_unavailable(response: httpx.Response | Exception) -> None:
    with pytest.raises(PositionUnavailable):
        await ip_provider(response).locate()


async def test_fixed_provider() -> None:
    assert await FixedLocationProvider(1.0, 2.0).locate() == (1.0, 2.0)


async def test_denied_provider() -> None:
    with pytest.raises(GeolocationPermissionDenied):
        await DeniedLocationProvider().locate()


async def test_unsupported_provider() -> None:
    with pytest.raises(GeolocationUnsupported):
        await UnsupportedLocationProvider().locate()


async def test_get_provider() -> None:
    assert isinstance(get_provider("ip"), IPGeolocationProvider)
    assert isinstance(get_provider("deny"), DeniedLocationProvider)
    assert isinstance(get_provider("off"), UnsupportedLocationProvider)
