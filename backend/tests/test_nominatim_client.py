import httpx
import pytest

from tripsim.config import Settings
from tripsim.errors import ProviderFailure
from tripsim.services.nominatim_client import NominatimGeoResolver

from tests.factories import SALVADOR

CONFIG = Settings(
    nominatim_base_url="https://geo.test",
    overpass_url="https://overpass.test/api/interpreter",
)


def resolver_for(handler) -> NominatimGeoResolver:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return NominatimGeoResolver(CONFIG, client=client, backoff_base=0)


async def test_resolve_reads_first_row():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"lat": "-12.9711", "lon": "-38.5108", "display_name": "Salvador"}])

    geo = resolver_for(handler)
    coordinate = await geo.resolve("  Salvador ")

    assert coordinate == SALVADOR
    assert seen[0].url.path == "/search"
    assert seen[0].url.params["q"] == "Salvador"
    assert seen[0].url.params["format"] == "jsonv2"


async def test_resolve_no_rows_is_none():
    geo = resolver_for(lambda request: httpx.Response(200, json=[]))
    assert await geo.resolve("Nowhere") is None


async def test_resolve_empty_query_skips_http():
    def handler(request):
        raise AssertionError("no request expected")

    assert await resolver_for(handler).resolve("") is None


async def test_resolve_retries_rate_limit():
    responses = iter([
        httpx.Response(429),
        httpx.Response(503),
        httpx.Response(200, json=[{"lat": "1.5", "lon": "2.5"}]),
    ])

    geo = resolver_for(lambda request: next(responses))
    coordinate = await geo.resolve("Somewhere")

    assert (coordinate.latitude, coordinate.longitude) == (1.5, 2.5)


async def test_resolve_gives_up_after_three_attempts():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500)

    with pytest.raises(ProviderFailure):
        await resolver_for(handler).resolve("Salvador")
    assert len(calls) == 3


async def test_client_error_is_not_retried():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(403)

    with pytest.raises(ProviderFailure, match="403"):
        await resolver_for(handler).resolve("Salvador")
    assert len(calls) == 1


async def test_transport_error_becomes_provider_failure():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ProviderFailure):
        await resolver_for(handler).resolve("Salvador")


async def test_malformed_row_becomes_provider_failure():
    geo = resolver_for(lambda request: httpx.Response(200, json=[{"name": "no coords"}]))
    with pytest.raises(ProviderFailure):
        await geo.resolve("Salvador")


async def test_nearby_parses_overpass_elements():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.content.decode())
        return httpx.Response(200, json={"elements": [
            {"type": "node", "id": 2, "lat": -13.0036, "lon": -38.5326, "tags": {"name": "Porto da Barra"}},
            {"type": "node", "id": 1, "lat": -12.9720, "lon": -38.5110, "tags": {"name": "Praia Perto"}},
            {"type": "node", "id": 3, "lat": -12.9712, "lon": -38.5109, "tags": {}},
            {"type": "node", "id": 4, "lat": -14.5, "lon": -39.0, "tags": {"name": "Too Far"}},
        ]})

    hits = await resolver_for(handler).nearby(SALVADOR, "Beach", 10000)

    assert [p.id for p in hits] == ["osm-node-1", "osm-node-2"]
    assert all(p.category == "beach" for p in hits)
    assert "natural" in bodies[0] and "beach" in bodies[0]
    assert "around%3A10000" in bodies[0]


async def test_nearby_default_radius_for_non_positive():
    bodies = []

    def handler(request):
        bodies.append(request.content.decode())
        return httpx.Response(200, json={"elements": []})

    assert await resolver_for(handler).nearby(SALVADOR, "museum", 0) == []
    assert "around%3A1000%2C" in bodies[0]


async def test_nearby_rejects_unexpected_shape():
    geo = resolver_for(lambda request: httpx.Response(200, json=["not", "a", "dict"]))
    with pytest.raises(ProviderFailure, match="overpass"):
        await geo.nearby(SALVADOR, "beach", 1000)


async def test_close_releases_client():
    geo = resolver_for(lambda request: httpx.Response(200, json=[]))
    await geo.resolve("Salvador")
    await geo.close()
    assert geo._client is None
