from datetime import date
from decimal import Decimal

from tripsim.schemas.simulation import SimulationRequest, SimulationResult
from tripsim.services.cache_service import SimulationCache

from tests.factories import FakeRedis, make_flight


def _request(**changes):
    base = dict(
        origin="Recife",
        destination="Fortaleza",
        departure_date=date(2025, 7, 1),
        return_date=date(2025, 7, 3),
        budget=Decimal("1500"),
        interests=["beach", "food"],
    )
    return SimulationRequest(**{**base, **changes})


def _result():
    return SimulationResult(
        flight_options=[make_flight()],
        total_estimate=Decimal("500.00"),
        currency="BRL",
        nights=2,
        within_budget=True,
    )


def test_key_is_stable_for_equivalent_requests():
    a = SimulationCache.simulation_key(_request(), "BRL")
    b = SimulationCache.simulation_key(_request(origin=" RECIFE ", interests=["food", "Beach"]), "brl")
    assert a == b
    assert a.startswith("sim:")


def test_key_changes_with_currency_and_fields():
    base = SimulationCache.simulation_key(_request(), "BRL")
    assert SimulationCache.simulation_key(_request(), "USD") != base
    assert SimulationCache.simulation_key(_request(travelers=2), "BRL") != base


async def test_round_trip():
    client = FakeRedis()
    cache = SimulationCache(client=client, ttl=120)

    assert await cache.get_result(_request(), "BRL") is None
    assert await cache.set_result(_request(), "BRL", _result()) is True
    assert await cache.get_result(_request(), "BRL") == _result()
    assert list(client.ttls.values()) == [120]


async def test_failures_read_as_miss():
    cache = SimulationCache(client=FakeRedis(fail=True))
    assert await cache.get_result(_request(), "BRL") is None
    assert await cache.set_result(_request(), "BRL", _result()) is False


async def test_unreachable_redis_disables_cache():
    cache = SimulationCache(redis_url="redis://127.0.0.1:1/0")
    assert await cache.get_result(_request(), "BRL") is None
    assert await cache.set_result(_request(), "BRL", _result()) is False
    await cache.close()
