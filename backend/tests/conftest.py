from datetime import date
from decimal import Decimal

import pytest

from tripsim.config import Settings
from tripsim.schemas.simulation import SimulationRequest
from tripsim.services.geo_resolver import TableGeoResolver


@pytest.fixture
def table_geo():
    return TableGeoResolver()


@pytest.fixture
def fast_settings():
    return Settings(
        provider_timeout_seconds=0.2,
        simulation_cache_enabled=False,
        geocoder_backend="table",
        default_currency="BRL",
    )


@pytest.fixture
def trip_request():
    return SimulationRequest(
        origin="São Paulo",
        origin_country="Brasil",
        destination="Salvador",
        destination_country="Brasil",
        departure_date=date(2025, 6, 1),
        return_date=date(2025, 6, 5),
        budget=Decimal("3000"),
        interests=["beach"],
    )
