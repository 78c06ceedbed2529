"""Flight catalog: priced flight options for a route and date range."""

import hashlib
import logging
import random
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from tripsim.data.airlines import AIRLINE_NAMES
from tripsim.schemas.catalog import FlightOption, rank_flights

logger = logging.getLogger(__name__)


class FlightCatalog(ABC):
    """Source of flight options. Results are ranked cheapest-first."""

    @abstractmethod
    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        return_date: date,
    ) -> list[FlightOption]:
        ...


class ReferenceFlightCatalog(FlightCatalog):
    """Deterministic flight data seeded from the route and dates."""

    def __init__(self, options_per_search: int = 3, currency: str = "BRL"):
        self.options_per_search = options_per_search
        self.currency = currency

    async def search(
        self,
        origin: str,
        destination: str,
        departure_date: date,
        return_date: date,
    ) -> list[FlightOption]:
        if not origin or not origin.strip() or not destination or not destination.strip():
            return []
        return rank_flights(
            self._generate_flights(origin.strip(), destination.strip(), departure_date, return_date)
        )

    def _generate_flights(
        self, origin: str, destination: str, departure_date: date, return_date: date
    ) -> list[FlightOption]:
        seed_str = f"flight_{origin.lower()}_{destination.lower()}_{departure_date.isoformat()}_{return_date.isoformat()}"
        digest = hashlib.md5(seed_str.encode()).hexdigest()
        rng = random.Random(int(digest[:8], 16))

        codes = sorted(AIRLINE_NAMES)
        base_price = rng.randint(1000, 2000)

        flights = []
        for i in range(self.options_per_search):
            code = rng.choice(codes)
            departure = datetime.combine(
                departure_date, time(hour=rng.randint(6, 18), minute=rng.choice([0, 15, 30, 45]))
            )
            duration = timedelta(hours=rng.randint(1, 6), minutes=rng.randint(0, 59))
            variation = rng.uniform(-0.1, 0.2)  # -10% to +20%

            flights.append(
                FlightOption(
                    id=f"f{i + 1}-{digest[8:16]}",
                    airline=AIRLINE_NAMES[code],
                    departure_time=departure,
                    arrival_time=departure + duration,
                    price=Decimal(round(base_price * (1 + variation))),
                    currency=self.currency,
                    stops=rng.randint(0, 1),
                    flight_number=f"{code}{rng.randint(100, 999)}",
                )
            )

        return flights
