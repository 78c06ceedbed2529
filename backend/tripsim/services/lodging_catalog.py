"""Lodging catalog: priced stays for a destination and date range."""

import hashlib
import logging
import math
import random
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal

from tripsim.schemas.catalog import LodgingOption, rank_lodging
from tripsim.services.geo_resolver import fold

logger = logging.getLogger(__name__)

HOTEL_NAMES = [
    "Hotel Central",
    "Grand Plaza",
    "Comfort Inn",
    "Marina Bay",
    "Royal Palace",
    "Ocean View",
]

AMENITIES = [
    "wifi",
    "breakfast",
    "pool",
    "gym",
    "restaurant",
    "bar",
    "spa",
    "parking",
    "air_conditioning",
]

GUESTS_PER_ROOM = 2


class LodgingCatalog(ABC):
    """Source of lodging options. Results are ranked by total stay price."""

    @abstractmethod
    async def search(
        self,
        destination: str,
        departure_date: date,
        return_date: date,
        travelers: int = 1,
    ) -> list[LodgingOption]:
        ...


class ReferenceLodgingCatalog(LodgingCatalog):
    """Deterministic lodging data seeded from destination, dates and party size."""

    def __init__(self, options_per_search: int = 4, currency: str = "BRL"):
        self.options_per_search = options_per_search
        self.currency = currency

    async def search(
        self,
        destination: str,
        departure_date: date,
        return_date: date,
        travelers: int = 1,
    ) -> list[LodgingOption]:
        if not destination or not destination.strip():
            return []
        nights = (return_date - departure_date).days
        if nights < 1:
            return []
        return rank_lodging(
            self._generate_options(destination.strip(), departure_date, return_date, nights, travelers)
        )

    def _generate_options(
        self,
        destination: str,
        check_in: date,
        check_out: date,
        nights: int,
        travelers: int,
    ) -> list[LodgingOption]:
        seed_str = f"hotel_{destination.lower()}_{check_in.isoformat()}_{check_out.isoformat()}_{travelers}"
        digest = hashlib.md5(seed_str.encode()).hexdigest()
        rng = random.Random(int(digest[:8], 16))

        base_rate = self._estimate_base_rate(destination)
        rooms = max(1, math.ceil(travelers / GUESTS_PER_ROOM))

        options = []
        for i in range(self.options_per_search):
            rating = round(rng.uniform(3.0, 5.0), 1)
            star_multiplier = 0.7 + (rating - 3.0) * 0.45  # 0.7 at 3 stars, 1.6 at 5
            nightly = Decimal(round(base_rate * star_multiplier * rng.uniform(0.8, 1.3))) * rooms

            options.append(
                LodgingOption(
                    id=f"h{i + 1}-{digest[8:16]}",
                    name=f"{rng.choice(HOTEL_NAMES)} {destination}",
                    rating=rating,
                    price_per_night=nightly,
                    total_price=nightly * nights,
                    currency=self.currency,
                    amenities=rng.sample(AMENITIES, rng.randint(3, 6)),
                    nights=nights,
                    address=f"Av. Principal, {rng.randint(100, 999)}, {destination}",
                )
            )

        return options

    @staticmethod
    def _estimate_base_rate(city: str) -> int:
        """Rough nightly base rate (BRL) by city."""
        city_folded = fold(city)
        expensive = ["rio de janeiro", "sao paulo", "florianopolis"]
        moderate = ["salvador", "recife", "brasilia", "fortaleza"]

        if any(c in city_folded for c in expensive):
            return 450
        if any(c in city_folded for c in moderate):
            return 320
        return 280
