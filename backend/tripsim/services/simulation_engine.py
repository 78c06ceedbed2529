"""Simulation engine: turns a trip request into a priced itinerary estimate.

Flights, lodging and attractions are fetched concurrently. A branch that
fails or times out contributes nothing instead of failing the simulation;
only request validation is fatal. The total estimate is always the cheapest
flight, plus the cheapest stay, plus the top three attractions.
"""

import asyncio
import logging
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Awaitable, TypeVar

from tripsim.config import Settings, settings
from tripsim.data.currency import CENT, convert, format_price, normalize_code
from tripsim.errors import OptionNotFound, SimulationValidationError
from tripsim.schemas.catalog import FlightOption, LodgingOption, rank_flights, rank_lodging
from tripsim.schemas.geo import Coordinate, PointOfInterest
from tripsim.schemas.simulation import SimulationRequest, SimulationResult, TripSelection
from tripsim.services.attraction_finder import AttractionFinder
from tripsim.services.cache_service import SimulationCache
from tripsim.services.flight_catalog import FlightCatalog, ReferenceFlightCatalog
from tripsim.services.geo_resolver import GeoResolver, build_geo_resolver, static_map_url
from tripsim.services.lodging_catalog import LodgingCatalog, ReferenceLodgingCatalog

logger = logging.getLogger(__name__)

# Attractions beyond this rank are informational only
PRICED_ATTRACTIONS = 3

T = TypeVar("T")


class SimulationEngine:
    """Coordinates geo resolution, catalog lookups and cost aggregation."""

    def __init__(
        self,
        geo: GeoResolver,
        flights: FlightCatalog,
        lodging: LodgingCatalog,
        attractions: AttractionFinder | None = None,
        cache: SimulationCache | None = None,
        config: Settings = settings,
    ):
        self.geo = geo
        self.flights = flights
        self.lodging = lodging
        self.attractions = attractions or AttractionFinder(geo, config.attraction_search_radius_m)
        self.cache = cache
        self.config = config

    @staticmethod
    def validate(request: SimulationRequest) -> None:
        """Raise SimulationValidationError for the first invalid field."""
        if not request.origin.strip():
            raise SimulationValidationError("origin", "must not be empty")
        if not request.destination.strip():
            raise SimulationValidationError("destination", "must not be empty")
        if request.return_date <= request.departure_date:
            raise SimulationValidationError("return_date", "must be after departure_date")
        if request.budget < 0:
            raise SimulationValidationError("budget", "must not be negative")
        if request.travelers < 1:
            raise SimulationValidationError("travelers", "must be at least 1")

    async def simulate(self, request: SimulationRequest, currency: str | None = None) -> SimulationResult:
        """
        Run a full simulation for one request.

        ``currency`` is used as the working currency only when no flight
        option sets one.
        """
        self.validate(request)
        start_time = time.monotonic()

        fallback_currency = normalize_code(
            currency or request.currency or self.config.default_currency,
            default=self.config.default_currency,
        )

        if self.cache:
            cached = await self.cache.get_result(request, fallback_currency)
            if cached is not None:
                logger.info(f"Simulation cache hit: {request.origin} -> {request.destination}")
                return cached

        # 1. Resolve both ends
        (origin_coord, origin_ok), (dest_coord, dest_ok) = await asyncio.gather(
            self._resolve(request.origin),
            self._resolve(request.destination),
        )
        if dest_coord is None:
            logger.warning(f"Destination {request.destination!r} not resolved, attractions omitted")

        # 2. Fan out to providers
        (flights, flights_ok), (lodging, lodging_ok), (attractions, attractions_ok) = await asyncio.gather(
            self._guard(
                "flights",
                self.flights.search(
                    request.origin, request.destination, request.departure_date, request.return_date
                ),
            ),
            self._guard(
                "lodging",
                self.lodging.search(
                    request.destination, request.departure_date, request.return_date, request.travelers
                ),
            ),
            self._guard("attractions", self._find_attractions(dest_coord, request.interests)),
        )

        # 3. Rank and total
        result = self._compose(
            request,
            rank_flights(flights),
            rank_lodging(lodging),
            attractions,
            fallback_currency,
            origin_coord,
            dest_coord,
        )

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            f"Simulation {request.origin} -> {request.destination}: "
            f"{len(result.flight_options)} flights, {len(result.hotel_options)} stays, "
            f"{len(result.attractions)} attractions, "
            f"total {format_price(result.total_estimate, result.currency)} ({elapsed_ms}ms)"
        )

        complete = all((origin_ok, dest_ok, flights_ok, lodging_ok, attractions_ok))
        if self.cache:
            if complete:
                await self.cache.set_result(request, fallback_currency, result)
            else:
                logger.info("Simulation degraded, result not cached")

        return result

    # --- Private helpers ---

    async def _resolve(self, place_name: str) -> tuple[Coordinate | None, bool]:
        """Resolve a place; provider errors count as not found.

        The flag is False when the lookup itself failed, as opposed to
        finding no match.
        """
        try:
            coordinate = await asyncio.wait_for(
                self.geo.resolve(place_name), timeout=self.config.provider_timeout_seconds
            )
            return coordinate, True
        except asyncio.TimeoutError:
            logger.warning(f"Geocoding timed out for {place_name!r}")
        except Exception as e:
            logger.warning(f"Geocoding failed for {place_name!r}: {e}")
        return None, False

    async def _find_attractions(
        self, destination: Coordinate | None, interests: list[str]
    ) -> list[PointOfInterest]:
        if destination is None:
            return []
        return await self.attractions.find(destination, interests, limit=self.config.attraction_limit)

    async def _guard(self, name: str, call: Awaitable[list[T]]) -> tuple[list[T], bool]:
        """Await one provider branch, degrading to an empty list on failure."""
        try:
            return list(await asyncio.wait_for(call, timeout=self.config.provider_timeout_seconds)), True
        except asyncio.TimeoutError:
            logger.warning(f"Provider {name} timed out, continuing without it")
        except Exception as e:
            logger.warning(f"Provider {name} failed, continuing without it: {e}")
        return [], False

    def _compose(
        self,
        request: SimulationRequest,
        flights: list[FlightOption],
        lodging: list[LodgingOption],
        attractions: list[PointOfInterest],
        fallback_currency: str,
        origin: Coordinate | None,
        destination: Coordinate | None,
    ) -> SimulationResult:
        working = normalize_code(flights[0].currency) if flights else fallback_currency

        total = Decimal("0")
        if flights:
            total += convert(flights[0].price, flights[0].currency, working)
        if lodging:
            total += convert(lodging[0].total_price, lodging[0].currency, working)
        for poi in attractions[:PRICED_ATTRACTIONS]:
            if poi.price:
                total += convert(poi.price, poi.currency or working, working)
        total = total.quantize(CENT, rounding=ROUND_HALF_UP)

        route_distance = None
        if origin is not None and destination is not None:
            route_distance = round(self.geo.distance(origin, destination), 1)

        map_url = None
        if destination is not None:
            map_url = static_map_url(
                destination,
                [poi.coordinate for poi in attractions],
                base_url=self.config.static_map_base_url,
            )

        # Budget is stated in the request currency, or the fallback when unset
        budget_currency = normalize_code(request.currency, default=fallback_currency)
        budget = convert(request.budget, budget_currency, working)

        return SimulationResult(
            flight_options=flights,
            hotel_options=lodging,
            attractions=attractions,
            total_estimate=total,
            currency=working,
            nights=request.nights,
            route_distance_km=route_distance,
            map_url=map_url,
            within_budget=total <= budget,
        )


def select_options(
    result: SimulationResult,
    flight_id: str | None = None,
    hotel_id: str | None = None,
) -> TripSelection:
    """Pick a flight and/or stay out of a stored result and price the pair."""
    flight = None
    if flight_id:
        flight = next((f for f in result.flight_options if f.id == flight_id), None)
        if flight is None:
            raise OptionNotFound(f"Flight option {flight_id} not found")

    hotel = None
    if hotel_id:
        hotel = next((h for h in result.hotel_options if h.id == hotel_id), None)
        if hotel is None:
            raise OptionNotFound(f"Hotel option {hotel_id} not found")

    total = Decimal("0")
    if flight:
        total += convert(flight.price, flight.currency, result.currency)
    if hotel:
        total += convert(hotel.total_price, hotel.currency, result.currency)

    return TripSelection(
        flight=flight,
        hotel=hotel,
        total=total.quantize(CENT, rounding=ROUND_HALF_UP),
        currency=result.currency,
    )


def build_simulation_engine(config: Settings = settings) -> SimulationEngine:
    """Wire the engine from configuration."""
    geo = build_geo_resolver(config)
    cache = None
    if config.simulation_cache_enabled:
        cache = SimulationCache(config.redis_url, config.simulation_cache_ttl)
    return SimulationEngine(
        geo=geo,
        flights=ReferenceFlightCatalog(currency=config.default_currency),
        lodging=ReferenceLodgingCatalog(currency=config.default_currency),
        attractions=AttractionFinder(geo, config.attraction_search_radius_m),
        cache=cache,
        config=config,
    )


simulation_engine = build_simulation_engine()
