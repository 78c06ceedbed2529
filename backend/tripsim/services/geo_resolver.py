"""Geo resolver: place name geocoding, great-circle distance, nearby places."""

import logging
import math
import unicodedata
from abc import ABC, abstractmethod
from decimal import Decimal

import httpx

from tripsim.config import Settings, settings
from tripsim.data.places import KNOWN_CITIES, POINTS_OF_INTEREST
from tripsim.schemas.geo import Coordinate, PointOfInterest, ResolvedPlace

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
DEFAULT_RADIUS_M = 1000.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in kilometers."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    h = min(1.0, h)  # float drift on antipodal points
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def fold(text: str) -> str:
    """Lower-case and strip accents so "São Paulo" matches "sao paulo"."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).strip().lower()


def effective_radius(radius_meters: float) -> float:
    return radius_meters if radius_meters > 0 else DEFAULT_RADIUS_M


def static_map_url(
    center: Coordinate,
    markers: list[Coordinate] | None = None,
    zoom: int = 13,
    width: int = 600,
    height: int = 300,
    base_url: str | None = None,
) -> str:
    """Static map image URL centered on a point, with optional markers."""
    params = {
        "center": f"{center.latitude},{center.longitude}",
        "zoom": zoom,
        "size": f"{width}x{height}",
    }
    if markers:
        params["markers"] = "|".join(f"{m.latitude},{m.longitude}" for m in markers)
    return str(httpx.URL(base_url or settings.static_map_base_url, params=params))


class GeoResolver(ABC):
    """Interface every geocoding backend implements.

    ``resolve`` returns None when a place is unknown; callers degrade
    geography-dependent output instead of failing.
    """

    @abstractmethod
    async def resolve(self, place_name: str) -> Coordinate | None:
        ...

    @abstractmethod
    async def nearby(
        self, center: Coordinate, category: str, radius_meters: float = DEFAULT_RADIUS_M
    ) -> list[PointOfInterest]:
        ...

    async def resolve_place(self, place_name: str) -> ResolvedPlace | None:
        coordinate = await self.resolve(place_name)
        if coordinate is None:
            return None
        return ResolvedPlace(query=place_name, coordinate=coordinate)

    def distance(self, a: Coordinate, b: Coordinate) -> float:
        return haversine_km(a, b)


class TableGeoResolver(GeoResolver):
    """In-memory resolver backed by a fixed city table and POI list."""

    def __init__(self, cities: list[dict] | None = None, places: list[dict] | None = None):
        cities = KNOWN_CITIES if cities is None else cities
        places = POINTS_OF_INTEREST if places is None else places

        self._cities = [
            (fold(c["name"]), Coordinate(latitude=c["latitude"], longitude=c["longitude"]))
            for c in cities
        ]
        self._places = [
            PointOfInterest(
                id=p["id"],
                name=p["name"],
                category=p["category"],
                coordinate=Coordinate(latitude=p["latitude"], longitude=p["longitude"]),
                rating=p.get("rating"),
                price=Decimal(p["price"]) if p.get("price") is not None else None,
                currency="BRL" if p.get("price") is not None else None,
                photos=p.get("photos", []),
                types=p.get("types", []),
                description=p.get("description"),
            )
            for p in places
        ]

    async def resolve(self, place_name: str) -> Coordinate | None:
        query = fold(place_name or "")
        if not query:
            return None

        for name, coordinate in self._cities:
            if name in query:
                return coordinate

        logger.info(f"Geocoding found no match for: {place_name!r}")
        return None

    async def nearby(
        self, center: Coordinate, category: str, radius_meters: float = DEFAULT_RADIUS_M
    ) -> list[PointOfInterest]:
        radius_km = effective_radius(radius_meters) / 1000.0

        hits = []
        for poi in self._places:
            if not poi.matches(category):
                continue
            d = haversine_km(center, poi.coordinate)
            if d <= radius_km:
                hits.append((d, poi.id, poi))

        hits.sort(key=lambda h: (h[0], h[1]))
        return [poi for _, _, poi in hits]


def build_geo_resolver(config: Settings = settings) -> GeoResolver:
    """Pick the geocoding backend named in configuration."""
    backend = config.geocoder_backend.lower()
    if backend == "nominatim":
        from tripsim.services.nominatim_client import NominatimGeoResolver

        return NominatimGeoResolver(config)
    if backend != "table":
        logger.warning(f"Unknown geocoder backend {backend!r}, using in-memory table")
    return TableGeoResolver()
