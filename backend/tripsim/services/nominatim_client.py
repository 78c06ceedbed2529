"""Nominatim/Overpass adapter: live geocoding behind the GeoResolver interface."""

import asyncio
import logging
from typing import Any

import httpx

from tripsim.config import Settings, settings
from tripsim.errors import ProviderFailure
from tripsim.schemas.geo import Coordinate, PointOfInterest
from tripsim.services.geo_resolver import DEFAULT_RADIUS_M, GeoResolver, effective_radius, haversine_km

logger = logging.getLogger(__name__)

# Interest category → OpenStreetMap tag filter
CATEGORY_TAGS: dict[str, str] = {
    "attraction": '"tourism"="attraction"',
    "beach": '"natural"="beach"',
    "culture": '"tourism"="museum"',
    "museum": '"tourism"="museum"',
    "nature": '"leisure"="park"',
    "food": '"amenity"="restaurant"',
    "nightlife": '"amenity"="bar"',
    "adventure": '"sport"="climbing"',
    "landmark": '"historic"="monument"',
}

MAX_ATTEMPTS = 3


class NominatimGeoResolver(GeoResolver):
    """Resolves places with Nominatim and finds nearby places with Overpass."""

    def __init__(
        self,
        config: Settings = settings,
        client: httpx.AsyncClient | None = None,
        backoff_base: float = 1.0,
    ):
        self._config = config
        self._client = client
        self._backoff_base = backoff_base
        self._semaphore = asyncio.Semaphore(1)  # Nominatim usage policy: one request at a time

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.http_timeout_seconds,
                headers={"User-Agent": self._config.geocoder_user_agent},
            )
        return self._client

    async def _request(self, provider: str, method: str, url: str, **kwargs) -> Any:
        """Send a request with retry on 429/5xx and transport errors."""
        client = await self._get_client()
        for attempt in range(MAX_ATTEMPTS):
            try:
                resp = await client.request(method, url, **kwargs)
                resp.raise_for_status()
                return resp.json()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if (status == 429 or status >= 500) and attempt < MAX_ATTEMPTS - 1:
                    await asyncio.sleep(self._backoff_base * 2 ** attempt)
                    continue
                raise ProviderFailure(provider, f"HTTP {status} from {url}") from e
            except httpx.RequestError as e:
                if attempt < MAX_ATTEMPTS - 1:
                    await asyncio.sleep(self._backoff_base * 2 ** attempt)
                    continue
                raise ProviderFailure(provider, f"request to {url} failed: {e}") from e
            except ValueError as e:
                raise ProviderFailure(provider, f"invalid JSON from {url}") from e

    async def resolve(self, place_name: str) -> Coordinate | None:
        query = (place_name or "").strip()
        if not query:
            return None

        async with self._semaphore:
            rows = await self._request(
                "nominatim",
                "GET",
                f"{self._config.nominatim_base_url}/search",
                params={"q": query, "format": "jsonv2", "limit": 1},
            )

        if not rows:
            logger.info(f"Nominatim found no match for: {query!r}")
            return None

        try:
            return Coordinate(latitude=float(rows[0]["lat"]), longitude=float(rows[0]["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderFailure("nominatim", f"malformed search row for {query!r}") from e

    async def nearby(
        self, center: Coordinate, category: str, radius_meters: float = DEFAULT_RADIUS_M
    ) -> list[PointOfInterest]:
        radius = effective_radius(radius_meters)
        key = category.strip().lower()
        tag = CATEGORY_TAGS.get(key, f'"tourism"="{key}"')
        query = (
            f"[out:json][timeout:25];"
            f"node(around:{radius:.0f},{center.latitude},{center.longitude})[{tag}];"
            f"out body;"
        )

        payload = await self._request("overpass", "POST", self._config.overpass_url, data={"data": query})
        if not isinstance(payload, dict):
            raise ProviderFailure("overpass", "unexpected response shape")

        hits = []
        for element in payload.get("elements", []):
            tags = element.get("tags") or {}
            name = tags.get("name")
            if not name or "lat" not in element or "lon" not in element:
                continue
            coordinate = Coordinate(latitude=element["lat"], longitude=element["lon"])
            d = haversine_km(center, coordinate)
            if d * 1000 > radius:
                continue
            poi = PointOfInterest(
                id=f"osm-{element.get('type', 'node')}-{element['id']}",
                name=name,
                category=key,
                coordinate=coordinate,
                description=tags.get("description"),
            )
            hits.append((d, poi.id, poi))

        hits.sort(key=lambda h: (h[0], h[1]))
        return [poi for _, _, poi in hits]

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
