"""Attraction finder: ranks points of interest around a destination by interest."""

import logging

from tripsim.config import settings
from tripsim.schemas.geo import Coordinate, PointOfInterest
from tripsim.services.geo_resolver import GeoResolver

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "attraction"


def distinct_interests(interests: list[str]) -> list[str]:
    """Trimmed, lower-cased, de-duplicated interests in first-seen order."""
    seen: list[str] = []
    for interest in interests:
        key = interest.strip().lower()
        if key and key not in seen:
            seen.append(key)
    return seen


class AttractionFinder:
    """Merges per-interest nearby searches into one ranked list."""

    def __init__(self, geo: GeoResolver, radius_meters: float | None = None):
        self.geo = geo
        self.radius_meters = radius_meters if radius_meters is not None else settings.attraction_search_radius_m

    async def find(
        self,
        destination: Coordinate,
        interests: list[str],
        limit: int = 10,
    ) -> list[PointOfInterest]:
        categories = distinct_interests(interests) or [DEFAULT_CATEGORY]

        merged: dict[str, PointOfInterest] = {}
        matched: dict[str, int] = {}
        for category in categories:
            for poi in await self.geo.nearby(destination, category, self.radius_meters):
                if poi.id not in merged:
                    merged[poi.id] = poi
                    matched[poi.id] = 0
                matched[poi.id] += 1

        ranked = sorted(
            merged.values(),
            key=lambda p: (-matched[p.id], -(p.rating or 0.0)),
        )
        logger.debug(f"Attractions: {len(ranked)} candidates for {categories}, keeping {limit}")
        return ranked[:max(0, limit)]
