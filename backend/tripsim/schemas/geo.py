from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Coordinate(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)


class ResolvedPlace(BaseModel):
    query: str
    coordinate: Coordinate

    model_config = ConfigDict(frozen=True)


class PointOfInterest(BaseModel):
    id: str
    name: str
    category: str
    coordinate: Coordinate
    rating: float | None = None
    price: Decimal | None = None
    currency: str | None = None
    photos: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)
    description: str | None = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def matches(self, category: str) -> bool:
        """Case-insensitive match against the category or any extra type tag."""
        wanted = category.strip().lower()
        if self.category.lower() == wanted:
            return True
        return any(t.lower() == wanted for t in self.types)
