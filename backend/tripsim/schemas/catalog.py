from datetime import datetime, timedelta
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class FlightOption(BaseModel):
    id: str
    airline: str
    departure_time: datetime
    arrival_time: datetime
    price: Decimal = Field(ge=0)
    currency: str
    stops: int | None = None
    flight_number: str | None = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @property
    def duration(self) -> timedelta:
        return self.arrival_time - self.departure_time

    @property
    def ranking_key(self) -> tuple:
        return (self.price, self.duration, self.stops or 0)


class LodgingOption(BaseModel):
    id: str
    name: str
    rating: float
    price_per_night: Decimal = Field(ge=0)
    total_price: Decimal = Field(ge=0)
    currency: str
    amenities: list[str] = Field(default_factory=list)
    nights: int = Field(ge=1)
    address: str | None = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @model_validator(mode="after")
    def check_total_matches_nights(self):
        if self.total_price != self.price_per_night * self.nights:
            raise ValueError(
                f"total_price {self.total_price} != price_per_night {self.price_per_night} x {self.nights} nights"
            )
        return self

    @property
    def ranking_key(self) -> tuple:
        return (self.total_price, -self.rating)


def rank_flights(flights: list[FlightOption]) -> list[FlightOption]:
    """Cheapest first, then shortest, then fewest stops."""
    return sorted(flights, key=lambda f: f.ranking_key)


def rank_lodging(options: list[LodgingOption]) -> list[LodgingOption]:
    """Cheapest stay first, best rated on ties."""
    return sorted(options, key=lambda h: h.ranking_key)
