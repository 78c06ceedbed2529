from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from tripsim.errors import SimulationValidationError
from tripsim.schemas.catalog import FlightOption, LodgingOption
from tripsim.schemas.geo import PointOfInterest

_CAMEL = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class SimulationRequest(BaseModel):
    origin: str
    origin_country: str = ""
    destination: str
    destination_country: str = ""
    departure_date: date
    return_date: date
    budget: Decimal
    interests: list[str] = Field(default_factory=list)
    travelers: int = 1
    currency: str | None = None

    model_config = _CAMEL

    @property
    def nights(self) -> int:
        return (self.return_date - self.departure_date).days

    def normalized(self) -> dict:
        """Fields that identify an equivalent request (used for cache keys)."""
        interests = sorted({i.strip().lower() for i in self.interests if i.strip()})
        return {
            "origin": self.origin.strip().lower(),
            "origin_country": self.origin_country.strip().lower(),
            "destination": self.destination.strip().lower(),
            "destination_country": self.destination_country.strip().lower(),
            "departure_date": self.departure_date.isoformat(),
            "return_date": self.return_date.isoformat(),
            "budget": str(self.budget),
            "interests": interests,
            "travelers": self.travelers,
            "currency": (self.currency or "").upper(),
        }


class SimulationResult(BaseModel):
    flight_options: list[FlightOption] = Field(default_factory=list)
    hotel_options: list[LodgingOption] = Field(default_factory=list)
    attractions: list[PointOfInterest] = Field(default_factory=list)
    total_estimate: Decimal
    currency: str
    nights: int
    route_distance_km: float | None = None
    map_url: str | None = None
    within_budget: bool

    model_config = _CAMEL


class TripSelection(BaseModel):
    flight: FlightOption | None = None
    hotel: LodgingOption | None = None
    total: Decimal
    currency: str

    model_config = _CAMEL


def parse_request(payload: dict[str, Any]) -> SimulationRequest:
    """Build a request from a raw mapping (camelCase or snake_case keys)."""
    try:
        return SimulationRequest.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "request"
        raise SimulationValidationError(field, first["msg"]) from e


def load_simulation_result(raw: str | bytes | dict[str, Any]) -> SimulationResult:
    """Rehydrate a stored result, whether it was kept as JSON text or a mapping."""
    if isinstance(raw, (str, bytes)):
        return SimulationResult.model_validate_json(raw)
    return SimulationResult.model_validate(raw)
