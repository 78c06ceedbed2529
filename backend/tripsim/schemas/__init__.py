from tripsim.schemas.catalog import FlightOption, LodgingOption, rank_flights, rank_lodging
from tripsim.schemas.geo import Coordinate, PointOfInterest, ResolvedPlace
from tripsim.schemas.simulation import (
    SimulationRequest,
    SimulationResult,
    TripSelection,
    load_simulation_result,
    parse_request,
)

__all__ = [
    "Coordinate",
    "FlightOption",
    "LodgingOption",
    "PointOfInterest",
    "ResolvedPlace",
    "SimulationRequest",
    "SimulationResult",
    "TripSelection",
    "load_simulation_result",
    "parse_request",
    "rank_flights",
    "rank_lodging",
]
