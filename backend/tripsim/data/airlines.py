"""Carriers used by the reference flight catalog."""

# Airline code → display name
AIRLINE_NAMES: dict[str, str] = {
    "LA": "LATAM",
    "AD": "Azul",
    "G3": "GOL",
    "AV": "Avianca",
    "TP": "TAP",
    "EK": "Emirates",
}
