"""Trip simulation and geolocation engine."""

__version__ = "0.1.0"
