from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geocoding
    geocoder_backend: str = "table"  # "table" | "nominatim"
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    geocoder_user_agent: str = "tripsim/0.1"
    http_timeout_seconds: float = 10.0
    static_map_base_url: str = "https://maps.googleapis.com/maps/api/staticmap"

    # Simulation
    provider_timeout_seconds: float = 15.0
    attraction_search_radius_m: float = 20000.0
    attraction_limit: int = 10
    default_currency: str = "BRL"

    # Redis result cache
    redis_url: str = "redis://localhost:6379/0"
    simulation_cache_enabled: bool = False
    simulation_cache_ttl: int = 30 * 60  # 30 minutes

    # Logging
    log_level: str = "INFO"
    log_dir: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
