import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    countries_api_url: str = (
        "https://restcountries.com/v3.1/all"
        "?fields=name,flags,region,subregion,capital,population,currencies,latlng,borders,cca3"
    )
    weather_api_url: str = "https://api.open-meteo.com/v1/forecast"
    page_size: int = 16
    debounce_ms: int = 300
    request_timeout_seconds: float = 10.0
    detail_rate_limit: str = "30/minute"
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    @field_validator("page_size")
    @classmethod
    def check_page_size(cls, v):
        if v <= 0:
            raise ValueError("page_size must be a positive integer")
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    model_config = {
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
