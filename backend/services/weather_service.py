"""Weather service using Open-Meteo API (free, no API key required)."""

import logging

import httpx

from config import settings
from models.weather import CurrentWeather
from utils.http_client import get_client

logger = logging.getLogger(__name__)


class WeatherUnavailable(Exception):
    pass


def weather_text(code: int) -> str:
    """Collapse a WMO weather code into a short condition label."""
    if code == 0:
        return "Clear Sky"
    if 1 <= code <= 3:
        return "Partly Cloudy"
    if 45 <= code <= 48:
        return "Foggy"
    if 51 <= code <= 67:
        return "Rain"
    if 71 <= code <= 77:
        return "Snow"
    if code >= 95:
        return "Thunderstorm"
    return "Variable"


async def get_current_weather(
    lat: float | None,
    lng: float | None,
    client: httpx.AsyncClient | None = None,
) -> CurrentWeather:
    """Fetch current conditions for a coordinate pair.

    Raises WeatherUnavailable when coordinates are missing, the request
    fails, or the payload has no usable ``current`` block.
    """
    if lat is None or lng is None:
        raise WeatherUnavailable("No coordinates")

    client = client or get_client()
    try:
        response = await client.get(
            settings.weather_api_url,
            params={
                "latitude": lat,
                "longitude": lng,
                "current": "temperature_2m,relative_humidity_2m,weather_code",
                "timezone": "auto",
            },
        )
    except httpx.HTTPError as e:
        logger.warning("Weather request failed for %s,%s: %s", lat, lng, e)
        raise WeatherUnavailable("Request failed") from e

    if response.status_code != 200:
        logger.warning("Weather error %s: %.200s", response.status_code, response.text)
        raise WeatherUnavailable(f"Weather API error ({response.status_code})")

    try:
        data = response.json()
    except ValueError as e:
        raise WeatherUnavailable("Invalid JSON") from e

    current = data.get("current") if isinstance(data, dict) else None
    if not isinstance(current, dict):
        raise WeatherUnavailable("No weather data")
    units = data.get("current_units")
    if not isinstance(units, dict):
        units = {}

    temperature = current.get("temperature_2m")
    humidity = current.get("relative_humidity_2m")
    code = current.get("weather_code")
    if not isinstance(temperature, (int, float)) or not isinstance(code, int):
        raise WeatherUnavailable("Malformed weather data")

    return CurrentWeather(
        temperature=temperature,
        temperature_unit=units.get("temperature_2m", "°C"),
        relative_humidity=humidity if isinstance(humidity, (int, float)) else None,
        weather_code=code,
        condition=weather_text(code),
    )
