import logging

import httpx

from config import settings
from models.country import CountryRecord
from utils.http_client import get_client

logger = logging.getLogger(__name__)


class DataSourceError(Exception):
    """The country data source failed or answered with something unusable."""


async def fetch_countries(client: httpx.AsyncClient | None = None) -> list[CountryRecord]:
    """Download the full country list from restcountries.

    Raises DataSourceError on network failure, a non-success status, or a
    payload that is not a list of records.
    """
    client = client or get_client()
    try:
        response = await client.get(settings.countries_api_url)
    except httpx.HTTPError as e:
        logger.error("Country data request failed: %s", e)
        raise DataSourceError(f"Network error ({e.__class__.__name__})") from e

    if response.status_code != 200:
        logger.error("Country data error %s: %.200s", response.status_code, response.text)
        raise DataSourceError(f"API Error ({response.status_code})")

    try:
        raw = response.json()
    except ValueError as e:
        raise DataSourceError("Invalid JSON from country API") from e
    if not isinstance(raw, list):
        raise DataSourceError("Unexpected payload from country API")

    records = [CountryRecord.from_api(c) for c in raw if isinstance(c, dict)]
    logger.info("Loaded %d countries", len(records))
    return records
