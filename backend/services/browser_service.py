"""Glue between the catalog, the paginator and whatever renders the grid."""

import logging
from typing import Awaitable, Callable

from models.country import CountryCard, CountryRecord
from models.page import CountryDetail, PageView
from models.weather import CurrentWeather
from services.catalog import Catalog
from services.country_service import DataSourceError
from services.paginator import OutOfRange, Paginator
from services.weather_service import WeatherUnavailable
from utils.debounce import Debouncer

logger = logging.getLogger(__name__)

WeatherLoader = Callable[[float | None, float | None], Awaitable[CurrentWeather]]

NO_COORDINATES_MESSAGE = "Weather data unavailable (No coordinates)"
WEATHER_UNAVAILABLE_MESSAGE = "Weather unavailable"


class BrowserSession:
    def __init__(self, catalog: Catalog, page_size: int = 16):
        self.catalog = catalog
        self.paginator = Paginator(page_size)
        self.paginator.reset(len(self.catalog.filtered))
        self.search_debounced = Debouncer(self.search)

    def search(self, term: str | None) -> int:
        count = self.catalog.set_filter(term)
        self.paginator.reset(count)
        return count

    def _navigate(self, move: Callable[[], None]) -> bool:
        try:
            move()
        except OutOfRange as e:
            logger.debug("Ignoring navigation: %s", e)
            return False
        return True

    def go_to(self, page: int) -> bool:
        """Navigate to ``page``; out-of-range requests are ignored."""
        return self._navigate(lambda: self.paginator.go_to(page, len(self.catalog.filtered)))

    def next(self) -> bool:
        return self._navigate(self.paginator.next)

    def previous(self) -> bool:
        return self._navigate(self.paginator.previous)

    def view(self) -> PageView:
        filtered = self.catalog.filtered
        p = self.paginator
        return PageView(
            items=[CountryCard.from_record(r) for r in p.page_slice(filtered)],
            search=self.catalog.filter_term,
            current_page=p.current_page,
            total_pages=p.total_pages,
            total_items=len(filtered),
            labels=p.page_labels(),
            has_previous=p.has_previous,
            has_next=p.has_next,
            info=p.range_info(),
        )


async def build_detail(record: CountryRecord, weather_loader: WeatherLoader) -> CountryDetail:
    """Assemble the detail view; a weather failure never blocks the rest."""
    detail = CountryDetail(country=record, display=record.display_fields)
    if not record.has_coordinates:
        detail.weather_message = NO_COORDINATES_MESSAGE
        return detail
    try:
        detail.weather = await weather_loader(record.latitude, record.longitude)
    except WeatherUnavailable as e:
        logger.warning("Weather unavailable for %s: %s", record.id, e)
        detail.weather_message = WEATHER_UNAVAILABLE_MESSAGE
    return detail


class CatalogStore:
    """Process-wide catalog plus its loading/loaded/error state."""

    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"

    def __init__(self):
        self.catalog = Catalog()
        self.status = self.LOADING
        self.error: str | None = None

    async def load(self, loader: Callable[[], Awaitable[list[CountryRecord]]]) -> None:
        self.status = self.LOADING
        self.error = None
        try:
            records = await loader()
        except DataSourceError as e:
            logger.error("Catalog load failed: %s", e)
            self.status = self.ERROR
            self.error = f"Error loading data: {e}. Please refresh."
            return
        self.catalog.load(records)
        self.status = self.LOADED

    def session(self, page_size: int) -> BrowserSession:
        return BrowserSession(self.catalog.fork(), page_size)
