from pydantic import BaseModel

from models.country import CountryCard, CountryRecord
from models.weather import CurrentWeather


class PageView(BaseModel):
    items: list[CountryCard]
    search: str = ""
    current_page: int = 1
    total_pages: int = 1
    total_items: int = 0
    labels: list[int | str] = []
    has_previous: bool = False
    has_next: bool = False
    info: str = ""


class CountryDetail(BaseModel):
    country: CountryRecord
    display: dict[str, str]
    weather: CurrentWeather | None = None
    weather_message: str = ""
